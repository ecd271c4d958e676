"""
测试fixtures包
"""
from .sample_data import (
    SAMPLE_AUTHORS,
    SAMPLE_BOOKS,
    SAMPLE_CUSTOMERS,
    api_book_payload,
)

__all__ = [
    "SAMPLE_AUTHORS",
    "SAMPLE_BOOKS",
    "SAMPLE_CUSTOMERS",
    "api_book_payload",
]
