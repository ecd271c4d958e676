"""
书店目录与订单API
"""
__version__ = "1.0.0"
