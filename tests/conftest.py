"""
pytest配置文件，定义全局fixtures和测试配置
"""
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from bookstore.config import Settings
from bookstore.dependencies import ServiceContainer, build_services
from bookstore.main import create_app
from bookstore.repositories import DataStore


@pytest.fixture
def store() -> DataStore:
    """空的内存存储"""
    return DataStore()


@pytest.fixture
def services(store: DataStore) -> ServiceContainer:
    """基于空存储构造的全部服务"""
    return build_services(store)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(seed_sample_data=False, api_prefix="/api")


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """创建FastAPI测试客户端（无示例数据）"""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def seeded_client() -> Generator[TestClient, None, None]:
    """创建FastAPI测试客户端（加载示例数据）"""
    with TestClient(create_app(Settings(seed_sample_data=True))) as test_client:
        yield test_client


@pytest.fixture
def sample_author_data():
    """示例作者数据"""
    return {"name": "Ursula K. Le Guin", "biography": "American author of speculative fiction."}


@pytest.fixture
def sample_book_data():
    """示例书籍数据（author_id 需由测试填写）"""
    return {
        "title": "A Wizard of Earthsea",
        "isbn": "978-0-547-77374-3",
        "publication_year": 1968,
        "price": 10.0,
        "stock": 8,
    }


@pytest.fixture
def sample_customer_data():
    """示例客户数据"""
    return {"name": "Jane Roe", "email": "jane.roe@example.com", "password": "s3cret"}


def pytest_configure(config):
    """配置pytest标记"""
    config.addinivalue_line(
        "markers", "unit: 单元测试"
    )
    config.addinivalue_line(
        "markers", "integration: 集成测试"
    )
    config.addinivalue_line(
        "markers", "e2e: 端到端测试"
    )
