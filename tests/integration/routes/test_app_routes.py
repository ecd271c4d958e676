"""
应用级路由与错误处理集成测试
"""
import pytest
from fastapi.testclient import TestClient

from bookstore import main as main_module
from bookstore.config import Settings
from bookstore.main import create_app


@pytest.mark.integration
class TestAppRoutes:
    """应用级测试类"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_seeded_sample_data(self, seeded_client):
        """测试启动时加载示例数据"""
        assert [a["name"] for a in seeded_client.get("/api/authors").json()] == ["J.K. Rowling", "George Orwell"]
        assert len(seeded_client.get("/api/books").json()) == 3
        assert seeded_client.get("/api/customers/1/cart").json() == {"customerId": 1, "items": []}

    def test_apps_do_not_share_state(self, client):
        """测试每个应用实例使用独立存储"""
        client.post("/api/authors", json={"name": "Only here"})

        with TestClient(create_app(Settings(seed_sample_data=False))) as other:
            assert other.get("/api/authors").json() == []

    def test_custom_api_prefix(self):
        with TestClient(create_app(Settings(seed_sample_data=False, api_prefix="/v2"))) as other:
            assert other.get("/v2/books").status_code == 200
            assert other.get("/api/books").status_code == 404

    def test_unhandled_error_returns_500(self, test_settings):
        """测试未处理异常返回500及统一错误体"""
        app = create_app(test_settings)

        async def broken():
            raise RuntimeError("boom")

        app.add_api_route("/broken", broken)

        with TestClient(app, raise_server_exceptions=False) as broken_client:
            response = broken_client.get("/broken")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error", "message": "boom"}

    def test_factory_reads_environment(self, monkeypatch):
        """测试无参调用工厂（uvicorn factory模式）时从环境变量读取配置"""
        monkeypatch.setenv("BOOKSTORE_SEED_SAMPLE_DATA", "false")
        monkeypatch.setenv("BOOKSTORE_API_PREFIX", "/v3")

        with TestClient(create_app()) as factory_client:
            assert factory_client.get("/v3/authors").json() == []

    def test_import_builds_no_app(self):
        """测试导入模块不会创建应用实例"""
        assert not hasattr(main_module, "app")
