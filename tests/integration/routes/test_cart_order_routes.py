"""
购物车与订单路由集成测试
"""
import pytest

from tests.fixtures.sample_data import SAMPLE_AUTHORS, SAMPLE_BOOKS, SAMPLE_CUSTOMERS, api_book_payload


@pytest.fixture
def shop(client):
    """创建作者、两本书（10.0元库存10，5.0元库存3）和一位客户"""
    author = client.post("/api/authors", json=SAMPLE_AUTHORS[0]).json()
    x = client.post("/api/books", json=api_book_payload(SAMPLE_BOOKS[0], author["id"])).json()
    y = client.post("/api/books", json=api_book_payload(SAMPLE_BOOKS[1], author["id"])).json()
    customer = client.post("/api/customers", json=SAMPLE_CUSTOMERS[0]).json()
    return {"x": x, "y": y, "customer": customer["id"]}


@pytest.mark.integration
class TestCartRoutes:
    """购物车路由集成测试类"""

    def test_get_empty_cart(self, client, shop):
        response = client.get(f"/api/customers/{shop['customer']}/cart")

        assert response.status_code == 200
        assert response.json() == {"customerId": shop["customer"], "items": []}

    def test_add_and_merge_items(self, client, shop):
        """测试添加条目并合并数量"""
        url = f"/api/customers/{shop['customer']}/cart/items"
        client.post(url, json={"bookId": shop["x"]["id"], "quantity": 2})
        response = client.post(url, json={"bookId": shop["x"]["id"], "quantity": 1})

        assert response.status_code == 200
        assert response.json()["items"] == [{"bookId": shop["x"]["id"], "quantity": 3}]

    def test_add_item_out_of_stock(self, client, shop):
        url = f"/api/customers/{shop['customer']}/cart/items"

        response = client.post(url, json={"bookId": shop["y"]["id"], "quantity": 4})

        assert response.status_code == 400
        assert response.json() == {
            "error": "Out Of Stock",
            "message": f"Book with ID {shop['y']['id']} has insufficient stock. Requested: 4, Available: 3",
        }

    def test_add_item_unknown_book_and_customer(self, client, shop):
        response = client.post(f"/api/customers/{shop['customer']}/cart/items", json={"bookId": 99, "quantity": 1})
        assert response.status_code == 404
        assert response.json()["error"] == "Book Not Found"

        response = client.post("/api/customers/99/cart/items", json={"bookId": shop["x"]["id"], "quantity": 1})
        assert response.status_code == 404
        assert response.json()["error"] == "Customer Not Found"

    @pytest.mark.parametrize("body, message_prefix", [
        ({"bookId": 1}, "quantity: "),
        ({"bookId": 1, "quantity": "many"}, "quantity: "),
        ({"quantity": 1}, "bookId: "),
    ])
    def test_add_item_malformed_body(self, client, shop, body, message_prefix):
        """测试请求体缺字段或类型错误返回400和统一错误体"""
        response = client.post(f"/api/customers/{shop['customer']}/cart/items", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid Input"
        assert response.json()["message"].startswith(message_prefix)
        assert client.get(f"/api/customers/{shop['customer']}/cart").json()["items"] == []

    def test_update_item_quantity_from_body(self, client, shop):
        """测试更新条目数量（数量取自请求体，书籍ID取自路径）"""
        base = f"/api/customers/{shop['customer']}/cart/items"
        client.post(base, json={"bookId": shop["x"]["id"], "quantity": 2})

        response = client.put(f"{base}/{shop['x']['id']}", json={"quantity": 6})
        assert response.status_code == 200
        assert response.json()["items"] == [{"bookId": shop["x"]["id"], "quantity": 6}]

        assert client.put(f"{base}/{shop['x']['id']}", json={"quantity": 0}).status_code == 400
        assert client.put(f"{base}/{shop['y']['id']}", json={"quantity": 1}).status_code == 400

    def test_remove_item(self, client, shop):
        base = f"/api/customers/{shop['customer']}/cart/items"
        client.post(base, json={"bookId": shop["x"]["id"], "quantity": 2})

        response = client.delete(f"{base}/{shop['x']['id']}")
        assert response.status_code == 200
        assert response.json()["items"] == []

        # 不存在的条目也返回200
        assert client.delete(f"{base}/12345").status_code == 200


@pytest.mark.integration
class TestOrderRoutes:
    """订单路由集成测试类"""

    def fill_cart(self, client, shop):
        base = f"/api/customers/{shop['customer']}/cart/items"
        client.post(base, json={"bookId": shop["x"]["id"], "quantity": 2})
        client.post(base, json={"bookId": shop["y"]["id"], "quantity": 1})

    def test_create_order(self, client, shop):
        """测试下单返回201及订单快照"""
        self.fill_cart(client, shop)

        response = client.post(f"/api/customers/{shop['customer']}/orders")

        assert response.status_code == 201
        order = response.json()
        assert order["id"] == 1
        assert order["customerId"] == shop["customer"]
        assert order["totalAmount"] == 25.0
        assert "orderDate" in order
        assert order["items"] == [
            {"bookId": shop["x"]["id"], "bookTitle": shop["x"]["title"], "quantity": 2, "price": 10.0, "totalPrice": 20.0},
            {"bookId": shop["y"]["id"], "bookTitle": shop["y"]["title"], "quantity": 1, "price": 5.0, "totalPrice": 5.0},
        ]
        assert client.get(f"/api/books/{shop['x']['id']}").json()["stock"] == 8
        assert client.get(f"/api/books/{shop['y']['id']}").json()["stock"] == 2
        assert client.get(f"/api/customers/{shop['customer']}/cart").json()["items"] == []

    def test_create_order_empty_cart(self, client, shop):
        response = client.post(f"/api/customers/{shop['customer']}/orders")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid Input", "message": "Cannot create an order with an empty cart."}

    def test_list_and_get_orders(self, client, shop):
        self.fill_cart(client, shop)
        created = client.post(f"/api/customers/{shop['customer']}/orders").json()

        listed = client.get(f"/api/customers/{shop['customer']}/orders")
        assert listed.status_code == 200
        assert listed.json() == [created]

        fetched = client.get(f"/api/customers/{shop['customer']}/orders/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == created

    def test_order_of_other_customer(self, client, shop):
        """测试其他客户的订单返回404"""
        self.fill_cart(client, shop)
        created = client.post(f"/api/customers/{shop['customer']}/orders").json()
        other = client.post("/api/customers", json=SAMPLE_CUSTOMERS[1]).json()

        response = client.get(f"/api/customers/{other['id']}/orders/{created['id']}")

        assert response.status_code == 404
        assert response.json() == {"error": "Order Not Found", "message": f"Order with ID {created['id']} not found."}
