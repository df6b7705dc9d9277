"""HTTP tests for the catalog endpoints."""


class TestCreateProduct:

    def test_created(self, client):
        response = client.post(
            "/product",
            json={"name": "Widget", "description": "Small", "price": 9.99, "stock": 5},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["id"]
        assert data["name"] == "Widget"
        assert data["description"] == "Small"
        assert data["price"] == 9.99
        assert data["stock"] == 5

    def test_description_defaults_to_empty(self, client):
        response = client.post("/product", json={"name": "Widget", "price": 1, "stock": 0})
        assert response.status_code == 201
        assert response.json()["data"]["description"] == ""

    def test_missing_fields(self, client):
        response = client.post("/product", json={"name": "Widget"})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "BAD_REQUEST"
        assert error["message"].startswith("Validation failed: ")
        assert "price" in error["message"]
        assert "stock" in error["message"]

    def test_empty_name(self, client):
        response = client.post("/product", json={"name": "", "price": 1, "stock": 1})
        assert response.status_code == 400

    def test_blank_name_rejected_by_domain(self, client):
        response = client.post("/product", json={"name": "   ", "price": 1, "stock": 1})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Product name cannot be empty"

    def test_numbers_as_strings_rejected(self, client):
        response = client.post(
            "/product", json={"name": "Widget", "price": "9.99", "stock": "5"}
        )
        assert response.status_code == 400

    def test_invalid_json(self, client):
        response = client.post(
            "/product",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid JSON in request body"

    def test_negative_price(self, client):
        response = client.post("/product", json={"name": "Widget", "price": -1, "stock": 1})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Money amount cannot be negative"

    def test_negative_stock(self, client):
        response = client.post("/product", json={"name": "Widget", "price": 1, "stock": -1})
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Stock quantity cannot be negative"

    def test_integral_float_stock(self, client):
        response = client.post(
            "/product", json={"name": "Widget", "price": 1, "stock": 5.0}
        )
        assert response.status_code == 201
        assert response.json()["data"]["stock"] == 5

    def test_fractional_stock(self, client):
        response = client.post(
            "/product", json={"name": "Widget", "price": 1, "stock": 5.5}
        )
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Stock quantity must be an integer"


class TestReadProducts:

    def test_empty_list(self, client):
        response = client.get("/product/all")
        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}

    def test_list_in_creation_order(self, client, make_product):
        make_product("A")
        make_product("B")
        names = [p["name"] for p in client.get("/product/all").json()["data"]]
        assert names == ["A", "B"]

    def test_get_one(self, client, make_product):
        created = make_product()
        response = client.get(f"/product/{created['id']}")
        assert response.status_code == 200
        assert response.json()["data"] == created

    def test_get_missing(self, client):
        response = client.get("/product/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": {"message": "Product not found", "code": "NOT_FOUND"},
        }

    def test_get_malformed_id(self, client):
        response = client.get("/product/bad$id")
        assert response.status_code == 400


class TestUpdateProduct:

    def test_all_fields(self, client, make_product):
        created = make_product()
        response = client.put(
            f"/product/{created['id']}",
            json={"name": "Gizmo", "description": "New", "price": 20, "stock": 2},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data == {
            "id": created["id"],
            "name": "Gizmo",
            "description": "New",
            "price": 20.0,
            "stock": 2,
        }

    def test_partial(self, client, make_product):
        created = make_product(description="Keep me")
        response = client.put(f"/product/{created['id']}", json={"stock": 7})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["stock"] == 7
        assert data["name"] == "Widget"
        assert data["description"] == "Keep me"

    def test_integral_float_stock(self, client, make_product):
        created = make_product()
        response = client.put(f"/product/{created['id']}", json={"stock": 7.0})
        assert response.status_code == 200
        assert response.json()["data"]["stock"] == 7

    def test_missing(self, client):
        response = client.put("/product/nope", json={"name": "X"})
        assert response.status_code == 404

    def test_no_fields(self, client, make_product):
        created = make_product()
        response = client.put(f"/product/{created['id']}", json={})
        assert response.status_code == 400
        assert "At least one field" in response.json()["error"]["message"]

    def test_empty_name(self, client, make_product):
        created = make_product()
        response = client.put(f"/product/{created['id']}", json={"name": ""})
        assert response.status_code == 400


class TestDeleteProduct:

    def test_deleted(self, client, make_product):
        created = make_product()
        response = client.delete(f"/product/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/product/{created['id']}").status_code == 404

    def test_missing(self, client):
        response = client.delete("/product/nope")
        assert response.status_code == 404


def test_crud_workflow(client):
    created = client.post(
        "/product", json={"name": "Lamp", "description": "Desk", "price": 30, "stock": 3}
    ).json()["data"]
    product_url = f"/product/{created['id']}"

    assert client.get(product_url).json()["data"]["name"] == "Lamp"
    client.put(product_url, json={"price": 25.5})
    assert client.get(product_url).json()["data"]["price"] == 25.5
    assert client.delete(product_url).status_code == 204
    assert client.get("/product/all").json()["data"] == []
