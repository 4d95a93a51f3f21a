"""Admin JSON API: listing, detail, creation, discounts."""

from tests.conftest import SHOP

HEADERS = {"X-Shopify-Shop-Domain": SHOP}
SELECTION = "gid://shopify/Product/1|gid://shopify/ProductVariant/555|shampoo"


class TestQRCodeAdmin:
    def test_list_requires_shop_header(self, client):
        response = client.get("/app/qrcodes")

        assert response.status_code == 400

    def test_list_empty(self, client):
        response = client.get("/app/qrcodes", headers=HEADERS)

        assert response.status_code == 200
        assert response.json() == []

    def test_list_enriched(self, client, make_qr_code):
        make_qr_code(id=1)
        make_qr_code(id=2, product_id="gid://shopify/Product/404")

        body = client.get("/app/qrcodes", headers=HEADERS).json()

        assert [row["id"] for row in body] == [2, 1]
        assert body[0]["product_title"] is None
        assert body[1]["product_title"] == "Shampoo"
        assert body[1]["price"] == "12.50"
        assert body[1]["qr_image"].startswith("data:image/png;base64,")

    def test_detail(self, client, make_qr_code):
        qr_code = make_qr_code()

        response = client.get(f"/app/qrcodes/{qr_code.id}", headers=HEADERS)

        assert response.status_code == 200
        assert response.json()["product_image"] == "https://cdn.shopify.com/shampoo.png"

    def test_detail_of_other_shop_is_404(self, client, make_qr_code):
        qr_code = make_qr_code(shop="b.myshopify.com")

        response = client.get(f"/app/qrcodes/{qr_code.id}", headers=HEADERS)

        assert response.status_code == 404

    def test_create(self, client):
        response = client.post(
            "/app/qrcodes",
            json={"title": "Shampoo 250ml", "product_variant": SELECTION},
            headers=HEADERS,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["shop"] == SHOP
        assert body["title"] == "Shampoo 250ml"
        assert body["product_variant_id"] == "gid://shopify/ProductVariant/555"
        assert body["destination"] == "checkout"
        assert body["scans"] == 0

    def test_create_then_scan(self, client):
        created = client.post("/app/qrcodes", json={"product_variant": SELECTION}, headers=HEADERS).json()

        response = client.get(f"/qrcodes/{created['id']}/scan", follow_redirects=False)

        assert response.headers["location"] == "https://a.myshopify.com/cart/555:1"
        detail = client.get(f"/app/qrcodes/{created['id']}", headers=HEADERS).json()
        assert detail["scans"] == 1

    def test_create_without_selection(self, client):
        response = client.post("/app/qrcodes", json={"title": "x"}, headers=HEADERS)

        assert response.status_code == 400


class TestDiscountAdmin:
    def test_create_and_list(self, client):
        response = client.post(
            "/app/discounts",
            json={"title": "Spring", "percentage": "15", "product_id": "gid://shopify/Product/1"},
            headers=HEADERS,
        )
        assert response.status_code == 201
        assert response.json()["percentage"] == 15.0

        listed = client.get("/app/discounts", headers=HEADERS).json()
        assert [d["title"] for d in listed] == ["Spring"]

    def test_other_shop_sees_nothing(self, client):
        client.post(
            "/app/discounts",
            json={"title": "Spring", "percentage": 10, "product_id": "gid://shopify/Product/1"},
            headers=HEADERS,
        )

        listed = client.get("/app/discounts", headers={"X-Shopify-Shop-Domain": "b.myshopify.com"}).json()

        assert listed == []

    def test_non_numeric_percentage(self, client):
        response = client.post(
            "/app/discounts",
            json={"title": "Spring", "percentage": "lots", "product_id": "gid://shopify/Product/1"},
            headers=HEADERS,
        )

        assert response.status_code == 400


class TestQRCodeDetailIds:
    def test_non_numeric_id_is_400(self, client):
        response = client.get("/app/qrcodes/abc", headers=HEADERS)

        assert response.status_code == 400

    def test_id_beyond_integer_column_is_404(self, client):
        response = client.get("/app/qrcodes/99999999999999999999", headers=HEADERS)

        assert response.status_code == 404
