import base64
import io

from PIL import Image

INVOICE_4 = (
    "00020126580014BR.GOV.BCB.PIX0122jonnasfonini@gmail.com0210Invoice #4"
    "520400005303986540520.675802BR5913Jonnas Fonini6005Marau"
    "62410503***50300017BR.GOV.BCB.BRCODE01051.0.06304CF13"
)

PIX_BODY = {
    "key": "jonnasfonini@gmail.com",
    "name": "Jonnas Fonini",
    "city": "Marau",
    "amount": "20.67",
    "description": "Invoice #4",
}


class TestSystemRoutes:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_metrics_exposes_pixcode_counters(self, client, api_headers):
        client.post("/v1/pix", json=PIX_BODY, headers=api_headers)
        response = client.get("/metrics")
        assert response.status_code == 200
        assert "pixcode_encode_total" in response.text
        assert "pixcode_encode_duration_seconds_bucket" in response.text
        assert "pixcode_http_requests_total" in response.text


class TestAuth:
    def test_missing_api_key(self, client):
        response = client.post("/v1/pix", json=PIX_BODY)
        assert response.status_code == 422

    def test_wrong_api_key(self, client):
        response = client.post("/v1/pix", json=PIX_BODY, headers={"X-API-Key": "nope"})
        assert response.status_code == 401


class TestPixRoutes:
    def test_create_pix(self, client, api_headers):
        response = client.post("/v1/pix", json=PIX_BODY, headers=api_headers)
        assert response.status_code == 200
        assert response.json() == {"payload": INVOICE_4, "crc": "CF13"}

    def test_validation_error_message_is_verbatim(self, client, api_headers):
        body = {**PIX_BODY, "name": "Receiver long name to cause error"}
        response = client.post("/v1/pix", json=body, headers=api_headers)
        assert response.status_code == 422
        assert response.json() == {
            "code": "ERR_VALIDATION",
            "message": "name must be at least 25 characters long",
        }

    def test_empty_key_reported_first(self, client, api_headers):
        response = client.post("/v1/pix", json={}, headers=api_headers)
        assert response.status_code == 422
        assert response.json()["message"] == "key must not be empty"

    def test_large_amount(self, client, api_headers):
        response = client.post("/v1/pix", json={**PIX_BODY, "amount": "1e27"}, headers=api_headers)
        assert response.status_code == 200
        assert "54311" + "0" * 27 + ".00" in response.json()["payload"]

    def test_create_pix_qr(self, client, api_headers):
        response = client.post("/v1/pix/qr", json={**PIX_BODY, "size": 300}, headers=api_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["payload"] == INVOICE_4
        assert data["crc"] == "CF13"
        image = Image.open(io.BytesIO(base64.b64decode(data["qr_png_base64"])))
        assert image.size == (300, 300)


class TestQRCodeRoute:
    def test_png_response(self, client, api_headers):
        response = client.post("/v1/qrcode", json={"content": INVOICE_4}, headers=api_headers)
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert Image.open(io.BytesIO(response.content)).size == (256, 256)

    def test_png_decodes_to_content(self, client, api_headers, decode_qr):
        response = client.post("/v1/qrcode", json={"content": INVOICE_4, "size": 400}, headers=api_headers)
        assert decode_qr(response.content) == [INVOICE_4]

    def test_over_capacity(self, client, api_headers):
        response = client.post("/v1/qrcode", json={"content": "A" * 8000}, headers=api_headers)
        assert response.status_code == 413
        assert response.json()["code"] == "ERR_QR_CAPACITY"


class TestOpenAPI:
    def test_error_shape_documented(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        error_ref = {"$ref": "#/components/schemas/ErrorResponse"}
        assert paths["/v1/pix"]["post"]["responses"]["422"]["content"]["application/json"]["schema"] == error_ref
        assert paths["/v1/qrcode"]["post"]["responses"]["413"]["content"]["application/json"]["schema"] == error_ref
        assert "image/png" in paths["/v1/qrcode"]["post"]["responses"]["200"]["content"]
