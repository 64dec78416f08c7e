import pytest

pytestmark = pytest.mark.integration


class TestOpenApiSchema:
    def test_schema_lists_product_routes(self, client):
        response = client.get("/api/schema")
        assert response.status_code == 200
        body = response.content.decode()
        assert "/api/products" in body
        assert "Product Catalog API" in body
