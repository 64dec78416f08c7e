"""Product URL configuration.

Routes are bound explicitly, method by method, instead of through a DRF
router.  ``<int:pk>`` only matches digits, so a non-numeric id never
reaches the view and resolves to a 404.
"""

from __future__ import annotations

from django.urls import path

from modules.products.views import ProductViewSet

product_collection = ProductViewSet.as_view({"get": "list", "post": "create"})
product_detail = ProductViewSet.as_view(
    {"get": "retrieve", "put": "update", "delete": "destroy"}
)

urlpatterns = [
    path("products", product_collection, name="product-list"),
    path("products/<int:pk>", product_detail, name="product-detail"),
]
