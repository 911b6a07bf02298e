"""
URL configuration for storefetch project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""

from django.urls import path

import products.views

urlpatterns = [
    path("api/products/fetch", products.views.fetch_product, name="product-fetch"),
    path("fetchShopifyProduct", products.views.fetch_product, name="fetch-shopify-product"),
]
