"""
POS Billing Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("items", views.items_view),
    path("cart", views.cart_view),
    path("cart/add", views.cart_add_view),
    path("cart/remove", views.cart_remove_view),
    path("cart/adjust", views.cart_adjust_view),
    path("cart/clear", views.cart_clear_view),
    path("customers", views.customers_view),
    path("checkout", views.checkout_view),
    path("transactions", views.transactions_view),
]
