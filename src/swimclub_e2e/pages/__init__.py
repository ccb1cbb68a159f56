"""
Page Object Model classes for the HNT Swim Club storefront.

Each page holds an Interactable and exposes the named operations the
scenarios are written against.
"""

from .interactable import Banner, ConfirmationSurface, Interactable
from .login_page import LoginPage
from .register_page import RegisterPage
from .home_page import HomePage
from .product_detail_page import ProductDetailPage
from .cart_page import CartPage, PaymentMethod
from .orders_page import OrdersPage, is_cancellable_status, is_shipped_status
from .admin_players_page import AdminPlayersPage

__all__ = [
    "Banner",
    "ConfirmationSurface",
    "Interactable",
    "LoginPage",
    "RegisterPage",
    "HomePage",
    "ProductDetailPage",
    "CartPage",
    "PaymentMethod",
    "OrdersPage",
    "is_cancellable_status",
    "is_shipped_status",
    "AdminPlayersPage",
]
