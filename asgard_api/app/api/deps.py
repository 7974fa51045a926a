"""
FastAPI dependencies resolving the shared service instances.

``create_app`` stores one service per resource on ``app.state``; every
request reuses the same instance.
"""

from fastapi import Request

from ..services import OrderService, ProductService, UserService


def get_user_service(request: Request) -> UserService:
    return request.app.state.users


def get_product_service(request: Request) -> ProductService:
    return request.app.state.products


def get_order_service(request: Request) -> OrderService:
    return request.app.state.orders
