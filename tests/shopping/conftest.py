"""Shared fixtures for the shopping domain tests."""

import pytest
from protean import current_domain
from shopping.product.product import Product
from shopping.user.user import User


def register_user(email="crio-user@qkart.test", wallet_money=500.0, address="221B Baker Street, London"):
    user = User.register(
        name="crio-user",
        email=email,
        password="learnbydoing1",
        wallet_money=wallet_money,
        address=address,
    )
    current_domain.repository_for(User).add(user)
    return user


def stock_product(name, cost, category="Electronics"):
    product = Product.create(name=name, cost=cost, category=category, rating=4, image="https://cdn.qkart.test/p.png")
    current_domain.repository_for(Product).add(product)
    return product


def reload_user(email="crio-user@qkart.test"):
    return current_domain.repository_for(User).find_by_email(email)


@pytest.fixture()
def user():
    return register_user()


@pytest.fixture()
def user_without_address():
    return register_user(email="no-address@qkart.test", address=None)


@pytest.fixture()
def headphones():
    return stock_product("Wireless Headphones", 100.0)


@pytest.fixture()
def speaker():
    return stock_product("Bluetooth Speaker", 200.0)


@pytest.fixture()
def monitor():
    return stock_product("27 inch Monitor", 500.0)


@pytest.fixture()
def make_user():
    return register_user


@pytest.fixture()
def make_product():
    return stock_product


@pytest.fixture()
def fetch_user():
    return reload_user
