"""Shared BDD fixtures and step definitions for the shopping domain."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then
from shopping.cart.cart import Cart
from shopping.cart.service import CartService

EMAIL = "crio-user@qkart.test"


@pytest.fixture()
def service():
    return CartService()


@pytest.fixture()
def catalogue():
    """Products stocked by Background steps, keyed by name."""
    return {}


@pytest.fixture()
def shopper():
    return {"user": None}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


def _stored_cart():
    return current_domain.repository_for(Cart).find_by_email(EMAIL)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the catalogue has "{name}" costing {cost:d}'))
def catalogue_has_product(catalogue, make_product, name, cost):
    catalogue[name] = make_product(name, float(cost))


@given(parsers.cfparse("a user with {amount:d} in their wallet and an address on file"))
def user_with_address(shopper, make_user, amount):
    shopper["user"] = make_user(email=EMAIL, wallet_money=float(amount))


@given(parsers.cfparse("a user with {amount:d} in their wallet and no address on file"))
def user_without_address(shopper, make_user, amount):
    shopper["user"] = make_user(email=EMAIL, wallet_money=float(amount), address=None)


@given(parsers.cfparse('the user has {qty:d} "{name}" in their cart'))
def user_has_product_in_cart(service, shopper, catalogue, qty, name):
    service.add_product_to_cart(shopper["user"], str(catalogue[name].id), qty)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the request is refused")
def request_refused(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_n_lines(count):
    assert len(_stored_cart().items) == count


@then(parsers.cfparse('the cart holds {qty:d} "{name}"'))
def cart_holds_quantity(catalogue, qty, name):
    item = _stored_cart().item_for(str(catalogue[name].id))
    assert item is not None
    assert item.quantity == qty
