"""
Tests for the shopping cart aggregate (app.services.cart)

These call the service functions directly with an explicit AuthContext,
so they cover the aggregate rules without the HTTP layer.
"""
import pytest
from sqlalchemy.exc import IntegrityError

from app.core.errors import NotFoundError, ValidationFailure
from app.core.security import AuthContext
from app.dao import shopping_cart as shopping_cart_dao
from app.models.cart import ShoppingCartItem
from app.models.product import Product
from app.models.user import RoleEnum
from app.services import cart as cart_service


def quantities(cart) -> dict:
    return {product_id: line.quantity for product_id, line in cart.items.items()}


class TestGetCart:
    """A user without line items always gets an empty cart, never an error."""

    def test_empty_cart_for_user_without_items(self, db, customer_ctx):
        cart = cart_service.get_cart(db, customer_ctx)

        assert cart.items == {}
        assert cart.total == 0.0

    def test_empty_cart_for_unknown_user_id(self, db):
        stranger = AuthContext(user_id=999, username="ghost", role=RoleEnum.user)

        cart = cart_service.get_cart(db, stranger)

        assert cart.items == {}

    def test_line_total_and_total_are_derived_from_price(self, db, customer_ctx, catalog):
        cart_service.add_to_cart(db, customer_ctx, 11)
        cart_service.add_to_cart(db, customer_ctx, 11)
        cart_service.add_to_cart(db, customer_ctx, 12)

        cart = cart_service.get_cart(db, customer_ctx)

        # 2 * 79.50 = 159.00, 1 * 19.99 = 19.99
        assert cart.items[11].line_total == 159.00
        assert cart.items[12].line_total == 19.99
        assert cart.total == 178.99
        assert cart.items[11].product.name == "Headphones"


class TestAddToCart:

    def test_first_add_creates_line_with_quantity_one(self, db, customer_ctx, catalog):
        cart = cart_service.add_to_cart(db, customer_ctx, 10)

        assert quantities(cart) == {10: 1}

    def test_second_add_increments_quantity(self, db, customer_ctx, catalog):
        cart_service.add_to_cart(db, customer_ctx, 10)
        cart = cart_service.add_to_cart(db, customer_ctx, 10)

        assert quantities(cart) == {10: 2}

    def test_unknown_product_raises_not_found(self, db, customer_ctx, catalog):
        with pytest.raises(NotFoundError):
            cart_service.add_to_cart(db, customer_ctx, 404)

        assert cart_service.get_cart(db, customer_ctx).items == {}

    def test_carts_of_different_users_are_isolated(self, db, customer_ctx, admin, catalog):
        admin_ctx = AuthContext(user_id=admin.id, username=admin.username, role=admin.role)

        cart_service.add_to_cart(db, customer_ctx, 10)
        cart_service.add_to_cart(db, admin_ctx, 12)

        assert quantities(cart_service.get_cart(db, customer_ctx)) == {10: 1}
        assert quantities(cart_service.get_cart(db, admin_ctx)) == {12: 1}


class TestUpdateQuantity:

    def test_sets_quantity_of_existing_line(self, db, customer_ctx, catalog):
        cart_service.add_to_cart(db, customer_ctx, 10)

        cart = cart_service.update_quantity(db, customer_ctx, 10, 5)

        assert quantities(cart) == {10: 5}

    def test_missing_line_raises_not_found_and_leaves_cart_unchanged(self, db, customer_ctx, catalog):
        cart_service.add_to_cart(db, customer_ctx, 10)
        before = cart_service.get_cart(db, customer_ctx)

        with pytest.raises(NotFoundError):
            cart_service.update_quantity(db, customer_ctx, 11, 3)

        assert cart_service.get_cart(db, customer_ctx) == before

    def test_zero_quantity_removes_line(self, db, customer_ctx, catalog):
        cart_service.add_to_cart(db, customer_ctx, 10)
        cart_service.add_to_cart(db, customer_ctx, 12)

        cart = cart_service.update_quantity(db, customer_ctx, 10, 0)

        assert quantities(cart) == {12: 1}

    def test_zero_quantity_for_missing_line_raises_not_found(self, db, customer_ctx, catalog):
        with pytest.raises(NotFoundError):
            cart_service.update_quantity(db, customer_ctx, 10, 0)

    def test_negative_quantity_is_rejected(self, db, customer_ctx, catalog):
        cart_service.add_to_cart(db, customer_ctx, 10)

        with pytest.raises(ValidationFailure):
            cart_service.update_quantity(db, customer_ctx, 10, -1)

        assert quantities(cart_service.get_cart(db, customer_ctx)) == {10: 1}

    def test_update_to_implied_quantity_is_idempotent(self, db, customer_ctx, catalog):
        cart_service.add_to_cart(db, customer_ctx, 10)
        before = cart_service.get_cart(db, customer_ctx)

        after = cart_service.update_quantity(db, customer_ctx, 10, 1)

        assert after == before


class TestClearCart:

    def test_clear_removes_all_lines(self, db, customer_ctx, catalog):
        cart_service.add_to_cart(db, customer_ctx, 10)
        cart_service.add_to_cart(db, customer_ctx, 11)

        cart_service.clear_cart(db, customer_ctx)

        assert cart_service.get_cart(db, customer_ctx).items == {}

    def test_clear_empty_cart_succeeds(self, db, customer_ctx):
        cart = cart_service.clear_cart(db, customer_ctx)

        assert cart.items == {}
        assert cart.total == 0.0

    def test_clear_does_not_touch_other_users(self, db, customer_ctx, admin, catalog):
        admin_ctx = AuthContext(user_id=admin.id, username=admin.username, role=admin.role)
        cart_service.add_to_cart(db, admin_ctx, 11)
        cart_service.add_to_cart(db, customer_ctx, 10)

        cart_service.clear_cart(db, customer_ctx)

        assert quantities(cart_service.get_cart(db, admin_ctx)) == {11: 1}


def test_full_cart_scenario(db, customer_ctx, catalog):
    """empty -> add -> add -> update(5) -> clear"""
    assert quantities(cart_service.get_cart(db, customer_ctx)) == {}

    assert quantities(cart_service.add_to_cart(db, customer_ctx, 10)) == {10: 1}
    assert quantities(cart_service.add_to_cart(db, customer_ctx, 10)) == {10: 2}
    assert quantities(cart_service.update_quantity(db, customer_ctx, 10, 5)) == {10: 5}

    cart_service.clear_cart(db, customer_ctx)
    assert quantities(cart_service.get_cart(db, customer_ctx)) == {}


class TestConcurrentAdd:
    """
    Another request commits between our UPDATE (no row yet) and our INSERT.
    The insert is simulated to fail the way the database would report it.
    """

    @staticmethod
    def integrity_error():
        return IntegrityError("INSERT INTO shopping_cart", {}, Exception("constraint failed"))

    def test_unique_violation_is_retried_as_increment(self, db, session_factory, customer_ctx, catalog, monkeypatch):
        def insert_raced(session, user_id, product_id, quantity=1):
            other = session_factory()
            other.add(ShoppingCartItem(user_id=user_id, product_id=product_id, quantity=1))
            other.commit()
            other.close()
            raise self.integrity_error()

        monkeypatch.setattr(shopping_cart_dao, "insert", insert_raced)

        cart = cart_service.add_to_cart(db, customer_ctx, 10)

        # 1 from the other request + 1 from ours
        assert quantities(cart) == {10: 2}

    def test_product_deleted_before_insert_raises_not_found(
        self, db, session_factory, customer_ctx, catalog, monkeypatch
    ):
        def insert_after_delete(session, user_id, product_id, quantity=1):
            other = session_factory()
            other.query(Product).filter(Product.id == product_id).delete()
            other.commit()
            other.close()
            raise self.integrity_error()

        monkeypatch.setattr(shopping_cart_dao, "insert", insert_after_delete)

        with pytest.raises(NotFoundError):
            cart_service.add_to_cart(db, customer_ctx, 10)

        assert cart_service.get_cart(db, customer_ctx).items == {}
