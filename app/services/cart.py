from contextlib import contextmanager
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import InternalError, InvalidRequestError, NotFoundError
from app.core.logging import get_logger, sanitize_for_logging
from app.models.cart import Cart
from app.models.user import User
from app.repositories import CartRepository, ProductRepository, UserRepository

logger = get_logger(__name__)

NO_CART = "User does not have a cart"
NO_CART_USE_POST = "User does not have a cart. Use POST to create cart and add a product"
PRODUCT_NOT_IN_DB = "Product doesn't exist in database"
PRODUCT_ALREADY_IN_CART = "Product already in cart. Use the cart sidebar to update or remove product from cart"
PRODUCT_NOT_IN_CART = "Product not in cart"
CART_EMPTY = "User cart is empty"
ADDRESS_NOT_SET = "Default address is not set"
INSUFFICIENT_BALANCE = "Insufficient balance"


class CartService:
    """
    Cart mutation and checkout for a single user.

    The cart keeps a value copy of each product taken when the line is added,
    so later catalog price changes never touch an existing line.
    """

    def __init__(self, carts: CartRepository, products: ProductRepository, users: UserRepository):
        self.carts = carts
        self.products = products
        self.users = users

    def get_cart_by_user(self, user: User) -> Cart:
        cart = self.carts.find_by_email(user.email)
        if not cart:
            raise NotFoundError(NO_CART)
        return cart

    def add_product_to_cart(self, user: User, product_id: int, quantity: int) -> Cart:
        product = self.products.find_by_id(product_id)
        if not product:
            raise InvalidRequestError(PRODUCT_NOT_IN_DB)

        line = {"product": product.to_snapshot(), "quantity": quantity}

        cart = self.carts.find_by_email(user.email)
        if not cart:
            with _store_errors("create cart", user.email):
                cart = self.carts.create(user.email, [line])
            logger.info("Created cart for %s with product %s", sanitize_for_logging(user.email), product_id)
            return cart

        if cart.find_item_index(product_id) is not None:
            raise InvalidRequestError(PRODUCT_ALREADY_IN_CART)

        cart.cart_items = [*cart.cart_items, line]
        with _store_errors("add to cart", user.email):
            self.carts.save(cart)
        logger.info("Added product %s (qty %s) to cart of %s", product_id, quantity, sanitize_for_logging(user.email))
        return cart

    def update_product_in_cart(self, user: User, product_id: int, quantity: int) -> Cart:
        cart = self.carts.find_by_email(user.email)
        if not cart:
            raise InvalidRequestError(NO_CART_USE_POST)

        if not self.products.find_by_id(product_id):
            raise InvalidRequestError(PRODUCT_NOT_IN_DB)

        idx = cart.find_item_index(product_id)
        if idx is None:
            raise InvalidRequestError(PRODUCT_NOT_IN_CART)

        items = list(cart.cart_items)
        items[idx] = {**items[idx], "quantity": quantity}
        cart.cart_items = items
        with _store_errors("update cart", user.email):
            self.carts.save(cart)
        logger.info("Set product %s to qty %s in cart of %s", product_id, quantity, sanitize_for_logging(user.email))
        return cart

    def delete_product_from_cart(self, user: User, product_id: int) -> None:
        cart = self.carts.find_by_email(user.email)
        if not cart:
            raise InvalidRequestError(NO_CART_USE_POST)

        idx = cart.find_item_index(product_id)
        if idx is None:
            raise InvalidRequestError(PRODUCT_NOT_IN_CART)

        cart.cart_items = [item for i, item in enumerate(cart.cart_items) if i != idx]
        with _store_errors("remove from cart", user.email):
            self.carts.save(cart)
        logger.info("Removed product %s from cart of %s", product_id, sanitize_for_logging(user.email))

    def checkout(self, user: User) -> None:
        """
        Charge the cart total to the user's wallet and empty the cart.

        The wallet debit and the cart clear are committed together. The
        balance is not compared against the total, so it may go negative.
        """
        cart = self.carts.find_by_email(user.email)
        if not cart:
            raise NotFoundError(NO_CART)

        if not cart.cart_items:
            raise InvalidRequestError(CART_EMPTY)

        if not user.has_non_default_address():
            raise InvalidRequestError(ADDRESS_NOT_SET)

        # Zero counts as unset
        if user.wallet_money is None or user.wallet_money == 0:
            raise InvalidRequestError(INSUFFICIENT_BALANCE)

        total = cart_total(cart)

        user.wallet_money -= total
        cart.cart_items = []
        with _store_errors("checkout", user.email):
            self.users.save(user, commit=False)
            self.carts.save(cart, commit=False)
            self.carts.commit()
        self.users.session.refresh(user)
        self.carts.session.refresh(cart)

        logger.info("Checkout for %s: charged %s, wallet now %s",
                    sanitize_for_logging(user.email), total, user.wallet_money)


@contextmanager
def _store_errors(action: str, email: str):
    """Turn a database failure into an InternalError for the caller."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Failed to %s for %s", action, sanitize_for_logging(email), exc_info=True)
        raise InternalError() from exc


def cart_total(cart: Cart) -> float:
    """Sum of snapshot cost times quantity over the cart's lines."""
    return sum(item["product"]["cost"] * item["quantity"] for item in cart.cart_items)
