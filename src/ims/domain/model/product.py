"""Product entity.

A product is a single catalog entry: identity, name, quantity on hand and
unit price.  Every assignment to a field is validated, whether it comes
from the constructor, a mutation method or plain attribute assignment, so
a Product can never hold an invalid value.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money

# Bounds keep quantity x price and the inventory total exact.
MAX_QUANTITY = 1_000_000_000
MAX_PRICE = Decimal("1000000000")
PRICE_STEP = Decimal("0.0001")  # at most four decimal places


@dataclass
class Product:
    """A product in the inventory.

    Invariants:
    - ``name`` is never blank
    - ``quantity`` is an int in ``0..MAX_QUANTITY``
    - ``price`` is Money in ``0..MAX_PRICE`` with at most four decimals
    - ``id`` is assigned once and never reassigned
    """

    id: int
    name: str
    quantity: int
    price: Money

    def __setattr__(self, attr: str, value: object) -> None:
        if attr == "id":
            if "id" in self.__dict__:
                raise AttributeError("Product id cannot be reassigned")
            _validate_id(value)
        elif attr == "name":
            value = _validated_name(value)
        elif attr == "quantity":
            _validate_quantity(value)
        elif attr == "price":
            _validate_price(value)
        super().__setattr__(attr, value)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        product_id: int,
        name: str,
        quantity: int,
        price: str | float | int | Decimal | Money,
    ) -> Product:
        """Build a product from raw input, coercing the price to Money."""
        return Product(
            id=product_id,
            name=name,
            quantity=quantity,
            price=coerce_price(price),
        )

    # --- Mutations ------------------------------------------------------------

    def update_stock(self, new_quantity: int) -> None:
        """Replace the quantity on hand."""
        self.quantity = new_quantity

    def update_price(self, new_price: str | float | int | Decimal | Money) -> None:
        """Replace the unit price."""
        self.price = coerce_price(new_price)

    def rename(self, new_name: str) -> None:
        self.name = new_name

    # --- Computed properties --------------------------------------------------

    @property
    def value(self) -> Money:
        """Stock value of this product (quantity x unit price)."""
        return self.price * self.quantity


def coerce_price(price: str | float | int | Decimal | Money) -> Money:
    """Turn raw input into a unit price, or raise ValidationError naming it."""
    if not isinstance(price, Money):
        try:
            price = Money.of(price)
        except ValidationError as exc:
            raise ValidationError(f"Invalid price: {exc}") from exc
    _validate_price(price)
    return price


def _validate_id(product_id: object) -> None:
    if not isinstance(product_id, int) or isinstance(product_id, bool) or product_id <= 0:
        raise ValidationError(f"Invalid product id: {product_id!r}")


def _validated_name(name: object) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Product name cannot be empty")
    return name.strip()


def _validate_quantity(quantity: object) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError(
            f"Invalid quantity: must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError(f"Invalid quantity: cannot be negative, got {quantity}")
    if quantity > MAX_QUANTITY:
        raise ValidationError(f"Invalid quantity: cannot exceed {MAX_QUANTITY:,}")


def _validate_price(price: object) -> None:
    if not isinstance(price, Money):
        raise ValidationError(
            f"Invalid price: expected Money, got {type(price).__name__}"
        )
    if price.amount > MAX_PRICE:
        raise ValidationError(f"Invalid price: cannot exceed {MAX_PRICE:,}")
    if price.amount.quantize(PRICE_STEP) != price.amount:
        raise ValidationError("Invalid price: at most four decimal places")
