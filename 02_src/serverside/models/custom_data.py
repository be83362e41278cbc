"""Business data attached to a pixel event."""

from dataclasses import dataclass, field
from typing import Any

from .formatting import describe, value_equals, value_hash


@dataclass(eq=False)
class Content:
    """A single product line referenced by an event."""

    product_id: str | None = None
    quantity: int | None = None
    item_price: float | None = None
    title: str | None = None
    description: str | None = None
    brand: str | None = None
    category: str | None = None
    delivery_category: str | None = None  # "in_store", "curbside", "home_delivery"

    def set_product_id(self, product_id: str | None) -> "Content":
        self.product_id = product_id
        return self

    def set_quantity(self, quantity: int | None) -> "Content":
        self.quantity = quantity
        return self

    def set_item_price(self, item_price: float | None) -> "Content":
        self.item_price = item_price
        return self

    def set_title(self, title: str | None) -> "Content":
        self.title = title
        return self

    def set_description(self, description: str | None) -> "Content":
        self.description = description
        return self

    def set_brand(self, brand: str | None) -> "Content":
        self.brand = brand
        return self

    def set_category(self, category: str | None) -> "Content":
        self.category = category
        return self

    def set_delivery_category(self, delivery_category: str | None) -> "Content":
        self.delivery_category = delivery_category
        return self

    def __eq__(self, other: object) -> bool:
        return value_equals(self, other)

    def __hash__(self) -> int:
        return value_hash(self)

    def __str__(self) -> str:
        return describe(self)


@dataclass(eq=False)
class CustomData:
    """
    Additional business data about an event.

    ``custom_properties`` holds free-form keys that are sent alongside the
    declared fields at the top level of the custom_data object.
    """

    value: float | None = None
    currency: str | None = None  # ISO 4217, lowercase
    content_name: str | None = None
    content_category: str | None = None
    content_ids: list[str] | None = None
    contents: list[Content] | None = None
    content_type: str | None = None  # "product" or "product_group"
    order_id: str | None = None
    predicted_ltv: float | None = None
    num_items: int | None = None
    status: str | None = None
    search_string: str | None = None
    delivery_category: str | None = None
    custom_properties: dict[str, Any] = field(default_factory=dict)

    def set_value(self, value: float | None) -> "CustomData":
        self.value = value
        return self

    def set_currency(self, currency: str | None) -> "CustomData":
        self.currency = currency
        return self

    def set_content_name(self, content_name: str | None) -> "CustomData":
        self.content_name = content_name
        return self

    def set_content_category(self, content_category: str | None) -> "CustomData":
        self.content_category = content_category
        return self

    def set_content_ids(self, content_ids: list[str] | None) -> "CustomData":
        self.content_ids = content_ids
        return self

    def set_contents(self, contents: list[Content] | None) -> "CustomData":
        self.contents = contents
        return self

    def set_content_type(self, content_type: str | None) -> "CustomData":
        self.content_type = content_type
        return self

    def set_order_id(self, order_id: str | None) -> "CustomData":
        self.order_id = order_id
        return self

    def set_predicted_ltv(self, predicted_ltv: float | None) -> "CustomData":
        self.predicted_ltv = predicted_ltv
        return self

    def set_num_items(self, num_items: int | None) -> "CustomData":
        self.num_items = num_items
        return self

    def set_status(self, status: str | None) -> "CustomData":
        self.status = status
        return self

    def set_search_string(self, search_string: str | None) -> "CustomData":
        self.search_string = search_string
        return self

    def set_delivery_category(self, delivery_category: str | None) -> "CustomData":
        self.delivery_category = delivery_category
        return self

    def add_custom_property(self, key: str, value: Any) -> "CustomData":
        """Add a free-form key sent next to the declared fields."""
        self.custom_properties[key] = value
        return self

    def __eq__(self, other: object) -> bool:
        return value_equals(self, other)

    def __hash__(self) -> int:
        return value_hash(self)

    def __str__(self) -> str:
        return describe(self)
