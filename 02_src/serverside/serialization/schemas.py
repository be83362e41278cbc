"""Pydantic schemas mirroring the conversions API wire format."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, model_serializer


class ContentPayload(BaseModel):
    """Wire form of a Content entry."""

    model_config = ConfigDict(extra="ignore")

    product_id: str | None = Field(default=None, serialization_alias="id")
    quantity: int | None = None
    item_price: float | None = None
    title: str | None = None
    description: str | None = None
    brand: str | None = None
    category: str | None = None
    delivery_category: str | None = None


class UserDataPayload(BaseModel):
    """Wire form of UserData. Short keys follow the API's naming."""

    model_config = ConfigDict(extra="ignore")

    email: str | None = Field(default=None, serialization_alias="em")
    phone: str | None = Field(default=None, serialization_alias="ph")
    gender: str | None = Field(default=None, serialization_alias="ge")
    date_of_birth: str | None = Field(default=None, serialization_alias="db")
    last_name: str | None = Field(default=None, serialization_alias="ln")
    first_name: str | None = Field(default=None, serialization_alias="fn")
    city: str | None = Field(default=None, serialization_alias="ct")
    state: str | None = Field(default=None, serialization_alias="st")
    zip_code: str | None = Field(default=None, serialization_alias="zp")
    country_code: str | None = Field(default=None, serialization_alias="country")
    external_id: str | None = None
    client_ip_address: str | None = None
    client_user_agent: str | None = None
    fbc: str | None = None
    fbp: str | None = None
    subscription_id: str | None = None
    fb_login_id: str | None = None
    lead_id: str | None = None


class CustomDataPayload(BaseModel):
    """Wire form of CustomData; custom properties are flattened into it."""

    model_config = ConfigDict(extra="ignore")

    value: float | None = None
    currency: str | None = None
    content_name: str | None = None
    content_category: str | None = None
    content_ids: list[str] | None = None
    contents: list[ContentPayload] | None = None
    content_type: str | None = None
    order_id: str | None = None
    predicted_ltv: float | None = None
    num_items: int | None = None
    status: str | None = None
    search_string: str | None = None
    delivery_category: str | None = None
    custom_properties: dict[str, Any] = Field(default_factory=dict, exclude=True)

    @model_serializer(mode="wrap")
    def _flatten_custom_properties(self, handler) -> dict[str, Any]:
        data = handler(self)
        extra = {k: v for k, v in self.custom_properties.items() if v is not None}
        # Declared fields win over custom keys of the same name.
        return {**extra, **data}


class EventPayload(BaseModel):
    """Wire form of a single Event."""

    model_config = ConfigDict(extra="ignore")

    event_name: str | None = None
    event_time: StrictInt | None = None
    event_source_url: str | None = None
    opt_out: StrictBool | None = None
    event_id: str | None = None
    user_data: UserDataPayload | None = None
    custom_data: CustomDataPayload | None = None


class EventsPayload(BaseModel):
    """Top-level body carrying a list of events under "data"."""

    data: list[EventPayload] = Field(default_factory=list)
