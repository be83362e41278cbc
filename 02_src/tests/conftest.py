"""Pytest configuration and fixtures."""

import logging
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def user_data():
    """Create UserData with a few identifying signals."""
    from serverside.models import UserData

    return UserData(
        email="309a0a5c3e211326ae75ca18196d301a9bdbd1a882a4d2569511033da23f0abd",
        client_ip_address="203.0.113.7",
        client_user_agent="Mozilla/5.0",
        fbp="fb.1.1700000000.1234567890",
    )


@pytest.fixture
def custom_data():
    """Create CustomData for a two-item purchase."""
    from serverside.models import Content, CustomData

    return CustomData(
        value=123.45,
        currency="usd",
        content_ids=["sku-1", "sku-2"],
        contents=[
            Content(product_id="sku-1", quantity=1, item_price=100.0),
            Content(product_id="sku-2", quantity=2, item_price=11.725),
        ],
        content_type="product",
        order_id="order-42",
    )


@pytest.fixture
def purchase_event(user_data, custom_data):
    """Create a fully populated Purchase event."""
    from serverside.models import Event

    return (
        Event()
        .set_event_name("Purchase")
        .set_event_time(1700000000)
        .set_event_source_url("https://shop.example.com/checkout")
        .set_opt_out(False)
        .set_event_id("abc-123")
        .set_user_data(user_data)
        .set_custom_data(custom_data)
    )


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level changed by setup_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
