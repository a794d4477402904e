"""Shared fixtures for wayfarer tests."""

import pytest

from wayfarer.messages import MessageCatalog
from wayfarer.navigation import NavigationModel


@pytest.fixture
def messages():
    """Catalog with short, predictable templates."""
    return MessageCatalog({
        "Back": "back!",
        "Null": "null: {}",
        "NotInFav": "missing: {}",
        "MalformedURL": "bad: {}",
    })


@pytest.fixture
def model(messages):
    """Empty navigation model."""
    return NavigationModel(messages)


@pytest.fixture
def visited(model):
    """Model that has visited three pages and sits on the last one."""
    for url in ("http://a.com", "http://b.com", "http://c.com"):
        model.navigate_to(url)
    return model
