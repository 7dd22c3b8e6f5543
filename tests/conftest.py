"""Pytest configuration and fixtures for record-cache tests."""

import pytest
from datetime import datetime, timezone

from sample_records import Apple


@pytest.fixture
def sample_apple():
    """Single apple with every attribute set."""
    return Apple(
        id=1,
        name="Green Apple",
        price=0.49,
        store_code="42",
        stock=7,
        updated_at=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
        properties={"color": "green", "organic": True},
        lock_version=3,
    )


@pytest.fixture
def apples():
    """Apples covering case, accents, equal prices and null timestamps."""
    return [
        Apple(id=1, name="Green Apple", price=0.49, store_code="42",
              updated_at=datetime(2024, 1, 3, tzinfo=timezone.utc)),
        Apple(id=2, name="RED APPLE", price=0.59, store_code="7",
              updated_at=datetime(2024, 1, 1, tzinfo=timezone.utc)),
        Apple(id=3, name="Élan", price=0.69, store_code="x1",
              updated_at=None),
        Apple(id=4, name="braeburn", price=0.59, store_code="42",
              updated_at=datetime(2024, 1, 2, tzinfo=timezone.utc)),
    ]
