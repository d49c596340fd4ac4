import pytest
from tiny_reports.features.reports.schemas import Item


@pytest.fixture
def item_factory():
    """A factory to create items with sequential ids."""
    counter = {"next_id": 1}

    def _factory(value, name: str = None, item_id=None):
        if item_id is None:
            item_id = counter["next_id"]
            counter["next_id"] += 1
        return Item(id=item_id, name=name or f"Item {item_id}", value=value)

    return _factory


@pytest.fixture
def mixed_items(item_factory):
    """Items on both sides of the visibility limit and the priority threshold."""
    return [
        item_factory(100),
        item_factory(500),
        item_factory(600),
        item_factory(1000),
        item_factory(1500),
    ]
