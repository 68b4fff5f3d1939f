"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest

from templatebind.bindings import BindingStore


@pytest.fixture
def identifiers() -> list[str]:
    """Identifiers of a template with one value, one block and one table."""
    return [
        "name",
        "block__customer",
        "block__customer.name",
        "block__customer.address",
        "/block__customer",
        "table__account.id",
        "table__account.name",
        "table__account.number",
    ]


@pytest.fixture
def store(identifiers) -> BindingStore:
    """Create a store for the shared identifier list."""
    return BindingStore.init(identifiers)


@pytest.fixture
def structured_data() -> dict:
    """Three-part document matching the shared identifiers."""
    return {
        "values": {"name": "John"},
        "blocks": {
            "customer": [
                {"name": "Jim", "address": "Shork st 4"},
            ],
        },
        "tables": {
            "account": [
                {"id": 1, "name": "Jane", "number": 123},
            ],
        },
    }


@pytest.fixture
def processor_factory(identifiers):
    """Create a factory handing out mocked template processors."""
    processors = []

    def factory(path: str):
        processor = Mock()
        processor.path = path
        processor.get_variables = Mock(return_value=list(identifiers))
        processors.append(processor)
        return processor

    factory.processors = processors
    return factory
