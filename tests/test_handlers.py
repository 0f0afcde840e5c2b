from types import MappingProxyType

import pytest

from capitals.handlers import CapitalHandler
from capitals.models import CapitalOut, CapitalQuery, LookupKind
from capitals.storage import SAMPLE_CAPITALS, CapitalStore, default_store


def test_store_lookup_present_and_absent():
    store = default_store()
    assert store.lookup("Idaho") == "Salem"
    assert store.lookup("idaho") is None
    assert "Texas" in store
    assert len(store) == 3


def test_store_is_read_only():
    store = default_store()
    with pytest.raises(TypeError):
        store.entries["Ohio"] = "Columbus"  # type: ignore[index]
    assert isinstance(store.entries, MappingProxyType)


def test_store_copies_its_input():
    source = {"Texas": "Austin"}
    store = CapitalStore(source)
    source["Ohio"] = "Columbus"
    assert "Ohio" not in store
    exported = store.as_dict()
    exported["Utah"] = "Salt Lake City"
    assert "Utah" not in store


def test_sample_data_untouched_by_store():
    default_store().as_dict().clear()
    assert SAMPLE_CAPITALS == {"Arkansas": "Little Rock", "Texas": "Austin", "Idaho": "Salem"}


def test_query_treats_empty_state_as_absent():
    assert CapitalQuery.from_params("").state is None
    assert CapitalQuery.from_params(None).state is None
    assert CapitalQuery.from_params("Texas").state == "Texas"


def test_handler_outcomes():
    handler = CapitalHandler(default_store())

    found = handler.get_capital(CapitalQuery("Texas"))
    assert found.kind is LookupKind.FOUND
    assert found.payload == CapitalOut(state="Texas", capital="Austin")

    unknown = handler.get_capital(CapitalQuery("California"))
    assert unknown.kind is LookupKind.UNKNOWN
    assert unknown.state == "California"
    assert unknown.payload is None

    everything = handler.get_capital(CapitalQuery())
    assert everything.kind is LookupKind.ALL
    assert everything.payload == SAMPLE_CAPITALS


def test_add_capital_always_501():
    handler = CapitalHandler(default_store())
    assert {handler.add_capital() for _ in range(5)} == {501}
    assert len(handler.store) == 3
