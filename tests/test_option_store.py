import json

import pytest

from forminator_field_widths.errors import StorageError
from forminator_field_widths.option_store import JsonFileOptionStore, MemoryOptionStore, OptionStore


def test_memory_store_copies_values():
    store = MemoryOptionStore()
    doc = {"fields": {"a": {"width": 50}}}
    store.set("k", doc)
    doc["fields"]["a"]["width"] = 1
    got = store.get("k")
    assert got["fields"]["a"]["width"] == 50
    got["fields"].clear()
    assert store.get("k")["fields"]


def test_memory_store_delete_and_keys():
    store = MemoryOptionStore({"ffw_form_widths_2": {}, "ffw_form_widths_1": {}, "other": None})
    assert isinstance(store, OptionStore)
    assert store.keys("ffw_form_widths_") == ["ffw_form_widths_1", "ffw_form_widths_2"]
    assert store.delete("other") is True
    assert store.delete("other") is False
    assert store.get("other", "dflt") == "dflt"


def test_json_file_store_round_trip(tmp_path):
    path = tmp_path / "nested" / "options.json"
    store = JsonFileOptionStore(path)
    assert store.get("missing") is None
    store.set("ffw_form_widths_42", {"fields": {}})
    store.set("ffw_options", {"mobile_breakpoint": 600})

    reopened = JsonFileOptionStore(path)
    assert reopened.get("ffw_options") == {"mobile_breakpoint": 600}
    assert reopened.keys("ffw_form") == ["ffw_form_widths_42"]
    assert reopened.delete("ffw_form_widths_42") is True
    assert json.loads(path.read_text(encoding="utf-8")) == {"ffw_options": {"mobile_breakpoint": 600}}
    assert list(path.parent.iterdir()) == [path]


def test_json_file_store_rejects_corrupt_file(tmp_path):
    path = tmp_path / "options.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileOptionStore(path).get("x")
