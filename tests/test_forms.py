import json
from types import SimpleNamespace

from forminator_field_widths.forms import FieldRecord, StaticFormRegistry, form_fields, normalize_fields


class ModelField:
    slug = "text-3"

    def to_array(self):
        return {"type": "text", "label": "Comments"}


def test_normalize_mixed_field_shapes():
    raw = [
        {"element_id": "name-1", "type": "name", "field_label": "Name", "cols": "6"},
        SimpleNamespace(element_id="email-1", type="email", label="Email"),
        ModelField(),
        {"fields": [{"element_id": "phone-1", "type": "phone"}, {"type": "no-id"}]},
        {"type": "html"},
        "garbage",
        None,
    ]
    assert normalize_fields(raw) == [
        FieldRecord(id="name-1", type="name", label="Name", cols=6),
        FieldRecord(id="email-1", type="email", label="Email", cols=12),
        FieldRecord(id="text-3", type="text", label="Comments", cols=12),
        FieldRecord(id="phone-1", type="phone", label="phone-1", cols=12),
    ]


def test_label_precedence():
    (rec,) = normalize_fields([{"element_id": "x", "label": "", "placeholder": "Type here"}])
    assert rec.label == "Type here"


def test_normalize_rejects_non_sequences():
    assert normalize_fields(None) == []
    assert normalize_fields("name-1") == []
    assert normalize_fields({"element_id": "a"}) == []


def test_static_registry_from_file(tmp_path):
    path = tmp_path / "forms.json"
    path.write_text(
        json.dumps({"forms": [{"id": "42", "name": "Contact", "fields": [{"element_id": "name-1"}]}, {"id": 0}]}),
        encoding="utf-8",
    )
    registry = StaticFormRegistry.from_file(path)
    assert [f.id for f in registry.list_forms()] == [42]
    assert [f.id for f in form_fields(registry, 42)] == ["name-1"]
    assert form_fields(registry, 5) == []


def test_static_registry_missing_file(tmp_path):
    assert StaticFormRegistry.from_file(tmp_path / "nope.json").list_forms() == []
