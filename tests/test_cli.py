import json

from forminator_field_widths.cli import main


def test_export_import_clear(ctx, tmp_path, capsys):
    ctx.manager.save_form_widths(42, {"fields": {"name-1": {"width": 50}}})
    out = tmp_path / "export.json"

    assert main(["export", "42", "--out", str(out)], ctx=ctx) == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["widths"]["fields"]["name-1"]["width"] == 50

    assert main(["import", "7", str(out)], ctx=ctx) == 0
    assert ctx.manager.get_form_widths(7) == data["widths"]

    assert main(["clear", "42"], ctx=ctx) == 0
    assert ctx.manager.forms_with_widths() == [7]


def test_import_unknown_form_fails(ctx, tmp_path, capsys):
    path = tmp_path / "in.json"
    path.write_text(json.dumps({"widths": {}}), encoding="utf-8")
    assert main(["import", "999", str(path)], ctx=ctx) == 1
    assert "invalid_form" in capsys.readouterr().err


def test_css_and_uninstall(ctx, store, capsys):
    ctx.manager.save_form_widths(42, {"fields": {"name-1": {"width": 50}}})
    assert main(["css", "--style-tag"], ctx=ctx) == 0
    assert "<style" in capsys.readouterr().out

    assert main(["uninstall"], ctx=ctx) == 2
    assert main(["uninstall", "--yes"], ctx=ctx) == 0
    assert store.keys() == []
