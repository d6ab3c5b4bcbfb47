from forminator_field_widths.uninstall import uninstall


def test_uninstall_removes_every_owned_key(ctx, store):
    store.set("ffw_options", {"mobile_breakpoint": 600})
    store.set("unrelated", 1)
    ctx.manager.save_form_widths(42, {"fields": {"a": {"width": 50}}})
    ctx.manager.save_form_widths(7, {})
    ctx.frontend.collect_css()

    assert uninstall(store) == 5
    assert store.keys() == ["unrelated"]
    assert uninstall(store) == 0
