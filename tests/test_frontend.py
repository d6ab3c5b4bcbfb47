from forminator_field_widths.config import PluginOptions
from forminator_field_widths.events import EventKind


def test_no_stored_widths_renders_nothing(ctx):
    assert ctx.frontend.collect_css() == ""
    assert ctx.frontend.render_style_tag() == ""


def test_style_tag_wraps_all_forms(ctx):
    ctx.manager.save_form_widths(42, {"fields": {"name-1": {"width": 50}}})
    ctx.manager.save_form_widths(7, {"fields": {"email-1": {"width": 25}}})

    tag = ctx.frontend.render_style_tag()
    assert tag.startswith('<style id="forminator-field-widths-css" type="text/css">\n/* Forminator Field Widths - Form #7 */')
    assert "Form #42" in tag
    assert tag.endswith("}\n\n</style>\n")


def test_full_width_only_forms_are_skipped(ctx):
    ctx.manager.save_form_widths(42, {"fields": {"name-1": {"width": 100}}})
    assert ctx.frontend.collect_css() == ""


def test_css_is_cached_until_save(ctx):
    ctx.manager.save_form_widths(42, {"fields": {"name-1": {"width": 50}}})
    first = ctx.frontend.collect_css()
    assert ctx.cache.get(42) is not None

    ctx.cache.set(42, "/* cached */")
    assert ctx.frontend.collect_css() == "/* cached */\n\n"

    ctx.manager.set_field_width(42, "name-1", {"width": 25})
    assert "width: 25% !important" in ctx.frontend.collect_css()
    assert first != ctx.frontend.collect_css()


def test_before_render_event(ctx):
    seen = []
    ctx.events.subscribe(EventKind.BEFORE_RENDER, seen.append)
    ctx.manager.save_form_widths(42, {})
    ctx.frontend.collect_css()
    assert seen[0].form_ids == (42,)


def test_mobile_pass_follows_options(ctx):
    ctx.manager.save_form_widths(42, {"fields": {"name-1": {"width": 50}}})
    assert "@media (max-width: 768px)" in ctx.frontend.collect_css()

    ctx.frontend.options = PluginOptions(enable_responsive=False)
    ctx.manager.clear_form_cache(42)
    assert "@media (max-width: 768px)" in ctx.frontend.collect_css()

    ctx.frontend.options = PluginOptions(mobile_full_width=False)
    ctx.manager.clear_form_cache(42)
    assert "@media" not in ctx.frontend.collect_css()
