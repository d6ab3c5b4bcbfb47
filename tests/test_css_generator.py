from forminator_field_widths.css_generator import CssOptions, format_number, generate_form_css
from forminator_field_widths.sanitize import sanitize_widths

NO_MOBILE = CssOptions(mobile_full_width=False)


def _widths(fields):
    return sanitize_widths({"fields": fields})


def test_empty_fields_produce_no_css():
    assert generate_form_css(42, _widths({}), CssOptions()) == ""
    assert generate_form_css(42, {}, CssOptions()) == ""


def test_full_width_fields_are_skipped():
    widths = _widths({"a": {"width": 100}, "b": {"width": 99.95}, "c": {}})
    assert generate_form_css(42, widths, CssOptions()) == ""


def test_near_full_width_outside_tolerance_is_emitted():
    css = generate_form_css(42, _widths({"a": {"width": 99.8}}), NO_MOBILE)
    assert "width: 99.8% !important;" in css


def test_third_width_rule_block():
    css = generate_form_css(42, _widths({"name-1": {"width": 33.333}}), NO_MOBILE)
    assert css == (
        "/* Forminator Field Widths - Form #42 */\n"
        ".forminator-custom-form-42 #name-1,\n"
        ".forminator-custom-form-42 #name-1.forminator-col,\n"
        ".forminator-ui.forminator-custom-form-42 #name-1 {\n"
        "  width: 33.333% !important;\n"
        "  flex: 0 0 33.333% !important;\n"
        "  max-width: 33.333% !important;\n"
        "}"
    )
    assert "@media" not in css


def test_mobile_block():
    css = generate_form_css(42, _widths({"f1": {"width": 50}}), CssOptions(mobile_full_width=True, mobile_breakpoint=768))
    assert "@media (max-width: 768px) {" in css
    assert ".forminator-custom-form-42 #f1.forminator-col" in css
    assert ".forminator-ui.forminator-custom-form-42 #f1" in css
    assert css.endswith(
        "\n\n@media (max-width: 768px) {\n"
        "  .forminator-custom-form-42 #f1 { width: 100% !important; flex: 0 0 100% !important; max-width: 100% !important; }\n"
        "}"
    )


def test_blocks_are_blank_line_separated():
    css = generate_form_css(7, _widths({"a": {"width": 50}, "b": {"width": 25}}), NO_MOBILE)
    assert css.count("}\n\n.forminator-custom-form-7 #b,") == 1


def test_field_ids_are_attribute_escaped():
    css = generate_form_css(1, {"fields": {'a"b': {"width": 50}}}, NO_MOBILE)
    assert "#a&quot;b" in css


def test_output_is_deterministic():
    widths = _widths({"a": {"width": 66.666}, "b": {"width": 25}})
    assert generate_form_css(3, widths) == generate_form_css(3, widths)


def test_format_number():
    assert format_number(50.0) == "50"
    assert format_number(33.333) == "33.333"
    assert format_number(66.666) == "66.666"


def test_sanitized_field_ids_are_not_double_encoded():
    widths = sanitize_widths({"fields": {"a < b": {"width": 50}, "x&y": {"width": 25}}})
    css = generate_form_css(1, widths, NO_MOBILE)
    assert "#a &lt; b" in css
    assert "&amp;lt;" not in css
    assert "#x&amp;y" in css
