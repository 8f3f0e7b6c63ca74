from lib.txt_span import (
    Clickable,
    ForegroundColor,
    Image,
    ScaleX,
    Style,
    TextStyle,
    Underline,
    annotation_kind,
    annotation_to_dict,
)


def test_kind_names_are_snake_case():
    assert annotation_kind(ForegroundColor(0)) == "foreground_color"
    assert annotation_kind(ScaleX(1.5)) == "scale_x"
    assert annotation_kind(Underline()) == "underline"


def test_to_dict_keeps_plain_fields_and_enum_values():
    assert annotation_to_dict(ForegroundColor(0xFF00FF00)) == {
        "kind": "foreground_color",
        "color": 0xFF00FF00,
    }
    assert annotation_to_dict(Style(TextStyle.BOLD_ITALIC)) == {
        "kind": "style",
        "style": "bold_italic",
    }
    assert annotation_to_dict(Image("a.png")) == {
        "kind": "image",
        "image": "a.png",
        "vertical_alignment": "baseline",
    }


def test_to_dict_drops_handlers_and_opaque_images():
    assert annotation_to_dict(Clickable(lambda: None)) == {"kind": "clickable"}
    assert annotation_to_dict(Image(object())) == {
        "kind": "image",
        "vertical_alignment": "baseline",
    }


def test_to_dict_for_foreign_values():
    assert annotation_to_dict("bold") == {"kind": "str"}


def test_clickable_identity_equality():
    def handler():
        return None

    assert Clickable(handler) != Clickable(handler)
