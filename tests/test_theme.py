import pytest

from putflow import get_diagram_themes, put_theme
from putflow.theme import THEMES, PutTheme, get_theme_colors, is_valid_hex_color, parse_css


def test_themes_cover_every_node_type():
    assert list(get_diagram_themes()) == list(THEMES)
    assert len(THEMES) == 9
    for name, styles in THEMES.items():
        assert set(styles) == {"input", "process", "output", "decision", "artifact", "start", "end"}, name
        for css in styles.values():
            assert set(parse_css(css)) == {"fill", "stroke", "stroke-width", "color"}


def test_get_theme_colors_falls_back_to_light():
    assert get_theme_colors("nope") == THEMES["light"]
    colors = get_theme_colors("dark")
    colors["input"] = "changed"
    assert THEMES["dark"]["input"] != "changed"


@pytest.mark.parametrize("value, ok", [
    ("#fff", True), ("#A1B2C3", True), ("#a1b2c3d4", True),
    ("fff", False), ("#ggg", False), ("#12345", False), ("red", False), (None, False),
])
def test_is_valid_hex_color(value, ok):
    assert is_valid_hex_color(value) is ok


def test_put_theme_defaults_to_base():
    pal = put_theme()
    assert isinstance(pal, PutTheme)
    assert pal.base == "light"
    assert dict(pal) == THEMES["light"]


def test_put_theme_partial_override_keeps_width():
    pal = put_theme(base="viridis", start={"stroke": "#000000"})
    css = parse_css(pal["start"])
    assert css["stroke"] == "#000000"
    assert css["fill"] == "#31688e"
    assert css["stroke-width"] == "3px"
    assert pal["input"] == THEMES["viridis"]["input"]


def test_put_theme_errors():
    with pytest.raises(ValueError, match="Invalid base theme"):
        put_theme(base="neon")
    with pytest.raises(TypeError, match="named keys"):
        put_theme(input=["#fff", "#000"])
    with pytest.raises(ValueError, match="Unknown key"):
        put_theme(input={"background": "#fff"})
    with pytest.raises(ValueError, match="Invalid hex color"):
        put_theme(output={"fill": "green"})


def test_put_theme_printing():
    pal = put_theme(base="dark")
    text = str(pal)
    assert text.startswith("putflow custom theme (base: dark)")
    assert "decision" in text
    assert repr(pal).startswith("PutTheme(base='dark'")
