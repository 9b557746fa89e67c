"""Theme palettes and column color assignment."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColorPair:
    """Main (accent) and background color for a column."""

    main: str
    background: str


Palette = tuple[ColorPair, ...]

DEFAULT_THEME = "Default"

THEMES: dict[str, Palette] = {
    "Default": (
        ColorPair("#4A90E2", "#F0F5FF"),  # blue
        ColorPair("#F5A623", "#FFF9F0"),  # orange
        ColorPair("#BD10E0", "#FBF0FF"),  # purple
        ColorPair("#7ED321", "#F7FFF0"),  # green
        ColorPair("#50E3C2", "#F0FFFB"),  # teal
    ),
    "Bolivia": (
        ColorPair("#d92323", "#ffebeb"),  # red
        ColorPair("#ffce00", "#fff9e0"),  # yellow
        ColorPair("#007a3d", "#e0f2e7"),  # green
        ColorPair("#ff8c00", "#fff3e0"),  # dark orange
        ColorPair("#c62828", "#ffcdd2"),  # darker red
    ),
    "France": (
        ColorPair("#0055a4", "#e0e9f2"),  # blue
        ColorPair("#ef4135", "#fde8e6"),  # red
        ColorPair("#808080", "#f2f2f2"),  # grey
        ColorPair("#0078d7", "#e1f5fe"),  # light blue
        ColorPair("#c62828", "#ffcdd2"),  # darker red
    ),
    "Netherlands": (
        ColorPair("#ae1c28", "#f9e4e6"),  # red
        ColorPair("#21468b", "#e2e8f3"),  # blue
        ColorPair("#808080", "#f2f2f2"),  # grey
        ColorPair("#ff7f00", "#fff2e5"),  # orange
        ColorPair("#003366", "#e0e6ec"),  # dark blue
    ),
    "Turkey": (
        ColorPair("#e30a17", "#fce4e6"),  # red
        ColorPair("#9e1b22", "#f4e8e9"),  # dark red
        ColorPair("#808080", "#f2f2f2"),  # grey
        ColorPair("#b71c1c", "#ffcdd2"),  # another red
        ColorPair("#d50000", "#ff8a80"),  # bright red
    ),
}


def get_palette(theme: str | None) -> Palette:
    """Palette for a theme name, falling back to the default theme."""
    return THEMES.get(theme or DEFAULT_THEME, THEMES[DEFAULT_THEME])


def color_for_index(palette: Palette, index: int) -> ColorPair:
    """Color assigned to the column at index: cycles through the palette."""
    return palette[index % len(palette)]


def next_theme(theme: str | None) -> str:
    """The theme after the given one, wrapping around."""
    names = list(THEMES)
    if theme not in THEMES:
        return names[0]
    return names[(names.index(theme) + 1) % len(names)]
