"""Theme palettes for the chat page.

Each theme maps to four Tailwind class tokens. Unknown theme values fall back
to the light palette.
"""

from src.models.schemas import Theme, ThemePalette

LIGHT_PALETTE = ThemePalette(
    primary="bg-white",
    secondary="bg-gray-100",
    accent="bg-blue-500",
    text="text-gray-800",
)

DARK_PALETTE = ThemePalette(
    primary="bg-gray-900",
    secondary="bg-gray-800",
    accent="bg-yellow-500",
    text="text-gray-100",
)

PALETTES: dict[str, ThemePalette] = {
    Theme.LIGHT.value: LIGHT_PALETTE,
    Theme.DARK.value: DARK_PALETTE,
}

THEME_OPTIONS = {Theme.LIGHT.value: "Light", Theme.DARK.value: "Dark"}


def get_theme_colors(theme: str) -> ThemePalette:
    """Return the palette for a theme name, defaulting to light."""
    return PALETTES.get(theme, LIGHT_PALETTE)
