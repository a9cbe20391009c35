# Arbor CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Styles used by Arbor when rendering help and diagnostics.

Style names are namespaced with `arbor.` so they can be overridden in a
custom `rich.theme.Theme` without clashing with rich's defaults.
"""
from rich.theme import Theme

ARBOR_STYLES: dict[str, str] = {
    "arbor.header": "bold #88C0D0",
    "arbor.text": "#D8DEE9",
    "arbor.option": "#A3BE8C",
    "arbor.command": "bold #81A1C1",
    "arbor.dim": "dim",
    "arbor.success": "#A3BE8C",
    "arbor.warning": "#EBCB8B",
    "arbor.error": "bold #BF616A",
}


def get_arbor_theme() -> Theme:
    return Theme(ARBOR_STYLES)
