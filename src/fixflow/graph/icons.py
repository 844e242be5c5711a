"""Icon name to display symbol lookup.

Stored flows name icons with the symbolic names used by the original
flow editor ("Play", "Wrench", ...). Rendering hosts only need a short
symbol; names that are missing or unknown fall back to DEFAULT_SYMBOL.
"""

from __future__ import annotations

DEFAULT_ICON = "ChevronRight"

ICON_SYMBOLS: dict[str, str] = {
    "ChevronRight": "›",
    "Play": "▶",
    "Gauge": "◔",
    "XMarkCircle": "⊗",
    "Document": "▤",
    "QuestionMark": "?",
    "ExclamationMark": "!",
    "ComputerChip": "▣",
    "Leaf": "❦",
    "Upload": "⇪",
    "Terminal": "❯",
    "Wrench": "⚒",
    "Check": "✓",
    "CheckCircle": "✔",
    "List": "☰",
    "Pencil": "✎",
    "SaveDocument": "⎘",
}

DEFAULT_SYMBOL = ICON_SYMBOLS[DEFAULT_ICON]


def resolve_icon(name: str | None) -> str:
    """Return ``name`` if it is a known icon name, else DEFAULT_ICON."""
    if name and name in ICON_SYMBOLS:
        return name
    return DEFAULT_ICON


def symbol_for(name: str | None) -> str:
    """Map an icon name to its symbol. Never raises."""
    return ICON_SYMBOLS[resolve_icon(name)]
