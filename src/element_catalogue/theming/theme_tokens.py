from __future__ import annotations

import platform

DEFAULT_THEME = "Catalogue Dark"


def _default_font_family() -> str:
    system = platform.system().lower()
    if system.startswith("win"):
        return "Segoe UI"
    if system.startswith("darwin"):
        return "SF Pro Text"
    return "Inter"


_RADII = {"sm": 6, "md": 10, "lg": 16}
_SPACING = {"xs": 4, "sm": 8, "md": 12, "lg": 16}

THEME_TOKENS: dict[str, dict] = {
    "Catalogue Dark": {
        "meta": {"name": "Catalogue Dark", "mode": "dark"},
        "colors": {
            "bg": "#0b1220",
            "surface": "#111827",
            "surfaceAlt": "#1f2937",
            "text": "#f8fafc",
            "textMuted": "#94a3b8",
            "border": "#334155",
            "accent": "#60a5fa",
            "accentHover": "#3b82f6",
            "focusRing": "#fbbf24",
            "bookmark": "#facc15",
            "badge": "#1e3a8a",
            "badgeText": "#dbeafe",
        },
        "radii": _RADII,
        "spacing": _SPACING,
        "font": {"family": _default_font_family(), "baseSize": 10, "titleSize": 14, "monoFamily": "Consolas"},
    },
    "Catalogue Light": {
        "meta": {"name": "Catalogue Light", "mode": "light"},
        "colors": {
            "bg": "#f5f7fb",
            "surface": "#ffffff",
            "surfaceAlt": "#eef2f7",
            "text": "#0f172a",
            "textMuted": "#4b5563",
            "border": "#cbd5e1",
            "accent": "#2563eb",
            "accentHover": "#1d4ed8",
            "focusRing": "#0ea5e9",
            "bookmark": "#ca8a04",
            "badge": "#dbeafe",
            "badgeText": "#1e3a8a",
        },
        "radii": _RADII,
        "spacing": _SPACING,
        "font": {"family": _default_font_family(), "baseSize": 10, "titleSize": 14, "monoFamily": "Consolas"},
    },
    "High Contrast": {
        "meta": {"name": "High Contrast", "mode": "high_contrast"},
        "colors": {
            "bg": "#000000",
            "surface": "#000000",
            "surfaceAlt": "#111111",
            "text": "#ffffff",
            "textMuted": "#e5e7eb",
            "border": "#ffffff",
            "accent": "#ffff00",
            "accentHover": "#ffd600",
            "focusRing": "#00ffff",
            "bookmark": "#ffff00",
            "badge": "#ffffff",
            "badgeText": "#000000",
        },
        "radii": {"sm": 0, "md": 0, "lg": 0},
        "spacing": _SPACING,
        "font": {"family": _default_font_family(), "baseSize": 11, "titleSize": 15, "monoFamily": "Consolas"},
    },
}


def get_theme_tokens(name: str) -> dict:
    return THEME_TOKENS.get(name, THEME_TOKENS[DEFAULT_THEME])
