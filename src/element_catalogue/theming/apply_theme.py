from __future__ import annotations

from PySide6 import QtGui, QtWidgets


def _relative_luminance(color: QtGui.QColor) -> float:
    def channel(value: float) -> float:
        value /= 255.0
        return value / 12.92 if value <= 0.03928 else ((value + 0.055) / 1.055) ** 2.4

    return (
        0.2126 * channel(color.red())
        + 0.7152 * channel(color.green())
        + 0.0722 * channel(color.blue())
    )


def build_palette(tokens: dict) -> QtGui.QPalette:
    colors = tokens["colors"]
    role = QtGui.QPalette.ColorRole
    palette = QtGui.QPalette()
    palette.setColor(role.Window, QtGui.QColor(colors["bg"]))
    palette.setColor(role.Base, QtGui.QColor(colors["surface"]))
    palette.setColor(role.AlternateBase, QtGui.QColor(colors["surfaceAlt"]))
    palette.setColor(role.WindowText, QtGui.QColor(colors["text"]))
    palette.setColor(role.Text, QtGui.QColor(colors["text"]))
    palette.setColor(role.PlaceholderText, QtGui.QColor(colors["textMuted"]))
    palette.setColor(role.Button, QtGui.QColor(colors["surface"]))
    palette.setColor(role.ButtonText, QtGui.QColor(colors["text"]))
    palette.setColor(role.BrightText, QtGui.QColor(colors["accent"]))
    palette.setColor(role.Link, QtGui.QColor(colors["accent"]))
    highlight = QtGui.QColor(colors["accent"])
    palette.setColor(role.Highlight, highlight)
    highlight_text = QtGui.QColor("#0f172a") if _relative_luminance(highlight) > 0.5 else QtGui.QColor("#f8fafc")
    palette.setColor(role.HighlightedText, highlight_text)
    palette.setColor(role.ToolTipBase, QtGui.QColor(colors["surface"]))
    palette.setColor(role.ToolTipText, QtGui.QColor(colors["text"]))
    return palette


def build_stylesheet(tokens: dict) -> str:
    colors = tokens["colors"]
    radii = tokens["radii"]
    spacing = tokens["spacing"]
    font = tokens["font"]
    focus = colors["focusRing"]
    is_high_contrast = tokens.get("meta", {}).get("mode") == "high_contrast"

    button_hover = colors["surfaceAlt"] if is_high_contrast else colors["surface"]
    tab_unselected_bg = colors["surface"] if is_high_contrast else colors["surfaceAlt"]
    tab_selected_bg = colors["surfaceAlt"] if is_high_contrast else colors["surface"]
    tab_border = colors["surfaceAlt"] if is_high_contrast else colors["border"]
    hover_border = colors["border"] if is_high_contrast else colors["accent"]
    return f"""
    * {{
        font-family: "{font["family"]}";
        font-size: {font["baseSize"]}pt;
    }}
    QMainWindow, QDialog {{
        background-color: {colors["bg"]};
    }}
    QWidget {{
        color: {colors["text"]};
    }}
    QTabWidget::pane {{
        border: 1px solid {tab_border};
        border-radius: {radii["md"]}px;
        background: {colors["surface"]};
        padding: {spacing["xs"]}px;
    }}
    QTabBar::tab {{
        background: {tab_unselected_bg};
        border: 1px solid {tab_border};
        border-bottom: none;
        padding: {spacing["xs"]}px {spacing["md"]}px;
        margin-right: {spacing["xs"]}px;
        border-top-left-radius: {radii["sm"]}px;
        border-top-right-radius: {radii["sm"]}px;
        color: {colors["textMuted"]};
    }}
    QTabBar::tab:selected {{
        background: {tab_selected_bg};
        border-color: {colors["accent"]};
        color: {colors["text"]};
    }}
    QPushButton, QToolButton {{
        background: {colors["surfaceAlt"]};
        border: 1px solid {colors["surfaceAlt"]};
        border-radius: {radii["sm"]}px;
        padding: {spacing["xs"]}px {spacing["md"]}px;
        min-height: 28px;
    }}
    QPushButton:hover, QToolButton:hover {{
        background: {button_hover};
        border-color: {hover_border};
    }}
    QPushButton:pressed, QToolButton:pressed {{
        background: {colors["surfaceAlt"]};
        border-color: {colors["focusRing"] if is_high_contrast else colors["accentHover"]};
    }}
    QPushButton:disabled, QToolButton:disabled {{
        color: {colors["textMuted"]};
    }}
    QPushButton:focus, QToolButton:focus {{
        outline: none;
        border: 1px solid {focus};
    }}
    QGroupBox {{
        border: 1px solid {colors["border"]};
        border-radius: {radii["md"]}px;
        margin-top: {spacing["md"]}px;
        padding: {spacing["md"]}px;
        background: {colors["surface"]};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: {spacing["md"]}px;
        top: {spacing["xs"]}px;
        padding: 0 {spacing["xs"]}px;
        color: {colors["textMuted"]};
    }}
    QLineEdit, QComboBox {{
        background: {colors["surface"]};
        border: 1px solid {colors["border"]};
        border-radius: {radii["sm"]}px;
        padding: {spacing["xs"]}px {spacing["sm"]}px;
        min-height: 28px;
    }}
    QComboBox::drop-down {{
        width: 26px;
        border-left: 1px solid {colors["border"]};
    }}
    QLineEdit:focus, QComboBox:focus {{
        border: 1px solid {focus};
        background: {colors["surfaceAlt"]};
    }}
    QLineEdit:hover, QComboBox:hover {{
        border-color: {hover_border};
    }}
    QListWidget {{
        background: {colors["surface"]};
        border: 1px solid {colors["border"]};
        border-radius: {radii["md"]}px;
    }}
    QListWidget::item {{
        padding: {spacing["xs"]}px;
    }}
    QListWidget::item:selected {{
        background: {colors["surfaceAlt"]};
        color: {colors["text"]};
    }}
    QLabel#sectionHeader {{
        color: {colors["textMuted"]};
        font-weight: 600;
        padding: {spacing["sm"]}px {spacing["xs"]}px {spacing["xs"]}px {spacing["xs"]}px;
    }}
    QLabel#elementSymbol {{
        font-size: {font["titleSize"]}pt;
        font-weight: 700;
    }}
    QLabel#mutedLabel {{
        color: {colors["textMuted"]};
    }}
    QToolButton#filterBadge {{
        background: {colors["badge"]};
        color: {colors["badgeText"]};
        border: none;
        border-radius: {radii["lg"]}px;
        padding: 2px {spacing["sm"]}px;
        min-height: 20px;
    }}
    QToolButton#bookmarkButton {{
        background: transparent;
        border: none;
        color: {colors["bookmark"]};
    }}
    QToolTip {{
        background: {colors["surface"]};
        color: {colors["text"]};
        border: 1px solid {colors["border"]};
        padding: {spacing["xs"]}px;
    }}
    """


def apply_theme(app: QtWidgets.QApplication, tokens: dict) -> None:
    app.setPalette(build_palette(tokens))
    app.setStyleSheet(build_stylesheet(tokens))
