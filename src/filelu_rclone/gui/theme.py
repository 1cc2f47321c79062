"""FileLu Rclone helper — Centralized Design System.

Provides a single source of truth for all visual tokens: colors, fonts,
spacing, border radii, and component-level stylesheets.

Usage::

    from filelu_rclone.gui.theme import Theme, apply_theme

    apply_theme(app)                              # apply to entire QApplication
    widget.setStyleSheet(Theme.command_block())   # component-specific stylesheet
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class _Palette:
    """Color tokens for the dark theme."""

    # Surface
    bg_primary: str
    bg_secondary: str
    bg_surface: str
    bg_elevated: str

    # Text
    text_primary: str
    text_secondary: str
    text_muted: str
    text_inverse: str

    # Accent
    accent: str
    accent_hover: str
    accent_pressed: str
    accent_subtle: str

    # Status
    success: str
    success_text: str
    warning: str
    warning_bg: str
    error: str

    # Borders
    border: str
    border_light: str
    border_focus: str


_DARK = _Palette(
    bg_primary="#111827",
    bg_secondary="#1F2937",
    bg_surface="#2B3544",
    bg_elevated="#374151",
    text_primary="#FFFFFF",
    text_secondary="#D1D5DB",
    text_muted="#9CA3AF",
    text_inverse="#FFFFFF",
    accent="#6366F1",
    accent_hover="#4F46E5",
    accent_pressed="#4338CA",
    accent_subtle="#A5B4FC",
    success="#16A34A",
    success_text="#4ADE80",
    warning="#EAB308",
    warning_bg="#3B3416",
    error="#EF4444",
    border="#4B5563",
    border_light="#374151",
    border_focus="#6366F1",
)


# ---------------------------------------------------------------------------
# Design tokens
# ---------------------------------------------------------------------------

FONT_FAMILY = "'Inter', 'Segoe UI', 'Roboto', system-ui, sans-serif"
FONT_MONO = "'JetBrains Mono', 'Fira Code', 'Consolas', monospace"

RADIUS_SM = "4px"
RADIUS_MD = "8px"
RADIUS_LG = "12px"

SPACING_SM = "4px"
SPACING_MD = "8px"
SPACING_LG = "12px"
SPACING_XL = "16px"


# ---------------------------------------------------------------------------
# Theme class: all stylesheets are generated from the palette
# ---------------------------------------------------------------------------


class Theme:
    """Generates Qt stylesheets from the dark palette."""

    _palette: _Palette = _DARK

    @classmethod
    def palette(cls) -> _Palette:
        return cls._palette

    # ── Global application stylesheet ───────────────────────────────────

    @classmethod
    def global_stylesheet(cls) -> str:
        p = cls._palette
        return f"""
        * {{
            font-family: {FONT_FAMILY};
        }}

        QMainWindow, QScrollArea, QScrollArea > QWidget > QWidget {{
            background: {p.bg_primary};
        }}

        QWidget {{
            color: {p.text_primary};
        }}

        QStatusBar {{
            background: {p.bg_secondary};
            color: {p.text_secondary};
            border-top: 1px solid {p.border};
            font-size: 9pt;
            padding: {SPACING_SM};
        }}

        QToolTip {{
            background: {p.bg_elevated};
            color: {p.text_primary};
            border: 1px solid {p.border};
            border-radius: {RADIUS_SM};
            padding: {SPACING_SM} {SPACING_MD};
            font-size: 9pt;
        }}

        QScrollBar:vertical {{
            background: transparent;
            width: 8px;
            margin: 0;
        }}
        QScrollBar::handle:vertical {{
            background: {p.border};
            border-radius: 4px;
            min-height: 30px;
        }}
        QScrollBar::handle:vertical:hover {{
            background: {p.text_muted};
        }}
        QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
            height: 0;
        }}
        {cls.form_inputs()}
        {cls.group_box()}
        """

    # ── Component-level stylesheets ─────────────────────────────────────

    @classmethod
    def form_inputs(cls) -> str:
        p = cls._palette
        return f"""
        QLineEdit {{
            background: {p.bg_elevated};
            color: {p.text_primary};
            border: 1px solid {p.border};
            border-radius: {RADIUS_MD};
            padding: {SPACING_MD} {SPACING_LG};
            font-size: 10pt;
            selection-background-color: {p.accent};
            selection-color: {p.text_inverse};
        }}
        QLineEdit:focus {{
            border-color: {p.border_focus};
        }}
        QLabel {{
            color: {p.text_secondary};
            font-size: 10pt;
        }}
        """

    @classmethod
    def group_box(cls) -> str:
        p = cls._palette
        return f"""
        QGroupBox {{
            background: {p.bg_secondary};
            border: 1px solid {p.border_light};
            border-radius: {RADIUS_LG};
            margin-top: 20px;
            padding: 28px {SPACING_XL} {SPACING_XL} {SPACING_XL};
            font-weight: bold;
            font-size: 14pt;
        }}
        QGroupBox::title {{
            subcontrol-origin: margin;
            subcontrol-position: top left;
            padding: 0 {SPACING_MD};
            color: {p.accent_subtle};
        }}
        """

    @classmethod
    def button_primary(cls) -> str:
        p = cls._palette
        return f"""
        QPushButton {{
            background: {p.accent};
            color: {p.text_inverse};
            border: none;
            border-radius: {RADIUS_MD};
            padding: {SPACING_MD} {SPACING_LG};
            font-size: 10pt;
            font-weight: bold;
        }}
        QPushButton:hover {{
            background: {p.accent_hover};
        }}
        QPushButton:pressed {{
            background: {p.accent_pressed};
        }}
        """

    @classmethod
    def button_copied(cls) -> str:
        p = cls._palette
        return f"""
        QPushButton {{
            background: {p.success};
            color: {p.text_inverse};
            border: none;
            border-radius: {RADIUS_MD};
            padding: {SPACING_MD} {SPACING_LG};
            font-size: 10pt;
            font-weight: bold;
        }}
        """

    @classmethod
    def command_block(cls) -> str:
        p = cls._palette
        return f"""
        QFrame#commandBlock {{
            background: {p.bg_surface};
            border-radius: {RADIUS_LG};
        }}
        QLabel#commandTitle {{
            color: {p.accent_subtle};
            font-size: 12pt;
            font-weight: bold;
            border-bottom: 1px solid {p.accent};
            padding-bottom: {SPACING_SM};
        }}
        QLabel#commandText {{
            background: {p.bg_secondary};
            color: {p.text_primary};
            font-family: {FONT_MONO};
            font-size: 10pt;
            border-radius: {RADIUS_MD};
            padding: {SPACING_LG};
        }}
        QLabel#copiedLabel {{
            color: {p.success_text};
            font-size: 9pt;
        }}
        """

    @classmethod
    def toast(cls) -> str:
        p = cls._palette
        return f"""
        QLabel {{
            background: {p.success};
            color: {p.text_inverse};
            border-radius: {RADIUS_MD};
            padding: {SPACING_MD} {SPACING_XL};
            font-size: 10pt;
            font-weight: bold;
        }}
        """

    @classmethod
    def warning_box(cls) -> str:
        p = cls._palette
        return f"""
        QLabel {{
            background: {p.warning_bg};
            color: {p.warning};
            border-left: 4px solid {p.warning};
            border-radius: {RADIUS_MD};
            padding: {SPACING_LG};
            font-size: 9pt;
        }}
        """

    @classmethod
    def note(cls, color: str | None = None) -> str:
        p = cls._palette
        return f"QLabel {{ color: {color or p.text_muted}; font-size: 9pt; }}"


# ---------------------------------------------------------------------------
# Application-level helper
# ---------------------------------------------------------------------------


def apply_theme(app) -> None:
    """Apply the global theme stylesheet to a QApplication instance."""
    app.setStyleSheet(Theme.global_stylesheet())
