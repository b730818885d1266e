"""
Centralized theme configuration for the viewer.

This module provides a single source of truth for the colors, fonts, spacing
and stylesheet snippets used by the window and its widgets.

Usage:
    from devlife.ui.common.theme import Colors, Fonts, Spacing, Styles

    label.setStyleSheet(f"color: {Colors.TEXT_PRIMARY};")
    icon = qta.icon('fa5s.arrow-right', color=Colors.TEXT_WHITE)
"""
from typing import Optional


class Colors:
    """
    Color palette for the application.

      Backgrounds: #141414 (primary), #1b1b1b (secondary), #232323 (tertiary)
      Text:        #e6e6e6 (primary), #9ca3af (secondary), #6b7280 (muted)
      Nav buttons: #f7673a (enabled), #4b4b4b (disabled)
      Error:       #ef4444
    """

    # Primary accent - orange (used for active states, highlights, branding)
    ACCENT_PRIMARY = "#f7673a"

    # Secondary accent - blue (used for info, secondary actions)
    ACCENT_SECONDARY = "#4a9eff"

    # Semantic accents
    ACCENT_ERROR = "#ef4444"     # Red for errors

    # Text colors (light text on dark background)
    TEXT_PRIMARY = "#e6e6e6"     # Main text
    TEXT_SECONDARY = "#9ca3af"   # Muted/secondary text
    TEXT_MUTED = "#6b7280"       # Even more muted
    TEXT_WHITE = "#ffffff"       # Pure white text

    # Background colors (darkest to lightest)
    BG_PRIMARY = "#141414"       # Main app background
    BG_SECONDARY = "#1b1b1b"     # Media well
    BG_TERTIARY = "#232323"      # Toasts, elevated surfaces
    BG_HOVER = "#2e2e2e"         # Hover state background

    # Border colors
    BORDER_DEFAULT = "#2e2e2e"   # Standard borders

    # Navigation button tints
    NAV_ENABLED = ACCENT_PRIMARY
    NAV_DISABLED = "#4b4b4b"

    PLACEHOLDER = TEXT_MUTED
    SPINNER = "#ffffff"


class Fonts:
    """Font sizes and weights."""

    SIZE_MD = 13
    SIZE_LG = 14
    SIZE_XL = 15

    WEIGHT_NORMAL = 400
    WEIGHT_SEMIBOLD = 600


class Spacing:
    """Spacing and sizing constants."""

    MD = 12
    LG = 16
    XL = 20
    XXL = 24

    # Border radius
    RADIUS_LG = 8
    RADIUS_XL = 10

    # Icon sizes
    ICON_LG = 24
    PLACEHOLDER_ICON = 96

    # Round navigation buttons
    NAV_BUTTON = 56
    SPINNER = 40


class Styles:
    """Pre-built stylesheet snippets for dynamic/programmatic styling."""

    WINDOW = f"""
        QWidget#memeWindow {{
            background-color: {Colors.BG_PRIMARY};
        }}
    """

    MEDIA_WELL = f"""
        QLabel#memeImage {{
            background-color: {Colors.BG_SECONDARY};
        }}
    """

    @staticmethod
    def label(
        color: str = Colors.TEXT_PRIMARY,
        size: int = Fonts.SIZE_MD,
        weight: int = Fonts.WEIGHT_NORMAL,
        padding: Optional[int] = None,
    ) -> str:
        """Generate label stylesheet with size validation."""
        # Ensure font size is valid (> 0) to avoid Qt warnings
        safe_size = max(1, size) if size else Fonts.SIZE_MD
        style = f"color: {color}; font-size: {safe_size}px; font-weight: {weight};"
        if padding is not None:
            style += f" padding: {padding}px;"
        return f"QLabel {{ {style} }}"

    @staticmethod
    def nav_button(enabled: bool) -> str:
        """Round navigation button tinted by its enabled state."""
        bg = Colors.NAV_ENABLED if enabled else Colors.NAV_DISABLED
        radius = Spacing.NAV_BUTTON // 2
        return f"""
            QPushButton {{
                background-color: {bg};
                border: none;
                border-radius: {radius}px;
            }}
            QPushButton:hover {{ border: 2px solid {Colors.TEXT_WHITE}; }}
            QPushButton:disabled {{ border: none; }}
        """

    @staticmethod
    def button_primary() -> str:
        """Primary action button style (Retry)."""
        return f"""
            QPushButton {{
                background-color: {Colors.ACCENT_PRIMARY};
                border: 1px solid {Colors.ACCENT_PRIMARY};
                border-radius: {Spacing.RADIUS_LG}px;
                color: {Colors.TEXT_WHITE};
                font-weight: {Fonts.WEIGHT_SEMIBOLD};
                padding: 9px 18px;
            }}
            QPushButton:hover {{ background-color: #ff7a4f; }}
            QPushButton:disabled {{
                background-color: {Colors.BG_HOVER};
                border-color: {Colors.BORDER_DEFAULT};
                color: {Colors.TEXT_MUTED};
            }}
        """
