"""
Theme Module for the Olympic History Report

This module provides centralized styling including:
- Color palette and design tokens
- Reusable Streamlit components and stylesheet
- Plotly chart theming

Usage:
    from dashboard.theme import apply_report_theme, add_year_marker
    from dashboard.theme import MEDAL_COLORS, PARTICIPATION_COLORS
"""

# Color constants and palettes
from .colors import (
    # Primary colors
    NAVY_PRIMARY,
    NAVY_DARK,
    GRAY_NEUTRAL,
    # Medal colors
    GOLD,
    SILVER,
    BRONZE,
    # Text colors
    TEXT_PRIMARY,
    TEXT_SECONDARY,
    TEXT_MUTED,
    # Collections
    HEATMAP_SCALE,
    MEDAL_COLORS,
    PARTICIPATION_COLORS,
)

# UI component functions
from .components import (
    get_main_css,
    render_header,
    section_header,
    stat_row,
    alert_box,
)

# Plotly theming functions
from .plotly_theme import (
    apply_report_theme,
    add_year_marker,
    add_segment_label,
)

__version__ = '1.0.0'
__all__ = [
    # Colors
    'NAVY_PRIMARY', 'NAVY_DARK', 'GRAY_NEUTRAL', 'GOLD', 'SILVER', 'BRONZE',
    'TEXT_PRIMARY', 'TEXT_SECONDARY', 'TEXT_MUTED',
    'HEATMAP_SCALE', 'MEDAL_COLORS', 'PARTICIPATION_COLORS',
    # Components
    'get_main_css', 'render_header', 'section_header', 'stat_row', 'alert_box',
    # Plotly
    'apply_report_theme', 'add_year_marker', 'add_segment_label',
]
