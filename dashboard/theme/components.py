"""
Reusable Styled Components for the Olympic History Dashboard
"""

import streamlit as st
from .colors import (
    NAVY_PRIMARY, GOLD, TEXT_PRIMARY, TEXT_SECONDARY, WARNING, DANGER, INFO
)


def render_header(title: str, subtitle: str = None):
    """
    Render the dashboard header.

    Args:
        title: Main header title
        subtitle: Optional subtitle text
    """
    subtitle_html = f'<p>{subtitle}</p>' if subtitle else ''

    st.markdown(f"""
    <div class="or-header">
        <h1>{title}</h1>
        {subtitle_html}
    </div>
    """, unsafe_allow_html=True)


def section_header(title: str):
    """Render a section header with accent bar."""
    st.markdown(
        f'<div class="or-section-header">{title}</div>',
        unsafe_allow_html=True,
    )


def stat_row(stats: list):
    """
    Render a row of small stat items.

    Args:
        stats: List of tuples [(label, value), ...]
    """
    cols = st.columns(len(stats))
    for i, (label, value) in enumerate(stats):
        with cols[i]:
            st.markdown(f"""
            <div style="text-align: center; padding: 0.75rem;">
                <div style="font-size: 0.75rem; color: {TEXT_SECONDARY}; text-transform: uppercase;">{label}</div>
                <div style="font-size: 1.25rem; font-weight: 600; color: {NAVY_PRIMARY};">{value}</div>
            </div>
            """, unsafe_allow_html=True)


def alert_box(message: str, alert_type: str = 'info'):
    """
    Render a styled alert box.

    Args:
        message: Alert message text
        alert_type: Type of alert ('info', 'warning', 'danger')
    """
    colors = {
        'info': (INFO, 'rgba(0, 133, 199, 0.1)'),
        'warning': (WARNING, 'rgba(255, 184, 0, 0.1)'),
        'danger': (DANGER, 'rgba(220, 53, 69, 0.1)'),
    }
    border_color, bg_color = colors.get(alert_type, colors['info'])

    st.markdown(f"""
    <div style="
        background: {bg_color};
        border-left: 4px solid {border_color};
        border-radius: 8px;
        padding: 1rem 1.25rem;
        margin: 0.75rem 0;
        color: {TEXT_PRIMARY};
    ">
        {message}
    </div>
    """, unsafe_allow_html=True)


def get_main_css():
    """Return the dashboard stylesheet as a string."""
    return f"""
    <style>
    .or-header {{
        background: linear-gradient(135deg, {NAVY_PRIMARY} 0%, #0B1F3A 100%);
        padding: 1.5rem 2rem;
        border-radius: 12px;
        border-bottom: 4px solid {GOLD};
        margin-bottom: 1.5rem;
    }}
    .or-header h1 {{
        color: white;
        margin: 0;
        font-size: 2rem;
    }}
    .or-header p {{
        color: {GOLD};
        margin: 0.5rem 0 0 0;
    }}
    .or-section-header {{
        border-left: 4px solid {GOLD};
        padding-left: 0.75rem;
        margin: 1rem 0 0.75rem 0;
        font-size: 1.2rem;
        font-weight: 600;
        color: {TEXT_PRIMARY};
    }}
    </style>
    """
