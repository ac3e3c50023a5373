"""
Plotly Chart Theming for the Olympic History Report
"""

from .colors import (
    GRAY_NEUTRAL, TEXT_PRIMARY, TEXT_SECONDARY, TEXT_MUTED, BORDER
)


def get_plotly_layout():
    """
    Return consistent Plotly layout settings.

    Returns:
        dict: Layout configuration for Plotly figures
    """
    return {
        'font': {
            'family': 'Source Sans 3, Inter, sans-serif',
            'color': TEXT_PRIMARY,
            'size': 12,
        },
        'paper_bgcolor': 'white',
        'plot_bgcolor': 'white',
        'margin': {'l': 60, 'r': 30, 't': 60, 'b': 50},
        'hovermode': 'closest',
        'legend': {
            'bgcolor': 'rgba(255, 255, 255, 0.9)',
            'bordercolor': BORDER,
            'borderwidth': 1,
            'font': {'size': 11},
        },
    }


def get_axis_style():
    """
    Return consistent axis styling.

    Returns:
        dict: Axis configuration for Plotly figures
    """
    return {
        'gridcolor': 'rgba(128, 128, 128, 0.12)',
        'linecolor': BORDER,
        'tickfont': {'size': 11, 'color': TEXT_SECONDARY},
        'title_font': {'size': 12, 'color': TEXT_PRIMARY},
        'zeroline': False,
    }


def apply_report_theme(fig, title: str = None, show_legend: bool = True):
    """
    Apply report styling to a Plotly figure.

    Args:
        fig: Plotly figure object
        title: Optional chart title
        show_legend: Whether to show legend (default True)

    Returns:
        fig: Styled Plotly figure
    """
    layout = get_plotly_layout()
    axis_style = get_axis_style()

    fig.update_layout(
        font=layout['font'],
        paper_bgcolor=layout['paper_bgcolor'],
        plot_bgcolor=layout['plot_bgcolor'],
        margin=layout['margin'],
        hovermode=layout['hovermode'],
        showlegend=show_legend,
    )
    if show_legend:
        fig.update_layout(legend=layout['legend'])

    if title:
        fig.update_layout(
            title=dict(
                text=title,
                font=dict(
                    size=15,
                    family='Space Grotesk, Source Sans 3, sans-serif',
                    color=TEXT_PRIMARY,
                ),
                x=0,
                xanchor='left',
            )
        )

    fig.update_xaxes(**axis_style)
    fig.update_yaxes(**axis_style)

    return fig


def add_year_marker(fig, year: int, text: str, y_position: float = 1.0):
    """
    Add a dotted vertical marker with a rotated label at a Games year.

    Args:
        fig: Plotly figure object
        year: x-axis position
        text: Annotation text
        y_position: Label anchor in paper coordinates (0 bottom, 1 top)

    Returns:
        fig: Figure with marker added
    """
    fig.add_vline(x=year, line_dash='dot', line_color=GRAY_NEUTRAL, line_width=1)
    fig.add_annotation(
        x=year,
        y=y_position,
        yref='paper',
        text=text,
        showarrow=False,
        textangle=-90,
        xanchor='right',
        yanchor='top',
        font=dict(size=10, color=TEXT_MUTED),
    )
    return fig


def add_segment_label(fig, x, y, text: str, color: str = None):
    """
    Add a small text label next to a chart element.

    Returns:
        fig: Figure with label added
    """
    fig.add_annotation(
        x=x,
        y=y,
        text=text,
        showarrow=False,
        xanchor='left',
        yanchor='bottom',
        font=dict(size=10, color=color or TEXT_SECONDARY),
    )
    return fig
