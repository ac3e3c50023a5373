"""
Report Charts
Olympic History Report

Plotly figures for the four derived tables, with annotation overlays:
- Participation trend line chart with markers for notable Games
- Medal leaderboard grouped bars
- Age distribution heatmap
- 100m world-record progression timeline
"""

import logging
from typing import Dict, List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from config.olympics_config import HistoricalNote, NATIONALITY_COLORS, PARTICIPATION_NOTES
from dashboard.theme import (
    GRAY_NEUTRAL,
    HEATMAP_SCALE,
    MEDAL_COLORS,
    PARTICIPATION_COLORS,
    TEXT_MUTED,
    add_segment_label,
    add_year_marker,
    apply_report_theme,
)
from dashboard.utils.olympic_analysis import (
    MEDAL_DISPLAY_ORDER,
    PARTICIPATION_CATEGORIES,
    medal_leaderboard_long,
    resolve_open_intervals,
)

logger = logging.getLogger(__name__)


def _empty_figure(title: str, message: str = 'No data available') -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text=message,
        x=0.5,
        y=0.5,
        xref='paper',
        yref='paper',
        showarrow=False,
        font=dict(size=14, color=TEXT_MUTED),
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    return apply_report_theme(fig, title=title, show_legend=False)


# ============================================================================
# Q1 - PARTICIPATION TREND
# ============================================================================

def participation_trend_chart(
    trend: pd.DataFrame,
    notes: Optional[List[HistoricalNote]] = None,
    season: str = 'Summer',
) -> go.Figure:
    """
    Line chart of athletes per Games, one line per category.

    Notes whose year falls outside the plotted years are skipped.
    """
    title = f'{season} Olympics participation by sex'
    if trend.empty:
        return _empty_figure(title)

    notes = PARTICIPATION_NOTES if notes is None else notes

    fig = px.line(
        trend,
        x='Year',
        y='Athletes',
        color='Category',
        markers=True,
        color_discrete_map=PARTICIPATION_COLORS,
        category_orders={'Category': PARTICIPATION_CATEGORIES},
    )

    first_year, last_year = trend['Year'].min(), trend['Year'].max()
    for note in notes:
        if first_year <= note.year <= last_year:
            add_year_marker(fig, note.year, f'{note.year}: {note.text}')

    fig.update_layout(legend_title_text='')
    fig.update_yaxes(title_text='Athletes', rangemode='tozero')
    return apply_report_theme(fig, title=title)


# ============================================================================
# Q2 - MEDAL LEADERBOARD
# ============================================================================

def medal_leaderboard_chart(board: pd.DataFrame, season: str = 'Summer') -> go.Figure:
    """Horizontal grouped bars, most decorated athlete at the top."""
    title = f'Most decorated {season} Olympians'
    if board.empty:
        return _empty_figure(title)

    long = medal_leaderboard_long(board)

    fig = px.bar(
        long,
        x='Medals',
        y='Label',
        color='Category',
        orientation='h',
        barmode='group',
        text='Medals',
        color_discrete_map=MEDAL_COLORS,
        category_orders={
            'Category': MEDAL_DISPLAY_ORDER,
            'Label': list(board['Label']),
        },
    )
    fig.update_traces(textposition='outside', marker_line_width=0)
    fig.update_yaxes(autorange='reversed', title_text='')
    fig.update_layout(
        legend_title_text='',
        height=max(450, 70 * len(board)),
        bargap=0.25,
    )
    return apply_report_theme(fig, title=title)


# ============================================================================
# Q3 - AGE DISTRIBUTION
# ============================================================================

def age_distribution_chart(distribution: pd.DataFrame, year: int, season: str = 'Summer') -> go.Figure:
    """
    Heatmap of the share of each sport's athletes per age group.

    Parameters:
    -----------
    distribution : pd.DataFrame
        Output of age_distribution()
    year : int
        Games year, used in the title
    season : str
        Games season, used in the title
    """
    title = f'Age distribution by sport, {season} {year}'
    if distribution.empty:
        return _empty_figure(title)

    age_groups = list(pd.unique(distribution['Age group']))
    grid = distribution.pivot(index='Sport', columns='Age group', values='Percentage')
    grid = grid.reindex(columns=age_groups)
    participants = distribution.pivot(index='Sport', columns='Age group', values='Participants')
    participants = participants.reindex(index=grid.index, columns=age_groups)

    fig = go.Figure(go.Heatmap(
        z=grid.values,
        x=age_groups,
        y=list(grid.index),
        customdata=participants.values,
        colorscale=HEATMAP_SCALE,
        zmin=0,
        colorbar=dict(title='%'),
        hovertemplate='%{y}<br>Age %{x}: %{z:.1f}% (%{customdata} athletes)<extra></extra>',
    ))
    fig.update_yaxes(autorange='reversed', title_text='')
    fig.update_xaxes(title_text='Age group', type='category')
    fig.update_layout(height=max(450, 22 * len(grid.index)))
    return apply_report_theme(fig, title=title, show_legend=False)


# ============================================================================
# Q4 - WORLD RECORD PROGRESSION
# ============================================================================

def record_progression_chart(
    intervals: pd.DataFrame,
    palette: Optional[Dict[str, str]] = None,
    now: Optional[pd.Timestamp] = None,
) -> go.Figure:
    """
    One horizontal segment per world record, from the day it was set until
    it was beaten. The standing record is extended to `now` (default: the
    current time) and drawn dashed.
    """
    title = "Men's 100m world record progression"
    if intervals.empty:
        return _empty_figure(title)

    palette = NATIONALITY_COLORS if palette is None else palette
    resolved = resolve_open_intervals(intervals, now)
    ongoing = intervals['End'].isna().to_numpy()

    unstyled = sorted(set(resolved['Nationality'].dropna()) - set(palette))
    if unstyled:
        logger.warning(f"No palette colour for nationalities: {', '.join(unstyled)}")

    fig = go.Figure()
    shown = set()
    for i, row in enumerate(resolved.to_dict('records')):
        nationality = row['Nationality'] if pd.notna(row['Nationality']) else 'Unknown'
        color = palette.get(nationality, GRAY_NEUTRAL)
        fig.add_trace(go.Scatter(
            x=[row['Start'], row['End']],
            y=[row['Time'], row['Time']],
            mode='lines+markers',
            name=nationality,
            legendgroup=nationality,
            showlegend=nationality not in shown,
            line=dict(color=color, width=4, dash='dash' if ongoing[i] else 'solid'),
            marker=dict(size=[8, 0], color=color),
            hovertemplate=(
                f"{row['Athlete']} ({nationality})<br>"
                f"{row['Time']:.2f}s, {row['Days standing']:,} days<extra></extra>"
            ),
        ))
        shown.add(nationality)
        add_segment_label(fig, row['Start'], row['Time'], f"{row['Athlete']} {row['Time']:.2f}", color=color)

    fig.update_yaxes(title_text='Time (s)')
    fig.update_xaxes(title_text='')
    fig.update_layout(legend_title_text='Nationality')
    return apply_report_theme(fig, title=title)
