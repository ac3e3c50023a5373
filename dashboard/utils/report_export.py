"""
Olympic History Report - HTML Export Module

Assembles the report charts and their derived tables into one HTML
document. Charts are embedded as interactive Plotly divs; the Plotly JS
bundle is loaded once from the CDN.

Usage:
    from dashboard.utils.report_export import generate_html_report, write_html_report
"""

import html
import logging
import os
from datetime import datetime
from typing import Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from dashboard.theme.colors import GOLD, NAVY_DARK, NAVY_PRIMARY

logger = logging.getLogger(__name__)


# ===================================================================
# Helper Functions
# ===================================================================

def _fig_to_div(fig: go.Figure, include_plotlyjs) -> str:
    """
    Convert a Plotly figure to an embeddable HTML div.

    Args:
        fig: Plotly figure object.
        include_plotlyjs: 'cdn' for the first chart, False afterwards.
    """
    return fig.to_html(full_html=False, include_plotlyjs=include_plotlyjs)


def _build_html_header(title: str, subtitle: str = "") -> str:
    """
    Build the report header block.

    Args:
        title: Main heading text.
        subtitle: Optional sub-heading text.

    Returns:
        HTML string for the header section.
    """
    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="color: {GOLD}; font-size: 1.1rem; margin: 0.5rem 0 0 0;">'
            f'{html.escape(subtitle)}</p>'
        )

    return f"""
    <div style="background: linear-gradient(135deg, {NAVY_PRIMARY} 0%, {NAVY_DARK} 100%);
         padding: 2rem; border-radius: 12px; margin-bottom: 2rem;
         border-bottom: 4px solid {GOLD}; text-align: center;">
        <h1 style="color: white; margin: 0; font-size: 2rem;">{html.escape(title)}</h1>
        {subtitle_html}
    </div>
    """


def _section_title(title: str) -> str:
    return (
        f'<div style="background: linear-gradient(135deg, {NAVY_PRIMARY} 0%, {NAVY_DARK} 100%); '
        f'padding: 0.75rem 1rem; border-radius: 8px 8px 0 0; '
        f'border-left: 4px solid {GOLD};">'
        f'<h3 style="color: white; margin: 0; font-size: 1rem;">{html.escape(title)}</h3></div>'
    )


def _build_html_table(df: pd.DataFrame, title: str = "", max_rows: int = 60) -> str:
    """
    Build a styled HTML table.

    Float columns are shown with two decimals, datetime columns as YYYY-MM-DD
    and missing values as blanks. Only the first `max_rows` rows are shown.
    """
    if df is None or df.empty:
        return ""

    display_df = df.head(max_rows).copy()

    for col in display_df.select_dtypes(include=["float64", "float32"]).columns:
        display_df[col] = display_df[col].map(lambda x: f"{x:.2f}" if pd.notna(x) else "")

    for col in display_df.select_dtypes(include=["datetime64"]).columns:
        display_df[col] = display_df[col].dt.strftime("%Y-%m-%d").fillna("")

    display_df = display_df.astype(object).where(display_df.notna(), "")

    header_cells = "".join(
        f'<th style="background: {NAVY_PRIMARY}; color: white; padding: 10px 12px; '
        f'text-align: center; font-weight: 600; font-size: 0.85rem; '
        f'border-bottom: 3px solid {GOLD};">{html.escape(str(col))}</th>'
        for col in display_df.columns
    )

    body_rows = ""
    for idx, row in enumerate(display_df.itertuples(index=False)):
        bg = "#ffffff" if idx % 2 == 0 else "#f8f9fa"
        cells = "".join(
            f'<td style="padding: 8px 12px; text-align: center; font-size: 0.85rem; '
            f'border-bottom: 1px solid #e9ecef;">{html.escape(str(val))}</td>'
            for val in row
        )
        body_rows += f'<tr style="background: {bg};">{cells}</tr>\n'

    truncated = ""
    if len(df) > max_rows:
        truncated = (
            f'<p style="color: #999; font-size: 0.8rem;">Showing {max_rows} of {len(df)} rows.</p>'
        )

    return f"""
    {_section_title(title) if title else ""}
    <table style="width: 100%; border-collapse: collapse; margin-bottom: 1.5rem;
           box-shadow: 0 2px 8px rgba(0,0,0,0.08); font-family: Inter, sans-serif;">
        <thead><tr>{header_cells}</tr></thead>
        <tbody>{body_rows}</tbody>
    </table>
    {truncated}
    """


def _build_html_footer() -> str:
    now_str = datetime.now().strftime("%Y-%m-%d %H:%M")
    return f"""
    <div style="margin-top: 3rem; padding: 1rem; border-top: 2px solid {GOLD};
         text-align: center; color: #999; font-size: 0.8rem; font-family: Inter, sans-serif;">
        <p style="margin: 0;">Olympic History Report</p>
        <p style="margin: 0.25rem 0 0 0;">Generated: {now_str}</p>
    </div>
    """


def _safe_metadata(metadata: Optional[dict]) -> dict:
    """
    Return metadata with defaults for any missing keys.

    Args:
        metadata: Caller-supplied metadata dict (may be None or partial).
    """
    defaults = {
        "season": "Summer",
        "age_year": "",
        "athlete_rows": 0,
        "record_rows": 0,
        "generated_at": datetime.now().strftime("%Y-%m-%d %H:%M"),
    }
    merged = dict(defaults)
    merged.update(metadata or {})
    return merged


# ===================================================================
# HTML Report
# ===================================================================

def generate_html_report(
    charts: Optional[Dict[str, go.Figure]] = None,
    data_tables: Optional[Dict[str, pd.DataFrame]] = None,
    metadata: Optional[dict] = None,
    title: str = "Olympic History Report",
) -> str:
    """
    Generate an HTML report with one section per chart.

    Args:
        charts: Map of chart_name -> Plotly figure.
        data_tables: Map of table_name -> DataFrame, rendered after the charts.
        metadata: Report metadata dict.
        title: Report heading.

    Returns:
        Complete HTML document as a string.
    """
    charts = charts or {}
    data_tables = data_tables or {}
    meta = _safe_metadata(metadata)

    info_items = [f"<strong>Season:</strong> {html.escape(str(meta['season']))}"]
    if meta.get("age_year"):
        info_items.append(f"<strong>Age distribution Games:</strong> {meta['age_year']}")
    if meta.get("athlete_rows"):
        info_items.append(f"<strong>Athlete rows:</strong> {meta['athlete_rows']:,}")
    if meta.get("record_rows"):
        info_items.append(f"<strong>World records:</strong> {meta['record_rows']}")

    info_bar = (
        f'<div style="display: flex; flex-wrap: wrap; gap: 1.5rem; padding: 1rem; '
        f'background: #f8f9fa; border-radius: 8px; margin-bottom: 1.5rem; '
        f'border-left: 4px solid {GOLD}; font-family: Inter, sans-serif; '
        f'font-size: 0.9rem; color: #333;">'
        + "".join(f"<span>{item}</span>" for item in info_items)
        + "</div>"
    )

    chart_sections = ""
    for i, (chart_name, fig) in enumerate(charts.items()):
        div = _fig_to_div(fig, include_plotlyjs="cdn" if i == 0 else False)
        chart_sections += f"""
        <div style="margin-bottom: 2rem;">
            {_section_title(chart_name)}
            <div style="background: white; padding: 1rem;
                 border: 1px solid #e9ecef; border-radius: 0 0 8px 8px;">
                {div}
            </div>
        </div>
        """

    table_sections = ""
    for table_name, df in data_tables.items():
        table_sections += _build_html_table(df, title=table_name)

    header = _build_html_header(title, subtitle=f"Generated: {meta['generated_at']}")
    footer = _build_html_footer()

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html.escape(title)}</title>
    <style>
        * {{ margin: 0; padding: 0; box-sizing: border-box; }}
        body {{
            font-family: Inter, -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
            background: #f0f2f5;
            color: #333;
            line-height: 1.6;
        }}
        .container {{
            max-width: 1200px;
            margin: 2rem auto;
            padding: 2rem;
            background: white;
            border-radius: 12px;
            box-shadow: 0 4px 20px rgba(0,0,0,0.08);
        }}
        @media print {{
            body {{ background: white; }}
            .container {{ box-shadow: none; margin: 0; padding: 1rem; }}
        }}
    </style>
</head>
<body>
    <div class="container">
        {header}
        {info_bar}
        {chart_sections}
        {table_sections}
        {footer}
    </div>
</body>
</html>"""


def write_html_report(path: str, report_html: str) -> str:
    """Write a generated report to disk and return its path."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(report_html)
    logger.info(f"Report written to {path}")
    return path
