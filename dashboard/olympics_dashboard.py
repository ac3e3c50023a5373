"""
OLYMPIC HISTORY DASHBOARD

Interactive view of the Olympic history report:
- Participation trend by sex with notable Games marked
- Medal leaderboard (Total > Gold > Silver > Bronze)
- Age distribution per sport for a chosen Games
- Men's 100m world record progression

Run with:
    streamlit run dashboard/olympics_dashboard.py
"""

import os
import sys

import pandas as pd
import streamlit as st

# Add parent directory to path for imports (works locally and on Streamlit Cloud)
_current_dir = os.path.dirname(os.path.abspath(__file__))
_parent_dir = os.path.dirname(_current_dir)
if _parent_dir not in sys.path:
    sys.path.insert(0, _parent_dir)

from config.olympics_config import AnalysisConfig, PARTICIPATION_NOTES, SEASONS
from dashboard.theme import alert_box, get_main_css, render_header, section_header, stat_row
from dashboard.utils.data_loader import DataLoadError, load_athlete_events, load_world_records
from dashboard.utils.olympic_analysis import (
    age_distribution,
    medal_leaderboard,
    participation_trend,
    record_intervals,
    resolve_open_intervals,
)
from dashboard.utils.olympic_charts import (
    age_distribution_chart,
    medal_leaderboard_chart,
    participation_trend_chart,
    record_progression_chart,
)


# ============================================================================
# PAGE CONFIGURATION
# ============================================================================

st.set_page_config(
    page_title="Olympic History | Analysis Dashboard",
    page_icon="🏅",
    layout="wide",
    initial_sidebar_state="expanded",
)
st.markdown(get_main_css(), unsafe_allow_html=True)

try:
    config = AnalysisConfig.from_env()
    config.validate()
except ValueError as e:
    st.error(f"⚠️ {e}")
    st.stop()


# ============================================================================
# DATA LOADING
# ============================================================================

@st.cache_data(ttl=3600, show_spinner="Loading athlete events...")
def _load_events(path: str) -> pd.DataFrame:
    return load_athlete_events(path)


@st.cache_data(ttl=3600, show_spinner="Loading world records...")
def _load_records(path: str) -> pd.DataFrame:
    return load_world_records(path)


try:
    events = _load_events(config.athlete_events_path)
    records = _load_records(config.world_records_path)
except DataLoadError as e:
    st.error(f"⚠️ {e}")
    st.stop()


def _download_button(df: pd.DataFrame, name: str):
    st.download_button(
        label=f"Download {name} (CSV)",
        data=df.to_csv(index=False).encode('utf-8'),
        file_name=f"{name}.csv",
        mime='text/csv',
    )


# ============================================================================
# SIDEBAR FILTERS
# ============================================================================

st.sidebar.markdown("## 🎯 Filters")
season = st.sidebar.selectbox("Season", list(SEASONS), index=list(SEASONS).index(config.SEASON))

games_years = sorted(events.loc[events['Season'] == season, 'Year'].dropna().astype(int).unique())
if not games_years:
    st.warning(f"No {season} Games in the athlete data.")
    st.stop()
default_year = config.AGE_YEAR if config.AGE_YEAR in games_years else games_years[-1]
age_year = st.sidebar.selectbox("Games for age distribution", games_years, index=games_years.index(default_year))
top_n = st.sidebar.slider(
    "Leaderboard size",
    min_value=1,
    max_value=max(30, config.LEADERBOARD_SIZE),
    value=config.LEADERBOARD_SIZE,
)


# ============================================================================
# MAIN CONTENT
# ============================================================================

render_header("Olympic History", subtitle=f"{season} Games, {games_years[0]}–{games_years[-1]}")
stat_row([
    ("Athlete rows", f"{len(events):,}"),
    ("Games", len(games_years)),
    ("Sports", events.loc[events['Season'] == season, 'Sport'].nunique()),
    ("World records", len(records)),
])

tab_trend, tab_medals, tab_ages, tab_records = st.tabs([
    "📈 Participation", "🥇 Medal Leaderboard", "🎂 Age Distribution", "⏱️ 100m Records",
])

with tab_trend:
    section_header("Athletes per Games by sex")
    trend = participation_trend(events, season=season)
    st.plotly_chart(participation_trend_chart(trend, notes=PARTICIPATION_NOTES, season=season), use_container_width=True)
    with st.expander("Data"):
        wide = trend.pivot(index='Year', columns='Category', values='Athletes') if not trend.empty else trend
        st.dataframe(wide, use_container_width=True)
        _download_button(trend, 'participation')

with tab_medals:
    section_header("Most decorated athletes")
    board = medal_leaderboard(events, season=season, top_n=top_n, label_overrides=config.LABEL_OVERRIDES)
    st.plotly_chart(medal_leaderboard_chart(board, season=season), use_container_width=True)
    with st.expander("Data"):
        st.dataframe(board, use_container_width=True, hide_index=True)
        _download_button(board, 'leaderboard')

with tab_ages:
    section_header(f"Age groups per sport, {season} {age_year}")
    distribution = age_distribution(
        events,
        year=age_year,
        season=season,
        age_min=config.AGE_MIN,
        age_max=config.AGE_MAX,
        bucket_width=config.AGE_BUCKET_WIDTH,
    )
    games = events[(events['Year'] == age_year) & (events['Season'] == season)]
    out_of_range = games['Age'].notna() & ((games['Age'] < config.AGE_MIN) | (games['Age'] >= config.AGE_MAX))
    if out_of_range.any():
        alert_box(
            f"{int(out_of_range.sum())} entries with ages outside "
            f"{config.AGE_MIN}–{config.AGE_MAX - 1} are not shown.",
            alert_type='warning',
        )
    st.plotly_chart(age_distribution_chart(distribution, year=age_year, season=season), use_container_width=True)
    with st.expander("Data"):
        st.dataframe(distribution, use_container_width=True, hide_index=True)
        _download_button(distribution, 'age_distribution')

with tab_records:
    section_header("How long each record stood")
    intervals = record_intervals(records, date_format=config.RECORD_DATE_FORMAT)
    now = pd.Timestamp.now()
    st.plotly_chart(
        record_progression_chart(intervals, palette=config.NATIONALITY_COLORS, now=now),
        use_container_width=True,
    )
    with st.expander("Data"):
        st.dataframe(resolve_open_intervals(intervals, now), use_container_width=True, hide_index=True)
        _download_button(intervals, 'record_intervals')
