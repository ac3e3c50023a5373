"""
Olympic History Analysis
Derived tables behind the four report charts

- Participation trend: Summer athletes per Games by sex
- Medal leaderboard: most decorated athletes, ranked Total > Gold > Silver > Bronze
- Age distribution: share of each sport's athletes per age group
- Record intervals: how long each 100m world record stood

Every function takes a loaded DataFrame plus explicit filter parameters and
returns a new DataFrame; inputs are never modified.
"""

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

SEX_CATEGORIES = {'M': 'Men', 'F': 'Women'}
PARTICIPATION_CATEGORIES = ['Men', 'Women', 'Total']

MEDAL_KINDS = ['Gold', 'Silver', 'Bronze']
MEDAL_DISPLAY_ORDER = ['Total', 'Gold', 'Silver', 'Bronze']

ATHLETE_KEYS = ['ID', 'Name', 'NOC', 'Team']
RECORD_COLUMNS = ['Time', 'Wind', 'Athlete', 'Nationality', 'Start', 'End']


# ============================================================================
# Q1 - PARTICIPATION TREND
# ============================================================================

def participation_trend(events: pd.DataFrame, season: str = 'Summer') -> pd.DataFrame:
    """
    Count distinct athletes per Games year, split by sex.

    An athlete entered in several events of the same Games counts once.

    Returns:
        Long-form DataFrame with columns Year, Category (Men/Women/Total)
        and Athletes, three rows per year.
    """
    seasonal = events[events['Season'] == season]
    distinct = seasonal[['Year', 'ID', 'Sex']].drop_duplicates()
    distinct = distinct[distinct['Sex'].isin(list(SEX_CATEGORIES))]

    if distinct.empty:
        return pd.DataFrame(columns=['Year', 'Category', 'Athletes'])

    wide = (
        distinct.groupby(['Year', 'Sex']).size()
        .unstack('Sex', fill_value=0)
        .rename(columns=SEX_CATEGORIES)
        .reindex(columns=['Men', 'Women'], fill_value=0)
    )
    wide.columns.name = None
    wide['Total'] = wide['Men'] + wide['Women']

    trend = wide.reset_index().melt(
        id_vars='Year',
        value_vars=PARTICIPATION_CATEGORIES,
        var_name='Category',
        value_name='Athletes',
    )
    trend['Year'] = trend['Year'].astype(int)
    trend['Athletes'] = trend['Athletes'].astype(int)
    trend['Category'] = pd.Categorical(
        trend['Category'], categories=PARTICIPATION_CATEGORIES, ordered=True
    )

    return trend.sort_values(['Year', 'Category']).reset_index(drop=True)


# ============================================================================
# Q2 - MEDAL LEADERBOARD
# ============================================================================

def medal_leaderboard(
    events: pd.DataFrame,
    season: str = 'Summer',
    top_n: int = 10,
    label_overrides: Optional[Dict[str, str]] = None,
) -> pd.DataFrame:
    """
    Rank athletes by medal haul.

    Parameters:
    -----------
    events : pd.DataFrame
        Athlete event records
    season : str
        Games season to count medals for
    top_n : int
        Number of athletes to keep
    label_overrides : dict
        Raw "Name (NOC)" label -> display label

    Ordering is descending by Total, then Gold, Silver and Bronze. Athletes
    tied on all four keep the order in which they first appear in `events`.
    """
    medals = events[(events['Season'] == season) & events['Medal'].notna()]
    medals = medals[medals['Medal'].isin(MEDAL_KINDS)]

    columns = ATHLETE_KEYS + MEDAL_KINDS + ['Total', 'Label']
    if medals.empty:
        return pd.DataFrame(columns=columns)

    first_seen = medals.groupby(ATHLETE_KEYS, sort=False, dropna=False).ngroup()
    medals = medals.assign(_order=first_seen)

    counts = (
        medals.groupby(['_order', 'Medal']).size()
        .unstack('Medal', fill_value=0)
        .reindex(columns=MEDAL_KINDS, fill_value=0)
        .astype(int)
    )
    athletes = medals.drop_duplicates('_order').set_index('_order')[ATHLETE_KEYS]
    board = athletes.join(counts).reset_index()
    board.columns.name = None
    board['Total'] = board[MEDAL_KINDS].sum(axis=1)

    board = board.sort_values(
        MEDAL_DISPLAY_ORDER + ['_order'],
        ascending=[False, False, False, False, True],
    ).head(top_n)

    labels = board['Name'].astype(str) + ' (' + board['NOC'].astype(str) + ')'
    if label_overrides:
        labels = labels.replace(label_overrides)
    board = board.assign(Label=labels)

    return board[columns].reset_index(drop=True)


def medal_leaderboard_long(board: pd.DataFrame) -> pd.DataFrame:
    """Reshape the leaderboard to (Label, Category, Medals) for grouped bars."""
    long = board.melt(
        id_vars='Label',
        value_vars=MEDAL_DISPLAY_ORDER,
        var_name='Category',
        value_name='Medals',
    )
    long['Category'] = pd.Categorical(
        long['Category'], categories=MEDAL_DISPLAY_ORDER, ordered=True
    )
    rank = {label: i for i, label in enumerate(board['Label'])}
    long['_rank'] = long['Label'].map(rank)
    long = long.sort_values(['_rank', 'Category']).drop(columns='_rank')
    return long.reset_index(drop=True)


# ============================================================================
# Q3 - AGE DISTRIBUTION
# ============================================================================

def age_buckets(age_min: int = 10, age_max: int = 64, width: int = 4) -> Tuple[List[int], List[str]]:
    """
    Bucket edges and labels partitioning [age_min, age_max).

    The last bucket is narrower when `width` does not divide the range.
    Labels read "lo–hi" with hi inclusive, e.g. "10–13".
    """
    if width <= 0:
        raise ValueError('Bucket width must be positive')
    if age_min >= age_max:
        raise ValueError(f"Empty age range [{age_min}, {age_max})")

    edges = list(range(age_min, age_max, width)) + [age_max]
    labels = [f"{lo}–{hi - 1}" for lo, hi in zip(edges[:-1], edges[1:])]
    return edges, labels


def age_distribution(
    events: pd.DataFrame,
    year: int,
    season: str = 'Summer',
    age_min: int = 10,
    age_max: int = 64,
    bucket_width: int = 4,
) -> pd.DataFrame:
    """
    Percentage of each sport's athletes falling in each age group.

    Athletes are counted once per sport. Every sport reports every age
    group, zero-filled. Ages outside [age_min, age_max) are dropped and
    reported in the log.

    Returns:
        DataFrame with columns Sport, Age group, Participants, Percentage
    """
    edges, labels = age_buckets(age_min, age_max, bucket_width)
    columns = ['Sport', 'Age group', 'Participants', 'Percentage']

    games = events[
        (events['Year'] == year) & (events['Season'] == season) & events['Age'].notna()
    ]
    sports = sorted(games['Sport'].dropna().unique())
    if not sports:
        logger.warning(f"No athletes with a known age for {season} {year}")
        return pd.DataFrame(columns=columns)

    bucketed = games.assign(
        **{'Age group': pd.cut(games['Age'], bins=edges, right=False, labels=labels)}
    )
    out_of_range = bucketed['Age group'].isna()
    if out_of_range.any():
        logger.warning(
            f"{int(out_of_range.sum())} rows with ages outside "
            f"[{age_min}, {age_max}) dropped for {season} {year}"
        )
    bucketed = bucketed[~out_of_range]
    bucketed = bucketed.assign(**{'Age group': bucketed['Age group'].astype(str)})

    grid = pd.MultiIndex.from_product([sports, labels], names=['Sport', 'Age group'])
    if bucketed.empty:
        counts = pd.Series(0, index=grid)
    else:
        counts = bucketed.groupby(['Sport', 'Age group'])['ID'].nunique()
        counts = counts.reindex(grid, fill_value=0).astype(int)

    totals = counts.groupby(level='Sport').transform('sum')
    percentage = counts.div(totals.replace(0, np.nan)).mul(100).fillna(0.0)

    distribution = pd.DataFrame({
        'Participants': counts,
        'Percentage': percentage,
    }).reset_index()

    return distribution[columns]


# ============================================================================
# Q4 - RECORD INTERVALS
# ============================================================================

def record_intervals(records: pd.DataFrame, date_format: str = '%m/%d/%Y') -> pd.DataFrame:
    """
    Period during which each world record stood.

    End is the Start of the next record in date order. The current record
    has End = NaT (still standing); see resolve_open_intervals().
    Rows sharing a date keep their input order.
    """
    dated = records.assign(
        Start=pd.to_datetime(records['Date'], format=date_format, errors='coerce')
    )
    unparsed = dated['Start'].isna()
    if unparsed.any():
        logger.warning(f"{int(unparsed.sum())} world record rows with unparseable dates dropped")
        dated = dated[~unparsed]

    dated = dated.sort_values('Start', kind='mergesort').reset_index(drop=True)
    dated['End'] = dated['Start'].shift(-1)

    return dated[RECORD_COLUMNS]


def resolve_open_intervals(intervals: pd.DataFrame, now: Optional[pd.Timestamp] = None) -> pd.DataFrame:
    """
    Copy of `intervals` with the open end replaced by `now`.

    Adds a 'Days standing' column. `now` defaults to the current time and is
    never written back to the derived table.
    """
    now = pd.Timestamp.now() if now is None else pd.Timestamp(now)
    resolved = intervals.copy()
    resolved['End'] = resolved['End'].fillna(now)
    resolved['Days standing'] = (resolved['End'] - resolved['Start']).dt.days
    return resolved
