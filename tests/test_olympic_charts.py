import logging

import pandas as pd

from config.olympics_config import HistoricalNote, NATIONALITY_COLORS
from dashboard.theme.colors import GRAY_NEUTRAL, MEDAL_COLORS
from dashboard.utils.olympic_analysis import (
    age_distribution,
    medal_leaderboard,
    participation_trend,
    record_intervals,
)
from dashboard.utils.olympic_charts import (
    age_distribution_chart,
    medal_leaderboard_chart,
    participation_trend_chart,
    record_progression_chart,
)


def annotation_texts(fig):
    return [a.text for a in fig.layout.annotations]


def test_participation_chart_marks_notes_in_range(event_factory, events_frame):
    events = events_frame([
        event_factory(1, sex="M", year=1896),
        event_factory(2, sex="F", year=1900),
        event_factory(3, sex="F", year=1920),
    ])
    notes = [
        HistoricalNote(1900, "Women compete for the first time"),
        HistoricalNote(1916, "Cancelled (World War I)"),
        HistoricalNote(1980, "US-led boycott"),
    ]

    fig = participation_trend_chart(participation_trend(events), notes=notes)

    assert sorted(trace.name for trace in fig.data) == ["Men", "Total", "Women"]
    texts = annotation_texts(fig)
    assert "1900: Women compete for the first time" in texts
    assert "1916: Cancelled (World War I)" in texts
    assert not any("1980" in t for t in texts)
    assert "participation" in fig.layout.title.text


def test_leaderboard_chart_bars_per_medal_kind(event_factory, events_frame):
    events = events_frame([
        event_factory(1, medal="Gold", name="Top"),
        event_factory(1, medal="Gold", name="Top", event="Second final"),
        event_factory(2, medal="Bronze", name="Next"),
    ])
    board = medal_leaderboard(events)

    fig = medal_leaderboard_chart(board)

    names = [trace.name for trace in fig.data]
    assert names == ["Total", "Gold", "Silver", "Bronze"]
    gold = fig.data[names.index("Gold")]
    assert gold.marker.color == MEDAL_COLORS["Gold"]
    assert list(gold.y) == ["Top (USA)", "Next (USA)"]
    assert list(gold.x) == [2, 0]


def test_age_chart_is_sport_by_bucket_heatmap(event_factory, events_frame):
    events = events_frame([
        event_factory(1, sport="Archery", age=21),
        event_factory(2, sport="Rowing", age=35),
        event_factory(3, sport="Rowing", age=23),
    ])
    dist = age_distribution(events, year=2016)

    fig = age_distribution_chart(dist, year=2016)

    heatmap = fig.data[0]
    assert heatmap.type == "heatmap"
    assert list(heatmap.y) == ["Archery", "Rowing"]
    assert len(heatmap.x) == 14
    assert heatmap.z[1][list(heatmap.x).index("34–37")] == 50.0
    assert "2016" in fig.layout.title.text


def test_record_chart_segments_and_open_end(world_records):
    intervals = record_intervals(world_records)
    now = pd.Timestamp("2024-01-01")

    fig = record_progression_chart(intervals, now=now)

    assert len(fig.data) == len(intervals)
    last = fig.data[-1]
    assert last.line.dash == "dash"
    assert pd.Timestamp(last.x[1]) == now
    assert fig.data[0].line.dash == "solid"
    assert fig.data[0].line.color == NATIONALITY_COLORS["United States"]
    # one legend entry per nationality
    assert sum(1 for t in fig.data if t.showlegend) == 3
    assert any("Usain Bolt" in t for t in annotation_texts(fig))


def test_record_chart_unknown_nationality_uses_fallback(caplog):
    records = pd.DataFrame([
        {"Time": 9.50, "Wind": 0.0, "Athlete": "Future Star", "Nationality": "Kenya", "Date": "01/01/2030"},
    ])

    with caplog.at_level(logging.WARNING):
        fig = record_progression_chart(record_intervals(records), now=pd.Timestamp("2031-01-01"))

    assert fig.data[0].line.color == GRAY_NEUTRAL
    assert "Kenya" in caplog.text


def test_empty_tables_render_placeholder(events_frame, event_factory):
    events = events_frame([event_factory(1, season="Winter")])

    fig = participation_trend_chart(participation_trend(events))

    assert len(fig.data) == 0
    assert annotation_texts(fig) == ["No data available"]


def test_theme_exports_resolve():
    import dashboard.theme as theme

    missing = [name for name in theme.__all__ if not hasattr(theme, name)]

    assert missing == []
