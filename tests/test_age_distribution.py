import logging

import pytest

from dashboard.utils.olympic_analysis import age_buckets, age_distribution


def test_default_buckets_partition_10_to_64():
    edges, labels = age_buckets()

    assert edges[0] == 10 and edges[-1] == 64
    assert labels[0] == "10–13"
    assert labels[1] == "14–17"
    assert labels[-1] == "62–63"
    assert len(labels) == 14


def test_buckets_reject_invalid_range():
    with pytest.raises(ValueError):
        age_buckets(30, 30, 4)
    with pytest.raises(ValueError):
        age_buckets(10, 64, 0)


def test_percentages_sum_to_100_per_sport(event_factory, events_frame):
    events = events_frame(
        [event_factory(i, sport="Swimming", age=15 + i) for i in range(7)]
        + [event_factory(100 + i, sport="Shooting", age=30 + 3 * i) for i in range(5)]
    )

    dist = age_distribution(events, year=2016)

    sums = dist.groupby("Sport")["Percentage"].sum()
    assert sums["Swimming"] == pytest.approx(100.0, abs=1e-6)
    assert sums["Shooting"] == pytest.approx(100.0, abs=1e-6)


def test_every_sport_reports_every_bucket(event_factory, events_frame):
    events = events_frame([
        event_factory(1, sport="Archery", age=21),
        event_factory(2, sport="Rowing", age=35),
    ])

    dist = age_distribution(events, year=2016)
    _, labels = age_buckets()

    assert len(dist) == 2 * len(labels)
    archery = dist[dist["Sport"] == "Archery"].set_index("Age group")
    assert list(archery.index) == labels
    assert archery.loc["18–21", "Participants"] == 1
    assert archery.loc["18–21", "Percentage"] == pytest.approx(100.0)
    assert archery.loc["34–37", "Participants"] == 0
    assert archery.loc["34–37", "Percentage"] == 0.0


def test_bucket_bounds_are_lower_inclusive(event_factory, events_frame):
    events = events_frame([
        event_factory(1, age=10),
        event_factory(2, age=13),
        event_factory(3, age=14),
    ])

    dist = age_distribution(events, year=2016).set_index("Age group")

    assert dist.loc["10–13", "Participants"] == 2
    assert dist.loc["14–17", "Participants"] == 1


def test_out_of_range_ages_are_dropped_and_logged(event_factory, events_frame, caplog):
    events = events_frame([
        event_factory(1, sport="Equestrian", age=9),
        event_factory(2, sport="Equestrian", age=64),
        event_factory(3, sport="Equestrian", age=40),
        event_factory(4, sport="Art Competitions", age=72),
    ])

    with caplog.at_level(logging.WARNING):
        dist = age_distribution(events, year=2016)

    assert "3 rows with ages outside [10, 64)" in caplog.text
    equestrian = dist[dist["Sport"] == "Equestrian"]
    assert equestrian["Participants"].sum() == 1
    assert equestrian["Percentage"].sum() == pytest.approx(100.0)

    # every athlete of this sport is out of range: zeros, no division error
    art = dist[dist["Sport"] == "Art Competitions"]
    assert len(art) == len(age_buckets()[1])
    assert (art["Participants"] == 0).all()
    assert (art["Percentage"] == 0.0).all()


def test_athletes_counted_once_per_sport(event_factory, events_frame):
    events = events_frame(
        [event_factory(1, sport="Swimming", age=20, event=f"Swimming event {i}") for i in range(4)]
        + [event_factory(2, sport="Swimming", age=28)]
    )

    dist = age_distribution(events, year=2016).set_index("Age group")

    assert dist.loc["18–21", "Participants"] == 1
    assert dist.loc["18–21", "Percentage"] == pytest.approx(50.0)


def test_filters_year_season_and_missing_age(event_factory, events_frame):
    events = events_frame([
        event_factory(1, year=2016, age=22),
        event_factory(2, year=2012, age=22),
        event_factory(3, year=2016, season="Winter", age=22, sport="Biathlon"),
        event_factory(4, year=2016, age=None),
    ])

    dist = age_distribution(events, year=2016, season="Summer")

    assert set(dist["Sport"]) == {"Athletics"}
    assert dist["Participants"].sum() == 1


def test_configurable_range_and_width(event_factory, events_frame):
    events = events_frame([event_factory(1, age=18), event_factory(2, age=25)])

    dist = age_distribution(events, year=2016, age_min=15, age_max=30, bucket_width=5)

    assert list(dist["Age group"]) == ["15–19", "20–24", "25–29"]
    assert list(dist["Participants"]) == [1, 0, 1]


def test_no_games_rows_gives_empty_frame(event_factory, events_frame):
    dist = age_distribution(events_frame([event_factory(1, year=2000)]), year=2016)

    assert dist.empty
    assert list(dist.columns) == ["Sport", "Age group", "Participants", "Percentage"]
