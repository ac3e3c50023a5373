import os

import pandas as pd
import pytest


def make_event(
    id_: int,
    sex: str = "M",
    year: int = 2016,
    season: str = "Summer",
    age: float | None = 25.0,
    sport: str = "Athletics",
    event: str | None = None,
    medal: str | None = None,
    name: str | None = None,
    noc: str = "USA",
    team: str = "United States",
) -> dict:
    return {
        "ID": id_,
        "Name": name or f"Athlete {id_}",
        "Sex": sex,
        "Age": age,
        "Height": 180.0,
        "Weight": 75.0,
        "Team": team,
        "NOC": noc,
        "Games": f"{year} {season}",
        "Year": year,
        "Season": season,
        "City": "Rio de Janeiro",
        "Sport": sport,
        "Event": event or f"{sport} event",
        "Medal": medal,
    }


@pytest.fixture
def event_factory():
    return make_event


@pytest.fixture
def events_frame():
    def _build(rows: list[dict]) -> pd.DataFrame:
        return pd.DataFrame(rows)

    return _build


@pytest.fixture
def world_records() -> pd.DataFrame:
    # Deliberately out of date order
    return pd.DataFrame([
        {"Time": 9.93, "Wind": 1.4, "Athlete": "Calvin Smith", "Nationality": "United States", "Date": "07/03/1983"},
        {"Time": 9.58, "Wind": 0.9, "Athlete": "Usain Bolt", "Nationality": "Jamaica", "Date": "08/16/2009"},
        {"Time": 9.95, "Wind": 0.3, "Athlete": "Jim Hines", "Nationality": "United States", "Date": "10/14/1968"},
        {"Time": 9.84, "Wind": 0.7, "Athlete": "Donovan Bailey", "Nationality": "Canada", "Date": "07/27/1996"},
    ])


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no OLYMPICS_* variables set."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("OLYMPICS_")}
    monkeypatch.setattr(os, "environ", env)
    monkeypatch.chdir(tmp_path)
    return tmp_path
