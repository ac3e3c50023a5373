from config.olympics_config import LABEL_OVERRIDES
from dashboard.utils.olympic_analysis import medal_leaderboard, medal_leaderboard_long


def medal_rows(factory, id_, gold=0, silver=0, bronze=0, **kwargs):
    rows = []
    for medal, n in (("Gold", gold), ("Silver", silver), ("Bronze", bronze)):
        rows += [factory(id_, medal=medal, event=f"{medal} event {i}", **kwargs) for i in range(n)]
    return rows


def test_medal_counts_include_zero_kinds(event_factory, events_frame):
    events = events_frame(medal_rows(event_factory, 1, gold=3, silver=2, name="X"))

    board = medal_leaderboard(events)
    row = board.iloc[0]

    assert (row["Gold"], row["Silver"], row["Bronze"], row["Total"]) == (3, 2, 0, 5)
    assert row["Label"] == "X (USA)"


def test_ranking_tie_break_chain(event_factory, events_frame):
    events = events_frame(
        medal_rows(event_factory, 50, gold=1, silver=1, bronze=1, name="A")
        + medal_rows(event_factory, 2, gold=2, bronze=1, name="B")
        + medal_rows(event_factory, 3, gold=1, silver=2, name="C")
        + medal_rows(event_factory, 5, gold=1, silver=1, bronze=1, name="D")
        + medal_rows(event_factory, 4, bronze=4, name="E")
    )

    board = medal_leaderboard(events)

    # E leads on Total; B, C, A/D tie on Total and split on Gold then Silver;
    # A and D tie on everything and keep input order.
    assert list(board["Name"]) == ["E", "B", "C", "A", "D"]


def test_top_n_is_exact_when_enough_medalists(event_factory, events_frame):
    rows = []
    for i in range(12):
        rows += medal_rows(event_factory, i, gold=1 + i % 3)
    events = events_frame(rows)

    assert len(medal_leaderboard(events)) == 10
    assert len(medal_leaderboard(events, top_n=3)) == 3


def test_winter_and_missing_medals_are_ignored(event_factory, events_frame):
    events = events_frame(
        medal_rows(event_factory, 1, gold=1, name="Summer star")
        + medal_rows(event_factory, 2, gold=5, season="Winter", name="Winter star")
        + [event_factory(3, medal=None, name="No medal")]
    )

    board = medal_leaderboard(events, season="Summer")

    assert list(board["Name"]) == ["Summer star"]


def test_label_overrides_fix_malformed_names(event_factory, events_frame):
    events = events_frame(
        medal_rows(event_factory, 1, gold=9, name="Larysa Semenivna Latynina (Diriy-)", noc="URS", team="Soviet Union")
        + medal_rows(event_factory, 2, gold=1, name="Plain Name", noc="GBR", team="Great Britain")
    )

    board = medal_leaderboard(events, label_overrides=LABEL_OVERRIDES)

    assert list(board["Label"]) == ["Larysa Latynina (URS)", "Plain Name (GBR)"]


def test_long_form_orders_categories_for_display(event_factory, events_frame):
    events = events_frame(
        medal_rows(event_factory, 1, gold=2, name="First")
        + medal_rows(event_factory, 2, bronze=1, name="Second")
    )
    board = medal_leaderboard(events)

    long = medal_leaderboard_long(board)

    assert len(long) == 8
    first = long[long["Label"] == "First (USA)"]
    assert list(first["Category"].astype(str)) == ["Total", "Gold", "Silver", "Bronze"]
    assert list(first["Medals"]) == [2, 2, 0, 0]
    assert list(long["Label"].unique()) == ["First (USA)", "Second (USA)"]


def test_no_medals_gives_empty_board(event_factory, events_frame):
    board = medal_leaderboard(events_frame([event_factory(1)]))

    assert board.empty
    assert "Total" in board.columns
