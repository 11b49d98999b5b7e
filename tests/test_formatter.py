import pytest

from fmteam.errors import SelectionError
from fmteam.ingest import parse_player_rows
from fmteam.selection import Assignment, Team, format_assignment_summary, format_team_output, select_team

from tests.helpers import FORMATION, make_player, make_pool, make_row


def test_full_team_rendering():
    team = select_team(make_pool(15, default=8.0), FORMATION)

    assert format_team_output(team) == (
        "CD(d) -> Player 1 (score: 8.0)\n"
        "CD(s) -> Player 2 (score: 8.0)\n"
        "CF(s) -> Player 10 (score: 8.0)\n"
        "CM(a) -> Player 7 (score: 8.0)\n"
        "CM(d) -> Player 5 (score: 8.0)\n"
        "CM(s) -> Player 6 (score: 8.0)\n"
        "FB(d) L -> Player 4 (score: 8.0)\n"
        "FB(d) R -> Player 3 (score: 8.0)\n"
        "GK -> Player 0 (score: 8.0)\n"
        "W(s) L -> Player 9 (score: 8.0)\n"
        "W(s) R -> Player 8 (score: 8.0)\n"
        "Total Score: 88.0\n"
    )


def test_duplicate_roles_keep_insertion_order():
    team = Team((
        Assignment.create(make_player("Backup", ratings={"GK": 12.0}), "GK"),
        Assignment.create(make_player("Attacker", ratings={"AF": 15.0}), "AF"),
        Assignment.create(make_player("Starter", ratings={"GK": 17.0}), "GK"),
    ))

    assert format_team_output(team).splitlines() == [
        "AF -> Attacker (score: 15.0)",
        "GK -> Backup (score: 12.0)",
        "GK -> Starter (score: 17.0)",
        "Total Score: 44.0",
    ]


def test_scores_render_with_one_decimal():
    team = Team((
        Assignment.create(make_player("Precise", ratings={"CF(s)": 10.123456}), "CF(s)"),
        Assignment.create(make_player("Rounded", ratings={"AF": 7.96}), "AF"),
    ))

    lines = format_team_output(team).splitlines()
    assert lines == [
        "AF -> Rounded (score: 8.0)",
        "CF(s) -> Precise (score: 10.1)",
        "Total Score: 18.1",
    ]


def test_missing_rating_renders_as_zero():
    team = Team((Assignment.create(make_player("Unrated"), "SS"),))
    assert format_team_output(team) == "SS -> Unrated (score: 0.0)\nTotal Score: 0.0\n"


def test_empty_team_renders_only_total():
    assert format_team_output(Team(())) == "Total Score: 0.0\n"


def test_long_names_are_not_truncated():
    name = "Maximilian Alexander " * 4
    team = Team((Assignment.create(make_player(name, default=9.0), "P"),))
    assert f"P -> {name.strip()} (score: 9.0)" in format_team_output(team)


def test_assignment_summary():
    team = select_team(make_pool(11, default=7.5), FORMATION)
    assert format_assignment_summary(team) == "Team of 11 players with total score: 82.5"


def test_team_rejects_repeated_player():
    player = make_player("Twice", default=5.0)
    with pytest.raises(SelectionError) as excinfo:
        Team((Assignment.create(player, "GK"), Assignment.create(player, "CF(s)")))
    assert "Twice is assigned to multiple roles" in str(excinfo.value)


def test_sorted_by_score_is_descending_and_stable():
    team = Team((
        Assignment.create(make_player("Low", default=3.0), "GK"),
        Assignment.create(make_player("High", default=9.0), "AF"),
        Assignment.create(make_player("Also Low", default=3.0), "P"),
    ))
    assert [a.player.name for a in team.sorted_by_score()] == ["High", "Low", "Also Low"]


@pytest.mark.parametrize(("cell", "rendered"), [("0.15", "0.2"), ("14.15", "14.1")])
def test_sheet_ratings_render_at_single_precision(cell: str, rendered: str):
    [player] = parse_player_rows([make_row("Sheet Player", ratings={"GK": cell})])
    team = Team((Assignment.create(player, "GK"),))
    assert format_team_output(team) == f"GK -> Sheet Player (score: {rendered})\nTotal Score: {rendered}\n"
