"""Unit tests for team aggregation, countback and team ranking."""

import pytest

from golfscore.models import TeamMember, TeamStatus, TeamTier
from golfscore.teams import (
    build_competitor_entry,
    calculate_team_results,
    classify_team,
    compare_countback,
    convert_to_team_input,
    is_valid_team_result,
    log_team_ranking,
    process_team_results,
    sort_teams,
    team_status,
)

PARS = [4, 4, 3, 5, 4, 4, 3, 5, 4, 4, 4, 3, 5, 4, 4, 3, 5, 4]
UNPLAYED = [0] * 18


def card(relative_to_par, holes=18):
    """A card of the given length, one stroke off par per hole until relative_to_par is reached."""
    scores = list(PARS[:holes]) + [0] * (18 - holes)
    step = 1 if relative_to_par > 0 else -1
    for i in range(abs(relative_to_par)):
        scores[i % holes] += step
    return scores


def entry(team, name, scores, locked=False):
    return build_competitor_entry(team, name, scores, PARS, position_name='A', is_locked=locked)


def team_input(team, *cards):
    entries = [entry(team, f'{team} {i}', c) for i, c in enumerate(cards, 1)]
    return convert_to_team_input(entries)[0]


class TestConvertToTeamInput:
    """Tests for grouping competitors into teams."""

    def test_groups_in_first_seen_order(self):
        teams = convert_to_team_input([
            entry('Hawks', 'Ann', card(1)),
            entry('Owls', 'Bob', card(-2)),
            entry('Hawks', 'Cy', card(0)),
        ])
        assert [t.team_name for t in teams] == ['Hawks', 'Owls']
        assert [p.name for p in teams[0].participants] == ['Ann', 'Cy']

    def test_totals_count_started_members(self):
        """Test members who haven't started add nothing."""
        team = team_input('Hawks', card(2), UNPLAYED)
        assert team.total_shots == 74
        assert team.relative_to_par == 2

    def test_gave_up_overrides_totals(self):
        """Test one abandoned hole makes the whole team invalid."""
        gave_up = card(0)
        gave_up[5] = -1
        team = team_input('Hawks', card(-5), gave_up)
        assert team.total_shots == -1
        assert team.relative_to_par == 0
        assert team.participants[1].total_shots == -1


class TestClassifyTeam:
    """Tests for the sort tiers."""

    def test_valid(self):
        assert classify_team(team_input('Hawks', card(0), UNPLAYED)) == TeamTier.VALID

    def test_invalid(self):
        gave_up = card(0)
        gave_up[0] = -1
        assert classify_team(team_input('Hawks', card(0), gave_up)) == TeamTier.INVALID

    def test_no_results(self):
        assert classify_team(team_input('Hawks', UNPLAYED, UNPLAYED)) == TeamTier.NO_RESULTS

    def test_only_gave_up_is_no_results(self):
        """Test a team whose only starter gave up has no results to rank."""
        gave_up = [0] * 18
        gave_up[0] = -1
        assert classify_team(team_input('Hawks', gave_up)) == TeamTier.NO_RESULTS


class TestCountback:
    """Tests for countback tie-breaking."""

    def test_best_score_wins(self):
        """Test -2/+2 beats -1/+1 on the best individual score."""
        a = team_input('A', card(-2), card(2))
        b = team_input('B', card(-1), card(1))
        assert a.relative_to_par == b.relative_to_par
        assert compare_countback(a, b) < 0
        assert compare_countback(b, a) > 0

    def test_identical_scores_tie(self):
        a = team_input('A', card(-1), card(1))
        b = team_input('B', card(1), card(-1))
        assert compare_countback(a, b) == 0

    def test_fewer_scores_lose(self):
        """Test a team with fewer counted scores loses a tie."""
        short = team_input('Short', card(0), UNPLAYED)
        full = team_input('Full', card(0), card(0))
        assert compare_countback(full, short) < 0

    def test_order_independent(self):
        """Test swapping the input order doesn't change the result."""
        a = team_input('A', card(-2), card(2))
        b = team_input('B', card(-1), card(1))
        assert [t.team_name for t in sort_teams([a, b])] == ['A', 'B']
        assert [t.team_name for t in sort_teams([b, a])] == ['A', 'B']


class TestSortTeams:
    """Tests for the three-tier team sort."""

    def test_tiers_in_order(self):
        gave_up = card(0)
        gave_up[3] = -1
        invalid = team_input('Invalid', card(-10), gave_up)
        empty = team_input('Empty', UNPLAYED)
        worse = team_input('Worse', card(3))
        better = team_input('Better', card(-1))

        ordered = sort_teams([empty, invalid, worse, better])
        assert [t.team_name for t in ordered] == ['Better', 'Worse', 'Invalid', 'Empty']

    def test_invalid_and_empty_keep_input_order(self):
        empty_a = team_input('EmptyA', UNPLAYED)
        empty_b = team_input('EmptyB', UNPLAYED)
        ordered = sort_teams([empty_b, empty_a])
        assert [t.team_name for t in ordered] == ['EmptyB', 'EmptyA']


class TestTeamStatus:
    """Tests for team progress."""

    def test_not_started(self):
        members = [TeamMember('Ann', 'A', 0, 0), TeamMember('Bob', 'B', 0, 0)]
        assert team_status(members) == TeamStatus.NOT_STARTED

    def test_in_progress(self):
        members = [
            TeamMember('Ann', 'A', 72, 0, holes_played=18, finished=True),
            TeamMember('Bob', 'B', 20, 1, holes_played=5),
        ]
        assert team_status(members) == TeamStatus.IN_PROGRESS

    def test_finished(self):
        members = [
            TeamMember('Ann', 'A', 72, 0, holes_played=18, finished=True),
            TeamMember('Bob', 'B', 40, 4, holes_played=9, finished=True),
        ]
        assert team_status(members) == TeamStatus.FINISHED

    def test_locked_card_counts_as_finished(self):
        """Test a locked partial card finishes the member."""
        teams = convert_to_team_input([
            entry('Hawks', 'Ann', card(0)),
            entry('Hawks', 'Bob', card(0, holes=9), locked=True),
        ])
        assert team_status(teams[0].participants) == TeamStatus.FINISHED

    def test_gave_up_is_not_finished(self):
        gave_up = card(0)
        gave_up[17] = -1
        teams = convert_to_team_input([entry('Hawks', 'Ann', gave_up, locked=True)])
        assert team_status(teams[0].participants) == TeamStatus.IN_PROGRESS


class TestProcessTeamResults:
    """Tests for positions and series points."""

    def test_positions_and_points(self):
        """Test the spread [-4, 0, +2, +4] gives 12, 10, 8, 7 in a 10-team series."""
        teams = [
            team_input('Third', card(2)),
            team_input('First', card(-4)),
            team_input('Fourth', card(4)),
            team_input('Second', card(0)),
        ]
        results = process_team_results(teams, total_series_teams=10)
        assert [r.team_name for r in results] == ['First', 'Second', 'Third', 'Fourth']
        assert [r.position for r in results] == [1, 2, 3, 4]
        assert [r.ranking_points for r in results] == [12, 10, 8, 7]

    def test_invalid_and_empty_get_no_points(self):
        gave_up = card(0)
        gave_up[0] = -1
        results = process_team_results(
            [
                team_input('Empty', UNPLAYED),
                team_input('Invalid', card(-3), gave_up),
                team_input('Valid', card(5)),
            ],
            total_series_teams=10,
        )
        assert [r.team_name for r in results] == ['Valid', 'Invalid', 'Empty']
        assert [r.tier for r in results] == [TeamTier.VALID, TeamTier.INVALID, TeamTier.NO_RESULTS]
        assert [r.position for r in results] == [1, 2, 3]
        assert [r.ranking_points for r in results] == [12, 0, 0]
        assert [r.has_results for r in results] == [True, False, False]

    def test_total_defaults_to_teams_with_results(self):
        """Test N falls back to the number of teams with results."""
        results = process_team_results([
            team_input('A', card(-1)),
            team_input('B', card(1)),
            team_input('Empty', UNPLAYED),
        ])
        assert [r.ranking_points for r in results] == [4, 2, 0]

    def test_exact_tie_shares_position_and_points(self):
        results = process_team_results(
            [team_input('A', card(-1), card(1)), team_input('B', card(1), card(-1))],
            total_series_teams=10,
        )
        assert [r.position for r in results] == [1, 1]
        assert [r.ranking_points for r in results] == [12, 12]

    def test_countback_breaks_tie(self):
        results = process_team_results(
            [team_input('B', card(-1), card(1)), team_input('A', card(-2), card(2))],
            total_series_teams=10,
        )
        assert [r.team_name for r in results] == ['A', 'B']
        assert [r.position for r in results] == [1, 2]

    @pytest.mark.parametrize('teams', [None, []])
    def test_no_teams(self, teams):
        assert process_team_results(teams) == []

    def test_calculate_team_results(self):
        """Test the one-call path from competitor entries."""
        results = calculate_team_results(
            [
                entry('Owls', 'Ann', card(3)),
                entry('Hawks', 'Bob', card(-1)),
                entry('Owls', 'Cy', card(-3)),
            ],
            total_series_teams=4,
        )
        assert [(r.team_name, r.relative_to_par) for r in results] == [('Hawks', -1), ('Owls', 0)]
        assert [r.ranking_points for r in results] == [6, 4]
        assert all(r.status == TeamStatus.FINISHED for r in results)


class TestTeamResultStructure:
    """Tests for is_valid_team_result and the ranking dump."""

    def test_dataclass_input(self):
        assert is_valid_team_result(team_input('Hawks', card(0)))

    def test_dict_input(self):
        team = {
            'team_name': 'Hawks',
            'participants': [{'name': 'Ann', 'position': 'A', 'total_shots': 72, 'relative_to_par': 0}],
            'total_shots': 72,
            'relative_to_par': 0,
        }
        assert is_valid_team_result(team)

    def test_missing_field(self):
        assert not is_valid_team_result({'team_name': 'Hawks', 'participants': []})

    def test_wrong_type(self):
        team = {'team_name': 'Hawks', 'participants': [], 'total_shots': '72', 'relative_to_par': 0}
        assert not is_valid_team_result(team)

    def test_not_a_mapping(self):
        assert not is_valid_team_result(None)

    def test_log_team_ranking(self):
        results = process_team_results([team_input('Hawks', card(-1), card(2))], total_series_teams=8)
        lines = log_team_ranking(results, 8)
        assert lines[0] == '=== TEAM RANKING ==='
        assert 'Total teams in series: 8' in lines
        assert '1. Hawks - Score: 1 - Points: 10 - Status: FINISHED - Individual: [-1, 2]' in lines
