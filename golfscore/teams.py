"""Team aggregation, classification and countback tie-breaking.

Team results are built in two explicit passes:

1. convert_to_team_input() groups competitor cards by team. A member who
   gave up a hole is marked with total_shots = -1 and invalidates the team.
2. process_team_results() classifies every team into a tier, sorts the
   tiers (valid, then invalid, then teams without results), breaks ties
   inside the valid tier by countback, and assigns positions and points.
"""

import dataclasses
import logging
from functools import cmp_to_key
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from .constants import COUNTBACK_MISSING_SCORE, GAVE_UP
from .models import (
    CompetitorEntry,
    TeamMember,
    TeamResult,
    TeamResultInput,
    TeamStatus,
    TeamTier,
)
from .points import team_ranking_points
from .ranking import assign_positions_with_ties
from .schemas import TeamResultPayload
from .scoring import aggregate_round, calculate_holes_played, has_invalid_hole, is_round_complete

logger = logging.getLogger('golfscore.teams')


def build_competitor_entry(
    team_name: str,
    name: str,
    scores: Sequence[int],
    pars: Sequence[int],
    position_name: str = '',
    is_locked: bool = False,
) -> CompetitorEntry:
    """Score a competitor's card and tag it with its team."""
    return CompetitorEntry(
        team_name=team_name,
        name=name,
        scores=list(scores),
        stats=aggregate_round(scores, pars),
        position_name=position_name,
        holes_played=calculate_holes_played(scores),
        is_locked=is_locked,
    )


def _member_from_entry(entry: CompetitorEntry) -> TeamMember:
    gave_up = has_invalid_hole(entry.scores)
    return TeamMember(
        name=entry.name,
        position=entry.position_name,
        total_shots=GAVE_UP if gave_up else entry.stats.total_shots,
        relative_to_par=0 if gave_up else entry.stats.relative_to_par,
        holes_played=entry.holes_played,
        finished=not gave_up and (entry.is_locked or is_round_complete([entry.scores])),
    )


def convert_to_team_input(entries: Sequence[CompetitorEntry]) -> list[TeamResultInput]:
    """
    Group competitor entries into team aggregates.

    Team totals only include members who are valid and have started. If any
    member gave up a hole the team is invalid: total_shots = -1 and
    relative_to_par = 0, whatever the other members scored.

    Args:
        entries: Competitor entries, in leaderboard order

    Returns:
        One TeamResultInput per team, in order of first appearance
    """
    groups: dict[str, TeamResultInput] = {}

    for entry in entries:
        team = groups.setdefault(entry.team_name, TeamResultInput(team_name=entry.team_name))
        team.participants.append(_member_from_entry(entry))

    for team in groups.values():
        if any(p.total_shots == GAVE_UP for p in team.participants):
            team.total_shots = GAVE_UP
            team.relative_to_par = 0
        else:
            counted = [p for p in team.participants if p.total_shots > 0]
            team.total_shots = sum(p.total_shots for p in counted)
            team.relative_to_par = sum(p.relative_to_par for p in counted)

    return list(groups.values())


def classify_team(team: TeamResultInput) -> TeamTier:
    """Sort tier of a team: valid, invalid (a member gave up) or no results."""
    if not any(p.total_shots > 0 for p in team.participants):
        return TeamTier.NO_RESULTS
    if any(p.total_shots == GAVE_UP for p in team.participants):
        return TeamTier.INVALID
    return TeamTier.VALID


def team_status(members: Sequence[TeamMember]) -> TeamStatus:
    """Progress of a team on the course."""
    if not any(m.holes_played > 0 or m.total_shots != 0 for m in members):
        return TeamStatus.NOT_STARTED
    if all(m.finished for m in members):
        return TeamStatus.FINISHED
    return TeamStatus.IN_PROGRESS


def countback_scores(team: TeamResultInput) -> list[int]:
    """Counted members' scores relative to par, best first."""
    return sorted(p.relative_to_par for p in team.participants if p.total_shots > 0)


def compare_countback(team_a: TeamResultInput, team_b: TeamResultInput) -> int:
    """
    Break a tie by comparing best scores, then second best, and so on.

    A team with fewer counted scores is given COUNTBACK_MISSING_SCORE for
    the positions it cannot fill, so fewer scores is a disadvantage.

    Returns:
        Negative if team_a wins, positive if team_b wins, 0 if still tied
    """
    scores_a = countback_scores(team_a)
    scores_b = countback_scores(team_b)

    for i in range(max(len(scores_a), len(scores_b))):
        score_a = scores_a[i] if i < len(scores_a) else COUNTBACK_MISSING_SCORE
        score_b = scores_b[i] if i < len(scores_b) else COUNTBACK_MISSING_SCORE
        if score_a != score_b:
            return -1 if score_a < score_b else 1

    return 0


def compare_valid_teams(team_a: TeamResultInput, team_b: TeamResultInput) -> int:
    """Order two valid teams by total relative to par, then countback."""
    if team_a.relative_to_par != team_b.relative_to_par:
        return -1 if team_a.relative_to_par < team_b.relative_to_par else 1
    return compare_countback(team_a, team_b)


def sort_teams(teams: Sequence[TeamResultInput]) -> list[TeamResultInput]:
    """
    Sort teams into tiers: valid, then invalid, then no results.

    Only the valid tier is ordered by score; the other tiers keep input order.
    """
    tiers: dict[TeamTier, list[TeamResultInput]] = {tier: [] for tier in TeamTier}
    for team in teams:
        tiers[classify_team(team)].append(team)

    valid = sorted(tiers[TeamTier.VALID], key=cmp_to_key(compare_valid_teams))
    return valid + tiers[TeamTier.INVALID] + tiers[TeamTier.NO_RESULTS]


def _ranking_key(result: TeamResult) -> tuple:
    if result.has_results:
        return (result.tier, result.relative_to_par, tuple(countback_scores(result)))
    # Teams without results are never tied
    return (result.tier, id(result))


def _set_position(result: TeamResult, position: int) -> None:
    result.position = position


def process_team_results(
    teams: Optional[Sequence[TeamResultInput]],
    total_series_teams: Optional[int] = None,
) -> list[TeamResult]:
    """
    Sort teams and assign positions and series ranking points.

    Only valid teams that have started receive points. Teams still tied
    after countback share a position and its points.

    Args:
        teams: Unsorted team aggregates from convert_to_team_input()
        total_series_teams: Teams in the whole series; defaults to the
            number of teams with results

    Returns:
        Sorted list of TeamResult
    """
    if not teams:
        return []

    results = []
    for team in sort_teams(teams):
        tier = classify_team(team)
        results.append(
            TeamResult(
                team_name=team.team_name,
                participants=team.participants,
                total_shots=team.total_shots,
                relative_to_par=team.relative_to_par,
                status=team_status(team.participants),
                tier=tier,
                has_results=tier == TeamTier.VALID,
            )
        )

    assign_positions_with_ties(results, _ranking_key, _set_position)

    teams_with_results = sum(1 for r in results if r.has_results)
    total_teams = total_series_teams or teams_with_results

    for result in results:
        if result.has_results:
            result.ranking_points = team_ranking_points(result.position, total_teams)

    if logger.isEnabledFor(logging.DEBUG):
        log_team_ranking(results, total_series_teams)

    return results


def calculate_team_results(
    entries: Sequence[CompetitorEntry],
    total_series_teams: Optional[int] = None,
) -> list[TeamResult]:
    """Group competitor entries into teams and rank them in one call."""
    return process_team_results(convert_to_team_input(entries), total_series_teams)


def is_valid_team_result(team: Any) -> bool:
    """Check that a team payload has the structure process_team_results() expects."""
    if dataclasses.is_dataclass(team) and not isinstance(team, type):
        team = dataclasses.asdict(team)
    try:
        TeamResultPayload.model_validate(team)
    except ValidationError:
        return False
    return True


def log_team_ranking(teams: Sequence[TeamResult], total_series_teams: Optional[int] = None) -> list[str]:
    """
    Write a readable dump of a processed ranking to the debug log.

    Returns:
        The logged lines
    """
    with_results = sum(1 for t in teams if t.has_results)
    lines = [
        '=== TEAM RANKING ===',
        f'Total teams in series: {total_series_teams or "Not provided"}',
        f'Teams with results: {with_results}',
        f'Teams without results: {len(teams) - with_results}',
    ]

    for team in teams:
        individual = ', '.join(str(s) for s in countback_scores(team))
        lines.append(
            f'{team.position}. {team.team_name} - Score: {team.relative_to_par} - '
            f'Points: {team.ranking_points} - Status: {team.status.value} - '
            f'Individual: [{individual}]'
        )

    for line in lines:
        logger.debug(line)

    return lines
