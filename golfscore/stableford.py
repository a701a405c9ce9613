"""Stableford: points per hole against par, highest total wins."""

from typing import Mapping, Optional, Sequence

from .base_format import LeaderboardContext, ScoringFormat
from .models import FormatResult, MemberId
from .ranking import sort_and_rank
from .schemas import StablefordSettings
from .scoring import aggregate_round, calculate_holes_played, calculate_net_scores


def standard_hole_points(diff: int) -> int:
    """
    Standard Stableford points for a hole.

    Scoring (net score relative to par):
        - Eagle or better: 4
        - Birdie: 3
        - Par: 2
        - Bogey: 1
        - Double bogey or worse: 0
    """
    if diff <= -2:
        return 4
    elif diff == -1:
        return 3
    elif diff == 0:
        return 2
    elif diff == 1:
        return 1
    return 0


def modified_hole_points(diff: int) -> int:
    """
    Modified Stableford points for a hole.

    Scoring:
        - Albatross or better: 8
        - Eagle: 5
        - Birdie: 2
        - Par: 0
        - Bogey: -1
        - Double bogey or worse: -3
    """
    if diff <= -3:
        return 8
    elif diff == -2:
        return 5
    elif diff == -1:
        return 2
    elif diff == 0:
        return 0
    elif diff == 1:
        return -1
    return -3


POINTS_TABLES = {
    'standard': standard_hole_points,
    'modified': modified_hole_points,
}


def calculate_stableford_per_hole(
    scores: Sequence[int],
    pars: Sequence[int],
    strokes: Optional[Sequence[int]] = None,
    variant: str = 'standard',
) -> list[int]:
    """
    Stableford points for each hole.

    Unreported and abandoned holes score 0 points.

    Args:
        scores: Hole scores
        pars: Course pars
        strokes: Handicap strokes per hole (None for gross points)
        variant: 'standard' or 'modified'
    """
    hole_points = POINTS_TABLES[variant]
    strokes = strokes or [0] * len(scores)
    points = []
    for score, par, s in zip(scores, pars, strokes):
        if score <= 0:
            points.append(0)
            continue
        points.append(hole_points(score - s - par))
    return points


class StablefordStrategy(ScoringFormat):
    """
    Stableford scoring, net when a handicap is known and the mode allows it.

    Picking up on a hole only costs that hole's points, so an abandoned hole
    does not remove the player from the ranking.
    """

    type_name = 'stableford'
    display_name = 'Stableford'
    settings_schema = StablefordSettings

    def is_ranked(self, result: FormatResult) -> bool:
        return True

    def calculate_results(
        self,
        scores: Mapping[MemberId, Sequence[int]],
        handicaps: Mapping[MemberId, float],
        context: LeaderboardContext,
    ) -> list[FormatResult]:
        settings = self.settings_for(context)
        results = []

        for member_id, card in scores.items():
            holes_played = calculate_holes_played(card)
            if holes_played == 0:
                continue

            stats = aggregate_round(card, context.pars)
            course_handicap, strokes = self.strokes_for(member_id, handicaps, context)
            points_by_hole = calculate_stableford_per_hole(card, context.pars, strokes, settings.variant)

            result = FormatResult(
                member_id=member_id,
                gross_total=stats.total_shots,
                relative_to_par=stats.relative_to_par,
                holes_played=holes_played,
                is_valid_round=stats.is_valid_round,
                course_handicap=course_handicap,
                custom_display_data={
                    'stableford_points': sum(points_by_hole),
                    'points_by_hole': points_by_hole,
                    'variant': settings.variant,
                },
            )

            if strokes is not None:
                net = calculate_net_scores(card, context.pars, strokes)
                if net is not None:
                    result.net_total = net.net_total
                    result.net_relative_to_par = net.net_relative_to_par

            results.append(result)

        def points(r: FormatResult) -> int:
            return r.custom_display_data['stableford_points']

        return sort_and_rank(results, points, points, _set_position, reverse=True)


def _set_position(result: FormatResult, position: int) -> None:
    result.position = position
