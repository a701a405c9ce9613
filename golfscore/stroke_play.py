"""Stroke play: the total number of strokes decides the winner."""

import logging
from typing import Mapping, Sequence

from .base_format import LeaderboardContext, ScoringFormat
from .models import FormatResult, MemberId
from .ranking import sort_and_rank
from .schemas import StrokePlaySettings
from .scoring import aggregate_round, calculate_holes_played, calculate_net_scores

logger = logging.getLogger('golfscore.stroke_play')


def _ranking_score(result: FormatResult, scoring_mode: str) -> int:
    if scoring_mode == 'net' and result.net_relative_to_par is not None:
        return result.net_relative_to_par
    return result.relative_to_par


class StrokePlayStrategy(ScoringFormat):
    """
    Traditional stroke play, ranked gross or net.

    Scoring modes:
        - gross: ranked by gross score relative to par
        - net: ranked by net score relative to par (gross when no handicap)
        - both: net is calculated, ranking stays gross

    Rounds with an abandoned hole have no gross or net result and are ranked
    after every valid round.
    """

    type_name = 'stroke_play'
    display_name = 'Stroke Play'
    settings_schema = StrokePlaySettings

    def calculate_results(
        self,
        scores: Mapping[MemberId, Sequence[int]],
        handicaps: Mapping[MemberId, float],
        context: LeaderboardContext,
    ) -> list[FormatResult]:
        self.validate_settings(context.custom_settings or {})
        results = []

        for member_id, card in scores.items():
            holes_played = calculate_holes_played(card)
            if holes_played == 0:
                continue

            stats = aggregate_round(card, context.pars)
            result = FormatResult(
                member_id=member_id,
                gross_total=stats.total_shots,
                relative_to_par=stats.relative_to_par,
                holes_played=holes_played,
                is_valid_round=stats.is_valid_round,
            )

            course_handicap, strokes = self.strokes_for(member_id, handicaps, context)
            if strokes is not None:
                result.course_handicap = course_handicap
                net = calculate_net_scores(card, context.pars, strokes)
                if net is not None:
                    result.net_total = net.net_total
                    result.net_relative_to_par = net.net_relative_to_par

            results.append(result)

        mode = context.scoring_mode
        logger.debug(f'Ranking {len(results)} stroke play results ({mode})')

        def ranking_key(r: FormatResult) -> tuple[bool, int]:
            return (not r.is_valid_round, _ranking_score(r, mode))

        return sort_and_rank(results, ranking_key, ranking_key, _set_position)


def _set_position(result: FormatResult, position: int) -> None:
    result.position = position
