"""Round scoring: hole-score semantics, gross aggregation and net scores.

A hole score is one of:
    - a positive stroke count,
    - 0 (NOT_REPORTED): the hole has not been reported yet,
    - -1 (GAVE_UP): the player abandoned the hole.

Only positive scores are counted in totals. Abandoned holes count as played
for progress, but void the round's gross result.
"""

import logging
from typing import Optional, Sequence

from .constants import FRONT_NINE_HOLES, GAVE_UP, HOLES_PER_ROUND
from .models import NetScores, RoundStats, ScoreMetrics

logger = logging.getLogger('golfscore.scoring')


def _overlap(*arrays: Sequence[int]) -> int:
    """Length of the common prefix, logging when the arrays disagree."""
    lengths = {len(a) for a in arrays}
    if len(lengths) > 1:
        logger.warning(f'Array length mismatch {sorted(lengths)}; using first {min(lengths)} holes')
    return min(lengths)


def calculate_holes_played(scores: Sequence[int]) -> int:
    """Count holes with progress (a positive score or GAVE_UP)."""
    return sum(1 for s in scores if s > 0 or s == GAVE_UP)


def calculate_gross_score(scores: Sequence[int]) -> int:
    """Sum of all positive hole scores."""
    return sum(s for s in scores if s > 0)


def calculate_relative_to_par(scores: Sequence[int], pars: Sequence[int]) -> int:
    """Score relative to par over the played holes (positive = over par)."""
    relative = 0
    for score, par in zip(scores, pars):
        if score > 0:
            relative += score - par
    return relative


def has_invalid_hole(scores: Sequence[int]) -> bool:
    """True if any hole was abandoned."""
    return GAVE_UP in scores


def calculate_score_metrics(scores: Sequence[int], pars: Sequence[int]) -> ScoreMetrics:
    """Calculate all score metrics for a card at once."""
    return ScoreMetrics(
        holes_played=calculate_holes_played(scores),
        gross_score=calculate_gross_score(scores),
        relative_to_par=calculate_relative_to_par(scores, pars),
        has_invalid_hole=has_invalid_hole(scores),
    )


def is_round_complete(cards: Sequence[Optional[Sequence[int]]]) -> bool:
    """
    Check whether every card in a group has all 18 holes reported.

    Args:
        cards: Score arrays for each player in the group

    Returns:
        False for an empty group, a missing card, or any unreported hole
    """
    if not cards:
        return False

    for card in cards:
        if not card or len(card) < HOLES_PER_ROUND:
            return False
        if any(not score for score in card[:HOLES_PER_ROUND]):
            return False

    return True


def aggregate_round(scores: Sequence[int], pars: Sequence[int]) -> RoundStats:
    """
    Reduce a competitor's hole scores to gross statistics.

    An abandoned hole anywhere voids the whole round and the zero,
    invalid result is returned immediately. Unreported holes add neither
    strokes nor par. Only the overlapping prefix of scores and pars is used.

    Args:
        scores: Hole scores (normally 18)
        pars: Course pars (normally 18)

    Returns:
        RoundStats with total shots, relative to par and holes played

    Example:
        aggregate_round([4, 5, 0, ...], [4, 4, 3, ...])
        # RoundStats(total_shots=9, relative_to_par=1, holes_played=2, is_valid_round=True)
    """
    if has_invalid_hole(scores):
        return RoundStats(total_shots=0, relative_to_par=0, holes_played=0, is_valid_round=False)

    total_shots = 0
    played_par = 0
    holes_played = 0

    for i in range(_overlap(scores, pars)):
        score = scores[i]
        if score > 0:
            total_shots += score
            played_par += pars[i]
            holes_played += 1

    relative_to_par = total_shots - played_par if total_shots > 0 else 0

    return RoundStats(
        total_shots=total_shots,
        relative_to_par=relative_to_par,
        holes_played=holes_played,
        is_valid_round=True,
    )


def calculate_net_scores(
    scores: Sequence[int],
    pars: Sequence[int],
    strokes_per_hole: Sequence[int],
) -> Optional[NetScores]:
    """
    Calculate handicap-adjusted totals for a round.

    Each played hole contributes its own gross score minus its own stroke
    allowance, so a partial round only receives the strokes of the holes
    already played.

    Args:
        scores: Hole scores
        pars: Course pars
        strokes_per_hole: Allowance per hole from distribute_handicap_strokes()

    Returns:
        NetScores, or None when the round contains an abandoned hole
    """
    if has_invalid_hole(scores):
        return None

    net = NetScores()
    played_par = 0

    for i in range(_overlap(scores, pars, strokes_per_hole)):
        score = scores[i]
        if score <= 0:
            continue
        hole_net = score - strokes_per_hole[i]
        net.net_total += hole_net
        if i < FRONT_NINE_HOLES:
            net.net_front_total += hole_net
        else:
            net.net_back_total += hole_net
        played_par += pars[i]

    net.net_relative_to_par = net.net_total - played_par
    return net
