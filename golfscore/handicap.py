"""Handicap calculations following the World Handicap System (WHS).

Key formulas:
    - Course Handicap = Handicap Index x Slope Rating / 113 + (Course Rating - Par)
    - Per-hole net score = gross score - handicap strokes for that hole
"""

import logging
import math
from typing import Optional, Sequence

from .constants import (
    DEFAULT_STROKE_INDEX,
    HOLES_PER_ROUND,
    STANDARD_SLOPE_RATING,
)

logger = logging.getLogger('golfscore.handicap')


def calculate_course_handicap(
    handicap_index: float,
    slope_rating: float,
    course_rating: float,
    par: int,
) -> int:
    """
    Calculate a Course Handicap from a Handicap Index.

    Args:
        handicap_index: Player's Handicap Index (negative for plus players)
        slope_rating: Slope Rating of the tee (113 is standard)
        course_rating: Course Rating of the tee
        par: Total par of the course

    Returns:
        Course Handicap, halves rounded up

    Example:
        calculate_course_handicap(15.4, 128, 72.3, 72)
        # 18  (15.4 x 128 / 113 + 0.3 = 17.7)
    """
    course_handicap = handicap_index * slope_rating / STANDARD_SLOPE_RATING + (course_rating - par)
    return math.floor(course_handicap + 0.5)


def validate_stroke_index(stroke_index: Optional[Sequence[int]]) -> bool:
    """Check that a stroke index holds each of 1..18 exactly once."""
    if not stroke_index or len(stroke_index) != HOLES_PER_ROUND:
        return False
    return sorted(stroke_index) == list(range(1, HOLES_PER_ROUND + 1))


def default_stroke_index() -> list[int]:
    """Conventional stroke index for courses that do not publish one."""
    return list(DEFAULT_STROKE_INDEX)


def _distribute_evenly(course_handicap: int) -> list[int]:
    # Floor division puts a plus handicap's strokes on the last holes
    base, extra = divmod(course_handicap, HOLES_PER_ROUND)
    return [base + 1 if i < extra else base for i in range(HOLES_PER_ROUND)]


def distribute_handicap_strokes(
    course_handicap: int,
    stroke_index: Optional[Sequence[int]] = None,
) -> list[int]:
    """
    Distribute a course handicap over the 18 holes.

    Every hole first receives one stroke per full 18 in the handicap; the
    remainder goes to the hardest holes (stroke index 1, 2, ...). Plus
    players give strokes back the same way, with the remainder on the
    easiest holes (stroke index 18, 17, ...).

    Without a stroke index the strokes are spread in hole order. A stroke
    index of the wrong length is a data error: it is logged and every hole
    gets zero strokes.

    Args:
        course_handicap: Course handicap (negative for plus players)
        stroke_index: Stroke index per hole, 1 = hardest

    Returns:
        List of 18 per-hole stroke allowances

    Example:
        distribute_handicap_strokes(20, si)
        # 1 on every hole, 2 on the holes with stroke index 1 and 2
    """
    if not stroke_index:
        return _distribute_evenly(course_handicap)

    if len(stroke_index) != HOLES_PER_ROUND:
        logger.warning(
            f'Stroke index has {len(stroke_index)} values, expected {HOLES_PER_ROUND}; '
            'no handicap strokes allocated'
        )
        return [0] * HOLES_PER_ROUND

    strokes_per_hole = [0] * HOLES_PER_ROUND
    hole_for_index = {si: hole for hole, si in reversed(list(enumerate(stroke_index)))}

    if course_handicap < 0:
        full_rounds, partial = divmod(-course_handicap, HOLES_PER_ROUND)
        for hole in range(HOLES_PER_ROUND):
            strokes_per_hole[hole] -= full_rounds
        for i in range(partial):
            hole = hole_for_index.get(HOLES_PER_ROUND - i)
            if hole is not None:
                strokes_per_hole[hole] -= 1
        return strokes_per_hole

    full_rounds, partial = divmod(course_handicap, HOLES_PER_ROUND)
    for hole in range(HOLES_PER_ROUND):
        strokes_per_hole[hole] += full_rounds

    for priority in range(1, partial + 1):
        hole = hole_for_index.get(priority)
        if hole is not None:
            strokes_per_hole[hole] += 1

    return strokes_per_hole


def calculate_net_hole_scores(gross_scores: Sequence[int], strokes_per_hole: Sequence[int]) -> list[int]:
    """
    Per-hole net scores.

    Unreported (0) and abandoned (-1) holes are passed through unchanged.
    """
    net_scores = []
    for gross, strokes in zip(gross_scores, strokes_per_hole):
        if gross <= 0:
            net_scores.append(gross)
        else:
            net_scores.append(gross - strokes)
    return net_scores
