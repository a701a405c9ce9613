"""Validation functions for scorecards, stroke indexes and leaderboards."""

from typing import Optional, Sequence

from .constants import GAVE_UP, HOLES_PER_ROUND, MAX_PAR, MIN_PAR
from .models import FormatResult


def validate_scorecard(scores: Sequence[int], pars: Sequence[int]) -> list[str]:
    """
    Validate a scorecard against the course.

    Checks:
    - Card and pars both have 18 holes
    - Every score is a whole number that is -1, 0 or positive
    - Every par is within the allowed range

    Args:
        scores: Hole scores
        pars: Course pars

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if len(scores) != HOLES_PER_ROUND:
        errors.append(f'Scorecard has {len(scores)} holes (expected {HOLES_PER_ROUND})')
    if len(pars) != HOLES_PER_ROUND:
        errors.append(f'Course has {len(pars)} pars (expected {HOLES_PER_ROUND})')

    for hole, score in enumerate(scores, 1):
        if isinstance(score, bool) or not isinstance(score, int):
            errors.append(f'Hole {hole} has non-integer score {score!r}')
        elif score < GAVE_UP:
            errors.append(f'Hole {hole} has invalid score {score}')

    for hole, par in enumerate(pars, 1):
        if not MIN_PAR <= par <= MAX_PAR:
            errors.append(f'Hole {hole} has par {par} (allowed {MIN_PAR}-{MAX_PAR})')

    return errors


def validate_stroke_index_values(stroke_index: Optional[Sequence[int]]) -> list[str]:
    """
    Explain why a stroke index is not a permutation of 1..18.

    A missing stroke index is not an error; strokes are then spread in hole order.
    """
    if not stroke_index:
        return []

    errors = []
    if len(stroke_index) != HOLES_PER_ROUND:
        errors.append(f'Stroke index has {len(stroke_index)} values (expected {HOLES_PER_ROUND})')

    seen = set()
    duplicates = set()
    for value in stroke_index:
        if value in seen:
            duplicates.add(value)
        seen.add(value)

    if duplicates:
        errors.append(f'Stroke index repeats: {", ".join(str(v) for v in sorted(duplicates))}')

    missing = set(range(1, HOLES_PER_ROUND + 1)) - seen
    if missing and len(stroke_index) == HOLES_PER_ROUND:
        errors.append(f'Stroke index is missing: {", ".join(str(v) for v in sorted(missing))}')

    out_of_range = sorted(v for v in seen if not 1 <= v <= HOLES_PER_ROUND)
    if out_of_range:
        errors.append(f'Stroke index values out of range: {", ".join(str(v) for v in out_of_range)}')

    return errors


def validate_format_result(result: FormatResult) -> list[str]:
    """
    Check that a result is plausible and internally consistent.

    Sanity checks:
    - Average strokes per counted hole between 2 and 10
    - Invalid rounds carry no gross or net totals
    - Net score not above gross for a player receiving strokes

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    member = result.member_id

    if not result.is_valid_round:
        if result.gross_total or result.net_total is not None:
            warnings.append(f'{member} has an abandoned hole but carries totals')
        return warnings

    if result.gross_total > 0 and result.holes_played > 0:
        average = result.gross_total / result.holes_played
        if average > 10:
            warnings.append(f'{member} averages {average:.1f} strokes per hole (unusually high)')
        elif average < 2:
            warnings.append(f'{member} averages {average:.1f} strokes per hole (unusually low)')

    if (
        result.net_total is not None
        and result.course_handicap is not None
        and result.course_handicap >= 0
        and result.net_total > result.gross_total
    ):
        warnings.append(
            f'{member} net total ({result.net_total}) is above gross ({result.gross_total}) '
            f'with course handicap {result.course_handicap}'
        )

    return warnings


def validate_leaderboard(results: Sequence[FormatResult]) -> tuple[list[str], list[str]]:
    """
    Validate a ranked leaderboard.

    Returns:
        Tuple of (errors, warnings)
        - errors: duplicate members or broken positions
        - warnings: implausible individual results
    """
    errors: list[str] = []
    warnings: list[str] = []

    seen = set()
    for result in results:
        if result.member_id in seen:
            errors.append(f'Member {result.member_id} appears more than once')
        seen.add(result.member_id)
        warnings.extend(validate_format_result(result))

    if results and results[0].position != 1:
        errors.append(f'Leaderboard starts at position {results[0].position}')

    for index in range(1, len(results)):
        previous, current = results[index - 1].position, results[index].position
        if current != previous and current != index + 1:
            errors.append(f'Position {current} at row {index + 1} should be {previous} or {index + 1}')

    return errors, warnings
