"""JSON-based leaderboard scoring.

Reads a competition file (course, format and competitor cards), scores it
with the registered scoring format and produces individual and team
leaderboards as plain JSON data.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from .base_format import LeaderboardContext
from .config import get_default_format, get_default_scoring_mode, get_points_multiplier, get_standard_ratings
from .points import calculate_default_points
from .registry import format_registry
from .schemas import CompetitionFile
from .teams import build_competitor_entry, calculate_team_results
from .utils import load_json, save_json, to_jsonable
from .validators import validate_leaderboard, validate_scorecard, validate_stroke_index_values

logger = logging.getLogger('golfscore.json_leaderboard')


def load_competition(competition_path: str | Path) -> CompetitionFile:
    """Load and validate a competition file."""
    return load_json(competition_path, schema=CompetitionFile)


def build_context(competition: CompetitionFile) -> LeaderboardContext:
    """Leaderboard context for a competition, config defaults filled in."""
    standard_course_rating, standard_slope_rating = get_standard_ratings()

    for problem in validate_stroke_index_values(competition.stroke_index):
        logger.warning(f'{competition.name}: {problem}')

    return LeaderboardContext(
        pars=competition.pars,
        stroke_index=competition.stroke_index,
        scoring_mode=competition.scoring_mode or get_default_scoring_mode(),
        custom_settings=competition.settings,
        course_rating=competition.course_rating or standard_course_rating,
        slope_rating=competition.slope_rating or standard_slope_rating,
    )


def score_competition(
    competition: CompetitionFile,
    total_series_teams: Optional[int] = None,
) -> dict[str, Any]:
    """
    Score a competition.

    Args:
        competition: Validated competition file
        total_series_teams: Teams in the series for team points (overrides the file)

    Returns:
        Dict with the individual 'leaderboard' and, when competitors have
        teams, the ranked 'teams'

    Raises:
        UnknownFormatError: If the competition names an unregistered format
        InvalidSettingsError: If the format settings are invalid
    """
    format_name = competition.format or get_default_format()
    strategy = format_registry.get(format_name)
    strategy.validate_settings(competition.settings)
    context = build_context(competition)

    competitors = {c.id: c for c in competition.competitors}
    for competitor in competition.competitors:
        for problem in validate_scorecard(competitor.scores, competition.pars):
            logger.warning(f'{competitor.name}: {problem}')

    results = strategy.calculate_results(
        {c.id: c.scores for c in competition.competitors},
        {c.id: c.handicap_index for c in competition.competitors if c.handicap_index is not None},
        context,
    )

    errors, warnings = validate_leaderboard(results)
    for error in errors:
        logger.error(f'{competition.name}: {error}')
    for warning in warnings:
        logger.warning(f'{competition.name}: {warning}')

    multiplier = get_points_multiplier()
    leaderboard = []
    for result in results:
        competitor = competitors[result.member_id]
        row = to_jsonable(result)
        row['name'] = competitor.name
        row['team'] = competitor.team
        row['points'] = (
            calculate_default_points(result.position, len(results), multiplier)
            if strategy.is_ranked(result)
            else 0
        )
        leaderboard.append(row)

    data: dict[str, Any] = {
        'competition': competition.name,
        'format': format_name,
        'scoring_mode': context.scoring_mode,
        'scored_at': datetime.now(timezone.utc).isoformat(),
        'leaderboard': leaderboard,
    }

    entries = [
        build_competitor_entry(
            c.team, c.name, c.scores, competition.pars, position_name=c.position, is_locked=c.locked
        )
        for c in competition.competitors
        if c.team
    ]
    if entries:
        teams = calculate_team_results(entries, total_series_teams or competition.total_series_teams)
        data['teams'] = to_jsonable(teams)

    logger.info(
        f'Scored {competition.name}: {len(leaderboard)} players, {len(data.get("teams", []))} teams'
    )
    return data


def score_competition_from_json(
    competition_path: str | Path,
    total_series_teams: Optional[int] = None,
) -> dict[str, Any]:
    """Load a competition file and score it."""
    return score_competition(load_competition(competition_path), total_series_teams)


def save_leaderboard(output_path: str | Path, data: dict[str, Any]) -> Path:
    """Save scored leaderboard data to JSON."""
    path = save_json(output_path, data)
    logger.info(f'Leaderboard saved to {path}')
    return path
