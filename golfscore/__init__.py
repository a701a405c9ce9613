from .models import (
    CompetitorEntry,
    FormatResult,
    NetScores,
    RoundStats,
    ScoreMetrics,
    TeamMember,
    TeamResult,
    TeamResultInput,
    TeamStatus,
    TeamTier,
)
from .exceptions import InvalidScoreError, InvalidSettingsError, ScoringError, UnknownFormatError
from .scoring import (
    aggregate_round,
    calculate_gross_score,
    calculate_holes_played,
    calculate_net_scores,
    calculate_relative_to_par,
    calculate_score_metrics,
    has_invalid_hole,
    is_round_complete,
)
from .handicap import (
    calculate_course_handicap,
    calculate_net_hole_scores,
    default_stroke_index,
    distribute_handicap_strokes,
    validate_stroke_index,
)
from .ranking import assign_positions_map, assign_positions_with_ties, sort_and_rank
from .points import calculate_default_points, team_ranking_points
from .teams import (
    build_competitor_entry,
    calculate_team_results,
    classify_team,
    compare_countback,
    convert_to_team_input,
    is_valid_team_result,
    process_team_results,
    sort_teams,
    team_status,
)
from .base_format import LeaderboardContext, ScoringFormat
from .stroke_play import StrokePlayStrategy
from .stableford import StablefordStrategy
from .registry import FormatRegistry, format_registry
from .json_leaderboard import (
    load_competition,
    save_leaderboard,
    score_competition,
    score_competition_from_json,
)

__all__ = [
    # Models
    'CompetitorEntry',
    'FormatResult',
    'NetScores',
    'RoundStats',
    'ScoreMetrics',
    'TeamMember',
    'TeamResult',
    'TeamResultInput',
    'TeamStatus',
    'TeamTier',
    # Errors
    'ScoringError',
    'UnknownFormatError',
    'InvalidSettingsError',
    'InvalidScoreError',
    # Round scoring
    'aggregate_round',
    'calculate_gross_score',
    'calculate_holes_played',
    'calculate_net_scores',
    'calculate_relative_to_par',
    'calculate_score_metrics',
    'has_invalid_hole',
    'is_round_complete',
    # Handicap
    'calculate_course_handicap',
    'calculate_net_hole_scores',
    'default_stroke_index',
    'distribute_handicap_strokes',
    'validate_stroke_index',
    # Ranking and points
    'assign_positions_map',
    'assign_positions_with_ties',
    'sort_and_rank',
    'calculate_default_points',
    'team_ranking_points',
    # Teams
    'build_competitor_entry',
    'calculate_team_results',
    'classify_team',
    'compare_countback',
    'convert_to_team_input',
    'is_valid_team_result',
    'process_team_results',
    'sort_teams',
    'team_status',
    # Scoring formats
    'LeaderboardContext',
    'ScoringFormat',
    'StrokePlayStrategy',
    'StablefordStrategy',
    'FormatRegistry',
    'format_registry',
    # JSON-based
    'load_competition',
    'save_leaderboard',
    'score_competition',
    'score_competition_from_json',
]
