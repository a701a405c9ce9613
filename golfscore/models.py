"""Data models for the golf scoring engine."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Union

MemberId = Union[int, str]


@dataclass
class RoundStats:
    """Gross statistics for one competitor's round."""
    total_shots: int = 0
    relative_to_par: int = 0
    holes_played: int = 0  # holes with a positive score
    is_valid_round: bool = True


@dataclass
class ScoreMetrics:
    holes_played: int
    gross_score: int
    relative_to_par: int
    has_invalid_hole: bool


@dataclass
class NetScores:
    """Handicap-adjusted totals for a valid round."""
    net_total: int = 0
    net_relative_to_par: int = 0
    net_front_total: int = 0
    net_back_total: int = 0


@dataclass
class CompetitorEntry:
    """A competitor's scorecard tagged with the team it plays for."""
    team_name: str
    name: str
    scores: List[int]
    stats: RoundStats
    position_name: str = ''
    holes_played: int = 0  # progress count, abandoned holes included
    is_locked: bool = False


class TeamStatus(str, Enum):
    NOT_STARTED = 'NOT_STARTED'
    IN_PROGRESS = 'IN_PROGRESS'
    FINISHED = 'FINISHED'


class TeamTier(IntEnum):
    """Sort tiers for teams, best first."""
    VALID = 0
    INVALID = 1
    NO_RESULTS = 2


@dataclass
class TeamMember:
    """One competitor's contribution to a team."""
    name: str
    position: str
    total_shots: int  # -1 when the member gave up a hole
    relative_to_par: int
    holes_played: int = 0
    finished: bool = False


@dataclass
class TeamResultInput:
    """Team aggregate before sorting and point assignment."""
    team_name: str
    participants: List[TeamMember] = field(default_factory=list)
    total_shots: int = 0  # -1 marks an invalid team
    relative_to_par: int = 0


@dataclass
class TeamResult:
    """Sorted team with its position and series ranking points."""
    team_name: str
    participants: List[TeamMember]
    total_shots: int
    relative_to_par: int
    status: TeamStatus
    tier: TeamTier
    position: int = 0
    ranking_points: int = 0
    has_results: bool = False


@dataclass
class FormatResult:
    """Per-member result produced by a scoring format."""
    member_id: MemberId
    gross_total: int
    relative_to_par: int
    holes_played: int
    is_valid_round: bool = True
    position: int = 0
    net_total: Optional[int] = None
    net_relative_to_par: Optional[int] = None
    course_handicap: Optional[int] = None
    custom_display_data: Optional[Dict[str, Any]] = None  # e.g. stableford points
