"""Base class for pluggable scoring formats."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

from pydantic import BaseModel, ValidationError

from .constants import (
    GAVE_UP,
    HOLES_PER_ROUND,
    SCORING_MODES,
    STANDARD_COURSE_RATING,
    STANDARD_SLOPE_RATING,
)
from .exceptions import InvalidScoreError, InvalidSettingsError
from .handicap import calculate_course_handicap, distribute_handicap_strokes
from .models import FormatResult, MemberId


@dataclass
class LeaderboardContext:
    """Course and competition context handed to a scoring format."""
    pars: Sequence[int]
    stroke_index: Optional[Sequence[int]] = None
    scoring_mode: str = 'gross'
    custom_settings: Optional[Dict[str, Any]] = None
    course_rating: Optional[float] = None
    slope_rating: Optional[float] = None

    def __post_init__(self):
        if self.scoring_mode not in SCORING_MODES:
            raise InvalidSettingsError(
                'scoring_mode',
                [f'unknown scoring mode {self.scoring_mode!r}, expected one of {", ".join(SCORING_MODES)}'],
            )


class ScoringFormat(ABC):
    """
    Base class for golf scoring formats.

    Each format (stroke play, stableford, ...) turns raw hole scores into
    ranked per-member results. Formats are stateless and are registered by
    type_name in golfscore.registry.
    """

    type_name: str = ''
    display_name: str = ''
    settings_schema: type[BaseModel] | None = None

    def validate_settings(self, settings: Mapping[str, Any]) -> None:
        """
        Validate format-specific settings.

        Raises:
            InvalidSettingsError: If settings are malformed
        """
        if self.settings_schema is None:
            return
        try:
            self.settings_schema.model_validate(dict(settings or {}))
        except ValidationError as e:
            problems = [
                f'{".".join(str(p) for p in err["loc"]) or "settings"}: {err["msg"]}'
                for err in e.errors()
            ]
            raise InvalidSettingsError(self.type_name, problems) from e

    def validate_score(self, hole: int, shots: int, par: int) -> None:
        """
        Validate a single score entry.

        Accepts GAVE_UP (-1), 0 (cleared) and any positive stroke count.

        Raises:
            InvalidScoreError: If the hole or the value is not allowed
        """
        if not 1 <= hole <= HOLES_PER_ROUND:
            raise InvalidScoreError(hole, shots, 'Hole out of range')
        if isinstance(shots, bool) or not isinstance(shots, int):
            raise InvalidScoreError(hole, shots, 'Score must be a whole number')
        if shots != GAVE_UP and shots != 0 and shots < 1:
            raise InvalidScoreError(hole, shots)

    def is_ranked(self, result: FormatResult) -> bool:
        """Whether a result competes for points. Abandoned rounds don't, by default."""
        return result.is_valid_round

    def default_settings(self) -> Dict[str, Any]:
        """Default settings for this format."""
        if self.settings_schema is None:
            return {}
        return self.settings_schema().model_dump()

    def settings_for(self, context: LeaderboardContext) -> BaseModel | None:
        """Validated settings for a context, defaults filled in."""
        if self.settings_schema is None:
            return None
        self.validate_settings(context.custom_settings or {})
        return self.settings_schema.model_validate(dict(context.custom_settings or {}))

    def strokes_for(
        self,
        member_id: MemberId,
        handicaps: Mapping[MemberId, float],
        context: LeaderboardContext,
    ) -> tuple[Optional[int], Optional[list[int]]]:
        """
        Course handicap and per-hole strokes for a member.

        Returns (None, None) for gross scoring or when no handicap is known.
        """
        if context.scoring_mode == 'gross' or handicaps.get(member_id) is None:
            return None, None

        course_handicap = calculate_course_handicap(
            handicaps[member_id],
            context.slope_rating or STANDARD_SLOPE_RATING,
            context.course_rating or STANDARD_COURSE_RATING,
            sum(context.pars),
        )
        return course_handicap, distribute_handicap_strokes(course_handicap, context.stroke_index)

    @abstractmethod
    def calculate_results(
        self,
        scores: Mapping[MemberId, Sequence[int]],
        handicaps: Mapping[MemberId, float],
        context: LeaderboardContext,
    ) -> list[FormatResult]:
        """
        Calculate ranked results with format-specific rules.

        Args:
            scores: Member id to 18-hole score array
            handicaps: Member id to Handicap Index
            context: Pars, stroke index, scoring mode and settings

        Returns:
            Results sorted by position
        """
