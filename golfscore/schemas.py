"""Pydantic schemas for settings, configuration and competition files."""

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import (
    HOLES_PER_ROUND,
    MAX_COURSE_RATING,
    MAX_HANDICAP_INDEX,
    MAX_PAR,
    MAX_SLOPE_RATING,
    MIN_COURSE_RATING,
    MIN_HANDICAP_INDEX,
    MIN_PAR,
    MIN_SLOPE_RATING,
)

SCORING_MODE_PATTERN = r'^(gross|net|both)$'


class StrokePlaySettings(BaseModel):
    """Stroke play takes no settings."""

    class Config:
        extra = 'forbid'


class StablefordSettings(BaseModel):
    """Stableford points table selection."""

    variant: str = Field(default='standard', pattern=r'^(standard|modified)$')

    class Config:
        extra = 'forbid'


class ScoringConfig(BaseModel):
    """Engine configuration settings."""

    default_format: str = Field(..., min_length=1)
    default_scoring_mode: str = Field(default='gross', pattern=SCORING_MODE_PATTERN)
    standard_slope_rating: int = Field(default=113, ge=MIN_SLOPE_RATING, le=MAX_SLOPE_RATING)
    standard_course_rating: float = Field(default=72.0, ge=MIN_COURSE_RATING, le=MAX_COURSE_RATING)
    points_multiplier: float = Field(default=1.0, ge=0)

    class Config:
        extra = 'forbid'


class TeamMemberPayload(BaseModel):
    """Member entry of a team result."""

    name: str
    position: str
    total_shots: int
    relative_to_par: int

    class Config:
        extra = 'allow'
        strict = True


class TeamResultPayload(BaseModel):
    """Structure of a team result before processing."""

    team_name: str
    participants: list[TeamMemberPayload]
    total_shots: int
    relative_to_par: int

    class Config:
        extra = 'allow'
        strict = True


class CompetitorPayload(BaseModel):
    """A competitor's card in a competition file."""

    id: int | str
    name: str = Field(..., min_length=1)
    team: str | None = None
    position: str = ''
    handicap_index: float | None = Field(None, ge=MIN_HANDICAP_INDEX, le=MAX_HANDICAP_INDEX)
    scores: list[int] = Field(default_factory=list)
    locked: bool = False

    @field_validator('scores')
    @classmethod
    def validate_scores(cls, v):
        """Ensure the card has at most 18 holes of known score values."""
        if len(v) > HOLES_PER_ROUND:
            raise ValueError(f'Scorecard has {len(v)} holes (max {HOLES_PER_ROUND})')
        for score in v:
            if score < -1:
                raise ValueError(f'Invalid score value: {score}')
        return v

    class Config:
        extra = 'forbid'


class CompetitionFile(BaseModel):
    """Complete competition JSON file structure."""

    name: str = Field(..., min_length=1)
    format: str | None = None
    scoring_mode: str | None = Field(None, pattern=SCORING_MODE_PATTERN)
    pars: list[int]
    stroke_index: list[int] | None = None
    course_rating: float | None = Field(None, ge=MIN_COURSE_RATING, le=MAX_COURSE_RATING)
    slope_rating: int | None = Field(None, ge=MIN_SLOPE_RATING, le=MAX_SLOPE_RATING)
    total_series_teams: int | None = Field(None, ge=1)
    settings: dict = Field(default_factory=dict)
    competitors: list[CompetitorPayload]

    @field_validator('pars')
    @classmethod
    def validate_pars(cls, v):
        """Ensure 1-18 holes with realistic pars."""
        if not 1 <= len(v) <= HOLES_PER_ROUND:
            raise ValueError(f'Course must have 1-{HOLES_PER_ROUND} pars, got {len(v)}')
        for par in v:
            if not MIN_PAR <= par <= MAX_PAR:
                raise ValueError(f'Invalid par: {par}')
        return v

    @model_validator(mode='after')
    def validate_unique_ids(self):
        """Ensure no two competitors share an id."""
        seen = set()
        duplicates = []
        for competitor in self.competitors:
            if competitor.id in seen and competitor.id not in duplicates:
                duplicates.append(competitor.id)
            seen.add(competitor.id)
        if duplicates:
            raise ValueError(f'Duplicate competitor ids: {", ".join(str(d) for d in duplicates)}')
        return self

    class Config:
        extra = 'forbid'
