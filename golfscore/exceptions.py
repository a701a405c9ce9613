"""Exceptions raised by the scoring engine.

Only setup mistakes and illegal score entries raise. Bad data shapes and
abandoned holes are handled in place and never reach these types.
"""


class ScoringError(ValueError):
    """Base class for golfscore errors."""


class UnknownFormatError(ScoringError):
    """Raised when a scoring format name is not registered."""

    def __init__(self, type_name: str, available: list[str]) -> None:
        self.type_name = type_name
        self.available = list(available)
        super().__init__(
            f'Unknown scoring format: {type_name}. '
            f'Available formats: {", ".join(self.available)}'
        )


class InvalidSettingsError(ScoringError):
    """Raised when format-specific settings fail validation."""

    def __init__(self, type_name: str, problems: list[str]) -> None:
        self.type_name = type_name
        self.problems = list(problems)
        super().__init__(f'Invalid settings for {type_name}: {"; ".join(self.problems)}')


class InvalidScoreError(ScoringError):
    """Raised for a score entry that is not -1, 0 or a positive stroke count."""

    def __init__(self, hole: int, shots: object, reason: str = 'Invalid score value') -> None:
        self.hole = hole
        self.shots = shots
        super().__init__(f'{reason}: hole {hole}, shots {shots!r}')
