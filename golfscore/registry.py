"""Registry of available scoring formats."""

import logging

from .base_format import ScoringFormat
from .exceptions import UnknownFormatError
from .stableford import StablefordStrategy
from .stroke_play import StrokePlayStrategy

logger = logging.getLogger('golfscore.registry')


class FormatRegistry:
    """
    Maps format names to scoring format classes.

    Registration happens at import time; afterwards the registry is only read.
    """

    def __init__(self, formats: tuple[type[ScoringFormat], ...] = ()):
        self._formats: dict[str, type[ScoringFormat]] = {}
        for format_class in formats:
            self.register(format_class)

    def register(self, format_class: type[ScoringFormat]) -> None:
        """
        Register a scoring format class under its type_name.

        Raises:
            ValueError: If the class has no type_name
        """
        if not format_class.type_name:
            raise ValueError(f'{format_class.__name__} has no type_name')
        if format_class.type_name in self._formats:
            logger.warning(f'Replacing scoring format {format_class.type_name}')
        self._formats[format_class.type_name] = format_class

    def get(self, type_name: str) -> ScoringFormat:
        """
        Get a new instance of a scoring format.

        Raises:
            UnknownFormatError: If no format is registered under type_name
        """
        format_class = self._formats.get(type_name)
        if format_class is None:
            raise UnknownFormatError(type_name, self.list_available())
        return format_class()

    def has(self, type_name: str) -> bool:
        return type_name in self._formats

    def list_available(self) -> list[str]:
        return list(self._formats)

    def all_metadata(self) -> list[dict[str, str]]:
        """type_name and display_name of every registered format."""
        return [
            {'type_name': cls.type_name, 'display_name': cls.display_name}
            for cls in self._formats.values()
        ]


format_registry = FormatRegistry((StrokePlayStrategy, StablefordStrategy))
