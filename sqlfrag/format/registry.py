"""Placeholder format registry.

``PlaceholderFormatFactory`` maps short names (``"question"``, ``"dollar"``,
...) to :class:`~sqlfrag.format.placeholders.PlaceholderFormat` instances so
that the format can be chosen from configuration rather than code.  New
formats are registered once and then resolve by name everywhere::

    from sqlfrag.format.registry import PlaceholderFormatFactory
    from sqlfrag.format.placeholders import PositionalNumbered

    PlaceholderFormatFactory.register("snowflake", PositionalNumbered(":"))

    fmt = PlaceholderFormatFactory.create("snowflake")
"""

from __future__ import annotations

from typing import ClassVar

from sqlfrag.errors import FormatConfigError
from sqlfrag.format.placeholders import (
    AT_P,
    COLON,
    DOLLAR,
    QUESTION,
    PlaceholderFormat,
    PositionalNumbered,
)


class PlaceholderFormatFactory:
    """Registry mapping format names to :class:`PlaceholderFormat` instances.

    Formats are stateless, so the registered instance itself is handed out.
    """

    _formats: ClassVar[dict[str, PlaceholderFormat]] = {}

    @classmethod
    def register(cls, name: str, fmt: PlaceholderFormat) -> None:
        """Register ``fmt`` under ``name``, replacing any previous entry.

        Args:
            name: Lookup key (e.g. ``"dollar"``).
            fmt: The placeholder format to hand out for ``name``.
        """
        cls._formats[name] = fmt

    @classmethod
    def create(cls, name: str) -> PlaceholderFormat:
        """Return the format registered for ``name``.

        Raises:
            FormatConfigError: If no format is registered for ``name``.
        """
        fmt = cls._formats.get(name)
        if fmt is None:
            registered = cls.registered_names()
            raise FormatConfigError(
                f"Unknown placeholder format: '{name}'. Registered formats: {registered}.",
                registered=registered,
            )
        return fmt

    @classmethod
    def numbered(cls, prefix: str) -> PlaceholderFormat:
        """Return a positional format for an arbitrary ``prefix``."""
        return PositionalNumbered(prefix)

    @classmethod
    def registered_names(cls) -> list[str]:
        """Return the sorted list of registered format names."""
        return sorted(cls._formats)


PlaceholderFormatFactory.register("question", QUESTION)
PlaceholderFormatFactory.register("dollar", DOLLAR)
PlaceholderFormatFactory.register("colon", COLON)
PlaceholderFormatFactory.register("atp", AT_P)
