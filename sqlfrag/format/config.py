"""Pydantic configuration model for choosing a placeholder format.

Applications that keep their database settings in a config file can load
the placeholder style the same way as everything else::

    cfg = PlaceholderConfig.model_validate({"style": "dollar"})
    builder = StatementBuilder.from_config(cfg)

    # arbitrary prefix
    cfg = PlaceholderConfig(style="numbered", prefix="@param")
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from sqlfrag.errors import FormatConfigError
from sqlfrag.format.placeholders import PlaceholderFormat
from sqlfrag.format.registry import PlaceholderFormatFactory

#: Style name that takes a caller-supplied prefix instead of a registry entry.
NUMBERED_STYLE = "numbered"


class PlaceholderConfig(BaseModel):
    """Selects the placeholder format applied to rendered statements.

    Attributes:
        style: A name registered with
            :class:`~sqlfrag.format.registry.PlaceholderFormatFactory`
            (``question``, ``dollar``, ``colon``, ``atp`` out of the box), or
            ``"numbered"`` together with ``prefix``.
        prefix: Prefix for the ``numbered`` style; must be omitted otherwise.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    style: str = "question"
    prefix: str | None = None

    @model_validator(mode="after")
    def _check_prefix(self) -> PlaceholderConfig:
        if self.style == NUMBERED_STYLE:
            if not self.prefix:
                raise FormatConfigError(
                    "The 'numbered' placeholder style requires a non-empty prefix."
                )
            return self
        if self.prefix is not None:
            raise FormatConfigError(
                f"'prefix' is only valid with the '{NUMBERED_STYLE}' style, "
                f"not '{self.style}'."
            )
        # Fail at load time rather than on the first render.
        PlaceholderFormatFactory.create(self.style)
        return self

    def to_format(self) -> PlaceholderFormat:
        """Resolve this configuration to a :class:`PlaceholderFormat`."""
        if self.style == NUMBERED_STYLE:
            return PlaceholderFormatFactory.numbered(self.prefix or "")
        return PlaceholderFormatFactory.create(self.style)
