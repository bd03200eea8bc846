"""Configuration for PriorityValue and PriorityMap.

PriorityConfig holds the defaults applied when set()/delete() are called
without an explicit context or priority. It follows the same conventions
as other config sections: `extra="allow"` so unknown fields are preserved
and can be audited with get_extra_fields().

Example:
    >>> import prioritymap
    >>> config = prioritymap.PriorityConfig(default_context="base", default_priority=0)
    >>> pmap = prioritymap.PriorityMap(config=config)
    >>> pmap.set("flag", True)  # context "base", priority 0
"""

import typing as _typing

import pydantic as _pydantic

DEFAULT_CONTEXT = "Default"
DEFAULT_PRIORITY = 1


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for config types.

    Unknown fields are kept rather than dropped so typos can be found.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Return fields that were provided but not in the schema.

        Returns:
            Dict of field_name → value for all unrecognized fields.
        """
        return dict(self.model_extra) if self.model_extra else {}

    def has_extra_fields(self) -> bool:
        """Check if this config has any unrecognized fields."""
        return bool(self.model_extra)


class PriorityConfig(ConfigBase):
    """Defaults for context label and priority."""

    model_config = _pydantic.ConfigDict(extra="allow", frozen=True)

    default_context: str = _pydantic.Field(
        default=DEFAULT_CONTEXT,
        min_length=1,
        description="Context label used when none is given",
    )
    default_priority: int = _pydantic.Field(
        default=DEFAULT_PRIORITY,
        description="Priority used when none is given",
    )

    def resolve_context(self, context: str | None) -> str:
        """Return context, or the default when it is None."""
        return self.default_context if context is None else context

    def resolve_priority(self, priority: int | None) -> int:
        """Return priority, or the default when it is None."""
        return self.default_priority if priority is None else priority
