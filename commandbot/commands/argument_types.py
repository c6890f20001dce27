"""Command argument declarations."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..errors import ArgumentDeclarationError


@dataclass(frozen=True)
class ArgumentDeclaration:
    """Declares a positional argument of a command.

    ``type`` is the id of a registered argument type. An argument with a
    ``default`` other than ``None`` is optional; an ``infinite`` argument
    captures every remaining token and must be declared last.
    """

    key: str
    label: str
    type: str = "string"
    default: Any = None
    infinite: bool = False

    def __post_init__(self):
        for field_name in ("key", "label", "type"):
            value = getattr(self, field_name)
            if not value or not isinstance(value, str):
                raise ArgumentDeclarationError(f"Argument {field_name} must be a non-empty string.")
        if not isinstance(self.infinite, bool):
            raise ArgumentDeclarationError(f'Argument "{self.key}" infinite flag must be a boolean.')

    @property
    def optional(self) -> bool:
        return self.default is not None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ArgumentDeclaration":
        """Build a declaration from a ``{key, label, type, default?, infinite?}`` mapping."""
        try:
            return cls(
                key=data["key"],
                label=data.get("label", data["key"]),
                type=data.get("type", "string"),
                default=data.get("default"),
                infinite=data.get("infinite", False),
            )
        except KeyError as e:
            raise ArgumentDeclarationError(f"Argument declaration is missing {e}.") from e

    @classmethod
    def coerce(cls, value: "ArgumentDeclaration | Mapping[str, Any]") -> "ArgumentDeclaration":
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_mapping(value)
        raise ArgumentDeclarationError(f"Invalid argument declaration: {value!r}")
