from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..core.errors import TemplateParseError

DEFAULT_VALUE_KEY = "defaultValue"


@dataclass(frozen=True)
class ParameterDescriptor:
    name: str
    properties: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @property
    def has_default(self) -> bool:
        return self.properties.get(DEFAULT_VALUE_KEY) is not None

    @property
    def default_value(self) -> Any:
        return self.properties.get(DEFAULT_VALUE_KEY)

    @property
    def type(self) -> str | None:
        value = self.properties.get("type")
        return value if isinstance(value, str) else None


def extract_parameters(template: Mapping[str, Any]) -> tuple[ParameterDescriptor, ...]:
    """Return the template's declared parameters in declaration order.

    A template without a ``parameters`` object declares no parameters.
    """
    declared = template.get("parameters")
    if declared is None:
        return ()
    if not isinstance(declared, Mapping):
        raise TemplateParseError(f"template `parameters` must be an object, got {type(declared).__name__}")
    return tuple(
        ParameterDescriptor(name=str(name), properties=spec if isinstance(spec, Mapping) else {})
        for name, spec in declared.items()
    )
