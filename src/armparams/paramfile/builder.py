from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..template.classify import mandatory, non_referenced
from ..template.extract import ParameterDescriptor, extract_parameters
from ..template.loader import load_template

PARAMETER_FILE_SCHEMA = "https://schema.management.azure.com/schemas/2019-04-01/deploymentParameters.json#"
CONTENT_VERSION = "1.0.0.0"


def build_parameter_file(parameters: Iterable[ParameterDescriptor]) -> dict[str, Any]:
    slots: dict[str, dict[str, str]] = {}
    for parameter in parameters:
        slots[parameter.name] = {"value": ""}
    return {
        "$schema": PARAMETER_FILE_SCHEMA,
        "contentVersion": CONTENT_VERSION,
        "parameters": slots,
    }


def selection_name(only_mandatory: bool = False, only_non_referenced: bool = False) -> str:
    if only_mandatory:
        return "mandatory"
    if only_non_referenced:
        return "non_referenced"
    return "all"


@dataclass(frozen=True)
class ParameterFileGenerator:
    """Parameter sets of one template, classified once at construction.

    ``only_mandatory`` takes precedence over ``only_non_referenced`` when
    both are requested.
    """

    all_parameters: tuple[ParameterDescriptor, ...]
    mandatory_parameters: tuple[ParameterDescriptor, ...]
    non_referenced_parameters: tuple[ParameterDescriptor, ...]

    @classmethod
    def from_parameters(cls, parameters: Iterable[ParameterDescriptor]) -> "ParameterFileGenerator":
        everything = tuple(parameters)
        return cls(
            all_parameters=everything,
            mandatory_parameters=mandatory(everything),
            non_referenced_parameters=non_referenced(everything),
        )

    @classmethod
    def from_template(cls, template: Mapping[str, Any]) -> "ParameterFileGenerator":
        return cls.from_parameters(extract_parameters(template))

    @classmethod
    def from_path(cls, path: str | Path) -> "ParameterFileGenerator":
        return cls.from_template(load_template(path))

    def select(self, only_mandatory: bool = False, only_non_referenced: bool = False) -> tuple[ParameterDescriptor, ...]:
        selected = selection_name(only_mandatory, only_non_referenced)
        if selected == "mandatory":
            return self.mandatory_parameters
        if selected == "non_referenced":
            return self.non_referenced_parameters
        return self.all_parameters

    def build(self, only_mandatory: bool = False, only_non_referenced: bool = False) -> dict[str, Any]:
        return build_parameter_file(self.select(only_mandatory, only_non_referenced))

    def summary(self) -> dict[str, object]:
        sets = {
            "all": self.all_parameters,
            "mandatory": self.mandatory_parameters,
            "non_referenced": self.non_referenced_parameters,
        }
        return {
            "counts": {key: len(value) for key, value in sets.items()},
            "names": {key: [p.name for p in value] for key, value in sets.items()},
        }
