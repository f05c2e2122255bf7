from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from .extract import ParameterDescriptor

# Defaults shaped like `func(args)` are template expressions, not literals.
EXPRESSION_CALL_RE = re.compile(r"\(.*\)")


def is_expression_call(value: Any) -> bool:
    return isinstance(value, str) and EXPRESSION_CALL_RE.search(value) is not None


def is_mandatory(parameter: ParameterDescriptor) -> bool:
    return not parameter.has_default or parameter.default_value == ""


def is_non_referenced(parameter: ParameterDescriptor) -> bool:
    return is_mandatory(parameter) or not is_expression_call(parameter.default_value)


def mandatory(parameters: Iterable[ParameterDescriptor]) -> tuple[ParameterDescriptor, ...]:
    return tuple(p for p in parameters if is_mandatory(p))


def non_referenced(parameters: Iterable[ParameterDescriptor]) -> tuple[ParameterDescriptor, ...]:
    return tuple(p for p in parameters if is_non_referenced(p))
