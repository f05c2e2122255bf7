from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_NOT_FOUND, ERR_PARSE, ERR_VALIDATION


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


class InputNotFoundError(ScriptError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ERR_NOT_FOUND, "not_found")


class InputParseError(ScriptError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ERR_PARSE, "parse_error")


class TemplateNotFoundError(InputNotFoundError):
    pass


class TemplateParseError(InputParseError):
    pass


class ParameterFileValidationError(ScriptError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ERR_VALIDATION, "validation_error")
