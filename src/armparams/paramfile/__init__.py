"""Building, serializing and validating ARM deployment parameter files."""

from .builder import CONTENT_VERSION, PARAMETER_FILE_SCHEMA, ParameterFileGenerator, build_parameter_file
from .schema import validate_parameter_file
from .serialize import serialize_parameter_file

__all__ = [
    "CONTENT_VERSION",
    "PARAMETER_FILE_SCHEMA",
    "ParameterFileGenerator",
    "build_parameter_file",
    "serialize_parameter_file",
    "validate_parameter_file",
]
