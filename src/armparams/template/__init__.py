"""Reading ARM templates and classifying their parameters."""

from .classify import is_expression_call, is_mandatory, is_non_referenced, mandatory, non_referenced
from .extract import ParameterDescriptor, extract_parameters
from .loader import DEFAULT_TEMPLATE_NAME, Template, default_template_path, load_template

__all__ = [
    "DEFAULT_TEMPLATE_NAME",
    "ParameterDescriptor",
    "Template",
    "default_template_path",
    "extract_parameters",
    "is_expression_call",
    "is_mandatory",
    "is_non_referenced",
    "load_template",
    "mandatory",
    "non_referenced",
]
