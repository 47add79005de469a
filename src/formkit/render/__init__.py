from ._meta import config, logger  # isort: skip
from .element import Element, SelectOption, parse_element, sort_elements
from .engine import RenderEngine, RenderResult, render
from .exceptions import (
    ElementValidationError,
    RenderExecutionError,
    TemplateCompileError,
    TemplateNotFound,
)
from .helpers import HELPERS, is_blank
from .registry import TemplateRegistry, create_registry
from .templates import BUILTIN_TEMPLATES

__all__ = (
    "config", "logger",
    "Element", "SelectOption", "parse_element", "sort_elements",
    "RenderEngine", "RenderResult", "render",
    "ElementValidationError", "RenderExecutionError",
    "TemplateCompileError", "TemplateNotFound",
    "HELPERS", "is_blank",
    "TemplateRegistry", "create_registry",
    "BUILTIN_TEMPLATES",
)
