"""Template orchestration on top of the binding store."""

from .mixins import HasBindings
from .processor import ProcessorFactory, TemplateProcessor
from .template import Template

__all__ = [
    "HasBindings",
    "ProcessorFactory",
    "TemplateProcessor",
    "Template",
]
