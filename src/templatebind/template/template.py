"""Template orchestration: bindings in, processor calls out."""

import logging
from collections.abc import Mapping
from typing import Union

from ..bindings import BindingStore
from ..bindings.syntax import VARIABLE_PATTERN
from .processor import ProcessorFactory, TemplateProcessor

logger = logging.getLogger(__name__)


def substitute_variables(text: str, values: Mapping) -> str:
    """
    Substitute ``${key}`` placeholders of a plain string.

    Missing or None values become empty strings.

    Args:
        text: String containing ``${key}`` placeholders
        values: Scalar values keyed by placeholder name

    Returns:
        The populated string
    """

    def _replace(match) -> str:
        value = values.get(match.group(1))
        return "" if value is None else str(value)

    return VARIABLE_PATTERN.sub(_replace, text)


class Template:
    """
    A template artifact together with its bindings.

    The processor factory opens the artifact at a path; the template only
    decides what to substitute and which rows and blocks to clone.
    """

    def __init__(self, path: str, processor_factory: ProcessorFactory):
        """
        Initialize the template.

        Args:
            path: Location of the template artifact
            processor_factory: Callable opening a TemplateProcessor for a path
        """
        self.template_path = path
        self.processor_factory = processor_factory

        processor = self.processor_factory(self.template_path)
        self._bindings = BindingStore.init(processor.get_variables())
        logger.info(f"Loaded template {self.template_path}: {self._bindings!r}")

    @classmethod
    def load(cls, path: str, processor_factory: ProcessorFactory) -> "Template":
        return cls(path, processor_factory)

    @property
    def bindings(self) -> BindingStore:
        return self._bindings

    def fill(self, data: Union[BindingStore, Mapping]) -> "Template":
        self._bindings.fill(data)
        return self

    def populate(self, text: str) -> str:
        """
        Substitute ``${key}`` placeholders of a plain string with scalar values.

        Tables and blocks are ignored.

        Args:
            text: String containing ``${key}`` placeholders

        Returns:
            The populated string
        """
        return substitute_variables(text, self._bindings.values())

    def compile(self) -> TemplateProcessor:
        """
        Render the bindings into a fresh processor.

        Returns:
            The processor after substitution and cloning, ready to be saved
        """
        processor = self.processor_factory(self.template_path)
        processor.set_values(self._bindings.values())

        for table, rows in self._bindings.tables(full_path=True).items():
            anchor = self._bindings.table_id_for(table)
            if anchor is None:
                logger.warning(f"Table '{table}' has no columns to clone rows from")
                continue
            processor.clone_row_and_set_values(anchor, rows)

        for block, entries in self._bindings.blocks(full_path=True).items():
            processor.clone_block(self._bindings.block_id_for(block), 0, True, False, entries)

        logger.debug(f"Compiled template {self.template_path}")
        return processor
