"""Base interface of the document processor that reads and renders templates."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class TemplateProcessor(ABC):
    """
    Abstract base class for template processors.

    Implementations open a template artifact, report its placeholder
    identifiers and perform the actual substitution and cloning.
    """

    @abstractmethod
    def get_variables(self) -> list[str]:
        """Placeholder identifiers found in the template, in document order."""
        pass

    @abstractmethod
    def set_values(self, values: dict[str, Any]) -> None:
        """Substitute scalar placeholders."""
        pass

    @abstractmethod
    def clone_row_and_set_values(self, search: str, rows: list[dict[str, Any]]) -> None:
        """Clone the table row holding ``search`` once per row and fill the copies."""
        pass

    @abstractmethod
    def clone_block(
        self,
        block_name: str,
        clone_count: int = 0,
        replace: bool = True,
        indexed: bool = False,
        variable_replacements: Optional[list[dict[str, Any]]] = None,
    ) -> None:
        """Clone a block region, one copy per replacement entry."""
        pass


ProcessorFactory = Callable[[str], TemplateProcessor]
