"""Output formatter classes for stylescan.

This module provides the base output interface and the lookup used to
pick a formatter for a report format.
"""

from abc import ABC, abstractmethod

from stylescan.core.models import OutputFormat, ScanReport


class BaseOutput(ABC):
    """Abstract base class for all output formatters.

    Subclasses must implement the `name` property and `format` method
    to provide specific formatting logic for different output types.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the unique name of this output formatter."""
        pass

    @abstractmethod
    def format(self, report: ScanReport) -> str:
        """Format a scan report for output.

        Args:
            report: The ScanReport to format.

        Returns:
            The complete report text.
        """
        pass


def get_output(fmt: OutputFormat | str) -> BaseOutput:
    """Return a formatter instance for ``fmt``.

    Raises:
        ValueError: If the format is not supported.
    """
    from stylescan.outputs.json_output import JsonOutput
    from stylescan.outputs.markdown_output import MarkdownOutput

    formatters: dict[OutputFormat, type[BaseOutput]] = {
        OutputFormat.MARKDOWN: MarkdownOutput,
        OutputFormat.JSON: JsonOutput,
    }
    return formatters[OutputFormat(fmt)]()
