"""JSON output formatter for stylescan.

Serializes the whole ScanReport, examples included, using Pydantic's
model serialization.
"""

from stylescan.core.models import ScanReport
from stylescan.outputs import BaseOutput


class JsonOutput(BaseOutput):
    """Output formatter that serializes ScanReport to formatted JSON.

    Example:
        formatter = JsonOutput()
        json_str = formatter.format(report)
    """

    @property
    def name(self) -> str:
        """Return the formatter name."""
        return "json"

    def format(self, report: ScanReport) -> str:
        return report.model_dump_json(indent=2) + "\n"
