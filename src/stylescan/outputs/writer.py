"""Report file writing.

The report text is built completely in memory and written once through a
temporary file in the destination directory, then moved into place, so a
failed write never leaves a partial report behind.
"""

from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path

from stylescan.core.exceptions import OutputError
from stylescan.core.models import OutputFormat

logger = logging.getLogger(__name__)

FILE_EXTENSIONS: dict[OutputFormat, str] = {
    OutputFormat.MARKDOWN: ".md",
    OutputFormat.JSON: ".json",
}


def default_output_path(
    output_dir: Path,
    fmt: OutputFormat = OutputFormat.MARKDOWN,
    now: datetime | None = None,
) -> Path:
    """Return ``<output_dir>/scan-<YYYYMMDD_HHMMSS>.<ext>``."""
    now = now or datetime.now()
    extension = FILE_EXTENSIONS[OutputFormat(fmt)]
    return Path(output_dir) / f"scan-{now.strftime('%Y%m%d_%H%M%S')}{extension}"


def write_report(text: str, path: Path | str) -> Path:
    """Write ``text`` to ``path`` atomically, creating parent directories.

    Returns:
        The path written.

    Raises:
        OutputError: If the directory cannot be created or the file written.
    """
    path = Path(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(
            f"Cannot create output directory: {e}", output_path=str(path)
        ) from e

    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputError(f"Cannot write report: {e}", output_path=str(path)) from e

    logger.debug("Wrote %d characters to %s", len(text), path)
    return path
