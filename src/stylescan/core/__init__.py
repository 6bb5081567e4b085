# Core module for stylescan

from stylescan.core.models import (
    AntiPatternHit,
    Hit,
    Match,
    OutputFormat,
    ScanConfig,
    ScanReport,
)
from stylescan.core.stats import (
    ScanStats,
    SkipReason,
    SkippedFile,
)
