"""stylescan - a code style scanner for service repositories.

stylescan walks a source tree, counts how often each detector of a catalog
of regular expressions matches (frameworks, testing, async, persistence and
more), lists anti-pattern occurrences with remediation notes, and writes a
Markdown style-guide draft with rule-based recommendations.
"""

__version__ = "1.0.0"
