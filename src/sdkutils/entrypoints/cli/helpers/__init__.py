"""CLI helpers for SDKUTILS.

Option callbacks (NAME=LEVEL and KEY=VALUE parsing), OSC-8 terminal
hyperlinks, and stderr message emitters with emoji→ASCII fallbacks.
"""

from .hyperlinks import hyperlink
from .log_level_parser import parse_log_level
from .messages import error, success, warn
from .pairs import parse_pairs

__all__ = ["hyperlink", "parse_log_level", "parse_pairs", "error", "success", "warn"]
