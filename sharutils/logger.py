# Sharutils — (c) 2025 sharutils contributors — MIT Licensed
"""Package-wide logger for sharutils."""
import logging

logger: logging.Logger = logging.getLogger("sharutils")
