"""
Logging and analytics functions for API request tracking and error monitoring.
"""

import json
import logging
import os
from datetime import datetime

from . import paths

# Set up logging
logs_dir = paths.ensure_dir(paths.LOGS_DIR)

app_log_path = logs_dir / "journeymap.log"

# Create a custom logger with proper configuration
logger = logging.getLogger("journeymap")
logger.setLevel(logging.INFO)

# Remove any existing handlers to avoid duplicates on reload
for handler in logger.handlers[:]:
    logger.removeHandler(handler)

formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

# Handlers pass everything; the logger level decides what is emitted
# File handler - all logs go to file
file_handler = logging.FileHandler(app_log_path, encoding='utf-8')
file_handler.setFormatter(formatter)

# Console handler
console_handler = logging.StreamHandler()
console_handler.setFormatter(formatter)

logger.addHandler(file_handler)
logger.addHandler(console_handler)

# Prevent propagation to root logger (avoids duplicate logs)
logger.propagate = False

# Request analytics - tracks usage patterns
analytics_dir = paths.ensure_dir(logs_dir / "analytics")
analytics_log_path = analytics_dir / "api_queries.jsonl"


def set_log_level(level):
    """
    Apply a log level name (e.g. "DEBUG") to the journeymap logger.
    Unknown names keep INFO and log a warning.
    """
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        logger.setLevel(logging.INFO)
        logger.warning(f"Unknown log level {level!r}, using INFO")
        return logging.INFO
    logger.setLevel(value)
    return value


def log_api_query(endpoint, params=None, total=None, cache_hit=None):
    """
    Append one API request to the local analytics log.

    Args:
        endpoint: Route that served the request ('countries', 'globe', ...)
        params: Query parameters as received (None values are dropped)
        total: Number of records returned
        cache_hit: Whether the response came from the response cache
    """
    entry = {
        "timestamp": datetime.now().isoformat(),
        "endpoint": endpoint,
        "params": {k: v for k, v in (params or {}).items() if v is not None},
        "total": total,
        "cache_hit": cache_hit,
    }

    try:
        with open(analytics_log_path, 'a', encoding='utf-8') as f:
            json.dump(entry, f, ensure_ascii=False)
            f.write('\n')
    except Exception as e:
        logger.error(f"Failed to log analytics locally: {e}")


def log_error(endpoint, error, params=None):
    """Log an unexpected handler error with its context."""
    details = {
        "timestamp": datetime.now().isoformat(),
        "endpoint": endpoint,
        "error_type": type(error).__name__,
        "error_message": str(error),
        "params": params or {},
    }
    logger.error(f"Unexpected Error: {json.dumps(details, indent=2, default=str)}")


set_log_level(os.environ.get("JOURNEYMAP_LOG_LEVEL", "INFO"))
