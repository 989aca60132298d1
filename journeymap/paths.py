"""
Centralized path configuration for the journeymap project.

Environment Variables:
    JOURNEYMAP_DATA_ROOT  - Folder holding the public data files
                            (defaults to <project>/public)
    JOURNEYMAP_LOGS_DIR   - Folder for log files (defaults to <project>/logs)

Folder Structure:
    public/
        api-data/
            countries.json    - Pre-processed country dataset (primary)
            macroareas.json   - Pre-aggregated macroareas (script output)
            stats.json        - Processing statistics (script output)
        data/
            countries.csv     - Raw country dataset (fallback)
        globe-data/
            BS-globe.json     - One globe file per theme
            ...
"""

import os
from pathlib import Path

from .constants import THEME_FILES

# =============================================================================
# Base Path Detection
# =============================================================================

def _get_project_root() -> Path:
    """Project root: parent of this file's package directory."""
    return Path(__file__).resolve().parent.parent


def _get_data_root() -> Path:
    """
    Get the public data folder.

    Priority:
    1. JOURNEYMAP_DATA_ROOT environment variable
    2. <project>/public
    """
    env_root = os.environ.get("JOURNEYMAP_DATA_ROOT")
    if env_root:
        return Path(env_root)
    return _get_project_root() / "public"


def _get_logs_dir() -> Path:
    env_dir = os.environ.get("JOURNEYMAP_LOGS_DIR")
    if env_dir:
        return Path(env_dir)
    return _get_project_root() / "logs"


# =============================================================================
# Core Path Definitions
# =============================================================================

PROJECT_ROOT = _get_project_root()
DATA_ROOT = _get_data_root()
LOGS_DIR = _get_logs_dir()

API_DATA_DIR = DATA_ROOT / "api-data"
RAW_DATA_DIR = DATA_ROOT / "data"
GLOBE_DATA_DIR = DATA_ROOT / "globe-data"

COUNTRIES_JSON_PATH = API_DATA_DIR / "countries.json"
COUNTRIES_CSV_PATH = RAW_DATA_DIR / "countries.csv"

SETTINGS_PATH = PROJECT_ROOT / "settings.json"


# =============================================================================
# Helper Functions
# =============================================================================

def get_globe_file(theme: str) -> Path:
    """Get the globe data file for a canonical theme id."""
    return GLOBE_DATA_DIR / THEME_FILES[theme]


def ensure_dir(path: Path) -> Path:
    """Create directory if it doesn't exist, return the path."""
    path.mkdir(parents=True, exist_ok=True)
    return path


# =============================================================================
# Validation
# =============================================================================

def validate_paths(verbose: bool = False) -> dict:
    """
    Check which paths exist. Useful for debugging path issues and for the
    health endpoint.

    Returns:
        Dict with path names and their existence status
    """
    paths_to_check = {
        "DATA_ROOT": DATA_ROOT,
        "API_DATA_DIR": API_DATA_DIR,
        "GLOBE_DATA_DIR": GLOBE_DATA_DIR,
    }

    results = {}
    for name, path in paths_to_check.items():
        exists = path.exists()
        results[name] = {"path": str(path), "exists": exists}
        if verbose:
            status = "OK" if exists else "MISSING"
            print(f"{status}: {name} = {path}")

    return results


def globe_file_status() -> dict:
    """Map each globe file name to whether it exists."""
    return {
        filename: (GLOBE_DATA_DIR / filename).exists()
        for filename in THEME_FILES.values()
    }


if __name__ == "__main__":
    print("Path Configuration:")
    print("=" * 60)
    print(f"  JOURNEYMAP_DATA_ROOT env: {os.environ.get('JOURNEYMAP_DATA_ROOT', '(not set)')}")
    print(f"  Resolved DATA_ROOT:       {DATA_ROOT}")
    print("=" * 60)
    validate_paths(verbose=True)
