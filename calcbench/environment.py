"""Environment-driven settings for calcbench.

Settings come from environment variables with command-line options on top:

    CALCBENCH_RESULTS_DIR  where run reports are stored (default ./results)
    CALCBENCH_LOG_LEVEL    console log level (default WARNING)

Also builds the env dict handed to the pytest judge subprocess.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

RESULTS_DIR_VAR = "CALCBENCH_RESULTS_DIR"
LOG_LEVEL_VAR = "CALCBENCH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Vars that let a user's shell inject options or plugins into the judge run.
_PYTEST_OVERRIDE_VARS = ("PYTEST_ADDOPTS", "PYTEST_PLUGINS")


def results_root(override: Optional[Path] = None) -> Path:
    """Directory holding <suite>/<timestamp>/report.json."""
    if override:
        return override
    value = os.environ.get(RESULTS_DIR_VAR)
    if value:
        return Path(value).expanduser()
    return Path.cwd() / "results"


def log_level_name(override: Optional[str] = None) -> str:
    """Console log level name, upper-cased."""
    return (override or os.environ.get(LOG_LEVEL_VAR) or DEFAULT_LOG_LEVEL).upper()


def build_judge_env() -> dict[str, str]:
    """Build env for the pytest judge subprocess.

    Strips user-level pytest overrides so the judged suite runs with the
    options the judge passes and nothing else.
    """
    env = os.environ.copy()
    for key in _PYTEST_OVERRIDE_VARS:
        env.pop(key, None)
    # Keep the judge's bytecode out of the suite directory
    env["PYTHONDONTWRITEBYTECODE"] = "1"
    return env
