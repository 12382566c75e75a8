"""Suite discovery and loading for calcbench.

Each suite is a subdirectory of calcbench/suites/ containing:
    __init__.py  — NAME, DESCRIPTION constants and build_suite()
    tests/       — (optional) the same suite written as a plain pytest module
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from calcbench.suite import Suite

logger = logging.getLogger(__name__)


@dataclass
class SuiteInfo:
    """Metadata about a discovered suite."""

    name: str
    description: str
    path: Path
    suite: Suite
    tests_dir: Optional[Path]


def _suites_root() -> Path:
    """Absolute path to the suites/ directory."""
    return Path(__file__).parent


def list_suites() -> list[SuiteInfo]:
    """Discover all bundled suites.

    Scans subdirectories of calcbench/suites/ for packages whose __init__.py
    defines build_suite().
    """
    suites = []
    for child in sorted(_suites_root().iterdir()):
        if not child.is_dir() or not (child / "__init__.py").exists():
            continue
        info = load_suite(child.name)
        if info:
            suites.append(info)
    return suites


def load_suite(name: str) -> Optional[SuiteInfo]:
    """Load a single suite by name.

    Args:
        name: Directory name under calcbench/suites/ (e.g., 'calculator').

    Returns:
        SuiteInfo if the suite exists and is valid, None otherwise.
    """
    suite_dir = _suites_root() / name
    if not name.isidentifier() or not (suite_dir / "__init__.py").exists():
        return None

    try:
        mod = importlib.import_module(f"calcbench.suites.{name}")
    except ImportError as e:
        logger.warning("Could not import suite %s: %s", name, e)
        return None

    build = getattr(mod, "build_suite", None)
    if build is None:
        return None

    tests_dir = suite_dir / "tests"
    if not tests_dir.is_dir():
        tests_dir = None

    return SuiteInfo(
        name=getattr(mod, "NAME", name),
        description=getattr(mod, "DESCRIPTION", ""),
        path=suite_dir,
        suite=build(),
        tests_dir=tests_dir,
    )
