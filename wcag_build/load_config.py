"""Logic for loading and merging configuration files."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from wcag_build import __version__
from wcag_build.deep_merge import deep_merge
from wcag_build.fetch_and_expect_2xx import DEFAULT_TIMEOUT
from wcag_build.run_mode import SERVE_RUN_MODE

RUN_MODE_ENV = "WCAG_BUILD_RUN_MODE"
FETCH_TIMEOUT_ENV = "WCAG_BUILD_FETCH_TIMEOUT"

DEFAULT_CONFIG: dict[str, Any] = {
    "run_mode": SERVE_RUN_MODE,
    "fetch": {
        "timeout": DEFAULT_TIMEOUT,
        "user_agent": f"wcag-build/{__version__}",
    },
}


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    run_mode = os.getenv(RUN_MODE_ENV)
    if run_mode:
        overrides["run_mode"] = run_mode
    timeout = os.getenv(FETCH_TIMEOUT_ENV)
    if timeout:
        try:
            overrides["fetch"] = {"timeout": int(timeout)}
        except ValueError:
            msg = f"{FETCH_TIMEOUT_ENV} must be an integer, got {timeout!r}"
            raise ValueError(msg) from None
    return overrides


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Environment variables take precedence over the file.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return deep_merge(config, _env_overrides())
