"""Run modes the site build can execute in."""

BUILD_RUN_MODE = "build"
SERVE_RUN_MODE = "serve"


def is_build_mode(run_mode: str | None) -> bool:
    """Return True when running a production build rather than a dev server."""
    return run_mode == BUILD_RUN_MODE
