"""Tests for the wcag-build command line."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from wcag_build.cli import main
from wcag_build.fetch_and_expect_2xx import DEFAULT_TIMEOUT

REQUEST = "wcag_build.fetch_and_expect_2xx.requests.request"


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WCAG_BUILD_RUN_MODE", raising=False)
    monkeypatch.delenv("WCAG_BUILD_FETCH_TIMEOUT", raising=False)


def test_slug(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the slug command prints one ID per title."""
    assert main(["slug", "Foo, Bar: (Baz)", "Parsing (Obsolete and removed)"]) == 0
    assert capsys.readouterr().out.splitlines() == ["foo-bar-baz", "parsing"]


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the version command formats the code."""
    assert main(["version", "22"]) == 0
    assert capsys.readouterr().out.strip() == "2.2"


def test_sort(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify the sort command prints numbers in WCAG order."""
    assert main(["sort", "1.4.10", "1.4.3", "1.2"]) == 0
    assert capsys.readouterr().out.splitlines() == ["1.2", "1.4.3", "1.4.10"]


def test_fetch_text(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify fetched text is written with the configured user agent."""
    response = MagicMock(status_code=200, text="hello")
    with patch(REQUEST, return_value=response) as request:
        assert main(["fetch", "https://example.com"]) == 0
    assert capsys.readouterr().out == "hello"
    headers = request.call_args.kwargs["headers"]
    assert headers["User-Agent"].startswith("wcag-build/")


def test_fetch_json_default(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify --default is used when the fetch fails outside build mode."""
    with patch(REQUEST, side_effect=requests.ConnectionError("down")):
        code = main(["fetch", "https://example.com", "--json", "--default", "[]"])
    assert code == 0
    assert json.loads(capsys.readouterr().out) == []


def test_fetch_json_build_mode_fails(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify build mode turns fetch failures into a non-zero exit."""
    with patch(REQUEST, return_value=MagicMock(status_code=502)):
        code = main(
            [
                "--run-mode",
                "build",
                "fetch",
                "https://example.com",
                "--json",
                "--default",
                "{}",
            ]
        )
    assert code == 1
    assert "Status 502" in capsys.readouterr().err


def test_fetch_null_timeout_keeps_default(tmp_path: Path) -> None:
    """Verify a null configured timeout falls back to the fetch default."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("fetch:\n  timeout: null\n")
    response = MagicMock(status_code=200, text="ok")
    with patch(REQUEST, return_value=response) as request:
        assert main(["--config", str(config_file), "fetch", "https://example.com"]) == 0
    assert request.call_args.kwargs["timeout"] == DEFAULT_TIMEOUT


def test_fetch_default_requires_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify --default without --json is rejected instead of ignored."""
    with patch(REQUEST) as request:
        with pytest.raises(SystemExit) as excinfo:
            main(["fetch", "https://example.com", "--default", "[]"])
    assert excinfo.value.code == 2
    assert "--default requires --json" in capsys.readouterr().err
    request.assert_not_called()
