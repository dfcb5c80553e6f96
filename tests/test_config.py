"""Tests for settings resolution and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from linkcheck.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for var in (
            "LINKCHECK_MAX_CONCURRENCY",
            "LINKCHECK_REQUEST_TIMEOUT",
            "LINKCHECK_MAX_REDIRECTS",
            "LINKCHECK_INPUT",
            "LINKCHECK_OUTPUT",
        ):
            monkeypatch.delenv(var, raising=False)
        s = Settings()
        assert s.max_concurrency == 10
        assert s.request_timeout == 120.0
        assert s.max_redirects == 20
        assert s.input_path == Path("job-links.txt")
        assert s.output_path == Path("output.txt")

    def test_env_overrides(self, monkeypatch) -> None:
        monkeypatch.setenv("LINKCHECK_MAX_CONCURRENCY", "4")
        monkeypatch.setenv("LINKCHECK_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("LINKCHECK_OUTPUT", "/tmp/report.txt")
        s = Settings()
        assert s.max_concurrency == 4
        assert s.request_timeout == 2.5
        assert s.output_path == Path("/tmp/report.txt")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_concurrency": 0},
            {"request_timeout": 0},
            {"request_timeout": -1.0},
            {"max_redirects": -1},
        ],
    )
    def test_rejects_out_of_range(self, kwargs) -> None:
        with pytest.raises(ValueError):
            Settings(**kwargs)

    def test_validate_catches_later_changes(self) -> None:
        s = Settings(max_concurrency=2)
        s.max_concurrency = 0
        with pytest.raises(ValueError):
            s.validate()
