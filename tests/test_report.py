"""Tests for result aggregation and report rendering."""

from __future__ import annotations

import itertools

from linkcheck.validator.models import CheckedResult, ValidationReport


def _report(*results: CheckedResult) -> ValidationReport:
    report = ValidationReport()
    for r in results:
        report.add(r)
    return report


class TestValidationReport:
    def test_routes_results_by_validity(self) -> None:
        report = _report(
            CheckedResult(valid=True, url="https://a.example/"),
            CheckedResult(valid=False, url="b.example"),
        )
        assert report.valid_urls == {"https://a.example/"}
        assert report.invalid_urls == {"b.example"}

    def test_add_is_idempotent(self) -> None:
        r = CheckedResult(valid=True, url="https://a.example/")
        report = _report(r, r, r)
        assert report.valid_urls == {"https://a.example/"}

    def test_two_inputs_resolving_to_same_target_collapse(self) -> None:
        report = _report(
            CheckedResult(valid=True, url="https://example.com/"),
            CheckedResult(valid=True, url="https://example.com/"),
        )
        assert report.render() == "valid urls:\nhttps://example.com/\n\ninvalid urls:\n"

    def test_sets_stay_disjoint_in_any_order(self) -> None:
        results = [
            CheckedResult(valid=False, url="https://flaky.example"),
            CheckedResult(valid=True, url="https://flaky.example"),
            CheckedResult(valid=False, url="https://down.example"),
        ]
        for ordering in itertools.permutations(results):
            report = _report(*ordering)
            assert report.valid_urls == {"https://flaky.example"}
            assert report.invalid_urls == {"https://down.example"}
            assert not report.valid_urls & report.invalid_urls

    def test_render_format_and_sorting(self) -> None:
        report = _report(
            CheckedResult(valid=True, url="https://zeta.example/"),
            CheckedResult(valid=False, url="http://omega.example"),
            CheckedResult(valid=True, url="https://alpha.example/"),
            CheckedResult(valid=False, url="http://beta.example"),
        )
        assert report.render() == (
            "valid urls:\n"
            "https://alpha.example/\n"
            "https://zeta.example/\n"
            "\n"
            "invalid urls:\n"
            "http://beta.example\n"
            "http://omega.example"
        )

    def test_render_sorts_lexicographically(self) -> None:
        report = _report(
            CheckedResult(valid=True, url="https://b.example/"),
            CheckedResult(valid=True, url="https://B.example/"),
            CheckedResult(valid=True, url="http://b.example/"),
        )
        valid_section = report.render().split("\n\n")[0].splitlines()[1:]
        assert valid_section == sorted(valid_section)
        assert valid_section == ["http://b.example/", "https://B.example/", "https://b.example/"]

    def test_dropped_not_rendered(self) -> None:
        report = ValidationReport()
        report.drop("https://lost.example")
        assert report.dropped == ["https://lost.example"]
        assert "lost" not in report.render()
