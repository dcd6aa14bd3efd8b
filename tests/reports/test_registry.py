"""Unit tests for the named report registry."""

import polars as pl
import pytest

from src.reports import (
    REPORTS,
    ReportEngine,
    UnknownReportError,
    get_report,
    run_all,
    run_report,
)


class TestRegistry:
    @staticmethod
    def test_fifteen_reports() -> None:
        assert len(REPORTS) == 15

    @staticmethod
    def test_names_ordered() -> None:
        names = list(REPORTS)
        assert names == sorted(names)
        assert names[0] == "q01_count_by_type"
        assert names[-1] == "q15_keyword_categories"

    @staticmethod
    def test_definition_names_match_keys() -> None:
        for name, definition in REPORTS.items():
            assert definition.name == name
            assert definition.title


class TestRunReport:
    @staticmethod
    def test_runs_by_name(engine: ReportEngine) -> None:
        result = run_report(engine, "q01_count_by_type")
        assert result.rows() == [("Movie", 6), ("TV Show", 4)]

    @staticmethod
    def test_default_parameters(engine: ReportEngine) -> None:
        assert run_report(engine, "q04_top_countries").height == 5
        assert run_report(engine, "q05_longest_movie").height == 1
        assert run_report(engine, "q13_salman_khan_last_10_years").rows() == [("Salman Khan", 2)]

    @staticmethod
    def test_unknown_name(engine: ReportEngine) -> None:
        with pytest.raises(UnknownReportError, match="Unknown report"):
            run_report(engine, "q99_nope")

    @staticmethod
    def test_errors_propagate(strict_engine: ReportEngine) -> None:
        from src.catalog import ParseError

        with pytest.raises(ParseError):
            run_report(strict_engine, "q05_longest_movie")


class TestRunAll:
    @staticmethod
    def test_every_report(engine: ReportEngine) -> None:
        results = run_all(engine)
        assert list(results) == list(REPORTS)
        assert all(isinstance(frame, pl.DataFrame) for frame in results.values())

    @staticmethod
    def test_totals(engine: ReportEngine) -> None:
        results = run_all(engine)
        assert results["q01_count_by_type"]["total_count"].sum() == 10
        assert results["q15_keyword_categories"]["content_count"].sum() == 10


class TestGetReport:
    @staticmethod
    def test_known_name() -> None:
        assert get_report("q05_longest_movie").runner is ReportEngine.longest_movies

    @staticmethod
    def test_unknown_name_is_key_error() -> None:
        with pytest.raises(UnknownReportError) as exc_info:
            get_report("q99_nope")
        assert isinstance(exc_info.value, KeyError)
        assert "q01_count_by_type" in exc_info.value.args[0]
