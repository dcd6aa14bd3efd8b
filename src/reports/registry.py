"""Named report registry.

Maps stable report names to their engine operation so the CLI and
batch runs can address reports by name.
"""

from collections.abc import Callable
from dataclasses import dataclass

import polars as pl

from src.reports.engine import ReportEngine
from src.utils import setup_logger

logger = setup_logger("reports.registry")


class UnknownReportError(KeyError):
    """Requested report name is not registered."""


@dataclass(frozen=True)
class ReportDefinition:
    """A named report.

    Attributes:
        name: Stable identifier (e.g., 'q01_count_by_type').
        title: Human-readable question answered by the report.
        runner: Engine operation producing the report with default parameters.
    """

    name: str
    title: str
    runner: Callable[[ReportEngine], pl.DataFrame]


_DEFINITIONS: tuple[ReportDefinition, ...] = (
    ReportDefinition(
        "q01_count_by_type",
        "Number of movies vs TV shows",
        ReportEngine.count_by_type,
    ),
    ReportDefinition(
        "q02_most_common_rating",
        "Most common rating for movies and TV shows",
        ReportEngine.most_common_rating,
    ),
    ReportDefinition(
        "q03_movies_released_in_2020",
        "Movies released in 2020",
        ReportEngine.movies_released_in,
    ),
    ReportDefinition(
        "q04_top_countries",
        "Top 5 countries with the most content",
        ReportEngine.top_countries,
    ),
    ReportDefinition(
        "q05_longest_movie",
        "Longest movie",
        ReportEngine.longest_movies,
    ),
    ReportDefinition(
        "q06_added_last_5_years",
        "Content added in the last 5 years",
        ReportEngine.added_in_last_years,
    ),
    ReportDefinition(
        "q07_director_rajiv_chilaka",
        "Movies and TV shows by director Rajiv Chilaka",
        ReportEngine.content_by_director,
    ),
    ReportDefinition(
        "q08_tv_shows_over_5_seasons",
        "TV shows with more than 5 seasons",
        ReportEngine.tv_shows_with_seasons_over,
    ),
    ReportDefinition(
        "q09_count_by_genre",
        "Number of content items in each genre",
        ReportEngine.count_by_genre,
    ),
    ReportDefinition(
        "q10_india_release_years",
        "Top 5 years by share of content released in India",
        ReportEngine.top_release_years_share,
    ),
    ReportDefinition(
        "q11_documentaries",
        "Titles listed as documentaries",
        ReportEngine.titles_in_genre,
    ),
    ReportDefinition(
        "q12_without_director",
        "Content without a director",
        ReportEngine.content_without_director,
    ),
    ReportDefinition(
        "q13_salman_khan_last_10_years",
        "Titles featuring Salman Khan in the last 10 years",
        ReportEngine.actor_appearances,
    ),
    ReportDefinition(
        "q14_top_actors_india",
        "Top 10 actors in content produced in India",
        ReportEngine.top_actors_in_country,
    ),
    ReportDefinition(
        "q15_keyword_categories",
        "Content categorized by 'kill' and 'violence' in descriptions",
        ReportEngine.categorize_by_keywords,
    ),
)

REPORTS: dict[str, ReportDefinition] = {definition.name: definition for definition in _DEFINITIONS}


def get_report(name: str) -> ReportDefinition:
    """Look up a report definition.

    Raises:
        UnknownReportError: If the report name is unknown.
    """
    definition = REPORTS.get(name)
    if definition is None:
        raise UnknownReportError(f"Unknown report '{name}'. Valid: {list(REPORTS)}")
    return definition


def run_report(engine: ReportEngine, name: str) -> pl.DataFrame:
    """Run a single report by name.

    Args:
        engine: Engine holding the loaded catalog.
        name: Report name (see REPORTS).

    Returns:
        Report DataFrame.

    Raises:
        UnknownReportError: If the report name is unknown.
    """
    definition = get_report(name)

    try:
        result = definition.runner(engine)
    except Exception as e:
        logger.error(f"report_failed: {name}: {e}")
        raise

    logger.info(f"report_completed: {name} ({result.height} rows)")
    return result


def run_all(engine: ReportEngine) -> dict[str, pl.DataFrame]:
    """Run every registered report in order.

    Args:
        engine: Engine holding the loaded catalog.

    Returns:
        Report name -> DataFrame.
    """
    return {name: run_report(engine, name) for name in REPORTS}
