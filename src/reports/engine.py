"""Report engine over the content catalog.

Fifteen independent reports, each a pure function of the loaded
catalog frame. Grouping, ranking, expansion of multi-value fields and
parsing of durations and dates are expressed with Polars.

Ordering conventions:
    - Counts are sorted descending, ties by the group key ascending.
    - Listing reports keep catalog order unless stated otherwise.
"""

from collections.abc import Sequence
from datetime import date

import polars as pl

from src.catalog.errors import ParseError
from src.catalog.fields import (
    contains_ci,
    date_added_value,
    duration_value,
    expand,
    is_missing,
)
from src.catalog.types import MOVIE, TV_SHOW
from src.settings import settings
from src.utils import setup_logger

DEFAULT_DIRECTOR = "Rajiv Chilaka"
DEFAULT_ACTOR = "Salman Khan"
DEFAULT_COUNTRY = "India"
DEFAULT_GENRE = "Documentaries"
DEFAULT_KEYWORDS = ("kill", "violence")

BAD_CATEGORY = "Bad"
GOOD_CATEGORY = "Good"


class ReportEngine:
    """Computes catalog reports.

    The catalog frame is never modified; each report builds and returns
    a new DataFrame.

    Attributes:
        catalog: Normalized catalog frame (see CatalogLoader).
        reference_date: "Today" for relative-date reports.
        strict_parsing: Raise ParseError on unparseable durations/dates
            instead of skipping those rows.
    """

    def __init__(
        self,
        catalog: pl.DataFrame,
        reference_date: date | None = None,
        strict_parsing: bool | None = None,
    ) -> None:
        """Initialize report engine.

        Args:
            catalog: Loaded catalog.
            reference_date: Defaults to REPORT_REFERENCE_DATE, then today.
            strict_parsing: Defaults to REPORT_STRICT_PARSING.
        """
        self.catalog = catalog
        self.reference_date = reference_date or settings.reports.reference_date or date.today()
        self.strict_parsing = (
            settings.reports.strict_parsing if strict_parsing is None else strict_parsing
        )
        self.logger = setup_logger("reports.engine")

    # =========================================================================
    # COUNTS BY CATEGORY
    # =========================================================================

    def count_by_type(self) -> pl.DataFrame:
        """Number of movies and TV shows."""
        return (
            self.catalog.group_by("type")
            .agg(pl.len().alias("total_count"))
            .sort("type")
        )

    def most_common_rating(self) -> pl.DataFrame:
        """Most frequent rating for each content type.

        Counts are dense-ranked within each type; among rank-1 ratings
        the alphabetically first one is kept. A null rating counts as a
        rating of its own.
        """
        counts = self.catalog.group_by("type", "rating").agg(pl.len().alias("rating_count"))
        return (
            counts.sort(
                ["type", "rating_count", "rating"],
                descending=[False, True, False],
                nulls_last=True,
            )
            .with_columns(
                pl.col("rating_count").rank("dense", descending=True).over("type").alias("rank")
            )
            .filter(pl.col("rank") == 1)
            .unique(subset="type", keep="first", maintain_order=True)
            .select("type", "rating", "rating_count")
        )

    def count_by_genre(self) -> pl.DataFrame:
        """Number of titles listed under each genre."""
        genres = expand(self.catalog, "listed_in", "genre")
        return self._count_by(genres, "genre")

    def categorize_by_keywords(
        self,
        keywords: Sequence[str] = DEFAULT_KEYWORDS,
    ) -> pl.DataFrame:
        """Label titles "Bad" when the description mentions a keyword.

        Matching is a case-insensitive substring test ("violence" also
        matches "violences"); a missing description is "Good".

        Args:
            keywords: Words flagging a title as "Bad".

        Returns:
            Counts per (category, type).

        Raises:
            ValueError: If keywords is empty.
        """
        if not keywords:
            raise ValueError("At least one keyword is required")

        flagged = pl.any_horizontal([contains_ci("description", keyword) for keyword in keywords])
        labelled = self.catalog.with_columns(
            pl.when(flagged)
            .then(pl.lit(BAD_CATEGORY))
            .otherwise(pl.lit(GOOD_CATEGORY))
            .alias("category")
        )
        return (
            labelled.group_by("category", "type")
            .agg(pl.len().alias("content_count"))
            .sort("category", "type")
        )

    # =========================================================================
    # TOP-N
    # =========================================================================

    def top_countries(self, limit: int = 5) -> pl.DataFrame:
        """Countries with the most titles.

        A title produced in several countries counts once for each.

        Args:
            limit: Number of countries returned.
        """
        countries = expand(self.catalog, "country", "country")
        return self._count_by(countries, "country").head(limit)

    def top_actors_in_country(
        self,
        country: str = DEFAULT_COUNTRY,
        limit: int = 10,
    ) -> pl.DataFrame:
        """Actors appearing in the most titles produced in a country.

        Args:
            country: Text searched (case-insensitively) in the country field.
            limit: Number of actors returned.
        """
        produced = self.catalog.filter(contains_ci("country", country))
        actors = expand(produced, "casts", "actor")
        return self._count_by(actors, "actor").head(limit)

    def top_release_years_share(
        self,
        country: str = DEFAULT_COUNTRY,
        limit: int = 5,
    ) -> pl.DataFrame:
        """Release years holding the largest share of a country's titles.

        Only titles whose country field is exactly `country` are counted.
        avg_release is the year's count as a percentage of that subset,
        rounded to 2 decimals (half away from zero).

        Args:
            country: Exact country value.
            limit: Number of years returned.

        Returns:
            Years sorted by share descending, ties by most recent year.
        """
        subset = self.catalog.filter(pl.col("country") == country)
        total = subset.height
        if total == 0:
            self.logger.warning(f"top_release_years_share: no titles for country {country!r}")

        return (
            subset.group_by("release_year")
            .agg(pl.len().cast(pl.Int64).alias("total_release"))
            .with_columns(
                pl.lit(country).alias("country"),
                (_percent_hundredths(pl.col("total_release"), max(total, 1)) / 100).alias(
                    "avg_release"
                ),
            )
            .sort(["avg_release", "release_year"], descending=[True, True])
            .head(limit)
            .select("country", "release_year", "total_release", "avg_release")
        )

    # =========================================================================
    # FILTERED LISTINGS
    # =========================================================================

    def movies_released_in(self, year: int = 2020) -> pl.DataFrame:
        """Movies released in a given year, ordered by title."""
        return (
            self.catalog.filter((pl.col("type") == MOVIE) & (pl.col("release_year") == year))
            .sort("title")
            .select("show_id", "title", "release_year")
        )

    def longest_movies(self, limit: int = 1) -> pl.DataFrame:
        """Movies with the longest running time.

        Only the top `limit` movies are returned (the single longest one
        by default), not the whole catalog ordered by duration. Pass a
        large limit to get the full ranking.

        Args:
            limit: Number of movies returned.

        Returns:
            Movies by duration_minutes descending, ties by title.
        """
        movies = self.catalog.filter(pl.col("type") == MOVIE)
        timed = self._with_parsed(movies, "duration", "duration_minutes", duration_value())
        return (
            timed.sort(["duration_minutes", "title"], descending=[True, False])
            .head(limit)
            .select("show_id", "title", "duration", "duration_minutes")
        )

    def added_in_last_years(self, years: int = 5) -> pl.DataFrame:
        """Titles added to the catalog during the last `years` years.

        Rows without a parseable date_added never match.

        Args:
            years: Window length, counted back from reference_date.

        Returns:
            Matching titles, most recently added first.
        """
        cutoff = _years_before(self.reference_date, years)
        dated = self._with_parsed(self.catalog, "date_added", "added_on", date_added_value())
        return (
            dated.filter(pl.col("added_on") >= cutoff)
            .sort(["added_on", "title"], descending=[True, False])
            .select("show_id", "type", "title", "date_added", "added_on")
        )

    def content_by_director(self, director: str = DEFAULT_DIRECTOR) -> pl.DataFrame:
        """Titles directed (or co-directed) by a given person.

        The director field is expanded and each trimmed name compared
        exactly with `director`.
        """
        directors = expand(self.catalog, "director", "director_name")
        return (
            directors.filter(pl.col("director_name") == director)
            .unique(subset="show_id", keep="first", maintain_order=True)
            .select("show_id", "type", "title", "director")
        )

    def tv_shows_with_seasons_over(self, seasons: int = 5) -> pl.DataFrame:
        """TV shows with strictly more than `seasons` seasons."""
        shows = self.catalog.filter(pl.col("type") == TV_SHOW)
        counted = self._with_parsed(shows, "duration", "seasons", duration_value())
        return (
            counted.filter(pl.col("seasons") > seasons)
            .sort(["seasons", "title"], descending=[True, False])
            .select("show_id", "title", "duration", "seasons")
        )

    def titles_in_genre(self, genre: str = DEFAULT_GENRE) -> pl.DataFrame:
        """Titles whose genre list mentions `genre` (case-insensitive)."""
        return self.catalog.filter(contains_ci("listed_in", genre)).select(
            "show_id", "type", "title", "listed_in"
        )

    def content_without_director(self) -> pl.DataFrame:
        """Titles with no director (null or blank field)."""
        return self.catalog.filter(is_missing("director")).select("show_id", "type", "title")

    def actor_appearances(
        self,
        actor: str = DEFAULT_ACTOR,
        years: int = 10,
    ) -> pl.DataFrame:
        """Number of titles featuring an actor over the last `years` years.

        A title counts when its cast mentions `actor` (case-insensitive)
        and it was released after reference_date.year - years. The
        matching titles themselves are not listed, only their number.

        Returns:
            Single row: actor, total_content (0 when nothing matches).
        """
        min_year = self.reference_date.year - years
        total = self.catalog.filter(
            contains_ci("casts", actor) & (pl.col("release_year") > min_year)
        ).height
        return pl.DataFrame(
            {"actor": [actor], "total_content": [total]},
            schema={"actor": pl.String, "total_content": pl.Int64},
        )

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _count_by(frame: pl.DataFrame, key: str) -> pl.DataFrame:
        """Count rows per key, most frequent first, ties by key."""
        return (
            frame.group_by(key)
            .agg(pl.len().alias("total_content"))
            .sort(["total_content", key], descending=[True, False])
        )

    def _with_parsed(
        self,
        frame: pl.DataFrame,
        source: str,
        alias: str,
        parsed: pl.Expr,
    ) -> pl.DataFrame:
        """Add a parsed column and drop rows that have no parsed value.

        A null source value is simply dropped. A present value that does
        not parse is either skipped with a warning or, in strict mode,
        reported as a ParseError.

        Args:
            frame: Frame to extend.
            source: Column being parsed.
            alias: Name of the parsed column.
            parsed: Parsing expression.

        Returns:
            Frame restricted to rows with a parsed value.

        Raises:
            ParseError: In strict mode, if any present value fails to parse.
        """
        result = frame.with_columns(parsed.alias(alias))
        failed = result.filter(pl.col(source).is_not_null() & pl.col(alias).is_null())

        if failed.height:
            if self.strict_parsing:
                raise ParseError(source, failed["show_id"].to_list())
            self.logger.warning(f"unparseable_{source}: skipped {failed.height} row(s)")

        return result.filter(pl.col(alias).is_not_null())


def _percent_hundredths(count: pl.Expr, total: int) -> pl.Expr:
    """count / total as a percentage in hundredths, rounded half away from zero.

    Integer arithmetic only: count * 10000 / total is rounded by adding
    half the divisor before floor division, so exact halves (23 of 160
    is 14.375%) always round up.
    """
    return (count * 20000 + total) // (2 * total)


def _years_before(day: date, years: int) -> date:
    """Same calendar day `years` years earlier (Feb 29 becomes Feb 28)."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)
