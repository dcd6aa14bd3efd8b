"""Shared pytest fixtures for catalog and report tests."""

from datetime import date
from pathlib import Path

import polars as pl
import pytest

from src.catalog import CatalogLoader, ContentRecord
from src.reports import ReportEngine

REFERENCE_DATE = date(2021, 10, 1)


@pytest.fixture(autouse=True, scope="function")
def mock_env_for_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mock env variables for reproducible tests."""
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("CATALOG_CSV_PATH", raising=False)
    monkeypatch.delenv("REPORT_REFERENCE_DATE", raising=False)
    monkeypatch.delenv("REPORT_STRICT_PARSING", raising=False)
    monkeypatch.delenv("REPORT_OUTPUT_FORMAT", raising=False)


def make_record(**overrides: object) -> ContentRecord:
    """Build a content record with sensible defaults."""
    base: ContentRecord = {
        "show_id": "s1",
        "type": "Movie",
        "title": "Test Title",
        "director": None,
        "casts": None,
        "country": None,
        "date_added": None,
        "release_year": 2020,
        "rating": None,
        "duration": "90 min",
        "listed_in": None,
        "description": None,
    }
    base.update(overrides)  # type: ignore[typeddict-item]
    return base


def sample_records() -> list[ContentRecord]:
    """Ten hand-written catalog rows covering every report."""
    return [
        make_record(
            show_id="s1",
            title="Dick Johnson Is Dead",
            director="Kirsten Johnson",
            country="United States",
            date_added="September 25, 2021",
            release_year=2020,
            rating="PG-13",
            duration="90 min",
            listed_in="Documentaries",
            description=(
                "As her father nears the end of his life, filmmaker Kirsten Johnson "
                "stages his death in inventive and comical ways."
            ),
        ),
        make_record(
            show_id="s2",
            type="TV Show",
            title="Blood & Water",
            casts="Ama Qamata, Khosi Ngema",
            country="South Africa",
            date_added="September 24, 2021",
            release_year=2021,
            rating="TV-MA",
            duration="2 Seasons",
            listed_in="International TV Shows, TV Dramas",
            description="A Cape Town teen sets out to prove whether a swimming star is her sister.",
        ),
        make_record(
            show_id="s3",
            type="TV Show",
            title="Ganglands",
            director="Julien Leclercq",
            casts="Sami Bouajila, Tracy Gotoas",
            country="France, Belgium",
            date_added="September 24, 2021",
            release_year=2021,
            rating="TV-MA",
            duration="1 Season",
            listed_in="Crime TV Shows, International TV Shows",
            description="A skilled thief is pulled into a violent turf war.",
        ),
        make_record(
            show_id="s4",
            title="Chhota Bheem: Kung Fu Dhamaka",
            director="Rajiv Chilaka",
            casts="Vatsal Dubey, Julie Tejwani, Rupa Bhimani",
            country="India",
            date_added="June 5, 2019",
            release_year=2019,
            rating="TV-Y7",
            duration="68 min",
            listed_in="Children & Family Movies",
            description="Bheem and his friends fight to save the kingdom.",
        ),
        make_record(
            show_id="s5",
            title="Sultan",
            director="Ali Abbas Zafar",
            casts="Salman Khan, Anushka Sharma",
            country="India",
            date_added="April 01, 2017",
            release_year=2016,
            rating="TV-14",
            duration="170 min",
            listed_in="Dramas, International Movies, Sports Movies",
            description="An aging wrestler must kill his demons to return to the ring.",
        ),
        make_record(
            show_id="s6",
            title="Bharat",
            director="Ali Abbas Zafar",
            casts="Salman Khan, Katrina Kaif",
            country="India",
            date_added="September 05, 2019",
            release_year=2019,
            rating="TV-14",
            duration="151 min",
            listed_in="Dramas, International Movies",
            description="A man keeps a promise made to his father during the Partition.",
        ),
        make_record(
            show_id="s7",
            type="TV Show",
            title="Grey's Anatomy",
            director="",
            casts="Ellen Pompeo, Sandra Oh",
            country="United States",
            date_added="July 03, 2021",
            release_year=2020,
            rating="TV-14",
            duration="17 Seasons",
            listed_in="Romantic TV Shows, TV Dramas",
            description="Doctors face love, loss and VIOLENCE at a Seattle hospital.",
        ),
        make_record(
            show_id="s8",
            title="Mighty Raju",
            director="Rajiv Chilaka, Someone Else",
            casts="Julie Tejwani, Rupa Bhimani",
            country="India, France",
            date_added="December 12, 2018",
            release_year=2017,
            rating="TV-Y7",
            duration="65 min",
            listed_in="Children & Family Movies, Comedies",
            description="Raju protects Chhota Bheem's town.",
        ),
        make_record(
            show_id="s9",
            type="TV Show",
            title="Supernatural",
            casts="Jared Padalecki, Jensen Ackles",
            country="United States",
            release_year=2019,
            duration="15 Seasons",
            listed_in="TV Action & Adventure, TV Horror",
            description="Two brothers hunt demons and kill monsters.",
        ),
        make_record(
            show_id="s10",
            title="Untimed",
            director="Jane Roe",
            country="Canada",
            date_added="sometime in 2020",
            release_year=2020,
            rating="PG",
            duration="unknown min",
            listed_in="Documentaries, Dramas",
            description="A documentary with a malformed runtime.",
        ),
    ]


@pytest.fixture
def catalog() -> pl.DataFrame:
    """Normalized sample catalog."""
    return CatalogLoader().from_records(sample_records())


@pytest.fixture
def engine(catalog: pl.DataFrame) -> ReportEngine:
    """Lenient engine with a fixed reference date."""
    return ReportEngine(catalog, reference_date=REFERENCE_DATE, strict_parsing=False)


@pytest.fixture
def strict_engine(catalog: pl.DataFrame) -> ReportEngine:
    """Engine raising ParseError on unparseable values."""
    return ReportEngine(catalog, reference_date=REFERENCE_DATE, strict_parsing=True)


@pytest.fixture
def catalog_csv(tmp_path: Path, catalog: pl.DataFrame) -> Path:
    """Sample catalog written with the Kaggle CSV header ('cast' column)."""
    path = tmp_path / "netflix_titles.csv"
    catalog.rename({"casts": "cast"}).write_csv(path)
    return path
