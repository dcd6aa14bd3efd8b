"""Report output: console tables and CSV / JSON files."""

from pathlib import Path

import polars as pl

from src.utils import setup_logger

logger = setup_logger("reports.render")

FILE_EXTENSIONS: dict[str, str] = {
    "csv": ".csv",
    "json": ".json",
}


def render_table(frame: pl.DataFrame, title: str | None = None) -> str:
    """Render a report as a text table with every row and full strings.

    Args:
        frame: Report DataFrame.
        title: Optional heading printed above the table.

    Returns:
        Printable table.
    """
    with pl.Config(tbl_rows=-1, fmt_str_lengths=200, tbl_hide_dataframe_shape=True):
        table = str(frame)

    if title:
        return f"{title}\n{table}"
    return table


def save_report(frame: pl.DataFrame, output_dir: Path, name: str, fmt: str) -> Path:
    """Write a report to `<output_dir>/<name>.<ext>`.

    Args:
        frame: Report DataFrame.
        output_dir: Destination directory (created if needed).
        name: Report name used as file stem.
        fmt: "csv" or "json".

    Returns:
        Path to saved file.

    Raises:
        ValueError: If the format is not a file format.
    """
    if fmt not in FILE_EXTENSIONS:
        raise ValueError(f"Unsupported file format '{fmt}'. Valid: {sorted(FILE_EXTENSIONS)}")

    path = output_dir / f"{name}{FILE_EXTENSIONS[fmt]}"
    path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "csv":
        frame.write_csv(path)
    else:
        frame.write_json(path)

    logger.info(f"saved_{fmt}: {path.name} ({frame.height} rows)")
    return path
