"""Command-line access to the analytics engine for exported CRM data."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd
import typer
from pydantic import BaseModel

from crm_analytics.app.logging_config import configure_logging
from crm_analytics.core.analytics import AnalyticsEngine, build_engine
from crm_analytics.core.config_loader import AnalyticsConfigLoader, load_engine_config_or_default

app = typer.Typer(no_args_is_help=True, add_completion=False, help="CRM analytics engine utilities.")
logger = logging.getLogger(__name__)


def _load_frame(path: Path) -> pd.DataFrame:
    if not path.exists():
        typer.echo(f"Input file not found: {path}", err=True)
        raise typer.Exit(code=1)
    try:
        if path.suffix.lower() == ".json":
            return pd.read_json(path, orient="records")
        return pd.read_csv(path)
    except ValueError as exc:
        typer.echo(f"Could not parse {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _column_values(frame: pd.DataFrame, column: str) -> List[float]:
    if column not in frame.columns:
        typer.echo(f"Unknown column '{column}'. Available: {', '.join(map(str, frame.columns))}", err=True)
        raise typer.Exit(code=1)
    return pd.to_numeric(frame[column], errors="coerce").astype(float).tolist()


def _engine(config_dir: Optional[Path]) -> AnalyticsEngine:
    if config_dir is None:
        return build_engine(load_engine_config_or_default())
    try:
        return build_engine(AnalyticsConfigLoader(config_dir).load_engine_config())
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def _emit(result: BaseModel | list) -> None:
    if isinstance(result, BaseModel):
        typer.echo(result.model_dump_json(indent=2))
        return
    payload = [item.model_dump() if isinstance(item, BaseModel) else item for item in result]
    typer.echo(json.dumps(payload, indent=2))


InputOption = typer.Option(..., "--input", "-i", help="CSV or JSON records file.")
ColumnOption = typer.Option("value", "--column", "-c", help="Numeric column to analyze.")
ConfigOption = typer.Option(None, "--config-dir", help="Directory holding engine.yaml.")
LogLevelOption = typer.Option("WARNING", "--log-level", "-l", help="Logging level.")


@app.command("summary")
def summary_cmd(
    input_path: Path = InputOption,
    column: str = ColumnOption,
    config_dir: Optional[Path] = ConfigOption,
    log_level: str = LogLevelOption,
) -> None:
    """Print the statistical summary of a column."""

    configure_logging(log_level, stream=sys.stderr)
    values = _column_values(_load_frame(input_path), column)
    _emit(_engine(config_dir).statistics.summarize(values))


@app.command("histogram")
def histogram_cmd(
    input_path: Path = InputOption,
    column: str = ColumnOption,
    bins: Optional[int] = typer.Option(None, "--bins", "-b", min=1, help="Number of bins."),
    config_dir: Optional[Path] = ConfigOption,
    log_level: str = LogLevelOption,
) -> None:
    """Print equal-width histogram bins for a column."""

    configure_logging(log_level, stream=sys.stderr)
    values = _column_values(_load_frame(input_path), column)
    _emit(_engine(config_dir).histograms.bin(values, bins))


@app.command("domain")
def domain_cmd(
    input_path: Path = InputOption,
    columns: List[str] = typer.Option(["value"], "--column", "-c", help="Columns sharing the axis."),
    padding: Optional[float] = typer.Option(None, "--padding", min=0.0, help="Padding fraction."),
    config_dir: Optional[Path] = ConfigOption,
    log_level: str = LogLevelOption,
) -> None:
    """Print the adaptive axis domain for one or more columns."""

    configure_logging(log_level, stream=sys.stderr)
    frame = _load_frame(input_path)
    values: List[float] = []
    for column in columns:
        values.extend(_column_values(frame, column))
    _emit(_engine(config_dir).domains.compute_domain(values, padding))


@app.command("forecast")
def forecast_cmd(
    input_path: Path = InputOption,
    column: str = ColumnOption,
    periods: int = typer.Option(3, "--periods", "-n", min=0, help="Number of periods to project."),
    config_dir: Optional[Path] = ConfigOption,
    log_level: str = LogLevelOption,
) -> None:
    """Print the linear forecast for a column."""

    configure_logging(log_level, stream=sys.stderr)
    values = _column_values(_load_frame(input_path), column)
    _emit(_engine(config_dir).forecaster.forecast(values, periods))


@app.command("correlate")
def correlate_cmd(
    input_path: Path = InputOption,
    metrics: Optional[List[str]] = typer.Option(None, "--metric", "-m", help="Metric columns (default: all numeric)."),
    config_dir: Optional[Path] = ConfigOption,
    log_level: str = LogLevelOption,
) -> None:
    """Print the correlation matrix across metric columns."""

    configure_logging(log_level, stream=sys.stderr)
    frame = _load_frame(input_path)
    names = list(metrics) if metrics else [str(name) for name in frame.select_dtypes("number").columns]
    series = {name: _column_values(frame, name) for name in names}
    logger.info("Correlating metrics | metrics=%s rows=%d", names, len(frame))
    _emit(_engine(config_dir).correlations.correlate(series, names))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
