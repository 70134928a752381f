"""CLI entry point for the Hebrew date converter."""

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

import typer

from hebrew_date_converter.adapters.calendar import HebcalClient, LocalCalendar
from hebrew_date_converter.config import Settings, get_settings
from hebrew_date_converter.core import (
    CalendarConverter,
    ConversionResult,
    HebrewDateError,
    SplitYearFields,
    parse_free_text,
)
from hebrew_date_converter.logging_config import setup_logging
from hebrew_date_converter.use_cases import ConversionService

app = typer.Typer(help="Convert between Hebrew and Gregorian dates.", no_args_is_help=True)

BackendOption = typer.Option(None, "--backend", help="Calendar backend: hebcal or local")
JsonOption = typer.Option(False, "--json", help="Print the result as JSON")
ConfigOption = typer.Option(Path("config.yaml"), "--config", help="Path to YAML config")


def build_calendar(settings: Settings, backend: Optional[str] = None) -> CalendarConverter:
    """Create the configured calendar backend."""
    backend = backend or settings.calendar_backend
    if backend == "local":
        return LocalCalendar()
    if backend == "hebcal":
        return HebcalClient(base_url=settings.calendar.base_url, timeout=settings.calendar_timeout)
    raise typer.BadParameter(f"Unknown calendar backend: {backend}", param_hint="--backend")


def build_service(settings: Settings, backend: Optional[str] = None) -> ConversionService:
    return ConversionService(
        calendar=build_calendar(settings, backend),
        timeout=settings.calendar_timeout,
        year_span=settings.year_span,
    )


def _print_result(result: ConversionResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    source = "📜 historical table" if result.source.value == "historical" else "🗓️  calendar"
    print(f"\n✓ Hebrew:    {result.hebrew_formatted}  ({result.hebrew.day} {result.hebrew.month.label} {result.hebrew.year})")
    print(f"✓ Gregorian: {result.gregorian_formatted}")
    print(f"  └─ Source: {source}")


def _print_error(error: HebrewDateError, as_json: bool) -> None:
    if as_json:
        print(json.dumps(error.to_dict(), ensure_ascii=False, indent=2))
        return

    print(f"❌ {error.error_code}: {error.message}")
    if error.details:
        print(f"   └─ {error.details}")


def _run(
    config: Path,
    backend: Optional[str],
    as_json: bool,
    action: Callable[[ConversionService], Awaitable[Any]],
    render: Callable[[Any, bool], None] = _print_result,
) -> None:
    """Run one service action, reporting typed errors and exiting non-zero."""
    settings = get_settings(config)
    setup_logging(settings.logging)
    service = build_service(settings, backend)

    try:
        result = asyncio.run(action(service))
    except HebrewDateError as e:
        _print_error(e, as_json)
        raise typer.Exit(code=1)

    render(result, as_json)


@app.command("parse")
def parse_command(
    text: str = typer.Argument(..., help='Hebrew date text, e.g. "ה\' בניסן תשפ"ה"'),
    convert: bool = typer.Option(True, "--convert/--no-convert", help="Also convert to Gregorian"),
    backend: Optional[str] = BackendOption,
    as_json: bool = JsonOption,
    config: Path = ConfigOption,
) -> None:
    """Parse free Hebrew date text."""
    if convert:
        _run(config, backend, as_json, lambda service: service.parse_and_convert(text))
        return

    settings = get_settings(config)
    setup_logging(settings.logging)

    try:
        parsed = parse_free_text(text)
    except HebrewDateError as e:
        _print_error(e, as_json)
        raise typer.Exit(code=1)

    if as_json:
        print(json.dumps(parsed.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(f"✓ Day: {parsed.day}, Month: {parsed.month.label}, Year: {parsed.year}")


@app.command("to-gregorian")
def to_gregorian_command(
    day: str = typer.Argument(..., help="Hebrew day (digits or gematria)"),
    month: str = typer.Argument(..., help="Hebrew month name"),
    year: str = typer.Argument(..., help="Hebrew year (digits or gematria)"),
    backend: Optional[str] = BackendOption,
    as_json: bool = JsonOption,
    config: Path = ConfigOption,
) -> None:
    """Convert a Hebrew date to Gregorian."""
    _run(config, backend, as_json, lambda service: service.convert_hebrew(day, month, year))


@app.command("to-gregorian-split")
def to_gregorian_split_command(
    day: str = typer.Argument(..., help="Hebrew day (digits or gematria)"),
    month: str = typer.Argument(..., help="Hebrew month name"),
    thousands: Optional[str] = typer.Option(None, "--thousands"),
    hundreds: Optional[str] = typer.Option(None, "--hundreds"),
    tens: Optional[str] = typer.Option(None, "--tens"),
    ones: Optional[str] = typer.Option(None, "--ones"),
    backend: Optional[str] = BackendOption,
    as_json: bool = JsonOption,
    config: Path = ConfigOption,
) -> None:
    """Convert a Hebrew date whose year is given as split numeral groups."""
    fields = SplitYearFields(thousands=thousands, hundreds=hundreds, tens=tens, ones=ones)
    _run(config, backend, as_json, lambda service: service.convert_split(day, month, fields))


@app.command("to-hebrew")
def to_hebrew_command(
    day: int = typer.Argument(...),
    month: int = typer.Argument(...),
    year: int = typer.Argument(..., help="Gregorian year, negative for BCE"),
    backend: Optional[str] = BackendOption,
    as_json: bool = JsonOption,
    config: Path = ConfigOption,
) -> None:
    """Convert a Gregorian date to Hebrew."""
    _run(config, backend, as_json, lambda service: service.convert_gregorian(day, month, year))


def _print_options(options: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps(options.to_dict(), ensure_ascii=False, indent=2))
        return

    print(f"\n📅 Days:   {' '.join(options.days)}")
    print(f"🗓️  Months: {', '.join(options.months)}")
    print(f"🔢 Years:  {options.years[0]} … {options.years[-1]} ({len(options.years)})")
    for part, values in options.year_parts.items():
        print(f"  • {part}: {' '.join(values)}")


@app.command("options")
def options_command(
    backend: Optional[str] = BackendOption,
    as_json: bool = JsonOption,
    config: Path = ConfigOption,
) -> None:
    """List day, month, year and split-year choices."""
    _run(config, backend, as_json, lambda service: service.list_options(), render=_print_options)


if __name__ == "__main__":
    app()
