"""CLI application entry point for signcalc.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from signcalc import __version__
from signcalc.cli.output import (
    console,
    print_error,
    print_header,
    print_measurement,
    print_quote,
    print_step,
)
from signcalc.config import (
    FontSourceConfig,
    LoggingConfig,
    MeasurementConfig,
    SigncalcSettings,
)
from signcalc.core import PerimeterMeasurer, QuoteCalculator, TextRun
from signcalc.exceptions import FontLoadError, SigncalcError

# Secondary line height relative to the primary line when not given
SECONDARY_HEIGHT_RATIO = 0.6

# Create the Typer app
app = typer.Typer(
    name="signcalc",
    help="Measure the cut perimeter of sign lettering from font outlines.",
    add_completion=False,
    no_args_is_help=True,
)

FontOption = Annotated[
    str,
    typer.Option(
        "--font",
        "-f",
        help="Path or http(s) URL of a TTF/OTF font",
        show_default=False,
    ),
]
HeightOption = Annotated[
    float,
    typer.Option(
        "--height",
        "-H",
        help="Letter height in meters (height of 'H', or alef for Arabic text)",
        min=0.0,
        show_default=False,
    ),
]
PixelsPerMeterOption = Annotated[
    float,
    typer.Option(
        "--pixels-per-meter",
        help="Intermediate pixel scale (does not change the result)",
        min=0.001,
    ),
]
SamplesOption = Annotated[
    int,
    typer.Option(
        "--samples",
        "-s",
        help="Chords used to flatten each curve segment",
        min=1,
        max=1024,
    ),
]
TimeoutOption = Annotated[
    float,
    typer.Option(
        "--timeout",
        help="Seconds to wait when fetching a font over HTTP",
        min=0.1,
    ),
]
JsonOption = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print the result as JSON",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Verbose console output",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]SignCalc[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Measure the cut perimeter of sign lettering from font outlines."""


def _build_settings(
    pixels_per_meter: float,
    samples: int,
    timeout: float,
    log_file: Path | None,
    log_level: str,
    quiet: bool,
) -> SigncalcSettings:
    settings = SigncalcSettings(
        measurement=MeasurementConfig(
            pixels_per_meter=pixels_per_meter,
            curve_samples=samples,
        ),
        source=FontSourceConfig(timeout_seconds=timeout),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )
    return settings


def _check_flags(verbose: bool, quiet: bool) -> None:
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1) from None


def _echo_json(data: dict) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


@app.command()
def measure(
    text: Annotated[
        str,
        typer.Argument(
            help="Text to measure",
            show_default=False,
        ),
    ],
    font: FontOption,
    height: HeightOption,
    pixels_per_meter: PixelsPerMeterOption = 1000.0,
    samples: SamplesOption = 24,
    timeout: TimeoutOption = 30.0,
    json_output: JsonOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Measure the outline perimeter of a line of text.

    The font size is chosen so that the letter H (or the Arabic alef for text
    without Latin letters) is exactly --height meters tall.

    Example:
        signcalc measure "OPEN" --font Montserrat-Black.ttf --height 0.4
    """
    _check_flags(verbose, quiet)
    settings = _build_settings(pixels_per_meter, samples, timeout, log_file, log_level, quiet)
    show = not quiet and not json_output

    if show:
        print_header(__version__)
        print_step("Measuring outline")

    try:
        measurer = PerimeterMeasurer(
            config=settings.measurement,
            source=settings.source,
            logging=settings.logging,
        )
        measurement = measurer.measure_run(text, font, height)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}", details=e.resource)
        raise typer.Exit(code=1) from None
    except SigncalcError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if json_output:
        _echo_json(measurement.to_dict())
    elif quiet:
        typer.echo(f"{measurement.meters:.4f}")
    else:
        print_measurement(measurement, verbose=verbose)


@app.command()
def quote(
    text: Annotated[
        str,
        typer.Argument(
            help="Primary line of text",
            show_default=False,
        ),
    ],
    font: FontOption,
    height: HeightOption,
    secondary_text: Annotated[
        str,
        typer.Option(
            "--secondary-text",
            "-t",
            help="Optional second line of text",
        ),
    ] = "",
    secondary_font: Annotated[
        str | None,
        typer.Option(
            "--secondary-font",
            help="Font of the second line (default: --font)",
        ),
    ] = None,
    secondary_height: Annotated[
        float | None,
        typer.Option(
            "--secondary-height",
            help="Letter height of the second line in meters (default: 0.6 x --height)",
            min=0.0,
        ),
    ] = None,
    logo_diameter: Annotated[
        float,
        typer.Option(
            "--logo-diameter",
            "-d",
            help="Diameter of a circular logo in meters (0 for none)",
            min=0.0,
        ),
    ] = 0.0,
    pixels_per_meter: PixelsPerMeterOption = 1000.0,
    samples: SamplesOption = 24,
    timeout: TimeoutOption = 30.0,
    json_output: JsonOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
) -> None:
    """Quote the total cut perimeter of a sign.

    Adds up the primary line, an optional secondary line and an optional
    circular logo.

    Example:
        signcalc quote "دفتر فنی" --font Vazirmatn.ttf --height 0.5 \\
            --secondary-text "STUDIO" --secondary-font Montserrat.ttf -d 1.0
    """
    _check_flags(verbose, quiet)
    settings = _build_settings(pixels_per_meter, samples, timeout, log_file, log_level, quiet)
    show = not quiet and not json_output

    primary = TextRun(text=text, font=font, cap_height_m=height)
    secondary = None
    if secondary_text:
        secondary = TextRun(
            text=secondary_text,
            font=secondary_font or font,
            cap_height_m=(
                secondary_height
                if secondary_height is not None
                else height * SECONDARY_HEIGHT_RATIO
            ),
        )

    if show:
        print_header(__version__)
        print_step("Measuring sign")

    try:
        calculator = QuoteCalculator(settings)
        result = calculator.quote(primary, secondary, logo_diameter_m=logo_diameter)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}", details=e.resource)
        raise typer.Exit(code=1) from None
    except SigncalcError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if json_output:
        _echo_json(result.to_dict())
    elif quiet:
        typer.echo(f"{result.total_meters:.4f}")
    else:
        if verbose:
            print_measurement(result.primary, verbose=True)
            if result.secondary is not None:
                print_measurement(result.secondary, verbose=True)
        print_quote(result)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
