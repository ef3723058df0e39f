"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages and result tables.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from signcalc.domain import SignQuote, TextMeasurement

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]SignCalc[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def format_meters(meters: float) -> str:
    """Format a length for display."""
    return f"{meters:.2f} m"


def print_measurement(measurement: TextMeasurement, verbose: bool) -> None:
    """Print the result of measuring one text run.

    Args:
        measurement: Measurement to print
        verbose: Whether to show calibration details
    """
    line = Text("  ")
    line.append(measurement.font)
    console.print(line)

    if measurement.skipped:
        console.print(f"  Blank text {SYM_DOT} nothing to measure")
    elif verbose and measurement.metrics is not None:
        metrics = measurement.metrics
        console.print(
            f"  {metrics.units_per_em:,} UPM {SYM_DOT} "
            f"reference '{metrics.reference_char}' {metrics.cap_height_units:g} units"
        )
        console.print(
            f"  {measurement.font_size_px:.2f} px font size {SYM_DOT} "
            f"{measurement.subpaths} contours"
        )

    console.print(
        f"\n[bold green]{SYM_OK} Perimeter[/bold green] "
        f"[bold]{format_meters(measurement.meters)}[/bold]"
    )


def print_quote(quote: SignQuote) -> None:
    """Print the perimeter breakdown of a sign.

    Args:
        quote: Quote to print
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Part")
    table.add_column("Perimeter", justify="right")

    table.add_row("Primary text", format_meters(quote.primary.meters))
    if quote.secondary is not None:
        table.add_row("Secondary text", format_meters(quote.secondary.meters))
    if quote.logo_meters:
        table.add_row("Logo", format_meters(quote.logo_meters))
    table.add_row("[bold]Total[/bold]", f"[bold]{format_meters(quote.total_meters)}[/bold]")

    console.print()
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
