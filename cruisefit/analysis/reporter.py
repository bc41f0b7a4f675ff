"""
Report Generator
Prints batch results to the console and writes text reports.
"""

import sys
from typing import Optional, Sequence, TextIO

from ..config import Colors, Settings
from ..flights.models import AnalyzedFlight, BatchResult
from ..flights.timing import format_hours
from ..utils import format_percent, format_speed
from .colors import Color
from .constants import ANSI_RESET, REPORT_FORMATS, RULE_WIDTH


class ReportGenerator:
    """
    Renders analysis results as human-readable text.
    """

    def __init__(
        self,
        decimals: int = Settings.PERCENT_DECIMALS,
        show_route: bool = Settings.SHOW_ROUTE,
        use_color: bool = Settings.USE_COLOR,
    ):
        """
        Initialize report generator.

        Args:
            decimals: Decimal places of the error percentage
            show_route: Append "(SRC-DST)" to flight names when known
            use_color: Wrap console lines in ANSI color escapes
        """
        self.decimals = decimals
        self.show_route = show_route
        self.use_color = use_color

    def format_line(self, analyzed: AnalyzedFlight) -> str:
        """Format one flight as ' - NAME: x.y% off'."""
        label = analyzed.name
        route = analyzed.flight.route
        if self.show_route and route:
            label = f"{label} ({route})"

        return f" - {label}: {format_percent(analyzed.error, self.decimals)} off"

    def colorize(self, text: str, color: Color) -> str:
        """Apply a color to console text if color output is enabled."""
        if not self.use_color:
            return text
        return f"{Color(*color).ansi}{text}{ANSI_RESET}"

    def format_summary(self, batch: BatchResult) -> str:
        """One-line fit summary of a batch."""
        return (
            f"   Scale: {batch.scale.value:.6g}/h | "
            f"Implied speed: {format_speed(batch.implied_speed_kmh)} | "
            f"Mean |error|: {format_percent(batch.mean_absolute_error, self.decimals)}"
        )

    def print_batch(self, batch: BatchResult, stream: Optional[TextIO] = None):
        """
        Print a batch header, one colored line per flight, and a summary.

        Args:
            batch: Analyzed batch
            stream: Output stream (default: sys.stdout)
        """
        out = stream or sys.stdout

        print(f"{batch.name}:", file=out)
        for analyzed in batch.flights:
            print(self.colorize(self.format_line(analyzed), analyzed.color), file=out)
        print(self.format_summary(batch), file=out)

    def generate_report(
        self, batches: Sequence[BatchResult], output_path: str, format: str = "txt"
    ):
        """
        Generate analysis report file.

        Args:
            batches: Analyzed batches
            output_path: Output file path
            format: Report format ('txt')
        """
        if format not in REPORT_FORMATS:
            raise ValueError(f"Unsupported format: {format}")

        self._generate_text_report(batches, output_path)

    def _generate_text_report(self, batches: Sequence[BatchResult], output_path: str):
        """Generate text report."""
        with open(output_path, "w", encoding="utf-8") as f:
            f.write("=" * RULE_WIDTH + "\n")
            f.write("CRUISEFIT FLIGHT SPEED REPORT\n")
            f.write("=" * RULE_WIDTH + "\n")
            f.write(
                f"Colors: {Colors.NO_ERROR} on fit, "
                f"{Colors.TOO_FAR} farther than predicted, "
                f"{Colors.TOO_SHORT} shorter than predicted\n\n"
            )

            for batch in batches:
                f.write(f"{batch.name.upper()}\n")
                f.write("-" * RULE_WIDTH + "\n")
                for analyzed in batch.flights:
                    f.write(
                        f"{self.format_line(analyzed):<40} "
                        f"avg {format_hours(analyzed.average_duration):>6} | "
                        f"dist {analyzed.distance:.4f} | "
                        f"color {Color(*analyzed.color).hex}\n"
                    )
                f.write(self.format_summary(batch) + "\n\n")
