"""
Rich console output for PtrLens
"""

from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich import box
from rich.markup import escape

from ..config import NO_PTR_NAME
from ..models import AddressList, AddressRecord
from .. import __version__


class ConsoleOutput:
    """
    Rich console output for resolution results.

    Features:
    - Header panel with the run parameters
    - Address / name table
    - One-line summary
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_header(self, count: int, resolver: str, jobs: int, backend: str):
        """Print run header"""
        content = Text()
        content.append("PtrLens", style="bold cyan")
        content.append(f" v{__version__}\n", style="dim")
        content.append("Addresses: ", style="dim")
        content.append(str(count), style="bold")
        content.append(f"  |  Resolver: {resolver}", style="dim")
        content.append(f"  |  Jobs: {jobs} ({backend})", style="dim")

        panel = Panel(content, border_style="cyan", padding=(0, 1))
        self.console.print(panel)

    def print_results(self, records: AddressList):
        """Print results table"""
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="dim",
            padding=(0, 1)
        )

        table.add_column("IP", min_width=15)
        table.add_column("Name", overflow="fold")

        for record in records:
            table.add_row(str(record.address), self._format_name(record))

        self.console.print(table)

    def print_summary(self, records: AddressList, elapsed: float):
        """Print counts and timing"""
        unresolved = sum(1 for r in records if r.name == NO_PTR_NAME)

        line = Text()
        line.append(f"{len(records)} addresses", style="bold")
        line.append(f" resolved in {elapsed:.2f}s", style="dim")
        if unresolved:
            line.append(f"  ({unresolved} without PTR)", style="yellow")
        self.console.print(line)

    def print_error(self, message: str):
        """Print error message"""
        self.console.print(f"[bold red]Error:[/] {escape(message)}")

    def _format_name(self, record: AddressRecord) -> Text:
        """Dim placeholder names so real PTRs stand out"""
        if not record.name:
            return Text("-", style="dim")
        if record.name == NO_PTR_NAME:
            return Text(record.name, style="dim")
        return Text(record.name)
