"""
Rich console output for PingLens
"""

from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich import box

from .. import __version__
from ..models import PingResponse


class ConsoleOutput:
    """
    Rich console output for ping results.

    Features:
    - Target header panel
    - Per-reply RTT table
    - Summary panel with loss and min/avg/max/stddev
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_header(self, target: str, platform: str, source: Optional[str] = None):
        """Print probe header"""
        content = Text()
        content.append("🏓 PingLens", style="bold cyan")
        content.append(f" v{__version__}\n", style="dim")
        content.append("Target: ", style="dim")
        content.append(target, style="bold")
        content.append("\n")
        content.append(f"Platform: {platform}", style="dim")
        if source:
            content.append(f"  |  Input: {source}", style="dim")

        panel = Panel(content, border_style="cyan", padding=(0, 1))
        self.console.print(panel)

    def print_replies(self, response: PingResponse):
        """Print one row per parsed reply"""
        if not response.times:
            return

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.ROUNDED,
            border_style="dim",
            padding=(0, 1)
        )
        table.add_column("#", style="dim", width=4, justify="right")
        table.add_column("RTT (ms)", width=12, justify="right")

        for i, rtt in enumerate(response.times, start=1):
            table.add_row(str(i), f"{rtt:g}")

        self.console.print(table)

    def print_summary(self, response: PingResponse):
        """Print summary panel"""
        content = Text()

        if response.alive:
            content.append("✅ ", style="green")
            content.append("Alive: ", style="bold")
            content.append(self._format_host(response), style="dim")
            if response.time is not None:
                content.append(f", first reply {response.time:g}ms", style="dim")
        else:
            content.append("❌ ", style="red")
            content.append("Unreachable: ", style="bold red")
            content.append(self._format_host(response), style="dim")

        if response.packet_loss is not None:
            content.append("\n")
            content.append("Packet loss: ", style="bold")
            content.append(f"{response.packet_loss}%", style="dim")

        content.append("\n")
        content.append("min/avg/max/stddev: ", style="bold")
        content.append(self._format_rtt(response), style="dim")

        panel = Panel(
            content,
            title=Text("📊 Summary", style="bold"),
            border_style="green" if response.alive else "red",
            padding=(0, 1)
        )
        self.console.print(panel)

    def print_raw(self, response: PingResponse):
        """Print the raw output ping produced"""
        if response.output:
            self.console.print(response.output, markup=False, highlight=False)

    def print_error(self, message: str):
        """Print error message"""
        self.console.print(f"[bold red]Error:[/] {message}")

    def _format_host(self, response: PingResponse) -> str:
        host = response.host or response.input_host
        if response.numeric_host and response.numeric_host != host:
            return f"{host} ({response.numeric_host})"
        return host

    def _format_rtt(self, response: PingResponse) -> str:
        """Format summary values, '-' for anything the footer did not report"""
        parts = [response.min, response.avg, response.max, response.stddev]
        return " / ".join(str(p) if p is not None else "-" for p in parts) + " ms"
