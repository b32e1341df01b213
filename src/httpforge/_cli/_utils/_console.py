from typing import Optional

from rich.console import Console


class ConsoleLogger:
    """Writes user-facing status messages to stderr."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console or Console(stderr=True, highlight=False)

    def info(self, message: str) -> None:
        self._console.print(message)

    def warning(self, message: str) -> None:
        self._console.print(f"[yellow]warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        self._console.print(f"[bold red]error:[/bold red] {message}")
