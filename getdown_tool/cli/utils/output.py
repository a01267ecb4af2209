# getdown_tool/cli/utils/output.py
"""Output formatting utilities"""

from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ...constants import EMOJI_ERROR, EMOJI_SUCCESS, MSG_STAGE_SUCCESS
from ...models import BuildResult

console = Console()


def format_build_result(result: BuildResult) -> None:
    """Format and display build operation result"""
    if result.success:
        lines = [
            f"[green]{EMOJI_SUCCESS}[/green] Descriptor built successfully!",
            "",
            f"[bold]Work directory:[/bold] {result.work_directory}",
            f"[bold]Descriptor:[/bold] {result.descriptor_path}",
            f"[bold]Staged resources:[/bold] {len(result.staged_files)}",
            f"[bold]Signing:[/bold] {'enabled' if result.signing_enabled else 'disabled'}",
        ]

        if result.duration:
            lines.append(f"[bold]Duration:[/bold] {result.duration:.2f}s")

        panel = Panel(
            "\n".join(lines),
            title="Build Result",
            border_style="green"
        )
        console.print(panel)

    else:
        panel = Panel(
            f"[red]{EMOJI_ERROR} Build failed:[/red] {escape(str(result.error))}",
            title="Build Error",
            border_style="red"
        )
        console.print(panel)


def format_staged_files(staged: List[Path], directory: Path) -> None:
    """Display staged resource files"""
    if not staged:
        console.print("[yellow]No UI resources configured[/yellow]")
        return

    for path in staged:
        console.print(f"  • {path.name}")
    print_success(MSG_STAGE_SUCCESS.format(count=len(staged), directory=directory))


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green]{message}[/green]")


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {escape(message)}: {escape(str(error))}")
    else:
        console.print(f"[red]Error:[/red] {escape(message)}")
