from __future__ import annotations
import sys
from pathlib import Path
import typer
from rich import print
from .version import __version__
from .logging_setup import configure_logging
from .config import ScanConfig
from .errors import ScanRootError
from .pipeline import scan_directory
from .report import format_progress

app = typer.Typer(add_completion=False, help="Estimate the Chinese share of Chinese/Japanese subtitle lines")


def _version(value: bool) -> None:
    if value:
        print(__version__)
        raise typer.Exit(0)


@app.command()
def main(
    path: Path = typer.Argument(..., exists=True, file_okay=False, dir_okay=True, readable=True, help="Directory of .ass/.srt/.vtt/.lrc files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every processed file"),
    version: bool = typer.Option(False, "--version", callback=_version, is_eager=True, help="Show version"),
):
    """Scan PATH recursively and print {"progress": <chinese / (chinese + japanese)>}.

    Progress is null when no Chinese or Japanese line was found.
    """
    cfg = ScanConfig(log_level="DEBUG" if verbose else "INFO")
    configure_logging(cfg.log_level)
    try:
        tally = scan_directory(path, cfg)
    except ScanRootError as e:
        print(f"[red]Scan failed:[/red] {e}", file=sys.stderr)
        raise typer.Exit(1)
    typer.echo(format_progress(tally.ratio()))


if __name__ == "__main__":
    app()
