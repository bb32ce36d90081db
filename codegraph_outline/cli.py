"""
Codegraph Outline CLI

Command-line interface for converting source files into semantic outlines.
"""

import sys

import typer
from rich.console import Console

from codegraph_outline.config import get_settings
from codegraph_outline.converter import OutlineConverter
from codegraph_outline.errors import FileConversionError
from codegraph_outline.logging import setup_logging
from codegraph_outline.parsing.source_file import SourceFile
from codegraph_outline.session import ShellSession

app = typer.Typer(
    name="codegraph-outline",
    help="Codegraph Outline - semantic outlines from tree-sitter parse trees",
    add_completion=False,
)

# stdout carries outline documents and protocol replies
console = Console(stderr=True)


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Override CODEGRAPH_OUTLINE_LOG_LEVEL"),
):
    """Configure logging before any command runs."""
    settings = get_settings()
    setup_logging(
        level=log_level or settings.log_level,
        format=settings.log_format,
        log_file=settings.log_file,
    )


@app.command()
def shell(
    flag_file: str = typer.Argument(..., help="File written once the session accepts requests"),
):
    """
    Serve conversion requests from stdin.

    Each request is three lines (input path, encoding, output path) and is
    answered with OK or KO on stdout. The session ends on "end" or end of input.
    """
    session = ShellSession(OutlineConverter(), sys.stdin, sys.stdout)
    try:
        session.announce_ready(flag_file)
    except FileConversionError as e:
        console.print(f"[bold red]Cannot start session:[/bold red] {e}")
        raise typer.Exit(code=1)
    session.run()


@app.command()
def convert(
    input_path: str = typer.Argument(..., help="Source file to convert"),
    output: str | None = typer.Option(None, "--output", "-o", help="Write the outline here instead of stdout"),
    encoding: str = typer.Option("utf-8", "--encoding", "-e", help="Encoding of the source file"),
):
    """Convert one source file into an outline document."""
    converter = OutlineConverter()
    try:
        if output:
            outline = converter.convert_file(input_path, output, encoding=encoding)
            console.print(f"[green]Wrote[/green] {output} ({len(outline.children)} top-level nodes)")
        else:
            outline = converter.convert_source(SourceFile.from_file(input_path, encoding=encoding))
            typer.echo(converter.serializer.dumps(outline))
    except FileConversionError as e:
        console.print(f"[bold red]Conversion failed:[/bold red] {e}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
