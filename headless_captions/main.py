"""CLI interface for the headless YouTube scraper"""

import asyncio
import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .config import config
from .errors import ParameterValidationError
from .models import Transcript
from .urls import extract_video_id
from .scrapers import (
    ChannelScraper,
    CommentScraper,
    MetadataScraper,
    SearchScraper,
    TranscriptScraper,
)

app = typer.Typer(
    name="headless-captions",
    help="Extract transcripts, comments, metadata and listings from YouTube with a headless browser",
)
console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr so stdout stays pure JSON"""
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _run(coro):
    """Run one extraction, print its JSON result, map failures to exit codes"""
    try:
        result = asyncio.run(coro)
        console.print_json(data=result.to_json_dict())

    except KeyboardInterrupt:
        err_console.print("\n[yellow]Extraction cancelled by user[/yellow]")
        raise typer.Exit(130)

    except ParameterValidationError as e:
        err_console.print(f"[red]Error:[/red] {e}", style="bold")
        raise typer.Exit(1)

    except Exception as e:
        err_console.print(f"\n[red]Fatal error:[/red] {e}", style="bold")
        raise typer.Exit(1)


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    setup_logging(verbose)
    try:
        config.validate()
    except ValueError as e:
        err_console.print(f"[red]Configuration error:[/red] {e}", style="bold")
        raise typer.Exit(1)


@app.command()
def transcript(
    video: str = typer.Argument(..., help="Video ID or watch URL"),
    lang: str = typer.Option("en", "--lang", "-l", help="Interface language (hl parameter)"),
):
    """Extract the transcript of a video

    Examples:
        headless-captions transcript dQw4w9WgXcQ
        headless-captions transcript "https://www.youtube.com/watch?v=dQw4w9WgXcQ" --lang de
    """

    async def extract():
        segments = await TranscriptScraper().get_transcript(video, lang)
        return Transcript(video_id=extract_video_id(video), language=lang, segments=segments)

    _run(extract())


@app.command()
def channel(
    channel_ref: str = typer.Argument(..., help="Channel URL, @handle, channel ID or custom name"),
    limit: int = typer.Option(30, "--limit", "-n", help="Maximum number of videos"),
):
    """List a channel's videos

    Example:
        headless-captions channel @channelname --limit 50
    """
    _run(ChannelScraper().get_channel_videos(channel_ref, limit))


@app.command("channel-search")
def channel_search(
    channel_ref: str = typer.Argument(..., help="Channel URL, @handle, channel ID or custom name"),
    query: str = typer.Argument(..., help="Search query"),
    limit: int = typer.Option(30, "--limit", "-n", help="Maximum number of results"),
):
    """Search videos inside one channel

    Example:
        headless-captions channel-search @channelname "live session"
    """
    _run(ChannelScraper().search_channel_videos(channel_ref, query, limit))


@app.command()
def comments(
    video: str = typer.Argument(..., help="Video ID or watch URL"),
    limit: int = typer.Option(50, "--limit", "-n", help="Maximum number of comments"),
    sort_by: str = typer.Option("top", "--sort-by", "-s", help="top or newest"),
):
    """Extract top-level comments of a video

    Example:
        headless-captions comments dQw4w9WgXcQ --limit 100 --sort-by newest
    """
    _run(CommentScraper().get_video_comments(video, limit, sort_by))


@app.command()
def metadata(
    video: str = typer.Argument(..., help="Video ID or watch URL"),
    expand_description: bool = typer.Option(
        True, "--expand-description/--no-expand-description", help="Expand the description first"
    ),
):
    """Extract title, description, counts and channel of a video"""
    _run(MetadataScraper().get_video_metadata(video, expand_description))


@app.command()
def search(
    query: str = typer.Argument(..., help="Search query"),
    max_results: int = typer.Option(10, "--max-results", "-m", help="Number of results (1-20)"),
    result_types: Optional[List[str]] = typer.Option(
        None, "--type", "-t", help="all, videos or channels (repeatable)"
    ),
):
    """Search the whole site

    Examples:
        headless-captions search "python asyncio"
        headless-captions search "python" -t channels -m 5
    """
    _run(SearchScraper().search_global(query, max_results, result_types or None))


@app.command()
def version():
    """Show version information"""
    from . import __version__

    console.print(f"[bold cyan]Headless Captions[/bold cyan] v{__version__}")
    console.print("Extract YouTube transcripts, comments and listings with a headless browser")


def main():
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
