"""Command-line entrypoint."""

from __future__ import annotations

import asyncio

import typer

from photo_search.config import PhotoSearchSettings, get_settings
from photo_search.decoding import SearchResults
from photo_search.exceptions import PhotoSearchError
from photo_search.logging import configure_logging, logger
from photo_search.publisher import build_async_client
from photo_search.service import PhotoSearchService

app = typer.Typer(add_completion=False, help="Search the photo API from the terminal.")


async def run_search(
    query: str,
    per_page: int | None,
    raw: bool,
    settings: PhotoSearchSettings,
) -> bytes | SearchResults:
    async with build_async_client(settings) as client:
        service = PhotoSearchService(client, settings=settings)
        if raw:
            return await service.fetch_raw(query, per_page)
        return await service.search(query, per_page)


def format_results(results: SearchResults) -> list[str]:
    lines = [f"{results.total} photos ({results.total_pages} pages)"]
    for photo in results.results:
        author = photo.user.username if photo.user else "unknown"
        link = photo.urls.regular or photo.urls.raw or ""
        caption = photo.caption or "-"
        lines.append(f"{photo.id}\t{author}\t{caption}\t{link}")
    return lines


@app.command()
def search(
    query: str = typer.Argument(..., help="Search term."),
    per_page: int | None = typer.Option(None, "--per-page", "-n", min=1, help="Results on the first page."),
    raw: bool = typer.Option(False, "--json", help="Print the response body unchanged."),
) -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        outcome = asyncio.run(run_search(query, per_page, raw, settings))
    except PhotoSearchError as exc:
        logger.error("photo_search_cli_failed", error=str(exc))
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    if isinstance(outcome, bytes):
        typer.echo(outcome.decode("utf-8", errors="replace"))
        return
    for line in format_results(outcome):
        typer.echo(line)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
