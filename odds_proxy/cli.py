"""CLI for running and poking the odds proxy.

Usage:
    python -m odds_proxy.cli serve --port 8000
    python -m odds_proxy.cli implied-prob -- 150 -200
    python -m odds_proxy.cli sports
"""

import asyncio

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from odds_proxy.config import settings
from odds_proxy.services.odds_normalizer import american_to_implied_prob
from odds_proxy.services.upstream_client import UpstreamClient

app = typer.Typer(help="Odds API proxy")
console = Console()


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the proxy under uvicorn."""
    uvicorn.run("odds_proxy.main:app", host=host, port=port, reload=reload)


@app.command("implied-prob")
def implied_prob(
    prices: list[str] = typer.Argument(..., help="American prices (put '--' before negative ones)"),
):
    """Convert American prices to implied probabilities."""
    table = Table(title="Implied probability")
    table.add_column("Price", style="cyan")
    table.add_column("Implied", style="green")

    for price in prices:
        prob = american_to_implied_prob(price)
        table.add_row(price, f"{prob:.4f}" if prob is not None else "-")

    console.print()
    console.print(table)
    console.print()


async def _list_sports() -> None:
    client = UpstreamClient(
        base_url=settings.odds_api_base_url,
        api_key=settings.odds_api_key,
        timeout=settings.upstream_timeout,
    )
    result = await client.get_sports()

    if result.error:
        console.print(f"\n[red]✗[/red] Upstream returned HTTP {result.meta.status}: {result.data}\n")
        raise typer.Exit(code=1)

    table = Table(title="Sports")
    table.add_column("Key", style="cyan")
    table.add_column("Title")
    table.add_column("Group", style="blue")
    table.add_column("Active", style="magenta")

    for sport in result.data if isinstance(result.data, list) else []:
        table.add_row(
            sport.get("key", ""),
            sport.get("title", ""),
            sport.get("group", ""),
            "✓" if sport.get("active") else "✗",
        )

    console.print()
    console.print(table)
    console.print(f"[dim]Requests remaining: {result.meta.remaining or '-'}[/dim]\n")


@app.command("sports")
def list_sports():
    """List in-season sports straight from The Odds API."""
    asyncio.run(_list_sports())


if __name__ == "__main__":
    app()
