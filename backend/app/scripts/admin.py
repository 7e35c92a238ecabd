"""Shop administration CLI.

Usage:
    newstar-admin serve --reload
    newstar-admin next-order-id
    newstar-admin reset-wages
"""

import asyncio

import click
import uvicorn

from app.db import async_session_maker, dispose_engine
from app.logging import setup_logging
from app.services.orders.sequencer import OrderIdentifierSequencer
from app.services.wages.wage_service import WageService


@click.group()
def cli() -> None:
    """New Star Tailors administration commands."""
    setup_logging()


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Restart on code changes (development).")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the API server."""
    uvicorn.run("app.main:app", host=host, port=port, reload=reload)


async def _preview_next_order_id() -> None:
    try:
        async with async_session_maker() as session:
            preview = await OrderIdentifierSequencer(session).peek_next()
    finally:
        await dispose_engine()

    click.echo(f"Next order id: {preview.identifier} ({preview.period_label})")
    if preview.period_will_reset:
        click.echo("Numbering restarts with the next order (new month).")


@cli.command("next-order-id")
def next_order_id() -> None:
    """Show the identifier the next order will get, without reserving it."""
    asyncio.run(_preview_next_order_id())


async def _reset_wages() -> None:
    try:
        async with async_session_maker() as session:
            config = await WageService(session).reset()
    finally:
        await dispose_engine()

    for name, rate in config.rates().items():
        click.echo(f"{name}: {rate:g}")


@cli.command("reset-wages")
@click.confirmation_option(prompt="Reset all piece rates to their defaults?")
def reset_wages() -> None:
    """Restore the default piece rates."""
    asyncio.run(_reset_wages())


if __name__ == "__main__":
    cli()
