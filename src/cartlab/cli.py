"""CLI interface for CartLab"""

import logging
from pathlib import Path
from typing import List, Optional

import click
import yaml

from cartlab.application.data_fetcher import DataFetcher
from cartlab.domain.errors import CartLabError, FetchError
from cartlab.domain.models.cart import CartItem, FetchRequest
from cartlab.domain.models.transport import Endpoint
from cartlab.infrastructure.clock import BlockingSleeper, RecordingSleeper
from cartlab.infrastructure.config.config_manager import ConfigManager
from cartlab.infrastructure.retry import RetrySchedule
from cartlab.infrastructure.transport.factory import TransportFactory

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


def format_cart(items: List[CartItem]) -> str:
    """Render cart records as a plain-text table

    Args:
        items: Parsed cart records

    Returns:
        Table with "Item name" and "Quantity" columns
    """
    header = ("Item name", "Quantity")
    rows = [(item.item, str(item.quantity)) for item in items]
    width = max([len(header[0])] + [len(name) for name, _ in rows])
    lines = [f"{header[0]:<{width}}  {header[1]}", f"{'-' * width}  {'-' * len(header[1])}"]
    for name, quantity in rows:
        lines.append(f"{name:<{width}}  {quantity:>{len(header[1])}}")
    return "\n".join(lines)


def _create_fetcher(
    config_manager: ConfigManager,
    transport_override: Optional[str],
    no_wait: bool,
) -> DataFetcher:
    """Create data fetcher from config

    Args:
        config_manager: Configuration manager
        transport_override: Optional transport kind from CLI
        no_wait: Record backoff waits instead of sleeping

    Returns:
        DataFetcher instance
    """
    api_config = config_manager.get_api_config()
    transport_kind = transport_override or config_manager.get_transport_config().kind
    logger.info(f"Using transport: {transport_kind}")

    transport = TransportFactory.create(transport_kind, {"timeout": api_config.timeout})
    schedule = RetrySchedule.from_config(config_manager.get_retry_config())
    return DataFetcher(
        transport=transport,
        endpoint=Endpoint(base_url=api_config.base_url, path=api_config.data_path),
        schedule=schedule,
        sleeper=RecordingSleeper() if no_wait else BlockingSleeper(),
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to .cartlab.yml config file",
)
@click.pass_context
def cli(ctx, verbose: bool, config: Path):
    """CartLab - fetch a user's shopping cart with retry and backoff"""
    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("user_id", type=str)
@click.option(
    "--transport",
    type=click.Choice(["http", "canned"], case_sensitive=False),
    help="Transport to use. Overrides config.",
)
@click.option("--no-wait", is_flag=True, help="Retry immediately instead of sleeping between attempts")
@click.pass_context
def show(ctx, user_id: str, transport: str, no_wait: bool):
    """Show the contents of a user's cart.

    USER_ID: Identifier of the user whose cart to fetch
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        config_manager = ConfigManager(config_path=ctx.obj.get("config_path"))
        fetcher = _create_fetcher(config_manager, transport, no_wait)
        result = fetcher.fetch(FetchRequest(user_id=user_id))
    except FetchError as e:
        _die(str(e), verbose=verbose, exc=e)
    except (CartLabError, ValueError) as e:
        _die(f"Fatal error: {e}", verbose=verbose, exc=e)

    click.echo(f"\nYour cart (user {result.request.user_id}):\n")
    if result.is_empty:
        click.echo("Your cart is empty.")
    else:
        click.echo(format_cart(result.items))
        click.echo(f"\nTotal items: {result.total_quantity}")


@cli.command("config")
@click.pass_context
def show_config(ctx):
    """Print the effective configuration as YAML."""
    verbose = ctx.obj.get("verbose", False)
    try:
        config_manager = ConfigManager(config_path=ctx.obj.get("config_path"))
    except CartLabError as e:
        _die(str(e), verbose=verbose, exc=e)
    click.echo(yaml.safe_dump(config_manager.config.model_dump(), sort_keys=False), nl=False)


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
