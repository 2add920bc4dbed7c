"""CLI for Badger sett account summaries."""

import json
import logging
from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from badger_accounts.core import AccountAggregator
from badger_accounts.core.models import UserAccountSummary
from badger_accounts.data import load_registry
from badger_accounts.exceptions import AccountError
from badger_accounts.integrations import BadgerSubgraphClient
from badger_accounts.pricing import CoinGeckoPricing

app = typer.Typer(
    name="badger-accounts",
    help="Value a wallet's Badger sett positions and earnings in USD",
    add_completion=False,
)

console = Console()


class OutputFormat(StrEnum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def _setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


@app.command()
def account(
    address: str = typer.Argument(..., help="Wallet address to query"),
    format: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--format",
        "-f",
        help="Output format",
    ),
    subgraph_url: str = typer.Option(
        BadgerSubgraphClient.BASE_URL,
        "--subgraph-url",
        envvar="BADGER_SUBGRAPH_URL",
        help="Badger subgraph GraphQL endpoint",
    ),
    price_api_url: str = typer.Option(
        CoinGeckoPricing.BASE_URL,
        "--price-api-url",
        envvar="BADGER_PRICE_API_URL",
        help="CoinGecko API base URL",
    ),
    setts_file: Path | None = typer.Option(
        None,
        "--setts-file",
        envvar="BADGER_SETTS_FILE",
        help="YAML sett list (defaults to the packaged list)",
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug output"),
) -> None:
    """
    Get the USD value and earnings of a wallet across all setts.

    Examples:

        # Account summary
        badger-accounts account 0xABC...

        # Output as JSON
        badger-accounts account 0xABC... --format json
    """
    _setup_logging(debug)

    registry = load_registry(setts_file)

    with (
        BadgerSubgraphClient(base_url=subgraph_url) as subgraph,
        CoinGeckoPricing(registry.deposit_tokens(), base_url=price_api_url) as pricing,
    ):
        aggregator = AccountAggregator(user_source=subgraph, price_source=pricing, registry=registry)
        try:
            with console.status(f"Fetching account for {address}..."):
                summary = aggregator.get_user_account_summary(address)
        except AccountError as e:
            console.print(f"[bold red]Error ({e.status_code}):[/bold red] {e}")
            if debug:
                raise
            raise typer.Exit(1)

    if format == OutputFormat.JSON:
        _output_json(summary)
    else:
        _output_table(summary)


@app.command()
def list_setts(
    setts_file: Path | None = typer.Option(
        None,
        "--setts-file",
        envvar="BADGER_SETTS_FILE",
        help="YAML sett list (defaults to the packaged list)",
    ),
) -> None:
    """List all configured setts."""
    registry = load_registry(setts_file)

    table = Table(title="Configured Setts", show_header=True, header_style="bold magenta")
    table.add_column("Sett", style="cyan")
    table.add_column("Asset", style="yellow")
    table.add_column("Sett Token", style="green")

    for config in registry:
        table.add_row(config.name, config.symbol, config.sett_token)

    console.print(table)


def _output_table(summary: UserAccountSummary) -> None:
    """Output account summary as rich table."""
    if not summary.sett_accounts:
        console.print("\n[yellow]No sett positions found[/yellow]")

    table = Table(
        title=f"Account {summary.id[:10]}...{summary.id[-8:]}",
        show_header=True,
        header_style="bold magenta",
    )

    table.add_column("Sett", style="cyan")
    table.add_column("Asset", style="yellow")
    table.add_column("Value", style="bold green", justify="right")
    table.add_column("Earned", style="green", justify="right")

    for sett_account in summary.sett_accounts:
        table.add_row(
            sett_account.name,
            sett_account.asset,
            f"${sett_account.value:,.2f}",
            f"${sett_account.earned_value:,.2f}",
        )

    if summary.sett_accounts:
        console.print("\n")
        console.print(table)

    summary_table = Table(show_header=False, box=None)
    summary_table.add_column("Label", style="bold")
    summary_table.add_column("Value", style="bold green")

    summary_table.add_row("Total Value:", f"${summary.value:,.2f}")
    summary_table.add_row("Total Earned:", f"${summary.earned_value:,.2f}")
    summary_table.add_row("Setts:", str(len(summary.sett_accounts)))

    console.print("\n")
    console.print(summary_table)
    console.print("\n")


def _output_json(summary: UserAccountSummary) -> None:
    """Output account summary as JSON."""
    data = summary.model_dump(mode="json", by_alias=True)
    console.print_json(json.dumps(data))


if __name__ == "__main__":
    app()
