"""echeck CLI application using Typer.

Checks bank account details from the command line:
- validate: run the full validation pipeline and show the errors
- mask: show an account number with all but the last four digits masked
"""

import json
import logging
import sys

import typer
from rich.console import Console
from rich.table import Table

from echeck.application.dtos.banking import ValidationReportDTO
from echeck.application.services import AccountValidationService
from echeck.domain.banking.value_objects import AccountRecord
from echeck_config import get_settings

app = typer.Typer(
    name="echeck",
    help="echeck - bank account checks for electronic check payments",
    no_args_is_help=True,
)
console = Console()


def configure_logging() -> None:
    """Configure logging for the CLI.

    Logs go to stderr so that --json output on stdout stays parseable.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.effective_log_level, logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,  # Override any existing config
    )
    logging.getLogger("echeck").setLevel(log_level)


@app.callback()
def main() -> None:
    """Set up logging before any command runs."""
    configure_logging()


def _render_report(report: ValidationReportDTO) -> None:
    status = (
        "[bold green]valid[/bold green]"
        if report.valid
        else "[bold red]invalid[/bold red]"
    )
    console.print(f"Account {report.display_number or '(none)'}: {status}")

    if report.valid:
        return

    table = Table(title="Validation errors")
    table.add_column("Field", style="cyan")
    table.add_column("Message")
    for field, messages in report.errors.items():
        for message in messages:
            table.add_row(field, message)
    console.print(table)


@app.command("validate")
def validate_account(
    first_name: str | None = typer.Option(None, "--first-name"),
    last_name: str | None = typer.Option(None, "--last-name"),
    account_number: str | None = typer.Option(None, "--account-number"),
    routing_number: str | None = typer.Option(None, "--routing-number"),
    account_type: str | None = typer.Option(
        None,
        "--type",
        help="checking, savings, business_checking or bogus (default: checking)",
    ),
    echeck_type: str | None = typer.Option(
        None,
        "--echeck-type",
        help="ccd or ppd",
    ),
    bank_name: str | None = typer.Option(None, "--bank-name"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """Validate bank account details.

    Exits with status 1 when the account is invalid.
    """
    record = AccountRecord(
        first_name=first_name,
        last_name=last_name,
        account_number=account_number,
        routing_number=routing_number,
        type=account_type,
        echeck_type=echeck_type,
        bank_name=bank_name,
    )
    report = AccountValidationService().check(record)

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
    else:
        _render_report(report)

    if not report.valid:
        raise typer.Exit(code=1)


@app.command("mask")
def mask_account_number(
    account_number: str = typer.Argument(..., help="Account number to mask"),
) -> None:
    """Print an account number with all but the last four digits masked.

    Non-digit characters are removed first.
    """
    record = AccountRecord(account_number=account_number)
    record.normalize()
    typer.echo(record.display_number)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
