"""Command line interface for translating Azure SQL custom-resource manifests."""

import json
import sys
from pathlib import Path
from typing import Optional

import click
import structlog
from rich.console import Console
from rich.table import Table

from .config import load_config
from .exceptions import AzureSqlTranslatorError
from .logging_config import configure_logging
from .manifest import load_manifest_file
from .translators import (
    DEFAULT_EDITION,
    DEFAULT_FAILOVER_POLICY,
    EDITION_TABLE,
    TranslationContext,
    TranslationCoordinator,
)

logger = structlog.get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (DEBUG, INFO, WARNING, ERROR). Overrides configuration.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """Translate Azure SQL custom resources to Azure SQL API properties."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level


@cli.command()
@click.argument(
    "manifest", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--subscription-id", default=None, help="Subscription for resource IDs")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Reject unknown editions and failover policies instead of defaulting",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to YAML configuration file",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write JSON to this file instead of stdout",
)
@click.option("--report", is_flag=True, help="Print a translation report to stderr")
@click.pass_context
def translate(
    ctx: click.Context,
    manifest: Path,
    subscription_id: Optional[str],
    strict: Optional[bool],
    config_path: Optional[Path],
    output: Optional[Path],
    report: bool,
) -> None:
    """Translate the custom resources in MANIFEST and print them as JSON."""
    try:
        config = load_config(
            config_path,
            cli_args={
                "subscription_id": subscription_id,
                "strict_mode": strict,
                "log_level": ctx.obj.get("log_level"),
            },
        )
        configure_logging(config.numeric_log_level)

        resources = load_manifest_file(manifest)
        coordinator = TranslationCoordinator(
            TranslationContext(
                subscription_id=config.subscription_id,
                strict_mode=config.strict_mode,
            )
        )
        translated = coordinator.translate_resources(resources)
    except AzureSqlTranslatorError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    payload = json.dumps([t.to_dict() for t in translated], indent=2)
    if output:
        output.write_text(payload + "\n", encoding="utf-8")
        logger.info("translation_written", path=str(output), count=len(translated))
    else:
        click.echo(payload)

    if report:
        click.echo(coordinator.format_translation_report(), err=True)


@cli.command()
def editions() -> None:
    """Show the edition translation table."""
    table = Table(title="Database editions")
    table.add_column("Ordinal", justify="right")
    table.add_column("Custom resource")
    table.add_column("Azure SQL API")

    for edition, provider_edition in sorted(EDITION_TABLE.items()):
        table.add_row(str(int(edition)), edition.name, provider_edition.value)

    console = Console()
    console.print(table)
    console.print(
        f"Unknown editions translate to [bold]{DEFAULT_EDITION.value}[/bold], "
        f"unknown failover policies to [bold]{DEFAULT_FAILOVER_POLICY.value}[/bold]."
    )


if __name__ == "__main__":
    cli()
