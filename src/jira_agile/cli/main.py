#!/usr/bin/env python3
"""jira-agile CLI entry point.

Issues raw requests through the client pipeline and shows the resulting
envelope, which is handy for checking credentials and exploring endpoints.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click
import requests
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from jira_agile.core.config import ConfigManager, JiraAgileConfig
from jira_agile.exceptions import JiraAgileError, ResponseError
from jira_agile.exceptions.templates import ErrorFormatter
from jira_agile.infrastructure.http.client import Client
from jira_agile.infrastructure.http.payload import serialize_payload
from jira_agile.infrastructure.http.response import ResponseScheme
from jira_agile.logging import configure_logging

from . import __version__

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

MASK = "••••••••"


@click.group()
@click.version_option(__version__, prog_name="jira-agile")
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path),
    help="Configuration file (default: ~/.config/jira-agile/config.toml)",
)
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[Path]) -> None:
    """Jira Agile REST API client."""
    ctx.ensure_object(dict)
    ctx.obj["config_manager"] = ConfigManager(config_file)


@cli.command()
@click.argument("method")
@click.argument("path")
@click.option("--data", help="JSON request body")
@click.option("--timeout", type=float, help="Request timeout in seconds")
@click.pass_context
def request(ctx: click.Context, method: str, path: str, data: Optional[str], timeout: Optional[float]) -> None:
    """Send METHOD to PATH (relative to the configured site).

    \b
    Examples:
        jira-agile request GET board/1
        jira-agile request POST sprint --data '{"name": "S1", "originBoardId": 1}'
    """
    config = _load(ctx)

    payload = None
    if data is not None:
        try:
            payload = serialize_payload(json.loads(data))
        except ValueError as e:
            raise click.BadParameter(f"not valid JSON: {e}", param_hint="--data")

    with Client.from_config(config) as client:
        prepared = client.new_request(method, path, payload)
        _, response = client.call(prepared, timeout=timeout)

    show_response(response)


@cli.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show the effective configuration."""
    config_manager: ConfigManager = ctx.obj["config_manager"]
    show_configuration(config_manager.config_file, _load(ctx))


def _load(ctx: click.Context) -> JiraAgileConfig:
    config = ctx.obj["config_manager"].load_config()
    configure_logging(config.logging.to_logging_config())
    return config


def show_configuration(config_file: Path, config: JiraAgileConfig) -> None:
    """Display the configuration with the API token masked."""
    table = Table(title="jira-agile Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Config File", str(config_file))
    table.add_row("Site", escape(config.site) if config.site else "[red]Not set[/red]")
    table.add_row("Mail", escape(config.auth.mail) if config.auth.mail else "[red]Not set[/red]")
    table.add_row("Token", MASK if config.auth.token else "[red]Not set[/red]")
    table.add_row("User Agent", escape(config.auth.user_agent) if config.auth.user_agent else "default")
    table.add_row("Timeout", f"{config.timeout}s" if config.timeout else "transport default")
    table.add_row("Log Level", config.logging.level.value)
    table.add_row("Log Format", config.logging.format)

    console.print(table)


def show_response(response: ResponseScheme) -> None:
    """Display a response envelope and its body."""
    style = "green" if response.ok else "red"
    console.print(f"[{style}]{response.code}[/{style}] {response.method} {escape(response.endpoint)}")

    if not response.raw_bytes:
        return
    try:
        body = json.dumps(response.json(), indent=2, ensure_ascii=False)
    except ValueError:
        console.print(response.text, markup=False)
        return
    console.print(Syntax(body, "json", word_wrap=True))


def main() -> None:
    """Console script entry point."""
    try:
        cli(standalone_mode=False, obj={})
    except click.exceptions.Abort:
        err_console.print("Aborted.")
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except ResponseError as e:
        if e.response is not None:
            show_response(e.response)
        _report(e)
        sys.exit(1)
    except JiraAgileError as e:
        _report(e)
        sys.exit(1)
    except requests.RequestException as e:
        err_console.print(f"[red]Transport error:[/red] {type(e).__name__}: {escape(str(e))}")
        sys.exit(1)


def _report(error: JiraAgileError) -> None:
    err_console.print(f"[red]Error:[/red] {escape(error.message)}")
    if error.technical_details:
        err_console.print(f"Details: {error.technical_details}", markup=False)
    if error.help_text:
        err_console.print(f"Help: {error.help_text}", markup=False)
    summary = ErrorFormatter.format_context_summary(error.context)
    if summary:
        err_console.print(f"Context: {summary}", markup=False)
    err_console.print(f"Error ID: {error.correlation_id}", markup=False)


if __name__ == "__main__":
    main()
