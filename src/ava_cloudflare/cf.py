"""Cloudflare status and cache purge commands."""
from __future__ import annotations

from typing import Any, Callable, ParamSpec, TypeVar

import typer
from rich import print as cp
from rich.table import Table

from ava_cloudflare.hooks import purge_and_log
from ava_cloudflare.models.keyring_config import KeyringConfig
from ava_cloudflare.models.settings import EnvSettings, env
from ava_cloudflare.utils.cf_cache import CachePurgeClient

T = TypeVar("T")
P = ParamSpec("P")

app = typer.Typer(no_args_is_help=True)

CONFIG_SNIPPET = """\
  AVA_CLOUDFLARE_ENABLED=true
  AVA_CLOUDFLARE_ZONE_ID=your-zone-id
  AVA_CLOUDFLARE_API_TOKEN=your-api-token"""


def load_settings() -> EnvSettings:
    """Environment settings, with keyring values for anything unset."""
    return KeyringConfig.load_from_keyring().apply_to(env)


def get_client() -> CachePurgeClient:
    return CachePurgeClient()


def attempt(func: Callable[P, T], *args: Any) -> T:
    try:
        return func(*args)
    except Exception as e:
        if env.verbose:
            raise
        else:
            cp(f"❌  Error: {e}")
            raise SystemExit(1)


@app.command()
def status():
    """Show Cloudflare integration status."""
    settings = load_settings()

    cp("[bold]Cloudflare Integration Status[/bold]\n")

    table = Table("Setting", "Value")
    table.add_row("Enabled", "Yes" if settings.enabled else "No")
    table.add_row("Zone ID", settings.zone_id_display or "(not set)")
    table.add_row("API Token", settings.api_token_display() or "(not set)")
    cp(table)

    if settings.is_active:
        cp("[green]✓ Cloudflare integration is active. Cache will be purged on rebuild.[/green]")
    else:
        cp("[yellow]⚠ Cloudflare integration is not fully configured.[/yellow]\n")
        cp("Add to your environment or .env file:\n")
        typer.echo(CONFIG_SNIPPET)


@app.command()
def purge():
    """Purge all Cloudflare cached content."""
    settings = load_settings()

    cp("[bold]Cloudflare Cache Purge[/bold]\n")

    if not settings.enabled:
        cp("❌  Cloudflare integration is not enabled.")
        cp("Set AVA_CLOUDFLARE_ENABLED=true to enable it.")
        raise SystemExit(1)

    if not settings.is_configured:
        cp("❌  Cloudflare zone_id and api_token are required.")
        cp("Run 'ava-cloudflare cloudflare status' for configuration help.")
        raise SystemExit(1)

    cp("Purging Cloudflare cache...")
    result = attempt(purge_and_log, settings, get_client())

    if not result.success:
        cp(f"❌  {result.message}")
        raise SystemExit(1)

    cp(f"✅  {result.message}")
