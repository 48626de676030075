"""Zone credentials kept in the OS keyring."""
from __future__ import annotations

from typing import Optional

import pyperclip
import rich
import typer
from rich.table import Table
from typing_extensions import Annotated

from ava_cloudflare.models.keyring_config import ConfigKey, KeyringConfig
from ava_cloudflare.models.settings import env

app = typer.Typer(no_args_is_help=True)
cp = rich.print


def clean_value(key: ConfigKey, value: str) -> str:
    """Strip a credential, rejecting blank or multi-part values."""
    value = value.strip()
    if not value or len(value.split()) > 1:
        cp(f"❌  Invalid value for {key.value}: expected a single non-empty word.")
        raise SystemExit(1)
    return value


def store(key: ConfigKey, value: str | None):
    with KeyringConfig.load_from_keyring() as config:
        if value is None:
            config.pop(key, None)
        else:
            config[key] = value


@app.command(name="set")
def set_config(
    key: ConfigKey,
    value: Annotated[Optional[str], typer.Argument(help="Omit to clear the key")] = None,
):
    """Store a zone credential in the keyring."""
    if value is not None:
        value = clean_value(key, value)
    store(key, value)

    cp(f"{'Cleared' if value is None else 'Saved'} key {key.value!r}")
    if getattr(env, key.field):
        cp(f"[yellow]Note: {key.value} is also set in the environment, which takes precedence.[/yellow]")


@app.command(name="set-cp")
def set_cp_config(key: ConfigKey):
    """Store a zone credential from the clipboard."""
    value = clean_value(key, pyperclip.paste() or "")
    store(key, value)

    cp(f"Saved key {key.value!r} from clipboard ({len(value)} chars)")


@app.command()
def show():
    """Show the effective zone credentials and where they come from."""
    stored = KeyringConfig.load_from_keyring()
    settings = stored.apply_to(env)

    displays = {
        ConfigKey.ZONE_ID: settings.zone_id_display,
        ConfigKey.API_TOKEN: settings.api_token_display(),
    }

    table = Table("Key", "Source", "Value")
    for key in ConfigKey:
        source = stored.source_of(key, env)
        table.add_row(key.value, source or "-", displays[key] or "(not set)")
    cp(table)
