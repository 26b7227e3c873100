"""CLI subcommands for noticegen (config)."""

from __future__ import annotations

import click


def _mask(key: str, value: str) -> str:
    return value if "key" not in key.lower() else value[:8] + "..."


@click.group()
def config_cmd() -> None:
    """Inspect noticegen configuration."""


@config_cmd.command("list")
def config_list() -> None:
    """Show current configuration."""
    from noticegen.core.config import load_env_config, load_toml_config, resolve_client_config

    click.echo("Environment:")
    env = load_env_config()
    if env:
        for k, v in sorted(env.items()):
            click.echo(f"  {k}: {_mask(k, v)}")
    else:
        click.echo("  (no environment variables set)")

    click.echo("\nTOML config:")
    toml = load_toml_config()
    if toml:
        for k, v in sorted(toml.items()):
            if isinstance(v, dict):
                click.echo(f"  [{k}]")
                for sk, sv in sorted(v.items()):
                    click.echo(f"    {sk}: {_mask(sk, str(sv))}")
            else:
                click.echo(f"  {k}: {_mask(k, str(v))}")
    else:
        click.echo("  (no config.toml found)")

    resolved = resolve_client_config()
    click.echo("\nResolved:")
    click.echo(f"  base_url: {resolved.base_url or '(SDK default)'}")
    click.echo(f"  api_key: {_mask('api_key', resolved.api_key) if resolved.api_key else '(unset)'}")
    click.echo(f"  model: {resolved.model}")
    click.echo(f"  user: {resolved.user or '(request user)'}")
