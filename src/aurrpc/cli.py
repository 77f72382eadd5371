"""Command-line interface to the AUR RPC client."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable

import click

from ._client import AURClient
from ._config import AURClientConfig
from ._exceptions import AURError
from ._models import PackageRecord, SearchField
from .logging import configure_logging

__all__ = ["main"]

_SEARCH_FIELDS = [f.value for f in SearchField if f != SearchField.unspecified]


def _run(
    config: AURClientConfig,
    call: Callable[[AURClient], Awaitable[list[PackageRecord]]],
) -> list[PackageRecord]:
    async def run() -> list[PackageRecord]:
        async with AURClient.from_config(config) as client:
            return await call(client)

    try:
        return asyncio.run(run())
    except AURError as e:
        raise click.ClickException(str(e)) from e


def _echo_packages(packages: list[PackageRecord], *, as_json: bool) -> None:
    if as_json:
        data = [p.model_dump(by_alias=True) for p in packages]
        click.echo(json.dumps(data, indent=2))
        return
    for package in packages:
        click.echo(f"{package.name} {package.version}")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--base-url",
    envvar="AUR_BASE_URL",
    default=None,
    help="Base URL of the AUR RPC endpoint.",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    show_default=True,
    help="Level of log messages written to standard error.",
)
@click.version_option(package_name="aurrpc", message="%(version)s")
@click.pass_context
def main(ctx: click.Context, base_url: str | None, log_level: str) -> None:
    """Search and query the Arch User Repository."""
    configure_logging(log_level=log_level)
    if base_url:
        ctx.obj = AURClientConfig(base_url=base_url)
    else:
        ctx.obj = AURClientConfig()


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None) -> None:
    """Show help for any command."""
    if not topic:
        if not ctx.parent:
            raise RuntimeError("help called without topic or parent")
        click.echo(ctx.parent.get_help())
        return
    if topic not in main.commands:
        raise click.UsageError(f"Unknown help topic {topic}", ctx)
    ctx.info_name = topic
    click.echo(main.commands[topic].get_help(ctx))


@main.command()
@click.argument("query")
@click.option(
    "--by",
    type=click.Choice(_SEARCH_FIELDS),
    default=None,
    help="Field to search. Defaults to the AUR default (name-desc).",
)
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
@click.pass_obj
def search(
    config: AURClientConfig, query: str, by: str | None, *, as_json: bool
) -> None:
    """Search for packages."""
    field = SearchField(by) if by else SearchField.unspecified
    packages = _run(config, lambda c: c.search(query, field))
    _echo_packages(packages, as_json=as_json)


@main.command()
@click.argument("names", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
@click.pass_obj
def info(
    config: AURClientConfig, names: tuple[str, ...], *, as_json: bool
) -> None:
    """Show information about packages."""
    packages = _run(config, lambda c: c.info(names))
    _echo_packages(packages, as_json=as_json)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
@click.pass_obj
def orphans(config: AURClientConfig, *, as_json: bool) -> None:
    """List packages without a maintainer."""
    packages = _run(config, lambda c: c.orphans())
    _echo_packages(packages, as_json=as_json)
