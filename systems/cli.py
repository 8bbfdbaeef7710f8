"""
Systems CLI - Command line interface for the systems package.

Commands:
- parse: Parse and normalize a channel
- full: Expand a channel to include its track
- resolve / resolve-pinned: Apply a channel update
- match: Compare a requested channel with a candidate
- base / system: Parse a base or system (legacy series accepted)
- series: List registered legacy series
"""

import json
import logging
import sys
from typing import Any, Dict, NoReturn, Optional

import click

from systems import __version__
from systems.config import config
from systems.engine.parser import full as full_channel, parse as parse_channel, parse_verbatim
from systems.engine.resolver import resolve as resolve_channel, resolve_pinned as resolve_pinned_channel
from systems.models.base import Base
from systems.models.channel import Channel
from systems.models.system import System
from systems.store.registry import BASE_REGISTRY


logger = logging.getLogger(__name__)


def fail(error: Exception) -> NoReturn:
    """Report a validation error and exit with status 2."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(2)


def echo_json(data: Dict[str, Any]) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def print_channel(channel: Channel) -> None:
    """Print channel fields in a formatted way."""
    click.echo(f"name:   {channel.name}")
    click.echo(f"track:  {channel.track}")
    click.echo(f"risk:   {channel.risk.value}")
    if channel.branch:
        click.echo(f"branch: {channel.branch}")


def json_option(f):
    return click.option(
        "--json/--text", "as_json", default=lambda: config.output == "json",
        help="Output format (default from SYSTEMS_OUTPUT)",
    )(f)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Systems - channel and base descriptor tools"""
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("channel")
@click.option("--verbatim", is_flag=True, help="Do not normalize track, risk and name")
@json_option
def parse(channel: str, verbatim: bool, as_json: bool):
    """
    Parse a channel

    CHANNEL: [track/]risk[/branch], e.g. 20.04/stable
    """
    try:
        ch = parse_verbatim(channel) if verbatim else parse_channel(channel)
    except ValueError as e:
        fail(e)

    if as_json:
        echo_json(ch.model_dump(mode="json"))
    else:
        print_channel(ch)


@cli.command()
@click.argument("channel")
def full(channel: str):
    """Expand CHANNEL so it includes an explicit track"""
    try:
        click.echo(full_channel(channel))
    except ValueError as e:
        fail(e)


@cli.command()
@click.argument("current")
@click.argument("new")
@click.option("--pinned", "-p", help="Pinned track (default from SYSTEMS_PINNED_TRACK)")
def resolve(current: str, new: str, pinned: Optional[str]):
    """
    Resolve NEW against the CURRENT channel

    A risk-only NEW keeps the current track. With a pinned track, NEW may
    not switch to another track.
    """
    pinned = pinned if pinned is not None else config.pinned_track
    logger.debug("Resolving %r against %r (pinned track: %r)", new, current, pinned)
    try:
        if pinned:
            new = resolve_pinned_channel(pinned, new)
        click.echo(resolve_channel(current, new))
    except ValueError as e:
        fail(e)


@cli.command("resolve-pinned")
@click.argument("track")
@click.argument("new")
def resolve_pinned(track: str, new: str):
    """Resolve NEW against the pinned TRACK"""
    try:
        click.echo(resolve_pinned_channel(track, new))
    except ValueError as e:
        fail(e)


@cli.command()
@click.argument("requested")
@click.argument("candidate")
@json_option
def match(requested: str, candidate: str, as_json: bool):
    """Compare the REQUESTED channel with a CANDIDATE channel"""
    try:
        result = parse_channel(requested).match(parse_channel(candidate))
    except ValueError as e:
        fail(e)

    if as_json:
        echo_json(result.model_dump(mode="json"))
    else:
        click.echo(str(result))


@cli.command()
@click.argument("value")
@json_option
def base(value: str, as_json: bool):
    """
    Parse a base

    VALUE: legacy series (focal) or os/channel (ubuntu/20.04/edge)
    """
    try:
        b = Base.parse(value)
    except ValueError as e:
        fail(e)

    if as_json:
        echo_json(b.model_dump(mode="json"))
    else:
        click.echo(f"os:      {b.name}")
        click.echo(f"channel: {b.channel}")
        click.echo(f"series:  {b}")


@cli.command()
@click.argument("value")
@json_option
def system(value: str, as_json: bool):
    """
    Parse a system

    VALUE: legacy series (focal) or system#os=ubuntu#channel=20.04/edge
    """
    try:
        s = System.parse(value)
    except ValueError as e:
        fail(e)

    if as_json:
        echo_json(s.model_dump(mode="json"))
    else:
        if s.os:
            click.echo(f"os:       {s.os}")
            click.echo(f"channel:  {s.channel}")
        if s.resource:
            click.echo(f"resource: {s.resource}")
        click.echo(f"series:   {s}")


@cli.command()
@click.option("--os", "os_name", help="Only list series for this OS")
def series(os_name: Optional[str]):
    """List registered legacy series"""
    for name in BASE_REGISTRY.series():
        b = BASE_REGISTRY.lookup(name)
        if os_name and b.name != os_name:
            continue
        click.echo(f"{name:<14} {b.name}/{b.channel.full()}")


if __name__ == "__main__":
    cli()
