"""
Helpers shared by the account and vo commands.
"""
from contextlib import contextmanager
from datetime import datetime

import click
from loguru import logger

from vsctools.core.dispatch import Dispatcher
from vsctools.core.errors import VsctoolsError
from vsctools.core.filters import TIMESTAMP_FORMAT, resolve


def validate_timestamp(ctx, param, value):
    """click callback: accept YYYYMMDDHHMM and pass the string through unchanged."""
    if value is None:
        return value
    # strptime alone accepts single digit months and days
    if len(value) != 12 or not value.isdigit():
        raise click.BadParameter(f"'{value}' is not a YYYYMMDDHHMM timestamp")
    try:
        datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a valid date and time")
    return value


def get_dispatcher(ctx) -> Dispatcher:
    obj = ctx.find_root().obj
    settings = obj["config"].settings(token=obj.get("token"))
    return Dispatcher(settings)


@contextmanager
def handle_errors(ctx):
    """Log a vsctools error as a one line diagnostic and exit with its code."""
    try:
        yield
    except VsctoolsError as e:
        logger.error(f"{type(e).__name__}: {e}")
        ctx.exit(e.exit_code)


def run_query(ctx, subcommand, **filters):
    with handle_errors(ctx):
        intent = resolve(subcommand, **filters)
        logger.debug(f"{subcommand}: {intent}")
        click.echo(get_dispatcher(ctx).dispatch(subcommand, intent))
