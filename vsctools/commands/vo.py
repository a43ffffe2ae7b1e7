"""
vsctools vo: fetch one virtual organisation or all of them.
"""
import click

from vsctools.commands._common import run_query
from vsctools.core.filters import VO


@click.command(VO)
@click.option("--all", "fetch_all", is_flag=True, default=False, help="Get information for all VOs")
@click.option("--vscid", "vsc_id", default=None, help="The VSC id of the VO to fetch")
@click.pass_context
def cmd(ctx, fetch_all, vsc_id):
    """Request virtual organisation information as pretty JSON."""
    run_query(ctx, VO, fetch_all=fetch_all, vsc_id=vsc_id)
