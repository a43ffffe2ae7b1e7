"""
vsctools account: fetch one account, all accounts, or accounts modified since a time.
"""
import click

from vsctools.commands._common import run_query, validate_timestamp
from vsctools.core.filters import ACCOUNT


@click.command(ACCOUNT)
@click.option("--all", "fetch_all", is_flag=True, default=False, help="Get information for all accounts")
@click.option("--institute", default=None, help="Limit query to the given institute")
@click.option("--login", "institute_login", default=None, help="User login at the home institute")
@click.option(
    "--modified",
    "modified_since",
    default=None,
    callback=validate_timestamp,
    help="Get accounts that have been modified since YYYYMMDDHHMM",
)
@click.option("--vscid", "vsc_id", default=None, help="The VSC id of the account to fetch")
@click.pass_context
def cmd(ctx, fetch_all, institute, institute_login, modified_since, vsc_id):
    """Request account information as pretty JSON.

    Filters are applied in order --all, --institute with --login, --modified,
    --vscid; the first one given wins.
    """
    run_query(
        ctx,
        ACCOUNT,
        fetch_all=fetch_all,
        institute=institute,
        institute_login=institute_login,
        modified_since=modified_since,
        vsc_id=vsc_id,
    )
