import sys
import json
import importlib
from pathlib import Path

import click
from dotenv import find_dotenv, load_dotenv
from loguru import logger
from tomlkit.exceptions import ParseError

from vsctools.config import LOG_LEVELS, VsctoolsConfig
from vsctools.logger import setup_logger


COMMAND_FOLDER = Path(__file__).parent / "commands"


class VsctoolsCLI(click.Group):
    def list_commands(self, ctx):
        return sorted(
            f.stem
            for f in COMMAND_FOLDER.glob("*.py")
            if f.name not in ("__init__.py",) and not f.name.startswith("_")
        )

    def get_command(self, ctx, name):
        if name not in self.list_commands(ctx):
            return None
        try:
            mod = importlib.import_module(f"vsctools.commands.{name}")
        except ImportError as e:
            logger.error(f"Cannot import command '{name}': {e}")
            sys.exit(1)
        if not hasattr(mod, "cmd"):
            logger.error(f"Command module '{name}' must define a `cmd` object.")
            sys.exit(1)
        return mod.cmd


@click.command(cls=VsctoolsCLI, invoke_without_command=True)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Override log level (also enables traceback for DEBUG or TRACE)",
)
@click.option("--debug", is_flag=True, default=False, help="Log at DEBUG level.")
@click.option("--token", default=None, help="OAuth bearer token for the API.")
@click.pass_context
def cli(ctx, log_level, debug, token):
    """vsctools: CLI for querying the VSC account page REST API."""

    if debug:
        log_level = "DEBUG"
    setup_logger(level=(log_level or "WARNING"))

    # .env in the working directory; variables already set win
    load_dotenv(find_dotenv(usecwd=True))

    config = VsctoolsConfig()
    try:
        config.load()
        if not log_level:
            setup_logger(level=config.log_level)
    except ParseError as e:
        logger.error(f"Failed to parse config TOML: {e}")
        ctx.exit(1)
    except ValueError as e:
        logger.error(f"Error: {e}")
        ctx.exit(1)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["token"] = token

    logger.debug(f"config dir: {config.config_dir}")
    logger.trace(f"config properties:\n{json.dumps(config.list_properties(), indent=2, default=str)}")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
