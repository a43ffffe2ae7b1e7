import click
from loguru import logger


def click_sink(message):
    record = message.record
    level = record["level"].name
    color = {
        "TRACE": "bright_black",
        "DEBUG": "blue",
        "INFO": "green",
        "SUCCESS": "white",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bright_red",
    }.get(level, "white")

    prefix = ""
    if record["extra"].get("log_source"):
        module = record["module"]
        function = record["function"]
        line = record["line"]
        prefix = f"[{level}|{module}.{function}:{line}] "

    # Log to stderr so the JSON on stdout can be piped into other tools
    click.secho(prefix + record["message"].rstrip(), fg=color, err=True)


def setup_logger(level="WARNING"):
    """
    Configure loguru logger with click-based color output on stderr.

    Args:
        level (str): Log level string (e.g., "DEBUG"). TRACE and DEBUG also
            enable tracebacks and a [level|module.function:line] prefix.
    """

    level = level.upper()
    show_traceback = level in ("TRACE", "DEBUG")

    logger.remove()

    logger.add(
        click_sink,
        level=level,
        format="{message}",
        backtrace=show_traceback,
        diagnose=show_traceback,
        filter=lambda record: record["extra"].update(log_source=show_traceback) or True
    )
