"""
Route a resolved query to the API and turn the response into output text.
"""

from loguru import logger

from vsctools.core.api import api_get
from vsctools.core.decoder import decode, encode
from vsctools.core.filters import RESOURCES
from vsctools.core.routes import build_path


class Dispatcher:
    """Runs exactly one account or VO query per call.

    `settings` is an ApiSettings; `fetch(settings, path)` returns the raw body
    and defaults to a plain HTTPS GET.
    """

    def __init__(self, settings, fetch=api_get):
        self.settings = settings
        self.fetch = fetch

    def dispatch(self, subcommand: str, intent) -> str:
        if subcommand not in RESOURCES:
            raise ValueError(f"Unknown subcommand '{subcommand}'")
        if intent.resource != subcommand:
            raise ValueError(f"{type(intent).__name__} is not a '{subcommand}' query")

        path = build_path(intent)
        logger.info(f"Fetching {path}")
        body = self.fetch(self.settings, path)
        return encode(decode(intent, body))
