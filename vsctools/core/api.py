# api.py

import requests

from loguru import logger

from vsctools.core.errors import RequestError


def get_headers(settings):
    return {
        "Authorization": f"Bearer {settings.token}",
        "Accept": "application/json",
        "Content-Type": "application/json"
    }


def build_url(settings, path):
    return settings.api_url.rstrip("/") + "/" + path.lstrip("/")


def api_get(settings, path) -> bytes:
    """GET `path` below the configured API URL and return the raw body.

    Raises RequestError for network failures and any non-2xx status.
    """
    url = build_url(settings, path)
    logger.debug(f"GET {url}")
    try:
        response = requests.get(url, headers=get_headers(settings), timeout=settings.timeout)
    except requests.exceptions.RequestException as e:
        raise RequestError(f"GET {url} failed: {e}", url=url) from e

    logger.debug(f"Response status: {response.status_code}")
    if not response.ok:
        raise RequestError(
            f"GET {url} failed: {response.status_code} {response.text}",
            status_code=response.status_code,
            url=url,
        )
    return response.content
