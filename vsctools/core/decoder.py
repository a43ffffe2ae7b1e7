"""
Decode API response bodies into records, and render records back to JSON.
"""

import json

from loguru import logger
from pydantic import ValidationError

from vsctools.core.errors import DecodeError
from vsctools.core.filters import ACCOUNT, VO
from vsctools.core.models import Account, Accounts, VirtualOrganisation, VirtualOrganisations

SHAPES = {
    (ACCOUNT, False): Account,
    (ACCOUNT, True): Accounts,
    (VO, False): VirtualOrganisation,
    (VO, True): VirtualOrganisations,
}


def shape_for(intent):
    """Return the model class a response to `intent` decodes into."""
    return SHAPES[(intent.resource, intent.many)]


def _error_field(error: ValidationError):
    errors = error.errors()
    if not errors:
        return None
    loc = errors[0].get("loc", ())
    return ".".join(str(part) for part in loc) or None


def decode(intent, payload):
    """Decode raw bytes (or text) for `intent` into its record or collection."""
    model = shape_for(intent)
    try:
        record = model.model_validate_json(payload)
    except ValidationError as e:
        field = _error_field(e)
        logger.debug(f"Decoding {model.__name__} failed: {e}")
        where = f" at '{field}'" if field else ""
        raise DecodeError(
            f"Response does not match {model.__name__}{where}: {e.errors()[0]['msg']}",
            payload=payload,
            field=field,
        ) from e
    if intent.many:
        logger.debug(f"Decoded {len(record)} {model.__name__} records")
    return record


def encode(record) -> str:
    """Pretty JSON for a decoded record, keyed by the API's field names."""
    return json.dumps(record.model_dump(mode="json", by_alias=True), indent=2)
