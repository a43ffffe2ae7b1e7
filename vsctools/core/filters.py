"""
Turn the filters given on the command line into one query against the API.

The API exposes a fixed set of access patterns, so resolution is an ordered
decision table rather than a general filter language. When several filters are
given, the first matching row wins and the remaining filters are ignored:

    account: --all > --institute + --login > --modified > --vscid
    vo:      --all > --vscid
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from loguru import logger

from vsctools.core.errors import MissingRequiredArgument

ACCOUNT = "account"
VO = "vo"
RESOURCES = (ACCOUNT, VO)

TIMESTAMP_FORMAT = "%Y%m%d%H%M"


@dataclass(frozen=True)
class FetchAllAccounts:
    resource: ClassVar[str] = ACCOUNT
    many: ClassVar[bool] = True


@dataclass(frozen=True)
class FetchAllVOs:
    resource: ClassVar[str] = VO
    many: ClassVar[bool] = True


@dataclass(frozen=True)
class FetchAccountsModifiedSince:
    timestamp: str
    resource: ClassVar[str] = ACCOUNT
    many: ClassVar[bool] = True


@dataclass(frozen=True)
class FetchAccountByInstituteLogin:
    institute: str
    login: str
    resource: ClassVar[str] = ACCOUNT
    many: ClassVar[bool] = False


@dataclass(frozen=True)
class FetchByVscId:
    resource: str
    vsc_id: str
    many: ClassVar[bool] = False

    def __post_init__(self):
        if self.resource not in RESOURCES:
            raise ValueError(f"Unknown resource '{self.resource}'")


def _log_ignored(intent, **ignored):
    given = sorted(name for name, value in ignored.items() if value)
    if given:
        logger.debug(f"Resolved to {intent}; ignoring lower priority filters: {', '.join(given)}")


def resolve_account(
    fetch_all: bool = False,
    institute: Optional[str] = None,
    institute_login: Optional[str] = None,
    modified_since: Optional[str] = None,
    vsc_id: Optional[str] = None,
):
    """Pick the single account query for the given filters.

    Raises MissingRequiredArgument when nothing selects a query.
    """
    if fetch_all:
        intent = FetchAllAccounts()
        _log_ignored(intent, institute=institute, login=institute_login,
                     modified=modified_since, vscid=vsc_id)
        return intent

    if institute and institute_login:
        intent = FetchAccountByInstituteLogin(institute, institute_login)
        _log_ignored(intent, modified=modified_since, vscid=vsc_id)
        return intent

    if modified_since:
        intent = FetchAccountsModifiedSince(modified_since)
        _log_ignored(intent, vscid=vsc_id)
        return intent

    if not vsc_id:
        raise MissingRequiredArgument(
            "Provide --vscid when not using --all, --modified or --institute with --login"
        )
    return FetchByVscId(ACCOUNT, vsc_id)


def resolve_vo(fetch_all: bool = False, vsc_id: Optional[str] = None):
    """Pick the single VO query for the given filters."""
    if fetch_all:
        intent = FetchAllVOs()
        _log_ignored(intent, vscid=vsc_id)
        return intent

    if not vsc_id:
        raise MissingRequiredArgument("Provide --vscid when not using --all")
    return FetchByVscId(VO, vsc_id)


def resolve(resource: str, **filters):
    """Resolve filters for either resource. Filters a resource does not support are ignored."""
    if resource == ACCOUNT:
        return resolve_account(**filters)
    if resource == VO:
        return resolve_vo(fetch_all=filters.get("fetch_all", False), vsc_id=filters.get("vsc_id"))
    raise ValueError(f"Unknown resource '{resource}'")
