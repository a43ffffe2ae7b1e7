"""
Resource paths for each query, relative to the API base URL.

User supplied values are percent-encoded with no safe characters, so a value
such as "a/b" becomes the single segment "a%2Fb". Empty values and the dot
segments "." and ".." are rejected, since clients and servers collapse them
and they would point the request at another route.
"""

from urllib.parse import quote

from vsctools.core.errors import InvalidArgument
from vsctools.core.filters import (
    ACCOUNT,
    FetchAccountByInstituteLogin,
    FetchAccountsModifiedSince,
    FetchAllAccounts,
    FetchAllVOs,
    FetchByVscId,
)

DOT_SEGMENTS = ("", ".", "..")


def segment(value: str) -> str:
    value = str(value)
    if value in DOT_SEGMENTS:
        raise InvalidArgument(f"'{value}' is not a valid identifier")
    return quote(value, safe="")


def build_path(intent) -> str:
    if isinstance(intent, FetchAllAccounts):
        return "api/account/"
    if isinstance(intent, FetchAccountsModifiedSince):
        return f"api/account/modified/{segment(intent.timestamp)}"
    if isinstance(intent, FetchAccountByInstituteLogin):
        return f"api/account/institute/{segment(intent.institute)}/id/{segment(intent.login)}"
    if isinstance(intent, FetchAllVOs):
        return "api/vo/"
    if isinstance(intent, FetchByVscId):
        if intent.resource == ACCOUNT:
            return f"api/account/{segment(intent.vsc_id)}/"
        return f"api/vo/{segment(intent.vsc_id)}"
    raise TypeError(f"No path for {intent!r}")
