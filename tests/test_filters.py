import itertools

import pytest

from vsctools.core.errors import MissingRequiredArgument
from vsctools.core.filters import (
    FetchAccountByInstituteLogin,
    FetchAccountsModifiedSince,
    FetchAllAccounts,
    FetchAllVOs,
    FetchByVscId,
    resolve,
    resolve_account,
    resolve_vo,
)


def test_all_wins_over_everything():
    intent = resolve_account(
        fetch_all=True,
        institute="kul",
        institute_login="jdoe",
        modified_since="202401010000",
        vsc_id="vsc40075",
    )
    assert intent == FetchAllAccounts()


def test_institute_login_wins_over_modified_and_vscid():
    intent = resolve_account(
        institute="kul", institute_login="jdoe", modified_since="202401010000", vsc_id="vsc40075"
    )
    assert intent == FetchAccountByInstituteLogin("kul", "jdoe")


def test_institute_without_login_falls_through():
    intent = resolve_account(institute="kul", modified_since="202401010000")
    assert intent == FetchAccountsModifiedSince("202401010000")

    intent = resolve_account(institute_login="jdoe", vsc_id="vsc40075")
    assert intent == FetchByVscId("account", "vsc40075")


def test_modified_wins_over_vscid():
    intent = resolve_account(modified_since="202401010000", vsc_id="vsc40075")
    assert intent == FetchAccountsModifiedSince("202401010000")


def test_vscid_alone():
    assert resolve_account(vsc_id="vsc40075") == FetchByVscId("account", "vsc40075")


def test_account_without_filters_fails():
    with pytest.raises(MissingRequiredArgument):
        resolve_account()


def test_institute_alone_is_not_enough():
    with pytest.raises(MissingRequiredArgument):
        resolve_account(institute="kul")


def test_vo_resolution():
    assert resolve_vo(fetch_all=True, vsc_id="gvo00001") == FetchAllVOs()
    assert resolve_vo(vsc_id="gvo00001") == FetchByVscId("vo", "gvo00001")
    with pytest.raises(MissingRequiredArgument):
        resolve_vo()


def test_vo_ignores_account_only_filters():
    intent = resolve("vo", institute="kul", modified_since="202401010000", vsc_id="gvo00001")
    assert intent == FetchByVscId("vo", "gvo00001")


def test_unknown_resource():
    with pytest.raises(ValueError):
        resolve("group", vsc_id="x")


ACCOUNT_FILTERS = {
    "fetch_all": True,
    "institute": "kul",
    "institute_login": "jdoe",
    "modified_since": "202401010000",
    "vsc_id": "vsc40075",
}


def _expected(given):
    if "fetch_all" in given:
        return FetchAllAccounts()
    if "institute" in given and "institute_login" in given:
        return FetchAccountByInstituteLogin("kul", "jdoe")
    if "modified_since" in given:
        return FetchAccountsModifiedSince("202401010000")
    if "vsc_id" in given:
        return FetchByVscId("account", "vsc40075")
    return None


@pytest.mark.parametrize(
    "given",
    [
        combo
        for size in range(len(ACCOUNT_FILTERS) + 1)
        for combo in itertools.combinations(ACCOUNT_FILTERS, size)
    ],
)
def test_every_filter_combination_resolves_to_one_intent(given):
    filters = {name: ACCOUNT_FILTERS[name] for name in given}
    expected = _expected(given)
    if expected is None:
        with pytest.raises(MissingRequiredArgument):
            resolve_account(**filters)
    else:
        assert resolve_account(**filters) == expected
        assert resolve_account(**filters) == resolve_account(**filters)
