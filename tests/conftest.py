import json
from datetime import date, datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from vsctools.config import ApiSettings
from vsctools.core.models import Account, Institute, Person, Status, VirtualOrganisation


@pytest.fixture
def settings():
    return ApiSettings(api_url="https://account.example.org/django/", token="s3cr3t-token", timeout=5.0)


@pytest.fixture
def person():
    return Person(
        gecos="mygecos",
        institute=Institute(name="myinst"),
        institute_login="me",
        realeppn="myeppn",
    )


@pytest.fixture
def account(person):
    return Account(
        vsc_id="vsc40075",
        status=Status.active,
        is_active=True,
        force_active=True,
        expiry_date=None,
        grace_until=date(2030, 6, 30),
        vsc_id_number=2678372,
        home_directory="/home/me",
        data_directory="/data/me",
        scratch_directory="/scratch/me",
        login_shell="fish",
        broken=False,
        email="me@myhome.org",
        research_field=["science", "bio"],
        create_timestamp=datetime(1970, 1, 1, 1, 1, 1, tzinfo=timezone(timedelta(hours=1))),
        person=person,
        home_on_scratch=False,
    )


@pytest.fixture
def vo():
    return VirtualOrganisation(
        vsc_id="gvo00001",
        status=Status.active,
        vsc_id_number=2900001,
        institute=Institute(name="gent"),
        fairshare=100,
        data_path="/data/gvo00001",
        scratch_path="/scratch/gvo00001",
        description="A research group",
        members=["vsc40075", "vsc40076"],
        moderators=["vsc40075"],
    )


@pytest.fixture
def account_payload():
    """An account as the API sends it, including a field the client does not model."""
    return {
        "vsc_id": "vsc40075",
        "status": "active",
        "isactive": True,
        "force_active": False,
        "expiry_date": None,
        "grace_until": None,
        "vsc_id_number": 2540075,
        "home_directory": "/user/home/gent/vsc400/vsc40075",
        "data_directory": "/user/data/gent/vsc400/vsc40075",
        "scratch_directory": "/user/scratch/gent/vsc400/vsc40075",
        "login_shell": "/bin/bash",
        "broken": False,
        "email": "jdoe@example.org",
        "research_field": ["Physics"],
        "create_timestamp": "2014-04-23T09:11:22+02:00",
        "person": {
            "gecos": "John Doe",
            "institute": {"name": "gent"},
            "institute_login": "jdoe",
            "realeppn": "jdoe@ugent.be",
        },
        "home_on_scratch": False,
        "last_login": "2024-01-01",
    }


@pytest.fixture
def vo_payload():
    return {
        "vsc_id": "gvo00001",
        "status": "active",
        "vsc_id_number": 2900001,
        "institute": {"name": "gent"},
        "fairshare": 100,
        "data_path": "/data/gent/gvo000/gvo00001",
        "scratch_path": "/scratch/gent/gvo000/gvo00001",
        "description": "A research group",
        "members": ["vsc40075", "vsc40076"],
        "moderators": ["vsc40075"],
    }


def make_response(status_code=200, body=None):
    """A stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    content = json.dumps(body).encode() if body is not None else b""
    response.content = content
    response.text = content.decode()
    return response


@pytest.fixture
def response_factory():
    return make_response
