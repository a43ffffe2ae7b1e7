"""Record shapes returned by the VSC account page API."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, RootModel


UInt32 = Annotated[int, Field(ge=0, le=2**32 - 1)]
UInt64 = Annotated[int, Field(ge=0, le=2**64 - 1)]


class Status(str, Enum):
    active = "active"
    inactive = "inactive"
    modified = "modified"
    new = "new"
    forceinactive = "forceinactive"
    forceactive = "forceactive"


class Record(BaseModel):
    # Snapshots are never mutated; unknown upstream keys are dropped.
    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True, extra="ignore")


class Institute(Record):
    name: str


class Person(Record):
    gecos: str
    institute: Institute
    institute_login: str
    realeppn: str


class Account(Record):
    vsc_id: str
    status: Status
    is_active: bool = Field(alias="isactive")
    force_active: bool
    expiry_date: Optional[date] = None
    grace_until: Optional[date] = None
    vsc_id_number: UInt64
    home_directory: str
    data_directory: str
    scratch_directory: str
    login_shell: str
    broken: bool
    email: str
    research_field: List[str]
    create_timestamp: AwareDatetime
    person: Person
    home_on_scratch: bool


class VirtualOrganisation(Record):
    vsc_id: str
    status: Status
    vsc_id_number: UInt64
    institute: Institute
    fairshare: UInt32
    data_path: str
    scratch_path: str
    description: str
    members: List[str]
    moderators: List[str]


class Accounts(RootModel[List[Account]]):
    model_config = ConfigDict(strict=True)

    def __iter__(self):
        return iter(self.root)

    def __len__(self):
        return len(self.root)

    def __getitem__(self, index):
        return self.root[index]


class VirtualOrganisations(RootModel[List[VirtualOrganisation]]):
    model_config = ConfigDict(strict=True)

    def __iter__(self):
        return iter(self.root)

    def __len__(self):
        return len(self.root)

    def __getitem__(self, index):
        return self.root[index]
