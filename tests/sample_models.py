"""Sample value types used across the test suite."""

import subprocess
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    ADMIN = "admin"
    MEMBER = "member"


class Record(BaseModel):
    username: str
    age: int


class Account(BaseModel):
    username: str
    balance: float = 0.0


class Profile(BaseModel):
    name: str
    role: Role = Role.MEMBER
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    nickname: str | None = None


class AliasedRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(alias="userName")


@dataclass
class Point:
    x: int
    y: int
    labels: list[str] = field(default_factory=list)


class Contact(BaseModel):
    name: str
    nickname: str | None
    note: str | None = "none yet"


class Team(BaseModel):
    lead: Contact
    members: list[Contact]
    deputies: dict[str, Contact] = Field(default_factory=dict)


@dataclass
class Waypoint:
    label: str
    altitude: float | None


class Exploit:
    """Pickles to a call of subprocess.call."""

    def __reduce__(self):
        return (subprocess.call, (["echo", "pwned"],))
