"""Registry data models — index info and credentials."""

from __future__ import annotations

from dataclasses import dataclass

OFFICIAL_INDEX_NAME = "docker.io"


@dataclass(frozen=True)
class IndexInfo:
    """The registry index a search term targets."""

    name: str
    remote_term: str
    official: bool = False


@dataclass(frozen=True)
class Credential:
    """Username/password pair sent to an index; empty means anonymous."""

    username: str = ""
    password: str = ""

    @classmethod
    def anonymous(cls) -> Credential:
        return cls()

    @property
    def is_anonymous(self) -> bool:
        return not self.username

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, password='***')"
