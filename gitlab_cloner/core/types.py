"""Small types shared by the lister and the synchronizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class RepoSync(Protocol):
    """Clone/fetch capability the synchronizer drives.

    Both operations return ``(ok, error)``; ``error`` is ``None`` on success.
    """

    def clone(self, url: str, cwd: str) -> tuple[bool, str | None]: ...

    def fetch(self, repo_dir: str) -> tuple[bool, str | None]: ...


@dataclass
class SyncResult:
    cloned: list[str] = field(default_factory=list)
    fetched: list[str] = field(default_factory=list)
    processed: list[str] = field(default_factory=list)
    failed: str | None = None

    @property
    def ok(self) -> bool:
        return self.failed is None

