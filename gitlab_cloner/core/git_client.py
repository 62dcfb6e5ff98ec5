"""Small helpers for running Git commands against local mirrors."""

from __future__ import annotations

import logging
import subprocess

from .constants import GIT_REMOTE

logger = logging.getLogger(__name__)


def ssh_clone_url(host: str, group: str, name: str) -> str:
    """host, group, name -> git@host:group/name.git"""
    return f"git@{host}:{group}/{name}.git"


class GitClient:
    # ---------- process helpers ----------
    @staticmethod
    def _run(cmd: list[str], cwd: str | None = None) -> tuple[bool, str | None]:
        logger.debug("Running %s in %s", " ".join(cmd), cwd or ".")
        try:
            subprocess.check_call(cmd, cwd=cwd)
            return True, None
        except subprocess.CalledProcessError as e:
            return False, f"{e}"
        except OSError as e:
            # git missing, or cwd vanished
            return False, f"{e}"

    # ---------- clone / fetch ----------
    def clone(self, url: str, cwd: str) -> tuple[bool, str | None]:
        return self._run(["git", "clone", url], cwd=cwd)

    def fetch(self, repo_dir: str) -> tuple[bool, str | None]:
        return self._run(["git", "fetch", GIT_REMOTE], cwd=repo_dir)
