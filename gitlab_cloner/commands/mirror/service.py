"""Services for the mirror command: list a group, then clone or fetch each project."""

from __future__ import annotations

import logging
import os
import time

from ...core.git_client import GitClient, ssh_clone_url
from ...core.gitlab_client import GitLabClient, GitLabError
from ...core.types import RepoSync, SyncResult

logger = logging.getLogger(__name__)


def sync_projects(
    host: str,
    group: str,
    target_directory: str,
    projects: list[str],
    git: RepoSync,
) -> SyncResult:
    """Clone missing projects and fetch existing ones, in order.

    Stops at the first clone or fetch that fails.
    """
    result = SyncResult()
    try:
        os.makedirs(target_directory, exist_ok=True)
    except OSError as e:
        logger.error("Failed to create %s: %s", target_directory, e)
        result.failed = target_directory
        return result

    for name in projects:
        repo_dir = os.path.join(target_directory, name)
        result.processed.append(name)

        if not os.path.exists(repo_dir):
            logger.info("Cloning %s", name)
            ok, err = git.clone(ssh_clone_url(host, group, name), target_directory)
            if not ok:
                logger.error("Failed to clone %s: %s", name, err)
                result.failed = name
                break
            result.cloned.append(name)
        else:
            logger.info("Fetching %s", name)
            ok, err = git.fetch(repo_dir)
            if not ok:
                logger.error("Failed to fetch %s: %s", name, err)
                result.failed = name
                break
            result.fetched.append(name)

    return result


def mirror_group(
    *,
    host: str,
    group: str,
    token: str,
    target_directory: str,
    first_page: int,
    git: RepoSync | None = None,
) -> bool:
    """Mirror every project of ``group`` into ``target_directory``.

    Returns True when listing and every clone/fetch succeeded.
    """
    client = GitLabClient(host, token, first_page=first_page)
    try:
        projects = client.list_group_projects(group)
    except GitLabError as e:
        logger.error("Failed to list projects: %s", e)
        return False

    logger.info("Found %d projects in %s. Mirroring to '%s'...", len(projects), group, target_directory)
    start = time.time()
    result = sync_projects(host, group, target_directory, projects, git or GitClient())
    secs = time.time() - start
    logger.info(
        "Done. cloned=%d, fetched=%d, skipped=%d in %.1fs.",
        len(result.cloned),
        len(result.fetched),
        len(projects) - len(result.processed),
        secs,
    )
    return result.ok
