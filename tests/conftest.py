"""Shared test fixtures for the gitlab-cloner test suite."""

import json
import logging
from urllib.parse import parse_qs, urlparse

import pytest


class FakeResponse:
    def __init__(self, body: bytes):
        self._body = body

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeGitLab:
    """Stands in for urlopen; serves canned pages keyed by page index."""

    def __init__(self, pages):
        self.pages = pages
        self.requests = []

    def __call__(self, req, timeout=None):
        url = req.full_url
        self.requests.append(url)
        page = int(parse_qs(urlparse(url).query)["page"][0])
        payload = self.pages.get(page, [])
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, bytes):
            return FakeResponse(payload)
        return FakeResponse(json.dumps(payload).encode("utf-8"))

    @property
    def pages_requested(self):
        return [int(parse_qs(urlparse(u).query)["page"][0]) for u in self.requests]


class FakeGit:
    """RepoSync double that records calls and fails on request."""

    def __init__(self, fail_on=None):
        self.fail_on = set(fail_on or [])
        self.calls = []

    def clone(self, url, cwd):
        self.calls.append(("clone", url, cwd))
        name = url.rsplit("/", 1)[-1][: -len(".git")]
        if name in self.fail_on:
            return False, "exit status 128"
        return True, None

    def fetch(self, repo_dir):
        self.calls.append(("fetch", repo_dir))
        if repo_dir.rstrip("/").rsplit("/", 1)[-1] in self.fail_on:
            return False, "exit status 1"
        return True, None


@pytest.fixture
def fake_gitlab(monkeypatch):
    """Install a FakeGitLab; call with a {page: payload} mapping."""

    def install(pages):
        fake = FakeGitLab(pages)
        monkeypatch.setattr("gitlab_cloner.core.gitlab_client.urllib.request.urlopen", fake)
        return fake

    return install


@pytest.fixture
def fake_git():
    return FakeGit


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("GITLAB_HOST", "GITLAB_TOKEN", "GITLAB_TARGET_DIRECTORY", "GITLAB_FIRST_PAGE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    logger = logging.getLogger("gitlab_cloner")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
