"""Module holding constants used across gitlab-cloner."""

APP_NAME = "gitlab-cloner"
APP_VERSION = "1.0"

DEFAULT_HOST = "gitlab.com"
DEFAULT_TARGET_DIRECTORY = "."
API_PATH = "/api/v4"
USER_AGENT = f"{APP_NAME}/{APP_VERSION}"
HTTP_TIMEOUT_SEC = 30

# The listing has always started at page 0; GitLab itself is 1-indexed.
FIRST_PAGE = 0
PER_PAGE = 100

GIT_REMOTE = "origin"
