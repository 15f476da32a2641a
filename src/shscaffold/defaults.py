"""Resolve default values the user did not pass on the command line."""

import getpass
import os

# Config files are read without the git binary; keep a missing executable from
# failing the import.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from git import GitConfigParser, InvalidGitRepositoryError, NoSuchPathError, Repo  # noqa: E402
from git.config import get_config_path  # noqa: E402

_USER_CONFIG_LEVELS = ("system", "user", "global")


def git_user_name(cwd=".") -> str:
    """Return git's user.name as seen from cwd, or "" when unset.

    Inside a repository the repository config wins over the user and system
    files, matching ``git config user.name``.
    """
    try:
        reader = Repo(cwd, search_parent_directories=True).config_reader()
    except (InvalidGitRepositoryError, NoSuchPathError):
        reader = GitConfigParser(
            [get_config_path(level) for level in _USER_CONFIG_LEVELS],
            read_only=True,
        )
    value = reader.get_value("user", "name", default="")
    return str(value).strip()


def account_name() -> str:
    """Return the login name of the invoking user, or "" when it cannot be determined."""
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        return ""


def resolve_author(author=None, cwd=".") -> str:
    if author:
        return author
    return git_user_name(cwd) or account_name()
