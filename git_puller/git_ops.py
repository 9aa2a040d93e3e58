"""
Git operations for the puller.

Runs the two git commands each repository needs, `remote -v` to find the
remote URL and `pull` to update the working tree, through GitPython's
command runner. Failures never raise: they are logged and turned into a
status for the summary table.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from git.cmd import Git
from git.exc import GitCommandNotFound

from .logger import get_logger
from .store import RepoStatus


@dataclass
class CommandResult:
    """Exit status and decoded output of one git invocation."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def error_line(self) -> str:
        """Last non-empty line of stderr, or a generic message."""
        lines = [line.strip() for line in self.stderr.splitlines() if line.strip()]
        if lines:
            return lines[-1]
        return f"exit status {self.returncode}"


@dataclass
class PullOutcome:
    """Result of pulling a single repository."""

    status: RepoStatus
    detail: str = ""

    @property
    def success(self) -> bool:
        return self.status == RepoStatus.SUCCESS


def run_git(path: Path, *args: str, git_executable: str = "git") -> CommandResult:
    """
    Run `git -C <path> <args>` and capture its output.

    Raises:
        GitCommandNotFound: If the git executable does not exist.
        OSError: If the git executable exists but cannot be run.
    """
    status, stdout, stderr = Git().execute(
        [git_executable, "-C", str(path), *args],
        with_extended_output=True,
        with_exceptions=False,
    )
    return CommandResult(returncode=status, stdout=stdout, stderr=stderr)


def parse_remote_output(output: str) -> str | None:
    """
    Extract the remote URL from `git remote -v` output.

    Only the first line is considered. It must split into exactly three
    whitespace-separated fields (name, URL, direction), e.g.
    ``origin  git@github.com:org/repo.git (fetch)``.

    Returns:
        The URL field, or None if the output does not have that shape.
    """
    lines = output.splitlines()
    if not lines:
        return None
    fields = lines[0].split()
    if len(fields) != 3:
        return None
    return fields[1]


def probe_remote(
    path: Path,
    git_executable: str = "git",
    logger: logging.Logger | None = None,
) -> tuple[str, RepoStatus]:
    """
    Find the remote URL of the repository at path.

    Returns:
        (url, PENDING) on success, ("", UNKNOWN) if the command failed or
        its output could not be parsed.
    """
    logger = logger or get_logger()
    try:
        result = run_git(path, "remote", "-v", git_executable=git_executable)
    except (GitCommandNotFound, OSError) as e:
        logger.error(f"Error executing git remote: {e}")
        return "", RepoStatus.UNKNOWN

    if not result.ok:
        logger.error(f"Error executing git remote in {path}: {result.error_line}")
        return "", RepoStatus.UNKNOWN

    remote = parse_remote_output(result.stdout)
    if remote is None:
        logger.warning(f"Could not determine remote for {path}")
        return "", RepoStatus.UNKNOWN

    logger.debug(f"Remote for {path}: {remote}")
    return remote, RepoStatus.PENDING


def pull_repository(
    path: Path,
    git_executable: str = "git",
    logger: logging.Logger | None = None,
) -> PullOutcome:
    """Run a single `git pull` for the repository at path."""
    logger = logger or get_logger()
    try:
        result = run_git(path, "pull", git_executable=git_executable)
    except (GitCommandNotFound, OSError) as e:
        logger.error(f"Error executing git pull: {e}")
        return PullOutcome(status=RepoStatus.FAILED, detail=str(e))

    if not result.ok:
        logger.error(f"Error executing git pull in {path}: {result.error_line}")
        return PullOutcome(status=RepoStatus.FAILED, detail=result.error_line)

    logger.debug(f"git pull in {path}: {result.stdout.strip() or 'no output'}")
    return PullOutcome(status=RepoStatus.SUCCESS)
