"""Pytest configuration and fixtures for git_puller tests."""

import logging
import tempfile
from pathlib import Path

import pytest
from git import Repo


def _configure_user(repo: Repo) -> None:
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_logger():
    """A logger that propagates, so caplog can see what was logged."""
    logger = logging.getLogger("git_puller_tests")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def upstream_repo(temp_dir: Path):
    """Create a repository with one commit to act as the remote."""
    repo_path = temp_dir / "upstream"
    repo_path.mkdir()

    repo = Repo.init(repo_path)
    _configure_user(repo)

    readme = repo_path / "README.md"
    readme.write_text("# Upstream Repo")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    yield repo_path


@pytest.fixture
def make_clone(temp_dir: Path, upstream_repo: Path):
    """Factory cloning the upstream repo to a path below the workspace."""
    workspace = temp_dir / "workspace"

    def _make_clone(relative: str) -> Path:
        clone_path = workspace / relative
        clone_path.parent.mkdir(parents=True, exist_ok=True)
        Repo.clone_from(str(upstream_repo), clone_path)
        return clone_path

    return _make_clone


@pytest.fixture
def make_broken_repo(temp_dir: Path):
    """Factory creating a repository whose remote points nowhere."""
    workspace = temp_dir / "workspace"

    def _make_broken_repo(relative: str) -> Path:
        repo_path = workspace / relative
        repo_path.mkdir(parents=True)
        repo = Repo.init(repo_path)
        repo.create_remote("origin", str(temp_dir / "does-not-exist"))
        return repo_path

    return _make_broken_repo


@pytest.fixture
def workspace(temp_dir: Path) -> Path:
    """Directory the clone factories populate."""
    path = temp_dir / "workspace"
    path.mkdir(exist_ok=True)
    return path
