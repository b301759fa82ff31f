"""Shared test fixtures."""

import shutil
import subprocess
from pathlib import Path

import pytest

from prchain.models.state import SessionConfig

GIT_AVAILABLE = shutil.which("git") is not None


class FakeGit:
    """Canned git results keyed by argument prefix; the longest matching prefix wins."""

    def __init__(self):
        self.responses: dict[tuple[str, ...], subprocess.CompletedProcess] = {}
        self.calls: list[list[str]] = []

    def respond(self, *prefix: str, stdout: str = "", returncode: int = 0, stderr: str = ""):
        self.responses[prefix] = subprocess.CompletedProcess(
            ["git", *prefix], returncode, stdout=stdout, stderr=stderr
        )

    def fail(self, *prefix: str, stderr: str = "fatal: error"):
        self.respond(*prefix, returncode=128, stderr=stderr)

    def run(self, cmd, **kwargs):
        args = list(cmd[1:])
        self.calls.append(args)
        for prefix in sorted(self.responses, key=len, reverse=True):
            if tuple(args[: len(prefix)]) == prefix:
                return self.responses[prefix]
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    def called(self, *prefix: str) -> bool:
        return any(tuple(c[: len(prefix)]) == prefix for c in self.calls)


@pytest.fixture
def fake_git(mocker):
    """Route every git subprocess call through a FakeGit."""
    fake = FakeGit()
    mocker.patch("prchain.git.runner.subprocess.run", side_effect=fake.run)
    return fake


@pytest.fixture
def mock_subprocess(mocker):
    """Mock subprocess.run returning success by default."""
    mock = mocker.patch("prchain.git.runner.subprocess.run")
    mock.return_value = subprocess.CompletedProcess([], 0, stdout="", stderr="")
    return mock


@pytest.fixture(autouse=True)
def reset_git_timeout():
    import prchain.git.runner as runner

    runner._timeout = 30.0
    yield
    runner._timeout = 30.0


@pytest.fixture
def reset_config_cache():
    import prchain.config.settings as settings

    settings._config = None
    settings._loaded_sources = []
    yield
    settings._config = None
    settings._loaded_sources = []


@pytest.fixture
def session_config():
    return SessionConfig(threshold=5, increment=5, cooldown=10.0)


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True
    )
    return result.stdout


@pytest.fixture
def git():
    """Run a real git command in a repository and return stdout."""
    return _git


@pytest.fixture
def git_repo(tmp_path):
    """Real repository named 'proj' on master with one committed 10-line file."""
    if not GIT_AVAILABLE:
        pytest.skip("git not available")
    repo = tmp_path / "proj"
    repo.mkdir()
    _git(repo, "init", "-q")
    _git(repo, "symbolic-ref", "HEAD", "refs/heads/master")
    _git(repo, "config", "user.name", "Test User")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "commit.gpgsign", "false")
    (repo / "file.txt").write_text("".join(f"line {i}\n" for i in range(10)))
    _git(repo, "add", "file.txt")
    _git(repo, "commit", "-q", "-m", "initial")
    return repo


@pytest.fixture
def bare_remote(tmp_path, git_repo):
    """Bare repository registered as 'origin' of git_repo."""
    remote = tmp_path / "remote.git"
    _git(tmp_path, "init", "-q", "--bare", str(remote))
    _git(git_repo, "remote", "add", "origin", str(remote))
    return remote
