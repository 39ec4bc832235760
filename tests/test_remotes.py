from pathlib import Path

import pytest
from git.repo import Repo

from git_remote_url.remotes import open_repo, parse_remotes, remote_urls


@pytest.fixture
def repo(tmp_path: Path) -> Repo:
    repo = Repo.init(tmp_path)
    repo.create_remote("origin", "git@github.com:owner/project.git")
    repo.create_remote("mirror", "https://example.com/mirror/project.git")
    return repo


def test_remote_urls(repo: Repo):
    assert remote_urls(repo) == {
        "origin": ["git@github.com:owner/project.git"],
        "mirror": ["https://example.com/mirror/project.git"],
    }


def test_parse_remotes(repo: Repo):
    remotes = parse_remotes(repo)

    (origin,) = remotes["origin"]
    assert origin.scheme == "ssh"
    assert origin.user == "git"
    assert origin.host == "github.com"
    assert origin.path == "/owner/project.git"

    (mirror,) = remotes["mirror"]
    assert mirror.scheme == "https"
    assert mirror.path == "/mirror/project.git"


def test_open_repo_searches_parent_directories(repo: Repo, tmp_path: Path):
    nested = tmp_path / "nested" / "dir"
    nested.mkdir(parents=True)
    assert Path(open_repo(str(nested)).working_dir).resolve() == Path(repo.working_dir).resolve()


def test_open_repo_missing_path(tmp_path: Path):
    with pytest.raises(RuntimeError, match="Not a Git repository"):
        open_repo(str(tmp_path / "missing"))
