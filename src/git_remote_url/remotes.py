from git import InvalidGitRepositoryError, NoSuchPathError
from git.repo import Repo

from .parsed_url import ParsedURL
from .parser import parse


def open_repo(path: str = ".") -> Repo:
    try:
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as error:
        raise RuntimeError("Not a Git repository") from error


def remote_urls(repo: Repo) -> dict[str, list[str]]:
    return {remote.name: list(remote.urls) for remote in repo.remotes}


def parse_remotes(repo: Repo) -> dict[str, list[ParsedURL]]:
    return {
        name: [parse(url) for url in urls]
        for name, urls in remote_urls(repo).items()
    }
