from dataclasses import dataclass
from typing import Optional

from giturlparse import parse as parse_git_url

from .parsed_url import ParsedURL


GENERIC_PLATFORMS = ("", "base")


@dataclass(frozen=True)
class RemoteInfo:
    platform: Optional[str]
    owner: Optional[str]
    repo: Optional[str]
    namespace: str


def describe(address: str, url: ParsedURL) -> RemoteInfo:
    # giturlparse knows the platforms by their original, unrewritten address.
    git_url = parse_git_url(address)
    platform = getattr(git_url, "platform", None) or ""
    if platform in GENERIC_PLATFORMS:
        return RemoteInfo(None, None, None, project_namespace(url))

    return RemoteInfo(
        platform=platform,
        owner=getattr(git_url, "owner", None) or None,
        repo=getattr(git_url, "repo", None) or None,
        namespace=project_namespace(url),
    )


def project_namespace(url: ParsedURL) -> str:
    return url.path.removesuffix("/").removesuffix(".git").removeprefix("/")
