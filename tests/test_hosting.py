import pytest

from git_remote_url.parsed_url import ParsedURL
from git_remote_url.parser import parse
from git_remote_url.hosting import describe, project_namespace


@pytest.mark.parametrize(
    "raw",
    [
        "git@github.com:owner/project.git",
        "https://github.com/owner/project.git",
    ],
)
def test_describe_github(raw):
    remote_info = describe(raw, parse(raw))
    assert remote_info.platform == "github"
    assert remote_info.owner == "owner"
    assert remote_info.repo == "project"
    assert remote_info.namespace == "owner/project"


def test_describe_gitlab():
    raw = "git@gitlab.com:group/project.git"
    remote_info = describe(raw, parse(raw))
    assert remote_info.platform == "gitlab"
    assert remote_info.namespace == "group/project"


@pytest.mark.parametrize(
    "raw",
    [
        "git@bitbucket.org:owner/project.git",
        "https://bitbucket.org/owner/project.git",
    ],
)
def test_describe_bitbucket(raw):
    remote_info = describe(raw, parse(raw))
    assert remote_info.platform == "bitbucket"
    assert remote_info.namespace == "owner/project"


def test_describe_generic_host():
    raw = "user@host.xz:path/to/project.git"
    remote_info = describe(raw, parse(raw))
    assert remote_info.namespace == "path/to/project"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/owner/project.git", "owner/project"),
        ("/owner/project.git/", "owner/project"),
        ("/group/subgroup/project", "group/subgroup/project"),
        ("/~user/project.git", "~user/project"),
        ("", ""),
    ],
)
def test_project_namespace(path, expected):
    url = ParsedURL(scheme="ssh", host="host.xz", path=path)
    assert project_namespace(url) == expected
