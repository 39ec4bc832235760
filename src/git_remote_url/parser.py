from .errors import GitURLError, MissingDelimiterError
from .parsed_url import ParsedURL
from .uri import scan_scheme, split_uri


def parse(raw: str) -> ParsedURL:
    """Parse a Git remote address into a ParsedURL.

    Scheme-qualified URIs are parsed as they are. SCP-like addresses
    (`[user@]host:path`, `[user@][::1]:path`, `host:~user/path`) are
    rewritten into `ssh://` form first and then parsed the same way.
    """
    try:
        return split_uri(raw)
    except GitURLError:
        if not is_scp_like(raw):
            raise

    return split_uri(rewrite_scp_like(raw))


def is_scp_like(raw: str) -> bool:
    if ":" not in raw:
        return False
    try:
        scan_scheme(raw)
    except GitURLError:
        return True
    return False


def find_delimiter(raw: str) -> int:
    # Colons inside an IPv6 literal never delimit host from path.
    bracket = raw.find("]")
    if bracket < 0:
        return raw.find(":")
    return raw.find(":", bracket)


def rewrite_scp_like(raw: str) -> str:
    """Turn `user@host:path` into `ssh://user@host/path`.

    The delimiter colon becomes the slash introducing the path, unless the
    path is already absolute, in which case the colon is simply dropped.
    """
    delimiter = find_delimiter(raw)
    if delimiter < 0:
        raise MissingDelimiterError(raw)
    path = raw[delimiter + 1 :].removeprefix("/")
    return f"ssh://{raw[:delimiter]}/{path}"
