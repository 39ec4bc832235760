import re
from string import ascii_letters, digits
from typing import Optional
from urllib.parse import urlsplit

from .errors import InvalidSchemeError, SchemeOnlyError, URLSyntaxError
from .parsed_url import ParsedURL


SCHEME_TRAILING_CHARS = ascii_letters + digits + "+-."

# RFC 3986 reg-name: unreserved / pct-encoded / sub-delims
HOST_REGEX = re.compile(r"^[A-Za-z0-9\-._~%!$&'()*+,;=]*$")
IP_LITERAL_REGEX = re.compile(r"^\[[0-9A-Fa-f:.]+(?:%25[A-Za-z0-9\-._~%]+)?\]$")
PORT_REGEX = re.compile(r"^[0-9]*$")
CONTROL_CHARACTERS_REGEX = re.compile(r"[\x00-\x1f\x7f]")


def scan_scheme(raw: str) -> tuple[str, str]:
    """Split `raw` into its scheme token and the remainder after `scheme://`.

    Raises InvalidSchemeError when a character that cannot belong to a scheme
    shows up before the first colon, and URLSyntaxError when there is no
    `scheme://` prefix at all.
    """
    for index, character in enumerate(raw):
        if character in ascii_letters:
            continue
        if character in SCHEME_TRAILING_CHARS:
            if index == 0:
                raise InvalidSchemeError(raw, character)
            continue
        if character == ":":
            if index > 0 and raw[index + 1 : index + 3] == "//":
                return raw[:index], raw[index + 3 :]
            break
        raise InvalidSchemeError(raw, character)
    raise URLSyntaxError(raw, "missing protocol scheme")


def split_uri(raw: str) -> ParsedURL:
    """Parse a scheme-qualified URI, keeping every component byte-for-byte."""
    match = CONTROL_CHARACTERS_REGEX.search(raw)
    if match:
        raise URLSyntaxError(raw, f"invalid control character {match.group()!r} in URL")

    scheme, remainder = scan_scheme(raw)
    if not remainder:
        raise SchemeOnlyError(raw)

    try:
        parts = urlsplit("//" + remainder)
    except ValueError as error:
        raise URLSyntaxError(raw, str(error)) from error

    user, password, hostport = split_userinfo(parts.netloc)
    host, port = split_hostport(raw, hostport)

    before_fragment, hash_sign, _ = remainder.partition("#")
    return ParsedURL(
        scheme=scheme,
        host=host,
        path=parts.path,
        user=user,
        password=password,
        port=port,
        raw_query=parts.query if "?" in before_fragment else None,
        fragment=parts.fragment if hash_sign else None,
    )


def split_userinfo(netloc: str) -> tuple[Optional[str], Optional[str], str]:
    userinfo, at_sign, hostport = netloc.rpartition("@")
    if not at_sign:
        return None, None, netloc
    user, colon, password = userinfo.partition(":")
    return user, password if colon else None, hostport


def split_hostport(raw: str, hostport: str) -> tuple[str, Optional[str]]:
    if hostport.startswith("["):
        closing = hostport.find("]")
        if closing < 0:
            raise URLSyntaxError(raw, "missing ']' in host")
        host, trailer = hostport[: closing + 1], hostport[closing + 1 :]
        if not IP_LITERAL_REGEX.match(host):
            raise URLSyntaxError(raw, f"invalid IPv6 host {host!r}")
        if trailer and not trailer.startswith(":"):
            raise URLSyntaxError(raw, f"invalid port {trailer!r} after host")
        port = trailer[1:] if trailer else None
    else:
        host, colon, port = hostport.partition(":")
        if not colon:
            port = None
        if not HOST_REGEX.match(host):
            raise URLSyntaxError(raw, f"invalid character in host name {host!r}")

    if port is not None and not PORT_REGEX.match(port):
        raise URLSyntaxError(raw, f"invalid port {':' + port!r} after host")
    if port and int(port) > 65535:
        raise URLSyntaxError(raw, f"port {port} out of range")
    return host, port or None
