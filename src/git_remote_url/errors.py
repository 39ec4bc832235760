class GitURLError(ValueError):
    """Base class for every malformed repository address."""

    def __init__(self, url: str, reason: str):
        super().__init__(f'parse "{url}": {reason}')
        self.url = url
        self.reason = reason


class SchemeOnlyError(GitURLError):
    def __init__(self, url: str):
        super().__init__(url, "malformed URL contains scheme only")


class MissingDelimiterError(GitURLError):
    def __init__(self, url: str):
        super().__init__(
            url, "no colon (:) in URL to delimit host:path boundary"
        )


class InvalidSchemeError(GitURLError):
    def __init__(self, url: str, character: str):
        super().__init__(url, f"invalid character {character!r} in scheme")
        self.character = character


class URLSyntaxError(GitURLError):
    pass
