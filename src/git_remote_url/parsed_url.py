from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ParsedURL:
    scheme: str
    host: str
    path: str
    user: Optional[str] = None
    password: Optional[str] = None
    port: Optional[str] = None
    raw_query: Optional[str] = None
    fragment: Optional[str] = None

    @property
    def userinfo(self) -> Optional[str]:
        if self.user is None:
            return None
        if self.password is None:
            return self.user
        return f"{self.user}:{self.password}"

    @property
    def hostname(self) -> str:
        # IPv6 literals are stored bracketed, as they appear in the address.
        if self.host.startswith("[") and self.host.endswith("]"):
            return self.host[1:-1]
        return self.host

    @property
    def port_number(self) -> Optional[int]:
        return int(self.port) if self.port else None

    @property
    def netloc(self) -> str:
        netloc = self.host
        if self.port is not None:
            netloc = f"{netloc}:{self.port}"
        if self.userinfo is not None:
            netloc = f"{self.userinfo}@{netloc}"
        return netloc

    @property
    def is_ssh(self) -> bool:
        return self.scheme.lower() in ("ssh", "git+ssh", "ssh+git")

    def geturl(self) -> str:
        url = f"{self.scheme}://{self.netloc}{self.path}"
        if self.raw_query is not None:
            url = f"{url}?{self.raw_query}"
        if self.fragment is not None:
            url = f"{url}#{self.fragment}"
        return url

    def as_dict(self) -> dict[str, Optional[str]]:
        return {
            "scheme": self.scheme,
            "user": self.user,
            "password": self.password,
            "host": self.host,
            "port": self.port,
            "path": self.path,
            "raw_query": self.raw_query,
            "fragment": self.fragment,
        }

    def __str__(self) -> str:
        return self.geturl()
