"""
BuiltURL - The one URL type every rule returns.

Parts are stored decoded and only percent-encoded when the URL is
serialized with str():

  path      → percent-encoded, "/" kept literal
  query     → application/x-www-form-urlencoded ("lol donkey" → "lol+donkey",
              "lol/donkey" → "lol%2Fdonkey")
  fragment  → percent-encoded, client-side route characters kept literal

Builders never concatenate encoded strings themselves, so every URL leaving
the resolver is encoded the same way.
"""

import re
from dataclasses import dataclass, replace
from urllib.parse import parse_qsl, quote, quote_plus, unquote, urlencode, urlsplit

from shortcuts.errors import UrlBuildError

PATH_SAFE = "/:@!$&'()*+,;="
FRAGMENT_SAFE = PATH_SAFE + "?#"

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_HOST_LABEL = re.compile(r"^[a-z0-9_]([a-z0-9_-]*[a-z0-9_])?$")


@dataclass(frozen=True)
class BuiltURL:
    """An absolute http(s) URL with an ordered multimap of query parameters."""
    host: str
    path: str = "/"
    query: tuple[tuple[str, str], ...] = ()
    fragment: str = ""
    scheme: str = "https"

    def __post_init__(self):
        if self.scheme not in ("http", "https"):
            raise UrlBuildError(self.scheme, "unsupported scheme")
        path = self.path if self.path.startswith("/") else "/" + self.path
        for part in (path, self.fragment):
            if _CONTROL_CHARS.search(part):
                raise UrlBuildError(part, "control characters are not allowed")
        object.__setattr__(self, "host", normalize_host(self.host))
        object.__setattr__(self, "path", path)
        object.__setattr__(self, "query", tuple((str(k), str(v)) for k, v in self.query))

    @classmethod
    def parse(cls, url: str) -> "BuiltURL":
        """Parse an absolute URL literal (used for the hardcoded tables)."""
        parts = urlsplit(url)
        if parts.port is not None:
            raise UrlBuildError(url, "ports are not supported")
        return cls(
            host=parts.hostname or "",
            path=unquote(parts.path) or "/",
            query=tuple(parse_qsl(parts.query, keep_blank_values=True)),
            fragment=unquote(parts.fragment),
            scheme=parts.scheme,
        )

    def join(self, relative: str) -> "BuiltURL":
        """
        Resolve a relative path against this URL, like a browser would.

        Query and fragment are dropped. Dot segments are resolved but can
        never climb above the root, so the host never changes.
        """
        if relative.startswith("/"):
            path = relative
        else:
            base = self.path[:self.path.rfind("/") + 1]
            path = base + relative
        return BuiltURL(host=self.host, path=_remove_dot_segments(path), scheme=self.scheme)

    def with_query(self, *pairs: tuple[str, str]) -> "BuiltURL":
        """Return a copy with the given parameters appended."""
        return replace(self, query=self.query + tuple(pairs))

    def __str__(self) -> str:
        url = f"{self.scheme}://{self.host}{quote(self.path, safe=PATH_SAFE)}"
        if self.query:
            url += "?" + urlencode(self.query, quote_via=quote_plus)
        if self.fragment:
            url += "#" + quote(self.fragment, safe=FRAGMENT_SAFE)
        return url


def normalize_host(host: str) -> str:
    """Lowercase and IDNA-encode a host, rejecting anything unusable."""
    if not host:
        raise UrlBuildError(host, "empty host")
    try:
        ascii_host = host.encode("idna").decode("ascii").lower()
    except UnicodeError as e:
        raise UrlBuildError(host, f"invalid host ({e})") from e
    if not all(_HOST_LABEL.match(label) for label in ascii_host.split(".")):
        raise UrlBuildError(host, "invalid host")
    return ascii_host


def _remove_dot_segments(path: str) -> str:
    segments = []
    for segment in path.split("/")[1:]:
        if segment == "..":
            if segments:
                segments.pop()
        elif segment != ".":
            segments.append(segment)

    result = "/" + "/".join(segments)
    if path.endswith(("/.", "/..")) and not result.endswith("/"):
        result += "/"
    return result
