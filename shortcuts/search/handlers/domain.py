"""
Domain Heuristic Handler - Bare domain names typed with stray spaces.

Mobile keyboards tend to insert a space after a dot, so "www.example. com"
should open https://www.example.com/ rather than search for it. The rule
only fires when the query contains a space and, with every space removed,
parses as a domain name under a suffix from the Public Suffix List.

Queries without a space ("www.example.com") are left to the web search.
"""

import re
from functools import lru_cache

from loguru import logger
from publicsuffixlist import PublicSuffixList

from shortcuts.errors import HeuristicParseError, UrlBuildError
from shortcuts.search.router import DOMAIN
from shortcuts.search.url import BuiltURL, normalize_host

_LABEL = re.compile(r"^[\w-]+$")


@lru_cache(maxsize=None)
def _suffix_list() -> PublicSuffixList:
    """Bundled Public Suffix List, loaded once on first use."""
    return PublicSuffixList(accept_unknown=False)


def parse_domain(candidate: str) -> str:
    """
    Parse a candidate host name.

    Args:
        candidate: Text with spaces already removed

    Returns:
        The registrable domain (e.g. "example.com" for "www.example.com")

    Raises:
        HeuristicParseError: not a dotted name, bad labels, or unknown suffix
    """
    name = candidate.lower()
    if not name or len(name) > 253:
        raise HeuristicParseError(candidate, "bad length")

    labels = name.split(".")
    if len(labels) < 2:
        raise HeuristicParseError(candidate, "no dot")
    for label in labels:
        if not _LABEL.match(label) or len(label) > 63:
            raise HeuristicParseError(candidate, f"invalid label {label!r}")

    # anything accepted here must also be buildable as a URL host
    try:
        normalize_host(name)
    except UrlBuildError as e:
        raise HeuristicParseError(candidate, e.reason) from e

    registrable = _suffix_list().privatesuffix(name)
    if registrable is None:
        raise HeuristicParseError(candidate, "unknown public suffix")
    return registrable


class DomainHeuristicHandler:
    """Open "host. tld" style input as https://host.tld/."""

    name = "domain"
    kind = DOMAIN
    priority = 300

    def matches(self, query: str) -> bool:
        if " " not in query:
            return False
        try:
            parse_domain(query.replace(" ", ""))
        except HeuristicParseError as e:
            logger.debug(f"Domain heuristic does not apply: {e}")
            return False
        return True

    def build(self, query: str) -> BuiltURL:
        return BuiltURL(query.replace(" ", ""))
