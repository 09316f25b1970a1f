"""
Static Redirect Handler - Bare keywords that jump straight to a page.

Keywords are compared case-insensitively against the trimmed query, so
mobile autocomplete input like "Weather " still matches "weather".

  x        → xkcd
  sd, /.   → Slashdot
  weather  → Canberra forecast
  gh       → GitHub
"""

from types import MappingProxyType

from shortcuts.search.router import STATIC
from shortcuts.search.url import BuiltURL

STATIC_REDIRECTS = MappingProxyType({
    "twir": "https://this-week-in-rust.org",
    "abc": "https://www.abc.net.au/news",
    "had": "https://hackaday.com/blog/",
    "sd": "https://slashdot.org",
    "/.": "https://slashdot.org",
    "sth": "https://www.servethehome.com",
    "x": "https://xkcd.com",
    "weather": "https://beta.bom.gov.au/poi-location/australia/australian-capital-territory/australian-capital-territory/nsw_pt027-canberra",
    "gh": "https://github.com",
    "bfio": "https://bushfire.io",
    "ip": "https://www.cloudflare.com/cdn-cgi/trace",
    "core": "https://www.core-electronics.com.au",
    "bt": "https://www.booktopia.com.au/",
    "speed": "https://speed.cloudflare.com/",
    "ce": "https://www.carexpert.com.au/car-news",
    "t": "https://www.twitch.tv/",
})


class StaticRedirectHandler:
    """Redirect fixed keywords to fixed URLs."""

    name = "static"
    kind = STATIC
    priority = 100

    def __init__(self, redirects=STATIC_REDIRECTS):
        self.redirects = MappingProxyType({
            keyword.lower(): BuiltURL.parse(url)
            for keyword, url in redirects.items()
        })

    def matches(self, query: str) -> bool:
        return query.strip().lower() in self.redirects

    def build(self, query: str) -> BuiltURL:
        return self.redirects[query.strip().lower()]
