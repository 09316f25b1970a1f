"""
Destination builders - One pure function per site.

Each builder receives the query with its prefix already removed (the
"remainder") and returns the destination URL. An empty remainder is legal
and builds a site root or a search with an empty parameter.

  docs actix-web@3.3.0    → docs.rs/actix-web/3.3.0
  gh rust-lang/rust #1    → github.com/rust-lang/rust/issues/1
  gh rust-lang/rust !168  → github.com/rust-lang/rust/pull/168
  dh r/nginx              → hub.docker.com/_/nginx
  t @channel              → twitch.tv/channel
"""

from typing import Optional

from shortcuts.search.url import BuiltURL

RUST_STD = BuiltURL("doc.rust-lang.org", "/stable/std/")
DOCS_RS = BuiltURL("docs.rs")
GITHUB = BuiltURL("github.com")
DOCKER_HUB = BuiltURL("hub.docker.com")
TWITCH = BuiltURL("www.twitch.tv")

# Booktopia's product type for printed books
BOOKTOPIA_BOOKS = "917504"


def _strip_any(text: str, *prefixes: str) -> Optional[str]:
    """Return text without the first matching prefix, or None."""
    for prefix in prefixes:
        if text.startswith(prefix):
            return text[len(prefix):]
    return None


def docs(remainder: str) -> BuiltURL:
    """Rust crate documentation: "crate", "crate/version" or "crate@version"."""
    if remainder == "std":
        # docs.rs redirects here anyway, skip the extra hop
        return RUST_STD

    separators = [i for i in (remainder.find("/"), remainder.find("@")) if i >= 0]
    if separators:
        split_at = min(separators)
        crate, version = remainder[:split_at], remainder[split_at + 1:]
        if version:
            return DOCS_RS.join(f"{crate}/{version}")

    if not remainder.endswith("/"):
        remainder += "/"
    return DOCS_RS.join(remainder)


def github(remainder: str) -> BuiltURL:
    """
    GitHub users, repos, issues and pull requests.

    "@user" and "u/user" open a profile, "owner/repo #n" an issue,
    "owner/repo !n" a pull request, any other text with a "/" is taken as
    a path, and everything else is a GitHub search.
    """
    user = _strip_any(remainder, "@", "u/")
    if user is not None:
        return GITHUB.join(user)

    if "/" not in remainder:
        return GITHUB.join("search").with_query(("q", remainder))

    # GitHub serves issues and PRs under either path, but the right one
    # avoids a redirect
    repo, space, number = remainder.partition(" ")
    if space:
        if number.startswith("#"):
            return GITHUB.join(f"{repo}/issues/{number[1:]}")
        if number.startswith("!"):
            return GITHUB.join(f"{repo}/pull/{number[1:]}")
    return GITHUB.join(remainder)


def wikipedia(remainder: str) -> BuiltURL:
    return BuiltURL("en.wikipedia.org", "/wiki/Special:Search", query=(("search", remainder),))


def stackoverflow(remainder: str) -> BuiltURL:
    return BuiltURL("stackoverflow.com", "/search", query=(("q", remainder),))


def docker_hub(remainder: str) -> BuiltURL:
    """
    Docker Hub images.

    Official images live under "_/": "r/nginx", "/nginx" and "_/nginx" all
    open the official nginx image. Namespaced images ("ns/repo", with or
    without "r/") open under "r/". Anything else searches the hub.
    """
    name = _strip_any(remainder, "r/")
    if name is not None:
        if "/" in name:
            return DOCKER_HUB.join("r/").join(name)
        return DOCKER_HUB.join("_/").join(name)

    official = _strip_any(remainder, "/", "_/")
    if official is not None:
        return DOCKER_HUB.join("_/").join(official)

    if "/" in remainder:
        return DOCKER_HUB.join("r/").join(remainder)

    return DOCKER_HUB.join("search").with_query(("q", remainder))


def crates(remainder: str) -> BuiltURL:
    return BuiltURL("crates.io", "/search", query=(("q", remainder),))


def auspost(remainder: str) -> BuiltURL:
    """Parcel tracking. The tracking page routes client-side, so the id goes in the fragment."""
    return BuiltURL("auspost.com.au", "/mypost/track/", fragment=f"/details/{remainder}")


def urban_dictionary(remainder: str) -> BuiltURL:
    return BuiltURL("www.urbandictionary.com", "/define.php", query=(("term", remainder),))


def booktopia(remainder: str) -> BuiltURL:
    return BuiltURL(
        "www.booktopia.com.au",
        "/search.ep",
        query=(("keywords", remainder), ("productType", BOOKTOPIA_BOOKS)),
    )


def core_electronics(remainder: str) -> BuiltURL:
    return BuiltURL("core-electronics.com.au", "/catalogsearch/result/", query=(("q", remainder),))


def npm(remainder: str) -> BuiltURL:
    return BuiltURL("www.npmjs.com", "/search", query=(("q", remainder),))


def twitch(remainder: str) -> BuiltURL:
    """A leading "@" opens a channel, anything else searches."""
    channel = _strip_any(remainder, "@")
    if channel is not None:
        return TWITCH.join(channel)
    return TWITCH.join("search").with_query(("term", remainder))
