"""
Prefix Handlers - "gh ", "docs ", "w " ... routed to destination builders.

PREFIXES is the dispatch table, checked top to bottom against the
case-preserved query: the first prefix that matches wins and the rest of
the query goes to its builder untouched. Each entry becomes one rule, so
the router reports which destination fired.
"""

from typing import Callable

from shortcuts.search.handlers import destinations
from shortcuts.search.router import PREFIX
from shortcuts.search.url import BuiltURL

PREFIXES: tuple[tuple[str, Callable[[str], BuiltURL]], ...] = (
    ("docs ", destinations.docs),
    ("docs/", destinations.docs),
    ("gh ", destinations.github),
    ("w ", destinations.wikipedia),
    ("so ", destinations.stackoverflow),
    ("dh ", destinations.docker_hub),
    ("crates ", destinations.crates),
    ("ap ", destinations.auspost),
    ("ud ", destinations.urban_dictionary),
    ("bt ", destinations.booktopia),
    ("core ", destinations.core_electronics),
    ("npm ", destinations.npm),
    ("t ", destinations.twitch),
)

# Prefix rules sit between the static keywords (100) and the domain heuristic (300)
BASE_PRIORITY = 200


class PrefixHandler:
    """Strip a fixed prefix and hand the remainder to a builder."""

    kind = PREFIX

    def __init__(self, prefix: str, builder: Callable[[str], BuiltURL], priority: int):
        self.prefix = prefix
        self.builder = builder
        self.priority = priority
        self.name = builder.__name__

    def matches(self, query: str) -> bool:
        return query.startswith(self.prefix)

    def build(self, query: str) -> BuiltURL:
        return self.builder(query[len(self.prefix):])

    def __repr__(self):
        return f"PrefixHandler({self.prefix!r}, {self.name}, priority={self.priority})"


def prefix_handlers(prefixes=PREFIXES) -> list[PrefixHandler]:
    """One handler per table entry, prioritised in table order."""
    return [
        PrefixHandler(prefix, builder, BASE_PRIORITY + i)
        for i, (prefix, builder) in enumerate(prefixes)
    ]
