# Search Shortcuts Package
"""
Query-string router for a redirect-style search front end.

Modules:
  - search: Rule-ordered resolution of search-box input to a URL
  - server: HTTP adapter answering with 303 redirects
  - utils: Settings loading and logging setup
"""

__version__ = "0.1.0-dev"
