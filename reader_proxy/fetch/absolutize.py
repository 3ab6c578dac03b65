"""
Rewriting of URL attributes in extracted article HTML.

Extracted content is displayed outside the original page, so relative
``src``, ``srcset`` and ``href`` values must be resolved against the
page URL. A value that cannot be resolved is left as it is; one bad URL
never fails the whole fragment.
"""

from __future__ import annotations

import re
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from ..exceptions import UrlResolutionError

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_WHITESPACE_RE = re.compile(r"\s+")

# Reserved characters and existing escapes survive quoting.
_PATH_SAFE = "/%:@!$&'()*+,;=~[]"
_QUERY_SAFE = _PATH_SAFE + "?"

# Minimal escaping, void elements serialized without a closing slash.
_FRAGMENT_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


def resolve_url(value: str, base_url: str) -> str:
    """Resolve value against base_url using standard URL resolution.

    For http(s) results, spaces and other characters not allowed in a URL
    are percent-encoded in the path, query and fragment (UTF-8 for
    non-ASCII); existing escapes are kept.

    Raises:
        UrlResolutionError: If value is empty, has a syntactically invalid
            scheme (``ht!tp://x``), or an authority that does not parse
            (bad port, unbalanced IPv6 brackets)
    """
    candidate = value.strip()
    if not candidate:
        raise UrlResolutionError("empty URL")

    # A colon before any path, query or fragment delimiter starts a scheme.
    head = re.split(r"[/?#]", candidate, maxsplit=1)[0]
    if ":" in head and not _SCHEME_RE.match(head.split(":", 1)[0]):
        raise UrlResolutionError(f"invalid scheme in {candidate!r}")

    try:
        resolved = urljoin(base_url, candidate)
        parts = urlsplit(resolved)
        # Accessing port validates it.
        parts.port
    except ValueError as exc:
        raise UrlResolutionError(str(exc)) from exc

    if parts.scheme not in ("http", "https"):
        return resolved
    return urlunsplit(
        (
            parts.scheme,
            parts.netloc,
            quote(parts.path, safe=_PATH_SAFE),
            quote(parts.query, safe=_QUERY_SAFE),
            quote(parts.fragment, safe=_QUERY_SAFE),
        )
    )


def resolve_srcset(value: str, base_url: str) -> str:
    """Resolve every candidate URL of a srcset value.

    Each comma-separated candidate is ``<url> [<descriptor>]``; the
    descriptor is kept unchanged and candidates are rejoined with ", ".

    Raises:
        UrlResolutionError: If any candidate URL cannot be resolved
    """
    candidates = []
    for part in value.split(","):
        tokens = _WHITESPACE_RE.split(part.strip())
        if not tokens or not tokens[0]:
            continue
        absolute = resolve_url(tokens[0], base_url)
        if len(tokens) > 1:
            candidates.append(f"{absolute} {tokens[1]}")
        else:
            candidates.append(absolute)
    return ", ".join(candidates)


def absolutify(html: str, base_url: str) -> str:
    """Return html with src, srcset and href attributes made absolute.

    The fragment is wrapped in a minimal document so it parses on its
    own; the inner HTML of that document's body is returned.

    Args:
        html: HTML fragment, typically extracted article content
        base_url: URL of the page the fragment came from

    Returns:
        The rewritten fragment
    """
    soup = BeautifulSoup(f"<!doctype html><html><body>{html}</body></html>", "lxml")
    body = soup.body

    for el in body.find_all(src=True):
        _rewrite(el, "src", base_url, resolve_url)

    for el in body.find_all(["img", "source"], srcset=True):
        _rewrite(el, "srcset", base_url, resolve_srcset)

    for el in body.find_all(href=True):
        _rewrite(el, "href", base_url, resolve_url)

    return body.decode_contents(formatter=_FRAGMENT_FORMATTER)


def _rewrite(el, attr: str, base_url: str, resolver) -> None:
    value = el.get(attr)
    if isinstance(value, list):
        value = " ".join(value)
    if not value:
        return
    try:
        el[attr] = resolver(value, base_url)
    except UrlResolutionError:
        pass
