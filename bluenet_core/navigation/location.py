# =============================================================================
# bluenet_core/navigation/location.py
# Immutable snapshot of the current route
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple
from urllib.parse import parse_qs, urlencode, urlsplit

from bluenet_core.logging import get_logger

logger = get_logger(__name__)

TAB_PARAM = "tab"


def _normalize_path(path: Any) -> str:
    if not isinstance(path, str) or not path:
        return "/"
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def _tab_values(query: str) -> Tuple[str, ...]:
    try:
        parsed = parse_qs(query, keep_blank_values=False)
    except ValueError as e:
        logger.debug(f"Unparsable query string {query!r}: {e}")
        return ()
    return tuple(v.strip() for v in parsed.get(TAB_PARAM, []) if v.strip())


@dataclass(frozen=True)
class LocationSnapshot:
    """
    Current path and query, parsed once per render.

    ``tabs`` holds every ``tab`` value found in the query, in order. A
    well-formed URL carries at most one; a malformed one may carry several.
    """
    path: str = "/"
    query: str = ""
    tabs: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, path: Any, query: Any = "") -> LocationSnapshot:
        """Build a snapshot from a path and a raw query string (with or without '?')"""
        raw_query = query if isinstance(query, str) else ""
        raw_query = raw_query[1:] if raw_query.startswith("?") else raw_query
        return cls(path=_normalize_path(path), query=raw_query, tabs=_tab_values(raw_query))

    @classmethod
    def from_url(cls, url: Any) -> LocationSnapshot:
        """Build a snapshot from a relative or absolute URL such as '/dashboard?tab=market'"""
        if not isinstance(url, str):
            return cls()
        try:
            parts = urlsplit(url)
        except ValueError as e:
            logger.debug(f"Unparsable URL {url!r}: {e}")
            return cls()
        return cls.parse(parts.path, parts.query)

    @classmethod
    def from_query_params(
        cls,
        path: str,
        params: Optional[Mapping[str, Any]],
    ) -> LocationSnapshot:
        """
        Build a snapshot from an already-decoded mapping, e.g. ``st.query_params``.

        Values may be strings or lists of strings.
        """
        tabs: Iterable[Any] = ()
        if params is not None:
            try:
                value = params.get(TAB_PARAM)
            except Exception as e:
                logger.debug(f"Could not read query params: {e}")
                value = None
            if isinstance(value, str):
                tabs = (value,)
            elif isinstance(value, (list, tuple)):
                tabs = value
        clean = tuple(t.strip() for t in tabs if isinstance(t, str) and t.strip())
        query = urlencode([(TAB_PARAM, t) for t in clean])
        return cls(path=_normalize_path(path), query=query, tabs=clean)

    @property
    def tab(self) -> Optional[str]:
        """First tab value, if any"""
        return self.tabs[0] if self.tabs else None

    @property
    def url(self) -> str:
        return f"{self.path}?{self.query}" if self.query else self.path
