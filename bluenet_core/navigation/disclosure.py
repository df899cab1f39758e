# =============================================================================
# bluenet_core/navigation/disclosure.py
# Open/closed state machine for the mobile overlay menu
# =============================================================================

from __future__ import annotations
from typing import Optional

from bluenet_core.logging import get_logger
from .models import DisclosureState, NavigationItem, ViewportState

logger = get_logger(__name__)


class DisclosureController:
    """
    Tracks whether the mobile menu overlay is open.

    Transitions:
        toggle()            Closed <-> Open (opening only while compact)
        on_viewport(state)  leaving compact layout forces Closed
        select(item)        Open -> Closed
        close()             any -> Closed

    Usage:
        controller = DisclosureController(is_compact=True)
        controller.toggle()
        controller.state.is_open   # True
    """

    def __init__(self, is_compact: bool = False):
        self._is_open = False
        self._is_compact = bool(is_compact)

    @property
    def state(self) -> DisclosureState:
        return DisclosureState(is_open=self._is_open)

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def is_compact(self) -> bool:
        return self._is_compact

    def toggle(self) -> DisclosureState:
        """User pressed the hamburger button"""
        if self._is_open:
            self._set_open(False, "toggle")
        elif self._is_compact:
            self._set_open(True, "toggle")
        else:
            logger.debug("Ignoring toggle outside compact layout")
        return self.state

    def set_compact(self, is_compact: bool) -> DisclosureState:
        """Record the layout mode; leaving compact layout always closes the menu"""
        is_compact = bool(is_compact)
        was_compact, self._is_compact = self._is_compact, is_compact
        if was_compact != is_compact:
            logger.debug(f"Layout changed: compact={is_compact}")
        if not is_compact and self._is_open:
            self._set_open(False, "layout")
        return self.state

    def on_viewport(self, viewport: ViewportState) -> None:
        """Subscriber hook for ViewportObserver"""
        self.set_compact(viewport.is_compact)

    def select(self, item: Optional[NavigationItem] = None) -> Optional[str]:
        """
        User followed a navigation link.

        Returns:
            The item's target so the caller can navigate, or None
        """
        if self._is_open:
            self._set_open(False, "select")
        return item.target if item is not None else None

    def close(self) -> DisclosureState:
        if self._is_open:
            self._set_open(False, "close")
        return self.state

    def _set_open(self, is_open: bool, reason: str) -> None:
        self._is_open = is_open
        logger.debug(f"Disclosure {'opened' if is_open else 'closed'} ({reason})")
