# =============================================================================
# bluenet_core/navigation/viewport.py
# Viewport width tracking with an explicit resize-subscription lifecycle
# =============================================================================

from __future__ import annotations
import functools
import time
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from bluenet_core.errors import ViewportSubscriptionError, handle_error, safe_execute
from bluenet_core.logging import get_logger
from .models import ViewportState

logger = get_logger(__name__)

COMPACT_BREAKPOINT_PX = 768

ResizeHandler = Callable[[], None]
ViewportListener = Callable[[ViewportState], None]


# =============================================================================
# WINDOW SOURCES
# =============================================================================

class WindowSource(ABC):
    """Where the observer reads the width from and registers for resizes"""

    @abstractmethod
    def get_width(self) -> int:
        ...

    @abstractmethod
    def subscribe(self, handler: ResizeHandler) -> None:
        ...

    @abstractmethod
    def unsubscribe(self, handler: ResizeHandler) -> None:
        ...


class StaticWindow(WindowSource):
    """A window that never resizes; subscriptions are accepted and ignored"""

    def __init__(self, width: int):
        self.width = width

    def get_width(self) -> int:
        return self.width

    def subscribe(self, handler: ResizeHandler) -> None:
        pass

    def unsubscribe(self, handler: ResizeHandler) -> None:
        pass


class ManualWindow(WindowSource):
    """
    A window whose resizes are driven by calling ``resize(width)``.

    Used by tests and by Streamlit callbacks that learn the width from the
    browser. Counts subscribe/unsubscribe calls so leaks are visible.
    """

    def __init__(self, width: int):
        self.width = width
        self.handlers: List[ResizeHandler] = []
        self.subscribe_calls = 0
        self.unsubscribe_calls = 0

    def get_width(self) -> int:
        return self.width

    def subscribe(self, handler: ResizeHandler) -> None:
        self.subscribe_calls += 1
        self.handlers.append(handler)

    def unsubscribe(self, handler: ResizeHandler) -> None:
        self.unsubscribe_calls += 1
        if handler in self.handlers:
            self.handlers.remove(handler)

    def resize(self, width: int) -> None:
        self.width = width
        # Copy: a handler may unmount its observer mid-dispatch
        for handler in list(self.handlers):
            handler()


# =============================================================================
# OBSERVER
# =============================================================================

class ViewportObserver:
    """
    Samples the viewport width and publishes a ViewportState.

    Construction samples the width once. ``mount()`` registers a single
    resize handler; ``unmount()`` releases it unconditionally. Listeners
    are called synchronously whenever the state changes.

    If the resize subscription cannot be registered, the observer settles
    on a static non-compact state and does not try again.

    Usage:
        observer = ViewportObserver(ManualWindow(500))
        observer.subscribe(controller.on_viewport)
        with observer:
            ...
    """

    def __init__(
        self,
        window: WindowSource,
        breakpoint_px: int = COMPACT_BREAKPOINT_PX,
        min_interval: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._window = window
        self._breakpoint_px = breakpoint_px
        self._min_interval = min_interval
        self._clock = clock
        self._listeners: List[ViewportListener] = []
        self._handler: Optional[ResizeHandler] = None
        self._mount_token = 0
        self._subscription_failed = False
        self._last_update: Optional[float] = None
        self._pending: Optional[ViewportState] = None
        self._state = self._sample() or ViewportState(width_px=0, is_compact=False)

    # -------------------------------------------------------------------------
    # STATE
    # -------------------------------------------------------------------------

    @property
    def state(self) -> ViewportState:
        return self.flush_pending()

    @property
    def is_compact(self) -> bool:
        return self.state.is_compact

    @property
    def is_mounted(self) -> bool:
        return self._handler is not None

    def _sample(self) -> Optional[ViewportState]:
        width = safe_execute(self._window.get_width, default=None)
        if not isinstance(width, (int, float)):
            return None
        return ViewportState.from_width(int(width), self._breakpoint_px)

    def refresh(self) -> ViewportState:
        """Re-sample the width now, ignoring any rate limit"""
        if not self._subscription_failed:
            self._apply(self._sample(), force=True)
        return self._state

    def flush_pending(self) -> ViewportState:
        """Apply a sample held back by the rate limit once its interval has passed"""
        pending = self._pending
        if pending is not None and not self._throttled(self._clock()):
            self._apply(pending, force=True)
        return self._state

    def _throttled(self, now: float) -> bool:
        return (
            self._min_interval > 0
            and self._last_update is not None
            and now - self._last_update < self._min_interval
        )

    def _apply(self, new_state: Optional[ViewportState], force: bool = False) -> None:
        if new_state is None:
            return
        if new_state == self._state:
            # A newer sample matching the current state supersedes a held one
            self._pending = None
            return

        now = self._clock()
        flips = new_state.is_compact != self._state.is_compact
        if not force and not flips and self._throttled(now):
            self._pending = new_state
            return

        self._pending = None
        self._last_update = now
        self._state = new_state
        self._notify()

    # -------------------------------------------------------------------------
    # LISTENERS
    # -------------------------------------------------------------------------

    def subscribe(self, listener: ViewportListener) -> Callable[[], None]:
        """Register a state listener; returns a function that removes it"""
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def _notify(self) -> None:
        state = self._state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                handle_error(e, user_message="Viewport listener failed")

    # -------------------------------------------------------------------------
    # LIFECYCLE
    # -------------------------------------------------------------------------

    def mount(self) -> bool:
        """
        Acquire the resize subscription.

        Returns:
            True if subscribed (or already mounted), False on the static fallback
        """
        if self._handler is not None:
            return True
        if self._subscription_failed:
            return False

        self._mount_token += 1
        handler = functools.partial(self._on_resize, self._mount_token)
        try:
            self._window.subscribe(handler)
        except Exception as e:
            self._subscription_failed = True
            handle_error(ViewportSubscriptionError(
                f"Could not register resize handler: {e}",
                operation="subscribe",
            ))
            logger.warning("Falling back to a static non-compact layout")
            self._apply(ViewportState(width_px=self._state.width_px, is_compact=False), force=True)
            return False

        self._handler = handler
        logger.info(f"Viewport observer mounted at {self._state.width_px}px")
        self.refresh()
        return True

    def unmount(self) -> None:
        """Release the resize subscription; safe to call more than once"""
        handler, self._handler = self._handler, None
        if handler is None:
            return
        try:
            self._window.unsubscribe(handler)
        except Exception as e:
            handle_error(ViewportSubscriptionError(
                f"Could not deregister resize handler: {e}",
                operation="unsubscribe",
            ))
        logger.info("Viewport observer unmounted")

    def _on_resize(self, token: int) -> None:
        # Handlers from an earlier mount, or firing after unmount, are stale
        if self._handler is None or token != self._mount_token:
            return
        self._apply(self._sample())

    def __enter__(self) -> ViewportObserver:
        self.mount()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.unmount()
        return False
