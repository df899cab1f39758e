# =============================================================================
# bluenet_core/navigation/navbar.py
# Per-mount composition of the navigation components
# =============================================================================

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from bluenet_core.config import NavigationSettings, DEFAULT_SETTINGS
from bluenet_core.errors import NavigationError, handle_error
from bluenet_core.logging import get_logger
from .account import AccountAction, account_actions, perform_logout
from .disclosure import DisclosureController
from .identity import IdentitySummary
from .location import LocationSnapshot
from .menu import build_navigation_items
from .models import DisclosureState, NavigationItem, UserProfile, ViewportState
from .viewport import ViewportObserver, WindowSource, StaticWindow

logger = get_logger(__name__)


@dataclass(frozen=True)
class NavigationView:
    """Everything the rendering layer needs for one frame"""
    brand_name: str
    items: Tuple[NavigationItem, ...]
    disclosure: DisclosureState
    viewport: ViewportState
    identity: IdentitySummary
    account_actions: Tuple[AccountAction, ...]

    @property
    def show_mobile_menu(self) -> bool:
        return self.viewport.is_compact and self.disclosure.is_open


class NavigationBar:
    """
    One mounted navigation bar: a viewport observer wired to a disclosure
    controller, plus the pure menu and identity functions.

    Usage:
        bar = NavigationBar(ManualWindow(500))
        with bar:
            view = bar.render_model(profile, LocationSnapshot.from_url("/dashboard?tab=market"))
    """

    def __init__(
        self,
        window: Optional[WindowSource] = None,
        settings: NavigationSettings = DEFAULT_SETTINGS,
    ):
        self.settings = settings
        self.viewport = ViewportObserver(
            window or StaticWindow(settings.default_viewport_width),
            breakpoint_px=settings.compact_breakpoint_px,
            min_interval=settings.resize_min_interval,
        )
        self.disclosure = DisclosureController(is_compact=self.viewport.is_compact)
        self._remove_listener: Optional[Callable[[], None]] = None

    def mount(self) -> None:
        if self._remove_listener is None:
            self._remove_listener = self.viewport.subscribe(self.disclosure.on_viewport)
        self.viewport.mount()
        # Mount may have re-sampled, or fallen back to non-compact
        self.disclosure.set_compact(self.viewport.is_compact)

    def unmount(self) -> None:
        self.viewport.unmount()
        if self._remove_listener is not None:
            self._remove_listener()
            self._remove_listener = None

    def __enter__(self) -> NavigationBar:
        self.mount()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.unmount()
        return False

    def render_model(
        self,
        profile: Optional[UserProfile],
        location: Optional[LocationSnapshot],
    ) -> NavigationView:
        self.viewport.flush_pending()
        role = profile.role if profile is not None else None
        return NavigationView(
            brand_name=self.settings.brand_name,
            items=build_navigation_items(role, location, self.settings.dashboard_path),
            disclosure=self.disclosure.state,
            viewport=self.viewport.state,
            identity=IdentitySummary.of(profile),
            account_actions=account_actions(),
        )

    def toggle(self) -> DisclosureState:
        return self.disclosure.toggle()

    def select(
        self,
        item: NavigationItem,
        navigate: Optional[Callable[[str], object]] = None,
    ) -> Optional[str]:
        """Close the mobile menu and navigate to the item's target"""
        target = self.disclosure.select(item)
        if navigate is not None and target:
            try:
                navigate(target)
            except Exception as e:
                handle_error(NavigationError(f"Navigation failed: {e}", target=target))
        return target

    def logout(self, on_logout: Optional[Callable[[], object]]) -> bool:
        return perform_logout(on_logout, self.disclosure)
