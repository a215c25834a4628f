"""Registry of background services and menu items contributed by plugins."""

import threading
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from autoreload.utils.logging import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class MenuItem:
    """A checkable menu entry."""

    path: Tuple[str, ...]
    priority: int
    callback: Callable[[], None]
    enabled_callback: Callable[[], bool]
    selected_callback: Callable[[], bool]

    @property
    def is_enabled(self) -> bool:
        return self.enabled_callback()

    @property
    def is_selected(self) -> bool:
        return self.selected_callback()


class ContentRegistry:
    """
    Collects what plugins contribute to the host.

    Example:
        >>> registry = ContentRegistry()
        >>> registry.register_service("demo.service", lambda: None)
        >>> registry.add_menu_item(("Extras", "Demo"), 100, lambda: None)
    """

    def __init__(self) -> None:
        self._services: Dict[str, Callable[[], None]] = {}
        self._menu_items: Dict[Tuple[str, ...], MenuItem] = {}
        self._lock = threading.Lock()

    def register_service(self, name: str, callback: Callable[[], None]) -> None:
        """
        Register a background service callback.

        Raises:
            ValueError: If a service with this name is already registered
        """
        with self._lock:
            if name in self._services:
                raise ValueError(f"Background service already registered: {name}")
            self._services[name] = callback
        logger.debug("service_registered", name=name)

    def get_service(self, name: str) -> Callable[[], None]:
        with self._lock:
            return self._services[name]

    @property
    def services(self) -> Dict[str, Callable[[], None]]:
        with self._lock:
            return dict(self._services)

    def run_services_once(self) -> None:
        """Invoke every registered service once, in registration order."""
        for name, callback in self.services.items():
            try:
                callback()
            except Exception as e:
                logger.error("service_failed", name=name, error=str(e), exc_info=True)

    def add_menu_item(
        self,
        path: Tuple[str, ...],
        priority: int,
        callback: Callable[[], None],
        enabled_callback: Callable[[], bool] = lambda: True,
        selected_callback: Callable[[], bool] = lambda: False,
    ) -> MenuItem:
        item = MenuItem(tuple(path), priority, callback, enabled_callback, selected_callback)
        with self._lock:
            self._menu_items[item.path] = item
        logger.debug("menu_item_added", path="/".join(item.path), priority=priority)
        return item

    def get_menu_item(self, path: Tuple[str, ...]) -> MenuItem:
        with self._lock:
            return self._menu_items[tuple(path)]

    @property
    def menu_items(self) -> list[MenuItem]:
        """Menu items ordered by priority."""
        with self._lock:
            return sorted(self._menu_items.values(), key=lambda item: item.priority)

    def activate(self, path: Tuple[str, ...]) -> None:
        """
        Run a menu item's callback, as clicking it would.

        Raises:
            KeyError: If no item is registered under ``path``
            RuntimeError: If the item is currently disabled
        """
        item = self.get_menu_item(path)
        if not item.is_enabled:
            raise RuntimeError(f"Menu item is disabled: {'/'.join(item.path)}")
        item.callback()
