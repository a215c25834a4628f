"""Wire the reload service into a host's registry."""

from autoreload.host.registry import ContentRegistry
from autoreload.services.reload_service import ReloadService


SERVICE_NAME = "autoreload.background_service.auto_reload"
MENU_PATH = ("Extras", "Auto Reload")
MENU_PRIORITY = 3500


def setup_plugin(registry: ContentRegistry, service: ReloadService) -> None:
    """
    Register the reload tick as a background service and add the toggle menu item.

    Args:
        registry: Host registry to contribute to
        service: Reload service the entries drive
    """
    registry.register_service(SERVICE_NAME, service.tick)
    registry.add_menu_item(
        MENU_PATH,
        MENU_PRIORITY,
        service.toggle,
        enabled_callback=lambda: True,
        selected_callback=lambda: service.enabled,
    )
