from typing import TYPE_CHECKING

from ...application.services.menu_item_service import MenuItemService
from ...domain.repositories.menu_item_repository import MenuItemRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MenuProvider:
    """Menu service provider - registers menu item services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register MenuItemService.
        Service is created with repository from container.
        """
        container.register_singleton(
            MenuItemService,
            MenuItemService(container.get(MenuItemRepository)),
        )
