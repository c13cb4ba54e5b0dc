from shopping_basket.core.application.dtos.add_item_request import AddItemRequest

__all__ = ["AddItemRequest"]
