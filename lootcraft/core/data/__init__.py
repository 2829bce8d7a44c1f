from .item_catalog import ItemCatalog, ItemDef, ItemProvider, ItemStack

__all__ = ["ItemCatalog", "ItemDef", "ItemProvider", "ItemStack"]
