#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.cart import CartModel, CartStatus
from app.data.models.item import ItemModel
from app.data.models.snack import SnackModel

__all__ = ["CartModel", "CartStatus", "ItemModel", "SnackModel"]
