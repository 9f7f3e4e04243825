from datetime import datetime, timezone
def utcnow():
    return datetime.now(timezone.utc)
from .user import User
from .family import Family
from .todo import Todo
from .shopping_list import ShoppingList
