from ..models.user import User
from ..models.family import Family
from ..models.todo import Todo
from ..models.shopping_list import ShoppingList
from ..db.base_class import Base
