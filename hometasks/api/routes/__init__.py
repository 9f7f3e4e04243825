from fastapi import APIRouter
from . import auth, users, families, todos, shopping_lists

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["Auth"])
router.include_router(users.router, prefix="/users", tags=["Users"])
router.include_router(families.router, prefix="/families", tags=["Families"])
router.include_router(todos.router, prefix="/todos", tags=["Todos"])
router.include_router(shopping_lists.router, prefix="/shopping-lists", tags=["Shopping lists"])
