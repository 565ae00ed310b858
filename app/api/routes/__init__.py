"""API routes."""

from fastapi import APIRouter

from app.api.routes import folders, health, products, search, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(users.router, tags=["users"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(folders.router, tags=["folders"])
router.include_router(search.router, prefix="/search", tags=["search"])
