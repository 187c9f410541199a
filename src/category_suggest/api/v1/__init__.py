"""API version 1 routes."""

from fastapi import APIRouter

from category_suggest.api.v1 import categories

router = APIRouter(prefix="/api/v1")

router.include_router(categories.router)
