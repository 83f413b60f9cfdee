"""API v1 router aggregating all endpoint routers.

All endpoints are mounted under the configured v1 prefix
(default /api/v1/cookbook).
"""

from __future__ import annotations

from fastapi import APIRouter

from cookbook.api.v1.endpoints import admin, categories, health, recipes


router = APIRouter()

router.include_router(health.router)
router.include_router(recipes.router)
router.include_router(categories.router)
router.include_router(admin.router)
