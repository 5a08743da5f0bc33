"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from wordclouds.presentation.api.v1.endpoints.health import router as health_router
from wordclouds.presentation.api.v1.endpoints.auth import router as auth_router
from wordclouds.presentation.api.v1.endpoints.word_clouds import router as word_clouds_router
from wordclouds.presentation.api.v1.endpoints.site_config import router as site_config_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(word_clouds_router)
router.include_router(site_config_router)
