from fastapi import APIRouter
from brewhouse.api.routes_health import router as health_router
from brewhouse.api.routes_auth import router as auth_router
from brewhouse.api.routes_entities import router as entities_router
from brewhouse.api.routes_prices import router as prices_router
from brewhouse.api.routes_reports import router as reports_router
from brewhouse.api.routes_brewing import router as brewing_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(auth_router, tags=["auth"])
router.include_router(entities_router)
router.include_router(prices_router, tags=["price-history"])
router.include_router(reports_router, tags=["reports"])
router.include_router(brewing_router, tags=["brewing"])
