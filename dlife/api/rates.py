"""
Rates API routes

包含：
- POST/PUT/GET /api/rates
- GET/DELETE /api/rates/{id}
- GET /api/_search/rates?query=...
"""

from ..schemas.rates import RatesDTO
from ..services.entity_services import rates_service
from .resource import build_resource_router

router = build_resource_router("rates", rates_service, RatesDTO, label="评分", tag="评分")
