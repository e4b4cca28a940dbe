"""
Attendee API routes

包含：
- POST/PUT/GET /api/attendees
- GET/DELETE /api/attendees/{id}
- GET /api/_search/attendees?query=...
"""

from ..schemas.attendee import AttendeeDTO
from ..services.entity_services import attendee_service
from .resource import build_resource_router

router = build_resource_router("attendees", attendee_service, AttendeeDTO, label="参与者", tag="参与者")
