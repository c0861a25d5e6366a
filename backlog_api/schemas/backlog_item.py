"""
Backlog API - Pydantic Request/Response Schemas
===============================================

What:  The JSON contract of the /backlog-items endpoints.
How:   FastAPI validates request bodies against the write schema and
       serializes ORM rows through the response schema.

Wire format:
    {"id": "<uuid>", "title": "...", "type": "...", "status": "..."}

Write bodies carry title, type and status. An `id` key in a write body is
not part of the schema and is dropped during parsing; the server assigns
ids on create and takes the path id on update.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class BacklogItemWrite(BaseModel):
    """
    Body of POST /backlog-items and PUT /backlog-items/{id}.

    All three fields are required; PUT replaces every field (no partial updates).
    Field contents are not validated beyond being strings.
    """
    title: str = Field(description="Free-text title")
    type: str = Field(description="Item category, e.g. 'story'")
    status: str = Field(description="Workflow state, e.g. 'unstarted', 'started'")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BacklogItemResponse(BaseModel):
    """Full representation of a stored backlog item."""
    id: uuid.UUID = Field(description="Server-generated identifier (UUID)")
    title: str
    type: str
    status: str

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    Error body shared by every endpoint.

    Example:
        {
            "error": "not_found",
            "message": "backlog item with ID '...' was not found",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Body of GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    environment: str = Field(description="Active configuration profile")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since the application was created")
