"""
Project Model
Version: 1.0.0
Date: 2026-10-18

Purpose: Typed project records consumed by the query engine, and the single
boundary function that coerces REST payloads into them.
"""

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .config import DEFAULT_DOCUMENT_TYPE, DEFAULT_DUE_DATE_OFFSET_DAYS, DEFAULT_PRIORITY_LEVEL
from .exceptions import ValidationError
from .utils import get_logger

logger = get_logger(__name__)


class ProjectStatus(str, Enum):
    """Project lifecycle states."""
    ACTIVE = "active"
    DRAFT = "draft"
    SUBMITTED = "submitted"
    OVERDUE = "overdue"


class HealthStatus(str, Enum):
    """Traffic-light project health."""
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class ProjectOwner(BaseModel):
    """The user a project belongs to."""
    model_config = ConfigDict(frozen=True)

    id: Optional[Union[int, str]] = Field(default=None, description="User identifier")
    name: str = Field(default="Unknown User", description="Display name")
    email: str = Field(default="")
    avatar: str = Field(default="U", description="Single-letter avatar")


class ProjectRecord(BaseModel):
    """
    Read-only view of one project as loaded from the API.

    Records are replaced wholesale on every reload; nothing in the engine
    mutates them.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: Union[int, str] = Field(description="Opaque project identifier")
    title: str
    status: ProjectStatus = ProjectStatus.ACTIVE
    priority_level: int = Field(default=DEFAULT_PRIORITY_LEVEL, ge=1, le=5, description="1 = highest")
    document_type: str = Field(default=DEFAULT_DOCUMENT_TYPE, description="Document type code, e.g. RFP")
    agency: Optional[str] = None
    due_date: date
    created_at: datetime
    owner: ProjectOwner = Field(default_factory=ProjectOwner)
    progress_percentage: float = Field(default=0, ge=0, le=100)
    health_status: HealthStatus = HealthStatus.GREEN
    team_size: int = Field(default=1, ge=1)

    # Display-only extras carried through from the API
    description: str = ""
    department: Optional[str] = None
    document_count: int = Field(default=0, ge=0)
    estimated_value: Optional[float] = None

    @field_validator('due_date', mode='before')
    @classmethod
    def _date_from_timestamp(cls, v):
        # The API sometimes sends a full ISO timestamp for date-only fields.
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and 'T' in v:
            return v.split('T', 1)[0]
        return v


def _owner_from_api(payload: Dict[str, Any]) -> Dict[str, Any]:
    name = payload.get("owner_name") or "Unknown User"
    return {
        "id": payload.get("created_by"),
        "name": name,
        "email": payload.get("owner_email") or "",
        "avatar": name[0].upper(),
    }


def project_from_api(payload: Dict[str, Any], now: Optional[datetime] = None) -> ProjectRecord:
    """
    Map one project object from the REST wire schema to a ``ProjectRecord``.

    Missing optional fields get the defaults the Projects view has always
    shown (type RFP, priority 3, green health, one team member). A missing
    due date falls 30 days after creation.

    Raises:
        ValidationError: If the payload cannot be coerced
    """
    if not isinstance(payload, dict):
        raise ValidationError("Project payload must be an object", type(payload).__name__)

    now = now or datetime.now()
    created_at = payload.get("created_at") or now
    due_date = payload.get("estimated_completion_date")
    if not due_date:
        try:
            base = created_at if isinstance(created_at, datetime) else datetime.fromisoformat(str(created_at).replace("Z", "+00:00"))
        except ValueError:
            base = now
        due_date = (base + timedelta(days=DEFAULT_DUE_DATE_OFFSET_DAYS)).date()

    data = {
        "id": payload.get("id"),
        "title": payload.get("title"),
        "status": payload.get("status") or ProjectStatus.ACTIVE,
        "priority_level": payload.get("priority_level") or DEFAULT_PRIORITY_LEVEL,
        "document_type": payload.get("project_type") or DEFAULT_DOCUMENT_TYPE,
        "agency": payload.get("agency_name"),
        "due_date": due_date,
        "created_at": created_at,
        "owner": _owner_from_api(payload),
        "progress_percentage": payload.get("progress_percentage") or 0,
        "health_status": payload.get("health_status") or HealthStatus.GREEN,
        "team_size": payload.get("team_size") or 1,
        "description": payload.get("description") or "",
        "department": payload.get("department_name"),
        "document_count": payload.get("document_count") or 0,
        "estimated_value": payload.get("estimated_value"),
    }
    try:
        return ProjectRecord.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid project payload (id={payload.get('id')!r})", str(e)) from e


def projects_from_api(payloads: Iterable[Dict[str, Any]], now: Optional[datetime] = None) -> List[ProjectRecord]:
    """
    Map a list response, newest first. Payloads that fail validation are
    logged and skipped so one bad row does not blank the whole list.
    """
    records: List[ProjectRecord] = []
    for payload in payloads or []:
        try:
            records.append(project_from_api(payload, now=now))
        except ValidationError as e:
            logger.warning(f"Skipping project from API: {e}")
    # timestamp() lets naive and offset-aware created_at values compare
    records.sort(key=lambda r: r.created_at.timestamp(), reverse=True)
    return records
