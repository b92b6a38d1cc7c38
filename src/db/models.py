from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class ComplaintStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"


class Role(str, Enum):
    STUDENT = "student"
    ADMIN = "admin"


class ComplaintInDB(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    complaintId: str
    title: str
    description: str
    category: str
    createdByEmail: str
    priority: Priority
    summary: str
    status: ComplaintStatus = ComplaintStatus.PENDING.value
    date: datetime
    attachmentName: Optional[str] = None
    attachmentType: Optional[str] = None
    attachmentPath: Optional[str] = None
    adminResponse: Optional[str] = None
    resolutionMessage: Optional[str] = None
    resolutionDate: Optional[datetime] = None
    lastUpdated: Optional[datetime] = None


class ComplaintResponse(ComplaintInDB):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    # Records written before these fields were enforced may hold free-form
    # values or no summary at all.
    priority: str
    status: str = ComplaintStatus.PENDING.value
    summary: Optional[str] = None


class ComplaintEnvelope(BaseModel):
    message: str
    complaint: ComplaintResponse


class StatusUpdateRequest(BaseModel):
    status: Optional[str] = None
    adminResponse: Optional[str] = None


class RegisterRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserPublic(BaseModel):
    email: str
    role: Role


class UserEnvelope(BaseModel):
    message: str
    user: UserPublic


class StoredAttachment(BaseModel):
    name: str
    content_type: str
    path: str
    size: int
