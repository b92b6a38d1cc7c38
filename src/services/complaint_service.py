from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from src.core.exceptions import ComplaintDeskError, NotFoundError, ValidationError
from src.core.logging import logger
from src.db.models import ComplaintInDB, ComplaintStatus, Role
from src.services.attachment_store import AttachmentStore
from src.services.classify_service import ClassifyService
from src.services.complaint_id import generate_complaint_id
from src.services.complaint_repository import ComplaintRepository
from src.services.summary_service import SummaryService


class UploadedFile:
    """An attachment already read from the request."""

    def __init__(self, filename: str, content_type: str, data: bytes):
        self.filename = filename
        self.content_type = content_type
        self.data = data


class ComplaintService:
    def __init__(
        self,
        repository: ComplaintRepository,
        attachments: AttachmentStore,
        classify_service: Optional[ClassifyService] = None,
        summary_service: Optional[SummaryService] = None
    ):
        self.repository = repository
        self.attachments = attachments
        self.classify_service = classify_service or ClassifyService()
        self.summary_service = summary_service or SummaryService()

    async def submit(
        self,
        title: Optional[str],
        description: Optional[str],
        category: Optional[str],
        created_by_email: Optional[str],
        upload: Optional[UploadedFile] = None
    ) -> Dict[str, Any]:
        if not created_by_email:
            raise ValidationError("User email is required")
        missing = [
            name for name, value in
            (("title", title), ("description", description), ("category", category))
            if not value
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        # Reject bad uploads before anything is written.
        if upload is not None:
            self.attachments.validate(upload.content_type, len(upload.data))

        complaint = ComplaintInDB(
            complaintId=generate_complaint_id(),
            title=title,
            description=description,
            category=category,
            createdByEmail=created_by_email,
            priority=self.classify_service.classify(description),
            summary=self.summary_service.summarize(description),
            status=ComplaintStatus.PENDING,
            date=datetime.now(timezone.utc),
        )

        stored = None
        if upload is not None:
            stored = await self.attachments.store(upload.filename, upload.content_type, upload.data)
            complaint.attachmentName = stored.name
            complaint.attachmentType = stored.content_type
            complaint.attachmentPath = stored.path

        try:
            record = await self.repository.create(complaint.model_dump(mode="python"))
        except ComplaintDeskError:
            if stored is not None:
                await self.attachments.delete(stored.path)
            raise

        logger.info(
            "Complaint %s submitted by %s with priority %s",
            record["complaintId"], created_by_email, record["priority"]
        )
        return record

    async def list_complaints(
        self,
        role: Optional[str] = None,
        email: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        if role == Role.ADMIN.value:
            return await self.repository.list()
        if role == Role.STUDENT.value and email:
            return await self.repository.list({"createdByEmail": email})

        # Kept for existing clients; the caller is not identified here.
        logger.warning(
            "Listing all complaints without an admin role (role=%r, email=%r)", role, email
        )
        return await self.repository.list()

    async def get_complaint(self, identifier: str) -> Dict[str, Any]:
        record = await self.repository.get(identifier)
        if record is None:
            raise NotFoundError("Complaint not found")
        return record

    async def open_attachment(self, filename: str) -> Tuple[Path, str]:
        """
        Resolve a stored attachment to ``(path, content_type)``.

        The content type comes from the complaint that references the file;
        a file no complaint points at is served with a guessed type.
        """
        path = await self.attachments.resolve(filename)
        record = await self.repository.find_by_attachment(path.name)
        content_type = (record or {}).get("attachmentType") or self.attachments.guess_type(path.name)
        return path, content_type
