from datetime import datetime, timezone
from typing import Any, Dict, Optional
from src.core.exceptions import NotFoundError, ValidationError
from src.core.logging import logger
from src.db.models import ComplaintStatus
from src.services.complaint_repository import ComplaintRepository

RESPONSE_REQUIRED = {ComplaintStatus.IN_PROGRESS, ComplaintStatus.RESOLVED}


class StatusTransitionHandler:
    def __init__(self, repository: ComplaintRepository):
        self.repository = repository

    @staticmethod
    def _parse_status(status: Optional[str]) -> ComplaintStatus:
        if not status:
            raise ValidationError("Status is required")
        try:
            return ComplaintStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in ComplaintStatus)
            raise ValidationError(f"Status must be one of: {allowed}") from None

    async def apply_transition(
        self,
        complaint_id: str,
        status: Optional[str],
        admin_response: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Move a complaint to ``status``.

        In Progress and Resolved need a non-blank admin response, which is
        stored with the change. Moving back to Pending keeps whatever
        response was there before.
        """
        new_status = self._parse_status(status)
        needs_response = new_status in RESPONSE_REQUIRED
        if needs_response and (not admin_response or not admin_response.strip()):
            raise ValidationError(
                f"Admin response is required when marking complaint as {new_status.value}"
            )

        changes: Dict[str, Any] = {
            "status": new_status.value,
            "lastUpdated": datetime.now(timezone.utc),
        }
        if needs_response:
            changes["adminResponse"] = admin_response

        current = await self.repository.get(complaint_id)
        if current is None:
            raise NotFoundError("Complaint not found")
        if current.get("status") == ComplaintStatus.RESOLVED.value and new_status != ComplaintStatus.RESOLVED:
            logger.info("Reopening resolved complaint %s as %s", current.get("complaintId"), new_status.value)

        updated = await self.repository.update(complaint_id, changes)
        if updated is None:
            raise NotFoundError("Complaint not found")

        logger.info("Complaint %s moved to %s", updated.get("complaintId"), new_status.value)
        return updated
