from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.responses import FileResponse
from src.api.dependencies import get_complaint_service, get_status_handler
from src.core.config import MAX_UPLOAD_BYTES
from src.db.models import ComplaintEnvelope, ComplaintResponse, StatusUpdateRequest
from src.services.complaint_service import ComplaintService, UploadedFile
from src.services.status_service import StatusTransitionHandler

router = APIRouter(prefix="/complaints", tags=["complaints"])


async def _read_upload(attachment: Optional[UploadFile]) -> Optional[UploadedFile]:
    if attachment is None or not attachment.filename:
        return None
    # One byte past the limit is enough to know the file is too large.
    data = await attachment.read(MAX_UPLOAD_BYTES + 1)
    await attachment.close()
    return UploadedFile(attachment.filename, attachment.content_type, data)


@router.post("", response_model=ComplaintEnvelope, status_code=status.HTTP_201_CREATED)
async def submit_complaint(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    createdByEmail: Optional[str] = Form(None),
    attachment: Optional[UploadFile] = File(None),
    complaint_service: ComplaintService = Depends(get_complaint_service)
):
    upload = await _read_upload(attachment)
    complaint = await complaint_service.submit(title, description, category, createdByEmail, upload)
    return {"message": "Complaint submitted successfully", "complaint": complaint}


@router.get("", response_model=List[ComplaintResponse])
async def list_complaints(
    role: Optional[str] = Query(None),
    email: Optional[str] = Query(None),
    complaint_service: ComplaintService = Depends(get_complaint_service)
):
    return await complaint_service.list_complaints(role, email)


@router.get("/attachment/{filename}")
async def get_attachment(
    filename: str,
    complaint_service: ComplaintService = Depends(get_complaint_service)
):
    path, content_type = await complaint_service.open_attachment(filename)
    return FileResponse(path, media_type=content_type)


@router.get("/{complaint_id}", response_model=ComplaintResponse)
async def get_complaint(
    complaint_id: str,
    complaint_service: ComplaintService = Depends(get_complaint_service)
):
    return await complaint_service.get_complaint(complaint_id)


@router.put("/{complaint_id}/status", response_model=ComplaintEnvelope)
async def update_status(
    complaint_id: str,
    payload: StatusUpdateRequest,
    status_handler: StatusTransitionHandler = Depends(get_status_handler)
):
    complaint = await status_handler.apply_transition(
        complaint_id, payload.status, payload.adminResponse
    )
    return {"message": "Complaint status updated successfully", "complaint": complaint}
