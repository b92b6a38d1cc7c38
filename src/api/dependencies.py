from fastapi import Depends
from src.core.config import UPLOAD_DIR
from src.db.mongo import get_db
from src.services.account_repository import AccountRepository
from src.services.attachment_store import AttachmentStore
from src.services.auth_service import AuthService
from src.services.complaint_repository import ComplaintRepository
from src.services.complaint_service import ComplaintService
from src.services.status_service import StatusTransitionHandler


async def get_complaint_repository(db=Depends(get_db)) -> ComplaintRepository:
    return ComplaintRepository(db)


async def get_account_repository(db=Depends(get_db)) -> AccountRepository:
    return AccountRepository(db)


def get_attachment_store() -> AttachmentStore:
    return AttachmentStore(UPLOAD_DIR)


def get_auth_service(
    accounts: AccountRepository = Depends(get_account_repository)
) -> AuthService:
    return AuthService(accounts)


def get_complaint_service(
    repository: ComplaintRepository = Depends(get_complaint_repository),
    attachments: AttachmentStore = Depends(get_attachment_store)
) -> ComplaintService:
    return ComplaintService(repository, attachments)


def get_status_handler(
    repository: ComplaintRepository = Depends(get_complaint_repository)
) -> StatusTransitionHandler:
    return StatusTransitionHandler(repository)
