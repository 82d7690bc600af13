"""Contact - inbound contact form submissions.

Invariants:
    - POST stamps the caller's IP address and User-Agent server-side
    - POST acknowledges with {message, id}, never the full record
    - Submissions are not editable; marking processed is the only mutation

Design Decisions:
    - No email delivery: submissions are stored for later review
"""

from fastapi import APIRouter, Depends, Request, status

from portfolio.api.dependencies import get_contact_repository
from portfolio.core.errors import RecordNotFoundError
from portfolio.repositories import ContactSubmissionRepository
from portfolio.schemas.contact import (
    ContactAck, ContactSubmissionCreate, ContactSubmissionRecord,
)

router = APIRouter(prefix="/contact", tags=["contact"])

NOT_FOUND = "Contact submission"


def _client_ip(request: Request) -> str | None:
    return request.client.host if request.client else None


@router.post(
    "", response_model=ContactAck, status_code=status.HTTP_201_CREATED,
)
async def submit_contact(
    body: ContactSubmissionCreate,
    request: Request,
    repo: ContactSubmissionRepository = Depends(get_contact_repository),
):
    """Store a contact form submission."""
    record = body.to_record()
    record["ip_address"] = _client_ip(request)
    record["user_agent"] = request.headers.get("user-agent")
    submission = await repo.create(record)
    return ContactAck(
        message="Contact form submitted successfully", id=submission.id,
    )


@router.get("", response_model=list[ContactSubmissionRecord])
async def list_contact_submissions(
    repo: ContactSubmissionRepository = Depends(get_contact_repository),
):
    """All submissions, newest first."""
    return await repo.list()


@router.get("/{submission_id}", response_model=ContactSubmissionRecord)
async def get_contact_submission(
    submission_id: str,
    repo: ContactSubmissionRepository = Depends(get_contact_repository),
):
    submission = await repo.get_by_id(submission_id)
    if submission is None:
        raise RecordNotFoundError(NOT_FOUND)
    return submission


@router.patch(
    "/{submission_id}/processed", status_code=status.HTTP_204_NO_CONTENT,
)
async def mark_contact_processed(
    submission_id: str,
    repo: ContactSubmissionRepository = Depends(get_contact_repository),
):
    if not await repo.mark_processed(submission_id):
        raise RecordNotFoundError(NOT_FOUND)
