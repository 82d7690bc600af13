"""Contact Submission Repository - write-mostly event log, newest first.

Invariants:
    - Submissions are never edited; mark_processed is the only mutation
    - No update/delete surface beyond what BaseRepository offers internally
"""

import logging

from sqlalchemy import update

from portfolio.infrastructure.database import translate_store_errors
from portfolio.models.contact_submission import ContactSubmission
from portfolio.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ContactSubmissionRepository(BaseRepository[ContactSubmission]):
    model = ContactSubmission
    entity = "contact submission"
    order_by = (ContactSubmission.created_at.desc(),)

    async def mark_processed(self, record_id: str) -> bool:
        """Set processed=True. False when the submission does not exist."""
        stmt = (
            update(ContactSubmission)
            .where(ContactSubmission.id == record_id)
            .values(processed=True)
            .execution_options(synchronize_session=False)
        )
        async with translate_store_errors(self.db, "update", self.entity):
            result = await self.db.execute(stmt)
            await self.db.commit()
        marked = result.rowcount > 0
        if marked:
            logger.info(
                f"Marked contact submission {record_id} processed",
                extra={"entity": self.entity, "record_id": record_id, "operation": "update"},
            )
        return marked
