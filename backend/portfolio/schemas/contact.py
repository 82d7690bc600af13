"""Contact Schemas - public form body, the stored submission, and the ack.

Invariants:
    - Clients never supply ip_address, user_agent or processed; the route
      stamps the first two from the request
"""

from pydantic import BaseModel, Field

from portfolio.schemas.base import RecordSchema, WriteSchema

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ContactSubmissionCreate(WriteSchema):
    first_name: str = Field(min_length=1, max_length=200)
    last_name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=320, pattern=EMAIL_PATTERN)
    subject: str = Field(min_length=1, max_length=500)
    message: str = Field(min_length=1, max_length=10_000)


class ContactSubmissionRecord(RecordSchema):
    first_name: str
    last_name: str
    email: str
    subject: str
    message: str
    ip_address: str | None
    user_agent: str | None
    processed: bool


class ContactAck(BaseModel):
    message: str
    id: str
