from sqlalchemy import Column, String, Text
from crm_shared.models.base import Base, TimestampMixin


class Case(Base, TimestampMixin):
    """A customer case (ticket).

    ``communications``, ``activities``, ``attachments`` and ``related_cases``
    hold JSON-encoded arrays; see ``crm_shared.mapping``.
    """

    __tablename__ = "cases"

    id = Column(String, primary_key=True)
    case_number = Column(String, unique=True, nullable=False, index=True)
    account_id = Column(String, nullable=False, index=True)
    account_name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    sub_type = Column(String, nullable=False)
    status = Column(String, nullable=False, index=True)
    priority = Column(String, nullable=False)
    sla_status = Column(String, nullable=False)
    sla_deadline = Column(String, nullable=False)
    sla_time_remaining = Column(String, nullable=False)
    owner = Column(String, nullable=False)
    team = Column(String, nullable=False)
    created_date = Column(String, nullable=False)
    updated_date = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    resolution = Column(Text, nullable=False)

    communications = Column(Text)
    activities = Column(Text)
    attachments = Column(Text)
    related_cases = Column(Text)

    pending_reason = Column(String)
