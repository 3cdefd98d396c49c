from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from deal_tracker.core.clock import utcnow
from deal_tracker.core.database import Base


CONTACT_ROLES = [
    "Lawyer",
    "Architect",
    "Banker",
    "Inspector",
    "Permit Officer",
    "Contractor",
    "Real Estate Agent",
    "Appraiser",
    "Insurance Agent",
    "Other",
]


class Contact(Base):
    __tablename__ = "contacts"

    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    property_deal_id = Column(Integer, ForeignKey("property_deals.id"), nullable=False, index=True)

    name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    organization = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    property_deal = relationship("PropertyDeal", back_populates="contacts")
    tasks = relationship("Task", back_populates="contact", passive_deletes=True)
