from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from deal_tracker.core.clock import utcnow
from deal_tracker.core.database import Base


COMMUNICATION_TYPES = ["Email", "Phone Call", "Meeting Note", "Text Message", "Letter", "Video Call", "Other"]


class Communication(Base):
    __tablename__ = "communications"

    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    property_deal_id = Column(Integer, ForeignKey("property_deals.id"), nullable=False, index=True)

    # Дата самого общения, не путать с created_at
    date = Column(Date, nullable=False)
    type = Column(String, nullable=False)
    subject = Column(String, nullable=False)
    notes = Column(Text, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    property_deal = relationship("PropertyDeal", back_populates="communications")
