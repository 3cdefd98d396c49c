from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from deal_tracker.core.clock import utcnow, today
from deal_tracker.core.database import Base


DOCUMENT_TYPES = ["Contract", "Report", "Financial", "Legal", "Inspection", "Insurance", "Permit", "Other"]


class Document(Base):
    __tablename__ = "documents"

    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    property_deal_id = Column(Integer, ForeignKey("property_deals.id"), nullable=False, index=True)

    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    upload_date = Column(Date, default=today, nullable=False)
    # Путь или URL, сам файл через сервис не передается
    file_path = Column(String, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    property_deal = relationship("PropertyDeal", back_populates="documents")
