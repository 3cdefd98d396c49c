from sqlalchemy import Column, Integer, String, DateTime, Text
from sqlalchemy.orm import relationship
from deal_tracker.core.clock import utcnow
from deal_tracker.core.database import Base


# Значения, которые предлагает интерфейс. Сервер принимает любую строку.
DEAL_STATUSES = ["Active", "Pending", "Closed", "On Hold"]


class PropertyDeal(Base):
    __tablename__ = "property_deals"

    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    # Свободный текст, не enum
    status = Column(String, nullable=False)
    description = Column(Text, nullable=False)

    # Даты
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    tasks = relationship("Task", back_populates="property_deal", passive_deletes=True)
    documents = relationship("Document", back_populates="property_deal", passive_deletes=True)
    communications = relationship("Communication", back_populates="property_deal", passive_deletes=True)
    contacts = relationship("Contact", back_populates="property_deal", passive_deletes=True)
