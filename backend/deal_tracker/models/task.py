from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from deal_tracker.core.clock import utcnow
from deal_tracker.core.database import Base


TASK_STATUSES = ["To Do", "In Progress", "Completed", "Blocked"]

# Статус, по которому задача считается выполненной (сравнение без учета регистра)
COMPLETED_STATUS = "completed"


class Task(Base):
    __tablename__ = "tasks"

    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    property_deal_id = Column(Integer, ForeignKey("property_deals.id"), nullable=False, index=True)
    # Контакт должен принадлежать той же сделке, проверяется в сервисе
    contact_id = Column(Integer, ForeignKey("contacts.id", ondelete="SET NULL"), nullable=True)

    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    due_date = Column(Date, nullable=False)
    status = Column(String, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    property_deal = relationship("PropertyDeal", back_populates="tasks")
    contact = relationship("Contact", back_populates="tasks")
