"""
Общая логика хранилищ сущностей.

Каждая операция - одна единица работы: либо коммит, либо rollback и проброс
SQLAlchemyError. "Не найдено" возвращается как None / False.
"""
import logging
from contextlib import contextmanager
from typing import Any, Generic, Iterator, List, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from deal_tracker.core.clock import utcnow
from deal_tracker.core.database import Base
from deal_tracker.schemas.common import PartialUpdate

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class EntityStore(Generic[ModelT]):
    model: Type[ModelT]
    entity_name: str = "record"

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self, action: str) -> Iterator[None]:
        try:
            yield
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("%s %s failed", self.entity_name.capitalize(), action)
            raise

    def _insert(self, record: ModelT) -> ModelT:
        record.created_at = record.updated_at = utcnow()
        with self.transaction("creation"):
            self.db.add(record)
        self.db.refresh(record)
        logger.info("Created %s id=%s", self.entity_name, record.id)
        return record

    def get_by_id(self, record_id: int) -> Optional[ModelT]:
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def list_by_deal(self, property_deal_id: int) -> List[ModelT]:
        """Все записи сделки в порядке создания; сортировка для показа - в derived_views"""
        return (
            self.db.query(self.model)
            .filter(self.model.property_deal_id == property_deal_id)
            .order_by(self.model.id)
            .all()
        )

    def validate_changes(self, record: ModelT, changes: dict[str, Any]) -> None:
        """Проверки ссылок перед применением изменений (переопределяется)"""

    def update(self, record_id: int, data: PartialUpdate) -> Optional[ModelT]:
        changes = data.changes()
        # Нечего менять: запись и updated_at не трогаем
        if not changes:
            return None

        record = self.get_by_id(record_id)
        if record is None:
            return None

        self.validate_changes(record, changes)

        with self.transaction("update"):
            for field, value in changes.items():
                setattr(record, field, value)
            record.updated_at = utcnow()
        self.db.refresh(record)
        logger.info("Updated %s id=%s fields=%s", self.entity_name, record_id, sorted(changes))
        return record

    def before_delete(self, record: ModelT) -> None:
        """Зависимые изменения в той же транзакции (переопределяется)"""

    def delete(self, record_id: int) -> bool:
        record = self.get_by_id(record_id)
        if record is None:
            return False

        with self.transaction("deletion"):
            self.before_delete(record)
            self.db.delete(record)
        logger.info("Deleted %s id=%s", self.entity_name, record_id)
        return True
