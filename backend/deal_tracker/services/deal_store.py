import logging
from typing import List

from deal_tracker.models.communication import Communication
from deal_tracker.models.contact import Contact
from deal_tracker.models.document import Document
from deal_tracker.models.property_deal import PropertyDeal
from deal_tracker.models.task import Task
from deal_tracker.schemas.property_deal import PropertyDealCreate
from deal_tracker.services.base import EntityStore

logger = logging.getLogger(__name__)


class DealStore(EntityStore[PropertyDeal]):
    model = PropertyDeal
    entity_name = "property deal"

    def create(self, data: PropertyDealCreate) -> PropertyDeal:
        return self._insert(PropertyDeal(**data.model_dump()))

    def get_all(self) -> List[PropertyDeal]:
        return self.db.query(PropertyDeal).order_by(PropertyDeal.id).all()

    def delete(self, record_id: int) -> bool:
        """
        Удаление сделки вместе со всеми дочерними записями.

        Задачи удаляются первыми (они ссылаются на контакты), затем документы,
        общения, контакты и сама сделка. Все в одной транзакции.
        """
        if self.get_by_id(record_id) is None:
            return False

        with self.transaction("deletion"):
            removed = {}
            for child in (Task, Document, Communication, Contact):
                removed[child.__tablename__] = (
                    self.db.query(child)
                    .filter(child.property_deal_id == record_id)
                    .delete(synchronize_session=False)
                )
            deleted = (
                self.db.query(PropertyDeal)
                .filter(PropertyDeal.id == record_id)
                .delete(synchronize_session=False)
            )
        logger.info("Deleted property deal id=%s with children %s", record_id, removed)
        return deleted > 0
