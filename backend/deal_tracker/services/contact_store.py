import logging

from deal_tracker.core.clock import utcnow
from deal_tracker.models.contact import Contact
from deal_tracker.models.task import Task
from deal_tracker.schemas.contact import ContactCreate
from deal_tracker.services.base import EntityStore
from deal_tracker.services.validation import ensure_deal_exists

logger = logging.getLogger(__name__)


class ContactStore(EntityStore[Contact]):
    model = Contact
    entity_name = "contact"

    def create(self, data: ContactCreate) -> Contact:
        ensure_deal_exists(self.db, data.property_deal_id)
        return self._insert(Contact(**data.model_dump()))

    def before_delete(self, record: Contact) -> None:
        # Задачи остаются, но без назначенного контакта
        unassigned = (
            self.db.query(Task)
            .filter(Task.contact_id == record.id)
            .update({Task.contact_id: None, Task.updated_at: utcnow()}, synchronize_session="fetch")
        )
        if unassigned:
            logger.info("Unassigned contact id=%s from %s task(s)", record.id, unassigned)
