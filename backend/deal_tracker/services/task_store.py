from typing import Any

from deal_tracker.models.task import Task
from deal_tracker.schemas.task import TaskCreate
from deal_tracker.services.base import EntityStore
from deal_tracker.services.validation import ensure_contact_in_deal, ensure_deal_exists


class TaskStore(EntityStore[Task]):
    model = Task
    entity_name = "task"

    def create(self, data: TaskCreate) -> Task:
        ensure_deal_exists(self.db, data.property_deal_id)
        ensure_contact_in_deal(self.db, data.contact_id, data.property_deal_id)
        return self._insert(Task(**data.model_dump()))

    def validate_changes(self, record: Task, changes: dict[str, Any]) -> None:
        if "contact_id" in changes:
            ensure_contact_in_deal(self.db, changes["contact_id"], record.property_deal_id)
