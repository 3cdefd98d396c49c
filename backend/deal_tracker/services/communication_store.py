from deal_tracker.models.communication import Communication
from deal_tracker.schemas.communication import CommunicationCreate
from deal_tracker.services.base import EntityStore
from deal_tracker.services.validation import ensure_deal_exists


class CommunicationStore(EntityStore[Communication]):
    model = Communication
    entity_name = "communication"

    def create(self, data: CommunicationCreate) -> Communication:
        ensure_deal_exists(self.db, data.property_deal_id)
        return self._insert(Communication(**data.model_dump()))
