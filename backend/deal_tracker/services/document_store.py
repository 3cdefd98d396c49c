from deal_tracker.core.clock import today
from deal_tracker.models.document import Document
from deal_tracker.schemas.document import DocumentCreate
from deal_tracker.services.base import EntityStore
from deal_tracker.services.validation import ensure_deal_exists


class DocumentStore(EntityStore[Document]):
    model = Document
    entity_name = "document"

    def create(self, data: DocumentCreate) -> Document:
        ensure_deal_exists(self.db, data.property_deal_id)
        # Дата загрузки - всегда день создания записи
        return self._insert(Document(**data.model_dump(), upload_date=today()))
