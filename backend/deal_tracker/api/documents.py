from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from deal_tracker.core.database import get_db
from deal_tracker.schemas.document import DocumentCreate, DocumentUpdate, DocumentResponse
from deal_tracker.services.document_store import DocumentStore

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
def create_document(
    document_data: DocumentCreate,
    db: Session = Depends(get_db)
):
    """Добавить документ (дата загрузки - сегодня)"""
    return DocumentStore(db).create(document_data)


@router.get("", response_model=List[DocumentResponse])
def get_documents_by_property_deal(
    property_deal_id: int = Query(..., description="Property deal ID"),
    db: Session = Depends(get_db)
):
    """Документы сделки"""
    return DocumentStore(db).list_by_deal(property_deal_id)


@router.get("/{document_id}", response_model=Optional[DocumentResponse])
def get_document(
    document_id: int,
    db: Session = Depends(get_db)
):
    return DocumentStore(db).get_by_id(document_id)


@router.put("/{document_id}", response_model=Optional[DocumentResponse])
def update_document(
    document_id: int,
    document_update: DocumentUpdate,
    db: Session = Depends(get_db)
):
    """Обновить документ"""
    return DocumentStore(db).update(document_id, document_update)


@router.delete("/{document_id}", response_model=bool)
def delete_document(
    document_id: int,
    db: Session = Depends(get_db)
):
    return DocumentStore(db).delete(document_id)
