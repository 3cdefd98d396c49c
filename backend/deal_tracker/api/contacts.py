from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from deal_tracker.core.database import get_db
from deal_tracker.schemas.contact import ContactCreate, ContactUpdate, ContactResponse
from deal_tracker.services.contact_store import ContactStore

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
def create_contact(
    contact_data: ContactCreate,
    db: Session = Depends(get_db)
):
    """Добавить контакт"""
    return ContactStore(db).create(contact_data)


@router.get("", response_model=List[ContactResponse])
def get_contacts_by_property_deal(
    property_deal_id: int = Query(..., description="Property deal ID"),
    db: Session = Depends(get_db)
):
    """Контакты сделки"""
    return ContactStore(db).list_by_deal(property_deal_id)


@router.get("/{contact_id}", response_model=Optional[ContactResponse])
def get_contact(
    contact_id: int,
    db: Session = Depends(get_db)
):
    return ContactStore(db).get_by_id(contact_id)


@router.put("/{contact_id}", response_model=Optional[ContactResponse])
def update_contact(
    contact_id: int,
    contact_update: ContactUpdate,
    db: Session = Depends(get_db)
):
    """Обновить контакт"""
    return ContactStore(db).update(contact_id, contact_update)


@router.delete("/{contact_id}", response_model=bool)
def delete_contact(
    contact_id: int,
    db: Session = Depends(get_db)
):
    return ContactStore(db).delete(contact_id)
