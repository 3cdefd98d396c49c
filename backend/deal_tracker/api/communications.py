from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from deal_tracker.core.database import get_db
from deal_tracker.schemas.communication import CommunicationCreate, CommunicationUpdate, CommunicationResponse
from deal_tracker.services.communication_store import CommunicationStore

router = APIRouter(prefix="/communications", tags=["communications"])


@router.post("", response_model=CommunicationResponse, status_code=status.HTTP_201_CREATED)
def create_communication(
    communication_data: CommunicationCreate,
    db: Session = Depends(get_db)
):
    """Записать общение"""
    return CommunicationStore(db).create(communication_data)


@router.get("", response_model=List[CommunicationResponse])
def get_communications_by_property_deal(
    property_deal_id: int = Query(..., description="Property deal ID"),
    db: Session = Depends(get_db)
):
    """История общения по сделке"""
    return CommunicationStore(db).list_by_deal(property_deal_id)


@router.get("/{communication_id}", response_model=Optional[CommunicationResponse])
def get_communication(
    communication_id: int,
    db: Session = Depends(get_db)
):
    return CommunicationStore(db).get_by_id(communication_id)


@router.put("/{communication_id}", response_model=Optional[CommunicationResponse])
def update_communication(
    communication_id: int,
    communication_update: CommunicationUpdate,
    db: Session = Depends(get_db)
):
    """Обновить запись общения"""
    return CommunicationStore(db).update(communication_id, communication_update)


@router.delete("/{communication_id}", response_model=bool)
def delete_communication(
    communication_id: int,
    db: Session = Depends(get_db)
):
    return CommunicationStore(db).delete(communication_id)
