from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from deal_tracker.core.database import get_db
from deal_tracker.schemas.property_deal import PropertyDealCreate, PropertyDealUpdate, PropertyDealResponse
from deal_tracker.schemas.views import PropertyDealOverview
from deal_tracker.services.deal_store import DealStore
from deal_tracker.services.derived_views import filter_by_status
from deal_tracker.services.overview import build_deal_overview

router = APIRouter(prefix="/property-deals", tags=["property-deals"])


@router.post("", response_model=PropertyDealResponse, status_code=status.HTTP_201_CREATED)
def create_property_deal(
    deal_data: PropertyDealCreate,
    db: Session = Depends(get_db)
):
    """Создать сделку"""
    return DealStore(db).create(deal_data)


@router.get("", response_model=List[PropertyDealResponse])
def get_property_deals(
    status_filter: str | None = Query(None, alias="status", description="Filter by deal status (case-insensitive)"),
    db: Session = Depends(get_db)
):
    """Получить список сделок"""
    deals = DealStore(db).get_all()
    if status_filter:
        deals = filter_by_status(deals, status_filter)
    return deals


@router.get("/{deal_id}", response_model=Optional[PropertyDealResponse])
def get_property_deal(
    deal_id: int,
    db: Session = Depends(get_db)
):
    """Получить сделку по ID (null, если не найдена)"""
    return DealStore(db).get_by_id(deal_id)


@router.put("/{deal_id}", response_model=Optional[PropertyDealResponse])
def update_property_deal(
    deal_id: int,
    deal_update: PropertyDealUpdate,
    db: Session = Depends(get_db)
):
    """Обновить переданные поля сделки"""
    return DealStore(db).update(deal_id, deal_update)


@router.delete("/{deal_id}", response_model=bool)
def delete_property_deal(
    deal_id: int,
    db: Session = Depends(get_db)
):
    """Удалить сделку вместе с задачами, документами, общениями и контактами"""
    return DealStore(db).delete(deal_id)


@router.get("/{deal_id}/overview", response_model=Optional[PropertyDealOverview])
def get_property_deal_overview(
    deal_id: int,
    db: Session = Depends(get_db)
):
    """Карточка сделки: задачи с флагом просрочки, документы, общения, контакты и счетчики"""
    return build_deal_overview(db, deal_id)
