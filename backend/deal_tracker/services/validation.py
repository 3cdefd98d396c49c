"""
Проверки ссылок между сущностями.

Вызываются хранилищами до записи в БД, чтобы неверная ссылка давала понятную
ошибку валидации, а не нарушение внешнего ключа.
"""
import logging

from sqlalchemy.orm import Session

from deal_tracker.core.exceptions import ContactMismatch, ContactNotFound, ParentNotFound
from deal_tracker.models.contact import Contact
from deal_tracker.models.property_deal import PropertyDeal

logger = logging.getLogger(__name__)


def deal_exists(db: Session, property_deal_id: int) -> bool:
    return db.query(PropertyDeal.id).filter(PropertyDeal.id == property_deal_id).first() is not None


def ensure_deal_exists(db: Session, property_deal_id: int) -> None:
    if not deal_exists(db, property_deal_id):
        logger.warning("Rejected: property deal %s not found", property_deal_id)
        raise ParentNotFound(property_deal_id)


def ensure_contact_in_deal(db: Session, contact_id: int | None, property_deal_id: int) -> None:
    """Контакт задачи должен существовать и принадлежать той же сделке. None - без контакта."""
    if contact_id is None:
        return

    contact = db.query(Contact).filter(Contact.id == contact_id).first()
    if contact is None:
        logger.warning("Rejected: contact %s not found", contact_id)
        raise ContactNotFound(contact_id, property_deal_id)

    if contact.property_deal_id != property_deal_id:
        logger.warning(
            "Rejected: contact %s belongs to deal %s, not %s",
            contact_id, contact.property_deal_id, property_deal_id,
        )
        raise ContactMismatch(contact_id, property_deal_id)
