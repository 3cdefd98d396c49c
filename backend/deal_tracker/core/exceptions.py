"""
Ошибки сервисного слоя.

"Не найдено" для get/update/delete ошибкой не считается: сервисы возвращают
None или False. Исключения поднимаются только для ошибок валидации
(неверные ссылки между сущностями). Ошибки хранилища - это SQLAlchemyError,
они пробрасываются без изменений.
"""


class DealTrackerError(Exception):
    """Базовая ошибка приложения"""


class ValidationError(DealTrackerError):
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ParentNotFound(ValidationError):
    """Указанная сделка не существует"""
    status_code = 404

    def __init__(self, property_deal_id: int):
        super().__init__(f"Property deal with id {property_deal_id} not found")
        self.property_deal_id = property_deal_id


DealNotFound = ParentNotFound


class ContactMismatch(ValidationError):
    """Контакт задачи принадлежит другой сделке"""

    def __init__(self, contact_id: int, property_deal_id: int, detail: str | None = None):
        super().__init__(
            detail or f"Contact {contact_id} does not belong to property deal {property_deal_id}"
        )
        self.contact_id = contact_id
        self.property_deal_id = property_deal_id


class ContactNotFound(ContactMismatch):
    def __init__(self, contact_id: int, property_deal_id: int):
        super().__init__(contact_id, property_deal_id, f"Contact with id {contact_id} not found")
