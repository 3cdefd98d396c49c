from datetime import date, datetime, timezone


def utcnow() -> datetime:
    """Текущее время в UTC без tzinfo (колонки DateTime хранятся naive)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def today() -> date:
    """Календарная дата по UTC, та же шкала, что у created_at"""
    return utcnow().date()
