from fastapi import APIRouter
from deal_tracker.api import property_deals, tasks, documents, communications, contacts, dashboard

api_router = APIRouter()
api_router.include_router(property_deals.router)
api_router.include_router(tasks.router)
api_router.include_router(documents.router)
api_router.include_router(communications.router)
api_router.include_router(contacts.router)
api_router.include_router(dashboard.router)
