from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from deal_tracker.core.database import get_db
from deal_tracker.schemas.task import TaskCreate, TaskUpdate, TaskResponse
from deal_tracker.services.task_store import TaskStore

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    task_data: TaskCreate,
    db: Session = Depends(get_db)
):
    """Создать задачу (контакт, если указан, должен быть из той же сделки)"""
    return TaskStore(db).create(task_data)


@router.get("", response_model=List[TaskResponse])
def get_tasks_by_property_deal(
    property_deal_id: int = Query(..., description="Property deal ID"),
    db: Session = Depends(get_db)
):
    """Задачи сделки"""
    return TaskStore(db).list_by_deal(property_deal_id)


@router.get("/{task_id}", response_model=Optional[TaskResponse])
def get_task(
    task_id: int,
    db: Session = Depends(get_db)
):
    return TaskStore(db).get_by_id(task_id)


@router.put("/{task_id}", response_model=Optional[TaskResponse])
def update_task(
    task_id: int,
    task_update: TaskUpdate,
    db: Session = Depends(get_db)
):
    """Обновить задачу"""
    return TaskStore(db).update(task_id, task_update)


@router.delete("/{task_id}", response_model=bool)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db)
):
    return TaskStore(db).delete(task_id)
