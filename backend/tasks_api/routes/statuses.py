from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tasks_api.core.errors import EntityNotFoundError
from tasks_api.database.deps import get_db
from tasks_api.repositories.task_statuses import TaskStatusRepository
from tasks_api.schemas.task_status import TaskStatusInput, TaskStatusOut

router = APIRouter(prefix="/tasks_statuses", tags=["Task statuses"])


def get_task_status_repository(db: Session = Depends(get_db)) -> TaskStatusRepository:
    return TaskStatusRepository(db)


@router.get("", response_model=list[TaskStatusOut])
def get_task_statuses(repository: TaskStatusRepository = Depends(get_task_status_repository)):
    return repository.read_all()


@router.get("/{status_id}", response_model=TaskStatusOut)
def get_task_status(
    status_id: int,
    repository: TaskStatusRepository = Depends(get_task_status_repository)
):
    task_status = repository.read(status_id)
    if task_status is None:
        raise EntityNotFoundError(f"Status {status_id} nao encontrado")
    return task_status


@router.post("", response_model=TaskStatusOut)
def create_task_status(
    task_status: TaskStatusInput,
    repository: TaskStatusRepository = Depends(get_task_status_repository)
):
    return repository.create(task_status)


@router.put("/{status_id}", response_model=TaskStatusOut)
def update_task_status(
    status_id: int,
    task_status: TaskStatusInput,
    repository: TaskStatusRepository = Depends(get_task_status_repository)
):
    return repository.update(status_id, task_status)


@router.delete("/{status_id}", response_model=int)
def delete_task_status(
    status_id: int,
    repository: TaskStatusRepository = Depends(get_task_status_repository)
):
    deleted = repository.delete(status_id)
    if not deleted:
        raise EntityNotFoundError(f"Status {status_id} nao encontrado")
    return deleted
