from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tasks_api.core.errors import EntityNotFoundError
from tasks_api.database.deps import get_db
from tasks_api.repositories.user_tasks import UserTaskRepository
from tasks_api.schemas.user_task import UserTaskInput, UserTaskOut

router = APIRouter(
    prefix="/assignments",
    tags=["assignments"]
)


def get_user_task_repository(db: Session = Depends(get_db)) -> UserTaskRepository:
    return UserTaskRepository(db)


@router.get("", response_model=list[UserTaskOut])
def get_user_tasks(repository: UserTaskRepository = Depends(get_user_task_repository)):
    return repository.read_all()


@router.get("/{user_id}/{task_id}", response_model=UserTaskOut)
def get_user_task(
    user_id: int,
    task_id: int,
    repository: UserTaskRepository = Depends(get_user_task_repository)
):
    user_task = repository.read((user_id, task_id))
    if user_task is None:
        raise EntityNotFoundError(f"Atribuicao {(user_id, task_id)} nao encontrada")
    return user_task


@router.post("", response_model=UserTaskOut)
def create_user_task(
    user_task: UserTaskInput,
    repository: UserTaskRepository = Depends(get_user_task_repository)
):
    return repository.create(user_task)


@router.put("/{user_id}/{task_id}", response_model=UserTaskOut)
def update_user_task(
    user_id: int,
    task_id: int,
    user_task: UserTaskInput,
    repository: UserTaskRepository = Depends(get_user_task_repository)
):
    return repository.update((user_id, task_id), user_task)


@router.delete("/{user_id}/{task_id}", response_model=int)
def delete_user_task(
    user_id: int,
    task_id: int,
    repository: UserTaskRepository = Depends(get_user_task_repository)
):
    deleted = repository.delete((user_id, task_id))
    if not deleted:
        raise EntityNotFoundError(f"Atribuicao {(user_id, task_id)} nao encontrada")
    return deleted
