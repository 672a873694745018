import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tasks_api.core.errors import EntityNotFoundError, RepositoryError
from tasks_api.database.session import acquire_connection
from tasks_api.models.user_task import UserTask
from tasks_api.repositories.base import translate_store_error
from tasks_api.schemas.user_task import UserTaskInput

logger = logging.getLogger("uvicorn.error")

UserTaskKey = tuple[int, int]


class UserTaskRepository:
    """CRUD de ``user_tasks``, chave composta ``(user_id, task_id)``."""

    def __init__(self, db: Session):
        self.db = db

    def _by_key(self, key: UserTaskKey):
        user_id, task_id = key
        return self.db.query(UserTask).filter(
            UserTask.user_id == user_id,
            UserTask.task_id == task_id,
        )

    def read_all(self) -> list[UserTask]:
        try:
            acquire_connection(self.db)
            return self.db.query(UserTask).all()
        except (RepositoryError, SQLAlchemyError) as exc:
            logger.warning("Falha ao listar atribuicoes: %s", exc)
            return []

    def read(self, key: UserTaskKey) -> Optional[UserTask]:
        try:
            acquire_connection(self.db)
            return self._by_key(key).first()
        except (RepositoryError, SQLAlchemyError) as exc:
            logger.warning("Falha ao ler atribuicao %s: %s", key, exc)
            return None

    def create(self, payload: UserTaskInput) -> UserTask:
        acquire_connection(self.db)
        user_task = UserTask(
            user_id=payload.user_id,
            task_id=payload.task_id,
            task_status_id=payload.task_status_id,
        )
        try:
            self.db.add(user_task)
            self.db.commit()
            self.db.refresh(user_task)
        except SQLAlchemyError as exc:
            raise translate_store_error(self.db, exc) from exc
        return user_task

    def update(self, key: UserTaskKey, payload: UserTaskInput) -> UserTask:
        # user_id/task_id do corpo sao gravados como enviados, mesmo que
        # difiram da chave usada para localizar a linha.
        acquire_connection(self.db)
        try:
            updated = self._by_key(key).update(
                {
                    UserTask.user_id: payload.user_id,
                    UserTask.task_id: payload.task_id,
                    UserTask.task_status_id: payload.task_status_id,
                },
                synchronize_session=False,
            )
            if not updated:
                self.db.rollback()
                raise EntityNotFoundError(f"Atribuicao {key} nao encontrada")
            self.db.commit()
            user_task = self._by_key((payload.user_id, payload.task_id)).first()
        except SQLAlchemyError as exc:
            raise translate_store_error(self.db, exc) from exc

        if user_task is None:
            raise EntityNotFoundError(f"Atribuicao {key} nao encontrada apos atualizacao")
        return user_task

    def delete(self, key: UserTaskKey) -> int:
        acquire_connection(self.db)
        try:
            deleted = self._by_key(key).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise translate_store_error(self.db, exc) from exc
        return deleted
