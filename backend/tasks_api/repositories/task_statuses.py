import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tasks_api.core.errors import EntityNotFoundError, RepositoryError
from tasks_api.database.session import acquire_connection
from tasks_api.models.task_status import TaskStatus
from tasks_api.repositories.base import translate_store_error
from tasks_api.schemas.task_status import TaskStatusInput

logger = logging.getLogger("uvicorn.error")


class TaskStatusRepository:
    def __init__(self, db: Session):
        self.db = db

    def _by_id(self, status_id: int):
        return self.db.query(TaskStatus).filter(TaskStatus.id == status_id)

    def read_all(self) -> list[TaskStatus]:
        try:
            acquire_connection(self.db)
            return self.db.query(TaskStatus).all()
        except (RepositoryError, SQLAlchemyError) as exc:
            logger.warning("Falha ao listar status: %s", exc)
            return []

    def read(self, status_id: int) -> Optional[TaskStatus]:
        try:
            acquire_connection(self.db)
            return self._by_id(status_id).first()
        except (RepositoryError, SQLAlchemyError) as exc:
            logger.warning("Falha ao ler status %s: %s", status_id, exc)
            return None

    def create(self, payload: TaskStatusInput) -> TaskStatus:
        acquire_connection(self.db)
        task_status = TaskStatus(status_name=payload.status_name)
        try:
            self.db.add(task_status)
            self.db.commit()
            self.db.refresh(task_status)
        except SQLAlchemyError as exc:
            raise translate_store_error(self.db, exc) from exc
        return task_status

    def update(self, status_id: int, payload: TaskStatusInput) -> TaskStatus:
        acquire_connection(self.db)
        try:
            updated = self._by_id(status_id).update(
                {TaskStatus.status_name: payload.status_name},
                synchronize_session=False,
            )
            if not updated:
                self.db.rollback()
                raise EntityNotFoundError(f"Status {status_id} nao encontrado")
            self.db.commit()
            task_status = self._by_id(status_id).first()
        except SQLAlchemyError as exc:
            raise translate_store_error(self.db, exc) from exc

        if task_status is None:
            raise EntityNotFoundError(f"Status {status_id} nao encontrado apos atualizacao")
        return task_status

    def delete(self, status_id: int) -> int:
        acquire_connection(self.db)
        try:
            deleted = self._by_id(status_id).delete(synchronize_session=False)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise translate_store_error(self.db, exc) from exc
        return deleted
