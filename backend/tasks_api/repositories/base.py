"""
Contrato comum dos repositorios.

Cada entidade tem o seu repositorio concreto; eles compartilham apenas este
Protocol e a traducao de erros do SQLAlchemy.
"""

from typing import Optional, Protocol, Sequence, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tasks_api.core.errors import ConstraintViolationError, StoreOperationError

E = TypeVar("E", covariant=True)
K = TypeVar("K", contravariant=True)
N = TypeVar("N", contravariant=True)


class Repository(Protocol[E, K, N]):
    def read_all(self) -> Sequence[E]: ...
    def read(self, key: K) -> Optional[E]: ...
    def create(self, payload: N) -> E: ...
    def update(self, key: K, payload: N) -> E: ...
    def delete(self, key: K) -> int: ...


def translate_store_error(db: Session, exc: SQLAlchemyError) -> StoreOperationError:
    db.rollback()
    if isinstance(exc, IntegrityError):
        return ConstraintViolationError(f"Restricao violada: {exc.orig}")
    return StoreOperationError(f"Falha no banco: {exc}")
