class RepositoryError(Exception):
    """Falha levantada pelos repositorios.

    As rotas nao diferenciam as subclasses: todas viram "nenhum conteudo
    encontrado" na borda HTTP. Elas existem para os logs.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ConnectionUnavailableError(RepositoryError):
    """Nenhuma conexao livre no pool."""


class StoreOperationError(RepositoryError):
    pass


class ConstraintViolationError(StoreOperationError):
    pass


class EntityNotFoundError(RepositoryError):
    pass
