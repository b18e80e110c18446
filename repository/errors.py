class RepositoryError(Exception):
    """Base class for failures signalled by a repository."""


class DuplicateIdError(RepositoryError):
    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id: {entity_id} already exists in the database")


class NotFoundError(RepositoryError):
    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id: {entity_id} does not exist")
