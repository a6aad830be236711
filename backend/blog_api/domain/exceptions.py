"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str, field: str = "id"):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        super().__init__(f"{entity_type} with {field} '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when a write collides with a unique value already stored."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class ArticleValidationError(Exception):
    """Raised when article input is missing required values or cannot be used."""

    def __init__(self, message: str, fields: list[str] | None = None):
        self.message = message
        self.fields = fields or []
        super().__init__(message)


class StoreError(Exception):
    """Raised when the persistence backend fails or cannot be reached.

    The original exception is chained as ``__cause__`` for logging; callers
    only ever see the operation name.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Article store failed during '{operation}'")
