class StockroomError(Exception):
    """Base class for errors raised by stockroom."""


class ConstraintViolation(StockroomError, ValueError):
    """A write was rejected by a schema constraint and rolled back."""

    def __init__(self, message, *, entity=None):
        super().__init__(message)
        self.entity = entity


class NotFoundError(StockroomError, LookupError):
    def __init__(self, entity, entity_id):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidSortField(StockroomError, ValueError):
    def __init__(self, field, allowed):
        super().__init__(
            "Cannot sort by {!r}; allowed: {}".format(field, ", ".join(sorted(allowed)))
        )
        self.field = field
        self.allowed = tuple(sorted(allowed))
