"""Domain layer errors.

Each error kind carries a fixed marker in its message ("not provided",
"not found", "not authorized") so callers can match on the category.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class MissingParameterError(DomainError):
    """Raised when a required query parameter is absent or blank."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"{parameter} not provided")


class NotAuthorizedError(DomainError):
    """Raised when an operation needs an authenticated caller and has none."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"You are not authorized to {operation}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
