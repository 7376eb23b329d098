class StoreError(Exception):
    """Base class for store failures."""


class StoreUnavailable(StoreError):
    """Backend I/O failure: connection loss, constraint violation, driver error."""


class DuckNotFound(StoreError):
    """Raised when no duck has the requested id."""

    def __init__(self, duck_id: int):
        self.duck_id = duck_id
        super().__init__(f"duck '{duck_id}' not found")
