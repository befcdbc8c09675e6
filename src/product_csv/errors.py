"""Errors raised by the product catalog store."""

class CatalogError(Exception):
    """Base error for this package."""


class DuplicateKeyError(CatalogError):
    """Raised when adding a product whose id is already in the file."""

    def __init__(self, key) -> None:
        super().__init__(f"product with id {key!r} already exists")
        self.key = key


class NotFoundError(CatalogError):
    """Raised when deleting a product whose id is not in the file."""

    def __init__(self, key) -> None:
        super().__init__(f"product with id {key!r} not found")
        self.key = key
