class InvalidSelectionStateError(RuntimeError):
    """Raised when a selection is confirmed before a category and at least one subcategory are chosen."""
    pass


class InvalidSubcategoryError(ValueError):
    """Raised when a subcategory label does not belong to the locked category."""

    def __init__(self, label: str, category_id: str) -> None:
        super().__init__(f"Subcategory {label!r} does not belong to category {category_id!r}")
        self.label = label
        self.category_id = category_id


class CatalogUnavailableError(RuntimeError):
    """Raised when the category catalog cannot be fetched (network, file or decode errors)."""
    pass


class RegistrationNotFoundError(KeyError):
    """Raised when a registration draft id is unknown to the store."""
    pass


class SelectionSessionNotFoundError(KeyError):
    """Raised when a selection session id is unknown to the store."""
    pass
