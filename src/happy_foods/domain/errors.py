"""Domain errors."""


class ProductNotFoundError(LookupError):
    """Raised when the food database has no product for a query."""

    def __init__(self, query: str) -> None:
        super().__init__("No product found for that query")
        self.query = query


class EmptyQueryError(ValueError):
    """Raised when a food query is blank."""

    def __init__(self) -> None:
        super().__init__("Missing 'query'")
