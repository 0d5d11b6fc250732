"""Domain errors."""


class InvalidArgumentError(ValueError):
    """Raised when a query or value object is built from invalid input."""


class CollegeNotFoundError(LookupError):
    """Raised when a college id does not exist in the catalog."""

    def __init__(self, college_id: str):
        super().__init__(f"College not found: {college_id}")
        self.college_id = college_id
