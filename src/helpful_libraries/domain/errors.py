"""Domain-layer error definitions."""

# ============================================================================
#                           General errors
# ============================================================================


class HelpfulLibrariesError(Exception):
    """Base class for errors raised by helpful_libraries."""


# ============================================================================
#                       Grouped record related errors
# ============================================================================


class MultiplicityViolationError(HelpfulLibrariesError):
    """Raised when a grouping expected to be one-to-one has zero or many members."""

    def __init__(self, key: object, count: int) -> None:
        super().__init__(f"Expected exactly one item for key {key!r}, found {count}.")
        self.key = key
        self.count = count
