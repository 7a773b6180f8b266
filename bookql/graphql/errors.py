"""
GraphQL Errors

Exceptions raised by the GraphQL layer itself. Database errors are not
wrapped: they reach Strawberry as the original SQLAlchemyError.
"""

import re

# Ids are stored as signed 64-bit integers
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

ID_PATTERN = re.compile(r"-?[0-9]+")


class InvalidIdError(ValueError):
    """Raised when an ID argument is not the string form of an integer."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid book id: {value!r}")


def parse_id(value: str) -> int:
    """
    Convert a GraphQL ID argument to a store identifier.

    Only an optional minus sign followed by ASCII digits is accepted, so
    forms int() would tolerate (surrounding whitespace, underscores) are
    rejected rather than resolving to some other book.

    Raises:
        InvalidIdError: If the value is not an integer literal or does not
            fit in a signed 64-bit integer
    """
    if not isinstance(value, str) or ID_PATTERN.fullmatch(value) is None:
        raise InvalidIdError(value)

    book_id = int(value)
    if not ID_MIN <= book_id <= ID_MAX:
        raise InvalidIdError(value)

    return book_id
