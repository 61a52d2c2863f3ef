"""Operations for gl-share."""

from gl_share.operations.base import Operation, get_operation_registry, register_operation

# Import all operations to register them
from gl_share.operations.search import SearchOperation
from gl_share.operations.share import ShareOperation

__all__ = [
    "Operation",
    "register_operation",
    "get_operation_registry",
    "SearchOperation",
    "ShareOperation",
]
