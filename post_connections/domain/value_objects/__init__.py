"""Value Objects for the connection domain.

Value Objects are immutable domain primitives that:
- Have no identity (equality based on value, not reference)
- Are immutable (cannot be changed after creation)
- Validate their invariants at construction
"""

from .request_descriptor import RequestDescriptor
from .connection_error import ConnectionErrorKind
from .process_outcome import ProcessOutcome

__all__ = [
    "RequestDescriptor",
    "ConnectionErrorKind",
    "ProcessOutcome",
]
