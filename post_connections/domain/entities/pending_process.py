"""PendingProcess entity.

Records a request together with the handler that consumes its response,
so the exchange can be re-issued after a transport failure.
"""

from dataclasses import dataclass
from typing import Callable

from ..value_objects import RequestDescriptor

ResponseHandler = Callable[[bytes], None]


@dataclass(eq=False)
class PendingProcess:
    """One outstanding request awaiting delivery.

    Identity matters: a connection compares records with `is` to decide
    whether a successful attempt clears its suspended slot. The request may
    be swapped for a refreshed descriptor; the handler never changes.

    Attributes:
        request: Descriptor to send
        handler: Callable receiving the raw response bytes

    Example:
        >>> process = PendingProcess(request, lambda data: print(data))
        >>> process.refresh(request.with_body(b"token=new"))
    """

    request: RequestDescriptor
    handler: ResponseHandler

    def refresh(self, request: RequestDescriptor) -> None:
        """Replace the request with a refreshed descriptor.

        Args:
            request: Descriptor carrying updated parameters
        """
        self.request = request

    def __str__(self) -> str:
        """String representation for logging."""
        return f"PendingProcess({self.request})"
