class OperationCancelledError(Exception):
    """Raised at a suspension point once the owning token has been cancelled."""


class CancellationToken:
    """Cooperative cancellation flag shared between a caller and a task.

    The task calls ``raise_if_cancelled()`` at every suspension point; the
    caller calls ``cancel()`` to stop it at the next one.
    """

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise OperationCancelledError("Operation was cancelled")
