"""Error types raised by the store and the transport layer."""


class StoreError(Exception):
    """Base error for TimestampStore operations."""


class NotInitializedError(StoreError):
    """Raised when the store is not servicing messages."""

    def __init__(self, message: str = "Store is not initialized"):
        super().__init__(message)


class InvalidInputError(StoreError):
    """Raised when set() is called without a value."""

    def __init__(self, message: str = "Store should not set uninitialized timestamps"):
        super().__init__(message)


class StoreStoppedError(StoreError):
    """Raised when start() is called on a store that was already stopped."""

    def __init__(self, message: str = "Store has been stopped and cannot be restarted"):
        super().__init__(message)


class DecodeError(ValueError):
    """Raised when a request body cannot be decoded into a timestamp."""


class ApplicationNotStartedError(RuntimeError):
    """Raised when the application's store is requested before start()."""

    def __init__(self, message: str = "Application not started"):
        super().__init__(message)
