"""
Exceptions raised by the batch pipeline.

Validation failures are not exceptions: validators return a result and the
caller decides what to show.
"""


class ContactHasherError(Exception):
    pass


class BatchError(ContactHasherError, ValueError):
    pass


class BatchLimitExceeded(BatchError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"File exceeds maximum record limit of {limit}")


class BatchProcessingError(BatchError):
    pass
