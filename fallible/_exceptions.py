def with_note[E: BaseException](exc: E, note: str) -> E:
    """Add a note to an exception."""

    exc.add_note(note)
    return exc


class UnwrapError(ValueError):
    """Raised when unwrapping a failure whose error is not an exception.

    Attributes:
        error: The error held by the failure that was unwrapped.
    """

    def __init__(self, error: object):
        super().__init__(f"Cannot unwrap a failure: {error!r}")
        self.error = error
