class UsageError(Exception):
    """
    Raised for anything the user can fix by changing the command line:
    missing or malformed flags, unknown commands, unknown storage names.
    """

    pass


class UnparseableEntryName(UsageError):
    def __init__(self, raw: str):
        super().__init__(
            f"Could not parse storage entry '{raw}'; expected the form Pallet.Entry"
        )
        self.raw = raw


class UnknownStorageEntry(UsageError):
    def __init__(self, message: str, hint: str):
        super().__init__(f"{message}. {hint}")
        self.hint = hint


class InternalError(Exception):
    """
    Errors coming from the node or from decoding what it sent.
    Exceptions raised by the transport layer are wrapped in this one
    by the client's `api` decorator.
    """

    def __init__(self, status="", details=""):
        super(InternalError, self).__init__()
        self.status = status
        self.details = details

    def __str__(self):
        return f"{self.status}: {self.details}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({repr(self.status)}, {repr(self.details)})"
