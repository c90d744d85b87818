"""Ledger domain errors.

Every error is a synchronous rejection of the triggering call. The
service raises them inside the operation's transaction, so nothing the
call wrote survives.
"""


class LedgerError(Exception):
    """Base class for ledger domain errors."""

    status_code = 400

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__


class AlreadyRegistered(LedgerError):
    """Raised when registering an asset address that is already present."""

    status_code = 409


class NotFound(LedgerError):
    """Raised when an asset, transfer or snapshot does not exist."""

    status_code = 404


class InvalidInput(LedgerError):
    """Raised for empty names/symbols, null addresses and negative quantities."""

    status_code = 400


class InvalidAmount(LedgerError):
    """Raised when a transfer amount is not strictly positive."""

    status_code = 400


class Unauthorized(LedgerError):
    """Raised when a gated operation is called by a non-privileged identity."""

    status_code = 403


class NotBootstrapped(LedgerError):
    """Raised when the ledger is used before a privileged identity was stored."""

    status_code = 503
