class LedgerError(Exception):
    """Base class for errors the trip ledger reports to its caller."""

    error = "ledger_error"
    status = 400
    message = "Ledger operation failed."

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_dict(self):
        return {"error": self.error, "message": self.message}


class ValidationError(LedgerError):
    error = "validation_error"
    message = "Invalid trip."


class MissingSelection(ValidationError):
    error = "missing_selection"
    message = "Please select both schools."


class SameLocation(ValidationError):
    error = "same_location"
    message = "You cannot select the same school for both."


class UnknownRoute(ValidationError):
    error = "unknown_route"
    message = "No mileage data found for that route."


class EmptyLedger(LedgerError):
    error = "empty_ledger"
    message = "No trips to export."


class TripNotFound(LedgerError):
    error = "trip_not_found"
    status = 404
    message = "Trip not found."


class StorageError(LedgerError):
    error = "storage_error"
    status = 503
    message = "Failed to save trip data."
