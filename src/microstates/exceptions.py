class MicrostatesError(Exception):
    """Base class for exceptions in the microstates package."""

    pass


class ValidationError(MicrostatesError):
    """Exception raised for out-of-range electron counts or configuration values."""

    pass


class ReportWriteError(MicrostatesError):
    """Exception raised when the microstate report cannot be written to disk."""

    pass


class InternalCodeError(MicrostatesError):
    """Exception raised for errors in the internal code."""

    pass
