"""Exception types raised around the material schedule pipeline."""


class ScheduleError(Exception):
    """Base class for schedule generation failures."""


class MissingImageError(ScheduleError):
    """Raised when a request does not carry an image to analyse."""


class InvalidImageError(ScheduleError):
    """Raised when uploaded bytes cannot be decoded as an image."""


class UpstreamUnavailableError(ScheduleError):
    """Raised when the vision model cannot be reached or returns nothing usable."""


class MissingCredentialError(UpstreamUnavailableError):
    """Raised when no API key is configured for the vision model."""
