"""
GPX processing errors.

All are recoverable, user-facing conditions. Messages are shown verbatim
by the admin tooling, so keep them short.
"""


class GPXError(ValueError):
    """Base GPX error."""

    default_message = "Invalid GPX file"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class GPXFormatError(GPXError):
    """Filename does not indicate a GPX document."""

    default_message = "Uploaded route file must be a .gpx"


class GPXDecodeError(GPXError):
    """Payload could not be decoded as text."""

    default_message = "Unable to decode GPX file"


class InsufficientPointsError(GPXError):
    """Fewer than two usable points."""

    default_message = "GPX did not contain enough track points"
