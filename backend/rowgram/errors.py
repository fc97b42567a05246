"""Failures raised by the rendering engine and the services around it."""


class RowgramError(Exception):
    """Base class for all rowgram failures."""


class InvalidInput(RowgramError):
    """Crew or configuration data cannot be rendered."""


class UnknownTemplate(RowgramError, KeyError):
    """A template id was named explicitly but is not registered."""

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(f"Unknown template: {template_id!r}")

    def __str__(self) -> str:
        return self.args[0]


class IconLoadFailure(RowgramError):
    """The club icon could not be read or decoded. Never fatal to a render."""


class EncodingFailure(RowgramError):
    """The drawing surface could not be serialized to PNG."""


class PersistenceFailure(RowgramError):
    """Writing a rendered image to storage failed.

    The rendered bytes ride along so callers can still hand the image back.
    """

    def __init__(self, message: str, image_bytes: bytes = b""):
        super().__init__(message)
        self.image_bytes = image_bytes
