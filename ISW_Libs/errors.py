"""
Exception types for image-square-wizard.

Classes:
    SquareWizardError: Base class for every error raised by the library
    ParseError: Malformed color specification (one subclass per failure kind)
    ImageProcessingError: Any failure reported by the image toolkit
    InvalidArguments: Missing paths, unsupported extensions or incompatible options
"""


class SquareWizardError(Exception):
    """Base class for image-square-wizard errors."""


class ParseError(SquareWizardError, ValueError):
    """A color specification could not be parsed."""

    def __init__(self, message: str, spec: str = ""):
        super().__init__(message)
        self.spec = spec


class EmptyColorSpec(ParseError):
    pass


class InvalidHexLength(ParseError):
    pass


class InvalidHexDigit(ParseError):
    pass


class InvalidNumber(ParseError):
    pass


class OutOfRange(ParseError):
    pass


class TooFewComponents(ParseError):
    pass


class TooManyComponents(ParseError):
    pass


class MalformedSeparator(ParseError):
    pass


class ImageProcessingError(SquareWizardError, RuntimeError):
    """The image toolkit failed; the message is the toolkit's diagnostic."""


class InvalidArguments(SquareWizardError, ValueError):
    """The requested input/output combination cannot be processed."""
