"""Error kinds raised by the codec, parser and lookup helpers.

Every codec error is a ``ValueError`` so callers that only care about
"bad input" can keep catching that.
"""


class CodecError(ValueError):
    """Base class for all code/identifier failures."""


class InvalidIdentifierFormatError(CodecError):
    def __init__(self, value=None):
        self.value = value
        super().__init__("Invalid UUID format")


class InvalidLengthError(CodecError):
    def __init__(self, kind: str, expected: int, actual: int):
        self.kind = kind
        self.expected = expected
        self.actual = actual
        super().__init__(f"Invalid {kind} length. Expected {expected} characters.")


class InvalidCharacterError(CodecError):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid base62 character: {char!r} at position {position}")


class ChecksumMismatchError(CodecError):
    def __init__(self, code: str):
        self.code = code
        super().__init__("Checksum validation failed.")


class LookupMissError(CodecError):
    def __init__(self, kind: str, code: str):
        self.kind = kind
        self.code = code
        super().__init__(f"UUID not found for {kind}: {code}")


class InvalidLookupResultError(CodecError):
    def __init__(self, code: str, result):
        self.code = code
        self.result = result
        super().__init__("Invalid UUID returned from database lookup")


class InvalidPayloadError(CodecError):
    """Raised by the parser; carries the failed ValidationResult when there is one."""

    def __init__(self, message: str, validation=None):
        self.validation = validation
        super().__init__(message)


class QRGenerationError(Exception):
    """The QR renderer failed. Not a codec error: the input was fine."""
