"""UTF-8 decoding for plain-text and unrecognised uploads."""

UNSUPPORTED_FILE_MESSAGE = (
    "Unsupported file type. Please upload .txt, .docx, .pdf, or image files."
)


class UnsupportedDocumentError(Exception):
    """Raised when an unrecognised file is not readable as UTF-8 text."""

    def __init__(self, message: str = UNSUPPORTED_FILE_MESSAGE) -> None:
        super().__init__(message)


def decode_text(file_content: bytes) -> str:
    """Decode a known plain-text file; invalid bytes become U+FFFD."""
    return file_content.decode("utf-8", errors="replace").removeprefix("\ufeff")


def read_unknown_as_text(file_content: bytes) -> str:
    """Best-effort read of a file with no recognised type.

    Raises:
        UnsupportedDocumentError: If the bytes are not valid UTF-8.
    """
    try:
        return file_content.decode("utf-8").removeprefix("\ufeff")
    except UnicodeDecodeError as e:
        raise UnsupportedDocumentError() from e
