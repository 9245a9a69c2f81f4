"""Document reading with up-front encoding validation."""

import codecs
from pathlib import Path
from typing import Union

from ..core.errors import DocumentLoadError, EncodingError


def read_document(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read and decode a whole document.

    The complete file is decoded before anything is returned, so a file
    with a bad byte sequence produces no partial text.

    Args:
        path: Path to the document
        encoding: Expected text encoding

    Returns:
        str: Decoded document text

    Raises:
        DocumentLoadError: If no path is given or the file cannot be read
        EncodingError: If the encoding is unknown or the bytes do not decode
    """
    if path is None or str(path) == "":
        raise DocumentLoadError("Input file was not specified")

    path = Path(path)
    file_name = str(path)

    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise EncodingError(f"Unsupported encoding {encoding!r} for {file_name}",
                            file_name=file_name) from e

    if not path.is_file():
        raise DocumentLoadError(f"Input file not found: {file_name}", file_name=file_name)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise DocumentLoadError(f"Cannot read input file {file_name}: {e}",
                                file_name=file_name) from e

    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        raise EncodingError(
            f"Input file {file_name} is not valid {encoding} "
            f"(byte offset {e.start}: {e.reason})",
            file_name=file_name,
        ) from e
