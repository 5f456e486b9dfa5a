"""File helpers for material uploads.

Uploading by file requires an MD5 signature of the content and a MIME
type for the multipart part. Both can be derived from a path, an open
file object or raw bytes.
"""

import hashlib
import mimetypes
import os
from dataclasses import dataclass
from typing import IO, Any, Optional, Tuple, Union

from ..exceptions import ConfigurationError

FileInput = Union[str, "os.PathLike[str]", bytes, IO[bytes]]

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# mimetypes does not know webp on every platform
mimetypes.add_type("image/webp", ".webp")


def _file_path(file: Any) -> Optional[str]:
    """Return a filesystem path for ``file`` if it has one."""
    if isinstance(file, (str, os.PathLike)):
        return os.fspath(file)
    name = getattr(file, "name", None)
    if isinstance(name, str):
        return name
    return None


def calculate_md5(file: FileInput) -> str:
    """Calculate the MD5 hex digest of a file.

    :param file: File path, open binary file object or raw bytes
    :type file: FileInput
    :return: Lowercase hex MD5 digest
    :rtype: str
    :raises ValueError: If the object cannot be read
    """
    if isinstance(file, bytes):
        return hashlib.md5(file).hexdigest()

    if isinstance(file, (str, os.PathLike)):
        if not os.path.isfile(file):
            raise ValueError(f"Unable to calculate MD5: no such file {file!r}")
        digest = hashlib.md5()
        with open(file, "rb") as fh:
            for chunk in iter(lambda: fh.read(65536), b""):
                digest.update(chunk)
        return digest.hexdigest()

    if hasattr(file, "read"):
        position = file.tell() if hasattr(file, "tell") else None
        content = file.read()
        if position is not None and hasattr(file, "seek"):
            file.seek(position)
        if isinstance(content, str):
            content = content.encode("utf-8")
        return hashlib.md5(content).hexdigest()

    raise ValueError("Unable to calculate MD5: invalid file object")


def file_signature(file: FileInput, signature: Optional[str], setting: str) -> str:
    """Return the upload signature for ``file``, computing it when not given.

    The file is checked even when a signature is supplied, since it is
    read again when the request is built.

    :param file: File path, open binary file object or raw bytes
    :param signature: MD5 signature supplied by the caller, if any
    :param setting: Option name reported on failure, e.g. ``image_file``
    :return: MD5 hex digest
    :raises ConfigurationError: If the file is missing or unreadable
    """
    if isinstance(file, (str, os.PathLike)) and not os.path.isfile(file):
        raise ConfigurationError(f"No such file: {os.fspath(file)!r}", setting=setting)
    if signature:
        return signature
    try:
        return calculate_md5(file)
    except ValueError as e:
        raise ConfigurationError(str(e), setting=setting) from e


def detect_content_type(file: Any) -> str:
    """Guess a MIME type from the file extension.

    :param file: File path or file object with a ``name``
    :return: MIME type, ``application/octet-stream`` when unknown
    :rtype: str
    """
    path = _file_path(file)
    if not path:
        return DEFAULT_CONTENT_TYPE
    content_type, _ = mimetypes.guess_type(path)
    return content_type or DEFAULT_CONTENT_TYPE


@dataclass
class FilePart:
    """A single file field of a multipart request.

    :param file: File path, open binary file object or raw bytes
    :param content_type: MIME type of the part
    :param filename: File name reported to the server
    """

    file: FileInput
    content_type: Optional[str] = None
    filename: Optional[str] = None

    @classmethod
    def from_file(cls, file: FileInput, filename: Optional[str] = None) -> "FilePart":
        """Build a part with the MIME type sniffed from ``filename`` or the file path."""
        return cls(
            file=file,
            content_type=detect_content_type(filename or file),
            filename=filename,
        )

    def to_httpx(self) -> Tuple[str, Any, str]:
        """Return the ``(filename, content, content_type)`` tuple httpx expects.

        Paths are read eagerly so that no file handle outlives the request.
        """
        path = _file_path(self.file)
        filename = self.filename or (os.path.basename(path) if path else "upload")
        if isinstance(self.file, (str, os.PathLike)):
            with open(self.file, "rb") as fh:
                content: Any = fh.read()
        else:
            content = self.file
        return filename, content, self.content_type or DEFAULT_CONTENT_TYPE
