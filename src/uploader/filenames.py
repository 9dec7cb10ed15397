"""Reduce client-supplied filenames to a basename that stays inside the store."""

import posixpath

from uploader.errors import InvalidFilename

_REJECTED_BASENAMES = {"", ".", "..", "/"}


def sanitize_filename(filename: str) -> str:
    """
    Return the final path component of ``filename`` after cleaning it.

    Backslashes are treated as separators so that names sent by Windows
    browsers (``C:\\Users\\me\\report.txt``) lose their directories too.

    :param filename: The filename as sent in the multipart part header.
    :raises InvalidFilename: If nothing usable is left, e.g. ``"."``, ``"/"``
        or ``".."``, or the name holds a NUL byte.
    """
    if "\x00" in filename:
        raise InvalidFilename(filename)

    cleaned = posixpath.normpath(filename.replace("\\", "/"))
    basename = posixpath.basename(cleaned)
    if basename in _REJECTED_BASENAMES:
        raise InvalidFilename(filename)
    return basename
