"""Name-derived file extension."""

from pathlib import Path


def file_extension(path: Path) -> str:
    """Return the substring after the final '.' of the file name.

    Case is preserved. Names without a dot, and dot-files such as
    ``.bashrc``, have no extension and yield an empty string. So does an
    extension that is not valid UTF-8.
    """
    name = path.name
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return ""
    try:
        ext.encode("utf-8")
    except UnicodeEncodeError:
        return ""
    return ext
