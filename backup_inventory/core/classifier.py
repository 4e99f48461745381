"""File classification for backup inventory."""

from .models import FileClass

OBJECT_STORE_SEGMENT = "/objects/"
IMMUTABLE_SUFFIXES = (".pack", ".index")


def classify(path: str) -> FileClass:
    """Classify a remote file path.

    Object-store files and pack/index files are written once and never
    changed; everything else (refs, logs, locks) may be rewritten.

    Args:
        path: Full remote path of the file.

    Returns:
        FileClass.IMMUTABLE or FileClass.MUTABLE.
    """
    if OBJECT_STORE_SEGMENT in path:
        return FileClass.IMMUTABLE
    if path.endswith(IMMUTABLE_SUFFIXES):
        return FileClass.IMMUTABLE
    return FileClass.MUTABLE


def is_immutable(path: str) -> bool:
    return classify(path) is FileClass.IMMUTABLE
