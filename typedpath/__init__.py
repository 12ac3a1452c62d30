from typedpath.paths import AbsolutePath, InvalidPathError, LocalPath, NotAbsoluteError, PathFlavor

__all__ = [
    "AbsolutePath",
    "LocalPath",
    "PathFlavor",
    "InvalidPathError",
    "NotAbsoluteError",
]
