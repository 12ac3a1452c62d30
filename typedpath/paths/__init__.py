from typedpath.paths.flavor import PathFlavor
from typedpath.paths.local import InvalidPathError, LocalPath
from typedpath.paths.absolute import AbsolutePath, NotAbsoluteError

__all__ = [
    "PathFlavor",
    "LocalPath",
    "AbsolutePath",
    "InvalidPathError",
    "NotAbsoluteError",
]
