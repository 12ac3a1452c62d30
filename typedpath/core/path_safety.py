from __future__ import annotations

from typedpath.paths.absolute import AbsolutePath
from typedpath.paths.flavor import PathFlavor
from typedpath.paths.local import LocalPath


class PathSafetyError(ValueError):
    pass


def validate_relative_addition(raw_path: str, flavor: PathFlavor | str | None = None) -> LocalPath:
    path = LocalPath(raw_path, None if flavor is None else PathFlavor(flavor))
    module = path.flavor.module

    drive, tail = module.splitdrive(path.value)
    if path.is_absolute or drive or tail.startswith(module.sep):
        raise PathSafetyError("Path must be relative")
    segments = raw_path.replace("\\", "/").split("/") if path.flavor is PathFlavor.WINDOWS else raw_path.split("/")
    if ".." in segments:
        raise PathSafetyError("Path traversal is not allowed")
    if "~" in raw_path:
        raise PathSafetyError("Home expansion is not allowed")
    if "$" in raw_path:
        raise PathSafetyError("Environment variable expansion is not allowed")
    return path


def resolve_under(root: AbsolutePath, raw_path: str) -> AbsolutePath:
    rel = validate_relative_addition(raw_path, root.flavor)
    candidate = root / rel

    if root.is_prefix_of(candidate):
        return candidate

    raise PathSafetyError("Path escapes root")
