from __future__ import annotations

import os
from dataclasses import dataclass

from typedpath.core.config import get_settings
from typedpath.paths.flavor import PathFlavor


class InvalidPathError(ValueError):
    pass


def _coerce_raw(value: str | os.PathLike[str]) -> str:
    raw = value if isinstance(value, str) else os.fspath(value)
    if not isinstance(raw, str):
        raise TypeError(f"Expected a str path, got {type(raw).__name__}")
    if "\x00" in raw:
        raise InvalidPathError(f"Path {raw!r} contains a NUL character")
    return raw


@dataclass(frozen=True, slots=True)
class LocalPath:
    """A normalized path that may be relative or absolute.

    The stored value is the flavor's normal form: canonical separators, no
    duplicate separators, no ``.`` segments, ``..`` collapsed where a preceding
    segment exists and no trailing separator. Equality compares that string
    case-sensitively on every platform.
    """

    value: str
    flavor: PathFlavor = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        flavor = get_settings().flavor if self.flavor is None else PathFlavor(self.flavor)
        raw = _coerce_raw(self.value)
        object.__setattr__(self, "flavor", flavor)
        value = flavor.module.normpath(raw)
        if flavor is PathFlavor.WINDOWS:
            drive, tail = flavor.module.splitdrive(value)
            # UNC share roots keep no trailing separator.
            if drive.startswith("\\\\") and tail == "\\":
                value = drive
        object.__setattr__(self, "value", value)

    @property
    def is_absolute(self) -> bool:
        if self.flavor is PathFlavor.POSIX:
            return self.value.startswith("/")

        drive, tail = self.flavor.module.splitdrive(self.value)
        if drive.startswith("\\\\"):
            return True
        return bool(drive) and tail.startswith("\\")

    @property
    def parent(self) -> LocalPath | None:
        head = self.flavor.module.dirname(self.value)
        if not head or head == self.value:
            return None
        return LocalPath(head, self.flavor)

    @property
    def file_name(self) -> str:
        return self.flavor.module.basename(self.value)

    def split_root(self) -> tuple[str, list[str]]:
        module = self.flavor.module
        if self.flavor is PathFlavor.POSIX:
            root = "//" if self.value.startswith("//") else "/" if self.value.startswith("/") else ""
            rest = self.value[len(root):]
        else:
            drive, rest = module.splitdrive(self.value)
            root = drive
            if rest.startswith(module.sep):
                rest = rest[1:]
                if not drive.startswith("\\\\"):
                    root += module.sep
        return root, [segment for segment in rest.split(module.sep) if segment]

    def combine(self, other: LocalPath | str | os.PathLike[str]) -> LocalPath:
        # An absolute right-hand side replaces the left-hand side entirely.
        if isinstance(other, LocalPath) and other.flavor is self.flavor:
            addition = other
        else:
            raw = other.value if isinstance(other, LocalPath) else other
            addition = LocalPath(raw, self.flavor)
        return LocalPath(self.flavor.module.join(self.value, addition.value), self.flavor)

    def __truediv__(self, other: LocalPath | str | os.PathLike[str]) -> LocalPath:
        return self.combine(other)

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.value
