from __future__ import annotations

import logging
import os
from typing import Any, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from typedpath.paths.flavor import PathFlavor
from typedpath.paths.local import InvalidPathError, LocalPath

logger = logging.getLogger(__name__)

PathInput = Union[str, "os.PathLike[str]", LocalPath, "AbsolutePath"]


class NotAbsoluteError(InvalidPathError):
    def __init__(self, value: str, base: str | None = None):
        self.input = value
        self.base = base
        if base is None:
            super().__init__(f'Path "{value}" is not absolute.')
        else:
            super().__init__(f'Joining "{value}" to "{base}" does not produce an absolute path.')


def _to_local(value: PathInput, flavor: PathFlavor | str | None) -> LocalPath:
    if isinstance(value, AbsolutePath):
        value = value.underlying
    if isinstance(value, LocalPath):
        if flavor is None or PathFlavor(flavor) is value.flavor:
            return value
        return LocalPath(value.value, PathFlavor(flavor))
    return LocalPath(value, None if flavor is None else PathFlavor(flavor))


class AbsolutePath:
    """A normalized path that is guaranteed to be absolute.

    Absolute means rooted, plus a drive or UNC share on Windows. The guarantee
    is checked once, on construction; ``parent`` and ``/`` derive new instances
    from an already-absolute value and keep it without re-checking.

    For paths that may be relative, use :class:`LocalPath`.
    """

    __slots__ = ("_underlying",)

    _underlying: LocalPath

    def __init__(self, value: PathInput, flavor: PathFlavor | str | None = None):
        underlying = _to_local(value, flavor)
        if not underlying.is_absolute:
            raw = value if isinstance(value, str) else str(value)
            logger.debug("Rejected non-absolute path %r (normalized %r)", raw, underlying.value)
            raise NotAbsoluteError(raw)
        object.__setattr__(self, "_underlying", underlying)

    @classmethod
    def create(cls, value: PathInput, flavor: PathFlavor | str | None = None) -> AbsolutePath:
        return cls(value, flavor)

    @classmethod
    def _from_trusted(cls, underlying: LocalPath) -> AbsolutePath:
        # Callers guarantee ``underlying.is_absolute``.
        instance = object.__new__(cls)
        object.__setattr__(instance, "_underlying", underlying)
        return instance

    @property
    def value(self) -> str:
        return self._underlying.value

    @property
    def flavor(self) -> PathFlavor:
        return self._underlying.flavor

    @property
    def underlying(self) -> LocalPath:
        return self._underlying

    @property
    def parent(self) -> AbsolutePath | None:
        parent = self._underlying.parent
        if parent is None:
            return None
        # Dropping the last segment of a rooted path leaves it rooted.
        return AbsolutePath._from_trusted(parent)

    @property
    def file_name(self) -> str:
        return self._underlying.file_name

    def join(self, addition: PathInput) -> AbsolutePath:
        # An absolute addition replaces this path entirely.
        local = addition.underlying if isinstance(addition, AbsolutePath) else addition
        joined = self._underlying.combine(local)
        if not joined.is_absolute:
            # Only reachable on Windows, e.g. C:\a joined with the drive-relative D:x.
            raw = addition if isinstance(addition, str) else str(addition)
            raise NotAbsoluteError(raw, base=self.value)
        return AbsolutePath._from_trusted(joined)

    def __truediv__(self, addition: PathInput) -> AbsolutePath:
        return self.join(addition)

    def is_prefix_of(self, other: AbsolutePath) -> bool:
        if self.flavor is not other.flavor:
            return False
        root, segments = self._underlying.split_root()
        other_root, other_segments = other.underlying.split_root()
        return root == other_root and other_segments[: len(segments)] == segments

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbsolutePath):
            return NotImplemented
        return self._underlying == other._underlying

    def __hash__(self) -> int:
        return hash(self._underlying)

    def __str__(self) -> str:
        return self._underlying.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r}, {self.flavor.value!r})"

    def __fspath__(self) -> str:
        return self._underlying.value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.value, self.flavor))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        validate = core_schema.no_info_plain_validator_function(cls)
        from_str = core_schema.chain_schema([core_schema.str_schema(), validate])
        from_path_like = core_schema.chain_schema([core_schema.is_instance_schema(os.PathLike), validate])
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str, from_path_like]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        json_schema = handler(schema)
        json_schema.update(format="path")
        return json_schema
