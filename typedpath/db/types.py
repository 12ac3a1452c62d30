from __future__ import annotations

from typing import Any

from sqlalchemy import Dialect, String
from sqlalchemy.types import TypeDecorator

from typedpath.paths.absolute import AbsolutePath
from typedpath.paths.flavor import PathFlavor


class AbsolutePathType(TypeDecorator[AbsolutePath]):
    impl = String
    cache_ok = True

    def __init__(self, flavor: PathFlavor | str | None = None, length: int = 4096, **kwargs: Any):
        super().__init__(length=length, **kwargs)
        self.flavor = None if flavor is None else PathFlavor(flavor)

    def process_bind_param(self, value: AbsolutePath | str | None, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if not isinstance(value, AbsolutePath):
            value = AbsolutePath(value, self.flavor)
        return value.value

    def process_result_value(self, value: str | None, dialect: Dialect) -> AbsolutePath | None:
        if value is None:
            return None
        return AbsolutePath(value, self.flavor)
