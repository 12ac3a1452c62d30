from __future__ import annotations

import ntpath
import os
import posixpath
from enum import Enum
from types import ModuleType


class PathFlavor(str, Enum):
    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def host(cls) -> PathFlavor:
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @property
    def module(self) -> ModuleType:
        return ntpath if self is PathFlavor.WINDOWS else posixpath

    @property
    def sep(self) -> str:
        return self.module.sep
