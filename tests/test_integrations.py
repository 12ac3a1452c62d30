from __future__ import annotations

from collections.abc import Iterator
from pathlib import PurePosixPath

import pytest
from pydantic import BaseModel, ValidationError
from sqlalchemy import Integer, create_engine, select, text
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from typedpath import AbsolutePath, NotAbsoluteError, PathFlavor
from typedpath.core.config import get_settings
from typedpath.db.types import AbsolutePathType

POSIX = PathFlavor.POSIX


@pytest.fixture(autouse=True)
def _posix_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("TYPEDPATH_FLAVOR", "posix")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class Workspace(BaseModel):
    root: AbsolutePath
    cache_dir: AbsolutePath | None = None


class Base(DeclarativeBase):
    pass


class WorkspaceRow(Base):
    __tablename__ = "workspaces"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    root: Mapped[AbsolutePath] = mapped_column(AbsolutePathType(POSIX), nullable=False)
    cache_dir: Mapped[AbsolutePath | None] = mapped_column(AbsolutePathType(POSIX), nullable=True)


def test_pydantic_field_validates_and_normalizes() -> None:
    workspace = Workspace(root="/srv/app/../data/", cache_dir=PurePosixPath("/var/cache"))
    assert workspace.root == AbsolutePath("/srv/data", POSIX)
    assert workspace.cache_dir == AbsolutePath("/var/cache", POSIX)

    existing = AbsolutePath("/opt", POSIX)
    assert Workspace(root=existing).root is existing


def test_pydantic_field_rejects_relative_path() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Workspace.model_validate({"root": "relative/dir"})
    assert "is not absolute" in str(exc_info.value)


def test_pydantic_serializes_to_plain_string() -> None:
    workspace = Workspace(root="/srv//data")
    assert workspace.model_dump() == {"root": "/srv/data", "cache_dir": None}
    assert Workspace.model_validate_json(workspace.model_dump_json()) == workspace


def test_pydantic_json_schema_is_a_path_string() -> None:
    schema = Workspace.model_json_schema()["properties"]["root"]
    assert schema["type"] == "string"
    assert schema["format"] == "path"


def test_sqlalchemy_column_round_trips_absolute_paths() -> None:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)

    with Session(engine) as session:
        session.add(WorkspaceRow(id=1, root=AbsolutePath("/srv/data", POSIX)))
        session.add(WorkspaceRow(id=2, root="/srv//other/./", cache_dir="/tmp/cache"))
        session.commit()

    with Session(engine) as session:
        rows = session.scalars(select(WorkspaceRow).order_by(WorkspaceRow.id)).all()
        assert [row.root for row in rows] == [
            AbsolutePath("/srv/data", POSIX),
            AbsolutePath("/srv/other", POSIX),
        ]
        assert rows[0].cache_dir is None
        assert rows[1].cache_dir == AbsolutePath("/tmp/cache", POSIX)

        raw = session.execute(text("SELECT root FROM workspaces WHERE id = 2")).scalar_one()
        assert raw == "/srv/other"


def test_sqlalchemy_column_rejects_relative_values() -> None:
    column_type = AbsolutePathType(POSIX)
    with pytest.raises(NotAbsoluteError):
        column_type.process_bind_param("relative/dir", dialect=None)  # type: ignore[arg-type]
