"""Ordered, de-duplicated import path lists for generated source files."""

from __future__ import annotations

from typing import List, Sequence


class ImportPaths:
    """An immutable list of quoted import paths with blank group separators."""

    def __init__(self, paths: Sequence[str] = ()) -> None:
        self._paths: List[str] = list(paths)

    def add(self, *paths: str) -> "ImportPaths":
        """Return a new list with ``paths`` appended as one group.

        Blank entries separate groups; a path already present before this
        call is skipped. Every added group ends with a blank entry.
        """
        added: List[str] = []
        for path in paths:
            path = path.strip()
            if not path:
                added.append(path)
                continue
            if not path.endswith('"'):
                path = f'"{path}"'
            if path not in self._paths:
                added.append(path)
        added.append("")
        return ImportPaths(self._paths + added)

    def paths(self) -> List[str]:
        """A copy of the import paths."""
        return list(self._paths)

    def __repr__(self) -> str:
        return f"ImportPaths({self._paths!r})"


IMPORT_LIST = ImportPaths().add(
    "context",
    "database/sql",
    "strings",
    "",
    "gorm.io/gorm",
    "gorm.io/gorm/schema",
    "gorm.io/gorm/clause",
    "",
    "go.ipao.vip/gen",
    "go.ipao.vip/gen/field",
    "go.ipao.vip/gen/helper",
    "",
    "gorm.io/plugin/dbresolver",
)

UNIT_TEST_IMPORT_LIST = ImportPaths().add(
    "context",
    "fmt",
    "strconv",
    "testing",
    "",
    "gorm.io/driver/postgres",
    "gorm.io/gorm",
)