"""Struct tag builders for generated model fields."""

from __future__ import annotations

from typing import Iterable, List

TAG_KEY_GORM = "gorm"
TAG_KEY_JSON = "json"

TAG_KEY_GORM_COLUMN = "column"
TAG_KEY_GORM_TYPE = "type"
TAG_KEY_GORM_PRIMARY_KEY = "primaryKey"
TAG_KEY_GORM_AUTO_INCREMENT = "autoIncrement"
TAG_KEY_GORM_NOT_NULL = "not null"
TAG_KEY_GORM_UNIQUE_INDEX = "uniqueIndex"
TAG_KEY_GORM_INDEX = "index"
TAG_KEY_GORM_DEFAULT = "default"
TAG_KEY_GORM_COMMENT = "comment"

_PRIORITIES = {
    TAG_KEY_GORM: 100,
    TAG_KEY_JSON: 99,
    TAG_KEY_GORM_COLUMN: 10,
    TAG_KEY_GORM_TYPE: 9,
    TAG_KEY_GORM_PRIMARY_KEY: 8,
    TAG_KEY_GORM_AUTO_INCREMENT: 7,
    TAG_KEY_GORM_NOT_NULL: 6,
    TAG_KEY_GORM_UNIQUE_INDEX: 5,
    TAG_KEY_GORM_INDEX: 4,
    TAG_KEY_GORM_DEFAULT: 3,
    TAG_KEY_GORM_COMMENT: 0,
}


def sort_keys(keys: Iterable[str]) -> List[str]:
    """Order keys by priority (highest first), then alphabetically."""
    return sorted(keys, key=lambda k: (-_PRIORITIES.get(k, 0), k))


class Tag(dict):
    """A struct tag: key to a single value."""

    def set(self, key: str, value: str) -> "Tag":
        self[key] = value
        return self

    def remove(self, key: str) -> "Tag":
        self.pop(key, None)
        return self

    def build(self) -> str:
        """Render as space separated ``key:"value"`` pairs."""
        return " ".join(f'{key}:"{self[key]}"' for key in sort_keys(self) if key)


class GormTag(dict):
    """The contents of a gorm tag: key to a list of values."""

    def append(self, key: str, *values: str) -> "GormTag":
        self.setdefault(key, []).extend(values)
        return self

    def set(self, key: str, *values: str) -> "GormTag":
        self[key] = list(values)
        return self

    def remove(self, key: str) -> "GormTag":
        self.pop(key, None)
        return self

    def build(self) -> str:
        """Render as ``;`` separated ``key:value`` entries."""
        entries = []
        for key in sort_keys(self):
            values = self[key]
            if not values:
                if key:
                    entries.append(key)
                continue
            for value in values:
                parts = [part for part in (key, value) if part]
                if parts:
                    entries.append(":".join(parts))
        return ";".join(entries)