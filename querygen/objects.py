"""Hand-described model objects and their validation."""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field
from typing import List

from querygen.tag import Tag


@dataclass
class ObjectField:
    """One member of a hand-described model struct."""

    name: str
    type: str
    column_name: str = ""
    gorm_tag: str = ""
    json_tag: str = ""
    tag: Tag = dc_field(default_factory=Tag)
    comment: str = ""


@dataclass
class Object:
    """A model struct described by hand rather than read from a database."""

    struct_name: str
    table_name: str = ""
    file_name: str = ""
    import_pkg_paths: List[str] = dc_field(default_factory=list)
    fields: List[ObjectField] = dc_field(default_factory=list)


def check_object(obj: Object) -> Object:
    """Validate ``obj`` and return it; raise ValueError if it is incomplete."""
    if not obj.struct_name:
        raise ValueError("object's struct_name cannot be empty")
    for member in obj.fields:
        if not member.name:
            raise ValueError(f"object {obj.struct_name}'s field name cannot be empty")
        if not member.type:
            raise ValueError(f"object {obj.struct_name}'s field type cannot be empty")
    return obj