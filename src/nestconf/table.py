"""Hierarchical key/value store produced by the parser.

The store has three levels: a :class:`ConfigTable` maps group names to
:class:`SectionGroup` objects, which map subsection names to
:class:`Section` field maps. Group and subsection reads never fail: a missing
name resolves to a shared, read-only empty instance and nothing is inserted.
Only field lookups are optional and return ``None`` when absent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterator

from .values import DecodeTarget, decode_optional


@dataclass
class Section:
    """Flat map of string fields for one subsection."""

    fields: dict[str, str] = field(default_factory=dict)
    read_only: bool = field(default=False, compare=False, repr=False)

    def has_field(self, key: str) -> bool:
        return key in self.fields

    def get_field(self, key: str) -> str | None:
        return self.fields.get(key)

    def get_field_as(self, key: str, target: DecodeTarget) -> Any | None:
        """Decode a field to ``target``; ``None`` when the field is absent."""

        return decode_optional(self.get_field(key), target)

    def set_field(self, key: str, value: str) -> None:
        if self.read_only:
            raise TypeError("cannot set a field on the shared empty section")
        self.fields[key] = value

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self.fields.items())

    def iterate(self, callback: Callable[[str, str], None]) -> None:
        for key, value in self.fields.items():
            callback(key, value)

    def to_dict(self) -> dict[str, str]:
        return dict(self.fields)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


# Shared empty defaults; their contents are read-only views.
_EMPTY_SECTION = Section(fields=MappingProxyType({}), read_only=True)  # type: ignore[arg-type]


@dataclass
class SectionGroup:
    """Named subsections belonging to one group."""

    sections: dict[str, Section] = field(default_factory=dict)
    read_only: bool = field(default=False, compare=False, repr=False)

    def has_subsection(self, name: str) -> bool:
        return name in self.sections

    def get_subsection(self, name: str = "") -> Section:
        # Missing subsections resolve to the shared empty section.
        return self.sections.get(name, _EMPTY_SECTION)

    def ensure_subsection(self, name: str = "") -> Section:
        """Return the subsection called ``name``, creating it when missing."""

        if self.read_only:
            raise TypeError("cannot add a subsection to the shared empty group")
        section = self.sections.get(name)
        if section is None:
            section = self.sections[name] = Section()
        return section

    def items(self) -> Iterator[tuple[str, Section]]:
        return iter(self.sections.items())

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {name: section.to_dict() for name, section in self.sections.items()}

    def __getitem__(self, name: str) -> Section:
        return self.get_subsection(name)

    def __contains__(self, name: object) -> bool:
        return name in self.sections

    def __iter__(self) -> Iterator[str]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)


_EMPTY_GROUP = SectionGroup(sections=MappingProxyType({}), read_only=True)  # type: ignore[arg-type]


@dataclass
class ConfigTable:
    """Top-level table of section groups."""

    groups: dict[str, SectionGroup] = field(default_factory=dict)

    def has_group(self, name: str) -> bool:
        return name in self.groups

    def get_group(self, name: str = "") -> SectionGroup:
        return self.groups.get(name, _EMPTY_GROUP)

    def ensure_group(self, name: str = "") -> SectionGroup:
        """Return the group called ``name``, creating it when missing."""

        group = self.groups.get(name)
        if group is None:
            group = self.groups[name] = SectionGroup()
        return group

    def section(self, group: str = "", subsection: str = "") -> Section:
        return self.get_group(group).get_subsection(subsection)

    def get_field(self, group: str, subsection: str, key: str) -> str | None:
        return self.section(group, subsection).get_field(key)

    def get_field_as(self, group: str, subsection: str, key: str, target: DecodeTarget) -> Any | None:
        return self.section(group, subsection).get_field_as(key, target)

    def set_field(self, group: str, subsection: str, key: str, value: str) -> None:
        self.ensure_group(group).ensure_subsection(subsection).set_field(key, value)

    def items(self) -> Iterator[tuple[str, SectionGroup]]:
        return iter(self.groups.items())

    def to_dict(self) -> dict[str, dict[str, dict[str, str]]]:
        return {name: group.to_dict() for name, group in self.groups.items()}

    def __getitem__(self, name: str) -> SectionGroup:
        return self.get_group(name)

    def __contains__(self, name: object) -> bool:
        return name in self.groups

    def __iter__(self) -> Iterator[str]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)
