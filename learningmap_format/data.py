"""
Value objects exchanged with the host platform.

The platform owns courses, sections and course modules; the format only
reads them, so everything here is immutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Mapping


class TextFormat(IntEnum):
    """
    Formats a section summary can be stored in.
    """
    AUTO = 0
    HTML = 1
    PLAIN = 2
    MARKDOWN = 4


@dataclass(frozen=True)
class Course:
    """
    A course as seen by the course format.
    """
    id: int
    fullname: str = ''
    format: str = 'learningmap'
    format_options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Section:
    """
    A course section. ``section`` is the sequence number, 0 being the top section.
    """
    id: int
    course_id: int
    section: int
    name: str = ''
    summary: str = ''
    summaryformat: TextFormat = TextFormat.HTML
    sequence: tuple[int, ...] = ()


@dataclass(frozen=True)
class ActivityModule:
    """
    A course module (cm), i.e. one activity instance inside a course.
    """
    id: int
    modname: str
    course_id: int
    section_id: int | None = None
    name: str = ''
    uservisible: bool = True
    url: str | None = None


@dataclass(frozen=True)
class ModInfo:
    """
    Snapshot of the modules of a course, computed by the platform for one user.

    ``cms`` is in course-wide order (section order, then order inside the
    section) and must be kept that way.
    """
    course: Course
    sections: tuple[Section, ...] = ()
    cms: tuple[ActivityModule, ...] = ()

    @property
    def first_cm(self) -> ActivityModule | None:
        return self.cms[0] if self.cms else None

    def get_section_info(self, number: int) -> Section | None:
        for section in self.sections:
            if section.section == number:
                return section
        return None


@dataclass(frozen=True)
class InplaceEditable:
    """
    Result of an in-place edit, as returned by the platform.
    """
    component: str
    itemtype: str
    itemid: int
    displayvalue: str
    value: str
    editable: bool = True

    def to_json(self) -> dict:
        return {
            'component': self.component,
            'itemtype': self.itemtype,
            'itemid': self.itemid,
            'displayvalue': self.displayvalue,
            'value': self.value,
            'editable': self.editable,
        }
