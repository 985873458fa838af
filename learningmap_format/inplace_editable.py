"""
In-place editing of section names.
"""
import logging

from .course_format import get_course_format
from .exceptions import SectionNotFound
from .services import get_platform_service

log = logging.getLogger(__name__)

SECTION_NAME_ITEMTYPES = ('sectionname', 'sectionnamenl')


def inplace_editable(itemtype, itemid, newvalue, user=None, platform=None):
    """
    Update a value edited in place.

    Only section names are editable; other item types are ignored and None is
    returned.

    Raises:
        SectionNotFound if no section has the id ``itemid``.
    """
    if itemtype not in SECTION_NAME_ITEMTYPES:
        return None

    platform = platform if platform is not None else get_platform_service()
    section = platform.get_section(itemid)
    if section is None:
        raise SectionNotFound(itemid)
    course_format = get_course_format(section.course_id, user=user, platform=platform)
    if course_format is None:
        raise SectionNotFound(itemid)
    log.info('Renaming section %s of course %s.', section.id, section.course_id)
    return course_format.inplace_editable_update_section_name(section, itemtype, newvalue)
