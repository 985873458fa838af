"""
The learning map course format.

In a course using this format the first activity should be a learning map.
Outside of editing mode that learning map replaces the course page: sections
are hidden from navigation, there is no course index, and the course view
redirects to the learning map.
"""
from django.conf import settings
from django.utils.translation import gettext as _

from .navigation import NavigationAdapter
from .output import ActivityItem, SectionSummary
from .resolver import MainMapResolver
from .services import COURSE_UPDATE_CAPABILITY, get_platform_service

FORMAT_ID = 'learningmap'
DEFAULT_COURSE_VIEW_URL = '/course/view'
DEFAULT_NAVIGATION_FORMAT = 'singleactivity'


class LearningMapCourseFormat:
    """
    Course format for courses driven by a single learning map.

    Arguments:
        course (Course): the course.
        user (User): the user the course is displayed to.
        platform (PlatformService): defaults to the configured platform service.
    """
    format_id = FORMAT_ID

    def __init__(self, course, user=None, platform=None):
        self.course = course
        self.user = user
        self.platform = platform if platform is not None else get_platform_service()
        self.resolver = MainMapResolver(self.get_modinfo)

    def get_modinfo(self):
        return self.platform.get_modinfo(self.course, self.user)

    def main_learningmap_exists(self):
        """
        Returns whether the first activity in the course is a learning map.
        """
        return self.resolver.main_learningmap_exists()

    def get_main_learningmap(self):
        """
        Returns the first learning map activity of the course.

        Raises:
            LearningMapNotFound if there is none.
        """
        return self.resolver.get_main_learningmap()

    def show_editor(self):
        return self.platform.show_editor(self.course, self.user)

    def can_update_course(self):
        return self.platform.has_capability(COURSE_UPDATE_CAPABILITY, self.course, self.user)

    # Course index, drag and drop and the course page itself only exist in editing mode.
    def supports_components(self):
        return self.show_editor()

    def uses_sections(self):
        return True

    def has_view_page(self):
        return self.show_editor()

    def uses_course_index(self):
        return self.show_editor()

    def can_sections_be_removed_from_navigation(self):
        return not self.show_editor()

    def allow_stealth_module_visibility(self, cm, section):  # pylint: disable=unused-argument
        """
        Stealth modules are allowed, which eases converting courses from other formats.
        """
        return True

    def get_format_options(self):
        return dict(self.course.format_options)

    def get_config_for_external(self):
        """
        Return the format configuration for external functions.
        """
        return self.get_format_options()

    def get_section(self, section):
        """
        Accept a section or a section number and return the section.
        """
        if isinstance(section, int):
            return self.get_modinfo().get_section_info(section)
        return section

    def get_default_section_name(self, section):
        if section.section == 0:
            return _('General')
        return _('Section {number}').format(number=section.section)

    def get_section_name(self, section):
        section = self.get_section(section)
        if section is None:
            return ''
        if section.name:
            return self.platform.format_string(section.name, self.course)
        return self.get_default_section_name(section)

    def navigation_adapter(self):
        return NavigationAdapter(
            resolver=self.resolver,
            show_editor=self.show_editor,
            can_update_course=self.can_update_course,
            build_navigation=self.platform.build_secondary_navigation,
            course_view_url=getattr(settings, 'LEARNINGMAP_FORMAT_COURSE_VIEW_URL', DEFAULT_COURSE_VIEW_URL),
            navigation_format=getattr(settings, 'LEARNINGMAP_FORMAT_NAVIGATION_FORMAT', DEFAULT_NAVIGATION_FORMAT),
        )

    def page_set_course(self, page, current_page=None):
        """
        Called when the course of ``page`` is set; redirects the course view to
        the main learning map outside of editing mode.

        ``current_page`` is the page of the current request, ``page`` itself if omitted.
        """
        if current_page is None:
            current_page = page
        self.navigation_adapter().page_set_course(page, current_page)

    def page_set_cm(self, page):
        """
        Called when the course module of ``page`` is set; replaces the secondary
        navigation with the one of a single activity course.
        """
        self.navigation_adapter().page_set_cm(page)

    def section_summary(self, section, base_export):
        return SectionSummary(self, section, base_export)

    def activity_item(self, section, cm, base_export):
        return ActivityItem(self, section, cm, base_export)

    def inplace_editable_update_section_name(self, section, itemtype, newvalue):
        return self.platform.update_section_name(section, itemtype, newvalue, user=self.user)


def get_course_format(course_id, user=None, platform=None):
    """
    Return the ``LearningMapCourseFormat`` of the course with the given id, or
    None if there is no such course.
    """
    platform = platform if platform is not None else get_platform_service()
    course = platform.get_course(course_id)
    if course is None:
        return None
    return LearningMapCourseFormat(course, user=user, platform=platform)
