"""
Test helpers: an in-memory platform and factories for its content.
"""
from django.utils.html import escape

from learningmap_format.data import ActivityModule, Course, InplaceEditable, ModInfo, Section
from learningmap_format.navigation import NavigationNode, NodeType, SecondaryNavigation
from learningmap_format.services import PlatformService


class FakeSecondaryNavigation(SecondaryNavigation):
    """
    Secondary navigation tree that records the format it was built for.
    """

    def initialise(self):
        super().initialise()
        self.add_node(NavigationNode('modulepage', text=self.format_id, node_type=NodeType.SETTING))


class FakePlatformService(PlatformService):
    """
    Platform keeping its content in class attributes, so that every instance
    created by ``get_platform_service`` sees the same data. Call ``reset`` in
    ``setUp``.
    """
    courses = {}
    sections = {}
    cms = {}
    capabilities = set()
    editing = set()
    renamed = []

    @classmethod
    def reset(cls):
        cls.courses = {}
        cls.sections = {}
        cls.cms = {}
        cls.capabilities = set()
        cls.editing = set()
        cls.renamed = []

    @classmethod
    def add_course(cls, course, sections=(), cms=()):
        cls.courses[course.id] = course
        for section in sections:
            cls.sections[section.id] = section
        cls.cms[course.id] = list(cms)
        return course

    @classmethod
    def grant(cls, capability, course, user):
        cls.capabilities.add((capability, course.id, getattr(user, 'id', user)))

    def get_course(self, course_id):
        return self.courses.get(course_id)

    def get_modinfo(self, course, user):
        sections = tuple(
            sorted((s for s in self.sections.values() if s.course_id == course.id), key=lambda s: s.section)
        )
        return ModInfo(course=course, sections=sections, cms=tuple(self.cms.get(course.id, ())))

    def get_section(self, section_id):
        return self.sections.get(section_id)

    def has_capability(self, capability, course, user):
        return (capability, course.id, getattr(user, 'id', user)) in self.capabilities

    def show_editor(self, course, user):
        return course.id in self.editing

    def build_secondary_navigation(self, page, format_id):
        return FakeSecondaryNavigation(page, format_id)

    def rewrite_pluginfile_urls(self, text, course, component, filearea, itemid):
        return text.replace('@@PLUGINFILE@@', f'/pluginfile/{course.id}/{component}/{filearea}/{itemid}')

    def format_text(self, text, text_format, noclean=False, overflowdiv=False):
        if overflowdiv:
            return f'<div class="no-overflow">{text}</div>'
        return text

    def format_string(self, text, course):
        return escape(text)

    def update_section_name(self, section, itemtype, newvalue, user=None):
        self.renamed.append((section.id, itemtype, newvalue))
        return InplaceEditable(
            component='learningmap_format',
            itemtype=itemtype,
            itemid=section.id,
            displayvalue=newvalue,
            value=newvalue,
        )


def make_course(course_id=1, **kwargs):
    return Course(id=course_id, fullname=kwargs.pop('fullname', f'Course {course_id}'), **kwargs)


def make_cm(cm_id, modname='learningmap', course_id=1, uservisible=True, **kwargs):
    kwargs.setdefault('url', f'/mod/{modname}/view?id={cm_id}')
    return ActivityModule(id=cm_id, modname=modname, course_id=course_id, uservisible=uservisible, **kwargs)


def make_section(section_id, number, course_id=1, **kwargs):
    return Section(id=section_id, course_id=course_id, section=number, **kwargs)
