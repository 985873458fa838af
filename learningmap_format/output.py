"""
Template data for the sections and activities of a learning map course.

The platform keeps rendering sections and activities the default way; these
classes take the default template data (``base_export``) and add what the
learning map templates need.
"""

from .resolver import no_learningmap_warning

SUMMARY_TEMPLATE = 'learningmap_format/local/content/section/summary.html'
CMITEM_TEMPLATE = 'learningmap_format/local/content/section/cmitem.html'


class SectionSummary:
    """
    Section summary of the learning map format.

    Arguments:
        course_format (LearningMapCourseFormat): the format of the course.
        section (Section): the section being rendered.
        base_export (callable): ``base_export(output, renderer)`` returns the
            platform's default template data for the summary.
    """

    def __init__(self, course_format, section, base_export):
        self.format = course_format
        self.section = section
        self.base_export = base_export

    def get_template_name(self, renderer):  # pylint: disable=unused-argument
        return SUMMARY_TEMPLATE

    def export_for_template(self, renderer):
        """
        Default summary data, with a warning on the top section when the
        course has no main learning map.
        """
        data = dict(self.base_export(self, renderer))
        if not self.format.main_learningmap_exists() and self.section.section == 0:
            data['warning'] = no_learningmap_warning()
        return data

    def format_summary_text(self):
        """
        Generate html for the section summary text.
        """
        platform = self.format.platform
        section = self.section
        summarytext = platform.rewrite_pluginfile_urls(
            section.summary, self.format.course, 'course', 'section', section.id
        )
        return platform.format_text(summarytext, section.summaryformat, noclean=True, overflowdiv=True)


class ActivityItem:
    """
    Activity item of the learning map format.

    Every activity rendered by this format is flagged as part of the learning
    map; the main learning map is flagged as well.
    """

    def __init__(self, course_format, section, mod, base_export):
        self.format = course_format
        self.section = section
        self.mod = mod
        self.base_export = base_export

    def get_template_name(self, renderer):  # pylint: disable=unused-argument
        return CMITEM_TEMPLATE

    def export_for_template(self, renderer):
        data = dict(self.base_export(self, renderer))
        data['is_learningmap'] = True
        if self.format.main_learningmap_exists():
            mainlearningmap = self.format.get_main_learningmap()
            if self.mod.id == mainlearningmap.id:
                data['is_first_learningmap'] = True
        return data
