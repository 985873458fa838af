"""
Exception classes used by the learning map course format.
"""


from django.core.exceptions import ObjectDoesNotExist


class LearningMapNotFound(Exception):
    """
    The course has no main learning map, or the current user cannot see it.

    Check ``main_learningmap_exists()`` before asking for the map to avoid it.
    """
    error_code = 'nolearningmap'

    def __init__(self, course_id):
        super().__init__(f"No learning map found in course: {course_id}")
        self.course_id = course_id


class SectionNotFound(ObjectDoesNotExist):
    """
    No course section record matches the given id.
    """

    def __init__(self, section_id):
        super().__init__(f"Course section not found: {section_id}")
        self.section_id = section_id


class Redirect(Exception):
    """
    Exception class that requires redirecting to a URL.
    """
    def __init__(self, url):
        super().__init__()
        self.url = url
