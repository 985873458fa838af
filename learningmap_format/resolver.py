"""
Find the main learning map of a course.
"""
from django.conf import settings
from django.utils.translation import gettext as _

from .exceptions import LearningMapNotFound

DEFAULT_LEARNINGMAP_MODNAME = 'learningmap'


def learningmap_modname():
    return getattr(settings, 'LEARNINGMAP_FORMAT_MODNAME', DEFAULT_LEARNINGMAP_MODNAME)


def no_learningmap_warning():
    """
    Text shown to course staff when a course has no main learning map.
    """
    return _(
        'There is no learning map at the beginning of this course. '
        'Add a learning map as the first activity of the top section, '
        'otherwise learners will not be taken to it when they open the course.'
    )


class MainMapResolver:
    """
    The main learning map of a course is its first module, provided that module
    is a learning map the current user can see.

    ``load_modinfo`` is called on every lookup; module visibility may change
    from one request or user to the next, so nothing is remembered here.
    """

    def __init__(self, load_modinfo):
        self.load_modinfo = load_modinfo

    def _first_cm(self):
        modinfo = self.load_modinfo()
        return modinfo, modinfo.first_cm

    def main_learningmap_exists(self):
        """
        Returns whether the first activity in the course is a visible learning map.
        """
        _modinfo, cm = self._first_cm()
        if cm is None:
            return False
        return cm.modname == learningmap_modname() and cm.uservisible

    def get_main_learningmap(self):
        """
        Returns the main learning map of the course.

        Raises:
            LearningMapNotFound if there is none, so callers should check
            main_learningmap_exists() first.
        """
        modinfo, cm = self._first_cm()
        if cm is None or cm.modname != learningmap_modname() or not cm.uservisible:
            raise LearningMapNotFound(modinfo.course.id)
        return cm
