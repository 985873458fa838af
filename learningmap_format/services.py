"""
The host platform, as seen by the course format.

Every piece of data or behaviour the format borrows from the platform goes
through a ``PlatformService``. The implementation in use is named by the
``LEARNINGMAP_FORMAT_PLATFORM_SERVICE`` setting.
"""
import logging
from abc import ABCMeta, abstractmethod

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

log = logging.getLogger(__name__)

COURSE_UPDATE_CAPABILITY = 'course:update'


class PlatformService(metaclass=ABCMeta):
    """
    Collaborators provided by the host platform.

    Implementations are expected to be cheap to instantiate; one is created
    per lookup.
    """

    @abstractmethod
    def get_course(self, course_id):
        """
        Return the ``Course`` with the given id, or None if it does not exist.
        """
        raise NotImplementedError()

    @abstractmethod
    def get_modinfo(self, course, user):
        """
        Return the ``ModInfo`` snapshot of ``course`` for ``user``.
        """
        raise NotImplementedError()

    @abstractmethod
    def get_section(self, section_id):
        """
        Return the ``Section`` with the given id, or None if it does not exist.
        """
        raise NotImplementedError()

    @abstractmethod
    def has_capability(self, capability, course, user):
        """
        Returns true if ``user`` holds ``capability`` in the context of ``course``.
        """
        raise NotImplementedError()

    @abstractmethod
    def show_editor(self, course, user):
        """
        Returns true if the course is currently displayed in editing mode.
        """
        raise NotImplementedError()

    @abstractmethod
    def build_secondary_navigation(self, page, format_id):
        """
        Return an uninitialised secondary navigation tree for ``page``, built the
        way the ``format_id`` course format builds it.
        """
        raise NotImplementedError()

    @abstractmethod
    def rewrite_pluginfile_urls(self, text, course, component, filearea, itemid):
        """
        Replace embedded file placeholders in ``text`` with real URLs.
        """
        raise NotImplementedError()

    @abstractmethod
    def format_text(self, text, text_format, noclean=False, overflowdiv=False):
        """
        Render user supplied ``text`` stored in ``text_format`` to HTML.
        """
        raise NotImplementedError()

    @abstractmethod
    def format_string(self, text, course):
        """
        Render a short user supplied string, such as a section name, for display.
        """
        raise NotImplementedError()

    @abstractmethod
    def update_section_name(self, section, itemtype, newvalue, user=None):
        """
        Rename ``section`` and return the resulting ``InplaceEditable``.
        """
        raise NotImplementedError()


def get_platform_service():
    """
    Instantiate the configured ``PlatformService``.

    Raises:
        ImproperlyConfigured if the setting is missing or does not name a
        ``PlatformService`` subclass.
    """
    path = getattr(settings, 'LEARNINGMAP_FORMAT_PLATFORM_SERVICE', None)
    if not path:
        raise ImproperlyConfigured('LEARNINGMAP_FORMAT_PLATFORM_SERVICE is not set.')
    try:
        service_class = import_string(path)
    except ImportError:
        log.exception('Could not import the learning map platform service %s.', path)
        raise
    if not (isinstance(service_class, type) and issubclass(service_class, PlatformService)):
        raise ImproperlyConfigured(f'{path} is not a PlatformService.')
    return service_class()
