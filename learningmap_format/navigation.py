"""
Navigation handling for the learning map course format.

Outside of editing mode a learning map course has no course page of its own:
the course view redirects to the main learning map, and activity pages get the
secondary navigation of a single activity course.
"""
import logging
from enum import IntEnum
from urllib.parse import urlsplit

from edx_django_utils.monitoring import set_custom_attribute

from .exceptions import LearningMapNotFound, Redirect
from .resolver import no_learningmap_warning
from .toggles import redirect_to_main_map_is_enabled

log = logging.getLogger(__name__)

COURSE_HOME_KEY = 'coursehome'


class NodeType(IntEnum):
    """
    Kinds of navigation nodes.
    """
    ROOT = 0
    COURSE = 20
    SECTION = 30
    ACTIVITY = 40
    CUSTOM = 60
    SETTING = 70


class NavigationNode:
    """
    A node of a navigation tree.
    """

    def __init__(self, key, text='', action=None, node_type=NodeType.CUSTOM, children=None):
        self.key = key
        self.text = text
        self.action = action
        self.type = node_type
        self.children = list(children or [])

    def add_node(self, node):
        self.children.append(node)
        return node

    def find(self, key, node_type):
        """
        Depth first search for the node with the given key and type, or None.
        """
        for child in self.children:
            if child.key == key and child.type == node_type:
                return child
            found = child.find(key, node_type)
            if found is not None:
                return found
        return None

    def get_children_key_list(self):
        return [child.key for child in self.children]

    def __repr__(self):
        return f'{self.__class__.__name__}({self.key!r}, type={self.type!r})'


class SecondaryNavigation(NavigationNode):
    """
    Root of the secondary navigation of a page.

    Platforms subclass this and fill the tree in ``initialise``.
    """

    def __init__(self, page, format_id):
        super().__init__('secondary', node_type=NodeType.ROOT)
        self.page = page
        self.format_id = format_id
        self.initialised = False

    def initialise(self):
        self.initialised = True


class Page:
    """
    The page being built for the current request.
    """

    def __init__(self, url=None, course=None, cm=None, navigation=None):
        self.url = url
        self.course = course
        self.cm = cm
        self.navigation = navigation if navigation is not None else NavigationNode('root', node_type=NodeType.ROOT)
        self.secondarynav = None
        self.notifications = []

    def has_set_url(self):
        return self.url is not None

    def set_url(self, url):
        self.url = url

    def set_secondary_navigation(self, secondarynav):
        self.secondarynav = secondarynav

    def add_notification(self, message, level='warning'):
        self.notifications.append((level, message))


def url_matches_base(url, base_url):
    """
    Compare two URLs, ignoring query string and fragment.

    Scheme and host are only compared when ``base_url`` has them.
    """
    url_parts = urlsplit(url)
    base_parts = urlsplit(base_url)
    if base_parts.netloc and (url_parts.scheme, url_parts.netloc) != (base_parts.scheme, base_parts.netloc):
        return False
    return url_parts.path.rstrip('/') == base_parts.path.rstrip('/')


class NavigationAdapter:
    """
    Page lifecycle hooks of the learning map format.

    Arguments:
        resolver (MainMapResolver): finds the main learning map of the course.
        show_editor (callable): returns True when the course is in editing mode.
        can_update_course (callable): returns True when the user may edit the course.
        build_navigation (callable): ``build_navigation(page, format_id)`` returns a
            ``SecondaryNavigation`` built the way course format ``format_id`` builds it.
        course_view_url (str): URL of the course view page.
        navigation_format (str): course format whose secondary navigation is used.
    """

    def __init__(self, resolver, show_editor, can_update_course, build_navigation,
                 course_view_url, navigation_format):
        self.resolver = resolver
        self.show_editor = show_editor
        self.can_update_course = can_update_course
        self.build_navigation = build_navigation
        self.course_view_url = course_view_url
        self.navigation_format = navigation_format

    def page_set_cm(self, page):
        """
        Give the page the secondary navigation of a single activity course,
        keeping the link back to the course home.
        """
        coursehome = page.navigation.find(COURSE_HOME_KEY, NodeType.COURSE)
        secondarynav = self.build_navigation(page, self.navigation_format)
        secondarynav.initialise()
        if coursehome is not None:
            secondarynav.add_node(coursehome)
        page.set_secondary_navigation(secondarynav)

    def _is_course_view(self, page, current_page):
        return (
            page is current_page and
            page.has_set_url() and
            url_matches_base(page.url, self.course_view_url)
        )

    def page_set_course(self, page, current_page):
        """
        Redirect course view requests to the main learning map when not editing.

        Raises:
            Redirect to the main learning map.
        """
        if not self._is_course_view(page, current_page) or self.show_editor():
            return
        if not redirect_to_main_map_is_enabled():
            return

        try:
            cm = self.resolver.get_main_learningmap()
        except LearningMapNotFound as exc:
            if self.can_update_course():
                log.info('Course %s has no main learning map, not redirecting.', exc.course_id)
                page.add_notification(no_learningmap_warning())
            return

        if not cm.uservisible:
            return
        if not cm.url:
            log.warning('Main learning map %s has no view URL, not redirecting.', cm.id)
            return

        set_custom_attribute('learningmap_format.redirected', True)
        raise Redirect(cm.url)
