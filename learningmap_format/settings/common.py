"""
Common plugin settings for the learning map course format.
"""


def plugin_settings(settings):
    """
    Defaults for the learning map course format.
    """
    # Dotted path of the learningmap_format.services.PlatformService implementation.
    settings.LEARNINGMAP_FORMAT_PLATFORM_SERVICE = getattr(settings, 'LEARNINGMAP_FORMAT_PLATFORM_SERVICE', None)
    settings.LEARNINGMAP_FORMAT_MODNAME = 'learningmap'
    settings.LEARNINGMAP_FORMAT_COURSE_VIEW_URL = '/course/view'
    settings.LEARNINGMAP_FORMAT_NAVIGATION_FORMAT = 'singleactivity'
    settings.LEARNINGMAP_FORMAT_REDIRECT_TO_MAIN_MAP = True
