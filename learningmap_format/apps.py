"""
Learning map course format Application Configuration
"""


from django.apps import AppConfig
from edx_django_utils.plugins import PluginSettings, PluginURLs


class LearningMapFormatConfig(AppConfig):
    """
    Application Configuration for the learning map course format.

    The app has no models and stores no personal data.
    """

    name = 'learningmap_format'
    verbose_name = 'Learning map course format'
    plugin_app = {
        PluginURLs.CONFIG: {
            'lms.djangoapp': {
                PluginURLs.NAMESPACE: 'learningmap_format',
                PluginURLs.REGEX: r'^course/format/learningmap/',
                PluginURLs.RELATIVE_PATH: 'urls',
            }
        },
        PluginSettings.CONFIG: {
            'lms.djangoapp': {
                'common': {PluginSettings.RELATIVE_PATH: 'settings.common'},
                'test': {PluginSettings.RELATIVE_PATH: 'settings.common'},
            },
        }
    }
