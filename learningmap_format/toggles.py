"""
Toggles for the learning map course format.
"""

from edx_toggles.toggles import SettingToggle

# .. toggle_name: LEARNINGMAP_FORMAT_REDIRECT_TO_MAIN_MAP
# .. toggle_implementation: SettingToggle
# .. toggle_default: True
# .. toggle_description: When True, learners opening the course view of a course in the learning map
#   format outside of editing mode are redirected to the main learning map of the course. When False,
#   the course view is rendered as is.
# .. toggle_use_cases: open_edx
# .. toggle_creation_date: 2024-05-02
REDIRECT_TO_MAIN_MAP = SettingToggle(
    'LEARNINGMAP_FORMAT_REDIRECT_TO_MAIN_MAP', default=True, module_name=__name__
)


def redirect_to_main_map_is_enabled():
    """
    Returns True if course view requests may be redirected to the main learning map.
    """
    return REDIRECT_TO_MAIN_MAP.is_enabled()
