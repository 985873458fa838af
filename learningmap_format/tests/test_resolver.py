"""
Tests for the main learning map lookup.
"""
from unittest import TestCase, mock

import ddt
import pytest
from django.test import override_settings

from learningmap_format.data import ModInfo
from learningmap_format.exceptions import LearningMapNotFound
from learningmap_format.resolver import MainMapResolver
from learningmap_format.tests.utils import make_cm, make_course


def resolver_for(*cms):
    modinfo = ModInfo(course=make_course(), cms=tuple(cms))
    return MainMapResolver(lambda: modinfo)


@ddt.ddt
class MainMapResolverTestCase(TestCase):
    """
    Tests for MainMapResolver.
    """

    def test_empty_course(self):
        resolver = resolver_for()
        assert not resolver.main_learningmap_exists()
        with pytest.raises(LearningMapNotFound) as exc_info:
            resolver.get_main_learningmap()
        assert exc_info.value.error_code == 'nolearningmap'
        assert exc_info.value.course_id == 1

    @ddt.data(True, False)
    def test_first_module_is_not_a_learningmap(self, uservisible):
        resolver = resolver_for(make_cm(1, modname='quiz', uservisible=uservisible), make_cm(2))
        assert not resolver.main_learningmap_exists()
        with pytest.raises(LearningMapNotFound):
            resolver.get_main_learningmap()

    def test_visible_learningmap_first(self):
        first = make_cm(1)
        resolver = resolver_for(first, make_cm(2, modname='quiz'))
        assert resolver.main_learningmap_exists()
        assert resolver.get_main_learningmap() is first

    def test_hidden_learningmap_first(self):
        resolver = resolver_for(make_cm(1, uservisible=False))
        assert not resolver.main_learningmap_exists()
        with pytest.raises(LearningMapNotFound):
            resolver.get_main_learningmap()

    def test_existence_is_stable(self):
        resolver = resolver_for(make_cm(1))
        assert resolver.main_learningmap_exists() == resolver.main_learningmap_exists()

    def test_modinfo_is_reloaded_on_every_call(self):
        visible = ModInfo(course=make_course(), cms=(make_cm(1),))
        hidden = ModInfo(course=make_course(), cms=(make_cm(1, uservisible=False),))
        load_modinfo = mock.Mock(side_effect=[visible, hidden])
        resolver = MainMapResolver(load_modinfo)

        assert resolver.main_learningmap_exists()
        assert not resolver.main_learningmap_exists()
        assert load_modinfo.call_count == 2

    @override_settings(LEARNINGMAP_FORMAT_MODNAME='coursemap')
    def test_configured_modname(self):
        assert resolver_for(make_cm(1, modname='coursemap')).main_learningmap_exists()
        assert not resolver_for(make_cm(1, modname='learningmap')).main_learningmap_exists()
