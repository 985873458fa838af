"""
Views of the learning map course format.
"""
import logging

from django.contrib.auth.decorators import login_required
from django.http import Http404, HttpResponseBadRequest, HttpResponseForbidden, JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET, require_POST

from .exceptions import SectionNotFound
from .inplace_editable import inplace_editable
from .services import COURSE_UPDATE_CAPABILITY, get_platform_service

log = logging.getLogger(__name__)


def _int_param(params, name):
    try:
        return int(params[name])
    except (KeyError, TypeError, ValueError):
        return None


@login_required
@require_GET
def course_view(request):
    """
    Empty course page of the format; only header and footer are rendered.
    """
    course_id = _int_param(request.GET, 'id')
    if course_id is None:
        return HttpResponseBadRequest('A numeric course id is required.')

    course = get_platform_service().get_course(course_id)
    if course is None:
        raise Http404(f'Course not found: {course_id}')

    return render(request, 'learningmap_format/view.html', {'course': course, 'heading': course.fullname})


@login_required
@require_POST
def update_inplace_editable(request):
    """
    Rename a section in place.

    Expects ``itemtype``, ``itemid`` and ``value`` as POST data and answers with
    the updated editable as JSON.
    """
    itemtype = request.POST.get('itemtype', '')
    itemid = _int_param(request.POST, 'itemid')
    if itemid is None:
        return HttpResponseBadRequest('A numeric item id is required.')

    platform = get_platform_service()
    section = platform.get_section(itemid)
    if section is None:
        raise Http404(f'Course section not found: {itemid}')
    course = platform.get_course(section.course_id)
    if course is None:
        raise Http404(f'Course not found for section: {itemid}')
    if not platform.has_capability(COURSE_UPDATE_CAPABILITY, course, request.user):
        log.warning('User %s may not edit section %s.', request.user.id, itemid)
        return HttpResponseForbidden()

    try:
        editable = inplace_editable(itemtype, itemid, request.POST.get('value', ''), user=request.user,
                                    platform=platform)
    except SectionNotFound as exc:
        raise Http404(str(exc)) from exc
    if editable is None:
        return HttpResponseBadRequest(f'Unsupported item type: {itemtype}')
    return JsonResponse(editable.to_json())
