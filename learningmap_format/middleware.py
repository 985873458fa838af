"""
Middleware for the learning map course format.
"""


from django.shortcuts import redirect
from django.utils.deprecation import MiddlewareMixin

from .exceptions import Redirect


class RedirectMiddleware(MiddlewareMixin):
    """
    Catch Redirect exceptions and redirect the user to the expected URL.
    """
    def process_exception(self, _request, exception):
        """
        Catch Redirect exceptions and redirect the user to the expected URL.
        """
        if isinstance(exception, Redirect):
            return redirect(exception.url)
        return None
