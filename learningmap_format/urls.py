"""
URLs for the learning map course format.
"""

from django.urls import path

from . import views

app_name = 'learningmap_format'

urlpatterns = [
    path('view/', views.course_view, name='view'),
    path('inplace_editable/', views.update_inplace_editable, name='inplace_editable'),
]
