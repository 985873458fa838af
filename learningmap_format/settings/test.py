"""
Minimal Django settings for the tests of the learning map course format.
"""


import sys

from learningmap_format.settings.common import plugin_settings

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

INSTALLED_APPS = (
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'learningmap_format.apps.LearningMapFormatConfig',
)

MIDDLEWARE = (
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'learningmap_format.middleware.RedirectMiddleware',
)

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
            ],
        },
    },
]

ROOT_URLCONF = 'learningmap_format.tests.urls'
LOGIN_URL = '/login/'

SECRET_KEY = 'insecure-secret-key'
USE_TZ = True

# No monitoring backend in tests.
OPENEDX_TELEMETRY = []
DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

plugin_settings(sys.modules[__name__])

LEARNINGMAP_FORMAT_PLATFORM_SERVICE = 'learningmap_format.tests.utils.FakePlatformService'
