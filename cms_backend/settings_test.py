"""
Settings used by the test suite.
"""
import os

os.environ['CMS_ENVIRONMENT'] = 'test'

from .settings import *  # noqa: E402,F401,F403

# No collectstatic run under test
STORAGES = {
    'default': {
        'BACKEND': 'django.core.files.storage.FileSystemStorage',
    },
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}
