# -*- coding:utf-8 -*-
'''
Settings used by pingwarden. They are read on every call so that
override_settings and per-project changes take effect immediately.
'''
from django.conf import settings
from django.utils.module_loading import import_string

DEFAULT_TIMEOUT = 30
DEFAULT_MAX_SOURCE_SIZE = 1024 * 1024


def timeout(value=None):
    if value is not None:
        return value
    return getattr(settings, 'PINGBACK_TIMEOUT', DEFAULT_TIMEOUT)


def max_source_size():
    return getattr(settings, 'PINGBACK_MAX_SOURCE_SIZE', DEFAULT_MAX_SOURCE_SIZE)


def already_pinged_check():
    '''
    Returns the callable configured in PINGBACK_ALREADY_PINGED or None.
    The callable takes (source_url, target_url) and returns a bool.
    '''
    path = getattr(settings, 'PINGBACK_ALREADY_PINGED', None)
    if not path:
        return None
    return path if callable(path) else import_string(path)
