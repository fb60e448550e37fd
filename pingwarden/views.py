# -*- coding:utf-8 -*-
import functools
import logging
from urllib.parse import urlsplit
from xmlrpc.client import dumps

from django import http
from django.urls import resolve, reverse, Resolver404
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from . import conf, errors, receiver

logger = logging.getLogger(__name__)


def _local_target(request, root):
    def target_exists(source_url, target_url):
        schema, host, path, query, fragment = urlsplit(target_url)
        if host != request.get_host() or not path.startswith(root):
            logger.info('Target %s is not under %s%s', target_url, request.get_host(), root)
            return False
        try:
            resolve(path, getattr(request, 'urlconf', None))
        except Resolver404:
            return False
        return True
    return target_exists


def _never_pinged(source_url, target_url):
    return False


@csrf_exempt
@require_POST
def server_view(request, root='/', target_exists=None, already_pinged=None):
    '''
    Server view handling pingback requests.

    Include this view in your urlconf under any path you like and
    provide a link to this URL in your HTML:

        <link rel="pingback" href="..."/>

    Or send it in an HTTP server header (see x_pingback):

        X-Pingback: ...

    The optional parameter "root" sets a root path within which server will
    consider incoming target URLs as its own. "target_exists" and
    "already_pinged" replace the default checks, both take
    (source_url, target_url). By default a target exists if it resolves in
    the urlconf and duplicates are checked by PINGBACK_ALREADY_PINGED.

    Accepted pingbacks are announced with the pingwarden.signals.received
    signal.
    '''
    target_exists = target_exists or _local_target(request, root)
    already_pinged = already_pinged or conf.already_pinged_check() or _never_pinged
    try:
        result = receiver.process(
            request.body,
            request.META.get('REMOTE_ADDR', ''),
            target_exists,
            already_pinged,
            sender=request,
        )
        fault = errors.fault_for(result)
    except Exception:
        logger.exception('Pingback processing failed')
        fault = errors.Error()
    if fault is None:
        response = dumps(('Pingback registered',), methodresponse=True)
    else:
        response = dumps(fault)
    return http.HttpResponse(response, content_type='text/xml')


def x_pingback(url_name):
    '''
    Decorator for views that should advertise the pingback server found
    under url_name with an X-Pingback header.
    '''
    def decorator(view):
        @functools.wraps(view)
        def wrapper(request, *args, **kwargs):
            response = view(request, *args, **kwargs)
            response['X-Pingback'] = request.build_absolute_uri(reverse(url_name))
            return response
        return wrapper
    return decorator
