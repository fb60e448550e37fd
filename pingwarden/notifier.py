# -*- coding:utf-8 -*-
import logging

from .models import SuccessEvent
from .signals import received

logger = logging.getLogger(__name__)


def extract_domain(url):
    '''
    Returns the part of url between "://" and the next "/", without a
    leading "www.":

        >>> extract_domain('http://www.example.com/foo/bar')
        'example.com'
    '''
    start = url.find('://')
    start = 0 if start == -1 else start + 3
    stop = url.find('/', start)
    domain = url[start:] if stop == -1 else url[start:stop]
    if domain.startswith('www.'):
        domain = domain[len('www.'):]
    return domain


def notify(request):
    return SuccessEvent(domain=extract_domain(request.source_url), request=request)


def dispatch(event, sender=None):
    '''
    Sends the "received" signal for an accepted pingback. Errors raised by
    receivers are logged and otherwise ignored.
    '''
    request = event.request
    responses = received.send_robust(
        sender,
        event=event,
        source_url=request.source_url,
        target_url=request.target_url,
        domain=event.domain,
        title=request.title,
        remote_ip=request.remote_ip,
    )
    for receiver, response in responses:
        if isinstance(response, Exception):
            logger.error(
                'Pingback receiver %r failed', receiver,
                exc_info=(type(response), response, response.__traceback__),
            )
    return responses
