# -*- coding:utf-8 -*-
'''
The whole server side of a pingback: validation, examination of the source
page, classification and notification of receivers.
'''
from collections import namedtuple

from .models import ValidationOutcome
from . import validator, examiner, classifier, notifier

Result = namedtuple('Result', 'validation outcome event')


def process(raw_body, remote_ip, target_exists, already_pinged, timeout=None, sender=None):
    '''
    Processes a raw pingback request body.

    target_exists and already_pinged take (source_url, target_url) and return
    a bool. They are the storage layer's business.

    Returns a Result. For an invalid payload only Result.validation is set
    and the source page is not fetched. For an accepted pingback the
    "received" signal has already been sent with the event.
    '''
    validation, ping = validator.validate(raw_body, remote_ip)
    if validation is not ValidationOutcome.VALID:
        return Result(validation, None, None)

    request = examiner.examine(ping, timeout)
    outcome, event = classifier.classify(
        request,
        lambda: target_exists(request.source_url, request.target_url),
        lambda: already_pinged(request.source_url, request.target_url),
    )
    if event is not None:
        notifier.dispatch(event, sender)
    return Result(validation, outcome, event)
