# -*- coding:utf-8 -*-
import logging
from collections import namedtuple

from .models import PingOutcome
from .notifier import notify

logger = logging.getLogger(__name__)

Classification = namedtuple('Classification', 'outcome event')


def classify(request, target_exists, already_pinged):
    '''
    Decides what to answer to an examined pingback.

    target_exists and already_pinged are called without arguments, at most
    once each and in this order. already_pinged is not called when the
    target does not exist.

    Returns a Classification whose event is a SuccessEvent for
    PingOutcome.SUCCESS and None for any other outcome. Never raises.
    '''
    try:
        if request is None:
            return Classification(PingOutcome.INVALID_REQUEST, None)
        if not target_exists():
            return Classification(PingOutcome.TARGET_NOT_FOUND, None)
        if already_pinged():
            return Classification(PingOutcome.ALREADY_REGISTERED, None)
        if request.has_backlink and not request.contains_markup:
            logger.info('Accepting pingback from %s', request.source_url)
            return Classification(PingOutcome.SUCCESS, notify(request))
        if not request.has_backlink:
            logger.warning(
                'Source %s does not link to %s', request.source_url, request.target_url,
            )
            return Classification(PingOutcome.SOURCE_MISSING_BACKLINK, None)
        logger.warning('Spam detected in pingback from %s', request.source_url)
        return Classification(PingOutcome.SPAM_SUPPRESSED, None)
    except Exception:
        logger.exception('Pingback classification failed')
        return Classification(PingOutcome.INTERNAL_ERROR, None)
