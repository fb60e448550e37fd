# -*- coding:utf-8 -*-
from xmlrpc.client import Fault

from .models import PingOutcome, ValidationOutcome


class Error(Fault):
    code = 0
    message = 'Unknown error'

    def __init__(self, message=None, **kwargs):
        message = message or self.message
        super().__init__(self.code, message, **kwargs)


class TargetNotFoundUnderSource(Error):
    code = 17
    message = 'Target URL is not found under source URL'


class TargetDoesNotExist(Error):
    code = 32
    message = 'Target URL does not exist'


class DuplicatePing(Error):
    code = 48
    message = 'Pingback has already been registered'


VALIDATION_FAULTS = {
    ValidationOutcome.METHOD_NOT_FOUND: 'Unknown method, expected "pingback.ping"',
    ValidationOutcome.URL_MISSING: 'pingback.ping requires source and target URLs',
    ValidationOutcome.PARSE_ERROR: 'Malformed pingback request',
}

# Spam gets exactly what a missing target gets
OUTCOME_FAULTS = {
    PingOutcome.SOURCE_MISSING_BACKLINK: TargetNotFoundUnderSource,
    PingOutcome.TARGET_NOT_FOUND: TargetDoesNotExist,
    PingOutcome.ALREADY_REGISTERED: DuplicatePing,
    PingOutcome.SPAM_SUPPRESSED: TargetDoesNotExist,
}


def fault_for(result):
    '''
    Returns a Fault to answer with for a receiver.Result or None if the
    pingback was accepted.
    '''
    if result.validation is not ValidationOutcome.VALID:
        return Error(VALIDATION_FAULTS[result.validation])
    if result.outcome is PingOutcome.SUCCESS:
        return None
    return OUTCOME_FAULTS.get(result.outcome, Error)()
