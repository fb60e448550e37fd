'''
Server and client implementation of Pingback protocol
(http://hixie.ch/specs/pingback/pingback-1.0).

The server checks that the source page really links to the target and
quietly drops pingbacks from pages that look like spam.
'''

from .models import ValidationOutcome, PingOutcome, ParsedPing, \
                    SourceDocumentInfo, PingRequest, SuccessEvent
from .validator import validate
from .examiner import examine
from .classifier import classify
from .notifier import extract_domain, notify
from .receiver import process
from .signals import received
from .client import external_urls, discover, ping, ping_external_urls
from .errors import Error, TargetNotFoundUnderSource, TargetDoesNotExist, \
                    DuplicatePing
