# -*- coding:utf-8 -*-
'''
Values passed between the stages of pingback processing.

All of them are immutable: each stage returns a new value and the next stage
gets it as an argument.
'''
from dataclasses import dataclass, field
import enum


class ValidationOutcome(enum.Enum):
    METHOD_NOT_FOUND = 'method_not_found'
    URL_MISSING = 'url_missing'
    VALID = 'valid'
    PARSE_ERROR = 'parse_error'


class PingOutcome(enum.Enum):
    INVALID_REQUEST = 'invalid_request'
    TARGET_NOT_FOUND = 'target_not_found'
    ALREADY_REGISTERED = 'already_registered'
    SUCCESS = 'success'
    SOURCE_MISSING_BACKLINK = 'source_missing_backlink'
    SPAM_SUPPRESSED = 'spam_suppressed'
    INTERNAL_ERROR = 'internal_error'


@dataclass(frozen=True)
class ParsedPing:
    source_url: str
    target_url: str
    remote_ip: str


@dataclass(frozen=True)
class SourceDocumentInfo:
    title: str = ''
    # the title looks like raw markup
    contains_markup: bool = False
    has_backlink: bool = False


@dataclass(frozen=True)
class PingRequest:
    source_url: str
    target_url: str
    remote_ip: str
    document: SourceDocumentInfo = field(default_factory=SourceDocumentInfo)

    @property
    def title(self):
        return self.document.title

    @property
    def contains_markup(self):
        return self.document.contains_markup

    @property
    def has_backlink(self):
        return self.document.has_backlink


@dataclass(frozen=True)
class SuccessEvent:
    domain: str
    request: PingRequest
