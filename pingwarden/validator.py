# -*- coding:utf-8 -*-
'''
Checks that a raw request body is a pingback.ping XML-RPC call and pulls
source and target URLs out of it.
'''
import logging
from xml.etree import ElementTree

from .models import ValidationOutcome, ParsedPing

logger = logging.getLogger(__name__)

METHOD_NAME = 'pingback.ping'
METHOD_MARKER = '<methodName>%s</methodName>' % METHOD_NAME


def _text(value):
    # <value>url</value> and <value><string>url</string></value> are the same
    return ''.join(value.itertext()).strip()


def validate(raw_body, remote_ip):
    '''
    Validates a pingback request body.

    Returns a tuple (outcome, ping) where ping is a ParsedPing if outcome is
    ValidationOutcome.VALID and None otherwise. Never raises on bad input.
    '''
    try:
        if isinstance(raw_body, bytes):
            raw_body = raw_body.decode('utf-8')
        if not raw_body or not raw_body.strip() or not remote_ip or not remote_ip.strip():
            return ValidationOutcome.PARSE_ERROR, None

        logger.info('Receiving pingback from %s', remote_ip)
        logger.debug('Pingback payload: %s', raw_body)

        if METHOD_MARKER not in raw_body:
            logger.warning('Not a pingback call from %s', remote_ip)
            return ValidationOutcome.METHOD_NOT_FOUND, None

        root = ElementTree.fromstring(raw_body)
        if (root.findtext('methodName') or '').strip() != METHOD_NAME:
            return ValidationOutcome.METHOD_NOT_FOUND, None

        values = [_text(v) for v in root.findall('params/param/value')[:2]]
        if len(values) < 2 or not all(values):
            logger.warning('Could not find pingback source and target URLs')
            return ValidationOutcome.URL_MISSING, None

        source_url, target_url = values
        return ValidationOutcome.VALID, ParsedPing(source_url, target_url, remote_ip)
    except (ElementTree.ParseError, UnicodeDecodeError, ValueError) as e:
        logger.warning('Malformed pingback payload from %s: %s', remote_ip, e)
        return ValidationOutcome.PARSE_ERROR, None
