# -*- coding:utf-8 -*-
'''
Fetches the source page of a pingback and checks that it links to the
target.
'''
import http.client
import logging
import re
import socket
import time
from urllib.parse import urlsplit
from urllib.request import urlopen

from . import conf
from .models import PingRequest, SourceDocumentInfo

logger = logging.getLogger(__name__)

TITLE_OPEN_RE = re.compile(r'<title[^<>]*>', re.IGNORECASE)
TITLE_CLOSE_RE = re.compile(r'</title>', re.IGNORECASE)
TAG_RE = re.compile(
    r'''</?\w+((\s+\w+(\s*=\s*(?:"[^"]*"|'[^']*'|[^'">\s]+))?)+\s*|\s*)/?>'''
)

FETCH_ERRORS = (OSError, http.client.HTTPException, ValueError)
CHUNK_SIZE = 16 * 1024


def fetch(url, timeout):
    '''
    Returns the text of the page at url, at most PINGBACK_MAX_SOURCE_SIZE
    bytes of it.

    timeout bounds reading the whole body, not just each socket operation.
    A source that trickles its page past the deadline raises socket.timeout.
    '''
    if urlsplit(url).scheme not in ('http', 'https'):
        raise ValueError('Unsupported source URL "%s"' % url)
    deadline = time.monotonic() + timeout
    limit = conf.max_source_size()
    chunks, size = [], 0
    with urlopen(url, timeout=timeout) as f:
        while size < limit:
            if time.monotonic() > deadline:
                raise socket.timeout('Reading %s took longer than %s seconds' % (url, timeout))
            # read1 returns whatever has arrived instead of waiting for a full chunk
            chunk = f.read1(min(CHUNK_SIZE, limit - size))
            if not chunk:
                break
            chunks.append(chunk)
            size += len(chunk)
        charset = f.headers.get_content_charset() or 'utf-8'
    content = b''.join(chunks)
    try:
        return content.decode(charset, 'replace')
    except LookupError:
        return content.decode('utf-8', 'replace')


def find_title(html):
    '''
    Returns the text between the first <title> and the </title> after it,
    or '' if there is no such pair.
    '''
    start = TITLE_OPEN_RE.search(html)
    if not start:
        return ''
    end = TITLE_CLOSE_RE.search(html, start.end())
    if not end:
        return ''
    return html[start.end():end.start()].strip()


def examine_document(html, target_url):
    title = find_title(html)
    return SourceDocumentInfo(
        title=title,
        contains_markup=bool(TAG_RE.search(title)),
        has_backlink=target_url.upper() in html.upper(),
    )


def examine(ping, timeout=None):
    '''
    Fetches ping.source_url and builds a PingRequest out of it.

    A source that cannot be fetched or examined is reported as having no
    backlink, the error is only logged.
    '''
    timeout = conf.timeout(timeout)
    logger.info('Processing pingback from %s to %s', ping.source_url, ping.target_url)
    try:
        document = examine_document(fetch(ping.source_url, timeout), ping.target_url)
    except FETCH_ERRORS as e:
        logger.error('Could not fetch pingback source %s: %s', ping.source_url, e)
        document = SourceDocumentInfo()
    except Exception:
        logger.exception('Examining pingback source %s failed', ping.source_url)
        document = SourceDocumentInfo()
    else:
        logger.info(
            'Source %s: title=%r, contains_markup=%s, has_backlink=%s',
            ping.source_url, document.title, document.contains_markup, document.has_backlink,
        )
    return PingRequest(
        source_url=ping.source_url,
        target_url=ping.target_url,
        remote_ip=ping.remote_ip,
        document=document,
    )
