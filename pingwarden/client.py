# -*- coding:utf-8 -*-
import logging
import re
import xmlrpc.client
from urllib.parse import urlsplit
from urllib.request import urlopen
from xml.parsers.expat import ExpatError

import html5lib

from . import conf

logger = logging.getLogger(__name__)

DISCOVERY_SIZE = 512 * 1024
LINK_RE = re.compile(r'<link rel="pingback" href="([^"]+)" ?/?>')


class TimeoutTransport(xmlrpc.client.Transport):
    def __init__(self, timeout, **kwargs):
        super().__init__(**kwargs)
        self.timeout = timeout

    def make_connection(self, host):
        connection = super().make_connection(host)
        connection.timeout = self.timeout
        return connection


class TimeoutSafeTransport(xmlrpc.client.SafeTransport):
    def __init__(self, timeout, **kwargs):
        super().__init__(**kwargs)
        self.timeout = timeout

    def make_connection(self, host):
        connection = super().make_connection(host)
        connection.timeout = self.timeout
        return connection


def external_urls(html, root_url):
    '''
    Finds external links in an HTML fragment and returns an iterator
    with their URLs.

    root_url defines a root outside of which links are considered external.
    '''
    s, root_host, root_path, q, f = urlsplit(root_url)

    def is_external(url):
        schema, host, path, query, fragment = urlsplit(url)
        return schema in ('', 'http', 'https') and host != '' and \
               (host != root_host or not path.startswith(root_path))

    doc = html5lib.parseFragment(html, namespaceHTMLElements=False)
    urls = (a.get('href', '') for a in doc.iter('a'))
    return (u for u in urls if is_external(u))


def discover(target_url, timeout=None):
    '''
    Returns the URL of the pingback server for target_url taken from the
    X-Pingback header or a <link rel="pingback"> element. Returns None if
    the target does not advertise one.
    '''
    request_url = 'http:%s' % target_url if target_url.startswith('//') else target_url
    with urlopen(request_url, timeout=conf.timeout(timeout)) as f:
        server_url = f.headers.get('X-Pingback', '')
        if not server_url:
            charset = f.headers.get_content_charset() or 'utf-8'
            content = f.read(DISCOVERY_SIZE).decode(charset, 'replace')
            match = LINK_RE.search(content)
            server_url = match and match.group(1)
    return server_url or None


def ping(source_url, target_url, timeout=None):
    '''
    Makes a pingback request to target_url on behalf of source_url, i.e.
    effectively saying to target_url that "the page at source_url is
    linking to you".

    Returns the server's answer or None if target_url doesn't accept
    pingbacks. Faults come out as xmlrpc.client.Fault.
    '''
    timeout = conf.timeout(timeout)
    server_url = discover(target_url, timeout)
    if not server_url:
        logger.debug('No pingback server for %s', target_url)
        return None
    if urlsplit(server_url).scheme == 'https':
        transport = TimeoutSafeTransport(timeout)
    else:
        transport = TimeoutTransport(timeout)
    server = xmlrpc.client.ServerProxy(server_url, transport=transport)
    return server.pingback.ping(source_url, target_url)


def ping_external_urls(source_url, html, root_url):
    '''
    Makes pingback requests to all external links in an HTML fragment.

    source_url is a URL of the page contaning HTML fragment.
    root_url defines a root outside of which links are considered external.
    '''
    for url in external_urls(html, root_url):
        try:
            ping(source_url, url)
        except (IOError, xmlrpc.client.Error, ExpatError) as e:
            # One failed URL shouldn't block others
            logger.warning('Pingback to %s failed: %s', url, e)
