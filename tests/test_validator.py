import pytest

from pingwarden.models import ValidationOutcome
from pingwarden.validator import validate

from .helpers import pingback_body

SOURCE = 'http://a.example/'
TARGET = 'http://b.example/post'


def test_valid_ping():
    body = (
        '<methodCall><methodName>pingback.ping</methodName><params>'
        '<param><value>http://a.example/</value></param>'
        '<param><value>http://b.example/post</value></param>'
        '</params></methodCall>'
    )
    outcome, ping = validate(body, '10.0.0.1')
    assert outcome is ValidationOutcome.VALID
    assert ping.source_url == SOURCE
    assert ping.target_url == TARGET
    assert ping.remote_ip == '10.0.0.1'


def test_typed_string_values_are_trimmed():
    body = pingback_body('<string>  %s \n</string>' % SOURCE, '<string>%s</string>' % TARGET)
    outcome, ping = validate(body.encode('utf-8'), '10.0.0.1')
    assert outcome is ValidationOutcome.VALID
    assert (ping.source_url, ping.target_url) == (SOURCE, TARGET)


def test_extra_params_are_ignored():
    outcome, ping = validate(pingback_body(SOURCE, TARGET, 'extra'), '10.0.0.1')
    assert outcome is ValidationOutcome.VALID
    assert ping.target_url == TARGET


@pytest.mark.parametrize('remote_ip', ['10.0.0.1', '::1', '192.168.1.20'])
def test_other_method_is_not_found(remote_ip):
    body = pingback_body(SOURCE, TARGET, method='weblogUpdates.ping')
    assert validate(body, remote_ip) == (ValidationOutcome.METHOD_NOT_FOUND, None)


def test_method_check_happens_before_parsing():
    assert validate('<not xml', '10.0.0.1') == (ValidationOutcome.METHOD_NOT_FOUND, None)


@pytest.mark.parametrize('params', [(), (SOURCE,), (SOURCE, '   ')])
def test_missing_urls(params):
    assert validate(pingback_body(*params), '10.0.0.1') == (ValidationOutcome.URL_MISSING, None)


def test_no_params_element():
    body = '<methodCall><methodName>pingback.ping</methodName></methodCall>'
    assert validate(body, '10.0.0.1') == (ValidationOutcome.URL_MISSING, None)


def test_malformed_xml():
    body = '<methodCall><methodName>pingback.ping</methodName><params>'
    assert validate(body, '10.0.0.1') == (ValidationOutcome.PARSE_ERROR, None)


@pytest.mark.parametrize('body, remote_ip', [
    ('', '10.0.0.1'),
    ('   ', '10.0.0.1'),
    (None, '10.0.0.1'),
    (pingback_body(SOURCE, TARGET), ''),
    (pingback_body(SOURCE, TARGET), '  '),
    (pingback_body(SOURCE, TARGET), None),
])
def test_empty_input(body, remote_ip):
    assert validate(body, remote_ip) == (ValidationOutcome.PARSE_ERROR, None)


def test_undecodable_bytes():
    body = b'<methodName>pingback.ping</methodName>\xff\xfe'
    assert validate(body, '10.0.0.1') == (ValidationOutcome.PARSE_ERROR, None)


def test_calls_are_independent():
    first = validate(pingback_body('http://one.example/', TARGET), '10.0.0.1')[1]
    second = validate(pingback_body('http://two.example/', TARGET), '10.0.0.2')[1]
    assert first.source_url == 'http://one.example/'
    assert first.remote_ip == '10.0.0.1'
    assert second.source_url == 'http://two.example/'
