import email.message
import io


class FakeResponse(io.BytesIO):
    '''Stands in for what urlopen returns.'''

    def __init__(self, body, content_type='text/html; charset=utf-8', headers=None):
        super().__init__(body.encode('utf-8'))
        self.headers = email.message.Message()
        self.headers['Content-Type'] = content_type
        for name, value in (headers or {}).items():
            self.headers[name] = value


def pingback_body(*params, method='pingback.ping'):
    values = ''.join('<param><value>%s</value></param>' % p for p in params)
    return (
        '<?xml version="1.0"?>'
        '<methodCall><methodName>%s</methodName>'
        '<params>%s</params></methodCall>' % (method, values)
    )


def page(title, body=''):
    return '<html><head><title>%s</title></head><body>%s</body></html>' % (title, body)
