class ArkClientException(Exception):
    pass


class ConfigurationException(ArkClientException):
    pass


class URLResolutionException(ArkClientException):
    pass


class SerializationException(ArkClientException):
    pass


class HTTPClientException(ArkClientException):
    def __init__(self, *a, url=None, **kw):
        super().__init__(*a)
        self.url = url


class DecodeException(ArkClientException):
    """
    the response arrived but its body can't be turned into the requested value.
    the response is attached, so the status code is still available to the caller.
    """
    def __init__(self, *a, response=None, **kw):
        super().__init__(*a)
        self.response = response
