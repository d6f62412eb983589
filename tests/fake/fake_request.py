class FakeRequestParts:
    """
    In-memory RequestParts for tests.

    Counts body reads so tests can assert that the body was (or was not)
    consumed, and can simulate headers already moved out or a body the
    framework fails to deliver.
    """

    def __init__(self, headers=None, body=b"", body_error=None, headers_taken=False):
        self._headers = None if headers_taken else dict(headers or {})
        self._body = body
        self._body_error = body_error
        self.body_reads = 0

    def headers(self):
        return self._headers

    async def body(self):
        self.body_reads += 1
        if self._body_error is not None:
            raise self._body_error
        return self._body
