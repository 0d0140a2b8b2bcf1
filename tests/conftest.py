import pytest


class FakeResponse:
    def __init__(self, payload=None, status_code=200, reason="OK"):
        self._payload = payload
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        return self._payload


class FakeSession:
    """Serves canned pages keyed by (RT, pageNum) and records every call."""

    def __init__(self, pages=None, errors=None):
        self.pages = pages or {}
        self.errors = errors or {}
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params), "headers": dict(headers)})
        key = (params["RT"], params["pageNum"])
        if params["RT"] in self.errors:
            exc = self.errors[params["RT"]]
            if isinstance(exc, Exception):
                raise exc
            return FakeResponse(status_code=exc, reason="Bad Request")
        return FakeResponse({"Items": self.pages.get(key, []), "TotalCount": len(self.pages.get(key, []))})


@pytest.fixture
def make_session():
    return FakeSession
