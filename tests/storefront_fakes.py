"""Fake transport for exercising the storefront ApiClient without a network."""
import json

import requests


def make_response(status_code: int, body=None, request: requests.PreparedRequest | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = b"" if body is None else json.dumps(body).encode()
    response.headers["Content-Type"] = "application/json"
    response.request = request
    response.url = request.url if request is not None else ""
    return response


class FakeTransport:
    """
    Plays back canned outcomes in order: (status, body) tuples or exceptions.
    Every request it receives is recorded.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.requests: list[requests.PreparedRequest] = []

    def __call__(self, request: requests.PreparedRequest) -> requests.Response:
        self.requests.append(request)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        status_code, body = outcome
        return make_response(status_code, body, request)

    @property
    def calls(self) -> int:
        return len(self.requests)
