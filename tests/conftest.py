from unittest.mock import MagicMock
from urllib.parse import parse_qsl, urlsplit

import pytest

from confluxscan_sdk import CoreScanner, CoreScannerWrapper

ACCOUNT = "cfx:aapgmw9up7tm7dxy5pctg8442dz6x7ak4u9fzsj0fm"
CONTRACT = "cfx:acg158kvr8zanb1bs048ryb6rtrhr283ma70vz70tx"
TOKEN = "cfx:achc8nxj7r451c223m18w2dwjnmhkd6rxawrvkvsy2"
NFT_CONTRACT = "cfx:ach7c9fr2skv5fft98cygac0g93999z1refedecnn1"


def make_response(payload, status_code=200, reason="OK"):
    response = MagicMock()
    response.ok = 200 <= status_code < 300
    response.status_code = status_code
    response.reason = reason
    response.json.return_value = payload
    return response


@pytest.fixture
def session():
    """Stand-in for requests.Session answering an empty success envelope"""
    session = MagicMock()
    session.get.return_value = make_response({"code": 0, "message": "OK", "data": {}})
    return session


@pytest.fixture
def respond(session):
    """Set the ``data`` of the next envelope the session answers with"""
    def set_data(data):
        session.get.return_value = make_response({"code": 0, "message": "OK", "data": data})
    return set_data


@pytest.fixture
def last_request(session):
    """Path and query parameters of the last request sent"""
    def get():
        url = session.get.call_args[0][0]
        parts = urlsplit(url)
        return parts.path, dict(parse_qsl(parts.query))
    return get


@pytest.fixture
def scanner(session):
    return CoreScanner(session=session)


@pytest.fixture
def wrapper(session):
    return CoreScannerWrapper(session=session)
