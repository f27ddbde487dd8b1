import pytest

from tests.payloads import Claims


@pytest.fixture
def claims() -> Claims:
    return Claims(jti="this one", exp=13)


@pytest.fixture
def secret() -> str:
    return "secret"
