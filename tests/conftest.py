from unittest.mock import MagicMock

import pytest

from easysms.config import Config
from easysms.exceptions import InvalidArgumentException
from easysms.messenger import GatewayDescriptor, Messenger


@pytest.fixture
def gateways():
    """名称 -> MagicMock 网关，测试里按需设置 send 的返回值或异常"""
    return {}


@pytest.fixture
def resolver(gateways):
    def _resolve(name, overrides=None):
        if name not in gateways:
            raise InvalidArgumentException(f"Gateway '{name}' is not supported.")
        return GatewayDescriptor(name=name, gateway=gateways[name], config=Config(overrides or {}))

    return MagicMock(side_effect=_resolve)


@pytest.fixture
def make_messenger(resolver):
    def _make(default_gateways=(), strategy=None):
        return Messenger(resolver=resolver, default_gateways=default_gateways, strategy=strategy)

    return _make


def stub_gateway(result=None, error=None):
    gateway = MagicMock()
    if error is not None:
        gateway.send.side_effect = error
    else:
        gateway.send.return_value = result if result is not None else {"status": "ok"}
    return gateway


@pytest.fixture
def stub():
    return stub_gateway
