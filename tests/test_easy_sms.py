import random
from unittest.mock import MagicMock, patch

import pytest

from easysms import EasySms
from easysms.exceptions import GatewayErrorException, InvalidArgumentException, NoGatewayAvailableException
from easysms.gateways import ErrorlogGateway, HuaxinGateway
from easysms.strategies import OrderStrategy, RandomStrategy


@pytest.fixture
def log_file(tmp_path):
    return tmp_path / "easy-sms.log"


@pytest.fixture
def easy_sms(log_file):
    return EasySms({
        "timeout": 3.0,
        "default": {"strategy": "order", "gateways": ["huaxin", "errorlog"]},
        "gateways": {
            "errorlog": {"file": str(log_file)},
            "huaxin": {"user_id": "u", "password": "p", "account": "a", "ip": "127.0.0.1"},
        },
    })


def test_gateway_builds_configured_instance(easy_sms, log_file):
    gateway = easy_sms.gateway("errorlog")
    assert isinstance(gateway, ErrorlogGateway)
    assert gateway.config.get("file") == str(log_file)
    assert gateway.config.get("timeout") == 3.0


def test_gateway_overrides_take_precedence(easy_sms):
    config = easy_sms.gateway_config("huaxin", {"ip": "10.0.0.1", "timeout": 1})
    assert config.get("ip") == "10.0.0.1"
    assert config.get("timeout") == 1
    assert config.get("account") == "a"


def test_unknown_gateway(easy_sms):
    with pytest.raises(InvalidArgumentException):
        easy_sms.gateway("ghost")
    with pytest.raises(InvalidArgumentException):
        easy_sms.send(18188888888, "hello", ["ghost"])


def test_strategy_from_config():
    assert isinstance(EasySms({}).messenger.strategy, OrderStrategy)
    easy_sms = EasySms({"default": {"strategy": "random"}}, rng=random.Random(1))
    assert isinstance(easy_sms.messenger.strategy, RandomStrategy)


def test_failover_to_errorlog(easy_sms, log_file):
    with patch.object(HuaxinGateway, "post", return_value={"returnstatus": "Faild", "message": "操作失败"}):
        results = easy_sms.send(18188888888, "This is a test message.")

    assert list(results) == ["huaxin", "errorlog"]
    assert results["huaxin"].code == 400
    assert results["errorlog"].ok
    assert "to: 18188888888" in log_file.read_text(encoding="utf-8")


def test_all_gateways_fail(easy_sms, tmp_path):
    with patch.object(HuaxinGateway, "post", return_value={"returnstatus": "Faild", "message": "操作失败"}):
        with pytest.raises(NoGatewayAvailableException) as exc_info:
            easy_sms.send(18188888888, "hi", {"huaxin": {}, "errorlog": {"file": str(tmp_path)}})

    assert list(exc_info.value.results) == ["huaxin", "errorlog"]


def test_no_default_gateways():
    with pytest.raises(NoGatewayAvailableException) as exc_info:
        EasySms({}).send(18188888888, "hi")
    assert exc_info.value.results == {}


def test_extend_registers_custom_gateway(easy_sms):
    custom = MagicMock()
    custom.send.return_value = {"sid": "SM1"}
    creator = MagicMock(return_value=custom)

    results = easy_sms.extend("custom", creator).send(18188888888, "hi", ["custom"])

    assert results["custom"].result == {"sid": "SM1"}
    config = creator.call_args.args[0]
    assert config.get("timeout") == 3.0
    to, message, send_config = custom.send.call_args.args
    assert to.number == "18188888888"
    assert send_config is config


def test_extend_can_replace_builtin_gateway(easy_sms):
    custom = MagicMock()
    custom.send.side_effect = GatewayErrorException("bad sign", 100)
    easy_sms.extend("huaxin", lambda config: custom)

    results = easy_sms.send(18188888888, "hi")

    assert results["huaxin"].code == 100
    assert results["errorlog"].ok


def test_send_with_single_gateway_name(easy_sms, log_file):
    results = easy_sms.send(18188888888, "hi", "errorlog")

    assert list(results) == ["errorlog"]
    assert "to: 18188888888" in log_file.read_text(encoding="utf-8")


def test_gateways_config_must_be_mapping():
    easy_sms = EasySms({"default": {"gateways": ["errorlog"]}, "gateways": ["errorlog"]})

    with pytest.raises(InvalidArgumentException):
        easy_sms.send(18188888888, "hi")


def test_gateway_config_merges_overrides_without_touching_base(easy_sms):
    easy_sms.gateway_config("huaxin", {"ip": "10.0.0.1"})
    assert easy_sms.gateway_config("huaxin").get("ip") == "127.0.0.1"
