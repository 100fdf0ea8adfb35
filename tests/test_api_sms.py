from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from easysms.api.sms import get_easy_sms
from easysms.exceptions import GatewayErrorException, InvalidArgumentException, NoGatewayAvailableException
from easysms.main import app
from easysms.messenger import Result, SendStatus


@pytest.fixture
def mock_easy_sms():
    return MagicMock()


@pytest.fixture
def client(mock_easy_sms):
    app.dependency_overrides[get_easy_sms] = lambda: mock_easy_sms
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_send_sms(client, mock_easy_sms):
    mock_easy_sms.send.return_value = {
        "huaxin": Result("huaxin", SendStatus.FAILURE, exception=GatewayErrorException("操作失败", 400, {"returnstatus": "Faild"})),
        "errorlog": Result("errorlog", SendStatus.SUCCESS, result={"status": True}),
    }

    response = client.post("/api/sms", json={"to": "18188888888", "content": "您的验证码为 1234"})

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert [r["gateway"] for r in body["results"]] == ["huaxin", "errorlog"]
    assert body["results"][0]["code"] == 400
    assert body["results"][0]["raw_response"] == {"returnstatus": "Faild"}
    assert body["results"][1]["result"] == {"status": True}

    to, message, gateways = mock_easy_sms.send.call_args.args
    assert to.universal_number == "+8618188888888"
    assert message.get_content() == "您的验证码为 1234"
    assert gateways is None


def test_send_sms_with_template_and_gateways(client, mock_easy_sms):
    mock_easy_sms.send.return_value = {
        "baidu": Result("baidu", SendStatus.SUCCESS, result={"code": 1000}),
    }

    response = client.post("/api/sms", json={
        "to": "91234567",
        "idd_code": "852",
        "template": "SMS_001",
        "data": {"code": "1234"},
        "gateways": ["baidu"],
    })

    assert response.status_code == 200
    to, message, gateways = mock_easy_sms.send.call_args.args
    assert to.idd_code == "852"
    assert message.get_template() == "SMS_001"
    assert message.get_data() == {"code": "1234"}
    assert gateways == ["baidu"]


def test_send_sms_all_gateways_failed(client, mock_easy_sms):
    mock_easy_sms.send.side_effect = NoGatewayAvailableException({
        "huaxin": Result("huaxin", SendStatus.FAILURE, exception=GatewayErrorException("操作失败", 400)),
    })

    response = client.post("/api/sms", json={"to": "18188888888", "content": "hi"})

    assert response.status_code == 502
    body = response.json()
    assert body["ok"] is False
    assert body["results"][0]["message"] == "操作失败"


def test_send_sms_config_error(client, mock_easy_sms):
    mock_easy_sms.send.side_effect = InvalidArgumentException("Gateway 'ghost' is not supported.")

    response = client.post("/api/sms", json={"to": "18188888888", "content": "hi", "gateways": ["ghost"]})

    assert response.status_code == 400
    assert "ghost" in response.json()["detail"]


def test_send_sms_invalid_number(client, mock_easy_sms):
    response = client.post("/api/sms", json={"to": "abc", "content": "hi"})
    assert response.status_code == 400
    mock_easy_sms.send.assert_not_called()


def test_send_sms_requires_content_or_template(client):
    response = client.post("/api/sms", json={"to": "18188888888"})
    assert response.status_code == 422


def test_lifespan_sets_up_logging():
    from easysms.config import settings

    with patch("easysms.main.setup_logging") as setup_logging:
        with TestClient(app) as c:
            assert c.get("/health").status_code == 200

    setup_logging.assert_called_once_with(settings.log_level)
