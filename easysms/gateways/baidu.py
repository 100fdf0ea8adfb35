import hashlib
import hmac
import json
from datetime import datetime, timezone
from urllib.parse import quote

from easysms.config import Config
from easysms.exceptions import GatewayErrorException
from easysms.gateways.base import Gateway
from easysms.gateways.http import HttpRequestMixin
from easysms.message import Message, PhoneNumber

# https://cloud.baidu.com/doc/SMS/API.html
ENDPOINT_HOST = "sms.bj.baidubce.com"
ENDPOINT_URI = "/bce/v2/message"
BCE_AUTH_VERSION = "bce-auth-v1"
DEFAULT_EXPIRATION_IN_SECONDS = 1800
SUCCESS_CODE = 1000


def _hmac_sha256(key: str, msg: str) -> str:
    return hmac.new(key.encode(), msg.encode(), hashlib.sha256).hexdigest()


class BaiduGateway(HttpRequestMixin, Gateway):
    """百度云短信，使用 bce-auth-v1 签名"""

    name = "baidu"

    def send(self, to: PhoneNumber, message: Message, config: Config) -> dict:
        params = {
            "invokeId": self.require(config, "invoke_id"),
            "phoneNumber": to.number,
            "templateCode": message.get_template(self),
            "contentVar": message.get_data(self),
        }
        body = json.dumps(params, ensure_ascii=False)
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")

        headers = {
            "host": config.get("domain", ENDPOINT_HOST),
            "content-type": "application/json",
            "x-bce-date": timestamp,
            "x-bce-content-sha256": hashlib.sha256(body.encode()).hexdigest(),
        }
        sign_headers = {k: headers[k] for k in ("host", "x-bce-content-sha256")}
        headers["Authorization"] = self.generate_sign(sign_headers, timestamp, config)

        result = self.request(
            "post",
            self.build_endpoint(config),
            headers=headers,
            content=body.encode(),
            timeout=self.get_timeout(config),
        )

        if result.get("code") != SUCCESS_CODE:
            raise GatewayErrorException(result.get("message", ""), result.get("code", 0), result)
        return result

    @staticmethod
    def build_endpoint(config: Config) -> str:
        return f"http://{config.get('domain', ENDPOINT_HOST)}{ENDPOINT_URI}"

    def generate_sign(self, sign_headers: dict, timestamp: str, config: Config) -> str:
        auth_string = (
            f"{BCE_AUTH_VERSION}/{self.require(config, 'ak')}/{timestamp}/{DEFAULT_EXPIRATION_IN_SECONDS}"
        )
        signing_key = _hmac_sha256(self.require(config, "sk"), auth_string)

        canonical_uri = quote(ENDPOINT_URI, safe="/")
        # 该接口没有 query string
        canonical_query_string = ""
        signed_headers = ";".join(name.strip().lower() for name in sign_headers)
        canonical_request = "\n".join([
            "POST",
            canonical_uri,
            canonical_query_string,
            self.canonical_headers(sign_headers),
        ])

        signature = _hmac_sha256(signing_key, canonical_request)
        return f"{auth_string}/{signed_headers}/{signature}"

    @staticmethod
    def canonical_headers(headers: dict) -> str:
        lines = [
            f"{quote(name.strip().lower(), safe='')}:{quote(str(value).strip(), safe='')}"
            for name, value in headers.items()
        ]
        return "\n".join(sorted(lines))
