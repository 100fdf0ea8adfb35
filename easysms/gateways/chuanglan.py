import json

from easysms.config import Config
from easysms.exceptions import GatewayErrorException, InvalidArgumentException
from easysms.gateways.base import Gateway
from easysms.gateways.http import HttpRequestMixin
from easysms.message import Message, PhoneNumber, DEFAULT_IDD_CODE

# https://zz.253.com/v5.html#/api_doc
ENDPOINT_URL_TEMPLATE = "https://{channel}.253.com/msg/send/json"
INT_URL = "http://intapi.253.com/send/json"

CHANNEL_VALIDATE_CODE = "smsbj1"
CHANNEL_PROMOTION_CODE = "smssh1"


class ChuanglanGateway(HttpRequestMixin, Gateway):
    """创蓝 253 云通讯"""

    name = "chuanglan"

    def send(self, to: PhoneNumber, message: Message, config: Config) -> dict:
        params = {
            "account": self.require(config, "account"),
            "password": self.require(config, "password"),
            "phone": to.number,
            "msg": self.wrap_channel_content(message.get_content(self) or "", config),
        }
        if to.idd_code != DEFAULT_IDD_CODE:
            params["mobile"] = f"{to.idd_code}{to.number}"

        result = self.post_json(
            self.build_endpoint(config, to.idd_code),
            params,
            timeout=self.get_timeout(config),
        )

        if str(result.get("code")) != "0":
            raise GatewayErrorException(
                json.dumps(result, ensure_ascii=False),
                result.get("code", 0),
                result,
            )
        return result

    def build_endpoint(self, config: Config, idd_code: str = DEFAULT_IDD_CODE) -> str:
        if idd_code != DEFAULT_IDD_CODE:
            return INT_URL
        return ENDPOINT_URL_TEMPLATE.format(channel=self.get_channel(config))

    @staticmethod
    def get_channel(config: Config) -> str:
        channel = config.get("channel", CHANNEL_VALIDATE_CODE)
        if channel not in (CHANNEL_VALIDATE_CODE, CHANNEL_PROMOTION_CODE):
            raise InvalidArgumentException("Invalid channel for ChuanglanGateway.")
        return channel

    def wrap_channel_content(self, content: str, config: Config) -> str:
        """营销通道需要带签名和退订语"""
        if self.get_channel(config) != CHANNEL_PROMOTION_CODE:
            return content

        sign = str(config.get("sign", "") or "")
        if not sign:
            raise InvalidArgumentException("Invalid sign for ChuanglanGateway when using promotion channel")

        unsubscribe = str(config.get("unsubscribe", "") or "")
        if not unsubscribe:
            raise InvalidArgumentException("Invalid unsubscribe for ChuanglanGateway when using promotion channel")

        return f"{sign}{content}{unsubscribe}"
