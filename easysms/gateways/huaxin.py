from easysms.config import Config
from easysms.exceptions import GatewayErrorException
from easysms.gateways.base import Gateway
from easysms.gateways.http import HttpRequestMixin
from easysms.message import Message, PhoneNumber

ENDPOINT_TEMPLATE = "http://{ip}/smsJson.aspx"


class HuaxinGateway(HttpRequestMixin, Gateway):
    """华信短信平台"""

    name = "huaxin"

    def send(self, to: PhoneNumber, message: Message, config: Config) -> dict:
        endpoint = ENDPOINT_TEMPLATE.format(ip=self.require(config, "ip"))
        result = self.post(
            endpoint,
            {
                "userid": self.require(config, "user_id"),
                "password": self.require(config, "password"),
                "account": self.require(config, "account"),
                "mobile": to.number,
                "content": message.get_content(self) or "",
                "sendTime": "",
                "action": "send",
                "extno": config.get("ext_no", "") or "",
            },
            timeout=self.get_timeout(config),
        )

        if result.get("returnstatus") != "Success":
            raise GatewayErrorException(result.get("message", ""), 400, result)
        return result
