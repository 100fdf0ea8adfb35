import json
from datetime import datetime

from easysms.config import Config
from easysms.exceptions import GatewayErrorException
from easysms.gateways.base import Gateway
from easysms.message import Message, PhoneNumber


class ErrorlogGateway(Gateway):
    """不发送短信，只写入日志文件，用于本地调试"""

    name = "errorlog"

    def send(self, to: PhoneNumber, message: Message, config: Config) -> dict:
        path = config.get("file", "easy-sms.log")
        line = '[{}] to: {} | message: "{}"  | template: "{}" | data: {}\n'.format(
            datetime.now().isoformat(timespec="seconds"),
            to.number,
            message.get_content(self) or "",
            message.get_template(self) or "",
            json.dumps(message.get_data(self), ensure_ascii=False),
        )

        try:
            with open(path, "a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            raise GatewayErrorException(f"Unable to write {path}: {e}", raw={"file": path}) from e

        return {"status": True, "file": path}
