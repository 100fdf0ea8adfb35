from abc import ABC, abstractmethod
from collections.abc import Mapping

from easysms.config import Config
from easysms.exceptions import InvalidArgumentException
from easysms.message import Message, PhoneNumber
from easysms.gateways.http import DEFAULT_TIMEOUT


class Gateway(ABC):
    """短信网关抽象基类，每个厂商一个实现

    网关实例只保存构造时的配置，不保存调用状态，可以被多个线程共用。
    """

    name: str = ""

    def __init__(self, config: Config | Mapping | None = None):
        self.config = config if isinstance(config, Config) else Config(config)

    def get_timeout(self, config: Config | None = None) -> float:
        config = config if config is not None else self.config
        return float(config.get("timeout", self.config.get("timeout", DEFAULT_TIMEOUT)))

    def require(self, config: Config, key: str):
        value = config.get(key)
        if value is None or value == "":
            raise InvalidArgumentException(f"Missing config '{key}' for gateway {self.name!r}.")
        return value

    @abstractmethod
    def send(self, to: PhoneNumber, message: Message, config: Config) -> dict:
        """发送短信

        Args:
            to: 接收号码
            message: 短信
            config: 该网关的配置

        Returns:
            厂商返回的原始数据

        Raises:
            InvalidArgumentException: 配置缺失或非法
            GatewayErrorException: 厂商返回失败或请求失败
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
