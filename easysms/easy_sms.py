import random
from collections.abc import Callable, Mapping

from easysms.config import Config
from easysms.exceptions import InvalidArgumentException
from easysms.gateways import GATEWAYS, Gateway
from easysms.gateways.http import DEFAULT_TIMEOUT
from easysms.message import Message, PhoneNumber
from easysms.messenger import GatewayDescriptor, Gateways, Messenger, Result
from easysms.strategies import get_strategy

GatewayCreator = Callable[[Config], Gateway]


class EasySms:
    """对外入口：根据配置构建网关，交给 Messenger 发送

    配置格式:
        {
            "timeout": 5.0,
            "default": {"strategy": "order", "gateways": ["chuanglan", "huaxin"]},
            "gateways": {"chuanglan": {"account": "...", "password": "..."}},
        }
    """

    def __init__(self, config: Mapping | Config, rng: random.Random | None = None):
        self.config = config if isinstance(config, Config) else Config(config)
        self._creators: dict[str, GatewayCreator] = {}
        self.messenger = Messenger(
            resolver=self.resolve,
            default_gateways=self.config.get("default.gateways", []) or [],
            strategy=get_strategy(self.config.get("default.strategy", "order"), rng),
        )

    def extend(self, name: str, creator: GatewayCreator) -> "EasySms":
        """注册自定义网关，creator 接收该网关的配置并返回网关实例"""
        self._creators[name] = creator
        return self

    def gateway_config(self, name: str, overrides: Mapping | None = None) -> Config:
        configured = self.config.get("gateways") or {}
        if not isinstance(configured, Mapping):
            raise InvalidArgumentException("Config 'gateways' must be a mapping of gateway name to settings.")
        base = configured.get(name) or {}
        if not isinstance(base, Mapping):
            raise InvalidArgumentException(f"Config for gateway '{name}' must be a mapping.")
        return Config({"timeout": self.config.get("timeout", DEFAULT_TIMEOUT), **base}).merge(overrides)

    def gateway(self, name: str, overrides: Mapping | None = None) -> Gateway:
        return self._create(name, self.gateway_config(name, overrides))

    def resolve(self, name: str, overrides: Mapping | None = None) -> GatewayDescriptor:
        config = self.gateway_config(name, overrides)
        return GatewayDescriptor(name=name, gateway=self._create(name, config), config=config)

    def _create(self, name: str, config: Config) -> Gateway:
        if name in self._creators:
            return self._creators[name](config)
        if name in GATEWAYS:
            return GATEWAYS[name](config)
        raise InvalidArgumentException(f"Gateway '{name}' is not supported.")

    def send(
        self,
        to: PhoneNumber | str | int,
        message: Message | str | Mapping,
        gateways: Gateways | None = None,
    ) -> dict[str, Result]:
        return self.messenger.send(to, message, gateways)
