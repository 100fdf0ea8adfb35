import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum

from easysms.config import Config
from easysms.exceptions import (
    GatewayErrorException,
    InvalidArgumentException,
    NoGatewayAvailableException,
)
from easysms.gateways.base import Gateway
from easysms.message import Message, PhoneNumber
from easysms.strategies import OrderStrategy, Strategy

logger = logging.getLogger(__name__)


class SendStatus(StrEnum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class GatewayDescriptor:
    name: str
    gateway: Gateway
    config: Config


@dataclass(frozen=True)
class Result:
    gateway: str
    status: SendStatus
    result: dict | None = None
    exception: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.status == SendStatus.SUCCESS

    @property
    def code(self) -> int | str | None:
        if isinstance(self.exception, GatewayErrorException):
            return self.exception.code
        return None

    @property
    def message(self) -> str | None:
        if self.exception is None:
            return None
        return str(self.exception) or type(self.exception).__name__

    @property
    def raw_response(self) -> dict | None:
        if isinstance(self.exception, GatewayErrorException):
            return self.exception.raw
        return self.result

    def to_dict(self) -> dict:
        if self.ok:
            return {"gateway": self.gateway, "status": str(self.status), "result": self.result}
        return {
            "gateway": self.gateway,
            "status": str(self.status),
            "code": self.code,
            "message": self.message,
            "raw_response": self.raw_response,
        }


GatewayResolver = Callable[[str, Mapping | None], GatewayDescriptor]
Gateways = str | Sequence[str] | Mapping[str, Mapping]


class Messenger:
    """按策略排序网关，逐个尝试，第一个成功即返回"""

    def __init__(
        self,
        resolver: GatewayResolver,
        default_gateways: Sequence[str] = (),
        strategy: Strategy | None = None,
    ):
        self.resolver = resolver
        if isinstance(default_gateways, str):
            default_gateways = [default_gateways]
        self.default_gateways = list(default_gateways)
        self.strategy = strategy or OrderStrategy()

    def send(
        self,
        to: PhoneNumber | str | int,
        message: Message | str | Mapping,
        gateways: Gateways | None = None,
    ) -> dict[str, Result]:
        to = PhoneNumber.parse(to)
        message = Message.from_value(message)

        if isinstance(gateways, str):
            gateways = [gateways]
        overrides = dict(gateways) if isinstance(gateways, Mapping) else {}
        override_names = list(gateways or ()) or list(message.gateways)
        candidates = list(dict.fromkeys(self.strategy.apply(self.default_gateways, override_names)))
        if not candidates:
            raise NoGatewayAvailableException({}, "No gateway available to send the message.")

        # 先全部解析，未知网关在发起任何请求之前就报错
        descriptors = [self.resolver(name, overrides.get(name)) for name in candidates]

        results: dict[str, Result] = {}
        for descriptor in descriptors:
            result = self._attempt(descriptor, to, message)
            results[descriptor.name] = result
            if result.ok:
                return results

        logger.error("All gateways failed for %s: %s", to.masked, ", ".join(results))
        raise NoGatewayAvailableException(results)

    def _attempt(self, descriptor: GatewayDescriptor, to: PhoneNumber, message: Message) -> Result:
        try:
            payload = descriptor.gateway.send(to, message, descriptor.config)
        except InvalidArgumentException:
            logger.error("Gateway %s is misconfigured, aborting send", descriptor.name)
            raise
        except Exception as e:
            logger.warning("Gateway %s failed for %s: %s", descriptor.name, to.masked, e)
            return Result(descriptor.name, SendStatus.FAILURE, exception=e)

        logger.info("Gateway %s sent message to %s", descriptor.name, to.masked)
        return Result(descriptor.name, SendStatus.SUCCESS, result=payload)
