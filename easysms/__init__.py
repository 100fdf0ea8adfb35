from .config import Config
from .easy_sms import EasySms
from .exceptions import (
    EasySmsException,
    GatewayErrorException,
    GatewayRequestException,
    InvalidArgumentException,
    NoGatewayAvailableException,
)
from .message import Message, PhoneNumber
from .messenger import Messenger, Result, SendStatus
from .strategies import OrderStrategy, RandomStrategy, StrategyName, get_strategy

__all__ = [
    "Config",
    "EasySms",
    "EasySmsException",
    "GatewayErrorException",
    "GatewayRequestException",
    "InvalidArgumentException",
    "NoGatewayAvailableException",
    "Message",
    "PhoneNumber",
    "Messenger",
    "Result",
    "SendStatus",
    "OrderStrategy",
    "RandomStrategy",
    "StrategyName",
    "get_strategy",
]
