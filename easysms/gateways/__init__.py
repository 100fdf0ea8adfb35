from .base import Gateway
from .baidu import BaiduGateway
from .chuanglan import ChuanglanGateway
from .errorlog import ErrorlogGateway
from .huaxin import HuaxinGateway

GATEWAYS: dict[str, type[Gateway]] = {
    gateway.name: gateway
    for gateway in (BaiduGateway, ChuanglanGateway, ErrorlogGateway, HuaxinGateway)
}

__all__ = [
    "Gateway",
    "GATEWAYS",
    "BaiduGateway",
    "ChuanglanGateway",
    "ErrorlogGateway",
    "HuaxinGateway",
]
