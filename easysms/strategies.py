import random
from collections.abc import Sequence
from enum import StrEnum

from easysms.exceptions import InvalidArgumentException


class StrategyName(StrEnum):
    ORDER = "order"
    RANDOM = "random"


class OrderStrategy:
    """按配置顺序依次尝试"""

    name = StrategyName.ORDER

    def apply(self, gateways: Sequence[str], override: Sequence[str] | None = None) -> list[str]:
        if override:
            return list(override)
        return list(gateways)


class RandomStrategy:
    """随机打乱网关顺序，每次调用都重新洗牌"""

    name = StrategyName.RANDOM

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def apply(self, gateways: Sequence[str], override: Sequence[str] | None = None) -> list[str]:
        if override:
            return list(override)
        shuffled = list(gateways)
        self.rng.shuffle(shuffled)
        return shuffled


Strategy = OrderStrategy | RandomStrategy


def get_strategy(name: str | StrategyName = StrategyName.ORDER, rng: random.Random | None = None) -> Strategy:
    try:
        strategy = StrategyName(str(name).lower())
    except ValueError:
        raise InvalidArgumentException(f"Unsupported strategy: {name!r}") from None

    if strategy == StrategyName.RANDOM:
        return RandomStrategy(rng)
    return OrderStrategy()
