import copy
from collections.abc import Iterator, Mapping

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EASYSMS_", env_file=".env", extra="ignore")

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    # Dispatch settings
    timeout: float = 5.0
    default_strategy: str = "order"
    default_gateways: list[str] = ["errorlog"]
    gateways: dict[str, dict] = {"errorlog": {"file": "easy-sms.log"}}

    def to_config(self) -> dict:
        return {
            "timeout": self.timeout,
            "default": {
                "strategy": self.default_strategy,
                "gateways": list(self.default_gateways),
            },
            "gateways": copy.deepcopy(self.gateways),
        }


settings = Settings()


class Config(Mapping):
    """只读配置，get 支持 "default.gateways" 这样的点号路径"""

    def __init__(self, data: Mapping | None = None):
        self._data = copy.deepcopy(dict(data or {}))

    def get(self, key: str, default=None):
        if key in self._data:
            return copy.deepcopy(self._data[key])

        node = self._data
        for segment in key.split("."):
            if not isinstance(node, Mapping) or segment not in node:
                return default
            node = node[segment]
        return copy.deepcopy(node)

    def merge(self, overrides: Mapping | None) -> "Config":
        return Config({**self._data, **dict(overrides or {})})

    def __getitem__(self, key: str):
        return copy.deepcopy(self._data[key])

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Config({list(self._data)!r})"
