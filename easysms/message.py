from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from easysms.exceptions import InvalidArgumentException

DEFAULT_IDD_CODE = "86"


@dataclass(frozen=True)
class PhoneNumber:
    number: str
    idd_code: str = DEFAULT_IDD_CODE

    def __post_init__(self):
        number = str(self.number).strip()
        if not number or not number.isdigit():
            raise InvalidArgumentException(f"Invalid phone number: {self.number!r}")

        idd_code = str(self.idd_code or "").strip().lstrip("+")
        if idd_code.startswith("00"):
            idd_code = idd_code[2:]
        if not idd_code:
            idd_code = DEFAULT_IDD_CODE
        if not idd_code.isdigit():
            raise InvalidArgumentException(f"Invalid IDD code: {self.idd_code!r}")

        object.__setattr__(self, "number", number)
        object.__setattr__(self, "idd_code", idd_code)

    @classmethod
    def parse(cls, value: "PhoneNumber | str | int", idd_code: str | None = None) -> "PhoneNumber":
        if isinstance(value, PhoneNumber):
            return value
        return cls(str(value), idd_code or DEFAULT_IDD_CODE)

    @property
    def universal_number(self) -> str:
        return f"+{self.idd_code}{self.number}"

    @property
    def zero_prefixed_number(self) -> str:
        return f"00{self.idd_code}{self.number}"

    @property
    def masked(self) -> str:
        """日志用的脱敏号码"""
        if len(self.number) <= 7:
            return self.number[:2] + "***"
        return f"{self.number[:3]}****{self.number[-4:]}"

    def __str__(self) -> str:
        return self.universal_number


@dataclass(frozen=True)
class Message:
    """短信内容

    content / template / data 都可以是一个接收网关实例的函数，
    这样同一条短信可以按网关渲染出不同的内容。
    """

    content: str | Callable | None = None
    template: str | Callable | None = None
    data: Mapping | list | Callable | None = None
    type: str = "text"
    gateways: tuple[str, ...] = ()
    extra: Mapping = field(default_factory=dict)

    def __post_init__(self):
        if self.content is None and self.template is None:
            raise InvalidArgumentException("Message requires either content or template.")

        data = self.data
        if isinstance(data, Mapping):
            data = MappingProxyType(dict(data))
        elif isinstance(data, list):
            data = tuple(data)
        object.__setattr__(self, "data", data)
        gateways = self.gateways or ()
        if isinstance(gateways, str):
            gateways = (gateways,)
        object.__setattr__(self, "gateways", tuple(gateways))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra or {})))

    @classmethod
    def from_value(cls, value: "Message | str | Mapping") -> "Message":
        if isinstance(value, Message):
            return value
        if isinstance(value, str):
            return cls(content=value)
        if isinstance(value, Mapping):
            known = {"content", "template", "data", "type", "gateways"}
            fields = {k: v for k, v in value.items() if k in known}
            extra = {k: v for k, v in value.items() if k not in known}
            return cls(**fields, extra=extra)
        raise InvalidArgumentException(f"Unsupported message type: {type(value).__name__}")

    def get_content(self, gateway=None) -> str | None:
        return self._render(self.content, gateway)

    def get_template(self, gateway=None) -> str | None:
        return self._render(self.template, gateway)

    def get_data(self, gateway=None):
        data = self._render(self.data, gateway)
        if data is None:
            return {}
        if isinstance(data, Mapping):
            return dict(data)
        return list(data)

    def get(self, key: str, default=None):
        return self.extra.get(key, default)

    @staticmethod
    def _render(value, gateway):
        if callable(value):
            return value(gateway)
        return value
