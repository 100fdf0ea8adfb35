class EasySmsException(Exception):
    pass


class InvalidArgumentException(EasySmsException):
    """配置或参数错误，不参与网关切换"""


class GatewayErrorException(EasySmsException):
    def __init__(self, message: str, code: int | str = 0, raw: dict | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.raw = raw if raw is not None else {}


class GatewayRequestException(GatewayErrorException):
    """网络请求失败或超时"""


class NoGatewayAvailableException(EasySmsException):
    def __init__(self, results: dict | None = None, message: str = "All the gateways have failed."):
        super().__init__(message)
        self.results = dict(results or {})

    @property
    def exceptions(self) -> dict[str, Exception]:
        return {
            name: result.exception
            for name, result in self.results.items()
            if result.exception is not None
        }

    def get_exception(self, gateway: str) -> Exception | None:
        return self.exceptions.get(gateway)

    @property
    def last_exception(self) -> Exception | None:
        exceptions = list(self.exceptions.values())
        return exceptions[-1] if exceptions else None
