import httpx

from easysms.exceptions import GatewayRequestException

DEFAULT_TIMEOUT = 5.0


class HttpRequestMixin:
    """网关共用的 HTTP 请求方法，每次调用只发一次请求，不做重试"""

    def get(self, url: str, params: dict | None = None, headers: dict | None = None,
            timeout: float = DEFAULT_TIMEOUT) -> dict:
        return self.request("get", url, params=params, headers=headers, timeout=timeout)

    def post(self, url: str, data: dict | None = None, headers: dict | None = None,
             timeout: float = DEFAULT_TIMEOUT) -> dict:
        return self.request("post", url, data=data, headers=headers, timeout=timeout)

    def post_json(self, url: str, params: dict | None = None, headers: dict | None = None,
                  timeout: float = DEFAULT_TIMEOUT) -> dict:
        return self.request("post", url, json=params, headers=headers, timeout=timeout)

    def request(self, method: str, url: str, timeout: float = DEFAULT_TIMEOUT, **options) -> dict:
        try:
            resp = httpx.request(method.upper(), url, timeout=timeout, **options)
        except httpx.TimeoutException as e:
            raise GatewayRequestException(f"Request to {url} timed out after {timeout}s") from e
        except httpx.HTTPError as e:
            raise GatewayRequestException(f"Request to {url} failed: {e}") from e

        data = self.unwrap_response(resp)
        if resp.is_error:
            raise GatewayRequestException(
                f"Request to {url} returned HTTP {resp.status_code}",
                resp.status_code,
                data,
            )
        return data

    @staticmethod
    def unwrap_response(resp: httpx.Response) -> dict:
        try:
            data = resp.json()
        except ValueError:
            return {"raw": resp.text}
        if not isinstance(data, dict):
            return {"raw": data}
        return data
