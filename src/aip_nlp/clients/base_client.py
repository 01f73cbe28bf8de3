"""
AIP 基础客户端

负责凭证、access token 获取与缓存，以及 HTTP 发送
"""

import json
import logging
import os
import time

import httpx

from .. import __version__
from ..base import AipRequest, EBodyFormat
from ..consts import AuthConsts, Headers, HttpContentType

logger = logging.getLogger(__name__)


class AipBaseClient:
    """AIP 基础客户端

    使用 API Key / Secret Key 换取 access token，附加到每个请求的查询参数中。
    服务端返回的错误（error_code / error_msg）原样作为结果返回；
    网络层错误以 ConnectionError 抛出。

    Example:
        with AipBaseClient("app_id", "api_key", "secret_key") as client:
            request = AipRequest()
            client.pre_operation(request)
            ...
            result = client.request_server(request)
    """

    DEFAULT_URL = "https://aip.baidubce.com"
    DEFAULT_TIMEOUT = 60.0
    DEFAULT_CONNECT_TIMEOUT = 10.0

    def __init__(
        self,
        app_id: str | None = None,
        api_key: str | None = None,
        secret_key: str | None = None,
        url: str | None = None,
        timeout: float | None = None,
        connect_timeout: float | None = None
    ):
        """初始化客户端

        Args:
            app_id: 应用 ID，默认从 AIP_APP_ID 读取
            api_key: API Key，默认从 AIP_API_KEY 读取
            secret_key: Secret Key，默认从 AIP_SECRET_KEY 读取
            url: 服务地址，默认从 AIP_NLP_URL 读取
            timeout: 读写超时（秒），默认从 AIP_NLP_TIMEOUT 读取
            connect_timeout: 连接超时（秒），默认从 AIP_NLP_CONNECT_TIMEOUT 读取
        """
        self.app_id = app_id or os.getenv("AIP_APP_ID", "")
        self.api_key = api_key or os.getenv("AIP_API_KEY", "")
        self.secret_key = secret_key or os.getenv("AIP_SECRET_KEY", "")
        self.url = (url or os.getenv("AIP_NLP_URL", self.DEFAULT_URL)).rstrip("/")
        self.timeout = timeout or float(os.getenv("AIP_NLP_TIMEOUT", self.DEFAULT_TIMEOUT))
        self.connect_timeout = connect_timeout or float(
            os.getenv("AIP_NLP_CONNECT_TIMEOUT", self.DEFAULT_CONNECT_TIMEOUT)
        )

        if not (self.app_id and self.api_key and self.secret_key):
            raise ValueError("AIP_APP_ID, AIP_API_KEY and AIP_SECRET_KEY are required")

        self._access_token: str | None = None
        self._token_expires_at = 0.0
        self._client = httpx.Client(timeout=self._build_timeout())

    def _build_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.timeout, connect=self.connect_timeout)

    def set_connection_timeout(self, seconds: float) -> None:
        """设置连接超时（秒）"""
        self.connect_timeout = seconds
        self._client.timeout = self._build_timeout()

    def set_socket_timeout(self, seconds: float) -> None:
        """设置读写超时（秒）"""
        self.timeout = seconds
        self._client.timeout = self._build_timeout()

    def pre_operation(self, request: AipRequest) -> None:
        """写入所有请求共有的查询参数"""
        request.add_param("aipSdk", "python")
        request.add_param("aipVersion", __version__)

    def post_operation(self, request: AipRequest) -> None:
        """请求收尾：未声明 Content-Type 时按 body_format 补齐"""
        if Headers.CONTENT_TYPE not in request.headers:
            if request.body_format is EBodyFormat.FORM_KV:
                request.add_header(Headers.CONTENT_TYPE, HttpContentType.FORM_URLENCODE_DATA)
            else:
                request.add_header(Headers.CONTENT_TYPE, HttpContentType.JSON_DATA)

    def request_server(self, request: AipRequest) -> dict:
        """发送请求并返回解析后的 JSON

        token 获取失败时返回鉴权接口的错误对象。token 被服务端判为无效或过期时，
        刷新一次并重试。

        Raises:
            ConnectionError: 网络错误或响应不是 JSON
        """
        auth = self._auth()
        if "access_token" not in auth:
            return auth

        result = self._send(request, auth["access_token"])

        if result.get("error_code") in AuthConsts.INVALID_TOKEN_CODES:
            logger.debug("access token rejected (error_code=%s), refreshing", result["error_code"])
            auth = self._auth(refresh=True)
            if "access_token" not in auth:
                return auth
            result = self._send(request, auth["access_token"])

        return result

    def _auth(self, refresh: bool = False) -> dict:
        """获取 access token，有效期内使用缓存

        Returns:
            成功时包含 access_token 的字典，失败时为鉴权接口返回的错误对象
        """
        if not refresh and self._access_token and time.time() < self._token_expires_at:
            return {"access_token": self._access_token}

        logger.debug("requesting access token for app %s", self.app_id)
        try:
            response = self._client.post(
                f"{self.url}{AuthConsts.TOKEN_URI}",
                params={
                    "grant_type": "client_credentials",
                    "client_id": self.api_key,
                    "client_secret": self.secret_key,
                }
            )
            result = response.json()
        except httpx.HTTPError as e:
            raise ConnectionError(f"AIP token request failed: {e}") from e
        except ValueError as e:
            raise ConnectionError(
                f"AIP token request returned invalid JSON (HTTP {response.status_code})"
            ) from e

        token = result.get("access_token")
        if token:
            self._access_token = token
            expires_in = float(result.get("expires_in", 0))
            self._token_expires_at = time.time() + expires_in - AuthConsts.EXPIRE_MARGIN
        else:
            self._access_token = None
            self._token_expires_at = 0.0
            logger.debug("access token request rejected: %s", result.get("error"))

        return result

    def _send(self, request: AipRequest, access_token: str) -> dict:
        """发送一次请求"""
        charset = request.headers.get(Headers.CONTENT_ENCODING, "utf-8")
        params = dict(request.params, access_token=access_token)

        logger.debug("POST %s fields=%s", request.uri, list(request.body))
        try:
            response = self._client.post(
                f"{self.url}{request.uri}",
                params=params,
                headers=request.headers,
                content=request.encode_body(charset)
            )
            content = response.content.decode(charset, "ignore")
        except httpx.HTTPError as e:
            raise ConnectionError(f"AIP request failed: {e}") from e

        try:
            return json.loads(content) or {}
        except ValueError as e:
            raise ConnectionError(
                f"AIP returned invalid JSON for {request.uri} (HTTP {response.status_code})"
            ) from e

    def close(self):
        """关闭客户端"""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
