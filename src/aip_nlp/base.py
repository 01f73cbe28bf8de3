"""
请求构造的核心结构

AipRequest: 单次 API 调用的请求累加器
Operation: 接口描述（URI + 有序必选字段 + 可选参数说明）
OperationRegistry: 接口注册表，按名称查找接口描述
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Mapping
from urllib.parse import urlencode


class EBodyFormat(Enum):
    """请求体格式"""

    FORM_KV = "form_kv"
    RAW_JSON = "raw_json"
    RAW_JSON_ARRAY = "raw_json_array"


class AipRequest:
    """单次调用的请求

    纯累加器，不做任何校验。每次调用新建一个，发送后丢弃。

    Example:
        request = AipRequest()
        request.add_body("text", "服务很好")
        request.add_body({"mode": 1})
        request.set_uri(NlpConsts.SENTIMENT_CLASSIFY)
    """

    def __init__(self):
        self.uri: str = ""
        self.body: dict[str, Any] = {}
        self.headers: dict[str, str] = {}
        self.params: dict[str, str] = {}
        self.body_format: EBodyFormat = EBodyFormat.FORM_KV

    def add_body(self, key: str | Mapping[str, Any], value: Any = None) -> None:
        """写入请求体字段

        Args:
            key: 字段名；传入 Mapping 时整体合并
            value: 字段值
        """
        if isinstance(key, Mapping):
            self.body.update(key)
        else:
            self.body[key] = value

    def add_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def add_param(self, name: str, value: str) -> None:
        self.params[name] = value

    def set_uri(self, uri: str) -> None:
        self.uri = uri

    def set_body_format(self, body_format: EBodyFormat) -> None:
        self.body_format = body_format

    def encode_body(self, encoding: str = "utf-8") -> bytes:
        """按 body_format 序列化请求体

        无法用目标编码表示的字符会被丢弃。
        """
        if self.body_format is EBodyFormat.RAW_JSON:
            payload = json.dumps(self.body, ensure_ascii=False)
        elif self.body_format is EBodyFormat.RAW_JSON_ARRAY:
            payload = json.dumps(self.body.get("body", []), ensure_ascii=False)
        else:
            payload = urlencode(self.body)
        return payload.encode(encoding, "ignore")

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(uri='{self.uri}', fields={list(self.body)})>"


@dataclass(frozen=True)
class Operation:
    """接口描述

    fields 的顺序即请求体中必选字段的顺序。converters 在写入前转换对应字段的值，
    值为 None 的字段不写入请求体。
    """

    name: str
    uri: str
    fields: tuple[str, ...]
    description: str = ""
    options: dict[str, str] = field(default_factory=dict)     # 已知可选参数 -> 说明
    converters: dict[str, Callable[[Any], Any]] = field(default_factory=dict)

    def fill(self, request: AipRequest, values: tuple) -> None:
        """按固定顺序写入必选字段

        Raises:
            TypeError: 参数个数与 fields 不一致
        """
        if len(values) != len(self.fields):
            raise TypeError(
                f"{self.name}() takes {len(self.fields)} required arguments "
                f"({', '.join(self.fields)}), got {len(values)}"
            )
        for name, value in zip(self.fields, values):
            if value is None:
                continue
            convert = self.converters.get(name)
            request.add_body(name, convert(value) if convert else value)

    def unknown_options(self, options: Mapping[str, Any]) -> list[str]:
        """返回不在已知列表中的可选参数名（仍会透传给服务端）"""
        return [key for key in options if key not in self.options]


class OperationRegistry:
    """接口注册表

    按名称注册和查找接口描述。
    """

    _operations: dict[str, Operation] = {}

    @classmethod
    def register(cls, operation: Operation) -> Operation:
        """注册接口

        Args:
            operation: Operation 实例

        Returns:
            传入的 operation，便于在模块级直接赋值
        """
        if not operation.name:
            raise ValueError(f"Operation for {operation.uri} must have a name")
        cls._operations[operation.name] = operation
        return operation

    @classmethod
    def get(cls, name: str) -> Operation | None:
        """获取接口描述，未找到返回 None"""
        return cls._operations.get(name)

    @classmethod
    def list_operations(cls) -> list[str]:
        """列出所有已注册的接口名称"""
        return list(cls._operations.keys())

    @classmethod
    def require(cls, name: str) -> Operation:
        """获取接口描述

        Raises:
            KeyError: 接口不存在
        """
        operation = cls.get(name)
        if not operation:
            raise KeyError(f"Operation '{name}' not found. Available: {cls.list_operations()}")
        return operation
