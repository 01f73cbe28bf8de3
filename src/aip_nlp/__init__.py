"""
AIP NLP - 百度 AIP 自然语言处理接口 SDK
"""

import logging

__version__ = "0.1.0"

from .base import AipRequest, EBodyFormat, Operation, OperationRegistry
from .consts import ESimnetType, NlpConsts
from .clients import AipBaseClient, AipNlp

__all__ = [
    "AipBaseClient",
    "AipNlp",
    "AipRequest",
    "EBodyFormat",
    "ESimnetType",
    "NlpConsts",
    "Operation",
    "OperationRegistry",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
