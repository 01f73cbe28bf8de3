"""客户端模块"""

from .base_client import AipBaseClient
from .nlp_client import AipNlp

__all__ = ["AipBaseClient", "AipNlp"]
