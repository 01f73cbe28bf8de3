"""
NLP 客户端

把百度 AIP 自然语言处理接口封装为本地方法
"""

import logging
from typing import Any, Mapping

from ..base import AipRequest, EBodyFormat, OperationRegistry
from ..consts import ESimnetType, Headers, HttpCharacterEncoding, HttpContentType
from .. import operations
from .base_client import AipBaseClient

logger = logging.getLogger(__name__)


class AipNlp(AipBaseClient):
    """NLP 客户端

    每个接口方法只是 call() 的薄封装：必选参数按固定顺序写入请求体，
    options 中的可选参数随后合并（同名时覆盖必选字段）。
    options 中未登记的参数也会原样透传给服务端。

    Example:
        nlp = AipNlp("app_id", "api_key", "secret_key")
        nlp.sentiment_classify("服务很好")
        nlp.simnet("你好", "您好", {"model": "CNN"})
        nlp.comment_tag("菜品很好吃", ESimnetType.FOOD)
    """

    def build_request(
        self,
        name: str,
        *args: Any,
        options: Mapping[str, Any] | None = None
    ) -> AipRequest:
        """构造请求，不发送

        Args:
            name: 接口名称，如 "lexer"
            *args: 按接口字段顺序排列的必选参数
            options: 可选参数

        Raises:
            KeyError: 接口不存在
            TypeError: 必选参数个数不符
        """
        operation = OperationRegistry.require(name)

        request = AipRequest()
        self.pre_operation(request)

        operation.fill(request, args)

        if options is not None:
            unknown = operation.unknown_options(options)
            if unknown:
                logger.debug("%s: passing through unrecognized options %s", name, unknown)
            request.add_body(options)

        request.set_uri(operation.uri)
        request.add_header(Headers.CONTENT_ENCODING, HttpCharacterEncoding.ENCODE_GBK)
        request.add_header(Headers.CONTENT_TYPE, HttpContentType.JSON_DATA)
        request.set_body_format(EBodyFormat.RAW_JSON)
        self.post_operation(request)
        return request

    def call(
        self,
        name: str,
        *args: Any,
        options: Mapping[str, Any] | None = None
    ) -> dict:
        """调用任意已注册的接口

        Returns:
            服务端返回的 JSON 对象
        """
        request = self.build_request(name, *args, options=options)
        return self.request_server(request)

    def lexer(self, text: str, options: Mapping[str, Any] | None = None) -> dict:
        """词法分析：分词、词性标注、专名识别

        Args:
            text: 待分析文本（GBK），不超过 65536 字节
            options: 可选参数
        """
        return self.call(operations.LEXER.name, text, options=options)

    def lexer_custom(self, text: str, options: Mapping[str, Any] | None = None) -> dict:
        """词法分析（定制版）"""
        return self.call(operations.LEXER_CUSTOM.name, text, options=options)

    def dep_parser(self, text: str, options: Mapping[str, Any] | None = None) -> dict:
        """依存句法分析

        Args:
            text: 待分析文本（GBK），不超过 256 字节
            options: 可选参数
                mode: 0 为 web 模型（默认），1 为 query 模型
        """
        return self.call(operations.DEP_PARSER.name, text, options=options)

    def word_embedding(self, word: str, options: Mapping[str, Any] | None = None) -> dict:
        """词向量表示，word 最大 64 字节"""
        return self.call(operations.WORD_EMBEDDING.name, word, options=options)

    def dnnlm_cn(self, text: str, options: Mapping[str, Any] | None = None) -> dict:
        """DNN 语言模型：切词并给出每个词在句子中的概率"""
        return self.call(operations.DNNLM_CN.name, text, options=options)

    def word_sim_embedding(
        self,
        word_1: str,
        word_2: str,
        options: Mapping[str, Any] | None = None
    ) -> dict:
        """词义相似度

        Args:
            word_1: 词 1，最大 64 字节
            word_2: 词 2，最大 64 字节
            options: 可选参数
                mode: 预留字段，目前仅支持 0
        """
        return self.call(operations.WORD_SIM_EMBEDDING.name, word_1, word_2, options=options)

    def simnet(
        self,
        text_1: str,
        text_2: str,
        options: Mapping[str, Any] | None = None
    ) -> dict:
        """短文本相似度

        Args:
            text_1: 待比较文本 1，最大 512 字节
            text_2: 待比较文本 2，最大 512 字节
            options: 可选参数
                model: "BOW"（默认）、"CNN" 或 "GRNN"
        """
        return self.call(operations.SIMNET.name, text_1, text_2, options=options)

    def comment_tag(
        self,
        text: str,
        type: ESimnetType | int,
        options: Mapping[str, Any] | None = None
    ) -> dict:
        """评论观点抽取

        Args:
            text: 评论内容，最大 10240 字节
            type: 行业类型，请求中使用其序号（如 ESimnetType.FOOD -> 4）
            options: 可选参数
        """
        return self.call(operations.COMMENT_TAG.name, text, type, options=options)

    def sentiment_classify(self, text: str, options: Mapping[str, Any] | None = None) -> dict:
        """情感倾向分析（积极、消极、中性）"""
        return self.call(operations.SENTIMENT_CLASSIFY.name, text, options=options)

    def keyword(
        self,
        title: str,
        content: str,
        options: Mapping[str, Any] | None = None
    ) -> dict:
        """文章标签

        Args:
            title: 标题，最大 80 字节
            content: 正文，最大 65535 字节
            options: 可选参数
        """
        return self.call(operations.KEYWORD.name, title, content, options=options)

    def topic(
        self,
        title: str,
        content: str,
        options: Mapping[str, Any] | None = None
    ) -> dict:
        """文章分类"""
        return self.call(operations.TOPIC.name, title, content, options=options)

    def ecnet(self, text: str, options: Mapping[str, Any] | None = None) -> dict:
        """文本纠错，text 限 511 字节"""
        return self.call(operations.ECNET.name, text, options=options)

    def emotion(self, text: str, options: Mapping[str, Any] | None = None) -> dict:
        """对话情绪识别

        Args:
            text: 待识别文本，限 512 字节
            options: 可选参数
                scene: default、talk、task 或 customer_service
        """
        return self.call(operations.EMOTION.name, text, options=options)

    def news_summary(
        self,
        content: str,
        max_summary_len: int,
        options: Mapping[str, Any] | None = None
    ) -> dict:
        """新闻摘要

        Args:
            content: 正文，少于 3000 字符，段落用 "\\n" 分隔
            max_summary_len: 摘要最大长度，推荐 200-500
            options: 可选参数
                title: 标题，少于 200 字符
        """
        return self.call(operations.NEWS_SUMMARY.name, content, max_summary_len, options=options)

    def txt_keywords_extraction(
        self,
        text: str,
        num: int | None = None,
        options: Mapping[str, Any] | None = None
    ) -> dict:
        """关键词提取

        Args:
            text: 原文，最大 65535 字符
            num: 关键词数量上限，None 时返回全部关键词
            options: 可选参数
        """
        return self.call(operations.TXT_KEYWORDS_EXTRACTION.name, text, num, options=options)
