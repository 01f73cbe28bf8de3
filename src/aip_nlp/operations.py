"""
NLP 接口表

每个接口一条 Operation：路径、必选字段顺序、已知可选参数。
字节长度限制只作说明，不在本地校验。
"""

from typing import Any

from .base import Operation, OperationRegistry
from .consts import ESimnetType, NlpConsts


def _simnet_type_ordinal(value: Any) -> int:
    """ESimnetType 转为序号，整数原样返回"""
    if isinstance(value, ESimnetType):
        return value.ordinal
    return int(value)


LEXER = OperationRegistry.register(Operation(
    name="lexer",
    uri=NlpConsts.LEXER,
    fields=("text",),
    description="词法分析：分词、词性标注、专名识别。text 不超过 65536 字节",
))

LEXER_CUSTOM = OperationRegistry.register(Operation(
    name="lexer_custom",
    uri=NlpConsts.LEXER_CUSTOM,
    fields=("text",),
    description="词法分析（定制版）。text 不超过 65536 字节",
))

DEP_PARSER = OperationRegistry.register(Operation(
    name="dep_parser",
    uri=NlpConsts.DEP_PARSER,
    fields=("text",),
    description="依存句法分析。text 不超过 256 字节",
    options={"mode": "模型选择，0 为 web 模型（默认），1 为 query 模型"},
))

WORD_EMBEDDING = OperationRegistry.register(Operation(
    name="word_embedding",
    uri=NlpConsts.WORD_EMBEDDING,
    fields=("word",),
    description="词向量表示。word 最大 64 字节",
))

DNNLM_CN = OperationRegistry.register(Operation(
    name="dnnlm_cn",
    uri=NlpConsts.DNNLM_CN,
    fields=("text",),
    description="DNN 语言模型。text 最大 512 字节，不需要切词",
))

WORD_SIM_EMBEDDING = OperationRegistry.register(Operation(
    name="word_sim_embedding",
    uri=NlpConsts.WORD_SIM_EMBEDDING,
    fields=("word_1", "word_2"),
    description="词义相似度。每个词最大 64 字节",
    options={"mode": "预留字段，目前仅支持 0"},
))

SIMNET = OperationRegistry.register(Operation(
    name="simnet",
    uri=NlpConsts.SIMNET,
    fields=("text_1", "text_2"),
    description="短文本相似度。每段文本最大 512 字节",
    options={"model": "BOW（默认）、CNN 或 GRNN"},
))

COMMENT_TAG = OperationRegistry.register(Operation(
    name="comment_tag",
    uri=NlpConsts.COMMENT_TAG,
    fields=("text", "type"),
    description="评论观点抽取。text 最大 10240 字节，type 为 ESimnetType",
    converters={"type": _simnet_type_ordinal},
))

SENTIMENT_CLASSIFY = OperationRegistry.register(Operation(
    name="sentiment_classify",
    uri=NlpConsts.SENTIMENT_CLASSIFY,
    fields=("text",),
    description="情感倾向分析。text 最大 102400 字节",
))

KEYWORD = OperationRegistry.register(Operation(
    name="keyword",
    uri=NlpConsts.KEYWORD,
    fields=("title", "content"),
    description="文章标签。title 最大 80 字节，content 最大 65535 字节",
))

TOPIC = OperationRegistry.register(Operation(
    name="topic",
    uri=NlpConsts.TOPIC,
    fields=("title", "content"),
    description="文章分类。title 最大 80 字节，content 最大 65535 字节",
))

ECNET = OperationRegistry.register(Operation(
    name="ecnet",
    uri=NlpConsts.ECNET,
    fields=("text",),
    description="文本纠错。text 限 511 字节",
))

EMOTION = OperationRegistry.register(Operation(
    name="emotion",
    uri=NlpConsts.EMOTION,
    fields=("text",),
    description="对话情绪识别。text 限 512 字节",
    options={"scene": "default（默认）、talk（闲聊）、task（任务型）或 customer_service（客服）"},
))

NEWS_SUMMARY = OperationRegistry.register(Operation(
    name="news_summary",
    uri=NlpConsts.NEWS_SUMMARY,
    fields=("content", "max_summary_len"),
    description="新闻摘要。content 少于 3000 字符，段落用 \\n 分隔",
    options={"title": "新闻标题，少于 200 字符"},
))

TXT_KEYWORDS_EXTRACTION = OperationRegistry.register(Operation(
    name="txt_keywords_extraction",
    uri=NlpConsts.TXT_KEYWORDS_EXTRACTION,
    fields=("text", "num"),
    description="关键词提取。text 最大 65535 字符；num 为 None 时返回全部关键词",
))
