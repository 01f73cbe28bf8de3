"""常量定义"""

from enum import Enum


class NlpConsts:
    """NLP 接口路径"""

    LEXER = "/rpc/2.0/nlp/v1/lexer"
    LEXER_CUSTOM = "/rpc/2.0/nlp/v1/lexer_custom"
    DEP_PARSER = "/rpc/2.0/nlp/v1/depparser"
    WORD_EMBEDDING = "/rpc/2.0/nlp/v2/word_emb_vec"
    DNNLM_CN = "/rpc/2.0/nlp/v2/dnnlm_cn"
    WORD_SIM_EMBEDDING = "/rpc/2.0/nlp/v2/word_emb_sim"
    SIMNET = "/rpc/2.0/nlp/v2/simnet"
    COMMENT_TAG = "/rpc/2.0/nlp/v2/comment_tag"
    SENTIMENT_CLASSIFY = "/rpc/2.0/nlp/v1/sentiment_classify"
    KEYWORD = "/rpc/2.0/nlp/v1/keyword"
    TOPIC = "/rpc/2.0/nlp/v1/topic"
    ECNET = "/rpc/2.0/nlp/v1/ecnet"
    EMOTION = "/rpc/2.0/nlp/v1/emotion"
    NEWS_SUMMARY = "/rpc/2.0/nlp/v1/news_summary"
    TXT_KEYWORDS_EXTRACTION = "/rpc/2.0/nlp/v1/txt_keywords_extraction"


class AuthConsts:
    """鉴权相关"""

    TOKEN_URI = "/oauth/2.0/token"
    # 服务端返回的 token 无效 / 过期错误码
    INVALID_TOKEN_CODES = (110, 111)
    # 提前刷新的余量（秒）
    EXPIRE_MARGIN = 30


class Headers:
    CONTENT_ENCODING = "Content-Encoding"
    CONTENT_TYPE = "Content-Type"


class HttpContentType:
    JSON_DATA = "application/json"
    FORM_URLENCODE_DATA = "application/x-www-form-urlencoded"


class HttpCharacterEncoding:
    ENCODE_GBK = "GBK"
    ENCODE_UTF8 = "UTF-8"


class ESimnetType(Enum):
    """评论观点抽取的行业类型

    请求中使用的是成员的序号（DEFAULT=0, HOTEL=1, ...），而不是名称。
    """

    DEFAULT = "default"
    HOTEL = "hotel"                 # 酒店
    KTV = "ktv"                     # KTV
    BEAUTY = "beauty"               # 丽人
    FOOD = "food"                   # 美食餐饮
    TRAVEL = "travel"               # 旅游
    HEALTH = "health"               # 健康
    EDUCATION = "education"         # 教育
    BUSINESS = "business"           # 商业
    HOUSE = "house"                 # 房产
    CAR = "car"                     # 汽车
    LIFE = "life"                   # 生活
    SHOPPING = "shopping"           # 购物
    ELECTRONICS_3C = "3c"           # 3C

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self)
