#!/usr/bin/env python3
"""
AIP NLP 使用示例

演示文本分析类和文本对比类接口的调用
"""

import os
import sys

# 加载环境变量
from dotenv import load_dotenv
load_dotenv()


def demo_text_analysis(nlp):
    """演示单文本分析接口"""
    print("=" * 60)
    print("单文本分析")
    print("=" * 60)

    text = "百度是一家高科技公司"
    print(f"\n输入文本: {text}\n")

    result = nlp.lexer(text)
    print("词法分析:")
    print("-" * 40)
    for item in result.get("items", []):
        print(f"  {item.get('item', ''):10} {item.get('pos', '')} {item.get('ne', '')}")

    result = nlp.sentiment_classify("服务很好")
    print("\n情感倾向:")
    print("-" * 40)
    for item in result.get("items", []):
        print(f"  sentiment={item.get('sentiment')} confidence={item.get('confidence')}")

    result = nlp.emotion("本来今天高高兴兴", {"scene": "talk"})
    print("\n对话情绪:")
    print("-" * 40)
    print(f"  {result}")


def demo_comparison(nlp):
    """演示文本对比接口"""
    from aip_nlp import ESimnetType

    print("\n" + "=" * 60)
    print("文本对比与评论")
    print("=" * 60)

    result = nlp.simnet("你好", "您好", {"model": "CNN"})
    print(f"\n短文本相似度: {result.get('score')}")

    result = nlp.word_sim_embedding("北京", "上海")
    print(f"词义相似度: {result.get('score')}")

    result = nlp.comment_tag("三星电脑电池不给力", ESimnetType.ELECTRONICS_3C)
    print("\n评论观点:")
    print("-" * 40)
    for item in result.get("items", []):
        print(f"  {item.get('prop', '')}{item.get('adj', '')} sentiment={item.get('sentiment')}")


def main():
    """主函数"""
    print("\n🔧 AIP NLP 演示\n")

    if not os.getenv("AIP_API_KEY"):
        print("✗ 请先设置 AIP_APP_ID、AIP_API_KEY、AIP_SECRET_KEY 环境变量")
        sys.exit(1)

    from aip_nlp import AipNlp

    try:
        with AipNlp() as nlp:
            demo_text_analysis(nlp)
            demo_comparison(nlp)
    except ConnectionError as e:
        print(f"✗ 服务连接失败: {e}")


if __name__ == "__main__":
    main()
