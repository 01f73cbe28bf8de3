"""
命令行入口
"""

import argparse
import json
import sys

from dotenv import load_dotenv

# 需要整数的必选字段
INT_FIELDS = {"max_summary_len", "num"}


def _parse_option(item: str) -> tuple[str, str]:
    """解析 key=value 形式的可选参数"""
    key, sep, value = item.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"可选参数格式应为 key=value: {item}")
    return key, value


def _coerce(field: str, value: str):
    """把命令行字符串转换为字段需要的类型"""
    from aip_nlp import ESimnetType

    if field in INT_FIELDS:
        return int(value)
    if field == "type":
        if value.isdigit():
            return int(value)
        return ESimnetType[value.upper()]
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aip-nlp",
        description="百度 AIP 自然语言处理接口命令行工具"
    )
    parser.add_argument(
        "operation",
        nargs="?",
        help="接口名称，如 lexer、simnet、sentiment_classify"
    )
    parser.add_argument(
        "args",
        nargs="*",
        help="按接口字段顺序排列的必选参数"
    )
    parser.add_argument(
        "-o", "--option",
        type=_parse_option,
        action="append",
        default=[],
        help="可选参数 key=value，可重复"
    )
    parser.add_argument(
        "-l", "--list",
        action="store_true",
        help="列出所有接口"
    )
    return parser


def main(argv: list[str] | None = None):
    """CLI 主入口"""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    from aip_nlp import AipNlp, OperationRegistry

    if args.list:
        for name in OperationRegistry.list_operations():
            operation = OperationRegistry.get(name)
            print(f"{name:25} {', '.join(operation.fields):25} {operation.description}")
        return

    if not args.operation:
        parser.print_help()
        sys.exit(1)

    operation = OperationRegistry.get(args.operation)
    if not operation:
        print(f"错误: 未知接口 - {args.operation}")
        sys.exit(1)

    if len(args.args) != len(operation.fields):
        print(f"错误: {operation.name} 需要参数 {', '.join(operation.fields)}")
        sys.exit(1)

    try:
        values = [_coerce(f, v) for f, v in zip(operation.fields, args.args)]
    except (ValueError, KeyError) as e:
        print(f"错误: 参数无效 - {e}")
        sys.exit(1)

    options = dict(args.option) or None

    try:
        with AipNlp() as nlp:
            result = nlp.call(operation.name, *values, options=options)
    except ValueError as e:
        print(f"错误: {e}")
        sys.exit(1)
    except ConnectionError as e:
        print(f"服务连接失败: {e}")
        sys.exit(1)

    print(json.dumps(result, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
