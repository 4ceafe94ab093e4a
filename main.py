"""主程序入口 - 读取一行中缀表达式并输出精确分数求值结果"""
import argparse
import logging
import sys

from config.config import LOGGING_CONFIG, validate_config
from core import CalculatorError, evaluate_expression

logger = logging.getLogger(__name__)


def run(expression):
    """
    求值并输出结果；所有计算错误在此统一捕获
    Returns:
        退出码（成功和失败都是0）
    """
    try:
        result = evaluate_expression(expression)
    except CalculatorError as e:
        logger.debug(f"Evaluation of {expression!r} failed: {type(e).__name__}")
        print(f"Error: {e}", file=sys.stderr)
        return 0

    logger.debug(f"Exact result: {result}")
    print(f"Result: {result.to_display_value()}")
    return 0


def main(args):
    logging.basicConfig(
        level=args.log_level,
        format=LOGGING_CONFIG["format"]
    )
    validate_config()

    if args.expression is not None:
        expression = args.expression
    else:
        expression = sys.stdin.readline().rstrip('\n')

    return run(expression)


def build_parser():
    parser = argparse.ArgumentParser(description="Exact rational infix calculator")

    parser.add_argument(
        "expression",
        nargs="?",
        default=None,
        help="Infix expression, e.g. '(3/4 + 1/2) * 2'. Read from stdin if omitted."
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level"
    )
    return parser


def cli():
    args = build_parser().parse_args()
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
