"""主程序入口 - 命令行计算中缀表达式"""
import argparse
import logging
import sys

from config.config import EVALUATOR_CONFIG, SELF_TEST_CONFIG, validate_config
from core import CalculatorError
from calculator.evaluator import ExpressionEvaluator
from validation.self_test import run_self_test, all_passed

logger = logging.getLogger(__name__)


def _setup_logging(level):
    logging.basicConfig(
        level=getattr(logging, level),
        format=EVALUATOR_CONFIG['log_format']
    )


def _format_result(value, precision):
    return f"{value:.{precision}g}"


def _load_expressions(path):
    with open(path, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip()]


def run_expressions(args, evaluator):
    """逐条计算命令行给出的表达式，遇到非法输入立即失败"""
    for expression in args.expressions:
        if args.rpn:
            value = evaluator.evaluate_rpn(expression)
        else:
            value = evaluator.evaluate(expression)
            if args.show_rpn:
                print(f"rpn:\t\t{evaluator.to_rpn_string(expression)}")
        print(_format_result(value, args.precision))


def run_file(args, evaluator):
    expressions = _load_expressions(args.expressions_file)
    logger.info(f"Loaded {len(expressions)} expressions from {args.expressions_file}")

    results = evaluator.evaluate_many(expressions)
    for expression, value in results.items():
        print(f"{expression} = {_format_result(value, args.precision)}")

    failed = int(results.isna().sum())
    if args.output_path:
        logger.info(f"Saving results to {args.output_path}")
        results.to_csv(args.output_path, header=True)
    if failed:
        logger.warning(f"{failed} of {len(results)} expressions could not be evaluated")
    return 1 if failed else 0


def run_self_test_report(args):
    logger.info("=== Self Test ===")
    report = run_self_test()

    for row in report.itertuples(index=False):
        print(f"infix:\t\t{row.infix}")
        if SELF_TEST_CONFIG['show_rpn']:
            print(f"rpn:\t\t{row.rpn}")
        print(f"result:\t\t{_format_result(row.result, args.precision)}")
        print(f"expected:\t{_format_result(row.expected, args.precision)}")
        print(f"passed:\t\t{row.passed}")
        print("----")

    passed = all_passed(report)
    if passed:
        logger.info(f"All {len(report)} reference cases passed")
    else:
        logger.error(f"{int((~report['passed']).sum())} of {len(report)} reference cases failed")
    return 0 if passed else 1


def main(args):
    validate_config()
    evaluator = ExpressionEvaluator()

    if args.self_test:
        return run_self_test_report(args)

    try:
        if args.expressions_file:
            return run_file(args, evaluator)
        run_expressions(args, evaluator)
    except CalculatorError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Evaluate arithmetic infix expressions")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Infix expressions to evaluate (postfix with --rpn)"
    )
    parser.add_argument(
        "--show_rpn",
        action="store_true",
        help="Also print the postfix (RPN) form of each expression"
    )
    parser.add_argument(
        "--rpn",
        action="store_true",
        help="Treat the positional expressions as space-separated postfix"
    )
    parser.add_argument(
        "--expressions_file",
        type=str,
        default=None,
        help="Path to a file with one infix expression per line"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save the results of --expressions_file as CSV"
    )
    parser.add_argument(
        "--self_test",
        action="store_true",
        help="Run the built-in reference expressions"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=EVALUATOR_CONFIG['display_precision'],
        help="Significant digits of printed results"
    )
    parser.add_argument(
        "--log_level",
        type=str.upper,
        choices=EVALUATOR_CONFIG['log_levels'],
        default=EVALUATOR_CONFIG['log_level'],
        help="Logging level (default: INFO)"
    )
    return parser


def run(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not (args.expressions or args.expressions_file or args.self_test):
        parser.error("nothing to evaluate: give expressions, --expressions_file or --self_test")
    if not 1 <= args.precision <= 100:
        parser.error(f"--precision must be between 1 and 100, got {args.precision}")
    if args.output_path and not args.expressions_file:
        parser.error("--output_path requires --expressions_file")
    _setup_logging(args.log_level)
    return main(args)


if __name__ == "__main__":
    sys.exit(run())
