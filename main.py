"""主程序入口 - 交互式REPL、单条表达式、批量求值"""
import argparse
import logging
import sys

import pandas as pd

from config.config import *
from core import evaluate
from data.batch import load_expressions, evaluate_expressions, save_results
from repl.shell import run_shell
from utils.formatting import format_number, format_result

logger = logging.getLogger(__name__)


def setup_logging(level=None):
    logging.basicConfig(
        level=getattr(logging, (level or LOGGING_CONFIG['level']).upper()),
        format=LOGGING_CONFIG['format']
    )


def run_expression(expression, output=None):
    """求值单条表达式并打印，返回退出码"""
    output = output or sys.stdout
    result = evaluate(expression)
    output.write(format_result(result, REPL_CONFIG['error_prefix']) + "\n")
    return 0 if result.ok else 1


def run_batch(input_path, output_path=None, output=None):
    """批量求值文件中的表达式，返回退出码"""
    output = output or sys.stdout
    try:
        expressions = load_expressions(input_path)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load expressions from {input_path}: {e}")
        return 2

    df = evaluate_expressions(expressions)

    if output_path:
        save_results(df, output_path)
    else:
        for row in df.itertuples(index=False):
            if pd.isna(row.error):
                text = format_number(row.result)
            else:
                text = f"{REPL_CONFIG['error_prefix']}{row.message}"
            output.write(f"{row.expression}\t{text}\n")

    return 0 if df['error'].isna().all() else 1


def main(args):
    setup_logging(args.log_level)
    validate_config()

    if args.expression is not None:
        return run_expression(args.expression)
    if args.input_path:
        return run_batch(args.input_path, args.output_path)

    run_shell()
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Reverse Polish Notation calculator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Evaluate a single expression and exit"
    )
    parser.add_argument(
        "--input_path",
        type=str,
        default=None,
        help="Path to a text file (one expression per line) or CSV file to evaluate"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save batch results as CSV (prints to stdout when omitted)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)"
    )
    return parser


def cli():
    args = build_parser().parse_args()
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
