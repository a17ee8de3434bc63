"""主程序入口 - 交互式控制台、批量计算和HTTP前端"""
import argparse
import logging
import sys

from config.config import *
from core import CalculatorError, calc
from utils.batch import evaluate_expressions, load_expressions, save_results
from utils.formatting import format_result

# 设置日志
logging.basicConfig(
    level=getattr(logging, LOGGING_CONFIG['level']),
    format=LOGGING_CONFIG['format']
)
logger = logging.getLogger(__name__)


def run_console(stdin=None, stdout=None):
    """读一行表达式并输出结果；失败时返回 CONSOLE_CONFIG 中的退出码"""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    stdout.write(CONSOLE_CONFIG['prompt'])
    stdout.flush()
    expression = stdin.readline().strip()

    try:
        result = calc(expression)
    except CalculatorError as e:
        print(e, file=stdout)
        return CONSOLE_CONFIG['error_exit_code']

    print(f"Result: {format_result(result)}", file=stdout)
    return 0


def run_batch(input_path, output_path=None, column=None):
    expressions = load_expressions(input_path, column=column)
    results = evaluate_expressions(expressions)
    save_results(results, output_path)

    for _, row in results[results['error'].notna()].iterrows():
        logger.warning(f"  - {row['expression']}: {row['error']}")
    return 0


def main(args):
    logging.getLogger().setLevel(getattr(logging, args.log_level.upper()))

    if args.serve:
        from web.server import run_server
        logger.info("=== Starting HTTP front-end ===")
        run_server(host=args.host, port=args.port)
        return 0

    if args.file:
        logger.info("=== Batch evaluation ===")
        return run_batch(args.file, args.output_path, args.column)

    return run_console()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Infix arithmetic calculator")

    parser.add_argument(
        "--serve",
        action="store_true",
        help="Start the HTTP form front-end instead of the console"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=SERVER_CONFIG['host'],
        help="Host for the HTTP front-end"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=SERVER_CONFIG['port'],
        help="Port for the HTTP front-end (default: 8080)"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Evaluate every expression in a CSV or text file"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG['expression_column'],
        help="Expression column when --file is a CSV"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=BATCH_CONFIG['output_path'],
        help="Path to save the batch results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )
    return parser.parse_args(argv)


def cli():
    sys.exit(main(parse_args()))


if __name__ == "__main__":
    cli()
