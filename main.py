"""命令行入口 - 用内置词表求值一个中缀表达式"""
import argparse
import logging
import sys

import pandas as pd

from config.config import LOGGING_CONFIG, COMPLEX_CONFIG, validate_config
from core import ExpressionSyntaxError
from vocab import evaluate_boolean, evaluate_arithmetic, evaluate_complex, FrameEvaluator, VariableError
from utils.complex_math import round_complex, format_complex

logger = logging.getLogger(__name__)


def _parse_bindings(pairs, convert):
    """NAME=VALUE 列表 -> 字典"""
    bindings = {}
    for pair in pairs or []:
        name, sep, raw = pair.partition('=')
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE, got '{pair}'")
        bindings[name.strip()] = convert(raw.strip())
    return bindings


def run_boolean(args):
    return 'true' if evaluate_boolean(args.expression) else 'false'


def run_arithmetic(args):
    variables = _parse_bindings(args.var, float)

    if args.data_path:
        # 对CSV的每一行求值
        data = pd.read_csv(args.data_path)
        logger.info(f"Loaded data: {data.shape}")
        for name, value in variables.items():
            data[name] = value
        result = FrameEvaluator().evaluate(args.expression, data)
        if args.output_path:
            result.to_frame(name=args.expression).to_csv(args.output_path, index=False)
            logger.info(f"Saved result to {args.output_path}")
            return f"{len(result)} rows written to {args.output_path}"
        return result.to_string()

    return repr(float(evaluate_arithmetic(args.expression, variables)))


def run_complex(args):
    variables = _parse_bindings(args.var, complex)
    function = evaluate_complex(args.expression)

    if not variables and function.variables:
        # 含未绑定变量，只输出函数本身
        return str(function)
    return format_complex(round_complex(function(variables), args.round_precision))


RUNNERS = {
    'boolean': run_boolean,
    'arithmetic': run_arithmetic,
    'complex': run_complex,
}


def main(args):
    validate_config()
    try:
        output = RUNNERS[args.vocab](args)
    except ExpressionSyntaxError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except (VariableError, ValueError) as e:
        logger.error(str(e))
        return 1
    print(output)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Infix expression evaluator")

    parser.add_argument(
        "expression",
        type=str,
        help="The infix expression to evaluate"
    )
    parser.add_argument(
        "--vocab",
        type=str,
        choices=sorted(RUNNERS),
        default="arithmetic",
        help="Token vocabulary to use (default: arithmetic)"
    )
    parser.add_argument(
        "--var",
        action="append",
        metavar="NAME=VALUE",
        help="Bind a variable (repeatable); complex values use Python syntax, e.g. 1+2j"
    )
    parser.add_argument(
        "--round_precision",
        type=int,
        default=COMPLEX_CONFIG["round_precision"],
        help="Decimal places kept in complex results"
    )
    parser.add_argument(
        "--data_path",
        type=str,
        default=None,
        help="CSV file whose columns are bound as variables (arithmetic only)"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save the evaluated column when --data_path is given"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: WARNING)"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=LOGGING_CONFIG["format"]
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
