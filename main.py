#!/usr/bin/env python3
import argparse
import sys

from cas import CAS
from config import DEFAULT_MULTIPLICATION, LOG_LEVEL, VERSION
from errors import AlgebraError, SolverError
from logging_config import get_logger, setup_logging

logger = get_logger("main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polysolve",
        description="Parse, simplify and solve polynomial equations with exact rational arithmetic.",
    )
    parser.add_argument("expr", help="expression or equation, e.g. '1/5x + 4/5 = x - 1/6'")
    parser.add_argument("--solve", metavar="VAR", help="solve the equation (or expr = 0) for VAR")
    parser.add_argument("--tex", action="store_true", help="render as LaTeX")
    parser.add_argument("--implicit", action="store_true", help="write '*' between coefficients and variables")
    parser.add_argument(
        "--multiplication",
        default=DEFAULT_MULTIPLICATION,
        metavar="NAME",
        help="LaTeX multiplication operator (default: %(default)s)",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="logging level (default: %(default)s)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    cas = CAS(multiplication=args.multiplication, implicit=args.implicit)
    try:
        if args.solve:
            result = cas.solve(args.expr, args.solve)
        else:
            result = cas.parse(args.expr)
        render = cas.to_tex if args.tex else cas.to_display
        print(render(result))
    except (AlgebraError, SolverError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"Error [{e.code}]: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
