import argparse
import logging
from typing import Any, Callable

from . import __version__
from .core import utils
from .core.vector import Vector3, parse_vector

logger = logging.getLogger(__name__)

# Operand kinds per operation: "v" vector, "s" scalar, trailing "?" optional.
OPERATIONS: dict[str, tuple[str, ...]] = {
    "mag": ("v",),
    "normalize": ("v",),
    "theta": ("v",),
    "phi": ("v",),
    "abs": ("v",),
    "neg": ("v",),
    "round": ("v",),
    "inspect": ("v",),
    "add": ("v", "v"),
    "sub": ("v", "v"),
    "mul": ("v", "v"),
    "div": ("v", "v"),
    "cross": ("v", "v"),
    "dot": ("v", "v?"),
    "distance": ("v", "v"),
    "angle": ("v", "v"),
    "equals": ("v", "v"),
    "lt": ("v", "v"),
    "lte": ("v", "v"),
    "gt": ("v", "v"),
    "gte": ("v", "v"),
    "scale": ("v", "s"),
    "lerp": ("v", "v", "s"),
}


def parse_scalar(text: str) -> float:
    try:
        return float(text)
    except ValueError as exc:
        raise ValueError(f"Invalid scalar: {text!r}") from exc


def parse_operands(operation: str, values: list[str]) -> list[Any]:
    """Convert command line values to operands of `operation`."""
    kinds = OPERATIONS[operation]
    required = [kind for kind in kinds if not kind.endswith("?")]
    if not len(required) <= len(values) <= len(kinds):
        raise ValueError(f"{operation!r} expects {len(kinds)} operand(s), got {len(values)}")
    parsers: dict[str, Callable[[str], Any]] = {"v": parse_vector, "s": parse_scalar}
    return [parsers[kind.rstrip("?")](value) for kind, value in zip(kinds, values)]


def evaluate(operation: str, operands: list[Any]) -> Any:
    vector, *args = operands
    return getattr(vector, operation)(*args)


def format_result(result: Any, fixed: int | None = None) -> str:
    if isinstance(result, Vector3):
        return result.to_string() if fixed is None else result.to_fixed(fixed)
    if isinstance(result, bool):
        return "true" if result else "false"
    if isinstance(result, float):
        return utils.format_number(result) if fixed is None else utils.format_fixed(result, fixed)
    return str(result)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vector3",
        description="Evaluate a 3D vector operation.",
        epilog="Vectors are given as x,y,z. Separate negative values from options with --.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug messages")
    parser.add_argument("--fixed", type=int, metavar="D", help="render numbers with D fractional digits")
    parser.add_argument("operation", choices=list(OPERATIONS))
    parser.add_argument("operands", nargs="+", metavar="operand")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.fixed is not None and args.fixed < 0:
        parser.error(f"argument --fixed: must not be negative: {args.fixed}")

    try:
        operands = parse_operands(args.operation, args.operands)
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("evaluate %s: %s", args.operation, ", ".join(map(repr, operands)))
    result = evaluate(args.operation, operands)
    logger.debug("result: %r", result)

    print(format_result(result, args.fixed))


if __name__ == "__main__":
    main()
