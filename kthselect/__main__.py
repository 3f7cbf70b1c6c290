from __future__ import generator_stop

import logging
from argparse import ArgumentParser
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence, Union

from .args import is_file, rank
from .exceptions import RankOutOfRange
from .selection import kth_largest, kth_smallest
from .strategies import STRATEGIES

Number = Union[int, float]


def read_values(path: Path, conv: Callable[[str], Number]) -> Iterator[Number]:
    with path.open("rt", encoding="utf-8") as fr:
        for line in fr:
            line = line.strip()
            if line:
                yield conv(line)


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="kthselect", description="Print the k-th smallest value without sorting")
    parser.add_argument("k", type=rank, help="0-based rank of the value to select")
    parser.add_argument("values", nargs="*", help="Values to select from")
    parser.add_argument("--file", type=is_file, help="Read values from file, one per line")
    parser.add_argument("--strategy", choices=sorted(STRATEGIES), help="Pivot strategy. Default from configuration.")
    parser.add_argument("--float", action="store_true", help="Parse values as floats instead of integers")
    parser.add_argument("--largest", action="store_true", help="Select the k-th largest value instead")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    conv = float if args.float else int

    try:
        values: List[Number] = [conv(v) for v in args.values]
        if args.file:
            values.extend(read_values(args.file, conv))
    except ValueError as e:
        parser.error(str(e))

    func = kth_largest if args.largest else kth_smallest

    try:
        result = func(values, args.k, strategy=args.strategy)
    except RankOutOfRange as e:
        parser.error(str(e))

    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
