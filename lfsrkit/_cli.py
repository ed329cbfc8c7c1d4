# Copyright 2026 BrainX Ecosystem Limited. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================

"""CLI entry point for lfsrkit.

Usage:
    lfsrkit benchmark --width 64 --taps 64,63,61,60 --seeds 64 --clocks 16384
"""

import argparse
import json
import sys
from typing import List, Optional

__all__ = ['main']


def _parse_int_list(text: str) -> List[int]:
    try:
        return [int(item, 0) for item in text.split(',') if item.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected a comma-separated list of integers, got {text!r}') from None


def _positive_int(text: str) -> int:
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected an integer, got {text!r}') from None
    if value < 1:
        raise argparse.ArgumentTypeError(f'expected a positive integer, got {value}')
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='lfsrkit',
        description='lfsrkit: Linear-feedback shift register simulation.',
    )
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    bench = subparsers.add_parser(
        'benchmark',
        help='Benchmark register variants on one configuration.',
    )
    bench.add_argument('--width', type=int, default=64, help='Register width in bits.')
    bench.add_argument(
        '--taps',
        type=_parse_int_list,
        default=[64, 63, 61, 60],
        help='Comma-separated 1-indexed Fibonacci taps.',
    )
    bench.add_argument('--seeds', type=_positive_int, default=64, help='Number of seeds driven per run.')
    bench.add_argument('--clocks', type=_positive_int, default=16384, help='Clocks per seed.')
    bench.add_argument(
        '--variants',
        default='all',
        help='Comma-separated variant names, or "all".',
    )
    bench.add_argument('--n-warmup', type=int, default=1, help='Number of warmup runs.')
    bench.add_argument('--n-runs', type=_positive_int, default=5, help='Number of timed runs.')
    bench.add_argument('--output', type=str, default=None, help='Output file path for JSON results.')

    return parser


def _resolve_variants(text: str) -> Optional[List[str]]:
    if text == 'all':
        return None
    return [name.strip() for name in text.split(',') if name.strip()]


def _run_benchmark(args) -> int:
    """Run the benchmark command."""
    from lfsrkit._benchmark import benchmark_variants
    from lfsrkit._error import LFSRConfigurationError

    print(f"lfsrkit benchmark: width={args.width}, taps={args.taps}")
    print(f"Parameters: seeds={args.seeds}, clocks={args.clocks}, "
          f"n_warmup={args.n_warmup}, n_runs={args.n_runs}")
    print()

    try:
        result = benchmark_variants(
            args.width,
            args.taps,
            n_seeds=args.seeds,
            clocks=args.clocks,
            variants=_resolve_variants(args.variants),
            n_warmup=args.n_warmup,
            n_runs=args.n_runs,
        )
    except (LFSRConfigurationError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result)
    print()

    fastest = result.fastest()
    if fastest is None:
        print("No variant completed with output matching the reference.", file=sys.stderr)
        return 1

    print(f"Fastest variant: {fastest.variant}")

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            json.dump(result.to_dict(), f, indent=2)
            f.write('\n')
        print(f"Results written to {args.output}")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == 'benchmark':
        return _run_benchmark(args)

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
