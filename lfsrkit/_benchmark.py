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

# -*- coding: utf-8 -*-

import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

import numpy as np

from ._registry import get_all_variant_names, make_lfsr

__all__ = [
    'BenchmarkRecord',
    'BenchmarkResult',
    'benchmark_function',
    'benchmark_variants',
]


@dataclass
class BenchmarkRecord:
    """One row in the benchmark result table.

    Attributes
    ----------
    variant : str
        Registered variant name (e.g., ``'galois'``).
    mean_ms : float
        Mean time of one run (all seeds) in milliseconds.
    std_ms : float
        Standard deviation of the run time in milliseconds.
    min_ms : float
        Fastest run in milliseconds.
    clocks_per_second : float or None
        Register clocks per second at the mean run time.
    matches_reference : bool
        Whether the output bits equal those of the ``naive`` oracle.
    success : bool
        Whether the benchmark completed without error.
    error : str or None
        Error message if the run failed.
    """
    variant: str
    mean_ms: float
    std_ms: float
    min_ms: float
    clocks_per_second: Optional[float]
    matches_reference: bool
    success: bool
    error: Optional[str] = None


class BenchmarkResult:
    """Benchmark records for one register configuration.

    Parameters
    ----------
    records : list of BenchmarkRecord
        All collected records, one per variant.
    width : int
        Register width that was benchmarked.
    taps : sequence of int
        Fibonacci-style taps that were benchmarked.
    n_seeds : int
        Number of seeds driven per run.
    clocks : int
        Number of clocks per seed.
    """

    def __init__(
        self,
        records: List[BenchmarkRecord],
        width: int,
        taps: Sequence[int],
        n_seeds: int,
        clocks: int,
    ):
        self._records: List[BenchmarkRecord] = list(records)
        self.width = width
        self.taps = tuple(taps)
        self.n_seeds = n_seeds
        self.clocks = clocks

    @property
    def records(self) -> List[BenchmarkRecord]:
        """Return a copy of all benchmark records."""
        return list(self._records)

    def fastest(self) -> Optional[BenchmarkRecord]:
        """Return the fastest successful record that matches the reference, if any."""
        candidates = [r for r in self._records if r.success and r.matches_reference]
        if not candidates:
            return None
        return min(candidates, key=lambda r: r.mean_ms)

    def to_dict(self) -> dict:
        return {
            'width': self.width,
            'taps': list(self.taps),
            'n_seeds': self.n_seeds,
            'clocks': self.clocks,
            'records': [asdict(r) for r in self._records],
        }

    def _format_table(self) -> str:
        header = f"{'Variant':<14} {'Mean (ms)':>12} {'Std (ms)':>12} {'Min (ms)':>12} {'Mclk/s':>10} {'Match':>6} {'Winner':>7}"
        lines = [header, '-' * len(header)]
        fastest = self.fastest()
        for r in sorted(self._records, key=lambda r: (not r.success, r.mean_ms)):
            if not r.success:
                error = r.error or ''
                error = error[:40] + '...' if len(error) > 40 else error
                lines.append(f"{r.variant:<14} {'FAILED':>12} {error}")
                continue
            winner = '*' if fastest is not None and r.variant == fastest.variant else ''
            rate = f'{r.clocks_per_second / 1e6:>10.2f}' if r.clocks_per_second else f"{'-':>10}"
            lines.append(
                f"{r.variant:<14} {r.mean_ms:>12.3f} {r.std_ms:>12.3f} {r.min_ms:>12.3f} "
                f"{rate} {('yes' if r.matches_reference else 'NO'):>6} {winner:>7}"
            )
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f'BenchmarkResult(width={self.width}, taps={self.taps}, records={len(self._records)})'

    def __str__(self) -> str:
        return self._format_table()


def benchmark_function(
    fn: Callable[[], Any],
    n_warmup: int,
    n_runs: int,
) -> Tuple[float, float, float, float, Any]:
    """Benchmark a function and return timing statistics.

    Parameters
    ----------
    fn : callable
        A callable that takes no arguments and returns the result.
    n_warmup : int
        Number of warmup runs (not timed). Also absorbs JIT compilation.
    n_runs : int
        Number of timed runs.

    Returns
    -------
    tuple of (float, float, float, float, Any)
        ``(mean_time, std_time, min_time, max_time, output)`` where times
        are in seconds and ``output`` is the result of the last call.
    """
    output = None
    for _ in range(n_warmup):
        output = fn()

    times = []
    for _ in range(n_runs):
        start = time.perf_counter()
        output = fn()
        end = time.perf_counter()
        times.append(end - start)

    times = np.array(times)
    return (
        float(np.mean(times)),
        float(np.std(times)),
        float(np.min(times)),
        float(np.max(times)),
        output,
    )


def _drive(lfsr, seeds, clocks):
    # set(seed) then multiclock(clocks) for every seed.
    outputs = []
    for seed in seeds:
        lfsr.set(seed)
        outputs.append(lfsr.multiclock(clocks))
    return np.concatenate(outputs) if outputs else np.empty(0, dtype=np.uint8)


def benchmark_variants(
    width: int,
    taps: Sequence[int],
    n_seeds: int,
    clocks: int,
    variants: Optional[Sequence[str]] = None,
    n_warmup: int = 1,
    n_runs: int = 5,
) -> BenchmarkResult:
    """Time every variant on the same configuration and seed schedule.

    Each variant is built once with the given configuration; every timed
    run does ``set(seed); multiclock(clocks)`` for seeds ``1..n_seeds``.
    Outputs are compared against the ``naive`` oracle.

    Parameters
    ----------
    width : int
        Register width.
    taps : sequence of int
        Fibonacci-style taps.
    n_seeds : int
        Number of seeds per run.
    clocks : int
        Clocks per seed.
    variants : sequence of str, optional
        Variant names to benchmark. Defaults to every registered variant.
    n_warmup : int, optional
        Untimed runs per variant.
    n_runs : int, optional
        Timed runs per variant.

    Returns
    -------
    BenchmarkResult

    Raises
    ------
    UnsupportedWidthError, TapOutOfRangeError
        If the configuration is invalid.
    KeyError
        If a variant name is not registered.
    """
    if variants is None:
        variants = get_all_variant_names()
    seeds = range(1, n_seeds + 1)
    reference = _drive(make_lfsr(width, taps, 0, variant='naive'), seeds, clocks)

    records = []
    for name in variants:
        lfsr = make_lfsr(width, taps, 0, variant=name)
        try:
            mean, std, min_, _, output = benchmark_function(
                lambda: _drive(lfsr, seeds, clocks),
                n_warmup=n_warmup,
                n_runs=n_runs,
            )
        except Exception as e:
            records.append(BenchmarkRecord(name, float('nan'), float('nan'), float('nan'),
                                           None, False, False, f'{type(e).__name__}: {e}'))
            continue
        matches = output is not None and np.array_equal(output, reference)
        rate = n_seeds * clocks / mean if mean > 0 else None
        records.append(BenchmarkRecord(
            variant=name,
            mean_ms=mean * 1000,
            std_ms=std * 1000,
            min_ms=min_ * 1000,
            clocks_per_second=rate,
            matches_reference=matches,
            success=True,
        ))
    return BenchmarkResult(records, width, taps, n_seeds, clocks)
