"""
Command-line entry point.

    python -m ldarobust --trials 100 --seed 42
    python -m ldarobust --scenario label_flip --backend parallel
"""

import argparse
import sys

from ldarobust.core.exceptions import LDARobustError
from ldarobust.experiments import SCENARIOS, run_study, run_sweep
from ldarobust.experiments._common import (
    DEFAULT_N_PER_CLASS,
    DEFAULT_TRIALS,
    DEFAULT_TRAIN_FRACTION,
)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='ldarobust',
        description='Monte Carlo robustness study of linear discriminant analysis'
    )
    parser.add_argument(
        '--scenario', '-s',
        choices=['all', *SCENARIOS],
        default='all',
        help='Scenario to sweep (default: all four)'
    )
    parser.add_argument('--trials', '-t', type=int, default=DEFAULT_TRIALS,
                        help='Trials per severity value')
    parser.add_argument('--n-per-class', '-n', type=int, default=DEFAULT_N_PER_CLASS,
                        help='Generated rows per class')
    parser.add_argument('--train-fraction', '-f', type=float, default=DEFAULT_TRAIN_FRACTION,
                        help='Share of each class used for training')
    parser.add_argument('--seed', type=int, default=None,
                        help='Root seed for reproducible results')
    parser.add_argument('--backend', choices=['cpu', 'parallel'], default='cpu')
    parser.add_argument('--n-jobs', type=int, default=None,
                        help='Workers for the parallel backend')
    parser.add_argument('--on-degenerate', choices=['skip', 'raise'], default='skip')
    args = parser.parse_args(argv)

    options = dict(
        trials=args.trials,
        train_fraction=args.train_fraction,
        seed=args.seed,
        on_degenerate=args.on_degenerate,
        backend=args.backend,
        n_jobs=args.n_jobs,
    )

    try:
        if args.scenario == 'all':
            result = run_study(n_per_class=args.n_per_class, **options)
        else:
            result = run_sweep(
                args.scenario,
                n_class0=args.n_per_class,
                n_class1=args.n_per_class,
                **options,
            )
    except LDARobustError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(result.summary())
    return 0


if __name__ == '__main__':
    sys.exit(main())
