"""
Command-line interface for percolation_threshold.

Single estimate (n-by-n grid, T trials):
    percolation-stats 200 100
    perc stats 200 100 --seed 42

Sweep over grid sizes from a YAML run config:
    perc sweep --config sweep.yaml

Output of a single estimate:
    mean                    = 0.5929...
    stddev                  = 0.0087...
    95% confidence interval = [0.5912..., 0.5946...]
"""

import click

from ..utils.timing import format_duration


@click.group()
@click.version_option()
def cli():
    """Percolation Threshold - Monte Carlo estimation of the site percolation threshold."""
    pass


@cli.command('stats')
@click.argument('n', type=int)
@click.argument('trials', type=int)
@click.option('--seed', type=int, default=None, help='Random seed for reproducible runs')
@click.option('--verbose', '-v', is_flag=True, help='Print one line per trial')
def stats(n, trials, seed, verbose):
    """Estimate the threshold of an N-by-N grid over TRIALS trials."""
    from ..percolation.stats import PercolationStats

    try:
        ps = PercolationStats(n, trials, seed=seed, verbose=verbose)
    except ValueError as e:
        raise click.UsageError(str(e))

    click.echo(ps.report())


@cli.command('sweep')
@click.option('--config', '-c', 'config_file', required=True, type=click.Path(exists=True),
              help='Run config YAML listing grid sizes and trials')
@click.option('--verbose', '-v', is_flag=True, help='Print one line per trial')
def sweep(config_file, verbose):
    """Estimate the threshold for every grid size in a run config."""
    from ..run.config import RunConfig, run_sweep

    try:
        config = RunConfig.from_yaml(config_file)
    except ValueError as e:
        raise click.UsageError(str(e))

    click.echo(f"Run: {config.run_name}")
    if config.description:
        click.echo(f"  {config.description}")
    click.echo(f"  grid sizes: {config.grid_sizes}, trials: {config.trials}, seed: {config.seed}")
    click.echo()

    try:
        results = run_sweep(config, verbose=verbose)
    except ValueError as e:
        raise click.UsageError(str(e))

    for r in results:
        click.echo(
            f"n={r['n']:<6d} mean={r['mean']:.6f}  stddev={r['stddev']:.6f}  "
            f"95% CI=[{r['confidence_lo']:.6f}, {r['confidence_hi']:.6f}]  "
            f"({format_duration(r['elapsed_seconds'])})"
        )

    total = sum(r['elapsed_seconds'] for r in results)
    click.echo(f"\n✓ Completed {len(results)} grid size(s) in {format_duration(total)}")


if __name__ == '__main__':
    cli()
