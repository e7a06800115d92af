"""Command-line interface for namematch.

Provides commands to score a record pair, classify one record and evaluate
a parameter set on labeled data.
"""

import importlib.metadata
import json
import sys
import time
from pathlib import Path

import click

from namematch.models import Record

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("namematch")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


_PARAMS_OPTION = click.option(
    "--params",
    "-p",
    "params_path",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="Scoring params JSON file",
)


def _index_by_id(records: list[Record], path: str) -> dict[int, Record]:
    index = {record.id: record for record in records}
    if len(index) != len(records):
        raise click.BadParameter(f"duplicate record ids in {path}")
    return index


@click.group()
@click.version_option(version=__version__, prog_name="namematch")
def cli() -> None:
    """Collection inference for bibliographic name records.

    Use 'namematch COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("id_a", type=int)
@click.argument("id_b", type=int)
@click.option(
    "--records",
    "-r",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="JSONL file holding both records",
)
@_PARAMS_OPTION
def score(id_a: int, id_b: int, records: str, params_path: str) -> None:
    """Print the pairwise similarity of records ID_A and ID_B.

    Examples
    --------
        namematch score 12 40 -r names.jsonl -p params.json
    """
    from namematch import load_params, read_jsonl
    from namematch.scoring import score as pair_score

    try:
        params = load_params(params_path)
        index = _index_by_id(read_jsonl(records), records)
        for record_id in (id_a, id_b):
            if record_id not in index:
                raise click.BadParameter(f"record id {record_id} not found in {records}")

        click.echo(repr(pair_score(index[id_a], index[id_b], params)))

    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.argument("query_id", type=int)
@click.option(
    "--train",
    "-t",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="Training records JSONL (must contain QUERY_ID)",
)
@_PARAMS_OPTION
@click.option(
    "--cutoff",
    type=float,
    default=None,
    help="Probability cutoff (default: params probability_cutoff)",
)
@click.option(
    "--show-probs",
    is_flag=True,
    help="Also print the full probability distribution",
)
def classify(
    query_id: int,
    train: str,
    params_path: str,
    cutoff: float | None,
    show_probs: bool,
) -> None:
    """Infer the collection of record QUERY_ID from the training set.

    The query record is matched against every training record; it is never
    matched against itself.

    Examples
    --------
        namematch classify 12 -t names.jsonl -p params.json --cutoff 0.6
    """
    from namematch import load_params, probabilities, read_jsonl, top_choice

    try:
        params = load_params(params_path)
        train_records = read_jsonl(train)
        index = _index_by_id(train_records, train)
        if query_id not in index:
            raise click.BadParameter(f"record id {query_id} not found in {train}")
        query = index[query_id]

        if show_probs:
            probs = probabilities(query, train_records, params)
            for collection in sorted(probs):
                click.echo(f"{collection}\t{probs[collection]:.6f}", err=True)

        choice = top_choice(query, train_records, params, cutoff)
        if choice is None:
            click.echo("no decision")
        else:
            click.echo(f"{choice.collection}\t{choice.probability:.6f}")

    except Exception as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--train",
    "-t",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="Training records JSONL",
)
@click.option(
    "--test",
    "-s",
    type=click.Path(exists=True, dir_okay=False),
    required=True,
    help="Labeled test records JSONL",
)
@_PARAMS_OPTION
@click.option(
    "--cutoff",
    type=float,
    default=None,
    help="Probability cutoff (default: params probability_cutoff)",
)
@click.option(
    "--workers",
    "-w",
    type=click.IntRange(min=1),
    default=1,
    help="Worker processes (default: 1)",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write JSONL audit events to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def evaluate(
    train: str,
    test: str,
    params_path: str,
    cutoff: float | None,
    workers: int,
    log_file: str | None,
    verbose: bool,
) -> None:
    """Evaluate a params file on labeled test records.

    Prints the score breakdown as JSON. Each incorrect decision costs
    false_positive_cost points (default 10), each correct decision earns one.

    Examples
    --------
        namematch evaluate -t train.jsonl -s test.jsonl -p params.json
        namematch evaluate -t train.jsonl -s test.jsonl -p params.json -w 8 --log-file run.jsonl
    """
    from namematch import load_params, read_jsonl
    from namematch.audit import AuditLogger, generate_run_id
    from namematch.evaluation import evaluate as run_evaluation

    logger: AuditLogger | None = None
    start = time.perf_counter()

    try:
        params = load_params(params_path)
        train_records = read_jsonl(train)
        test_records = read_jsonl(test)

        if verbose:
            click.echo(f"Params: {params!r}", err=True)
            click.echo(f"  Train: {len(train_records)} records", err=True)
            click.echo(f"  Test: {len(test_records)} records", err=True)
            click.echo(f"  Workers: {workers}", err=True)

        if log_file:
            logger = AuditLogger(run_id=generate_run_id(), log_path=Path(log_file))
            logger.run_started(command=sys.argv, parameters=params.to_dict())

        breakdown = run_evaluation(
            train_records,
            test_records,
            params,
            cutoff,
            workers=workers,
            logger=logger,
        )

        if logger:
            logger.run_finished("success", time.perf_counter() - start)

        click.echo(json.dumps(breakdown.to_dict(), sort_keys=True))

    except Exception as e:
        if logger:
            logger.error(type(e).__name__, str(e))
            logger.run_finished("failed", time.perf_counter() - start)
        click.secho(f"Error: {e}", fg="red", err=True)
        if verbose:
            import traceback

            click.echo(traceback.format_exc(), err=True)
        sys.exit(1)

    finally:
        if logger:
            logger.close()


if __name__ == "__main__":
    cli()
