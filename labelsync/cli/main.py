"""Command-line interface for LabelSync.

Provides CLI commands for deduplicating, setting and resolving feature/cell
names, plus summary tables and color palettes.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

import click

from labelsync import __version__

AXIS_CHOICES = ["row", "feature", "gene", "col", "cell"]


def setup_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Setup logging for CLI commands."""
    level = logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    return logging.getLogger("labelsync")


def _read_lines(path: str) -> list:
    with open(path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


@click.group()
@click.version_option(version=__version__, prog_name="labelsync")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True),
              help="LabelSync configuration file (YAML)")
@click.option("--log-file", type=click.Path(), help="Also write logs to this file")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    debug: bool,
    config_path: Optional[str],
    log_file: Optional[str],
) -> None:
    """LabelSync: feature and cell identifier handling for single-cell data.

    Examples:

        # Make gene names unique
        labelsync dedup --input data.h5ad --out unique.h5ad

        # Use a var column as gene names
        labelsync set-names --input data.h5ad --column feature_name --out named.h5ad

        # Find genes by partial match and write a report
        labelsync resolve --input data.h5ad --axis gene --id CD3 --partial --report hits.json
    """
    from labelsync.config import LabelSyncConfig
    from labelsync.io import attach_file_handler

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["logger"] = setup_logging(verbose, debug)
    ctx.obj["config"] = (
        LabelSyncConfig.from_yaml(config_path) if config_path else LabelSyncConfig()
    )
    if log_file:
        level = logging.DEBUG if debug else logging.INFO
        path = attach_file_handler(log_file, level=level)
        ctx.obj["logger"].info(f"Logging to {path}")


@cli.command()
@click.option("--input", "-i", "input_path", required=True, type=click.Path(exists=True),
              help="Input AnnData (.h5ad) or matrix (.csv/.tsv)")
@click.option("--out", "-o", "output_path", required=True, type=click.Path(),
              help="Output file")
@click.option("--axis", type=click.Choice(AXIS_CHOICES), default="row",
              help="Axis to deduplicate")
@click.option("--as-annotation", is_flag=True,
              help="Store unique names in an annotation column instead (AnnData only)")
@click.pass_context
def dedup(
    ctx: click.Context,
    input_path: str,
    output_path: str,
    axis: str,
    as_annotation: bool,
) -> None:
    """Suffix duplicated names with -1, -2, ..."""
    from labelsync.core.identifiers import LabelSyncError, deduplicate_in_place
    from labelsync.io import read_entity, write_entity

    logger = ctx.obj["logger"]
    config = ctx.obj["config"].identifiers
    logger.info(f"Deduplicating {axis} names of: {input_path}")

    entity = read_entity(input_path)
    try:
        entity = deduplicate_in_place(
            entity, axis, as_annotation=as_annotation, sep=config.dedup_sep
        )
    except LabelSyncError as e:
        raise click.ClickException(str(e))

    write_entity(entity, output_path)
    click.echo(f"Wrote {output_path}")


@cli.command("set-names")
@click.option("--input", "-i", "input_path", required=True, type=click.Path(exists=True),
              help="Input AnnData (.h5ad) or matrix (.csv/.tsv)")
@click.option("--out", "-o", "output_path", required=True, type=click.Path(),
              help="Output file")
@click.option("--axis", type=click.Choice(AXIS_CHOICES), default="row",
              help="Axis whose names are replaced")
@click.option("--column", help="Annotation column to use as names (AnnData only)")
@click.option("--names-file", type=click.Path(exists=True),
              help="Text file with one name per line")
@click.option("--dedup/--no-dedup", default=None,
              help="Deduplicate names after setting them")
@click.pass_context
def set_names(
    ctx: click.Context,
    input_path: str,
    output_path: str,
    axis: str,
    column: Optional[str],
    names_file: Optional[str],
    dedup: Optional[bool],
) -> None:
    """Replace names with an annotation column or a list of names."""
    from labelsync.core.identifiers import LabelSyncError, set_labels
    from labelsync.io import read_entity, write_entity

    if (column is None) == (names_file is None):
        raise click.UsageError("Give exactly one of --column or --names-file")

    logger = ctx.obj["logger"]
    config = ctx.obj["config"].identifiers
    if dedup is None:
        dedup = config.dedup_on_install

    entity = read_entity(input_path)
    new_labels = column if column is not None else _read_lines(names_file)
    try:
        entity = set_labels(entity, axis, new_labels, dedup=dedup, sep=config.dedup_sep)
    except LabelSyncError as e:
        raise click.ClickException(str(e))

    logger.info(f"Set {axis} names (dedup={dedup})")
    write_entity(entity, output_path)
    click.echo(f"Wrote {output_path}")


@cli.command()
@click.option("--input", "-i", "input_path", required=True, type=click.Path(exists=True),
              help="Input AnnData file (.h5ad)")
@click.option("--axis", type=click.Choice(AXIS_CHOICES), required=True,
              help="Search features (row/feature/gene) or cells (col/cell)")
@click.option("--id", "ids", multiple=True, help="Identifier to look up (repeatable)")
@click.option("--ids-file", type=click.Path(exists=True),
              help="Text file with one identifier per line")
@click.option("--by", help="Annotation column to search instead of the names")
@click.option("--partial", is_flag=True, help="Pattern matching instead of exact matching")
@click.option("--all-matches", is_flag=True, help="Keep every hit, not only the first")
@click.option("--report", type=click.Path(), help="Write a JSON/YAML resolution report")
@click.option("--subset-out", type=click.Path(), help="Write the matched subset (.h5ad)")
@click.pass_context
def resolve(
    ctx: click.Context,
    input_path: str,
    axis: str,
    ids: Tuple[str, ...],
    ids_file: Optional[str],
    by: Optional[str],
    partial: bool,
    all_matches: bool,
    report: Optional[str],
    subset_out: Optional[str],
) -> None:
    """Resolve identifiers to feature or cell indices."""
    from labelsync.core.identifiers import Axis, LabelSyncError, parse_axis, resolve_index
    from labelsync.io import read_entity, write_entity, write_record

    config = ctx.obj["config"].identifiers
    queries = list(ids) + (_read_lines(ids_file) if ids_file else [])
    if not queries:
        raise click.UsageError("Give at least one --id or an --ids-file")

    entity = read_entity(input_path)
    try:
        result = resolve_index(
            entity,
            queries,
            axis=axis,
            by=by,
            exact_match=False if partial else config.exact_match,
            first_match=False if all_matches else config.first_match,
            matcher=config.matcher,
            emit_warnings=False,
        )
    except LabelSyncError as e:
        raise click.ClickException(str(e))

    click.echo(f"Matched {result.n_matched} position(s) for {len(queries)} identifier(s)")
    for diagnostic in result.diagnostics:
        click.echo(f"[{diagnostic.severity}] {diagnostic.message}", err=True)

    if report:
        fmt = "yaml" if Path(report).suffix.lower() in (".yaml", ".yml") else "json"
        write_record(report, result.to_dict(), fmt=fmt)
        click.echo(f"Wrote report: {report}")

    if subset_out:
        if parse_axis(axis) is Axis.ROW:
            subset = entity[:, result.indices].copy()
        else:
            subset = entity[result.indices, :].copy()
        write_entity(subset, subset_out)
        click.echo(f"Wrote subset: {subset_out}")


@cli.command()
@click.option("--input", "-i", "input_path", required=True, type=click.Path(exists=True),
              help="Input AnnData file (.h5ad)")
@click.option("--out", "-o", "output_path", type=click.Path(), help="Output CSV")
@click.option("--layer", help="Layer to summarize (default: X)")
@click.option("--sample-key", help="obs column with sample identifiers")
@click.pass_context
def summarize(
    ctx: click.Context,
    input_path: str,
    output_path: Optional[str],
    layer: Optional[str],
    sample_key: Optional[str],
) -> None:
    """Per-sample cell counts and counts/features per cell."""
    from labelsync.core.identifiers import LabelSyncError
    from labelsync.core.utilities import summarize_adata
    from labelsync.io import read_entity, write_dataframe

    config = ctx.obj["config"].summary
    adata = read_entity(input_path)
    try:
        table = summarize_adata(
            adata,
            layer=layer or config.layer,
            sample_key=sample_key or config.sample_key,
        )
    except (LabelSyncError, KeyError) as e:
        raise click.ClickException(str(e))

    if output_path:
        write_dataframe(table, output_path)
        click.echo(f"Wrote {output_path}")
    else:
        click.echo(table.to_string(index=False))


@cli.command()
@click.option("-n", "n_colors", type=int, required=True, help="Number of colors")
@click.option("--palette", type=click.Choice(["random", "ggplot", "celda"]),
              help="Palette generator")
@click.option("--seed", type=int, help="Seed for the random generator")
@click.pass_context
def palette(
    ctx: click.Context,
    n_colors: int,
    palette: Optional[str],
    seed: Optional[int],
) -> None:
    """Print N hex color codes, one per line."""
    from labelsync.core.utilities import discrete_color_palette

    config = ctx.obj["config"].palette
    name = palette or config.palette
    kwargs = config.celda_kwargs() if name == "celda" else {}
    colors = discrete_color_palette(
        n_colors,
        palette=name,
        seed=seed if seed is not None else config.seed,
        **kwargs,
    )
    for color in colors:
        click.echo(color)


def main() -> None:
    """Main entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
