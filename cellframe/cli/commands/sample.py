"""Sample command for previewing generated cells, columns and series."""

from enum import StrEnum
from pathlib import Path
from typing import Annotated, Any

import typer
from hypothesis.strategies import SearchStrategy

from cellframe.common.exceptions import ConfigurationError, GeneratorError, SamplingError
from cellframe.common.types import DensityProfile
from cellframe.config import KeyType, SamplerSettings, ValueType
from cellframe.generators import gen_column, gen_profile_cell, gen_series
from cellframe.sampling import draw_samples


class SampleKind(StrEnum):
    """What the sample command generates."""
    CELL = "cell"
    COLUMN = "column"
    SERIES = "series"


def build_strategy(kind: SampleKind, settings: SamplerSettings) -> SearchStrategy[Any]:
    """Build the strategy described by ``kind`` and the sampler settings."""
    values = settings.value_type.strategy()
    if kind is SampleKind.CELL:
        return gen_profile_cell(values, settings.profile)
    if kind is SampleKind.COLUMN:
        return gen_column(values, settings.profile, max_size=settings.max_size)
    return gen_series(settings.key_type.strategy(), values, settings.profile, max_size=settings.max_size)


def load_settings(config: Path | None, **overrides: Any) -> SamplerSettings:
    """Read settings from ``config`` (or the environment) and apply CLI overrides."""
    base = SamplerSettings.from_yaml(config) if config else SamplerSettings.from_env()
    return base.merged(**overrides)


def sample_command(
    ctx: typer.Context,
    kind: Annotated[SampleKind, typer.Argument(help="What to generate")],
    profile: Annotated[
        DensityProfile | None,
        typer.Option("--profile", "-p", help="Density profile: dense, sparse or dirty"),
    ] = None,
    values: Annotated[
        ValueType | None, typer.Option("--values", help="Type of the inner values")
    ] = None,
    keys: Annotated[
        KeyType | None, typer.Option("--keys", help="Type of series keys")
    ] = None,
    count: Annotated[
        int | None, typer.Option("--count", "-n", help="Number of samples to draw")
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Seed for reproducible samples")
    ] = None,
    max_size: Annotated[
        int | None, typer.Option("--max-size", help="Maximum column/series length")
    ] = None,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="YAML file with sampler settings")
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Draw samples from a generator and print them."""
    cli_ctx = ctx.obj

    try:
        settings = load_settings(
            config,
            profile=profile,
            value_type=values,
            key_type=keys,
            count=count,
            seed=seed,
            max_size=max_size,
        )
    except ConfigurationError as e:
        cli_ctx.printer.print_error(str(e))
        raise typer.Exit(code=2) from e

    try:
        strategy = build_strategy(kind, settings)
        samples = draw_samples(strategy, settings.count, seed=settings.seed)
    except (GeneratorError, SamplingError) as e:
        cli_ctx.printer.print_error(str(e))
        raise typer.Exit(code=1) from e

    if json_output:
        cli_ctx.printer.print_json(samples)
    else:
        title = f"{settings.profile.value} {kind.value} samples"
        cli_ctx.printer.print_samples(samples, title=title)
