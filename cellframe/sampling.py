"""Draw concrete samples from a strategy outside of a test.

Hypothesis' ``.example()`` is meant for interactive use and cannot be
seeded, so samples are collected by running the strategy through a
throwaway ``@given`` function with generation as the only phase.
"""

import logging
from typing import Any

from hypothesis import HealthCheck, Phase, given, settings
from hypothesis import seed as hypothesis_seed
from hypothesis.strategies import SearchStrategy

from cellframe.common.exceptions import SamplingError

logger = logging.getLogger(__name__)


def draw_samples(
    strategy: SearchStrategy[Any],
    count: int,
    seed: int | None = None,
    max_examples: int | None = None,
) -> list[Any]:
    """
    Draw up to ``count`` samples from ``strategy``.

    Args:
        strategy: Any Hypothesis strategy
        count: Number of samples wanted
        seed: Fixes the random source, making the result reproducible
        max_examples: How many examples Hypothesis may try; defaults to ``count``

    Returns:
        The samples in generation order. Fewer than ``count`` are returned
        when the strategy runs out of distinct inputs.

    Raises:
        SamplingError: If ``count`` or ``max_examples`` is below one
    """
    if count < 1:
        raise SamplingError(f"Sample count must be at least 1, got {count}")
    if max_examples is not None and max_examples < 1:
        raise SamplingError(f"max_examples must be at least 1, got {max_examples}")

    logger.info("Drawing %d samples (seed=%s)", count, seed)
    samples: list[Any] = []

    @settings(
        max_examples=max_examples or count,
        database=None,
        deadline=None,
        phases=[Phase.generate],
        suppress_health_check=list(HealthCheck),
    )
    @given(strategy)
    def collect(sample: Any) -> None:
        if len(samples) < count:
            samples.append(sample)

    if seed is not None:
        collect = hypothesis_seed(seed)(collect)

    collect()
    logger.debug("Collected %d samples", len(samples))
    return samples
