# pattern_core/generator.py
from __future__ import annotations
import logging
from typing import Optional
import numpy as np

from .constraints import conflict_ratio
from .distribution import distribute, tally
from .models import GenerationResult, GridConfig
from .placement import place_with_stats
from .validation import validate_config

logger = logging.getLogger(__name__)


def generate_grid(config: GridConfig, rng: Optional[np.random.Generator] = None) -> GenerationResult:
    """
    Validate, distribute, place. Raises InvalidConfiguration before doing any work
    on a bad config; adjacency misses are reported on the result, never raised.
    """
    validate_config(config.rows, config.cols, config.num_values)
    multiset = distribute(config.rows, config.cols, config.num_values)
    grid, fallbacks = place_with_stats(config.rows, config.cols, multiset, rng=rng)
    ratio = conflict_ratio(grid)
    logger.info(
        f"Generated {config.rows}x{config.cols} grid with {config.num_values} values "
        f"(fallbacks={fallbacks}, conflict_ratio={ratio:.3f})"
    )
    return GenerationResult(
        config=config,
        grid=grid,
        counts=tally(grid),
        fallbacks=fallbacks,
        conflict_ratio=ratio,
    )
