# FILE: tests/test_generator.py
from collections import Counter

import numpy as np
import pytest

from pattern_core.distribution import distribute
from pattern_core.generator import generate_grid
from pattern_core.models import GridConfig
from pattern_core.validation import InvalidConfiguration


def test_generate_grid_result():
    cfg = GridConfig(rows=19, cols=24, num_values=9)
    res = generate_grid(cfg, rng=np.random.default_rng(1))
    assert res.config == cfg
    assert len(res.grid) == 19 and all(len(r) == 24 for r in res.grid)
    assert res.counts == dict(Counter(distribute(19, 24, 9)))
    assert 0.0 <= res.conflict_ratio <= 1.0
    assert res.grid_data()[0] == list(res.grid[0])


def test_fallbacks_reported_not_raised():
    res = generate_grid(GridConfig(rows=2, cols=2, num_values=1), rng=np.random.default_rng(0))
    assert res.fallbacks == 3
    assert res.conflict_ratio == 1.0


def test_zero_values_is_hard_failure():
    with pytest.raises(InvalidConfiguration):
        generate_grid(GridConfig(rows=2, cols=2, num_values=0))


def test_negative_rows_is_hard_failure():
    with pytest.raises(InvalidConfiguration):
        generate_grid(GridConfig(rows=-2, cols=2, num_values=2))


def test_config_accepts_camel_case_alias():
    cfg = GridConfig.model_validate({"rows": 2, "cols": 3, "numValues": 4})
    assert cfg.num_values == 4
    assert cfg.total_cells == 6
