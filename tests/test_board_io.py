"""
Tests for JSON board files.
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from snappers.board_io import load_level, parse_level
from snappers.solver import BoardState


def test_rows_layout():
    rows = [[0] * 5 for _ in range(6)]
    rows[1][1] = 1
    level = parse_level({"rows": rows, "taps": 2})

    assert level.board == BoardState.from_cells({(1, 1): 1})
    assert level.taps == 2


def test_cells_layout():
    level = parse_level({"cells": [{"x": 1, "y": 1, "value": 1}, {"x": 1, "y": 2, "value": 2}]})

    assert level.board == BoardState.from_cells({(1, 1): 1, (1, 2): 2})
    assert level.taps is None


@pytest.mark.parametrize("data", [
    [],
    {},
    {"rows": [[0] * 5]},
    {"rows": None},
    {"cells": [{"x": 1, "y": 1}]},
    {"cells": [{"x": 9, "y": 1, "value": 1}]},
    {"cells": [{"x": 1, "y": 1, "value": 7}]},
    {"cells": [], "taps": "three"},
    {"cells": [], "taps": True},
    {"cells": None},
    {"rows": [[1.7, 0, 0, 0, 0]] + [[0] * 5] * 5},
    {"rows": [["3", 0, 0, 0, 0]] + [[0] * 5] * 5},
    {"rows": [[True, 0, 0, 0, 0]] + [[0] * 5] * 5},
    {"cells": [{"x": 1, "y": 1, "value": 1.7}]},
    {"cells": [{"x": 1, "y": 1, "value": "3"}]},
    {"cells": [{"x": 1, "y": 1, "value": True}]},
    {"cells": [{"x": 1.5, "y": 1, "value": 1}]},
    {"cells": [{"x": 1, "y": False, "value": 1}]},
])
def test_invalid_data_is_rejected(data):
    with pytest.raises(ValueError):
        parse_level(data)


def test_load_level_from_file(tmp_path):
    path = tmp_path / "level.json"
    path.write_text(json.dumps({"cells": [{"x": 0, "y": 5, "value": 3}], "taps": 3}), encoding="utf-8")

    level = load_level(path)
    assert level.board.get_cell(0, 5) == 3
    assert level.taps == 3


def test_load_level_errors(tmp_path):
    with pytest.raises(ValueError):
        load_level(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(ValueError):
        load_level(broken)
