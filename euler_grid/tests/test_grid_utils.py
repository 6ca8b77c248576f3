import logging

from euler_grid.src.core.direction import Direction, FORWARD_DIRECTIONS
from euler_grid.src.core.grid import Grid, parse_grid
from euler_grid.src.core.grid_utils import iter_runs, max_run_product


def test_iter_runs_two_by_two():
    grid = parse_grid("1 2\n3 4")
    runs = list(iter_runs(grid, 2))
    assert runs == [
        (0, Direction.RIGHT, [1, 2]),
        (0, Direction.DOWN_RIGHT, [1, 4]),
        (0, Direction.DOWN, [1, 3]),
        (1, Direction.DOWN, [2, 4]),
        (1, Direction.DOWN_LEFT, [2, 3]),
        (2, Direction.RIGHT, [3, 4]),
    ]


def test_max_run_product_picks_diagonal():
    grid = parse_grid("1 2\n3 4")
    assert max_run_product(grid, 2) == 12
    assert max_run_product(grid, 2, [Direction.RIGHT]) == 12
    assert max_run_product(grid, 2, [Direction.DOWN_RIGHT]) == 4


def test_max_run_product_run_length_one():
    grid = Grid.from_rows([[5, 9], [2, 7]])
    assert max_run_product(grid, 1) == 9


def test_max_run_product_no_fit():
    grid = Grid.from_rows([[5]])
    assert max_run_product(grid, 2) is None


def test_max_run_product_all_directions_matches_forward():
    grid = Grid(4, 3, (3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5, 8))
    assert max_run_product(grid, 3, list(Direction)) == max_run_product(
        grid, 3, FORWARD_DIRECTIONS
    )


def test_max_run_product_logs_summary(caplog):
    grid = parse_grid("1 2\n3 4")
    with caplog.at_level(logging.DEBUG, logger="euler_grid.src.core.grid_utils"):
        max_run_product(grid, 2)
    assert "Evaluated 6 runs of length 2, skipped 10 out of bounds" in caplog.text
