import pytest

from crucible import Grid

SAMPLE_1 = """\
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
"""

# long straight corridors that punish turning early
SAMPLE_2 = """\
111111111111
999999999991
999999999991
999999999991
999999999991
"""


@pytest.fixture
def sample_1():
    return Grid.parse(SAMPLE_1)


@pytest.fixture
def sample_2():
    return Grid.parse(SAMPLE_2)


@pytest.fixture
def grid_files(tmp_path):
    d = tmp_path / "grids"
    d.mkdir()
    (d / "sample_1.txt").write_text(SAMPLE_1)
    (d / "sample_2.txt").write_text(SAMPLE_2)
    return d
