import pytest

from gilbertcurves.plan import plan_2d, plan_3d, halve, is_elongated, dominates, TRANSPOSE
from gilbertcurves.region import Region

@pytest.mark.parametrize('extent, odd, expected', [
	(2, False, 1),
	(3, False, 2),
	(4, False, 2),
	(6, False, 4),
	(7, False, 4),
	(2, True, 1),
	(3, True, 1),
	(4, True, 3),
	(5, True, 3),
	(8, True, 5),
])
def test_halve(extent, odd, expected):
	assert halve(extent, odd = odd) == expected

def test_ratio_predicates():
	assert is_elongated(5, 3)
	assert not is_elongated(3, 2)
	assert dominates(3, 2)
	assert not dominates(4, 3)

@pytest.mark.parametrize('shape', [(1, 1), (1, 7), (9, 1)])
def test_plan_2d_line(shape):
	plan = plan_2d(*shape)
	assert plan.kind == 'line'
	assert plan.parts == []

def test_plan_2d_elongated():
	plan = plan_2d(10, 3)
	assert plan.kind == 'elongated'
	assert [part.spans for part in plan.parts] == [((1, 6), (1, 3)), ((7, 10), (1, 3))]
	assert all(part.perm is None for part in plan.parts)

def test_plan_2d_standard():
	plan = plan_2d(5, 6)
	assert plan.kind == 'standard'
	assert [part.spans for part in plan.parts] == [
		((1, 2), (1, 4)),
		((1, 5), (5, 6)),
		((5, 3), (4, 1)),
	]
	assert [part.perm for part in plan.parts] == [TRANSPOSE, None, TRANSPOSE]

@pytest.mark.parametrize('shape, kind', [
	((1, 1, 5), 'line'),
	((4, 1, 3), 'flat'),
	((8, 2, 2), 'single'),
	((2, 4, 2), 'no_depth'),
	((2, 2, 4), 'no_height'),
	((4, 4, 4), 'regular'),
	((2, 2, 2), 'regular'),
	((3, 3, 3), 'no_depth'),
	((5, 3, 5), 'no_height'),
])
def test_plan_3d_kind(shape, kind):
	assert plan_3d(*shape).kind == kind

def _covered(shape, plan):
	region = Region.full(shape)
	cells = []
	for part in plan.parts:
		cells.extend(region.sub(*part.spans).cells())
	return cells

@pytest.mark.parametrize('shape', [(2, 2), (3, 5), (5, 4), (10, 3), (7, 7), (2, 3)])
def test_plan_2d_partitions_region(shape):
	cells = _covered(shape, plan_2d(*shape))
	assert len(cells) == len(set(cells)) == shape[0] * shape[1]

@pytest.mark.parametrize('shape', [
	(2, 2, 2), (4, 4, 4), (4, 4, 3), (6, 5, 5), (3, 3, 3), (8, 2, 2), (2, 4, 2), (2, 2, 4), (6, 4, 5),
])
def test_plan_3d_partitions_region(shape):
	cells = _covered(shape, plan_3d(*shape))
	assert len(cells) == len(set(cells)) == shape[0] * shape[1] * shape[2]
