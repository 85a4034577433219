import pytest

from gilbertcurves.region import Region

def test_full_region():
	region = Region.full((3, 4))
	assert region.shape == (3, 4)
	assert region.ndim == 2
	assert len(region) == 12
	assert region.origin == (1, 1)
	assert region.cell((3, 4)) == (3, 4)

def test_sub_forward():
	region = Region.full((5, 6)).sub((2, 4), (3, 6))
	assert region.shape == (3, 4)
	assert region.cell((1, 1)) == (2, 3)
	assert region.cell((3, 4)) == (4, 6)

def test_sub_reversed():
	region = Region.full((5, 6)).sub((5, 3), (2, 1))
	assert region.shape == (3, 2)
	assert region.cell((1, 1)) == (5, 2)
	assert region.cell((3, 2)) == (3, 1)

def test_nested_sub_keeps_original_frame():
	outer = Region.full((8, 8)).sub((8, 1), (1, 8))
	inner = outer.sub((2, 3), (4, 4))
	assert inner.cell((1, 1)) == (7, 4)
	assert inner.cell((2, 1)) == (6, 4)

def test_permute():
	region = Region.full((2, 3, 4)).permute((2, 0, 1))
	assert region.shape == (4, 2, 3)
	assert region.cell((4, 1, 1)) == (1, 1, 4)
	assert region.cell((1, 2, 3)) == (2, 3, 1)

def test_permute_then_sub():
	region = Region.full((3, 5)).permute((1, 0)).sub((5, 4), (2, 3))
	assert region.shape == (2, 2)
	assert region.cell((1, 1)) == (2, 5)
	assert region.cell((2, 2)) == (3, 4)

def test_cells_first_axis_fastest():
	cells = list(Region.full((2, 3)).cells())
	assert cells == [(1, 1), (2, 1), (1, 2), (2, 2), (1, 3), (2, 3)]

def test_cells_of_reversed_line():
	region = Region.full((1, 4)).sub((1, 1), (4, 1))
	assert list(region.cells()) == [(1, 4), (1, 3), (1, 2), (1, 1)]

def test_squeeze():
	region = Region.full((4, 1, 3)).sub((2, 3), (1, 1), (3, 1)).squeeze()
	assert region.shape == (2, 3)
	assert region.cell((1, 1)) == (2, 1, 3)
	assert region.cell((2, 3)) == (3, 1, 1)

def test_squeeze_single_cell():
	region = Region.full((1, 1, 1)).squeeze()
	assert region.ndim == 0
	assert list(region.cells()) == [(1, 1, 1)]

def test_equality():
	assert Region.full((2, 2)) == Region((1, 1), [(0, 1, 2), (1, 1, 2)])
	assert Region.full((2, 2)) != Region.full((2, 2)).permute((1, 0))

def test_sub_out_of_range():
	with pytest.raises(IndexError):
		Region.full((3, 3)).sub((1, 4), (1, 3))

def test_sub_wrong_arity():
	with pytest.raises(ValueError):
		Region.full((3, 3)).sub((1, 3))

def test_invalid_permutation():
	with pytest.raises(ValueError):
		Region.full((3, 3)).permute((0, 0))
