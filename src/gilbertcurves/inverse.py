import numpy as np

from gilbertcurves.errors import InvalidDimension, EmptyOrdering, DuplicateCoordinate

class RankTable:

	"""
	Dense map from 1-based coordinate to 1-based rank in an ordering.
	`ranks` is the underlying numpy array (0-based indexing), 0 where a cell
	never appeared in the ordering.
	"""

	def __init__(self, ranks):
		self.ranks = ranks

	@property
	def shape(self):
		return self.ranks.shape

	def __getitem__(self, coord):
		coord = tuple(coord)
		if len(coord) != self.ranks.ndim:
			raise IndexError(f'Expected a {self.ranks.ndim}D coordinate, got {coord}')
		for i, extent in zip(coord, self.shape):
			if not 1 <= i <= extent:
				raise IndexError(f'Coordinate {coord} outside 1-based table of shape {self.shape}')
		return int(self.ranks[tuple(i - 1 for i in coord)])

	def __eq__(self, other):
		return isinstance(other, RankTable) and np.array_equal(self.ranks, other.ranks)

	def __repr__(self):
		return f'RankTable(shape = {self.shape})'

	def order(self):
		""" Coordinates sorted by rank, the inverse of linear_indices """
		flat = self.ranks.reshape(-1)
		present = np.flatnonzero(flat)
		by_rank = present[np.argsort(flat[present], kind = 'stable')]
		coords = np.stack(np.unravel_index(by_rank, self.shape), axis = 1) + 1
		return [tuple(int(i) for i in c) for c in coords]

def _coordinates(ordering):

	try:
		coords = np.asarray(ordering)
	except ValueError:
		raise InvalidDimension('Coordinates in an ordering must all have the same length') from None

	if coords.ndim != 2 or coords.shape[1] == 0 or not np.issubdtype(coords.dtype, np.integer):
		raise InvalidDimension(f'Ordering must hold integer coordinate tuples, got array of shape {coords.shape}')

	if coords.min() < 1:
		raise InvalidDimension('Coordinates are 1-based and must be positive')

	return coords

def linear_indices(ordering):
	"""
	Construct a RankTable `M` holding ranks 1..len(ordering) such that
	`M[ordering[i]] == i + 1`. The table spans the component-wise maximum
	coordinate of the ordering.
	"""

	if len(ordering) == 0:
		raise EmptyOrdering('Cannot build a rank table from an empty ordering')

	coords = _coordinates(ordering)
	shape = tuple(int(m) for m in coords.max(axis = 0))

	flat = np.ravel_multi_index(tuple((coords - 1).T), shape)

	# Stable sort keeps the earlier rank first among repeats
	order = np.argsort(flat, kind = 'stable')
	repeats = np.flatnonzero(flat[order][1:] == flat[order][:-1])
	if repeats.size:
		first, second = order[repeats[0]], order[repeats[0] + 1]
		coord = tuple(int(i) for i in coords[first])
		raise DuplicateCoordinate(coord, int(first) + 1, int(second) + 1)

	ranks = np.zeros(shape, dtype = np.int64)
	ranks.reshape(-1)[flat] = np.arange(1, len(coords) + 1)

	return RankTable(ranks)

invert = linear_indices
