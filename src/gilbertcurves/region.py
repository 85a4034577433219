from itertools import product

class Region:

	"""
	Rectangular or box-shaped view over the original grid.

	A view is an origin (the original-frame coordinate of its local cell
	(1, ..., 1)) plus one (axis, step, extent) triple per local axis: local
	axis k walks original axis `axis` in direction `step` (+1 or -1) for
	`extent` cells. Sub-views and permutations only rewrite these triples.
	"""

	def __init__(self, origin, axes):
		self.origin = tuple(origin)
		self.axes = tuple(axes)

	@classmethod
	def full(cls, extents):
		""" View of a whole grid of the given extents, in its own frame """
		return cls((1,) * len(extents), ((axis, 1, extent) for axis, extent in enumerate(extents)))

	@property
	def shape(self):
		return tuple(extent for _, _, extent in self.axes)

	@property
	def ndim(self):
		return len(self.axes)

	def __len__(self):
		size = 1
		for extent in self.shape:
			size *= extent
		return size

	def __eq__(self, other):
		return isinstance(other, Region) and self.origin == other.origin and self.axes == other.axes

	def __repr__(self):
		return f'Region(origin = {self.origin}, axes = {self.axes})'

	def cell(self, local):
		""" Original-frame coordinate of a 1-based local coordinate """
		coord = list(self.origin)
		for i, (axis, step, _) in zip(local, self.axes):
			coord[axis] += (i - 1) * step
		return tuple(coord)

	def sub(self, *spans):
		"""
		Sub-view from one inclusive 1-based (start, stop) span per local axis.
		A span with stop < start walks that axis backwards.
		"""

		if len(spans) != self.ndim:
			raise ValueError(f'Expected {self.ndim} spans, got {len(spans)}')

		axes = []
		for (start, stop), (axis, step, extent) in zip(spans, self.axes):
			if not (1 <= start <= extent and 1 <= stop <= extent):
				raise IndexError(f'Span ({start}, {stop}) outside extent {extent}')
			direction = 1 if stop >= start else -1
			axes.append((axis, step * direction, abs(stop - start) + 1))

		origin = self.cell(start for start, _ in spans)
		return Region(origin, axes)

	def permute(self, perm):
		""" Local axis k of the result is local axis perm[k] of this view """
		if sorted(perm) != list(range(self.ndim)):
			raise ValueError(f'Invalid permutation {perm} for {self.ndim} axes')
		return Region(self.origin, (self.axes[p] for p in perm))

	def squeeze(self):
		""" Drop unit axes; the cells covered do not change """
		return Region(self.origin, (ax for ax in self.axes if ax[2] != 1))

	def cells(self):
		""" All cells, first local axis varying fastest """
		ranges = [range(1, extent + 1) for extent in reversed(self.shape)]
		for local in product(*ranges):
			yield self.cell(reversed(local))
