# Region decomposition follows GilbertCurves.jl (Julia), which generalizes
# the Gilbert curve of https://github.com/jakubcerveny/gilbert 2018.
# The curve class interface comes from an earlier adaptation of the latter,
# distributed under its license below.

"""
BSD 2-Clause License

Copyright (c) 2018, Jakub Červený
All rights reserved.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

* Redistributions of source code must retain the above copyright notice, this
  list of conditions and the following disclaimer.

* Redistributions in binary form must reproduce the above copyright notice,
  this list of conditions and the following disclaimer in the documentation
  and/or other materials provided with the distribution.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
"""

# SPDX-License-Identifier: BSD-2-Clause
# Copyright (c) 2018 Jakub Červený

import numpy as np

from gilbertcurves.errors import InvalidDimension, InvalidAxis
from gilbertcurves.plan import plan_2d, plan_3d
from gilbertcurves.region import Region

# Axis order that brings the major axis to the front
PERMUTATIONS = {
	2: {0: (0, 1), 1: (1, 0)},
	3: {0: (0, 1, 2), 1: (1, 0, 2), 2: (2, 1, 0)},
}

def check_extents(extents):

	try:
		extents = tuple(extents)
	except TypeError:
		raise InvalidDimension(f'Extents must be a sequence, got {extents!r}') from None

	if len(extents) not in PERMUTATIONS:
		raise InvalidDimension(f'Only 2D and 3D grids are supported, got {len(extents)} extents')

	for extent in extents:
		if isinstance(extent, bool) or not isinstance(extent, (int, np.integer)) or extent <= 0:
			raise InvalidDimension(f'Extents must be positive integers, got {extents}')

	return tuple(int(extent) for extent in extents)

def reachable(extents, axis):
	""" Whether an adjacent path from the origin can end on the far cell along axis """

	major = extents[axis]
	others = [extent for i, extent in enumerate(extents) if i != axis]

	if major == 1:
		return all(extent == 1 for extent in others)

	# Cells alternate in checkerboard parity along the path
	return major % 2 == 0 or all(extent % 2 for extent in others)

def choose_axis(extents, major_axis = None):
	""" 0-based major axis: the requested one, else the largest extent (lowest axis on ties) """

	if major_axis is None:
		return max(range(len(extents)), key = lambda axis: (extents[axis], -axis))

	if isinstance(major_axis, bool) or not isinstance(major_axis, (int, np.integer)):
		raise InvalidAxis(f'Major axis must be an integer, got {major_axis!r}')
	if not 1 <= major_axis <= len(extents):
		raise InvalidAxis(f'Major axis must be in 1..{len(extents)}, got {major_axis}')

	return int(major_axis) - 1

def _descend(region, part):
	sub = region.sub(*part.spans)
	if part.perm is not None:
		sub = sub.permute(part.perm)
	return sub

def split_2d(region, out):
	""" Append the cells of a 2D region to out, in curve order from local (1, 1) toward (a, 1) """

	plan = plan_2d(*region.shape)

	if plan.kind == 'line':
		out.extend(region.cells())
		return out

	for part in plan.parts:
		split_2d(_descend(region, part), out)

	return out

def split_3d(region, out):
	""" Append the cells of a 3D region to out, in curve order from local (1, 1, 1) toward (a, 1, 1) """

	plan = plan_3d(*region.shape)

	if plan.kind == 'line':
		out.extend(region.cells())
		return out

	if plan.kind == 'flat':
		return split_2d(region.squeeze(), out)

	for part in plan.parts:
		split_3d(_descend(region, part), out)

	return out

def peel(region, split, out):
	"""
	Traverse a region whose far major corner has the wrong checkerboard
	colour. The leading block of even major extent runs from the origin to
	its own far corner, then the last major layer is walked from its origin,
	so the curve still ends on the far face along the major axis.
	"""

	a = region.shape[0]
	rest = [(1, extent) for extent in region.shape[1:]]

	split(region.sub((1, a - 1), *rest), out)
	return split(region.sub((a, a), *rest), out)

class GilbertCurve:

	def __init__(self, extents, major_axis = None, get_index = False):
		self.extents = check_extents(extents)
		self.major_axis = choose_axis(self.extents, major_axis) + 1

		self.get_index = get_index
		self.curve = []

	def __len__(self):
		size = 1
		for extent in self.extents:
			size *= extent
		return size

	def generator(self):

		if not self.curve:
			self.curve = self.build()

		yield from self.curve

	def generate_all(self):
		return list(self.generator())

	def build(self):

		perm = PERMUTATIONS[len(self.extents)][self.major_axis - 1]
		region = Region.full(self.extents).permute(perm)

		split = split_2d if len(self.extents) == 2 else split_3d

		if region.shape[0] > 1 and not reachable(region.shape, 0):
			cells = peel(region, split, [])
		else:
			cells = split(region, [])

		if self.get_index:
			return [self.idx(p) for p in cells]

		return cells

	def idx(self, p):
		""" Get raster scan index at which this 1-based coordinate would be """
		index = 0
		for i, extent in zip(p, self.extents):
			index = index * extent + (i - 1)
		return index

	def pos(self, index):
		""" Get 1-based coordinate given raster scan index position """
		coord = []
		for extent in reversed(self.extents):
			index, rest = divmod(index, extent)
			coord.append(rest + 1)
		return tuple(reversed(coord))

def gilbert_indices(extents, major_axis = None):
	return GilbertCurve(extents, major_axis).generate_all()

def gilbert_order(array, major_axis = None):
	""" Elements of a 2D or 3D array as a flat array in curve order """
	array = np.asarray(array)
	curve = GilbertCurve(array.shape, major_axis, get_index = True)
	return array.reshape(-1)[curve.generate_all()]

if __name__ == '__main__':

	import argparse
	import time

	from gilbertcurves.inverse import linear_indices

	parser = argparse.ArgumentParser()
	parser.add_argument('extents', type = int, nargs = '+')
	parser.add_argument('-m', '--major-axis', type = int, required = False)
	args = parser.parse_args()

	curve = GilbertCurve(args.extents, args.major_axis)
	print(f'Curve Dimensions: {" x ".join(map(str, curve.extents))} = {len(curve)}, major axis {curve.major_axis}')

	start = time.process_time()
	cells = curve.generate_all()
	elapsed = time.process_time() - start

	print(f'Generator Elapsed: {elapsed} sec')
	print(linear_indices(cells).ranks)
