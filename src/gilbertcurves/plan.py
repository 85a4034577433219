from collections import namedtuple

# kind: 'line', 'flat', 'elongated', 'standard', 'single', 'no_depth', 'no_height', 'regular'
# parts: sub-regions in traversal order
Plan = namedtuple('Plan', ['kind', 'parts'])

# spans: inclusive 1-based (start, stop) per axis, stop < start walks backwards
# perm: axis permutation applied to the sub-region, None keeps orientation
Part = namedtuple('Part', ['spans', 'perm'])

TRANSPOSE = (1, 0)
ROTATE_FORWARD = (1, 2, 0)  # local axes (b, c, a)
ROTATE_BACKWARD = (2, 0, 1) # local axes (c, a, b)

def is_elongated(major, minor):
	""" Major side more than 3/2 of the minor side """
	return 2 * major > 3 * minor

def dominates(side, other):
	""" Side more than 4/3 of the other """
	return 3 * side > 4 * other

def halve(extent, odd = False):
	""" Split point of an extent, nudged to even (or odd) steps when the extent allows it """
	half = extent // 2
	if extent > 2 and half % 2 != int(odd):
		half += 1
	return half

def plan_2d(a, b):

	if a == 1 or b == 1:
		return Plan('line', [])

	if is_elongated(a, b):
		a2 = halve(a)
		return Plan('elongated', [
			Part(((1, a2), (1, b)), None),
			Part(((a2 + 1, a), (1, b)), None),
		])

	a2 = a // 2
	b2 = halve(b)

	# across the top-left, down the right, back along the bottom-left
	return Plan('standard', [
		Part(((1, a2), (1, b2)), TRANSPOSE),
		Part(((1, a), (b2 + 1, b)), None),
		Part(((a, a2 + 1), (b2, 1)), TRANSPOSE),
	])

def plan_3d(a, b, c):

	units = (a, b, c).count(1)
	if units > 1:
		return Plan('line', [])
	if units == 1:
		return Plan('flat', [])

	if is_elongated(a, b) and is_elongated(a, c):
		return _single(a, b, c)

	if dominates(b, c):
		return _no_depth(a, b, c)

	if dominates(c, b):
		return _no_height(a, b, c)

	# An odd major side cannot be crossed end to end by the five-way split
	if a % 2:
		return _no_depth(a, b, c) if b >= c else _no_height(a, b, c)

	return _regular(a, b, c)

def _single(a, b, c):
	a2 = halve(a)
	return Plan('single', [
		Part(((1, a2), (1, b), (1, c)), None),
		Part(((a2 + 1, a), (1, b), (1, c)), None),
	])

def _no_depth(a, b, c):
	a2 = a // 2
	b2 = halve(b)
	return Plan('no_depth', [
		Part(((1, a2), (1, b2), (1, c)), ROTATE_FORWARD),
		Part(((1, a), (b2 + 1, b), (1, c)), None),
		Part(((a, a2 + 1), (b2, 1), (1, c)), ROTATE_FORWARD),
	])

def _no_height(a, b, c):
	a2 = halve(a)
	c2 = halve(c)
	return Plan('no_height', [
		Part(((1, a2), (1, b), (1, c2)), ROTATE_BACKWARD),
		Part(((1, a), (1, b), (c2 + 1, c)), None),
		Part(((a, a2 + 1), (1, b), (c2, 1)), ROTATE_BACKWARD),
	])

def _regular(a, b, c):

	if c % 2 == 0:
		a2, b2, c2 = halve(a), halve(b), halve(c)
	elif b % 2:
		# second and fourth parts run along the odd depth and need odd sides
		a2, b2, c2 = halve(a, odd = True), halve(b), halve(c)
	else:
		a2, b2, c2 = halve(a, odd = True), halve(b, odd = True), halve(c, odd = True)

	return Plan('regular', [
		Part(((1, a2), (1, b2), (1, c2)), ROTATE_FORWARD),
		Part(((1, a2), (b2 + 1, b), (1, c)), ROTATE_BACKWARD),
		Part(((1, a), (b2, 1), (c, c2 + 1)), None),
		Part(((a, a2 + 1), (b2 + 1, b), (c, 1)), ROTATE_BACKWARD),
		Part(((a, a2 + 1), (b2, 1), (1, c2)), ROTATE_FORWARD),
	])
