
class CurveError(ValueError):
	pass

class InvalidDimension(CurveError):
	""" Extents (or coordinates) that are not positive integers in 2 or 3 dimensions """
	pass

class InvalidAxis(CurveError):
	""" Major axis outside 1..N """
	pass

class EmptyOrdering(CurveError):
	pass

class DuplicateCoordinate(CurveError):

	def __init__(self, coord, first, second):
		self.coord = coord
		self.first = first
		self.second = second
		super().__init__(f'Coordinate {coord} appears at ranks {first} and {second}')
