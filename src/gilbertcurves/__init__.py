"""Generalized Hilbert ('Gilbert') curve orderings of 2D and 3D grids."""

from .curve import GilbertCurve, gilbert_indices, gilbert_order
from .errors import CurveError, DuplicateCoordinate, EmptyOrdering, InvalidAxis, InvalidDimension
from .inverse import RankTable, invert, linear_indices
from .plan import Part, Plan, plan_2d, plan_3d
from .region import Region

__all__ = [
	# Curve
	"GilbertCurve",
	"gilbert_indices",
	"gilbert_order",
	# Rank tables
	"RankTable",
	"linear_indices",
	"invert",
	# Decomposition
	"Plan",
	"Part",
	"plan_2d",
	"plan_3d",
	"Region",
	# Errors
	"CurveError",
	"InvalidDimension",
	"InvalidAxis",
	"EmptyOrdering",
	"DuplicateCoordinate",
]
