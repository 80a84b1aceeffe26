from dataclasses import dataclass
import math
from .exceptions import InvalidGeometryError


@dataclass(frozen=True)
class DuctGeometry:
    """Straight duct with a rectangular cross-section.

    All dimensions are in metres. Cross-sectional area, internal perimeter and
    hydraulic diameter are derived from width and height on access; they are
    not stored. Dimensions so small or so large that one of these derived
    values under- or overflows are rejected on creation.
    """
    width: float
    height: float
    length: float

    def __post_init__(self):
        for attr in ('width', 'height', 'length'):
            value = getattr(self, attr)
            if not math.isfinite(value) or value <= 0.0:
                raise InvalidGeometryError(
                    f"duct {attr} must be a positive number, got {value}"
                )
        for attr in ('area', 'perimeter', 'hydraulic_diameter'):
            value = getattr(self, attr)
            if not math.isfinite(value) or value <= 0.0:
                raise InvalidGeometryError(
                    f"duct {attr.replace('_', ' ')} is out of range ({value}) "
                    f"for width {self.width} m and height {self.height} m"
                )

    @property
    def area(self) -> float:
        """Get cross-sectional area in m²."""
        return self.width * self.height

    @property
    def perimeter(self) -> float:
        """Get internal (wetted) perimeter of the cross-section in m."""
        return 2 * (self.width + self.height)

    @property
    def hydraulic_diameter(self) -> float:
        """Get hydraulic diameter in m."""
        return 4 * self.area / self.perimeter
