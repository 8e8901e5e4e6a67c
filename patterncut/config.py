"""Global configuration: paths, constants, settings."""

from pathlib import Path

# Lookup tables (categories, pieces, fabrics, sewing order) shipped with the package
DATA_DIR = Path(__file__).parent / "catalog" / "data"

# Ease allowance added to circumference-derived widths (cm)
EASE_CM: float = 2.0

# Standard fabric bolt width (cm)
FABRIC_WIDTH_CM: int = 140

# Fabric length is rounded up to whole metres and never drops below one
LENGTH_INCREMENT_CM: int = 100
MIN_FABRIC_LENGTH_CM: int = 100

FABRIC_UNIT = "cm"

# Largest accepted body measurement (cm); anything above is treated as absent
MAX_MEASUREMENT_CM: float = 1000.0
