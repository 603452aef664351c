from .form_factor import FormFactor
from .geometry import MediaGeometry, all_geometries, lookup
