from .top_makes_view import TopMakesView
from .yearly_growth_view import YearlyGrowthView
from .range_distribution_view import RangeDistributionView
from .vehicle_type_view import VehicleTypeView
from .top_models_view import TopModelsView
from .geographic_view import GeographicView

__all__ = [
    "TopMakesView",
    "YearlyGrowthView",
    "RangeDistributionView",
    "VehicleTypeView",
    "TopModelsView",
    "GeographicView",
]
