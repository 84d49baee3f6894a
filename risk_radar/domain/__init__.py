from risk_radar.domain.regions import (
    REGIONS,
    RegionCode,
    RegionConfig,
    get_region,
    list_region_codes,
    list_regions,
)

__all__ = [
    "REGIONS",
    "RegionCode",
    "RegionConfig",
    "get_region",
    "list_region_codes",
    "list_regions",
]
