"""Property leaf-category override sets.

``landType`` doubles as the property/room type selector; each listing kind
relabels it and swaps in its own options. Sale listings carry no rent
fields.
"""

from __future__ import annotations

from functools import partial

from adschema.domain import library as lib
from adschema.domain.overrides import entry, subcategory
from adschema.domain.types import TemplateName

_sub = partial(subcategory, TemplateName.PROPERTY)

_RESIDENTIAL_UNITS = ("Studio", "1BHK", "2BHK", "3BHK", "4BHK", "Penthouse", "Duplex")
_HOUSE_TYPES = ("Single Family", "Bungalow", "Villa", "Townhouse", "Duplex House")
_COMMERCIAL_TYPES = (
    "Office Space",
    "Shop",
    "Showroom",
    "Warehouse",
    "Factory",
    "Restaurant Space",
)

PROPERTY_SUBCATEGORIES = (
    _sub(
        "Apartments for Sale",
        entry(lib.LAND_TYPE_FIELD, label="Property Type", options=_RESIDENTIAL_UNITS),
        entry(lib.BEDROOMS_FIELD),
        entry(lib.BATHROOMS_FIELD),
        entry(lib.TOTAL_AREA_FIELD),
        entry(lib.AREA_UNIT_FIELD),
        entry(lib.FURNISHING_FIELD),
        entry(lib.PARKING_FIELD),
        entry(lib.FLOOR_NUMBER_FIELD),
        entry(lib.FACING_FIELD),
        entry(lib.AMENITIES_FIELD),
        entry(lib.PROPERTY_AGE_FIELD),
    ),
    _sub(
        "Apartments for Rent",
        entry(lib.LAND_TYPE_FIELD, label="Property Type", options=_RESIDENTIAL_UNITS),
        entry(lib.BEDROOMS_FIELD),
        entry(lib.BATHROOMS_FIELD),
        entry(lib.TOTAL_AREA_FIELD),
        entry(lib.AREA_UNIT_FIELD),
        entry(lib.FURNISHING_FIELD),
        entry(lib.PARKING_FIELD),
        entry(lib.FLOOR_NUMBER_FIELD),
        entry(lib.FACING_FIELD),
        entry(lib.AMENITIES_FIELD),
        entry(lib.MONTHLY_RENT_FIELD),
        entry(lib.SECURITY_DEPOSIT_FIELD),
        entry(lib.AVAILABLE_FROM_FIELD),
    ),
    _sub(
        "Houses for Sale",
        entry(lib.LAND_TYPE_FIELD, label="Property Type", options=_HOUSE_TYPES),
        entry(lib.BEDROOMS_FIELD),
        entry(lib.BATHROOMS_FIELD),
        entry(lib.TOTAL_AREA_FIELD),
        entry(lib.AREA_UNIT_FIELD),
        entry(lib.FURNISHING_FIELD),
        entry(lib.PARKING_FIELD),
        entry(lib.TOTAL_FLOORS_FIELD),
        entry(lib.FACING_FIELD),
        entry(lib.AMENITIES_FIELD),
        entry(lib.ROAD_ACCESS_FIELD),
        entry(lib.PROPERTY_AGE_FIELD),
    ),
    _sub(
        "Houses for Rent",
        entry(lib.LAND_TYPE_FIELD, label="Property Type", options=_HOUSE_TYPES),
        entry(lib.BEDROOMS_FIELD),
        entry(lib.BATHROOMS_FIELD),
        entry(lib.TOTAL_AREA_FIELD),
        entry(lib.AREA_UNIT_FIELD),
        entry(lib.FURNISHING_FIELD),
        entry(lib.PARKING_FIELD),
        entry(lib.TOTAL_FLOORS_FIELD),
        entry(lib.FACING_FIELD),
        entry(lib.AMENITIES_FIELD),
        entry(lib.MONTHLY_RENT_FIELD),
        entry(lib.SECURITY_DEPOSIT_FIELD),
        entry(lib.AVAILABLE_FROM_FIELD),
    ),
    _sub(
        "Land & Plots",
        entry(lib.TOTAL_AREA_FIELD, label="Land Area"),
        entry(lib.AREA_UNIT_FIELD),
        entry(lib.LAND_TYPE_FIELD, label="Zoning"),
        entry(lib.ROAD_ACCESS_FIELD),
        entry(lib.ROAD_WIDTH_FIELD),
        entry(lib.FACING_FIELD),
    ),
    _sub(
        "Commercial Properties for Sale",
        entry(lib.LAND_TYPE_FIELD, label="Property Type", options=_COMMERCIAL_TYPES),
        entry(lib.TOTAL_AREA_FIELD),
        entry(lib.AREA_UNIT_FIELD),
        entry(lib.FURNISHING_FIELD),
        entry(lib.PARKING_FIELD),
        entry(lib.FLOOR_NUMBER_FIELD),
        entry(lib.AMENITIES_FIELD),
        entry(lib.ROAD_ACCESS_FIELD),
        entry(lib.PROPERTY_AGE_FIELD),
    ),
    _sub(
        "Commercial Properties for Rent",
        entry(lib.LAND_TYPE_FIELD, label="Property Type", options=_COMMERCIAL_TYPES),
        entry(lib.TOTAL_AREA_FIELD),
        entry(lib.AREA_UNIT_FIELD),
        entry(lib.FURNISHING_FIELD),
        entry(lib.PARKING_FIELD),
        entry(lib.FLOOR_NUMBER_FIELD),
        entry(lib.AMENITIES_FIELD),
        entry(lib.MONTHLY_RENT_FIELD),
        entry(lib.SECURITY_DEPOSIT_FIELD),
        entry(lib.AVAILABLE_FROM_FIELD),
    ),
    _sub(
        "Rooms & Flatmates",
        entry(
            lib.LAND_TYPE_FIELD,
            label="Room Type",
            options=("Single Room", "Shared Room", "Master Bedroom", "Hostel Bed"),
        ),
        entry(lib.FURNISHING_FIELD),
        entry(
            lib.AMENITIES_FIELD,
            options=("WiFi", "Kitchen", "Laundry", "Parking", "Attached Bathroom", "Hot Water"),
        ),
        entry(lib.MONTHLY_RENT_FIELD),
        entry(lib.SECURITY_DEPOSIT_FIELD),
        entry(lib.AVAILABLE_FROM_FIELD),
    ),
)
