"""General-template leaf-category override sets.

Covers Home & Living, Hobbies/Sports & Kids, Business & Industry,
Essentials, and Agriculture. Business listings use trade brand
placeholders rather than consumer ones.
"""

from __future__ import annotations

from functools import partial

from adschema.domain import library as lib
from adschema.domain.overrides import entry, subcategory
from adschema.domain.types import TemplateName

_sub = partial(subcategory, TemplateName.GENERAL)

_SEALED = ("Brand New", "Sealed")
_FINISH = {"label": "Color/Finish"}

GENERAL_SUBCATEGORIES = (
    # Home & Living
    _sub(
        "Bedroom Furniture",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., IKEA, Ashley, Local Carpenter"),
        entry(
            lib.FURNITURE_TYPE_FIELD,
            options=("Bed", "Wardrobe", "Dresser", "Nightstand", "Mattress"),
        ),
        entry(lib.MATERIAL_FIELD),
        entry(lib.COLOR_FIELD, **_FINISH),
        entry(lib.DIMENSIONS_FIELD),
        entry(lib.ASSEMBLY_REQUIRED_FIELD),
        entry(lib.STORAGE_AVAILABLE_FIELD),
        entry(lib.STYLE_FIELD),
    ),
    _sub(
        "Living Room Furniture",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., IKEA, La-Z-Boy, Local Maker"),
        entry(
            lib.FURNITURE_TYPE_FIELD,
            options=("Sofa", "Coffee Table", "TV Stand", "Shelf", "Recliner", "Ottoman"),
        ),
        entry(lib.MATERIAL_FIELD),
        entry(lib.COLOR_FIELD, **_FINISH),
        entry(lib.DIMENSIONS_FIELD),
        entry(lib.SEATING_CAPACITY_FIELD),
        entry(lib.ASSEMBLY_REQUIRED_FIELD),
        entry(lib.STYLE_FIELD),
    ),
    _sub(
        "Kitchen & Dining Furniture",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., IKEA, Local Carpenter"),
        entry(
            lib.FURNITURE_TYPE_FIELD,
            options=("Dining Table", "Dining Chair", "Cabinet", "Shelf", "Bar Stool"),
        ),
        entry(lib.MATERIAL_FIELD),
        entry(lib.COLOR_FIELD, **_FINISH),
        entry(lib.DIMENSIONS_FIELD),
        entry(lib.SEATING_CAPACITY_FIELD),
        entry(lib.ASSEMBLY_REQUIRED_FIELD),
    ),
    _sub(
        "Office & Shop Furniture",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Herman Miller, Steelcase, IKEA"),
        entry(
            lib.FURNITURE_TYPE_FIELD,
            options=(
                "Desk",
                "Office Chair",
                "Filing Cabinet",
                "Bookshelf",
                "Conference Table",
                "Reception Desk",
            ),
        ),
        entry(lib.MATERIAL_FIELD),
        entry(lib.COLOR_FIELD, **_FINISH),
        entry(lib.DIMENSIONS_FIELD),
        entry(lib.ASSEMBLY_REQUIRED_FIELD),
    ),
    _sub(
        "Children's Furniture",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., IKEA, Fisher-Price"),
        entry(
            lib.FURNITURE_TYPE_FIELD,
            options=(
                "Crib",
                "Kids Bed",
                "Study Table",
                "Toy Storage",
                "High Chair",
                "Changing Table",
            ),
        ),
        entry(lib.MATERIAL_FIELD),
        entry(lib.COLOR_FIELD),
        entry(lib.DIMENSIONS_FIELD),
        entry(lib.ASSEMBLY_REQUIRED_FIELD),
    ),
    _sub(
        "Home Decor",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, required=False),
        entry(lib.MATERIAL_FIELD),
        entry(lib.COLOR_FIELD),
        entry(lib.STYLE_FIELD),
    ),
    _sub(
        "Kitchen Appliances",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Philips, Prestige, Bajaj"),
    ),
    _sub(
        "Home Appliances",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., LG, Samsung, Whirlpool"),
    ),
    # Hobbies, Sports & Kids
    _sub(
        "Sports",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Nike, Adidas, Yonex, Wilson"),
        entry(lib.SPORT_TYPE_FIELD),
    ),
    _sub(
        "Fitness & Gym",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Bowflex, NordicTrack, Decathlon"),
        entry(
            lib.SPORT_TYPE_FIELD,
            label="Equipment Type",
            placeholder="e.g., Treadmill, Dumbbells, Yoga Mat",
        ),
    ),
    _sub(
        "Musical Instruments",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Yamaha, Gibson, Fender, Roland"),
        entry(lib.INSTRUMENT_TYPE_FIELD),
    ),
    _sub(
        "Kids Items",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Fisher-Price, Lego, Hot Wheels"),
    ),
    _sub(
        "Books & Stationery",
        entry(lib.CONDITION_NEW_USED, options=("Brand New", "Like New", "Good", "Fair")),
        entry(lib.BRAND_FIELD, required=False, placeholder="e.g., Publisher name"),
    ),
    # Business & Industry
    _sub(
        "Industry Machinery & Tools",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Caterpillar, John Deere, Bosch, Makita"),
        entry(lib.MACHINERY_TYPE_FIELD),
        entry(lib.POWER_SOURCE_FIELD),
    ),
    _sub(
        "Medical Equipment & Supplies",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Philips, GE Healthcare, Siemens"),
        entry(
            lib.MACHINERY_TYPE_FIELD,
            options=("Diagnostic", "Surgical", "Monitoring", "Laboratory", "Therapy"),
        ),
    ),
    _sub(
        "Office Equipment",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., HP, Canon, Xerox, Brother"),
    ),
    _sub(
        "Raw Materials",
        entry(lib.CONDITION_NEW_USED, options=("New",)),
        entry(lib.QUANTITY_FIELD),
    ),
    # Essentials
    _sub(
        "Grocery",
        entry(lib.CONDITION_NEW_USED, options=_SEALED),
        entry(lib.BRAND_FIELD, required=False),
        entry(
            lib.PRODUCT_TYPE_FIELD,
            options=("Food Item", "Beverage", "Snacks", "Dairy", "Grains"),
        ),
        entry(lib.QUANTITY_FIELD),
        entry(lib.EXPIRY_DATE_FIELD),
    ),
    _sub(
        "Healthcare",
        entry(lib.CONDITION_NEW_USED, options=_SEALED),
        entry(lib.BRAND_FIELD, required=False),
        entry(
            lib.PRODUCT_TYPE_FIELD,
            options=("Medicine", "First Aid", "Medical Device", "Supplements"),
        ),
        entry(lib.QUANTITY_FIELD),
        entry(lib.EXPIRY_DATE_FIELD),
    ),
    _sub(
        "Baby Products",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Pampers, Johnson & Johnson, Huggies"),
        entry(
            lib.PRODUCT_TYPE_FIELD,
            options=("Diapers", "Baby Food", "Baby Care", "Feeding", "Baby Clothes"),
        ),
        entry(lib.QUANTITY_FIELD),
    ),
    _sub(
        "Household",
        entry(lib.CONDITION_NEW_USED, options=_SEALED),
        entry(lib.BRAND_FIELD, required=False),
        entry(
            lib.PRODUCT_TYPE_FIELD,
            options=("Cleaning", "Laundry", "Storage", "Kitchen Items"),
        ),
        entry(lib.QUANTITY_FIELD),
    ),
    # Agriculture
    _sub(
        "Crops, Seeds & Plants",
        entry(lib.CROP_TYPE_FIELD),
        entry(lib.QUANTITY_FIELD),
    ),
    _sub(
        "Farming Tools & Machinery",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., John Deere, Mahindra, Kubota"),
        entry(lib.FARMING_TOOL_TYPE_FIELD),
        entry(lib.POWER_SOURCE_FIELD),
    ),
    _sub(
        "Fertilizers & Pesticides",
        entry(lib.CONDITION_NEW_USED, options=_SEALED),
        entry(lib.BRAND_FIELD, required=False),
        entry(lib.QUANTITY_FIELD),
        entry(lib.EXPIRY_DATE_FIELD),
    ),
    _sub(
        "Livestock Feed",
        entry(lib.CONDITION_NEW_USED, options=_SEALED),
        entry(lib.BRAND_FIELD, required=False),
        entry(lib.QUANTITY_FIELD),
        entry(lib.EXPIRY_DATE_FIELD),
    ),
)
