"""Electronics leaf-category override sets."""

from __future__ import annotations

from functools import partial

from adschema.domain import library as lib
from adschema.domain.overrides import entry, subcategory
from adschema.domain.types import TemplateName

_sub = partial(subcategory, TemplateName.ELECTRONICS)

ELECTRONICS_SUBCATEGORIES = (
    _sub(
        "Mobile Phones",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Apple, Samsung, OnePlus, Xiaomi"),
        entry(lib.MODEL_FIELD, placeholder="e.g., iPhone 15 Pro, Galaxy S24"),
        entry(lib.WARRANTY_FIELD),
        entry(lib.STORAGE_FIELD),
        entry(lib.RAM_FIELD),
        entry(lib.BATTERY_HEALTH_FIELD),
    ),
    _sub(
        "Tablets & Accessories",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Apple, Samsung, Huawei"),
        entry(lib.MODEL_FIELD, placeholder="e.g., iPad Pro, Galaxy Tab"),
        entry(lib.WARRANTY_FIELD),
        entry(lib.STORAGE_FIELD),
        entry(lib.RAM_FIELD),
        entry(lib.BATTERY_HEALTH_FIELD),
    ),
    _sub(
        "Laptops",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Dell, HP, Lenovo, Apple"),
        entry(lib.MODEL_FIELD, placeholder="e.g., MacBook Pro, ThinkPad X1"),
        entry(lib.WARRANTY_FIELD),
        entry(lib.PROCESSOR_FIELD),
        entry(lib.RAM_FIELD),
        entry(
            lib.STORAGE_FIELD,
            options=("128GB SSD", "256GB SSD", "512GB SSD", "1TB SSD", "1TB HDD", "2TB HDD"),
        ),
        entry(lib.GRAPHICS_FIELD),
        entry(lib.SCREEN_RESOLUTION_FIELD),
        entry(lib.BATTERY_HEALTH_FIELD),
    ),
    _sub(
        "Desktop Computers",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Dell, HP, Custom Build"),
        entry(lib.MODEL_FIELD),
        entry(lib.WARRANTY_FIELD),
        entry(lib.PROCESSOR_FIELD),
        entry(lib.RAM_FIELD),
        entry(
            lib.STORAGE_FIELD,
            options=("256GB SSD", "512GB SSD", "1TB SSD", "1TB HDD", "2TB HDD", "4TB HDD"),
        ),
        entry(lib.GRAPHICS_FIELD),
        entry(lib.SCREEN_RESOLUTION_FIELD),
    ),
    _sub(
        "TVs",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Samsung, LG, Sony, TCL"),
        entry(lib.MODEL_FIELD),
        entry(lib.WARRANTY_FIELD),
        entry(lib.SCREEN_SIZE_FIELD, placeholder="e.g., 32 inches, 55 inches, 65 inches"),
        entry(lib.SCREEN_RESOLUTION_FIELD),
        entry(lib.SMART_FEATURES_FIELD),
    ),
    _sub(
        "Cameras, Camcorders & Accessories",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Canon, Nikon, Sony, GoPro"),
        entry(lib.MODEL_FIELD, placeholder="e.g., EOS R5, A7 IV"),
        entry(lib.WARRANTY_FIELD),
        entry(
            lib.SCREEN_SIZE_FIELD,
            label="Sensor Size",
            placeholder="e.g., Full Frame, APS-C, 1 inch",
        ),
        entry(lib.MEGAPIXELS_FIELD),
    ),
    _sub(
        "Mobile & Tablet Accessories",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Anker, Spigen, Apple"),
        entry(lib.WARRANTY_FIELD),
    ),
    _sub(
        "Computer Accessories",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Logitech, Razer, Corsair"),
        entry(lib.WARRANTY_FIELD),
    ),
    _sub(
        "Audio Equipment",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Sony, Bose, JBL, Sennheiser"),
        entry(lib.MODEL_FIELD),
        entry(lib.WARRANTY_FIELD),
    ),
    _sub(
        "Gaming Consoles",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD, placeholder="e.g., Sony, Microsoft, Nintendo"),
        entry(lib.MODEL_FIELD, placeholder="e.g., PS5, Xbox Series X, Switch"),
        entry(lib.STORAGE_FIELD),
        entry(lib.WARRANTY_FIELD),
    ),
    _sub(
        "Other Electronics",
        entry(lib.CONDITION_NEW_USED),
        entry(lib.BRAND_FIELD),
        entry(lib.MODEL_FIELD),
        entry(lib.WARRANTY_FIELD),
    ),
)
