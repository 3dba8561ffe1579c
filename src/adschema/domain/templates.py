"""Template catalog — the seven canonical attribute schemas.

Each template is an ordered, closed list of fields; the order is the
rendering order. Fields shared by several leaf categories carry explicit
applicability tuples. ``"all"`` is reserved for attributes meaningful to
every leaf category in the template.
"""

from __future__ import annotations

from types import MappingProxyType

from pydantic import BaseModel, model_validator

from adschema.domain import library as lib
from adschema.domain.fields import AdField
from adschema.domain.types import TemplateName
from adschema.errors import UnknownTemplate


class Template(BaseModel):
    """A named, ordered collection of attribute fields."""

    model_config = {"frozen": True}

    name: TemplateName
    label: str
    icon: str
    fields: tuple[AdField, ...]

    @model_validator(mode="after")
    def _check_unique_names(self) -> Template:
        names = [f.name for f in self.fields]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"duplicate field names in template {self.name}: {dupes}")
        return self

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]


# ---------------------------------------------------------------------------
# Leaf-category groups
# ---------------------------------------------------------------------------

_PHONES_TABLETS = ("Mobile Phones", "Tablets & Accessories")
_COMPUTERS = ("Laptops", "Desktop Computers")
_CAMERAS = "Cameras, Camcorders & Accessories"

_MOTOR_VEHICLES = ("Cars", "Motorbikes", "Trucks", "Vans", "Buses")

_APARTMENTS = ("Apartments for Sale", "Apartments for Rent")
_HOUSES = ("Houses for Sale", "Houses for Rent")
_COMMERCIAL = ("Commercial Properties for Sale", "Commercial Properties for Rent")
_LAND = ("Land & Plots",)
_ROOMS = ("Rooms & Flatmates",)
_RENTALS = (
    "Apartments for Rent",
    "Houses for Rent",
    "Commercial Properties for Rent",
    "Rooms & Flatmates",
)

_CLOTHING = (
    "Shirts & T-Shirts",
    "Pants",
    "Traditional Clothing",
    "Jacket & Coat",
    "Traditional Wear",
    "Western Wear",
    "Winter Wear",
)
_WATCHES = ("Watches", "Jewellery & Watches")

_ANIMALS = ("Pets", "Farm Animals", "Other Pets & Animals")

_SERVICE_PROVIDERS = ("Servicing & Repair", "IT Services", "Professional Services")
_PHYSICAL_SERVICES = ("Gym & Fitness", "Beauty Services")
_JOB_LISTINGS = ("Full Time Jobs", "Part Time Jobs", "Internships", "Freelance Jobs")
_JOB_ROLES = (
    "Accountant",
    "Beautician",
    "Business Analyst",
    "Chef",
    "Collection & Recovery Agents",
    "Construction Worker",
    "Content Writer",
    "Counsellor",
    "Customer Service Executive",
    "Customer Support Manager",
    "Delivery Rider",
    "Designer",
    "Digital Marketing Executive",
    "Digital Marketing Manager",
    "Doctor",
    "Driver",
    "Electrician",
    "Engineer",
    "Event Planner",
    "Fire Fighter",
    "Flight Attendant",
    "Florist",
    "Gardener",
    "Garments Worker",
    "Government Jobs",
    "Hospitality Executive",
    "House Keeper",
    "HR Executive",
    "HR Manager",
    "Interior Designer",
    "Journalist",
    "Lab Assistant",
    "Maid",
    "Management Trainee",
    "Market Research Analyst",
    "Marketing Executive",
    "Marketing Manager",
    "Mechanic",
    "Medical Representative",
    "Merchandiser",
    "Nurse",
    "Office Admin",
    "Operator",
    "Pharmacist",
    "Photographer",
    "Product Sourcing Executive",
    "Production Executive",
    "Public Relations Officer",
    "Purchase Officer",
    "Quality Checker",
    "Quality Controller",
    "Sales Executive",
    "Sales Manager Field",
    "Security Guard",
    "SEO Specialist",
    "Social Media Presenter",
    "Software Engineer",
    "Supervisor",
    "Teacher",
    "Videographer",
    "Other",
)
_OVERSEAS = (
    "Bulgaria",
    "Croatia",
    "Serbia",
    "Saudi Arabia",
    "UAE",
    "Qatar",
    "Malaysia",
    "Singapore",
)

_FURNITURE = (
    "Bedroom Furniture",
    "Living Room Furniture",
    "Office & Shop Furniture",
    "Kitchen & Dining Furniture",
    "Children's Furniture",
)
_ESSENTIALS = (
    "Grocery",
    "Healthcare",
    "Other Essentials",
    "Household",
    "Baby Products",
    "Fruits & Vegetables",
    "Meat & Seafood",
)
_PERISHABLES = ("Grocery", "Healthcare", "Fruits & Vegetables", "Meat & Seafood")

# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

ELECTRONICS = Template(
    name=TemplateName.ELECTRONICS,
    label="Electronics & Gadgets",
    icon="📱💻",
    fields=(
        lib.CONDITION_NEW_USED,
        lib.BRAND_FIELD,
        lib.MODEL_FIELD,
        lib.WARRANTY_FIELD,
        lib.STORAGE_FIELD.copy_with(applies_to=_PHONES_TABLETS),
        lib.RAM_FIELD.copy_with(applies_to=(*_PHONES_TABLETS, *_COMPUTERS)),
        lib.BATTERY_HEALTH_FIELD.copy_with(applies_to=(*_PHONES_TABLETS, "Laptops")),
        lib.PROCESSOR_FIELD.copy_with(applies_to=_COMPUTERS),
        lib.GRAPHICS_FIELD.copy_with(applies_to=_COMPUTERS),
        lib.SCREEN_RESOLUTION_FIELD.copy_with(applies_to=(*_COMPUTERS, "TVs")),
        lib.SCREEN_SIZE_FIELD.copy_with(applies_to=("TVs", _CAMERAS)),
        lib.SMART_FEATURES_FIELD.copy_with(applies_to=("TVs",)),
        lib.MEGAPIXELS_FIELD.copy_with(applies_to=(_CAMERAS,)),
    ),
)

VEHICLES = Template(
    name=TemplateName.VEHICLES,
    label="Vehicles",
    icon="🚗🏍️",
    fields=(
        lib.create_condition_field(options=("Brand New", "Reconditioned", "Used")),
        lib.create_brand_field(placeholder="e.g., Toyota, Honda, Yamaha"),
        lib.create_model_field(placeholder="e.g., Corolla, City, FZ", required=True),
        lib.YEAR_FIELD,
        lib.MILEAGE_FIELD.copy_with(applies_to=_MOTOR_VEHICLES),
        lib.FUEL_TYPE_FIELD.copy_with(applies_to=(*_MOTOR_VEHICLES, "Three Wheelers")),
        lib.TRANSMISSION_FIELD.copy_with(applies_to=("Cars", "Trucks", "Vans", "Buses")),
        lib.ENGINE_CAPACITY_FIELD.copy_with(applies_to=_MOTOR_VEHICLES),
        lib.OWNERS_FIELD.copy_with(applies_to=_MOTOR_VEHICLES),
        lib.COLOR_FIELD,
        lib.REGISTRATION_YEAR_FIELD.copy_with(applies_to=_MOTOR_VEHICLES),
        lib.REGISTRATION_LOCATION_FIELD.copy_with(applies_to=_MOTOR_VEHICLES),
        lib.SEATS_FIELD.copy_with(applies_to=("Cars", "Vans")),
        lib.BODY_TYPE_FIELD.copy_with(applies_to=("Cars",)),
        lib.PARKING_SENSORS_FIELD.copy_with(applies_to=("Cars",)),
        lib.BACKUP_CAMERA_FIELD.copy_with(applies_to=("Cars",)),
        lib.BICYCLE_TYPE_FIELD.copy_with(applies_to=("Bicycles",)),
        lib.FRAME_SIZE_FIELD.copy_with(applies_to=("Bicycles",)),
    ),
)

PROPERTY = Template(
    name=TemplateName.PROPERTY,
    label="Property",
    icon="🏢🏠",
    fields=(
        lib.TOTAL_AREA_FIELD,
        lib.AREA_UNIT_FIELD,
        lib.BEDROOMS_FIELD.copy_with(applies_to=(*_APARTMENTS, *_HOUSES, *_ROOMS)),
        lib.BATHROOMS_FIELD.copy_with(applies_to=(*_APARTMENTS, *_HOUSES)),
        lib.FURNISHING_FIELD.copy_with(applies_to=(*_APARTMENTS, *_HOUSES, *_ROOMS)),
        lib.FLOOR_NUMBER_FIELD.copy_with(applies_to=_APARTMENTS),
        lib.TOTAL_FLOORS_FIELD.copy_with(applies_to=_APARTMENTS),
        lib.PARKING_FIELD.copy_with(applies_to=(*_APARTMENTS, *_HOUSES, *_COMMERCIAL)),
        lib.FACING_FIELD.copy_with(applies_to=(*_APARTMENTS, *_HOUSES)),
        lib.PROPERTY_AGE_FIELD.copy_with(applies_to=(*_APARTMENTS, *_HOUSES)),
        lib.AMENITIES_FIELD.copy_with(applies_to=(*_APARTMENTS, *_HOUSES)),
        lib.LAND_TYPE_FIELD.copy_with(applies_to=_LAND),
        lib.ROAD_ACCESS_FIELD.copy_with(applies_to=_LAND),
        lib.ROAD_WIDTH_FIELD.copy_with(applies_to=_LAND),
        lib.MONTHLY_RENT_FIELD.copy_with(applies_to=_RENTALS),
        lib.SECURITY_DEPOSIT_FIELD.copy_with(applies_to=_RENTALS),
        lib.AVAILABLE_FROM_FIELD.copy_with(applies_to=_RENTALS),
    ),
)

FASHION = Template(
    name=TemplateName.FASHION,
    label="Fashion & Apparel",
    icon="👔👗",
    fields=(
        lib.CONDITION_NEW_USED,
        lib.SIZE_FIELD.copy_with(applies_to=_CLOTHING),
        lib.create_color_field(placeholder="e.g., Black, White, Red"),
        lib.CLOTHING_TYPE_FIELD.copy_with(applies_to=_CLOTHING),
        lib.FIT_TYPE_FIELD.copy_with(
            applies_to=(
                "Shirts & T-Shirts",
                "Pants",
                "Jeans",
                "Traditional Clothing",
                "Jacket & Coat",
                "Western Wear",
            )
        ),
        lib.SLEEVE_TYPE_FIELD.copy_with(
            applies_to=(
                "Shirts & T-Shirts",
                "Traditional Clothing",
                "Traditional Wear",
                "Western Wear",
            )
        ),
        lib.FOOTWEAR_TYPE_FIELD.copy_with(applies_to=("Footwear",)),
        lib.SHOE_SIZE_FIELD.copy_with(applies_to=("Footwear",)),
        lib.WATCH_TYPE_FIELD.copy_with(applies_to=_WATCHES),
        lib.STRAP_MATERIAL_FIELD.copy_with(applies_to=_WATCHES),
    ),
)

PETS = Template(
    name=TemplateName.PETS,
    label="Pets & Animals",
    icon="🐾",
    fields=(
        lib.ANIMAL_TYPE_FIELD.copy_with(applies_to=_ANIMALS),
        lib.BREED_FIELD.copy_with(applies_to=_ANIMALS),
        lib.AGE_FIELD.copy_with(applies_to=_ANIMALS),
        lib.GENDER_FIELD.copy_with(applies_to=_ANIMALS),
        lib.VACCINATION_FIELD.copy_with(applies_to=("Pets", "Farm Animals")),
        lib.PAPERS_FIELD.copy_with(applies_to=("Pets",)),
        lib.create_color_field(
            label="Color/Coat Color",
            placeholder="e.g., Brown, Black, White",
            applies_to=("Pets", "Farm Animals"),
        ),
        lib.WEIGHT_FIELD.copy_with(applies_to=("Pets", "Farm Animals")),
        lib.TRAINED_FIELD.copy_with(applies_to=("Pets",)),
        lib.FRIENDLY_WITH_FIELD.copy_with(applies_to=("Pets",)),
        lib.PET_PRODUCT_TYPE_FIELD.copy_with(applies_to=("Pet & Animal Accessories",)),
        lib.SUITABLE_FOR_FIELD.copy_with(
            applies_to=("Pet & Animal Accessories", "Pet & Animal food")
        ),
    ),
)

SERVICES = Template(
    name=TemplateName.SERVICES,
    label="Services & Jobs",
    icon="🔧💼",
    fields=(
        lib.EXPERIENCE_FIELD.copy_with(applies_to=(*_SERVICE_PROVIDERS, *_PHYSICAL_SERVICES)),
        lib.AVAILABILITY_FIELD.copy_with(
            applies_to=(*_SERVICE_PROVIDERS, "Domestic & Daycare Services")
        ),
        lib.SERVICE_LOCATION_FIELD.copy_with(applies_to=_SERVICE_PROVIDERS),
        lib.SERVICE_LOCATION_FIELD.copy_with(
            name="physicalServiceLocation",
            options=("At Customer Location", "At Provider Location"),
            applies_to=_PHYSICAL_SERVICES,
        ),
        lib.SERVICE_LOCATION_FIELD.copy_with(
            name="massageLocation",
            required=True,
            options=("At Home", "At Massage Parlour"),
            applies_to=("Body Massage",),
        ),
        lib.LANGUAGES_FIELD.copy_with(applies_to=("Tuition", "Professional Services")),
        lib.JOB_TYPE_FIELD.copy_with(applies_to=_JOB_LISTINGS),
        lib.EXPERIENCE_REQUIRED_FIELD.copy_with(applies_to=(*_JOB_ROLES, *_JOB_LISTINGS)),
        lib.SALARY_RANGE_FIELD.copy_with(applies_to=(*_JOB_ROLES, *_JOB_LISTINGS)),
        lib.EDUCATION_REQUIRED_FIELD.copy_with(applies_to=(*_JOB_ROLES, *_JOB_LISTINGS)),
        lib.COMPANY_NAME_FIELD.copy_with(required=False, applies_to=(*_JOB_ROLES, *_JOB_LISTINGS)),
        lib.SUBJECTS_FIELD.copy_with(applies_to=("Tuition",)),
        lib.GRADE_LEVEL_FIELD.copy_with(applies_to=("Tuition",)),
        lib.MODE_OF_TEACHING_FIELD.copy_with(applies_to=("Tuition",)),
        lib.COUNTRY_FIELD.copy_with(applies_to=_OVERSEAS),
        lib.JOB_POSITION_FIELD.copy_with(applies_to=_OVERSEAS),
        lib.VISA_TYPE_FIELD.copy_with(applies_to=_OVERSEAS),
    ),
)

GENERAL = Template(
    name=TemplateName.GENERAL,
    label="General",
    icon="📦",
    fields=(
        lib.create_condition_field(required=False),
        lib.create_brand_field(placeholder="e.g., IKEA, Nike, Canon", required=False),
        lib.FURNITURE_TYPE_FIELD.copy_with(applies_to=_FURNITURE),
        lib.MATERIAL_FIELD.copy_with(applies_to=_FURNITURE),
        lib.create_color_field(
            label="Color/Finish",
            placeholder="e.g., Brown, White, Black, Walnut",
            applies_to=_FURNITURE,
        ),
        lib.DIMENSIONS_FIELD.copy_with(applies_to=_FURNITURE),
        lib.ASSEMBLY_REQUIRED_FIELD.copy_with(applies_to=_FURNITURE),
        lib.SEATING_CAPACITY_FIELD.copy_with(
            applies_to=(
                "Living Room Furniture",
                "Kitchen & Dining Furniture",
                "Office & Shop Furniture",
            )
        ),
        lib.STORAGE_AVAILABLE_FIELD.copy_with(
            applies_to=(
                "Bedroom Furniture",
                "Living Room Furniture",
                "Office & Shop Furniture",
                "Children's Furniture",
            )
        ),
        lib.STYLE_FIELD.copy_with(applies_to=_FURNITURE),
        lib.SPORT_TYPE_FIELD.copy_with(
            applies_to=("Sports", "Musical Instruments", "Fitness & Gym")
        ),
        lib.MACHINERY_TYPE_FIELD.copy_with(
            applies_to=("Industry Machinery & Tools", "Medical Equipment & Supplies")
        ),
        lib.POWER_SOURCE_FIELD.copy_with(applies_to=("Industry Machinery & Tools",)),
        lib.PRODUCT_TYPE_FIELD.copy_with(applies_to=_ESSENTIALS),
        lib.QUANTITY_FIELD.copy_with(applies_to=_ESSENTIALS),
        lib.EXPIRY_DATE_FIELD.copy_with(applies_to=_PERISHABLES),
        lib.CROP_TYPE_FIELD.copy_with(applies_to=("Crops, Seeds & Plants",)),
        lib.FARMING_TOOL_TYPE_FIELD.copy_with(applies_to=("Farming Tools & Machinery",)),
    ),
)

TEMPLATES: MappingProxyType[str, Template] = MappingProxyType(
    {
        t.name.value: t
        for t in (ELECTRONICS, VEHICLES, PROPERTY, FASHION, PETS, SERVICES, GENERAL)
    }
)


def get_template(name: str) -> Template:
    """Return the template called *name*.

    Raises:
        UnknownTemplate: if *name* is not one of the canonical identifiers.
    """
    try:
        return TEMPLATES[name]
    except KeyError:
        raise UnknownTemplate(name) from None


def list_templates() -> list[Template]:
    """All templates in canonical order."""
    return list(TEMPLATES.values())
