"""Field library — reusable base fields and field factories.

Base fields apply to every category (``applies_to="all"``). Templates narrow
them with :meth:`copy_with`, and subcategory overrides reuse them directly,
so a semantic field is declared exactly once.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from adschema.domain.fields import (
    ALL,
    AppliesTo,
    CheckboxField,
    DateField,
    MultiselectField,
    NumberField,
    SelectField,
    TextField,
)

# Newest model year a seller can list; next year's models ship early.
MAX_MODEL_YEAR = date.today().year + 1

# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def create_condition_field(
    options: Sequence[str] = ("Brand New", "Used"),
    applies_to: AppliesTo = ALL,
    required: bool = True,
) -> SelectField:
    return SelectField(
        name="condition",
        label="Condition",
        required=required,
        options=tuple(options),
        applies_to=applies_to,
    )


def create_brand_field(
    placeholder: str = "e.g., Apple, Samsung, Dell, HP",
    applies_to: AppliesTo = ALL,
    required: bool = True,
) -> TextField:
    return TextField(
        name="brand",
        label="Brand",
        required=required,
        placeholder=placeholder,
        applies_to=applies_to,
    )


def create_model_field(
    placeholder: str = "e.g., iPhone 15 Pro, Galaxy S23",
    applies_to: AppliesTo = ALL,
    required: bool = False,
) -> TextField:
    return TextField(
        name="model",
        label="Model",
        required=required,
        placeholder=placeholder,
        applies_to=applies_to,
    )


def create_color_field(
    label: str = "Color",
    placeholder: str = "e.g., White, Black, Red",
    applies_to: AppliesTo = ALL,
    required: bool = False,
) -> TextField:
    return TextField(
        name="color",
        label=label,
        required=required,
        placeholder=placeholder,
        applies_to=applies_to,
    )


def create_warranty_field(
    applies_to: AppliesTo = ALL,
    required: bool = False,
) -> SelectField:
    return SelectField(
        name="warranty",
        label="Warranty",
        required=required,
        options=(
            "No Warranty",
            "Under Warranty (< 6 months)",
            "Under Warranty (6-12 months)",
            "Under Warranty (1+ years)",
        ),
        applies_to=applies_to,
    )


# ---------------------------------------------------------------------------
# Shared product fields
# ---------------------------------------------------------------------------

CONDITION_NEW_USED = create_condition_field()
BRAND_FIELD = create_brand_field()
MODEL_FIELD = create_model_field()
COLOR_FIELD = create_color_field()
WARRANTY_FIELD = create_warranty_field()

# ---------------------------------------------------------------------------
# Electronics
# ---------------------------------------------------------------------------

STORAGE_FIELD = SelectField(
    name="storage",
    label="Storage Capacity",
    required=True,
    options=("16GB", "32GB", "64GB", "128GB", "256GB", "512GB", "1TB"),
)
RAM_FIELD = SelectField(
    name="ram",
    label="RAM",
    required=True,
    options=("2GB", "3GB", "4GB", "6GB", "8GB", "12GB", "16GB", "32GB", "64GB"),
)
BATTERY_HEALTH_FIELD = SelectField(
    name="batteryHealth",
    label="Battery Health",
    options=("100%", "95-99%", "90-94%", "85-89%", "80-84%", "Below 80%"),
)
PROCESSOR_FIELD = TextField(
    name="processor",
    label="Processor",
    required=True,
    placeholder="e.g., Intel Core i5 12th Gen, AMD Ryzen 7",
)
GRAPHICS_FIELD = TextField(
    name="graphics",
    label="Graphics Card",
    placeholder="e.g., NVIDIA RTX 3060, Integrated",
)
SCREEN_RESOLUTION_FIELD = SelectField(
    name="screenResolution",
    label="Screen Resolution",
    options=("HD (1366x768)", "Full HD (1920x1080)", "2K", "4K", "Retina"),
)
SCREEN_SIZE_FIELD = TextField(
    name="screenSize",
    label="Screen/Sensor Size",
    required=True,
    placeholder="e.g., 55 inches, 24MP",
)
SMART_FEATURES_FIELD = MultiselectField(
    name="smartFeatures",
    label="Smart Features",
    options=("Smart TV", "4K", "HDR", "Android TV", "WebOS", "Voice Control"),
)
MEGAPIXELS_FIELD = NumberField(
    name="megapixels",
    label="Megapixels",
    placeholder="e.g., 24, 48, 108",
    min=0,
)

# ---------------------------------------------------------------------------
# Vehicles
# ---------------------------------------------------------------------------

YEAR_FIELD = NumberField(
    name="year",
    label="Year of Manufacture",
    required=True,
    placeholder="e.g., 2020",
    min=1980,
    max=MAX_MODEL_YEAR,
)
MILEAGE_FIELD = NumberField(
    name="mileage",
    label="Mileage/Kilometers Driven",
    placeholder="in km",
    min=0,
)
FUEL_TYPE_FIELD = SelectField(
    name="fuelType",
    label="Fuel Type",
    required=True,
    options=("Petrol", "Diesel", "Electric", "Hybrid", "CNG", "LPG"),
)
TRANSMISSION_FIELD = SelectField(
    name="transmission",
    label="Transmission",
    required=True,
    options=("Manual", "Automatic", "Semi-Automatic"),
)
ENGINE_CAPACITY_FIELD = NumberField(
    name="engineCapacity",
    label="Engine Capacity (cc)",
    placeholder="e.g., 1500",
    min=0,
)
OWNERS_FIELD = SelectField(
    name="owners",
    label="Number of Owners",
    options=("1st Owner", "2nd Owner", "3rd Owner", "4th Owner or More"),
)
REGISTRATION_YEAR_FIELD = NumberField(
    name="registrationYear",
    label="Registration Year",
    min=1980,
    max=MAX_MODEL_YEAR,
)
REGISTRATION_LOCATION_FIELD = TextField(
    name="registrationLocation",
    label="Registration Location",
    placeholder="e.g., Bagmati, Kathmandu",
)
SEATS_FIELD = SelectField(name="seats", label="Number of Seats", options=("2", "4", "5", "7", "8+"))
BODY_TYPE_FIELD = SelectField(
    name="bodyType",
    label="Body Type",
    options=("Sedan", "SUV", "Hatchback", "Coupe", "Convertible", "Pickup", "Van"),
)
PARKING_SENSORS_FIELD = CheckboxField(name="parkingSensors", label="Parking Sensors")
BACKUP_CAMERA_FIELD = CheckboxField(name="backupCamera", label="Backup Camera")
BICYCLE_TYPE_FIELD = SelectField(
    name="bicycleType",
    label="Bicycle Type",
    options=("Mountain Bike", "Road Bike", "Hybrid", "Electric", "Kids Bike"),
)
FRAME_SIZE_FIELD = TextField(
    name="frameSize",
    label="Frame Size",
    placeholder='e.g., Medium, 27.5"',
)

# ---------------------------------------------------------------------------
# Property
# ---------------------------------------------------------------------------

TOTAL_AREA_FIELD = NumberField(
    name="totalArea",
    label="Total Area",
    required=True,
    placeholder="Enter area",
    min=0,
)
AREA_UNIT_FIELD = SelectField(
    name="areaUnit",
    label="Area Unit",
    required=True,
    options=("sq ft", "aana", "ropani", "sq meter"),
)
BEDROOMS_FIELD = SelectField(
    name="bedrooms",
    label="Bedrooms",
    required=True,
    options=("Studio", "1", "2", "3", "4", "5", "6+"),
)
BATHROOMS_FIELD = SelectField(
    name="bathrooms",
    label="Bathrooms",
    required=True,
    options=("1", "2", "3", "4", "5+"),
)
FURNISHING_FIELD = SelectField(
    name="furnishing",
    label="Furnishing Status",
    options=("Fully Furnished", "Semi Furnished", "Unfurnished"),
)
PARKING_FIELD = SelectField(
    name="parking",
    label="Number of Parking Spaces",
    options=("None", "1", "2", "3", "4+"),
)
FLOOR_NUMBER_FIELD = NumberField(name="floorNumber", label="Floor Number", placeholder="e.g., 5")
TOTAL_FLOORS_FIELD = NumberField(
    name="totalFloors",
    label="Total Floors in Building",
    placeholder="e.g., 12",
    min=1,
)
FACING_FIELD = SelectField(
    name="facing",
    label="Facing Direction",
    options=(
        "North",
        "South",
        "East",
        "West",
        "North-East",
        "North-West",
        "South-East",
        "South-West",
    ),
)
LAND_TYPE_FIELD = SelectField(
    name="landType",
    label="Land Type",
    options=("Residential", "Commercial", "Agricultural", "Industrial", "Mixed Use"),
)
PROPERTY_AGE_FIELD = SelectField(
    name="propertyAge",
    label="Property Age",
    options=(
        "Under Construction",
        "0-1 years",
        "1-5 years",
        "5-10 years",
        "10-20 years",
        "20+ years",
    ),
)
AMENITIES_FIELD = MultiselectField(
    name="amenities",
    label="Amenities",
    options=(
        "Lift/Elevator",
        "Power Backup",
        "Water Supply",
        "Security/Gated",
        "Gym",
        "Swimming Pool",
        "Garden",
        "Playground",
        "Club House",
        "Visitor Parking",
    ),
)
ROAD_ACCESS_FIELD = SelectField(
    name="roadAccess",
    label="Road Access",
    options=("Paved Road", "Graveled Road", "Dirt Road", "No Direct Access"),
)
ROAD_WIDTH_FIELD = NumberField(name="roadWidth", label="Road Width", placeholder="in feet", min=0)
MONTHLY_RENT_FIELD = NumberField(
    name="monthlyRent",
    label="Monthly Rent",
    required=True,
    placeholder="in NPR",
    min=0,
)
SECURITY_DEPOSIT_FIELD = NumberField(
    name="securityDeposit",
    label="Security Deposit",
    placeholder="in NPR",
    min=0,
)
AVAILABLE_FROM_FIELD = SelectField(
    name="availableFrom",
    label="Available From",
    options=("Immediately", "15 days", "1 month", "2 months", "3 months"),
)

# ---------------------------------------------------------------------------
# Fashion
# ---------------------------------------------------------------------------

SIZE_FIELD = SelectField(
    name="size",
    label="Size",
    required=True,
    options=("XS", "S", "M", "L", "XL", "XXL", "XXXL", "Free Size"),
)
CLOTHING_TYPE_FIELD = SelectField(
    name="clothingType",
    label="Clothing Type",
    required=True,
    options=(
        "Shirt",
        "T-Shirt",
        "Pants",
        "Jeans",
        "Dress",
        "Saree",
        "Kurta",
        "Jacket",
        "Coat",
        "Sweater",
        "Skirt",
        "Shorts",
    ),
)
FIT_TYPE_FIELD = SelectField(
    name="fitType",
    label="Fit Type",
    options=("Regular Fit", "Slim Fit", "Loose Fit", "Skinny Fit"),
)
SLEEVE_TYPE_FIELD = SelectField(
    name="sleeveType",
    label="Sleeve Type",
    options=("Full Sleeve", "Half Sleeve", "Sleeveless", "3/4 Sleeve"),
)
FOOTWEAR_TYPE_FIELD = SelectField(
    name="footwearType",
    label="Footwear Type",
    required=True,
    options=(
        "Sneakers",
        "Formal Shoes",
        "Sandals",
        "Slippers",
        "Boots",
        "Heels",
        "Flats",
        "Sports Shoes",
    ),
)
SHOE_SIZE_FIELD = NumberField(
    name="shoeSize",
    label="Shoe Size",
    required=True,
    placeholder="e.g., 38, 40, 42",
    min=32,
    max=45,
)
WATCH_TYPE_FIELD = SelectField(
    name="watchType",
    label="Watch Type",
    options=("Analog", "Digital", "Smart Watch", "Chronograph"),
)
STRAP_MATERIAL_FIELD = SelectField(
    name="strapMaterial",
    label="Strap Material",
    options=("Leather", "Metal", "Rubber", "Fabric"),
)

# ---------------------------------------------------------------------------
# Pets & animals
# ---------------------------------------------------------------------------

ANIMAL_TYPE_FIELD = SelectField(
    name="animalType",
    label="Animal Type",
    required=True,
    options=(
        "Dog",
        "Cat",
        "Bird",
        "Fish",
        "Rabbit",
        "Hamster",
        "Guinea Pig",
        "Cow",
        "Buffalo",
        "Goat",
        "Chicken",
        "Duck",
        "Other",
    ),
)
BREED_FIELD = TextField(
    name="breed",
    label="Breed",
    placeholder="e.g., Golden Retriever, Persian Cat",
)
AGE_FIELD = SelectField(
    name="age",
    label="Age",
    required=True,
    options=("0-3 months", "3-6 months", "6-12 months", "1-2 years", "2-5 years", "5+ years"),
)
GENDER_FIELD = SelectField(name="gender", label="Gender", options=("Male", "Female", "Unknown"))
VACCINATION_FIELD = SelectField(
    name="vaccination",
    label="Vaccination Status",
    required=True,
    options=("Fully Vaccinated", "Partially Vaccinated", "Not Vaccinated"),
)
PAPERS_FIELD = SelectField(
    name="papers",
    label="Pet Papers/Documents",
    options=("Yes - All Papers", "Some Papers", "No Papers"),
)
WEIGHT_FIELD = NumberField(name="weight", label="Weight", placeholder="in kg", min=0)
TRAINED_FIELD = SelectField(
    name="trained",
    label="Trained",
    options=("Fully Trained", "Partially Trained", "Not Trained"),
)
FRIENDLY_WITH_FIELD = MultiselectField(
    name="friendlyWith",
    label="Friendly With",
    options=("Children", "Other Dogs", "Cats", "Strangers"),
)
PET_PRODUCT_TYPE_FIELD = SelectField(
    name="productType",
    label="Product Type",
    required=True,
    options=("Food", "Toy", "Cage", "Leash", "Collar", "Grooming", "Medicine", "Bedding"),
)
SUITABLE_FOR_FIELD = SelectField(
    name="suitableFor",
    label="Suitable For",
    options=("Dogs", "Cats", "Birds", "Fish", "All Pets"),
)

# ---------------------------------------------------------------------------
# Services & jobs
# ---------------------------------------------------------------------------

EXPERIENCE_FIELD = SelectField(
    name="experience",
    label="Experience",
    options=("Less than 1 year", "1-3 years", "3-5 years", "5-10 years", "10+ years"),
)
AVAILABILITY_FIELD = MultiselectField(
    name="availability",
    label="Availability",
    options=("Weekdays", "Weekends", "Evenings", "24/7", "On-Call"),
)
SERVICE_LOCATION_FIELD = SelectField(
    name="serviceLocation",
    label="Service Location",
    options=("At Customer Location", "At Provider Location", "Remote/Online"),
)
LANGUAGES_FIELD = MultiselectField(
    name="languages",
    label="Languages Known",
    options=("English", "Nepali", "Hindi", "Newari", "Other"),
)
EXPERIENCE_REQUIRED_FIELD = SelectField(
    name="experienceRequired",
    label="Experience Required",
    options=("Fresher", "0-1 years", "1-3 years", "3-5 years", "5-10 years", "10+ years"),
)
SALARY_RANGE_FIELD = SelectField(
    name="salaryRange",
    label="Salary Range",
    options=(
        "Below 20,000",
        "20,000-30,000",
        "30,000-50,000",
        "50,000-1,00,000",
        "Above 1,00,000",
        "Negotiable",
    ),
)
EDUCATION_REQUIRED_FIELD = SelectField(
    name="educationRequired",
    label="Education Required",
    options=("No Formal Education", "SLC/SEE", "+2", "Bachelor's", "Master's", "PhD"),
)
COMPANY_NAME_FIELD = TextField(
    name="companyName",
    label="Company Name",
    required=True,
    placeholder="Enter company name",
)
JOB_TYPE_FIELD = SelectField(
    name="jobType",
    label="Job Type",
    required=True,
    options=("Full Time", "Part Time", "Internship", "Freelance", "Contract"),
)
SUBJECTS_FIELD = MultiselectField(
    name="subjects",
    label="Subject",
    required=True,
    options=(
        "Math",
        "Science",
        "English",
        "Nepali",
        "Social Studies",
        "Computer",
        "Accounts",
        "All Subjects",
    ),
)
GRADE_LEVEL_FIELD = MultiselectField(
    name="gradeLevel",
    label="Grade/Level",
    required=True,
    options=("Primary (1-5)", "Secondary (6-10)", "+2/Intermediate", "Bachelor", "Master"),
)
MODE_OF_TEACHING_FIELD = SelectField(
    name="modeOfTeaching",
    label="Mode of Teaching",
    options=("Home Tuition", "Online", "At Institute", "Group Class"),
)
COUNTRY_FIELD = SelectField(
    name="country",
    label="Country",
    required=True,
    options=(
        "Bulgaria",
        "Croatia",
        "Serbia",
        "Saudi Arabia",
        "UAE",
        "Qatar",
        "Malaysia",
        "Singapore",
        "Japan",
        "South Korea",
    ),
)
JOB_POSITION_FIELD = TextField(
    name="jobPosition",
    label="Job Position",
    required=True,
    placeholder="e.g., Construction Worker, Chef, Driver",
)
VISA_TYPE_FIELD = SelectField(
    name="visaType",
    label="Visa Type",
    options=("Work Visa", "Employment Visa", "Sponsored"),
)

# ---------------------------------------------------------------------------
# General goods (home, hobbies, business, essentials, agriculture)
# ---------------------------------------------------------------------------

FURNITURE_TYPE_FIELD = SelectField(
    name="furnitureType",
    label="Furniture Type",
    required=True,
    options=(
        "Bed",
        "Sofa",
        "Table",
        "Chair",
        "Wardrobe",
        "Shelf",
        "Desk",
        "Cabinet",
        "Dining Set",
        "Other",
    ),
)
MATERIAL_FIELD = SelectField(
    name="material",
    label="Material",
    options=("Wood", "Metal", "Plastic", "Glass", "Leather", "Fabric", "Mixed Materials"),
)
DIMENSIONS_FIELD = TextField(
    name="dimensions",
    label="Dimensions (L × W × H)",
    placeholder="e.g., 200cm × 100cm × 80cm",
)
ASSEMBLY_REQUIRED_FIELD = SelectField(
    name="assemblyRequired",
    label="Assembly Required",
    options=("Yes - Assembly Required", "No - Ready to Use", "Partial Assembly"),
)
SEATING_CAPACITY_FIELD = SelectField(
    name="seatingCapacity",
    label="Seating Capacity",
    options=("1 Person", "2-3 People", "4-6 People", "6-8 People", "8+ People"),
)
STORAGE_AVAILABLE_FIELD = SelectField(
    name="storage",
    label="Storage Available",
    options=("Yes", "No"),
)
STYLE_FIELD = SelectField(
    name="style",
    label="Style",
    options=(
        "Modern",
        "Traditional",
        "Vintage",
        "Minimalist",
        "Contemporary",
        "Rustic",
        "Industrial",
    ),
)
SPORT_TYPE_FIELD = TextField(
    name="sportType",
    label="Sport/Instrument Type",
    placeholder="e.g., Cricket, Football, Guitar",
)
INSTRUMENT_TYPE_FIELD = TextField(
    name="instrumentType",
    label="Instrument Type",
    placeholder="e.g., Guitar, Keyboard, Drums, Madal",
)
MACHINERY_TYPE_FIELD = SelectField(
    name="machineryType",
    label="Machinery Type",
    required=True,
    options=(
        "Construction",
        "Manufacturing",
        "Agricultural",
        "Office Equipment",
        "Medical Equipment",
    ),
)
POWER_SOURCE_FIELD = SelectField(
    name="powerSource",
    label="Power Source",
    options=("Electric", "Manual", "Diesel", "Petrol", "Battery"),
)
PRODUCT_TYPE_FIELD = SelectField(
    name="productType",
    label="Product Type",
    required=True,
    options=("Food Item", "Household Item", "Baby Product", "Healthcare"),
)
QUANTITY_FIELD = NumberField(
    name="quantity",
    label="Quantity Available",
    placeholder="Enter quantity",
    min=0,
)
EXPIRY_DATE_FIELD = DateField(name="expiryDate", label="Expiry Date")
CROP_TYPE_FIELD = TextField(
    name="cropType",
    label="Crop/Plant Type",
    required=True,
    placeholder="e.g., Rice, Wheat, Tomato",
)
FARMING_TOOL_TYPE_FIELD = SelectField(
    name="farmingToolType",
    label="Farming Tool Type",
    options=("Tractor", "Plough", "Harvester", "Sprayer", "Hand Tool"),
)
