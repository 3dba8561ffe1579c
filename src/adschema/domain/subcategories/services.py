"""Services, jobs, and overseas-jobs leaf-category override sets.

Service listings carry no condition or brand fields.
"""

from __future__ import annotations

from functools import partial

from adschema.domain import library as lib
from adschema.domain.overrides import entry, subcategory
from adschema.domain.types import TemplateName

_sub = partial(subcategory, TemplateName.SERVICES)

_EXPECTED_SALARY = {"label": "Expected Salary"}

SERVICES_SUBCATEGORIES = (
    _sub(
        "Tuition",
        entry(lib.SUBJECTS_FIELD),
        entry(lib.GRADE_LEVEL_FIELD),
        entry(lib.MODE_OF_TEACHING_FIELD),
        entry(lib.EXPERIENCE_FIELD),
        entry(lib.LANGUAGES_FIELD),
        entry(lib.AVAILABILITY_FIELD),
    ),
    _sub(
        "Servicing & Repair",
        entry(lib.EXPERIENCE_FIELD),
        entry(lib.AVAILABILITY_FIELD),
        entry(lib.SERVICE_LOCATION_FIELD),
    ),
    _sub(
        "IT Services",
        entry(lib.EXPERIENCE_FIELD),
        entry(lib.AVAILABILITY_FIELD),
        entry(
            lib.SERVICE_LOCATION_FIELD,
            options=("At Customer Location", "At Provider Location", "Remote/Online"),
        ),
        entry(lib.LANGUAGES_FIELD),
    ),
    _sub(
        "Professional Services",
        entry(lib.EXPERIENCE_FIELD),
        entry(lib.AVAILABILITY_FIELD),
        entry(lib.SERVICE_LOCATION_FIELD),
        entry(lib.LANGUAGES_FIELD),
    ),
    _sub(
        "Gym & Fitness",
        entry(lib.EXPERIENCE_FIELD),
        entry(lib.AVAILABILITY_FIELD),
        entry(
            lib.SERVICE_LOCATION_FIELD,
            label="Location",
            options=("At Customer Location", "At Provider Location"),
        ),
    ),
    _sub(
        "Beauty Services",
        entry(lib.EXPERIENCE_FIELD),
        entry(lib.AVAILABILITY_FIELD),
        entry(
            lib.SERVICE_LOCATION_FIELD,
            label="Location",
            options=("At Customer Location", "At Salon/Parlour"),
        ),
    ),
    _sub(
        "Body Massage",
        entry(lib.EXPERIENCE_FIELD),
        entry(lib.AVAILABILITY_FIELD),
        entry(
            lib.SERVICE_LOCATION_FIELD,
            label="Location",
            options=("At Home", "At Massage Parlour"),
            required=True,
        ),
    ),
    _sub(
        "Domestic & Daycare Services",
        entry(lib.EXPERIENCE_FIELD),
        entry(lib.AVAILABILITY_FIELD),
        entry(lib.LANGUAGES_FIELD),
    ),
    # Jobs
    _sub(
        "Full Time Jobs",
        entry(lib.COMPANY_NAME_FIELD),
        entry(lib.JOB_TYPE_FIELD, options=("Full Time",)),
        entry(lib.EXPERIENCE_REQUIRED_FIELD),
        entry(lib.EDUCATION_REQUIRED_FIELD),
        entry(lib.SALARY_RANGE_FIELD),
    ),
    _sub(
        "Part Time Jobs",
        entry(lib.COMPANY_NAME_FIELD),
        entry(lib.JOB_TYPE_FIELD, options=("Part Time",)),
        entry(lib.EXPERIENCE_REQUIRED_FIELD),
        entry(lib.EDUCATION_REQUIRED_FIELD),
        entry(lib.SALARY_RANGE_FIELD),
    ),
    _sub(
        "Internships",
        entry(lib.COMPANY_NAME_FIELD),
        entry(lib.JOB_TYPE_FIELD, options=("Internship",)),
        entry(lib.EDUCATION_REQUIRED_FIELD),
        entry(
            lib.SALARY_RANGE_FIELD,
            label="Stipend",
            options=("Unpaid", "Below 10,000", "10,000-20,000", "20,000-30,000", "Above 30,000"),
        ),
    ),
    _sub(
        "Freelance Jobs",
        entry(lib.COMPANY_NAME_FIELD, required=False),
        entry(lib.JOB_TYPE_FIELD, options=("Freelance", "Contract")),
        entry(lib.EXPERIENCE_REQUIRED_FIELD),
        entry(lib.SALARY_RANGE_FIELD, label="Budget"),
    ),
    # Overseas jobs
    _sub(
        "Middle East Jobs",
        entry(
            lib.COUNTRY_FIELD,
            options=("Saudi Arabia", "UAE", "Qatar", "Kuwait", "Oman", "Bahrain"),
        ),
        entry(lib.JOB_POSITION_FIELD),
        entry(lib.VISA_TYPE_FIELD),
        entry(lib.EXPERIENCE_REQUIRED_FIELD),
        entry(lib.SALARY_RANGE_FIELD, **_EXPECTED_SALARY),
    ),
    _sub(
        "Asia Jobs",
        entry(
            lib.COUNTRY_FIELD,
            options=("Malaysia", "Singapore", "Japan", "South Korea", "Hong Kong", "Taiwan"),
        ),
        entry(lib.JOB_POSITION_FIELD),
        entry(lib.VISA_TYPE_FIELD),
        entry(lib.EXPERIENCE_REQUIRED_FIELD),
        entry(lib.SALARY_RANGE_FIELD, **_EXPECTED_SALARY),
    ),
    _sub(
        "Europe Jobs",
        entry(
            lib.COUNTRY_FIELD,
            options=("Bulgaria", "Croatia", "Serbia", "Poland", "Romania", "Portugal", "Malta"),
        ),
        entry(lib.JOB_POSITION_FIELD),
        entry(lib.VISA_TYPE_FIELD),
        entry(lib.EXPERIENCE_REQUIRED_FIELD),
        entry(lib.SALARY_RANGE_FIELD, **_EXPECTED_SALARY),
    ),
)
