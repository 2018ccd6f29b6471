"""Fixed enumerations shared by the ORM models, request schemas and filters.

Values are the stored/wire values.
"""

from __future__ import annotations

from enum import Enum


class ExperienceLevel(str, Enum):
    ENTRY_LEVEL = "entry-level"
    JUNIOR = "junior"
    MID_LEVEL = "mid-level"
    SENIOR = "senior"
    LEAD = "lead"
    PRINCIPAL = "principal"
    EXECUTIVE = "executive"


class EmploymentType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACTOR = "contractor"
    TEMPORARY = "temporary"
    INTERNSHIP = "internship"
    FREELANCE = "freelance"


class Location(str, Enum):
    COSTA_RICA = "costa-rica"
    LATAM = "latam"
    USA = "usa"
    EUROPE = "europe"
    GLOBAL = "global"


class Province(str, Enum):
    SAN_JOSE = "san-jose"
    ALAJUELA = "alajuela"
    CARTAGO = "cartago"
    HEREDIA = "heredia"
    GUANACASTE = "guanacaste"
    PUNTARENAS = "puntarenas"
    LIMON = "limon"


class WorkMode(str, Enum):
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


class JobFunction(str, Enum):
    TECHNOLOGY_ENGINEERING = "technology-engineering"
    PRODUCT_MANAGEMENT = "product-management"
    DESIGN_UX = "design-ux"
    DATA_ANALYTICS = "data-analytics"
    SALES_BUSINESS_DEVELOPMENT = "sales-business-development"
    MARKETING_COMMUNICATIONS = "marketing-communications"
    CUSTOMER_SUPPORT = "customer-support"
    OPERATIONS_LOGISTICS = "operations-logistics"
    FINANCE_ACCOUNTING = "finance-accounting"
    HUMAN_RESOURCES = "human-resources"
    LEGAL_COMPLIANCE = "legal-compliance"
    OTHER = "other"


class Language(str, Enum):
    ENGLISH = "english"
    SPANISH = "spanish"
