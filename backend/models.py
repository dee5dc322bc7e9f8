"""Domain enumerations and lookup tables shared by the services."""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class _ParsableEnum(enum.Enum):
    """Enum with case-insensitive parsing from raw form values."""

    @classmethod
    def parse(cls, value, default=None):
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return default


class Style(_ParsableEnum):
    MODERN = "modern"
    TRADITIONAL = "traditional"
    MINIMAL = "minimal"
    LUXURY = "luxury"

    @classmethod
    def parse(cls, value, default=None):
        """Unrecognized styles fall back to modern."""
        return super().parse(value, default or cls.MODERN)


class ConstructionQuality(_ParsableEnum):
    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"

    @classmethod
    def parse(cls, value, default=None):
        return super().parse(value, default or cls.STANDARD)


class ChatRole(_ParsableEnum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ContractorSpecialty(_ParsableEnum):
    GENERAL = "general"
    PLUMBER = "plumber"
    ELECTRICIAN = "electrician"
    MASON = "mason"
    CARPENTER = "carpenter"
    PAINTER = "painter"
    HVAC = "hvac"
    ROOFING = "roofing"
    ARCHITECT = "architect"
    INTERIOR = "interior"


class DesignerSpecialty(_ParsableEnum):
    INTERIOR = "interior"
    ARCHITECT = "architect"
    LANDSCAPE = "landscape"
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    KITCHEN_BATH = "kitchen-bath"
    SUSTAINABLE = "sustainable"
    LIGHTING = "lighting"
    VISUALIZATION_3D = "3d"
    SPACE_PLANNING = "space-planning"


@dataclass(frozen=True)
class SpecialtyProfile:
    """Display title, hourly rate range (PKR) and typical certifications."""
    title: str
    min_rate: int
    max_rate: int
    certifications: Tuple[str, ...]

    def guideline(self) -> str:
        certs = ", ".join(f'"{c}"' for c in self.certifications)
        return f"- {self.title}: Rs {self.min_rate}-{self.max_rate}/hour, certifications like {certs}"


CONTRACTOR_SPECIALTIES = {
    ContractorSpecialty.GENERAL: SpecialtyProfile(
        "General Contractor", 1200, 2500, ("Licensed Contractor", "PEC Registered")),
    ContractorSpecialty.PLUMBER: SpecialtyProfile(
        "Plumber", 800, 1500, ("Plumbing License", "Gas Line Certified")),
    ContractorSpecialty.ELECTRICIAN: SpecialtyProfile(
        "Electrician", 900, 1800, ("Licensed Electrician", "High Voltage Certified")),
    ContractorSpecialty.MASON: SpecialtyProfile(
        "Mason", 700, 1400, ("Masonry Expert", "Structural Work Certified")),
    ContractorSpecialty.CARPENTER: SpecialtyProfile(
        "Carpenter", 800, 1600, ("Carpentry Master", "Furniture Design Certified")),
    ContractorSpecialty.PAINTER: SpecialtyProfile(
        "Painter", 600, 1200, ("Professional Painter", "Interior Finish Specialist")),
    ContractorSpecialty.HVAC: SpecialtyProfile(
        "HVAC Specialist", 1000, 2000, ("HVAC Certified", "Refrigeration Expert")),
    ContractorSpecialty.ROOFING: SpecialtyProfile(
        "Roofing Contractor", 900, 1700, ("Roofing Specialist", "Waterproofing Expert")),
    ContractorSpecialty.ARCHITECT: SpecialtyProfile(
        "Architect", 2000, 3500, ("PEC Registered Architect", "RIBA Member")),
    ContractorSpecialty.INTERIOR: SpecialtyProfile(
        "Interior Designer", 1500, 3000, ("Certified Interior Designer", "IIDA Member")),
}

DESIGNER_SPECIALTIES = {
    DesignerSpecialty.INTERIOR: SpecialtyProfile(
        "Interior Designer", 2000, 4000,
        ("NCIDQ Certified", "Certified Interior Designer", "IIDA Member")),
    DesignerSpecialty.ARCHITECT: SpecialtyProfile(
        "Architect", 2500, 5000,
        ("PEC Registered Architect", "RIBA Member", "LEED Accredited")),
    DesignerSpecialty.LANDSCAPE: SpecialtyProfile(
        "Landscape Designer", 1800, 3500,
        ("Landscape Architecture License", "Sustainable Design Certified")),
    DesignerSpecialty.RESIDENTIAL: SpecialtyProfile(
        "Residential Designer", 1800, 3500,
        ("Residential Design Specialist", "Custom Home Expert")),
    DesignerSpecialty.COMMERCIAL: SpecialtyProfile(
        "Commercial Designer", 2200, 4500,
        ("Commercial Design Certified", "Retail Space Expert")),
    DesignerSpecialty.KITCHEN_BATH: SpecialtyProfile(
        "Kitchen & Bath Designer", 1500, 3000,
        ("NKBA Certified", "Kitchen Design Professional")),
    DesignerSpecialty.SUSTAINABLE: SpecialtyProfile(
        "Sustainable Design Specialist", 2000, 4000,
        ("LEED AP", "Green Building Certified")),
    DesignerSpecialty.LIGHTING: SpecialtyProfile(
        "Lighting Designer", 1800, 3500,
        ("Lighting Design Certified", "IES Member")),
    DesignerSpecialty.VISUALIZATION_3D: SpecialtyProfile(
        "3D Visualization Specialist", 2000, 3800,
        ("3D Rendering Expert", "CAD Certified")),
    DesignerSpecialty.SPACE_PLANNING: SpecialtyProfile(
        "Space Planning Expert", 1900, 3600,
        ("Space Planning Certified", "Ergonomics Specialist")),
}


def specialty_title(value: Optional[str], table: dict, enum_cls) -> Optional[str]:
    """Resolve a specialty key to its display title; unknown keys pass through as text."""
    if not value:
        return None
    member = enum_cls.parse(value)
    if member is None:
        return value.strip()
    return table[member].title
