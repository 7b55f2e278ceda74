"""
Data Contracts for the Ranking Engine and Safety Validator

Defines Pydantic models for Program and UserProfile (inputs) and MatchScore /
SafetyCheck (outputs). These contracts are the boundary between the core and
the catalog, profile and presentation collaborators.
"""

from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .constants import TimeOfDay, Frequency, ProgramSource, CostFilter, SafetyStatus


# =============================================================================
# SHARED
# =============================================================================

class Coordinates(BaseModel):
    """Latitude/longitude in decimal degrees."""
    lat: float
    lng: float


# =============================================================================
# PROGRAM (catalog input)
# =============================================================================

class ProgramLocation(BaseModel):
    name: str = ""
    address: str = ""
    coordinates: Optional[Coordinates] = None


class AgeRange(BaseModel):
    min: int = 0
    max: int = 0


class Schedule(BaseModel):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    days: List[str] = Field(default_factory=list)  # e.g. ["Monday", "Wednesday"]
    time: str = ""  # e.g. "3:00 PM - 5:00 PM"
    frequency: Frequency = Frequency.WEEKLY

    model_config = ConfigDict(use_enum_values=True)


class Cost(BaseModel):
    amount: float = 0.0
    currency: str = "USD"
    free: bool = False
    scholarship: Optional[bool] = None


class Capacity(BaseModel):
    current: int = 0
    max: int = 0


class Contact(BaseModel):
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None


class Program(BaseModel):
    """
    A youth activity program supplied by the catalog.
    Records are assumed already validated upstream (min <= max, current <= max).
    """
    id: str
    title: str = ""
    description: str = ""
    organization: str = ""
    location: ProgramLocation = Field(default_factory=ProgramLocation)
    age_range: AgeRange = Field(default_factory=AgeRange)
    categories: List[str] = Field(default_factory=list)
    schedule: Schedule = Field(default_factory=Schedule)
    cost: Cost = Field(default_factory=Cost)
    capacity: Capacity = Field(default_factory=Capacity)
    requirements: List[str] = Field(default_factory=list)
    contact: Contact = Field(default_factory=Contact)
    images: List[str] = Field(default_factory=list)
    safety_rating: int = 1  # 1-5 scale
    verified: bool = False
    last_updated: Optional[datetime] = None
    source: ProgramSource = ProgramSource.MANUAL

    model_config = ConfigDict(use_enum_values=True)


# =============================================================================
# USER PROFILE (profile input)
# =============================================================================

class UserLocation(BaseModel):
    neighborhood: str = ""
    zip_code: str = ""
    coordinates: Optional[Coordinates] = None


class EmergencyContact(BaseModel):
    name: str
    phone: str
    relationship: str


class Preferences(BaseModel):
    max_distance: float = 10.0  # miles
    time_of_day: TimeOfDay = TimeOfDay.ANY
    days_available: List[str] = Field(default_factory=list)

    model_config = ConfigDict(use_enum_values=True)


class SafetySettings(BaseModel):
    require_parent_approval: bool = True
    allow_unsupervised: bool = False
    max_age_difference: int = 0  # 0 disables the age-span check


class UserProfile(BaseModel):
    """
    The requester's profile.
    Parent and emergency contacts are required for minors by the intake
    collaborator; the engine never checks them.
    """
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    age: int
    interests: List[str] = Field(default_factory=list)
    location: UserLocation = Field(default_factory=UserLocation)
    parent_email: Optional[str] = None
    emergency_contact: Optional[EmergencyContact] = None
    preferences: Preferences = Field(default_factory=Preferences)
    safety_settings: SafetySettings = Field(default_factory=SafetySettings)


# =============================================================================
# FILTERS
# =============================================================================

class ProgramFilters(BaseModel):
    """Narrowing applied to the candidate list before ranking."""
    categories: List[str] = Field(default_factory=list)
    age_appropriate_only: bool = True
    cost: CostFilter = CostFilter.ALL
    max_distance: Optional[float] = None
    time_of_day: List[TimeOfDay] = Field(default_factory=list)
    days: List[str] = Field(default_factory=list)
    min_safety_rating: int = 0  # 0 = any

    model_config = ConfigDict(use_enum_values=True)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class DimensionScore(BaseModel):
    """Individual dimension score with explanation."""
    dimension: str
    score: float = Field(ge=0.0, le=1.0)
    weight: float = Field(ge=0.0, le=1.0)
    weighted_score: float = Field(ge=0.0, le=1.0)
    explanation: str = ""


class MatchScore(BaseModel):
    """
    Ranking engine output for one (user, program) pair.
    """
    program_id: str
    score: float = Field(ge=0.0, le=1.0)
    reasons: List[str] = Field(default_factory=list)

    # Component sub-scores
    safety_score: float = Field(default=0.0, ge=0.0, le=1.0)
    interest_match: float = Field(default=0.0, ge=0.0, le=1.0)
    location_score: float = Field(default=0.0, ge=0.0, le=1.0)
    schedule_match: float = Field(default=0.0, ge=0.0, le=1.0)
    cost_match: float = Field(default=0.0, ge=0.0, le=1.0)

    age_appropriate: bool = False
    dimension_scores: List[DimensionScore] = Field(default_factory=list)


class SafetyChecks(BaseModel):
    age_appropriate: bool = False
    verified_organization: bool = False
    background_checked_staff: bool = False
    safe_location: bool = False
    appropriate_supervision: bool = False
    no_inappropriate_content: bool = False


class SafetyCheck(BaseModel):
    """
    Safety validator output for one program. Independent of any user.
    """
    program_id: str
    checks: SafetyChecks
    overall_score: float = Field(ge=0.0, le=1.0)
    flagged: bool
    review_notes: Optional[str] = None
    status: SafetyStatus = SafetyStatus.NEEDS_REVIEW

    model_config = ConfigDict(use_enum_values=True)
