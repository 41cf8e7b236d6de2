import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .validation import clamp_int, format_phone, parse_adr


class ServiceType(str, enum.Enum):
    FURNITURE = "furniture"
    TUBS = "tubs"
    BUNDLE = "bundle"


class PricingConstants(BaseModel):
    """Fixed price list. Not user-editable."""
    model_config = ConfigDict(frozen=True)

    furniture_price: float = 125
    tub_price: float = 300
    bundle_price: float = 375
    deposit_pct: float = Field(default=35, ge=0, le=100)


DEFAULT_PRICING = PricingConstants()


class QuoteInput(BaseModel):
    """
    Calculator inputs. Values are normalized on the way in, so a QuoteInput
    is always safe to hand to the pricing engine.
    """
    service: ServiceType = ServiceType.BUNDLE
    room_count: int = 100
    tub_count: int = 100
    casegoods_replacement_per_room: int = 6000
    tub_replacement_per_tub: int = 5680
    average_daily_rate: Optional[float] = None

    @field_validator("room_count", "tub_count", mode="before")
    @classmethod
    def clamp_quantity(cls, v):
        return clamp_int(v, minimum=1)

    @field_validator("casegoods_replacement_per_room", "tub_replacement_per_tub", mode="before")
    @classmethod
    def clamp_baseline(cls, v):
        return clamp_int(v, minimum=0)

    @field_validator("average_daily_rate", mode="before")
    @classmethod
    def normalize_adr(cls, v):
        return parse_adr(v)


class ContactInfo(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    company: str = ""

    @field_validator("name", "email", "phone", "company", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("phone")
    @classmethod
    def format_phone_number(cls, v):
        return format_phone(v)


class QuoteResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    service: ServiceType
    quantity: int
    unit_price: float
    unit_label: str
    service_label: str
    scope_text: str
    quote_total: float
    replacement_baseline: float
    savings: float
    savings_pct: float
    roi_multiple: float
    deposit: float
    remainder: float
    payback_nights: Optional[float] = None


class EmailDraft(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject: str
    body: str


# --- Request/Response schemas for the HTTP surface ---

class QuoteDocumentRequest(BaseModel):
    quote: QuoteInput = Field(default_factory=QuoteInput)
    contact: ContactInfo = Field(default_factory=ContactInfo)


class ContactCheckResponse(BaseModel):
    ok: bool
    error: Optional[str] = None
    field: Optional[str] = None


class EmailResponse(BaseModel):
    subject: str
    body: str
    mailto: str
    eml_filename: str


class BookingResponse(BaseModel):
    booking_url: str
    subject: str
    body: str
    mailto: str
    report_filename: str
