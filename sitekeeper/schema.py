"""Validation rules for website form data and stored records."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, Literal, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from .models import (
    BILLING_CYCLES,
    ArticleSpecs,
    FreemiumPricing,
    FreePricing,
    Offers,
    PaidPricing,
    Pricing,
    SeoRequirements,
    Website,
    WebsiteFormData,
    WordCountRange,
)

NonEmptyStr = Annotated[str, Field(min_length=1)]
NonEmptyList = Annotated[list[NonEmptyStr], Field(min_length=1)]

# Messages keyed by (field path with list indices as "*", pydantic error type)
_MESSAGES = {
    ("name", "missing"): "Website name is required",
    ("name", "string_too_short"): "Website name is required",
    ("name", "string_too_long"): "Name must be less than 100 characters",
    ("url", "missing"): "Please enter a valid URL",
    ("description", "string_too_short"): "Description must be at least 10 characters",
    ("description", "string_too_long"): "Description must be less than 1000 characters",
    ("category", "missing"): "Category is required",
    ("category", "string_too_short"): "Category is required",
    ("offers.features", "too_short"): "At least one feature is required",
    ("offers.features.*", "string_too_short"): "Feature cannot be empty",
    ("offers.targetAudience", "too_short"): "At least one target audience is required",
    ("offers.targetAudience.*", "string_too_short"): "Audience cannot be empty",
    ("offers.uniqueSellingPoints", "too_short"): "At least one USP is required",
    ("offers.uniqueSellingPoints.*", "string_too_short"): "USP cannot be empty",
    ("articleSpecs.contentTypes", "too_short"): "At least one content type is required",
    ("articleSpecs.contentTypes.*", "string_too_short"): "Content type cannot be empty",
    ("articleSpecs.toneOfVoice", "too_short"): "At least one tone is required",
    ("articleSpecs.toneOfVoice.*", "string_too_short"): "Tone cannot be empty",
    ("articleSpecs.requiredSections", "too_short"): "At least one section is required",
    ("articleSpecs.requiredSections.*", "string_too_short"): "Section cannot be empty",
    ("articleSpecs.wordCountRange.min", "greater_than_equal"): "Minimum word count must be at least 1",
    ("articleSpecs.wordCountRange.max", "greater_than_equal"): "Maximum word count must be at least 1",
    ("articleSpecs.submissionGuidelines", "string_too_short"): "Guidelines must be at least 10 characters",
}

_GENERIC_MESSAGES = {
    "missing": "Required",
    "model_type": "Expected an object",
}


class _FormModel(BaseModel):
    model_config = ConfigDict(strict=True, alias_generator=to_camel)


class PricingForm(_FormModel):
    type: Literal["free", "paid", "freemium"]
    # Only checked for paid pricing; amount is declared last so the check sees the others
    currency: Any = None
    billing_cycle: Any = None
    amount: Any = Field(default=None, validate_default=True)

    @field_validator("amount")
    @classmethod
    def check_paid_pricing(cls, amount: Any, info: ValidationInfo) -> Any:
        if info.data.get("type") != "paid":
            return amount

        currency = info.data.get("currency")
        complete = (
            _is_number(amount)
            and amount > 0
            and isinstance(currency, str)
            and currency != ""
            and info.data.get("billing_cycle") in BILLING_CYCLES
        )
        if not complete:
            raise PydanticCustomError(
                "paid_pricing_incomplete",
                "Paid pricing requires amount, currency, and billing cycle",
            )
        return amount

    def to_pricing(self) -> Pricing:
        if self.type == "paid":
            return PaidPricing(
                amount=_normalize_number(self.amount),
                currency=self.currency,
                billing_cycle=self.billing_cycle,
            )
        if self.type == "freemium":
            return FreemiumPricing()
        return FreePricing()


class OffersForm(_FormModel):
    pricing: PricingForm
    features: NonEmptyList
    target_audience: NonEmptyList
    unique_selling_points: NonEmptyList


class WordCountRangeForm(_FormModel):
    min: float = Field(ge=1)
    max: float = Field(ge=1)

    @field_validator("max")
    @classmethod
    def check_max_above_min(cls, value: float, info: ValidationInfo) -> float:
        minimum = info.data.get("min")
        if minimum is not None and value <= minimum:
            raise PydanticCustomError(
                "word_count_order",
                "Maximum word count must be greater than minimum",
            )
        return value


class SeoRequirementsForm(_FormModel):
    meta_description: bool
    keywords: bool
    heading_structure: bool


class ArticleSpecsForm(_FormModel):
    content_types: NonEmptyList
    word_count_range: WordCountRangeForm
    tone_of_voice: NonEmptyList
    required_sections: NonEmptyList
    seo_requirements: SeoRequirementsForm
    submission_guidelines: str = Field(min_length=10)


class WebsiteForm(_FormModel):
    name: str = Field(min_length=1, max_length=100)
    url: str
    description: str = Field(min_length=10, max_length=1000)
    category: str = Field(min_length=1)
    status: Literal["active", "inactive", "pending"]
    offers: OffersForm
    article_specs: ArticleSpecsForm

    @field_validator("url")
    @classmethod
    def check_url(cls, value: str) -> str:
        if not is_absolute_url(value):
            raise PydanticCustomError("url_invalid", "Please enter a valid URL")
        return value

    def to_form_data(self) -> WebsiteFormData:
        offers = self.offers
        specs = self.article_specs
        return WebsiteFormData(
            name=self.name,
            url=self.url,
            description=self.description,
            category=self.category,
            status=self.status,
            offers=Offers(
                pricing=offers.pricing.to_pricing(),
                features=list(offers.features),
                target_audience=list(offers.target_audience),
                unique_selling_points=list(offers.unique_selling_points),
            ),
            article_specs=ArticleSpecs(
                content_types=list(specs.content_types),
                word_count_range=WordCountRange(
                    min=_normalize_number(specs.word_count_range.min),
                    max=_normalize_number(specs.word_count_range.max),
                ),
                tone_of_voice=list(specs.tone_of_voice),
                required_sections=list(specs.required_sections),
                seo_requirements=SeoRequirements(
                    meta_description=specs.seo_requirements.meta_description,
                    keywords=specs.seo_requirements.keywords,
                    heading_structure=specs.seo_requirements.heading_structure,
                ),
                submission_guidelines=specs.submission_guidelines,
            ),
        )


class WebsiteRecord(WebsiteForm):
    """A stored website: the form fields plus identity and timestamps."""

    id: str = Field(min_length=1)
    created_at: datetime = Field(strict=False)
    updated_at: datetime = Field(strict=False)

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # Timestamps without an offset were written in UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def to_website(self) -> Website:
        return Website.from_form_data(
            self.id, self.to_form_data(), created_at=self.created_at, updated_at=self.updated_at
        )


@dataclass(frozen=True)
class FieldError:
    """A validation message attached to a dotted field path."""

    path: str
    message: str


@dataclass
class Valid:
    """Successful validation carrying the normalized form data."""

    data: WebsiteFormData
    ok: ClassVar[bool] = True


@dataclass
class Invalid:
    """Failed validation carrying every field error found."""

    errors: list[FieldError]
    ok: ClassVar[bool] = False

    def messages(self) -> dict[str, str]:
        """Map each field path to its first error message."""
        result: dict[str, str] = {}
        for error in self.errors:
            result.setdefault(error.path, error.message)
        return result


ValidationResult = Union[Valid, Invalid]


class RecordParseError(Exception):
    """Raised when a stored record does not match the website shape."""

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        details = "; ".join(f"{e.path or '<record>'}: {e.message}" for e in errors[:3])
        super().__init__(f"Malformed website record ({details})")


def validate_website(data: Any) -> ValidationResult:
    """Validate candidate form data.

    Args:
        data: A dict shaped like the website form (camelCase keys). Anything
            else is reported as invalid rather than raising.

    Returns:
        Valid with normalized WebsiteFormData, or Invalid with every field error
    """
    try:
        form = WebsiteForm.model_validate(data)
    except ValidationError as e:
        return Invalid(errors=_field_errors(e))
    return Valid(data=form.to_form_data())


def validate_field(data: Any, path: str) -> list[str]:
    """Return validation messages for one field (and anything nested under it)."""
    result = validate_website(data)
    if result.ok:
        return []
    prefix = f"{path}."
    return [e.message for e in result.errors if e.path == path or e.path.startswith(prefix)]


def parse_website(data: Any) -> Website:
    """Parse a stored website record.

    Raises:
        RecordParseError: If the record is malformed
    """
    try:
        record = WebsiteRecord.model_validate(data)
    except ValidationError as e:
        raise RecordParseError(_field_errors(e)) from e
    return record.to_website()


def is_absolute_url(value: str) -> bool:
    """Check that a string is an absolute URL with a scheme and a host."""
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        parsed = urlparse(value)
        return bool(parsed.scheme and parsed.netloc and parsed.hostname)
    except ValueError:
        return False


def _field_errors(exc: ValidationError) -> list[FieldError]:
    errors = []
    for err in exc.errors():
        path = ".".join(str(part) for part in err["loc"])
        pattern = ".".join("*" if isinstance(part, int) else str(part) for part in err["loc"])
        message = _MESSAGES.get((pattern, err["type"])) or _GENERIC_MESSAGES.get(err["type"], err["msg"])
        errors.append(FieldError(path=path, message=message))
    return errors


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _normalize_number(value: Union[int, float]) -> Union[int, float]:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
