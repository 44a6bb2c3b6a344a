"""Data models for SiteKeeper."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Union

STATUSES = ("active", "inactive", "pending")
PRICING_TYPES = ("free", "paid", "freemium")
BILLING_CYCLES = ("monthly", "yearly", "one-time")

CATEGORIES = [
    "E-commerce",
    "SaaS",
    "Blog",
    "Portfolio",
    "News",
    "Education",
    "Healthcare",
    "Finance",
    "Entertainment",
    "Other",
]

CURRENCIES = ["USD", "EUR", "GBP", "CAD", "AUD"]


@dataclass
class FreePricing:
    """Free offering, no price attached."""

    type: ClassVar[str] = "free"


@dataclass
class FreemiumPricing:
    """Free tier with paid upgrades, no price attached."""

    type: ClassVar[str] = "freemium"


@dataclass
class PaidPricing:
    """Paid offering with a price and billing cycle."""

    type: ClassVar[str] = "paid"

    amount: Union[int, float]
    currency: str
    billing_cycle: str


Pricing = Union[FreePricing, FreemiumPricing, PaidPricing]


@dataclass
class Offers:
    """What a website offers and to whom."""

    pricing: Pricing
    features: list[str]
    target_audience: list[str]
    unique_selling_points: list[str]


@dataclass
class WordCountRange:
    min: Union[int, float]
    max: Union[int, float]


@dataclass
class SeoRequirements:
    meta_description: bool = False
    keywords: bool = False
    heading_structure: bool = False


@dataclass
class ArticleSpecs:
    """Content submission specification for articles."""

    content_types: list[str]
    word_count_range: WordCountRange
    tone_of_voice: list[str]
    required_sections: list[str]
    seo_requirements: SeoRequirements = field(default_factory=SeoRequirements)
    submission_guidelines: str = ""


@dataclass
class WebsiteFormData:
    """The editable part of a website record."""

    name: str
    url: str
    description: str
    category: str
    status: str
    offers: Offers
    article_specs: ArticleSpecs


@dataclass
class Website:
    """Represents a website in the directory."""

    id: str
    name: str
    url: str
    description: str
    category: str
    status: str
    offers: Offers
    article_specs: ArticleSpecs
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_form_data(
        cls, website_id: str, data: WebsiteFormData, created_at: datetime, updated_at: datetime
    ) -> "Website":
        return cls(
            id=website_id,
            name=data.name,
            url=data.url,
            description=data.description,
            category=data.category,
            status=data.status,
            offers=data.offers,
            article_specs=data.article_specs,
            created_at=created_at,
            updated_at=updated_at,
        )

    def form_data(self) -> WebsiteFormData:
        """Return the editable fields of this website."""
        return WebsiteFormData(
            name=self.name,
            url=self.url,
            description=self.description,
            category=self.category,
            status=self.status,
            offers=self.offers,
            article_specs=self.article_specs,
        )


# Serialization to the camelCase dict shape used by forms and the storage slot


def pricing_to_dict(pricing: Pricing) -> dict[str, Any]:
    if isinstance(pricing, PaidPricing):
        return {
            "type": pricing.type,
            "amount": pricing.amount,
            "currency": pricing.currency,
            "billingCycle": pricing.billing_cycle,
        }
    return {"type": pricing.type}


def form_data_to_dict(data: Union[WebsiteFormData, Website]) -> dict[str, Any]:
    """Convert form data (or the editable part of a website) to a plain dict."""
    offers = data.offers
    specs = data.article_specs
    return {
        "name": data.name,
        "url": data.url,
        "description": data.description,
        "category": data.category,
        "status": data.status,
        "offers": {
            "pricing": pricing_to_dict(offers.pricing),
            "features": list(offers.features),
            "targetAudience": list(offers.target_audience),
            "uniqueSellingPoints": list(offers.unique_selling_points),
        },
        "articleSpecs": {
            "contentTypes": list(specs.content_types),
            "wordCountRange": {
                "min": specs.word_count_range.min,
                "max": specs.word_count_range.max,
            },
            "toneOfVoice": list(specs.tone_of_voice),
            "requiredSections": list(specs.required_sections),
            "seoRequirements": {
                "metaDescription": specs.seo_requirements.meta_description,
                "keywords": specs.seo_requirements.keywords,
                "headingStructure": specs.seo_requirements.heading_structure,
            },
            "submissionGuidelines": specs.submission_guidelines,
        },
    }


def website_to_dict(website: Website) -> dict[str, Any]:
    """Convert a website to the dict shape stored in the slot."""
    return {
        "id": website.id,
        **form_data_to_dict(website),
        "createdAt": format_timestamp(website.created_at),
        "updatedAt": format_timestamp(website.updated_at),
    }


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601, using a Z suffix for UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat().replace("+00:00", "Z")
