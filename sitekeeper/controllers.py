"""Business logic controllers for SiteKeeper."""

import time
from dataclasses import dataclass
from typing import Any, Optional

from .models import Website, form_data_to_dict
from .prefill import SiteMetadata
from .schema import FieldError, validate_website
from .store import WebsiteStore

_SORT_KEYS = {
    "name": lambda w: w.name.casefold(),
    "category": lambda w: w.category.casefold(),
    "status": lambda w: w.status,
    "pricing": lambda w: w.offers.pricing.type,
    "created": lambda w: w.created_at,
    "updated": lambda w: w.updated_at,
}

SORT_KEYS = tuple(_SORT_KEYS)


class WebsiteNotFoundError(Exception):
    """Raised when a website is not found."""

    def __init__(self, website_id: str):
        self.website_id = website_id
        super().__init__(f"Website '{website_id}' not found")


class WebsiteValidationError(Exception):
    """Raised when submitted form data does not validate."""

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        super().__init__(f"Website data is invalid ({len(errors)} error(s))")


@dataclass
class Summary:
    """Counters shown above the website list."""

    total: int
    active: int
    paid: int

    @property
    def active_percent(self) -> int:
        if not self.total:
            return 0
        return int(self.active * 100 / self.total + 0.5)


def get_website(store: WebsiteStore, website_id: str) -> Website:
    """Get a website by id.

    Raises:
        WebsiteNotFoundError: If website not found
    """
    website = store.get_website(website_id)
    if website is None:
        raise WebsiteNotFoundError(website_id)
    return website


def create_website(store: WebsiteStore, values: Any, delay: float = 0.0) -> Website:
    """Validate submitted form values and create a website.

    Args:
        store: WebsiteStore instance
        values: Form values (camelCase dict)
        delay: Seconds to wait before saving, simulating a remote round trip

    Returns:
        The created Website

    Raises:
        WebsiteValidationError: If the values don't validate
        SubmissionInProgressError: If another submission is running
    """
    result = validate_website(values)
    if not result.ok:
        raise WebsiteValidationError(result.errors)

    with store.submitting():
        if delay:
            time.sleep(delay)
        return store.create_website(result.data)


def update_website(
    store: WebsiteStore, website_id: str, values: Any, delay: float = 0.0
) -> Website:
    """Validate submitted form values and update an existing website.

    Args:
        store: WebsiteStore instance
        website_id: Id of the website to update
        values: Form values (camelCase dict)
        delay: Seconds to wait before saving, simulating a remote round trip

    Returns:
        The updated Website

    Raises:
        WebsiteNotFoundError: If website not found
        WebsiteValidationError: If the values don't validate
        SubmissionInProgressError: If another submission is running
    """
    if store.get_website(website_id) is None:
        raise WebsiteNotFoundError(website_id)

    result = validate_website(values)
    if not result.ok:
        raise WebsiteValidationError(result.errors)

    with store.submitting():
        if delay:
            time.sleep(delay)
        website = store.update_website(website_id, result.data)

    if website is None:
        raise WebsiteNotFoundError(website_id)
    return website


def delete_website(store: WebsiteStore, website_id: str) -> Website:
    """Delete a website.

    Returns:
        The website that was deleted

    Raises:
        WebsiteNotFoundError: If website not found
    """
    website = get_website(store, website_id)
    store.delete_website(website_id)
    return website


def list_websites(
    store: WebsiteStore,
    search: Optional[str] = None,
    status: Optional[str] = None,
    pricing: Optional[str] = None,
    sort_by: Optional[str] = None,
    descending: bool = False,
) -> list[Website]:
    """List websites with optional search, filters and sorting.

    Sorting only affects the returned list, never the stored order.

    Args:
        store: WebsiteStore instance
        search: Case-insensitive substring to look for in website names
        status: Only include websites with this status
        pricing: Only include websites with this pricing type
        sort_by: One of SORT_KEYS; None keeps insertion order
        descending: Reverse the sort order

    Returns:
        List of Website objects
    """
    websites = store.list_websites()

    if search:
        needle = search.casefold()
        websites = [w for w in websites if needle in w.name.casefold()]
    if status:
        websites = [w for w in websites if w.status == status]
    if pricing:
        websites = [w for w in websites if w.offers.pricing.type == pricing]

    if sort_by:
        if sort_by not in _SORT_KEYS:
            raise ValueError(f"Unknown sort key '{sort_by}'")
        websites.sort(key=_SORT_KEYS[sort_by], reverse=descending)

    return websites


def summarize(websites: list[Website]) -> Summary:
    """Count total, active and paid websites."""
    return Summary(
        total=len(websites),
        active=sum(1 for w in websites if w.status == "active"),
        paid=sum(1 for w in websites if w.offers.pricing.type == "paid"),
    )


def default_form_values() -> dict[str, Any]:
    """Return the values of a blank website form."""
    return {
        "name": "",
        "url": "",
        "description": "",
        "category": "",
        "status": "active",
        "offers": {
            "pricing": {"type": "free"},
            "features": [""],
            "targetAudience": [""],
            "uniqueSellingPoints": [""],
        },
        "articleSpecs": {
            "contentTypes": [""],
            "wordCountRange": {"min": 500, "max": 2000},
            "toneOfVoice": [""],
            "requiredSections": [""],
            "seoRequirements": {
                "metaDescription": False,
                "keywords": False,
                "headingStructure": False,
            },
            "submissionGuidelines": "",
        },
    }


def form_values(website: Website) -> dict[str, Any]:
    """Return form values pre-filled from an existing website."""
    return form_data_to_dict(website)


def prefilled_form_values(metadata: SiteMetadata) -> dict[str, Any]:
    """Return a blank form with the homepage metadata filled in."""
    values = default_form_values()
    values["url"] = metadata.url
    if metadata.name:
        values["name"] = metadata.name
    if metadata.description:
        values["description"] = metadata.description
    return values
