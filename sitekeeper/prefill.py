"""Homepage metadata lookup used to prefill new website forms."""

from dataclasses import dataclass
from typing import Optional

import requests
from bs4 import BeautifulSoup

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 1000


@dataclass
class SiteMetadata:
    """Name and description found on a website's homepage."""

    url: str
    name: Optional[str] = None
    description: Optional[str] = None


def fetch_site_metadata(url: str, timeout: int = 30) -> SiteMetadata:
    """Fetch a homepage and extract its name and description.

    Args:
        url: URL of the website homepage
        timeout: Request timeout in seconds

    Returns:
        SiteMetadata with whatever could be found

    Raises:
        PrefillError: If the page cannot be fetched
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise PrefillError(f"Failed to fetch page: {e}") from e

    soup = BeautifulSoup(response.content, "html.parser")

    name = _meta_content(soup, property="og:site_name")
    if not name and soup.title:
        name = soup.title.get_text(strip=True) or None

    description = _meta_content(soup, name="description") or _meta_content(
        soup, property="og:description"
    )

    return SiteMetadata(
        url=url,
        name=name[:MAX_NAME_LENGTH] if name else None,
        description=description[:MAX_DESCRIPTION_LENGTH] if description else None,
    )


def _meta_content(soup: BeautifulSoup, **attrs: str) -> Optional[str]:
    """Return the stripped content of the first matching <meta> tag."""
    tag = soup.find("meta", attrs=attrs)
    if not tag:
        return None
    content = (tag.get("content") or "").strip()
    return content or None


class PrefillError(Exception):
    """Raised when a homepage cannot be fetched."""

    pass
