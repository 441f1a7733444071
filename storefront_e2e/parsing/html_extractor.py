"""
HTML extraction for storefront pages.

Every CSS selector tied to the shop's markup lives in this module, so a
theme change is fixed here and nowhere else. Lookups that find nothing
return None or an empty list; deciding whether absence is a failure is
left to the caller.
"""

import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

# Markup contract with the storefront theme
FORM_KEY_SELECTOR = "input[name='form_key']"
PRODUCT_LINK_SELECTOR = ".product-item-name a"
PRODUCT_NAME_SELECTOR = ".base"
PRICE_SELECTOR = ".price"
REVIEW_LINKS_SELECTOR = ".reviews-actions a"
ADD_TO_CART_SELECTOR = "#product-addtocart-button"
COMPARE_SELECTOR = ".action.tocompare"
PRODUCT_IMAGE_SELECTOR = ".product-image-photo"
PRODUCT_ITEM_SELECTOR = ".product-item"

PRICE_PATTERN = re.compile(r"\$\d+\.\d{2}")


def _normalize_space(text: str) -> str:
    return " ".join(text.split())


def is_valid_price(text: Optional[str]) -> bool:
    """
    Check a rendered price against the shop's display format.

    Examples:
        "$45.00" -> True
        "$45"    -> False
        "45.00"  -> False
    """
    if text is None:
        return False
    return PRICE_PATTERN.fullmatch(text) is not None


class StorefrontPage:
    """A parsed storefront HTML document."""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html or "", "html.parser")

    # ------------------------------------------------------------------
    # Generic selection
    # ------------------------------------------------------------------

    def select(self, selector: str) -> List[Tag]:
        return self.soup.select(selector)

    def first(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)

    def attr(self, selector: str, name: str) -> Optional[str]:
        """Attribute ``name`` of the first match, or None."""
        element = self.first(selector)
        if element is None:
            return None
        return element.get(name)

    def text(self, selector: str) -> str:
        """Combined text of all matches, whitespace-normalized ("" if none)."""
        parts = [_normalize_space(el.get_text()) for el in self.select(selector)]
        return " ".join(part for part in parts if part)

    def first_text(self, selector: str) -> Optional[str]:
        element = self.first(selector)
        if element is None:
            return None
        return _normalize_space(element.get_text())

    # ------------------------------------------------------------------
    # Named accessors
    # ------------------------------------------------------------------

    def form_key(self) -> Optional[str]:
        """Anti-forgery token embedded in the page's forms."""
        return self.attr(FORM_KEY_SELECTOR, "value")

    def product_links(self) -> List[Tag]:
        return self.select(PRODUCT_LINK_SELECTOR)

    def first_product_url(self) -> Optional[str]:
        return self.attr(PRODUCT_LINK_SELECTOR, "href")

    def product_name(self) -> str:
        return self.text(PRODUCT_NAME_SELECTOR)

    def price_text(self) -> Optional[str]:
        return self.first_text(PRICE_SELECTOR)

    def review_links(self) -> List[Tag]:
        return self.select(REVIEW_LINKS_SELECTOR)

    def add_to_cart_buttons(self) -> List[Tag]:
        return self.select(ADD_TO_CART_SELECTOR)

    def compare_buttons(self) -> List[Tag]:
        return self.select(COMPARE_SELECTOR)

    def product_images(self) -> List[Tag]:
        return self.select(PRODUCT_IMAGE_SELECTOR)

    def first_image_url(self) -> Optional[str]:
        return self.attr(PRODUCT_IMAGE_SELECTOR, "src")

    def product_items(self) -> List[Tag]:
        return self.select(PRODUCT_ITEM_SELECTOR)
