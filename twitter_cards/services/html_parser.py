"""HTML parsing utilities for meta tag collection"""

import logging
from typing import List, Optional, Union

from bs4 import BeautifulSoup

from .models import MetaTag, TagCollection


logger = logging.getLogger(__name__)


class HTMLParser:
    """Encapsulates HTML parsing functionality"""

    def __init__(self, html: Union[str, bytes]):
        """
        Initialize the HTML parser

        Args:
            html: HTML document as text or raw bytes. The lxml tree builder
                never loads external resources referenced by the document.
        """
        self.html = html
        self.soup = BeautifulSoup(html, "lxml")

    @staticmethod
    def _get_attribute(element, name: str) -> Optional[str]:
        """Helper function to read a single-valued attribute"""
        value = element.get(name)
        if isinstance(value, list):
            return " ".join(value) if value else None
        return value

    def get_meta_tags(self) -> TagCollection:
        """
        Collect every <meta> element of the document in document order.

        Twitter reads meta declarations from anywhere in the document,
        not only from <head>, so the whole tree is searched.
        """
        tags: List[MetaTag] = []
        for element in self.soup.find_all("meta"):
            name = self._get_attribute(element, "name")
            property_attr = self._get_attribute(element, "property")
            if not name and not property_attr:
                continue
            content = self._get_attribute(element, "content") or self._get_attribute(element, "value") or ""
            tags.append(MetaTag(name=name, property=property_attr, content=content))

        logger.debug(f"Collected {len(tags)} meta tags")
        return TagCollection(tags)

    def get_meta_content(self, key: str) -> Optional[str]:
        """Helper function to extract trimmed meta tag content"""
        tag = self.get_meta_tags().find(key)
        return tag.text if tag else None
