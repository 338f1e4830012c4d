"""Domain entity for page content sections — pure Python, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class SectionKind(str, Enum):
    """Section kinds with a known schema and template.

    The stored ``kind`` tag is open-ended; values outside this enum are
    kept as-is and rendered as an "unknown section" placeholder.
    """

    HERO = "hero"
    FEATURES = "features"
    TESTIMONIALS = "testimonials"
    PRODUCT_SHOWCASE = "product_showcase"
    CTA = "cta"
    NEWSLETTER = "newsletter"
    ABOUT_STORY = "about_story"
    CATEGORIES = "categories"

    @classmethod
    def parse(cls, tag: str) -> "SectionKind | None":
        """Return the matching kind, or None for an unrecognized tag."""
        try:
            return cls(tag)
        except ValueError:
            return None


@dataclass
class Section:
    """One ordered, independently stored block of page content.

    ``content`` holds the serialized JSON payload exactly as persisted;
    it is only interpreted after passing through the content codec and
    the kind's schema.
    """

    page_key: str
    kind: str
    content: str = "{}"
    id: str = field(default_factory=lambda: str(uuid4()))
    display_name: str | None = None
    authoring_prompt: str | None = None
    layout_variant: str = "default"
    order_index: int = 0
    is_active: bool = True
    version: int = 1
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
