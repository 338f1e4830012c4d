from .section import (
    PageResponse,
    RenderedRegionResponse,
    SectionCreate,
    SectionResponse,
    SectionUpdate,
)
from .section_content import (
    AboutStoryContent,
    CallToAction,
    CallToActionContent,
    CategoriesContent,
    CustomerTestimonial,
    CustomerTestimonialsContent,
    FeatureItem,
    FeaturesContent,
    HeroContent,
    NewsletterContent,
    ProductShowcaseContent,
    SectionContent,
    fill_defaults,
)

__all__ = [
    "PageResponse",
    "RenderedRegionResponse",
    "SectionCreate",
    "SectionResponse",
    "SectionUpdate",
    "AboutStoryContent",
    "CallToAction",
    "CallToActionContent",
    "CategoriesContent",
    "CustomerTestimonial",
    "CustomerTestimonialsContent",
    "FeatureItem",
    "FeaturesContent",
    "HeroContent",
    "NewsletterContent",
    "ProductShowcaseContent",
    "SectionContent",
    "fill_defaults",
]
