"""Pydantic shapes-with-defaults for each section kind.

Every model here is total: validating any mapping (including ``{}``) yields
a complete, renderable value. Fields that are absent, of the wrong type, or
empty strings fall back to their declared default; unknown keys are ignored.
Payload keys are accepted in camelCase (as produced by the content
generator) or snake_case.
"""

import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel


logger = logging.getLogger(__name__)

DEFAULT_RATING = 5
MAX_RATING = 5


class SectionContent(BaseModel):
    """Base for all section payload shapes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _coerce_to_mapping(cls, data: Any) -> Any:
        """A payload that is not a mapping is treated as empty."""
        if isinstance(data, (dict, SectionContent)):
            return data
        return {}

    @field_validator("*", mode="wrap")
    @classmethod
    def _fall_back_to_default(
        cls,
        value: Any,
        handler: ValidatorFunctionWrapHandler,
        info: ValidationInfo,
    ) -> Any:
        try:
            result = handler(value)
        except ValidationError as exc:
            logger.debug(
                "%s.%s invalid (%s) — using default",
                cls.__name__,
                info.field_name,
                exc.errors()[0]["type"],
            )
            return cls._default_for(info.field_name)
        if isinstance(result, str) and not result.strip():
            return cls._default_for(info.field_name)
        return result

    @field_validator("cta_primary", "cta_secondary", mode="before", check_fields=False)
    @classmethod
    def _omit_falsy_action(cls, value: Any) -> Any:
        """``false``, ``0`` or ``""`` in place of a button means no button."""
        if not value and not isinstance(value, dict):
            return None
        return value

    @classmethod
    def _default_for(cls, field_name: str | None) -> Any:
        if field_name is None:
            return None
        return cls.model_fields[field_name].get_default(call_default_factory=True)

    def to_payload(self) -> dict[str, Any]:
        """Dump in the stored (camelCase) form, omitting absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ── Shared nested shapes ─────────────────────────────────────────────


class CallToAction(SectionContent):
    """A button link: label, target URL and whether it opens a new tab."""

    text: str = "Learn More"
    action: str = "#"
    open_in_new_tab: bool = False


class HeroPrimaryAction(CallToAction):
    text: str = "Primary CTA"


class HeroSecondaryAction(CallToAction):
    text: str = "Secondary CTA"


class BannerPrimaryAction(CallToAction):
    text: str = "Get Started"


class BannerSecondaryAction(CallToAction):
    text: str = "Learn More"


class FeatureItem(SectionContent):
    # Filled with "Feature N" by FeaturesContent once the position is known.
    title: str | None = None
    description: str = "Feature description"
    icon: str | None = None


class CustomerTestimonial(SectionContent):
    content: str = "Testimonial content"
    author: str = "Author Name"
    rating: int = Field(DEFAULT_RATING, ge=1, le=MAX_RATING)
    avatar: str | None = None
    role: str | None = None
    company: str | None = None

    @field_validator("rating", mode="before")
    @classmethod
    def _reject_bool_rating(cls, value: Any) -> Any:
        # bool is an int subclass; True must not become a one-star rating.
        return None if isinstance(value, bool) else value


# ── Kind payloads ────────────────────────────────────────────────────


class HeroContent(SectionContent):
    headline: str = "Default Headline"
    subheadline: str = "Default subheadline text"
    features: list[str] | None = None
    cta_primary: HeroPrimaryAction | None = None
    cta_secondary: HeroSecondaryAction | None = None

    @field_validator("features", mode="before")
    @classmethod
    def _keep_text_bullets(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [item for item in value if isinstance(item, str) and item.strip()]
        return value


class FeaturesContent(SectionContent):
    title: str = "Our Features"
    description: str | None = None
    features: list[FeatureItem] = Field(default_factory=list)

    @model_validator(mode="after")
    def _number_untitled_features(self) -> "FeaturesContent":
        for position, feature in enumerate(self.features, start=1):
            if feature.title is None:
                feature.title = f"Feature {position}"
        return self


class CustomerTestimonialsContent(SectionContent):
    title: str = "What Our Customers Say"
    description: str | None = None
    testimonials: list[CustomerTestimonial] = Field(default_factory=list)


class ProductShowcaseContent(SectionContent):
    title: str = "Featured Products"
    description: str | None = None
    category: str | None = None
    max_items: int | None = Field(None, ge=1)


class CallToActionContent(SectionContent):
    title: str = "Ready to get started?"
    description: str | None = None
    cta_primary: BannerPrimaryAction | None = None
    cta_secondary: BannerSecondaryAction | None = None


class NewsletterContent(SectionContent):
    title: str = "Stay Updated"
    description: str | None = None
    placeholder: str = "Enter your email"
    button_text: str = "Subscribe"
    privacy_text: str | None = None


class AboutStoryContent(SectionContent):
    title: str = "Our Story"
    subtitle: str | None = None
    description: str | None = None


class CategoriesContent(SectionContent):
    title: str = "Shop by Category"
    description: str | None = None


def fill_defaults(schema: type[SectionContent], payload: Any) -> SectionContent:
    """Run a schema's defaulting pass over a decoded payload. Never raises."""
    try:
        return schema.model_validate(payload)
    except ValidationError:
        logger.exception("Defaulting failed for %s — using bare defaults", schema.__name__)
        return schema()
