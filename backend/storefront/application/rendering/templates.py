"""HTML templates for each section kind.

Each template receives an already-defaulted content model and returns one
``<section>`` element. Every interpolated value goes through ``escape``.
"""

from html import escape
from urllib.parse import quote

from storefront.application.schemas.section_content import (
    AboutStoryContent,
    CallToAction,
    CallToActionContent,
    CategoriesContent,
    CustomerTestimonialsContent,
    FeaturesContent,
    HeroContent,
    NewsletterContent,
    ProductShowcaseContent,
)
from storefront.domain.entities import Category, Product

STAR_GLYPH = "★"
NO_PRODUCTS_MESSAGE = "No products available"
NO_CATEGORIES_MESSAGE = "No categories available"


# ── Shared fragments ─────────────────────────────────────────────────


def _section_header(title: str, description: str | None) -> str:
    parts = [
        '<div class="section-header">',
        f"<h2>{escape(title)}</h2>",
    ]
    if description:
        parts.append(f'<p class="section-description">{escape(description)}</p>')
    parts.append("</div>")
    return "".join(parts)


def _action_link(action: CallToAction, css_class: str) -> str:
    if action.open_in_new_tab:
        target = ' target="_blank" rel="noopener"'
    else:
        target = ' target="_self"'
    return (
        f'<a href="{escape(action.action)}" class="{css_class}"{target}>'
        f"{escape(action.text)}</a>"
    )


def _action_row(primary: CallToAction | None, secondary: CallToAction | None) -> str:
    links = []
    if primary is not None:
        links.append(_action_link(primary, "btn btn-primary"))
    if secondary is not None:
        links.append(_action_link(secondary, "btn btn-secondary"))
    if not links:
        return ""
    return f'<div class="section-actions">{"".join(links)}</div>'


def _empty_state(message: str) -> str:
    return f'<div class="empty-state"><p>{escape(message)}</p></div>'


def format_price(price: float) -> str:
    """Whole prices render without decimals ("$29"), others with two ("$29.50")."""
    if float(price).is_integer():
        return f"${int(price)}"
    return f"${price:.2f}"


# ── Kind templates ───────────────────────────────────────────────────


def render_hero(content: HeroContent, attrs: str) -> str:
    bullets = ""
    if content.features:
        items = "".join(
            f'<li><span class="check">✓</span>{escape(feature)}</li>'
            for feature in content.features
        )
        bullets = f'<ul class="hero-features">{items}</ul>'
    return (
        f'<section class="section section-hero"{attrs}>'
        f"<h1>{escape(content.headline)}</h1>"
        f'<p class="hero-subheadline">{escape(content.subheadline)}</p>'
        f"{bullets}"
        f"{_action_row(content.cta_primary, content.cta_secondary)}"
        "</section>"
    )


def render_features(content: FeaturesContent, attrs: str) -> str:
    cards = []
    for feature in content.features:
        icon = ""
        if feature.icon:
            icon = f'<div class="feature-icon"><span>{escape(feature.icon)}</span></div>'
        cards.append(
            '<div class="feature-card">'
            f"{icon}"
            f"<h3>{escape(feature.title or '')}</h3>"
            f"<p>{escape(feature.description)}</p>"
            "</div>"
        )
    return (
        f'<section class="section section-features"{attrs}>'
        f"{_section_header(content.title, content.description)}"
        f'<div class="feature-grid">{"".join(cards)}</div>'
        "</section>"
    )


def render_testimonials(content: CustomerTestimonialsContent, attrs: str) -> str:
    cards = []
    for testimonial in content.testimonials:
        stars = STAR_GLYPH * testimonial.rating
        avatar = ""
        if testimonial.avatar:
            avatar = (
                f'<img class="testimonial-avatar" src="{escape(testimonial.avatar)}" '
                f'alt="{escape(testimonial.author)}">'
            )
        role = ""
        if testimonial.role:
            role_text = testimonial.role
            if testimonial.company:
                role_text = f"{role_text}, {testimonial.company}"
            role = f'<p class="testimonial-role">{escape(role_text)}</p>'
        cards.append(
            '<div class="testimonial-card">'
            f'<div class="testimonial-rating" data-rating="{testimonial.rating}">{stars}</div>'
            f'<blockquote>"{escape(testimonial.content)}"</blockquote>'
            '<div class="testimonial-author">'
            f"{avatar}"
            f'<div><p class="testimonial-name">{escape(testimonial.author)}</p>{role}</div>'
            "</div>"
            "</div>"
        )
    return (
        f'<section class="section section-testimonials"{attrs}>'
        f"{_section_header(content.title, content.description)}"
        f'<div class="testimonial-grid">{"".join(cards)}</div>'
        "</section>"
    )


def render_product_showcase(
    content: ProductShowcaseContent, attrs: str, products: list[Product]
) -> str:
    shown = products
    if content.category:
        wanted = content.category.casefold()
        shown = [p for p in shown if p.category.casefold() == wanted]
    if content.max_items is not None:
        shown = shown[: content.max_items]

    if shown:
        cards = "".join(
            '<div class="product-card">'
            f'<div class="product-image"><img src="{escape(product.image)}" alt="{escape(product.name)}"></div>'
            f"<h3>{escape(product.name)}</h3>"
            f'<p class="product-price">{escape(format_price(product.price))}</p>'
            "</div>"
            for product in shown
        )
        body = f'<div class="product-grid">{cards}</div>'
    else:
        body = _empty_state(NO_PRODUCTS_MESSAGE)

    return (
        f'<section class="section section-product-showcase"{attrs}>'
        f"{_section_header(content.title, content.description)}"
        f"{body}"
        "</section>"
    )


def render_call_to_action(content: CallToActionContent, attrs: str) -> str:
    description = ""
    if content.description:
        description = f'<p class="cta-description">{escape(content.description)}</p>'
    return (
        f'<section class="section section-cta"{attrs}>'
        f"<h2>{escape(content.title)}</h2>"
        f"{description}"
        f"{_action_row(content.cta_primary, content.cta_secondary)}"
        "</section>"
    )


def render_newsletter(content: NewsletterContent, attrs: str) -> str:
    privacy = ""
    if content.privacy_text:
        privacy = f'<p class="newsletter-privacy">{escape(content.privacy_text)}</p>'
    return (
        f'<section class="section section-newsletter"{attrs}>'
        f"{_section_header(content.title, content.description)}"
        '<form class="newsletter-form">'
        f'<input type="email" name="email" placeholder="{escape(content.placeholder)}">'
        f'<button type="submit">{escape(content.button_text)}</button>'
        "</form>"
        f"{privacy}"
        "</section>"
    )


def render_about_story(content: AboutStoryContent, attrs: str) -> str:
    subtitle = ""
    if content.subtitle:
        subtitle = f'<p class="about-subtitle">{escape(content.subtitle)}</p>'
    body = ""
    if content.description:
        body = f'<div class="about-body"><p>{escape(content.description)}</p></div>'
    return (
        f'<section class="section section-about"{attrs}>'
        f'<div class="section-header"><h2>{escape(content.title)}</h2>{subtitle}</div>'
        f"{body}"
        "</section>"
    )


def render_categories(
    content: CategoriesContent, attrs: str, categories: list[Category]
) -> str:
    if categories:
        cards = []
        for category in categories:
            if category.image:
                image = f'<img src="{escape(category.image)}" alt="{escape(category.name)}">'
            else:
                image = '<span class="category-placeholder">📁</span>'
            cards.append(
                f'<a class="category-card" href="/products?category={escape(quote(category.slug))}">'
                f'<div class="category-image">{image}</div>'
                f"<h3>{escape(category.name)}</h3>"
                "</a>"
            )
        body = f'<div class="category-grid">{"".join(cards)}</div>'
    else:
        body = _empty_state(NO_CATEGORIES_MESSAGE)

    return (
        f'<section class="section section-categories"{attrs}>'
        f"{_section_header(content.title, content.description)}"
        f"{body}"
        "</section>"
    )


def render_unknown(kind: str, attrs: str) -> str:
    return (
        f'<section class="section section-unknown"{attrs}>'
        f"<p>Unknown section type: {escape(kind)}</p>"
        "</section>"
    )


def render_error(kind: str, attrs: str) -> str:
    return (
        f'<section class="section section-error"{attrs}>'
        f"<p>This {escape(kind)} section could not be displayed.</p>"
        "</section>"
    )
