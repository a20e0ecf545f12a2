# landingkit/content/normalizer.py

"""Turns a raw language model reply into complete landing page content."""

import logging
import random
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime, timedelta
from typing import Any

from landingkit.config.settings import Settings
from landingkit.content import defaults
from landingkit.content.json_extraction import split_reply
from landingkit.content.strategies import (
    ReplyView,
    Strategy,
    as_bool,
    as_float,
    as_int,
    as_records,
    as_text,
    as_text_list,
    as_text_mapping,
    bullets,
    constant,
    json_path,
    labelled,
    line_at,
    line_span,
    resolve,
)
from landingkit.extraction.features import FeatureExtractor
from landingkit.extraction.pricing import discount_percent, extract_currency
from landingkit.models.content import (
    Contact,
    GenerationOptions,
    Hero,
    NormalizedContent,
    Pricing,
    ProductSection,
    Review,
    SocialProof,
    Tracking,
    Upsell,
)
from landingkit.models.product import ProductCandidate

logger = logging.getLogger("landingkit.content")

# Bounds for generated social proof and review metadata
TOTAL_CUSTOMERS_RANGE: tuple[int, int] = (10000, 60000)
MONTHLY_USERS_RANGE: tuple[int, int] = (1000, 6000)
COUNTRIES_SERVED_RANGE: tuple[int, int] = (25, 75)
AVERAGE_RATING_RANGE: tuple[float, float] = (4.5, 5.0)
REVIEW_WINDOW_DAYS = 30
AVATAR_ID_RANGE: tuple[int, int] = (1, 1000000)
MAX_UPSELLS = 2


class _Resolution:
    """Per-call state: the parsed reply plus a field -> strategy trace."""

    def __init__(self, view: ReplyView) -> None:
        self.view = view
        self.trace: dict[str, str] = {}

    def pick(
        self,
        field: str,
        chain: Sequence[Strategy],
        coerce: Callable[[Any], Any],
        default: Any,
    ) -> Any:
        value, source = resolve(chain, self.view, coerce)
        if value is None:
            self.trace[field] = "fallback"
            return default
        self.trace[field] = source
        return value


class ContentNormalizer:
    """Resolve every landing page field through an ordered fallback chain.

    For each field the chain is: the nested JSON key, flattened and
    alias keys, heuristics over the prose around the JSON, and finally
    static or generated defaults. ``normalize`` never raises; an empty
    or garbled reply yields content built entirely from defaults.

    Randomised values (social proof, review dates, avatars) come from
    the injected ``rng`` and ``clock``, so seeded runs are repeatable.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] | None = None,
        feature_extractor: FeatureExtractor | None = None,
        settings: type[Settings] = Settings,
    ) -> None:
        self.rng = rng or random.Random()
        self.clock = clock or datetime.now
        self.feature_extractor = feature_extractor or FeatureExtractor()
        self.settings = settings

    def normalize(
        self,
        raw: str | None,
        fallback_product: ProductCandidate | None,
        options: GenerationOptions | None = None,
    ) -> NormalizedContent:
        content, _ = self.normalize_with_trace(raw, fallback_product, options)
        return content

    def normalize_with_trace(
        self,
        raw: str | None,
        fallback_product: ProductCandidate | None,
        options: GenerationOptions | None = None,
    ) -> tuple[NormalizedContent, dict[str, str]]:
        """Like :meth:`normalize`, also returning which strategy set each field."""
        options = options or GenerationOptions()
        product = fallback_product or ProductCandidate(
            title=defaults.DEFAULT_PRODUCT_TITLE
        )
        reply = split_reply(raw)
        if raw and not reply.has_json:
            logger.info(
                "Reply has no JSON (%s), using prose heuristics",
                "; ".join(reply.errors),
            )
        state = _Resolution(ReplyView.of(reply))

        title = state.pick(
            "product.title",
            [json_path("product", "title"), constant(product.title, "product")],
            as_text,
            defaults.DEFAULT_PRODUCT_TITLE,
        )
        copy = defaults.audience_copy(options.target_audience, options.language)

        content = NormalizedContent(
            hero=self._hero(state, title, copy, product, options),
            product=self._product(state, title, copy, product, options),
            pricing=self._pricing(state, copy, product),
            reviews=self._reviews(state, options),
            trust_badges=self._trust_badges(state, options),
            upsells=self._upsells(state, title, options),
            contact=self._contact(state),
            tracking=self._tracking(state, options),
            social_proof=self._social_proof(state),
        )

        logger.debug("Content field sources: %s", state.trace)
        return content, state.trace

    # --- sections ---

    def _interpolate(self, template: str, title: str) -> str:
        return template.replace("{product}", title)

    def _hero(
        self,
        state: _Resolution,
        title: str,
        copy: Mapping[str, str],
        product: ProductCandidate,
        options: GenerationOptions,
    ) -> Hero:
        headline = state.pick(
            "hero.headline",
            [
                json_path("hero", "headline"),
                json_path("headline"),
                labelled("headline"),
                line_at(0),
            ],
            as_text,
            self._interpolate(copy["headline"], title),
        )
        subheadline = state.pick(
            "hero.subheadline",
            [
                json_path("hero", "subheadline"),
                json_path("subheadline"),
                labelled("subheadline"),
                line_at(1),
            ],
            as_text,
            self._interpolate(copy["subheadline"], title),
        )
        cta = state.pick(
            "hero.cta",
            [
                json_path("hero", "cta"),
                json_path("hero", "callToAction"),
                json_path("cta"),
                json_path("callToAction"),
                labelled("cta"),
            ],
            as_text,
            self._interpolate(copy["cta"], title),
        )
        background = state.pick(
            "hero.backgroundImage",
            [
                json_path("hero", "backgroundImage"),
                json_path("backgroundImage"),
                constant(options.media[0] if options.media else "", "media"),
                constant(product.images[0] if product.images else "", "product"),
            ],
            as_text,
            defaults.DEFAULT_BACKGROUND_IMAGE,
        )
        return Hero(
            headline=headline,
            subheadline=subheadline,
            cta=cta,
            background_image=background,
        )

    def _product(
        self,
        state: _Resolution,
        title: str,
        copy: Mapping[str, str],
        product: ProductCandidate,
        options: GenerationOptions,
    ) -> ProductSection:
        description = state.pick(
            "product.description",
            [
                json_path("product", "description"),
                json_path("description"),
                labelled("description"),
                line_span(2, 5),
                constant(product.description, "product"),
            ],
            as_text,
            self._interpolate(copy["description"], title),
        )
        features = state.pick(
            "product.features",
            [
                json_path("product", "features"),
                json_path("features"),
                json_path("keyFeatures"),
                bullets(),
                constant(product.features, "product"),
            ],
            as_text_list,
            None,
        )
        if features is None:
            features = self.feature_extractor.extract(
                f"{title} {product.description}"
            )
        specifications = state.pick(
            "product.specifications",
            [
                json_path("product", "specifications"),
                json_path("specifications"),
                constant(product.specifications, "product"),
            ],
            as_text_mapping,
            {},
        )
        media = state.pick(
            "product.media",
            [
                json_path("product", "media"),
                constant(list(options.media), "media"),
                constant(list(product.images), "product"),
            ],
            as_text_list,
            [],
        )
        return ProductSection(
            title=title,
            description=description,
            features=features[: self.settings.MAX_FEATURES],
            specifications=specifications,
            media=media[: self.settings.MAX_IMAGES],
        )

    def _pricing(
        self,
        state: _Resolution,
        copy: Mapping[str, str],
        product: ProductCandidate,
    ) -> Pricing:
        current = state.pick(
            "pricing.current",
            [
                json_path("pricing", "current"),
                json_path("price"),
                constant(product.price, "product"),
            ],
            as_text,
            defaults.DEFAULT_PRICE,
        )
        original = state.pick(
            "pricing.original",
            [
                json_path("pricing", "original"),
                json_path("originalPrice"),
                constant(product.original_price, "product"),
            ],
            as_text,
            current,
        )
        discount = state.pick(
            "pricing.discount",
            [json_path("pricing", "discount"), json_path("discount")],
            as_text,
            discount_percent(current, original),
        )
        currency = state.pick(
            "pricing.currency",
            [
                json_path("pricing", "currency"),
                json_path("currency"),
                constant(product.currency, "product"),
            ],
            as_text,
            extract_currency(current, defaults.DEFAULT_CURRENCY),
        )
        urgency = state.pick(
            "pricing.urgency",
            [
                json_path("pricing", "urgency"),
                json_path("urgency"),
                labelled("urgency"),
            ],
            as_text,
            copy["urgency"],
        )
        return Pricing(
            current=current,
            original=original,
            discount=discount,
            currency=currency,
            urgency=urgency,
        )

    def _review_date(self) -> str:
        offset = self.rng.uniform(0, REVIEW_WINDOW_DAYS * 86400)
        return (self.clock() - timedelta(seconds=offset)).date().isoformat()

    def _avatar(self) -> str:
        photo_id = self.rng.randrange(*AVATAR_ID_RANGE)
        return defaults.AVATAR_URL.format(id=photo_id)

    def _review(self, record: Any) -> Review | None:
        if isinstance(record, str):
            record = {"comment": record}
        if not isinstance(record, dict):
            return None

        def first(*keys: str) -> Any:
            for key in keys:
                if key in record:
                    return record[key]
            return None

        rating = as_int(first("rating", "stars"))
        verified = as_bool(first("verified"))
        return Review(
            name=as_text(first("name", "author")) or defaults.ANONYMOUS_REVIEWER,
            rating=min(max(rating if rating is not None else 5, 1), 5),
            comment=(
                as_text(first("comment", "text", "review", "quote"))
                or defaults.DEFAULT_REVIEW_COMMENT
            ),
            verified=True if verified is None else verified,
            date=as_text(first("date")) or self._review_date(),
            avatar=as_text(first("avatar")) or self._avatar(),
        )

    def _reviews(
        self, state: _Resolution, options: GenerationOptions
    ) -> list[Review]:
        if not options.include_reviews:
            state.trace["reviews"] = "disabled"
            return []

        records = state.pick(
            "reviews",
            [
                json_path("reviews"),
                json_path("testimonials"),
                json_path("product", "reviews"),
            ],
            as_records,
            [],
        )
        reviews = [
            review
            for record in records[: self.settings.MAX_REVIEWS]
            if (review := self._review(record)) is not None
        ]
        if reviews:
            return reviews

        state.trace["reviews"] = "templates"
        templates = defaults.review_templates(
            options.target_audience, options.language
        )
        return [
            Review(
                name=name,
                rating=rating,
                comment=comment,
                verified=True,
                date=self._review_date(),
                avatar=self._avatar(),
            )
            for name, rating, comment in templates[: self.settings.MAX_REVIEWS]
        ]

    def _trust_badges(
        self, state: _Resolution, options: GenerationOptions
    ) -> list[str]:
        if not options.include_trust_badges:
            state.trace["trustBadges"] = "disabled"
            return []
        return state.pick(
            "trustBadges",
            [json_path("trustBadges")],
            as_text_list,
            list(defaults.TRUST_BADGES),
        )[: self.settings.MAX_TRUST_BADGES]

    def _upsell(self, record: Any) -> Upsell | None:
        if not isinstance(record, dict):
            return None
        title = as_text(record.get("title"))
        if title is None:
            return None
        return Upsell(
            title=title,
            description=as_text(record.get("description")) or "",
            price=as_text(record.get("price")) or "",
            image=as_text(record.get("image")) or "",
        )

    def _upsells(
        self, state: _Resolution, title: str, options: GenerationOptions
    ) -> list[Upsell]:
        if not options.include_upsells:
            state.trace["upsells"] = "disabled"
            return []

        records = state.pick(
            "upsells", [json_path("upsells")], as_records, []
        )
        upsells = [
            upsell
            for record in records
            if (upsell := self._upsell(record)) is not None
        ]
        if not upsells:
            state.trace["upsells"] = "templates"
            upsells = [
                Upsell(
                    title=self._interpolate(name, title),
                    description=description,
                    price=price,
                    image=image,
                )
                for name, description, price, image in defaults.UPSELL_TEMPLATES
            ]
        return upsells[:MAX_UPSELLS]

    def _contact(self, state: _Resolution) -> Contact:
        s = self.settings
        return Contact(
            whatsapp=state.pick(
                "contact.whatsapp",
                [json_path("contact", "whatsapp")],
                as_text,
                s.WHATSAPP_NUMBER,
            ),
            messenger=state.pick(
                "contact.messenger",
                [json_path("contact", "messenger")],
                as_text,
                s.MESSENGER_URL,
            ),
            chatbot=state.pick(
                "contact.chatbot",
                [json_path("contact", "chatbot")],
                as_bool,
                True,
            ),
            phone=state.pick(
                "contact.phone",
                [json_path("contact", "phone")],
                as_text,
                s.SUPPORT_PHONE,
            ),
            email=state.pick(
                "contact.email",
                [json_path("contact", "email")],
                as_text,
                s.SUPPORT_EMAIL,
            ),
        )

    def _tracking(
        self, state: _Resolution, options: GenerationOptions
    ) -> Tracking:
        events = state.pick(
            "tracking.customEvents",
            [json_path("tracking", "customEvents")],
            as_text_list,
            list(defaults.DEFAULT_CUSTOM_EVENTS),
        )[: self.settings.MAX_CUSTOM_EVENTS]
        if not options.enable_tracking:
            state.trace["tracking.facebookPixel"] = "disabled"
            state.trace["tracking.googleAnalytics"] = "disabled"
            return Tracking(
                facebook_pixel="", google_analytics="", custom_events=events
            )
        return Tracking(
            facebook_pixel=state.pick(
                "tracking.facebookPixel",
                [json_path("tracking", "facebookPixel")],
                as_text,
                self.settings.FACEBOOK_PIXEL_ID,
            ),
            google_analytics=state.pick(
                "tracking.googleAnalytics",
                [json_path("tracking", "googleAnalytics")],
                as_text,
                self.settings.GOOGLE_ANALYTICS_ID,
            ),
            custom_events=events,
        )

    def _social_proof(self, state: _Resolution) -> SocialProof:
        rng = self.rng

        def counter(key: str, bounds: tuple[int, int]) -> int:
            value = state.pick(
                f"socialProof.{key}",
                [
                    json_path("socialProof", key),
                    json_path(key),
                    Strategy("random", lambda view: rng.randrange(*bounds)),
                ],
                as_int,
                bounds[0],
            )
            return max(value, 0)

        total_customers = counter("totalCustomers", TOTAL_CUSTOMERS_RANGE)
        average_rating = state.pick(
            "socialProof.averageRating",
            [
                json_path("socialProof", "averageRating"),
                json_path("averageRating"),
                Strategy(
                    "random",
                    lambda view: round(rng.uniform(*AVERAGE_RATING_RANGE), 1),
                ),
            ],
            as_float,
            AVERAGE_RATING_RANGE[1],
        )
        countries_served = counter("countriesServed", COUNTRIES_SERVED_RANGE)
        monthly_users = counter("monthlyUsers", MONTHLY_USERS_RANGE)
        return SocialProof(
            total_customers=total_customers,
            average_rating=min(max(average_rating, 0.0), 5.0),
            countries_served=countries_served,
            monthly_users=monthly_users,
        )
