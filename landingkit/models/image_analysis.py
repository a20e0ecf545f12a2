# landingkit/models/image_analysis.py

"""Vision analysis record for a single product image."""

from dataclasses import dataclass, field

SAFE_SEARCH_CATEGORIES: tuple[str, ...] = (
    "adult",
    "spoof",
    "medical",
    "violence",
    "racy",
)


def _default_safe_search() -> dict[str, str]:
    return {name: "VERY_UNLIKELY" for name in SAFE_SEARCH_CATEGORIES}


@dataclass(frozen=True)
class ImageAnalysis:
    """Labels and confidence produced by a vision provider for one image."""

    labels: list[str] = field(default_factory=lambda: list[str]())
    is_product_image: bool = False
    confidence: float = 0.0
    safe_search: dict[str, str] = field(
        default_factory=_default_safe_search
    )
    dominant_colors: list[str] = field(
        default_factory=lambda: list[str]()
    )
    text_annotations: list[str] = field(
        default_factory=lambda: list[str]()
    )
    image_url: str = ""
    provider: str = ""
