"""Domain entity for the singleton site configuration."""

from dataclasses import dataclass


@dataclass
class SiteConfig:
    """Site-wide presentation settings.

    Every field is enumerated here instead of travelling as an open
    key/value bag; colours are ``#``-prefixed hex strings.
    """

    title: str
    primary_color: str
    background_color: str
    id: int | None = None
    document_id: str | None = None
    description: str | None = None
    secondary_color: str | None = None
    text_color: str | None = None
    header_color: str | None = None
    footer_color: str | None = None
    contact_email: str | None = None
    phone: str | None = None
    address: str | None = None
    custom_css: str | None = None


def fallback_site_config() -> SiteConfig:
    """Configuration used when the content store cannot supply one."""
    return SiteConfig(
        id=0,
        document_id="",
        title="Mannar - Spirituelle Begleitung",
        description="Peer-Begleitung und spirituelle Unterstützung",
        primary_color="#4f46e5",
        secondary_color="#10b981",
        background_color="#f9fafb",
        text_color="#111827",
        header_color="#1f2937",
        footer_color="#374151",
    )
