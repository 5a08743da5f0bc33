"""Pydantic DTOs for the site configuration single type."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from wordclouds.domain.entities import INHERIT_COLOR, SiteConfig, normalize_color


class SiteConfigUpdate(BaseModel):
    """Full replacement of the site configuration."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    primary_color: str
    secondary_color: str | None = None
    background_color: str
    text_color: str | None = None
    header_color: str | None = None
    footer_color: str | None = None
    contact_email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)
    address: str | None = None
    custom_css: str | None = None

    @field_validator(
        "primary_color",
        "secondary_color",
        "background_color",
        "text_color",
        "header_color",
        "footer_color",
    )
    @classmethod
    def _hex_colors(cls, value: str | None) -> str | None:
        if value is None:
            return None
        color = normalize_color(value)
        if color == INHERIT_COLOR:
            raise ValueError("a concrete hex colour is required")
        return color

    def to_entity(self) -> SiteConfig:
        return SiteConfig(**self.model_dump())


class SiteConfigResponse(BaseModel):
    id: int | None
    document_id: str | None
    title: str
    description: str | None
    primary_color: str
    secondary_color: str | None
    background_color: str
    text_color: str | None
    header_color: str | None
    footer_color: str | None
    contact_email: str | None
    phone: str | None
    address: str | None
    custom_css: str | None

    model_config = {"from_attributes": True}
