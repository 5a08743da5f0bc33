"""Translate between Strapi's German-named attributes and the domain entities.

Word cloud (collection type ``word-cloud``):
    documentId, titel, beschreibung, istAktiv, sortierung, woerter[],
    hintergrundfarbe, textfarbe, hoverfarbe, maxBreite, maxHoehe,
    createdAt, updatedAt, publishedAt

Word (component ``word-cloud.wort``):
    id, text, gewichtung, farbe, link, istExternerLink, beschreibung

Site configuration (single type ``seiten-config``):
    id, documentId, seitenTitel, seitenBeschreibung, primaryColor, ...
"""

from datetime import datetime, timezone
from typing import Any

from wordclouds.application.schemas import WordCloudCreate, WordCloudUpdate, WordSchema
from wordclouds.domain.entities import (
    DEFAULT_WEIGHT,
    INHERIT_COLOR,
    AuthResult,
    AuthUser,
    SiteConfig,
    Word,
    WordCloudRecord,
)
from wordclouds.domain.exceptions import CmsError

_WORD_CLOUD_FIELDS = {
    "title": "titel",
    "description": "beschreibung",
    "background_color": "hintergrundfarbe",
    "text_color": "textfarbe",
    "hover_color": "hoverfarbe",
    "is_active": "istAktiv",
    "sort_order": "sortierung",
    "max_width": "maxBreite",
    "max_height": "maxHoehe",
}

_SITE_CONFIG_FIELDS = {
    "title": "seitenTitel",
    "description": "seitenBeschreibung",
    "primary_color": "primaryColor",
    "secondary_color": "secondaryColor",
    "background_color": "backgroundColor",
    "text_color": "textColor",
    "header_color": "headerColor",
    "footer_color": "footerColor",
    "contact_email": "kontaktEmail",
    "phone": "telefon",
    "address": "adresse",
    "custom_css": "customCSS",
}


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def unwrap(body: Any) -> Any:
    """Return ``body["data"]`` from a Strapi envelope."""
    if not isinstance(body, dict) or "data" not in body:
        raise CmsError("Response is missing the 'data' envelope")
    return body["data"]


# ── Word clouds ──────────────────────────────────────────────────────


def word_from_cms(data: dict[str, Any]) -> Word:
    raw_id = data.get("id")
    return Word(
        id=str(raw_id) if raw_id is not None else None,
        text=data.get("text") or "",
        weight=DEFAULT_WEIGHT if data.get("gewichtung") is None else data["gewichtung"],
        color=data.get("farbe") or INHERIT_COLOR,
        link=data.get("link") or None,
        is_external_link=bool(data.get("istExternerLink", False)),
        description=data.get("beschreibung"),
    )


def word_to_cms(word: WordSchema) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "text": word.text,
        "gewichtung": word.weight,
        "farbe": word.color,
        "link": word.link,
        "istExternerLink": word.is_external_link,
        "beschreibung": word.description,
    }
    # Only server-assigned component ids mean anything to Strapi.
    if word.id is not None and word.id.isdigit():
        payload["id"] = int(word.id)
    return payload


def word_cloud_from_cms(data: dict[str, Any]) -> WordCloudRecord:
    try:
        record_id = data.get("documentId") or data["id"]
        now = datetime.now(timezone.utc)
        return WordCloudRecord(
            id=str(record_id),
            title=data.get("titel") or "",
            description=data.get("beschreibung"),
            words=[word_from_cms(w) for w in data.get("woerter") or []],
            background_color=data.get("hintergrundfarbe") or "#ffffff",
            text_color=data.get("textfarbe") or "#111827",
            hover_color=data.get("hoverfarbe") or "#4f46e5",
            is_active=bool(data.get("istAktiv", True)),
            sort_order=int(data.get("sortierung") or 0),
            max_width=data.get("maxBreite"),
            max_height=data.get("maxHoehe"),
            created_at=_parse_datetime(data.get("createdAt")) or now,
            updated_at=_parse_datetime(data.get("updatedAt")) or now,
            published_at=_parse_datetime(data.get("publishedAt")),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise CmsError(f"Malformed word cloud in response: {exc}") from exc


def word_cloud_to_cms(data: WordCloudCreate | WordCloudUpdate) -> dict[str, Any]:
    """Strapi attributes for the fields the DTO carries (all of them for create)."""
    if isinstance(data, WordCloudUpdate):
        present = data.model_fields_set
    else:
        present = set(type(data).model_fields)

    payload = {
        cms_name: getattr(data, name)
        for name, cms_name in _WORD_CLOUD_FIELDS.items()
        if name in present
    }
    if "words" in present and data.words is not None:
        payload["woerter"] = [word_to_cms(w) for w in data.words]
    return payload


# ── Site configuration ───────────────────────────────────────────────


def site_config_from_cms(data: dict[str, Any]) -> SiteConfig:
    if not isinstance(data, dict) or not data.get("seitenTitel"):
        raise CmsError("No site configuration found")
    values = {name: data.get(cms_name) for name, cms_name in _SITE_CONFIG_FIELDS.items()}
    values["primary_color"] = values["primary_color"] or "#4f46e5"
    values["background_color"] = values["background_color"] or "#f9fafb"
    return SiteConfig(id=data.get("id"), document_id=data.get("documentId"), **values)


def site_config_to_cms(config: SiteConfig) -> dict[str, Any]:
    return {cms_name: getattr(config, name) for name, cms_name in _SITE_CONFIG_FIELDS.items()}


# ── Auth ─────────────────────────────────────────────────────────────


def auth_result_from_cms(data: Any) -> AuthResult:
    if not isinstance(data, dict) or not data.get("jwt") or not isinstance(data.get("user"), dict):
        raise CmsError("Login response did not contain a token")
    user = data["user"]
    return AuthResult(
        jwt=data["jwt"],
        user=AuthUser(
            id=user.get("id"),
            username=user.get("username") or "",
            email=user.get("email") or "",
            confirmed=bool(user.get("confirmed", True)),
            blocked=bool(user.get("blocked", False)),
        ),
    )
