"""
Moodboard Service
-----------------
Creation, render + delivery, regeneration and the public share-token read
path. Each call is one independent unit of work; nothing is cached between
calls.
"""

import json
from dataclasses import dataclass, field
from typing import List, Optional

from flask import current_app

from AuraBoard.models import Moodboard, ProductSelection
from AuraBoard.services.errors import (
    DeliveryFailure,
    InvalidMoodboard,
    MoodboardError,
    NotFound,
    RenderFailure,
    ShareTokenExhausted,
    TokenCollision,
)
from AuraBoard.services.moodboard_store import MoodboardStore
from AuraBoard.utils.emailer import flipbook_url, send_moodboard_email
from AuraBoard.utils.flipbook import SPREAD, total_spreads
from AuraBoard.utils.moodboard_layout import resolve_moodboard_layout
from AuraBoard.utils.pdf_generator import render_moodboard_pdf
from AuraBoard.utils.share_token import generate_share_token

# payload key -> Moodboard column
MOODBOARD_FIELDS = {
    "userName": "user_name",
    "userEmail": "user_email",
    "userType": "user_type",
    "clientName": "client_name",
    "projectName": "project_name",
    "projectLocation": "project_location",
    "projectDetails": "project_details",
    "sendToDesigner": "send_to_designer",
    "designerEmail": "designer_email",
    "designerName": "designer_name",
    "propertyType": "property_type",
    "propertySize": "property_size",
    "projectTimeline": "project_timeline",
    "budgetRange": "budget_range",
    "primaryInterests": "primary_interests",
    "productData": "product_data",
}

DELIVERED = "delivered"
NOT_FOUND = "not_found"
RENDER_FAILED = "render_failed"
DELIVERY_FAILED = "delivery_failed"


@dataclass
class DeliveryOutcome:
    status: str
    stage: str
    moodboard_id: Optional[str] = None
    share_token: Optional[str] = None
    recipients: List[str] = field(default_factory=list)
    layout_style: Optional[str] = None
    page_count: int = 0
    degraded_assets: List[str] = field(default_factory=list)
    error: Optional[MoodboardError] = None

    @property
    def ok(self):
        return self.status == DELIVERED

    @property
    def resend_safe(self):
        # the document was built; only the email leg needs repeating
        return self.status == DELIVERY_FAILED

    def to_dict(self):
        return {
            "status": self.status,
            "stage": self.stage,
            "moodboardId": self.moodboard_id,
            "shareToken": self.share_token,
            "recipients": self.recipients,
            "layoutStyle": self.layout_style,
            "pageCount": self.page_count,
            "degradedAssets": self.degraded_assets,
            "resendSafe": self.resend_safe,
            "error": self.error.to_dict() if self.error else None,
        }


@dataclass
class FlipbookView:
    moodboard_id: str
    share_token: str
    project_name: Optional[str]
    page_count: int
    layout_style: str
    layout: List = field(default_factory=list)

    def to_dict(self):
        base = current_app.config["PUBLIC_BASE_URL"]
        return {
            "id": self.moodboard_id,
            "shareToken": self.share_token,
            "projectName": self.project_name,
            "pageCount": self.page_count,
            "totalSpreads": total_spreads(self.page_count, SPREAD),
            "layoutStyle": self.layout_style,
            "flipbookUrl": flipbook_url(self.share_token),
            "pdfUrl": f"{base}/api/pdf/{self.share_token}",
            "downloadUrl": f"{base}/api/pdf/{self.share_token}/download",
            "layout": [slot.to_dict() for slot in self.layout],
        }


# =========================================================
# ✍️ CREATE
# =========================================================
def _parse_product_data(raw):
    if raw is None:
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw or "[]")
        except ValueError:
            raise InvalidMoodboard("productData is not valid JSON")
    if not isinstance(raw, list):
        raise InvalidMoodboard("productData must be a list of selections")
    return [ProductSelection.from_dict(item) for item in raw]


TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off", "")


def _parse_flag(value, name):
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_VALUES:
            return True
        if text in FALSE_VALUES:
            return False
    raise InvalidMoodboard(f"{name} must be a boolean", value=value)


def _moodboard_fields(payload):
    fields = {}
    for key, column in MOODBOARD_FIELDS.items():
        if key in payload:
            fields[column] = payload[key]
        elif column in payload:
            fields[column] = payload[column]

    if "shareToken" in payload or "share_token" in payload:
        raise InvalidMoodboard("shareToken is assigned by the system")

    for required in ("user_name", "user_email"):
        value = str(fields.get(required) or "").strip()
        if not value:
            raise InvalidMoodboard(f"{required} is required")
        fields[required] = value
    if "@" not in fields["user_email"]:
        raise InvalidMoodboard("user_email is not a valid email address")

    fields["send_to_designer"] = _parse_flag(fields.get("send_to_designer"), "sendToDesigner")
    if fields["send_to_designer"] and not fields.get("designer_email"):
        raise InvalidMoodboard("designer_email is required when send_to_designer is set")

    interests = fields.get("primary_interests") or []
    if not isinstance(interests, list):
        raise InvalidMoodboard("primaryInterests must be a list")
    fields["primary_interests"] = [str(i) for i in interests]

    return fields


def create_moodboard(payload, token_factory=None, store=None):
    """
    Persist a new moodboard with a freshly generated share token.

    A token collision triggers a new token and another insert, up to
    SHARE_TOKEN_MAX_ATTEMPTS times.
    """
    store = store or MoodboardStore()
    token_factory = token_factory or generate_share_token
    max_attempts = current_app.config.get("SHARE_TOKEN_MAX_ATTEMPTS", 5)

    fields = _moodboard_fields(payload)
    selections = _parse_product_data(fields.pop("product_data", None))
    for selection in selections:
        store.get_product(selection.product_id)
    product_data = [s.to_dict() for s in selections]

    for attempt in range(1, max_attempts + 1):
        moodboard = Moodboard(share_token=token_factory(), product_data=product_data, **fields)
        try:
            store.create(moodboard)
        except TokenCollision as e:
            current_app.logger.warning(
                "Share token collision on attempt %s/%s (%s), regenerating", attempt, max_attempts, e.token
            )
            continue

        current_app.logger.info(
            "Moodboard %s created with %s products (token %s)", moodboard.id, len(product_data), moodboard.share_token
        )
        return moodboard

    raise ShareTokenExhausted(
        f"Could not allocate a unique share token after {max_attempts} attempts",
        attempts=max_attempts,
    )


# =========================================================
# 🖨 RENDER
# =========================================================
def _moodboard_layout(moodboard, store):
    try:
        items = store.selected_products(moodboard)
    except InvalidMoodboard as e:
        raise RenderFailure(
            f"Stored selections for moodboard {moodboard.id} are malformed: {e.message}",
            moodboard_id=moodboard.id,
        ) from e
    return resolve_moodboard_layout(items)


def render_moodboard(moodboard, layout_style=None, store=None, asset_loader=None):
    store = store or MoodboardStore()
    layout = _moodboard_layout(moodboard, store)
    return render_moodboard_pdf(moodboard, layout, layout_style, asset_loader)


def render_for_token(token, layout_style=None, store=None, asset_loader=None):
    store = store or MoodboardStore()
    moodboard = store.get_by_share_token(token)
    return render_moodboard(moodboard, layout_style, store, asset_loader)


def resolve_flipbook(token, layout_style=None, store=None, asset_loader=None):
    """Public read path: share token -> viewable document state."""
    store = store or MoodboardStore()
    moodboard = store.get_by_share_token(token)
    layout = _moodboard_layout(moodboard, store)
    document = render_moodboard_pdf(moodboard, layout, layout_style, asset_loader)
    return FlipbookView(
        moodboard_id=moodboard.id,
        share_token=moodboard.share_token,
        project_name=moodboard.project_name,
        page_count=document.page_count,
        layout_style=document.layout_style,
        layout=layout,
    )


# =========================================================
# 📧 RENDER + DELIVER
# =========================================================
def render_and_deliver(ref, layout_style=None, reply_to_email=None, reply_to_name=None,
                       store=None, asset_loader=None):
    """
    Render the moodboard and email it. Never raises for pipeline failures:
    the returned DeliveryOutcome names the stage that failed.
    """
    store = store or MoodboardStore()
    cfg = current_app.config
    reply_to_email = reply_to_email or cfg.get("MOODBOARD_REPLY_TO_EMAIL")
    reply_to_name = reply_to_name or cfg.get("MOODBOARD_REPLY_TO_NAME")

    try:
        moodboard = store.get(ref)
    except NotFound as e:
        current_app.logger.warning("Delivery requested for unknown moodboard %s", ref)
        return DeliveryOutcome(NOT_FOUND, e.stage, error=e)

    outcome = DeliveryOutcome(
        status=DELIVERED,
        stage="complete",
        moodboard_id=moodboard.id,
        share_token=moodboard.share_token,
    )

    try:
        document = render_moodboard(moodboard, layout_style, store, asset_loader)
    except NotFound as e:
        current_app.logger.error("Moodboard %s references a missing product: %s", moodboard.id, e)
        outcome.status, outcome.stage, outcome.error = NOT_FOUND, e.stage, e
        return outcome
    except RenderFailure as e:
        current_app.logger.error("Render failed for moodboard %s: %s", moodboard.id, e)
        outcome.status, outcome.stage, outcome.error = RENDER_FAILED, e.stage, e
        return outcome

    outcome.layout_style = document.layout_style
    outcome.page_count = document.page_count
    outcome.degraded_assets = document.degraded_assets

    try:
        receipt = send_moodboard_email(moodboard, document, reply_to_email, reply_to_name)
    except DeliveryFailure as e:
        outcome.status, outcome.stage, outcome.error = DELIVERY_FAILED, e.stage, e
        outcome.recipients = e.delivered
        return outcome

    outcome.recipients = receipt.recipients
    current_app.logger.info(
        "Moodboard %s delivered (%s pages, %s KB) to %s",
        moodboard.id, document.page_count, document.size_kb, ", ".join(receipt.recipients)
    )
    return outcome


def regenerate(ref, layout_style=None, reply_to_email=None, reply_to_name=None,
               store=None, asset_loader=None):
    """Re-render and re-send an existing moodboard; its id and token stay as they are."""
    current_app.logger.info("Regenerating moodboard %s (%s)", ref, layout_style or "default layout")
    return render_and_deliver(ref, layout_style, reply_to_email, reply_to_name, store, asset_loader)
