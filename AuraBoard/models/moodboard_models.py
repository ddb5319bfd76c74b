# AuraBoard/models/moodboard_models.py
from AuraBoard.extensions import db
from AuraBoard.services.errors import InvalidMoodboard
from dataclasses import dataclass
from datetime import datetime
from sqlalchemy.orm import validates
from typing import Optional
import uuid


# ====================================
# 🧩 PRODUCT SELECTION (stored in product_data)
# ====================================
@dataclass(frozen=True)
class ProductSelection:
    product_id: str
    selected_image_index: int = 0
    selected_finish_index: Optional[int] = None

    @classmethod
    def from_dict(cls, raw):
        if not isinstance(raw, dict):
            raise InvalidMoodboard("Each product selection must be an object")

        product_id = raw.get("productId") or raw.get("product_id") or raw.get("id")
        if not product_id:
            raise InvalidMoodboard("Product selection is missing productId")

        image_index = raw.get("selectedImageIndex", raw.get("selected_image_index", 0))
        finish_index = raw.get("selectedFinishIndex", raw.get("selected_finish_index"))

        try:
            image_index = int(image_index or 0)
            finish_index = int(finish_index) if finish_index is not None else None
        except (TypeError, ValueError):
            raise InvalidMoodboard(f"Invalid selection indexes for product {product_id}")

        return cls(str(product_id), image_index, finish_index)

    def to_dict(self):
        return {
            "productId": self.product_id,
            "selectedImageIndex": self.selected_image_index,
            "selectedFinishIndex": self.selected_finish_index,
        }


# ====================================
# 🎨 MOODBOARD
# ====================================
class Moodboard(db.Model):
    __tablename__ = "moodboard"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    share_token = db.Column(db.String(22), unique=True, nullable=False, index=True)

    # Requester
    user_name = db.Column(db.String(255), nullable=False)
    user_email = db.Column(db.String(255), nullable=False)
    user_type = db.Column(db.String(50))                # homeowner / designer

    # Project
    client_name = db.Column(db.String(255))
    project_name = db.Column(db.String(255))
    project_location = db.Column(db.String(255))
    project_details = db.Column(db.Text)

    # Designer routing
    send_to_designer = db.Column(db.Boolean, default=False)
    designer_email = db.Column(db.String(255))
    designer_name = db.Column(db.String(255))

    # Profiling
    property_type = db.Column(db.String(100))
    property_size = db.Column(db.String(100))
    project_timeline = db.Column(db.String(100))
    budget_range = db.Column(db.String(100))
    primary_interests = db.Column(db.JSON, default=list)

    # Curated selections, in curation order
    product_data = db.Column(db.JSON, default=list)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Owned by downstream AURA / CRM processing
    aura_processed = db.Column(db.Boolean, default=False)
    aura_processed_at = db.Column(db.DateTime, nullable=True)
    crm_status = db.Column(db.String(50), nullable=True)
    crm_notes = db.Column(db.Text, nullable=True)

    @validates("share_token")
    def _freeze_share_token(self, key, value):
        current = self.share_token
        if current is not None and value != current:
            raise ValueError("share_token is immutable once assigned")
        return value

    @property
    def selections(self):
        return [ProductSelection.from_dict(raw) for raw in (self.product_data or [])]

    def __repr__(self):
        return f"<Moodboard {self.id} token:{self.share_token}>"

    def to_dict(self):
        return {
            "id": self.id,
            "shareToken": self.share_token,
            "userName": self.user_name,
            "userEmail": self.user_email,
            "userType": self.user_type,
            "clientName": self.client_name,
            "projectName": self.project_name,
            "projectLocation": self.project_location,
            "projectDetails": self.project_details,
            "sendToDesigner": bool(self.send_to_designer),
            "designerEmail": self.designer_email,
            "designerName": self.designer_name,
            "propertyType": self.property_type,
            "propertySize": self.property_size,
            "projectTimeline": self.project_timeline,
            "budgetRange": self.budget_range,
            "primaryInterests": list(self.primary_interests or []),
            "productData": list(self.product_data or []),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "auraProcessed": bool(self.aura_processed),
            "crmStatus": self.crm_status,
        }


@dataclass(frozen=True)
class SelectedProduct:
    """A stored selection joined with its catalog product."""
    selection: ProductSelection
    product: object
