# AuraBoard/models/product_models.py
from AuraBoard.extensions import db
from datetime import datetime
import uuid


def _uuid():
    return str(uuid.uuid4())


# ====================================
# 📦 PRODUCT CATALOG
# ====================================
class Product(db.Model):
    __tablename__ = "product"

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    name = db.Column(db.String(255), nullable=False)
    brand = db.Column(db.String(120))
    category = db.Column(db.String(120))
    description = db.Column(db.Text)
    images = db.Column(db.JSON, default=list)
    image_type = db.Column(db.String(50))               # close-up / lifestyle
    lifestyle_images = db.Column(db.JSON, default=list)
    orientation = db.Column(db.String(20))              # landscape / portrait / square
    aspect_ratio = db.Column(db.String(20))             # e.g. "1.50"
    has_variants = db.Column(db.Boolean, default=False)
    tags = db.Column(db.JSON, default=list)
    featured = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    variants = db.relationship(
        "ProductVariant",
        back_populates="product",
        order_by="ProductVariant.position",
        cascade="all, delete-orphan",
        lazy=True
    )

    def __repr__(self):
        return f"<Product {self.name} ({self.brand})>"

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "category": self.category,
            "description": self.description,
            "images": list(self.images or []),
            "imageType": self.image_type,
            "lifestyleImages": list(self.lifestyle_images or []),
            "orientation": self.orientation,
            "aspectRatio": self.aspect_ratio,
            "hasVariants": bool(self.has_variants),
            "tags": list(self.tags or []),
            "featured": bool(self.featured),
            "variants": [v.to_dict() for v in self.variants],
        }


class ProductVariant(db.Model):
    """A finish option of a product, with its own imagery."""
    __tablename__ = "product_variant"

    id = db.Column(db.String(36), primary_key=True, default=_uuid)
    product_id = db.Column(db.String(36), db.ForeignKey("product.id"), nullable=False)
    finish_name = db.Column(db.String(120), nullable=False)
    images = db.Column(db.JSON, default=list)
    orientation = db.Column(db.String(20))
    aspect_ratio = db.Column(db.String(20))
    is_default = db.Column(db.Boolean, default=False)
    position = db.Column(db.Integer, default=0)

    product = db.relationship("Product", back_populates="variants")

    def __repr__(self):
        return f"<ProductVariant {self.finish_name} Product:{self.product_id}>"

    def to_dict(self):
        return {
            "id": self.id,
            "finishName": self.finish_name,
            "images": list(self.images or []),
            "orientation": self.orientation,
            "aspectRatio": self.aspect_ratio,
            "isDefault": bool(self.is_default),
        }
