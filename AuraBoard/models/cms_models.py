# AuraBoard/models/cms_models.py
from AuraBoard.extensions import db
from datetime import datetime


# ====================================
# 📊 CMS CONTENT (read-only here)
# ====================================
class CMSStat(db.Model):
    __tablename__ = "cms_stat"

    id = db.Column(db.Integer, primary_key=True)
    label = db.Column(db.String(120), nullable=False)
    value = db.Column(db.String(50), nullable=False)
    description = db.Column(db.String(255))
    icon = db.Column(db.String(50))
    active = db.Column(db.Boolean, default=True)
    sort_order = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": str(self.id),
            "label": self.label,
            "value": self.value,
            "description": self.description,
            "icon": self.icon,
        }


class CMSTestimonial(db.Model):
    __tablename__ = "cms_testimonial"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    role = db.Column(db.String(120))
    content = db.Column(db.Text, nullable=False)
    rating = db.Column(db.Integer, default=5)
    active = db.Column(db.Boolean, default=True)
    sort_order = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "id": str(self.id),
            "name": self.name,
            "role": self.role,
            "content": self.content,
            "rating": self.rating,
        }


class CMSBrand(db.Model):
    __tablename__ = "cms_brand"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    logo_url = db.Column(db.String(255))
    active = db.Column(db.Boolean, default=True)
    sort_order = db.Column(db.Integer, default=0)

    def to_dict(self):
        return {"id": str(self.id), "name": self.name, "logoUrl": self.logo_url}
