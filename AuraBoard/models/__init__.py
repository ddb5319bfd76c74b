# AuraBoard/models/__init__.py
from AuraBoard.extensions import db

# ======================================================
# 📦 Catalog (read-only for the moodboard pipeline)
# ======================================================
from AuraBoard.models.product_models import Product, ProductVariant

# ======================================================
# 🎨 Moodboards
# ======================================================
from AuraBoard.models.moodboard_models import Moodboard, ProductSelection, SelectedProduct

# ======================================================
# 📊 CMS Content
# ======================================================
from AuraBoard.models.cms_models import CMSStat, CMSTestimonial, CMSBrand

__all__ = [
    "db",
    "Product",
    "ProductVariant",
    "Moodboard",
    "ProductSelection",
    "SelectedProduct",
    "CMSStat",
    "CMSTestimonial",
    "CMSBrand",
]
