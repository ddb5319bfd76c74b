"""
CMS Content
-----------
Read-only collections for the marketing pages. When the CMS has no active
rows, a static default collection is returned instead.
"""

from AuraBoard.models import CMSBrand, CMSStat, CMSTestimonial

DEFAULT_STATS = [
    {"id": "default-1", "label": "Years of Excellence", "value": "20+", "description": "Pioneering smart home integration", "icon": "Calendar"},
    {"id": "default-2", "label": "Projects Completed", "value": "500+", "description": "Luxury residences worldwide", "icon": "Building"},
    {"id": "default-3", "label": "Premium Partners", "value": "50+", "description": "World-class brands", "icon": "Users"},
    {"id": "default-4", "label": "Client Satisfaction", "value": "99%", "description": "Five-star service", "icon": "Star"},
]

DEFAULT_TESTIMONIALS = [
    {
        "id": "default-1",
        "name": "James Morrison",
        "role": "Luxury Home Owner",
        "content": "AURA has transformed our home. The integration of our Lutron lighting and Crestron systems is flawless.",
        "rating": 5,
    },
    {
        "id": "default-2",
        "name": "Priya Raman",
        "role": "Interior Designer",
        "content": "The moodboards make it effortless to walk clients through finishes and technology in one place.",
        "rating": 5,
    },
]

DEFAULT_BRANDS = [
    {"id": "1", "name": "Lutron", "logoUrl": None},
    {"id": "2", "name": "Crestron", "logoUrl": None},
    {"id": "3", "name": "Basalte", "logoUrl": None},
    {"id": "4", "name": "C SEED", "logoUrl": None},
    {"id": "5", "name": "Sonos", "logoUrl": None},
    {"id": "6", "name": "Steinway Lyngdorf", "logoUrl": None},
    {"id": "7", "name": "Bowers & Wilkins", "logoUrl": None},
    {"id": "8", "name": "Control4", "logoUrl": None},
]

# icon tag -> icon component rendered by the web layer
ICON_MAP = {
    "Calendar": "calendar",
    "Building": "building",
    "Users": "users",
    "Star": "star",
    "Award": "award",
    "Globe": "globe",
    "Zap": "zap",
    "Shield": "shield",
}
DEFAULT_ICON = "Star"


def resolve_icon(tag):
    return ICON_MAP.get(tag or DEFAULT_ICON, ICON_MAP[DEFAULT_ICON])


def _active(model):
    return model.query.filter_by(active=True).order_by(model.sort_order, model.id).all()


def _with_defaults(rows, defaults):
    if rows:
        return [row.to_dict() for row in rows]
    return [dict(item) for item in defaults]


def get_stats():
    stats = _with_defaults(_active(CMSStat), DEFAULT_STATS)
    for stat in stats:
        stat["iconKey"] = resolve_icon(stat.get("icon"))
    return stats


def get_testimonials():
    return _with_defaults(_active(CMSTestimonial), DEFAULT_TESTIMONIALS)


def get_brands():
    return _with_defaults(_active(CMSBrand), DEFAULT_BRANDS)
