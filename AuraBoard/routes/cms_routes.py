from flask import Blueprint, jsonify

from AuraBoard.services.cms_content import get_brands, get_stats, get_testimonials

cms_bp = Blueprint("cms", __name__, url_prefix="/api/cms")


@cms_bp.route("/stats")
def stats():
    return jsonify(get_stats())


@cms_bp.route("/testimonials")
def testimonials():
    return jsonify(get_testimonials())


@cms_bp.route("/brands")
def brands():
    return jsonify(get_brands())
