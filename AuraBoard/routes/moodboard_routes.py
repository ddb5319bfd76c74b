import io

from flask import Blueprint, current_app, jsonify, request, send_file

from AuraBoard.services import moodboard_service
from AuraBoard.services.errors import InvalidMoodboard
from AuraBoard.services.moodboard_store import MoodboardStore
from AuraBoard.utils.flipbook import SPREAD, VIEW_MODES, spread_pages, total_spreads

moodboard_bp = Blueprint("moodboards", __name__, url_prefix="/api")

OUTCOME_HTTP_STATUS = {
    moodboard_service.DELIVERED: 200,
    moodboard_service.NOT_FOUND: 404,
    moodboard_service.RENDER_FAILED: 500,
    moodboard_service.DELIVERY_FAILED: 502,
}


# =========================================================
# ✍️ CREATE MOODBOARD
# =========================================================
@moodboard_bp.route("/moodboards", methods=["POST"])
def create_moodboard():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidMoodboard("Expected a JSON object")

    moodboard = moodboard_service.create_moodboard(data)
    payload = moodboard.to_dict()

    if data.get("deliver"):
        outcome = moodboard_service.render_and_deliver(moodboard.id, data.get("layoutStyle"))
        payload["delivery"] = outcome.to_dict()

    return jsonify(payload), 201


# =========================================================
# 📧 RENDER + DELIVER (also used for regeneration)
# =========================================================
@moodboard_bp.route("/moodboards/<ref>/deliver", methods=["POST"])
def deliver_moodboard(ref):
    data = request.get_json(silent=True) or {}
    outcome = moodboard_service.regenerate(
        ref,
        layout_style=data.get("layoutStyle"),
        reply_to_email=data.get("replyToEmail"),
        reply_to_name=data.get("replyToName"),
    )
    return jsonify(outcome.to_dict()), OUTCOME_HTTP_STATUS[outcome.status]


# =========================================================
# 🔗 PUBLIC SHARE LINK
# =========================================================
@moodboard_bp.route("/moodboards/share/<token>")
def share(token):
    view = moodboard_service.resolve_flipbook(token, request.args.get("layoutStyle"))
    return jsonify(view.to_dict())


@moodboard_bp.route("/pdf/<token>")
def pdf_inline(token):
    return _pdf_response(token, as_attachment=False)


@moodboard_bp.route("/pdf/<token>/download")
def pdf_download(token):
    return _pdf_response(token, as_attachment=True)


@moodboard_bp.route("/pdf/<token>/spreads/<int:spread_index>")
def pdf_spread(token, spread_index):
    mode = request.args.get("mode", SPREAD)
    if mode not in VIEW_MODES:
        mode = SPREAD

    view = moodboard_service.resolve_flipbook(token, request.args.get("layoutStyle"))
    return jsonify({
        "shareToken": token,
        "mode": mode,
        "spread": spread_index,
        "pages": spread_pages(spread_index, view.page_count, mode),
        "totalSpreads": total_spreads(view.page_count, mode),
    })


def _pdf_response(token, as_attachment):
    document = moodboard_service.render_for_token(token, request.args.get("layoutStyle"))
    resp = send_file(
        io.BytesIO(document.pdf_bytes),
        mimetype="application/pdf",
        as_attachment=as_attachment,
        download_name=document.file_name,
    )
    resp.headers["Cache-Control"] = "no-store"
    return resp


# =========================================================
# 📦 CATALOG
# =========================================================
@moodboard_bp.route("/products")
def list_products():
    products = MoodboardStore().list_products()
    current_app.logger.debug("Serving %s products", len(products))
    return jsonify([p.to_dict() for p in products])
