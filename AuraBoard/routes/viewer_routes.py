from flask import Blueprint, current_app, render_template, request

from AuraBoard.services import moodboard_service

viewer_bp = Blueprint("viewer", __name__)


@viewer_bp.route("/view/<token>")
def flipbook(token):
    """Paged web view of a shared moodboard."""
    view = moodboard_service.resolve_flipbook(token, request.args.get("layoutStyle"))
    return render_template(
        "flipbook.html",
        view=view,
        company_name=current_app.config.get("COMPANY_NAME"),
    )
