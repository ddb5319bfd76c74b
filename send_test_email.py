"""
Sends a sample moodboard email so mail settings can be checked end to end.
Nothing is written to the database.

    python send_test_email.py --email someone@example.com
"""

import argparse
from datetime import datetime

from AuraBoard.app import create_app
from AuraBoard.models import Moodboard, Product, ProductSelection, SelectedProduct
from AuraBoard.services.errors import MoodboardError
from AuraBoard.utils.emailer import send_moodboard_email
from AuraBoard.utils.moodboard_layout import resolve_moodboard_layout
from AuraBoard.utils.pdf_generator import render_moodboard_pdf
from AuraBoard.utils.share_token import generate_share_token
from run import log


def send_sample_email(email, name="Test User", project="Test Project",
                      image="/attached_assets/products/test.png",
                      reply_to_email=None, reply_to_name=None, layout_style=None):
    """Render a throwaway one-product moodboard and email it to `email`."""
    product = Product(
        id="sample-product-1",
        name="Sentido 2-Button",
        brand="Basalte",
        category="Lighting Control",
        description="Elegant lighting control keypad",
        images=[image],
        lifestyle_images=[],
        orientation="square",
        aspect_ratio="1.0",
    )
    selection = ProductSelection(product.id)
    moodboard = Moodboard(
        id="sample",
        share_token=generate_share_token(),
        user_name=name,
        user_email=email,
        user_type="homeowner",
        project_name=project,
        send_to_designer=False,
        primary_interests=["Complete Automation"],
        product_data=[selection.to_dict()],
        created_at=datetime.utcnow(),
    )

    layout = resolve_moodboard_layout([SelectedProduct(selection, product)])
    document = render_moodboard_pdf(moodboard, layout, layout_style)
    receipt = send_moodboard_email(moodboard, document, reply_to_email, reply_to_name)
    return document, receipt


def main(argv=None):
    parser = argparse.ArgumentParser(description="Send a sample moodboard email")
    parser.add_argument("--email", required=True)
    parser.add_argument("--name", default="Test User")
    parser.add_argument("--image", default="/attached_assets/products/test.png")
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        cfg = app.config
        log(" Testing email generation and delivery...")
        try:
            document, receipt = send_sample_email(
                args.email,
                name=args.name,
                image=args.image,
                reply_to_email=cfg.get("MOODBOARD_REPLY_TO_EMAIL"),
                reply_to_name=cfg.get("MOODBOARD_REPLY_TO_NAME"),
            )
        except MoodboardError as e:
            log(f" Test email failed at stage '{e.stage}': {e.message}")
            return 1

        for note in document.degraded_assets:
            log(f"   placeholder used: {note}")
        log(f" Test email sent ({document.page_count} pages, {document.size_kb} KB)")
        log(f" Check {', '.join(receipt.recipients)} inbox (and spam folder)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
