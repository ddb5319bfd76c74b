"""
Creates a moodboard from the first catalog products and emails it.

    python create_test_moodboard.py --email someone@example.com --products 3
"""

import argparse

from AuraBoard.app import create_app
from AuraBoard.services.moodboard_service import create_moodboard, render_and_deliver
from AuraBoard.services.moodboard_store import MoodboardStore
from run import log


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create and send a test moodboard")
    parser.add_argument("--email", required=True)
    parser.add_argument("--name", default="Test User")
    parser.add_argument("--project", default="Test Project")
    parser.add_argument("--products", type=int, default=1)
    parser.add_argument("--layout", default="magazine")
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        products = MoodboardStore().list_products()[: args.products]
        if not products:
            log(" No products found in database")
            return 1

        moodboard = create_moodboard({
            "userName": args.name,
            "userEmail": args.email,
            "userType": "homeowner",
            "projectName": args.project,
            "primaryInterests": ["Complete Automation"],
            "productData": [{"productId": p.id, "selectedImageIndex": 0} for p in products],
        })
        log(f" Moodboard created: {moodboard.id}")
        log(f" Share token: {moodboard.share_token}")

        outcome = render_and_deliver(moodboard.id, args.layout)
        if not outcome.ok:
            log(f" {outcome.stage} failed: {outcome.error.message if outcome.error else outcome.status}")
            return 1

        log(f" Sent {outcome.page_count} pages to {', '.join(outcome.recipients)}")
        log(f" View flipbook at: /view/{moodboard.share_token}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
