"""
Re-renders an existing moodboard and re-sends it. The moodboard keeps its id
and share token.

    python regenerate_pdf.py <share-token-or-id> [--layout magazine]

Exit codes: 0 sent, 2 not found, 3 render failed (nothing sent),
4 delivery failed (document fine, safe to resend).
"""

import argparse

from AuraBoard.app import create_app
from AuraBoard.services import moodboard_service
from run import log

EXIT_CODES = {
    moodboard_service.DELIVERED: 0,
    moodboard_service.NOT_FOUND: 2,
    moodboard_service.RENDER_FAILED: 3,
    moodboard_service.DELIVERY_FAILED: 4,
}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Regenerate and resend a moodboard PDF")
    parser.add_argument("ref", help="moodboard id or share token")
    parser.add_argument("--layout", default=None)
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        log(f" Regenerating moodboard {args.ref}...")
        outcome = moodboard_service.regenerate(args.ref, args.layout)

        if outcome.ok:
            log(f" PDF regenerated ({outcome.page_count} pages, {outcome.layout_style})")
            for note in outcome.degraded_assets:
                log(f"   placeholder used: {note}")
            log(f" Sent to {', '.join(outcome.recipients)}")
            log(f" View at: /view/{outcome.share_token}")
        else:
            log(f" Failed at stage '{outcome.stage}': {outcome.error.message if outcome.error else outcome.status}")
            if outcome.resend_safe:
                log(" Document rendered fine; resending is safe.")
                if outcome.recipients:
                    log(f" Already delivered to: {', '.join(outcome.recipients)}")

    return EXIT_CODES[outcome.status]


if __name__ == "__main__":
    raise SystemExit(main())
