from AuraBoard.extensions import mail
from AuraBoard.models import Moodboard, Product
from send_test_email import send_sample_email


def test_sample_email_is_sent_without_touching_the_database(app):
    with mail.record_messages() as outbox:
        document, receipt = send_sample_email(
            "someone@example.com",
            image="/attached_assets/products/square.png",
            reply_to_email="info@trescentlifestyles.com",
            reply_to_name="Trescent Team",
        )

    assert receipt.recipients == ["someone@example.com"]
    assert document.degraded_assets == []
    assert len(outbox) == 1
    assert outbox[0].attachments[0].data == document.pdf_bytes
    assert Moodboard.query.count() == 0
    assert Product.query.count() == 0


def test_sample_email_with_missing_image_uses_placeholder(app):
    with mail.record_messages() as outbox:
        document, _ = send_sample_email("someone@example.com", reply_to_email="info@example.com")

    assert document.degraded_assets
    assert len(outbox) == 1
