from smtplib import SMTPException

import pytest

from AuraBoard.extensions import mail
from AuraBoard.services.errors import DeliveryFailure
from AuraBoard.services.moodboard_service import render_moodboard
from AuraBoard.utils.emailer import send_moodboard_email


@pytest.fixture
def rendered(make_product, make_moodboard):
    def _rendered(**overrides):
        moodboard = make_moodboard([make_product(orientation="square")], **overrides)
        return moodboard, render_moodboard(moodboard, "standard")
    return _rendered


def test_sends_pdf_to_requester_only(rendered):
    moodboard, document = rendered()

    with mail.record_messages() as outbox:
        receipt = send_moodboard_email(moodboard, document, "info@trescentlifestyles.com", "Trescent Team")

    assert receipt.recipients == ["test@example.com"]
    assert len(outbox) == 1
    msg = outbox[0]
    assert msg.recipients == ["test@example.com"]
    assert msg.reply_to == "Trescent Team <info@trescentlifestyles.com>"
    assert f"/view/{moodboard.share_token}" in msg.html
    attachment = msg.attachments[0]
    assert attachment.content_type == "application/pdf"
    assert attachment.filename == document.file_name
    assert attachment.data == document.pdf_bytes


def test_designer_gets_a_copy_when_requested(rendered):
    moodboard, document = rendered(
        sendToDesigner=True, designerEmail="studio@example.com", designerName="Ana"
    )

    with mail.record_messages() as outbox:
        receipt = send_moodboard_email(moodboard, document, "info@trescentlifestyles.com")

    assert receipt.recipients == ["test@example.com", "studio@example.com"]
    assert [m.recipients for m in outbox] == [["test@example.com"], ["studio@example.com"]]
    assert "Ana" in outbox[1].html


def test_designer_email_ignored_without_flag(rendered):
    moodboard, document = rendered(designerEmail="studio@example.com")

    with mail.record_messages() as outbox:
        send_moodboard_email(moodboard, document, "info@trescentlifestyles.com")

    assert len(outbox) == 1


def test_transport_error_reports_partial_delivery(monkeypatch, rendered):
    moodboard, document = rendered(sendToDesigner=True, designerEmail="studio@example.com")
    sent = []

    def flaky_send(message):
        if message.recipients == ["studio@example.com"]:
            raise SMTPException("mailbox unavailable")
        sent.append(message)

    monkeypatch.setattr(mail, "send", flaky_send)

    with pytest.raises(DeliveryFailure) as exc:
        send_moodboard_email(moodboard, document, "info@trescentlifestyles.com")

    assert exc.value.stage == "delivery"
    assert exc.value.delivered == ["test@example.com"]
    assert exc.value.failed_recipient == "studio@example.com"
    assert len(sent) == 1


def test_line_breaks_are_folded_out_of_headers(rendered):
    moodboard, document = rendered(projectName="Villa\nPhase 2")

    with mail.record_messages() as outbox:
        receipt = send_moodboard_email(moodboard, document, "info@trescentlifestyles.com", "Trescent\r\nTeam")

    assert receipt.recipients == ["test@example.com"]
    assert outbox[0].subject == "Your Moodboard: Villa Phase 2"
    assert outbox[0].reply_to == "Trescent Team <info@trescentlifestyles.com>"


def test_bad_header_is_a_delivery_failure(rendered):
    moodboard, document = rendered()

    with mail.record_messages() as outbox:
        with pytest.raises(DeliveryFailure) as exc:
            send_moodboard_email(moodboard, document, "info@trescentlifestyles.com\nBcc: x@example.com")

    assert exc.value.stage == "delivery"
    assert exc.value.delivered == []
    assert exc.value.failed_recipient == "test@example.com"
    assert outbox == []
