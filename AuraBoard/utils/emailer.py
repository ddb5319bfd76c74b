from dataclasses import dataclass, field
from smtplib import SMTPException
from typing import List

from flask import current_app
from flask_mail import BadHeaderError, Message
from markupsafe import escape

from AuraBoard.extensions import mail
from AuraBoard.services.errors import DeliveryFailure


@dataclass
class DeliveryReceipt:
    moodboard_id: str
    share_token: str
    recipients: List[str] = field(default_factory=list)


def flipbook_url(share_token):
    return f"{current_app.config['PUBLIC_BASE_URL']}/view/{share_token}"


def _header_text(value):
    # mail headers cannot carry CR/LF
    return " ".join(str(value).split())


def _moodboard_html(moodboard, recipient_name, link):
    project = escape(moodboard.project_name or "your project")
    return f"""
    <h2>Your moodboard for {project}</h2>
    <p>Hi {escape(recipient_name or "there")},</p>
    <p>{escape(moodboard.user_name)} curated a collection of products for {project}.
    The full presentation is attached as a PDF and can also be viewed online:</p>
    <p><a href="{link}">{link}</a></p>
    <br><br>
    <small style='color:#555'>{current_app.config.get('COMPANY_NAME', '')}</small>
    """


def send_moodboard_email(moodboard, document, reply_to_email, reply_to_name=None):
    """
    Email the rendered moodboard to the requester and, when asked, the designer.

    One message per recipient. The first transport error stops delivery and
    raises DeliveryFailure listing who already received it.
    """
    reply_to_name = _header_text(reply_to_name or "")
    reply_to = f"{reply_to_name} <{reply_to_email}>" if reply_to_name else reply_to_email
    link = flipbook_url(moodboard.share_token)
    subject = _header_text(f"Your Moodboard: {moodboard.project_name or 'Curated Selection'}")

    targets = [(moodboard.user_email, moodboard.user_name)]
    if moodboard.send_to_designer and moodboard.designer_email:
        targets.append((moodboard.designer_email, moodboard.designer_name))

    delivered = []
    for email, name in targets:
        msg = Message(
            subject=subject,
            recipients=[email],
            reply_to=reply_to,
            html=_moodboard_html(moodboard, name, link),
        )
        msg.attach(
            filename=document.file_name,
            content_type="application/pdf",
            data=document.pdf_bytes,
        )

        try:
            mail.send(msg)
        except (SMTPException, OSError, BadHeaderError) as e:
            current_app.logger.error(
                "[moodboard %s] delivery to %s failed: %s", moodboard.share_token, email, e
            )
            raise DeliveryFailure(
                f"Could not deliver moodboard to {email}",
                delivered=delivered,
                failed_recipient=email,
                cause=e,
            ) from e

        delivered.append(email)
        current_app.logger.info("[moodboard %s] delivered to %s", moodboard.share_token, email)

    return DeliveryReceipt(moodboard.id, moodboard.share_token, delivered)
