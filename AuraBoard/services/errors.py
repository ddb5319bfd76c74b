"""
Moodboard Pipeline Errors
-------------------------
Every error names the pipeline stage it came from so callers (routes,
regeneration scripts) can tell a failed render from a failed delivery.
"""


class MoodboardError(Exception):
    stage = "pipeline"
    http_status = 500

    def __init__(self, message, **details):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self):
        payload = {
            "error": self.message,
            "type": self.__class__.__name__,
            "stage": self.stage,
        }
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidMoodboard(MoodboardError):
    stage = "validate"
    http_status = 400


class TokenCollision(MoodboardError):
    """The share token is already claimed by another moodboard."""
    stage = "persist"
    http_status = 409

    def __init__(self, token):
        super().__init__("Share token already in use")
        self.token = token


class ShareTokenExhausted(MoodboardError):
    stage = "persist"
    http_status = 500


class NotFound(MoodboardError):
    stage = "lookup"
    http_status = 404


class RenderFailure(MoodboardError):
    stage = "render"
    http_status = 500


class AssetMissing(MoodboardError):
    """A single image could not be loaded; rendering substitutes a placeholder."""
    stage = "render"

    def __init__(self, reference, reason):
        super().__init__(f"Asset unavailable: {reference} ({reason})")
        self.reference = reference
        self.reason = reason


class DeliveryFailure(MoodboardError):
    stage = "delivery"
    http_status = 502

    def __init__(self, message, delivered=None, failed_recipient=None, cause=None):
        super().__init__(
            message,
            delivered=list(delivered or []),
            failed_recipient=failed_recipient,
            cause=str(cause) if cause else None,
        )
        self.delivered = list(delivered or [])
        self.failed_recipient = failed_recipient
        self.cause = cause
