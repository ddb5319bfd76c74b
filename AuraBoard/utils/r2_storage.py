import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError
from flask import current_app


def _r2_client():
    account_id = current_app.config["R2_ACCOUNT_ID"]
    endpoint_url = f"https://{account_id}.r2.cloudflarestorage.com"

    return boto3.client(
        "s3",
        endpoint_url=endpoint_url,
        aws_access_key_id=current_app.config["R2_ACCESS_KEY_ID"],
        aws_secret_access_key=current_app.config["R2_SECRET_ACCESS_KEY"],
        region_name="auto",
        config=Config(signature_version="s3v4"),
    )


def r2_configured() -> bool:
    cfg = current_app.config
    return all(cfg.get(k) for k in ("R2_ACCOUNT_ID", "R2_ACCESS_KEY_ID", "R2_SECRET_ACCESS_KEY", "R2_BUCKET"))


def r2_get_bytes(key: str) -> bytes:
    """
    Download an object from the product asset bucket.
    Raises LookupError when the object cannot be read.
    """
    bucket = current_app.config["R2_BUCKET"]
    try:
        obj = _r2_client().get_object(Bucket=bucket, Key=key.lstrip("/"))
        return obj["Body"].read()
    except (BotoCoreError, ClientError) as e:
        raise LookupError(f"r2 object {key} unavailable: {e}") from e
