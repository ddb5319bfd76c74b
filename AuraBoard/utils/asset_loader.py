"""
Product image loading for the PDF renderer.

References can be:
  - http(s) URLs                 -> fetched with requests
  - r2://<key>                   -> Cloudflare R2 product bucket
  - anything else                -> path relative to ASSET_FOLDER
    ("/attached_assets/products/x.png" and "products/x.png" both work)
"""

import os

import requests
from flask import current_app

from AuraBoard.services.errors import AssetMissing
from AuraBoard.utils.r2_storage import r2_configured, r2_get_bytes

LOCAL_PREFIX = "attached_assets"


class AssetLoader:
    def __init__(self, asset_folder=None, timeout=None):
        cfg = current_app.config
        self.asset_folder = asset_folder or cfg.get("ASSET_FOLDER")
        self.timeout = timeout or cfg.get("ASSET_FETCH_TIMEOUT", 10)

    def load(self, reference) -> bytes:
        if not reference:
            raise AssetMissing(reference, "empty reference")

        reference = str(reference).strip()
        if reference.startswith(("http://", "https://")):
            return self._load_http(reference)
        if reference.startswith("r2://"):
            return self._load_r2(reference)
        return self._load_local(reference)

    def _load_http(self, url):
        try:
            resp = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise AssetMissing(url, str(e)) from e
        if resp.status_code >= 400:
            raise AssetMissing(url, f"http_{resp.status_code}")
        return resp.content

    def _load_r2(self, reference):
        if not r2_configured():
            raise AssetMissing(reference, "r2 not configured")
        try:
            return r2_get_bytes(reference[len("r2://"):])
        except LookupError as e:
            raise AssetMissing(reference, str(e)) from e

    def _load_local(self, reference):
        if not self.asset_folder:
            raise AssetMissing(reference, "asset folder not configured")

        relative = reference.lstrip("/")
        if relative.startswith(LOCAL_PREFIX + "/"):
            relative = relative[len(LOCAL_PREFIX) + 1:]

        root = os.path.abspath(self.asset_folder)
        path = os.path.abspath(os.path.join(root, relative))
        if os.path.commonpath([root, path]) != root:
            raise AssetMissing(reference, "outside asset folder")

        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise AssetMissing(reference, e.strerror or str(e)) from e
