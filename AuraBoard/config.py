from dotenv import load_dotenv
import os

# ===================================================
# 🏗 BASE CONFIG PATH SETUP
# ===================================================
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
INSTANCE_PATH = os.path.join(BASE_DIR, "instance")
os.makedirs(INSTANCE_PATH, exist_ok=True)

load_dotenv()


def _env_flag(name, default="false"):
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


# ===================================================
# ⚙️ MAIN CONFIG CLASS
# ===================================================

class Config:
    # --------------------------------------------------
    # 🔐 CORE APP SETTINGS
    # --------------------------------------------------
    SECRET_KEY = os.getenv("SECRET_KEY", "dev_only_change_me")
    DEBUG = _env_flag("FLASK_DEBUG")
    TESTING = False

    # --------------------------------------------------
    # 🗄 DATABASE
    # --------------------------------------------------
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "sqlite:///" + os.path.join(INSTANCE_PATH, "auraboard.db")
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # --------------------------------------------------
    # 📧 MAIL SETTINGS
    # --------------------------------------------------
    MAIL_SERVER = os.environ.get("MAIL_SERVER", "smtp.gmail.com")
    MAIL_PORT = int(os.environ.get("MAIL_PORT", 587))
    MAIL_USE_TLS = _env_flag("MAIL_USE_TLS", "true")
    MAIL_USE_SSL = _env_flag("MAIL_USE_SSL")
    MAIL_USERNAME = os.environ.get("MAIL_USERNAME", "")
    MAIL_PASSWORD = os.environ.get("MAIL_PASSWORD", "")
    MAIL_DEFAULT_SENDER = os.environ.get("MAIL_DEFAULT_SENDER", MAIL_USERNAME or "noreply@trescentlifestyles.com")
    MAIL_SUPPRESS_SEND = _env_flag("MAIL_SUPPRESS_SEND")

    # --------------------------------------------------
    # 🌍 CORS
    # --------------------------------------------------
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # --------------------------------------------------
    # 🎨 MOODBOARD PIPELINE
    # --------------------------------------------------
    MOODBOARD_REPLY_TO_EMAIL = os.environ.get("MOODBOARD_REPLY_TO_EMAIL", "info@trescentlifestyles.com")
    MOODBOARD_REPLY_TO_NAME = os.environ.get("MOODBOARD_REPLY_TO_NAME", "Trescent Team")
    MOODBOARD_DEFAULT_LAYOUT = os.environ.get("MOODBOARD_DEFAULT_LAYOUT", "magazine")
    MOODBOARD_GRID_ROWS_PER_PAGE = int(os.environ.get("MOODBOARD_GRID_ROWS_PER_PAGE", 4))

    # Bounded retries for share token collisions
    SHARE_TOKEN_MAX_ATTEMPTS = int(os.environ.get("SHARE_TOKEN_MAX_ATTEMPTS", 5))

    # Used to build flipbook / pdf links in emails
    PUBLIC_BASE_URL = os.environ.get("PUBLIC_BASE_URL", "http://localhost:5050").rstrip("/")

    # --------------------------------------------------
    # 🖼 PRODUCT ASSETS
    # --------------------------------------------------
    ASSET_FOLDER = os.environ.get("ASSET_FOLDER", os.path.join(BASE_DIR, "attached_assets"))
    ASSET_FETCH_TIMEOUT = int(os.environ.get("ASSET_FETCH_TIMEOUT", 10))

    # Cloudflare R2 (S3 API) for "r2://" image references
    R2_ACCOUNT_ID = os.environ.get("R2_ACCOUNT_ID", "")
    R2_ACCESS_KEY_ID = os.environ.get("R2_ACCESS_KEY_ID", "")
    R2_SECRET_ACCESS_KEY = os.environ.get("R2_SECRET_ACCESS_KEY", "")
    R2_BUCKET = os.environ.get("R2_BUCKET", "")

    # --------------------------------------------------
    # 🏢 BRAND INFO
    # --------------------------------------------------
    COMPANY_NAME = "Trescent Lifestyles"
    COMPANY_TAGLINE = "Architectural Intelligence"
    COMPANY_EMAIL = "info@trescentlifestyles.com"

    # --------------------------------------------------
    # 📝 LOGGING
    # --------------------------------------------------
    LOG_FOLDER = os.path.join(BASE_DIR, "logs")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    MAIL_SUPPRESS_SEND = True
    MAIL_DEFAULT_SENDER = "noreply@example.com"
    PUBLIC_BASE_URL = "http://testserver"
