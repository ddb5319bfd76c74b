# run.py - AuraBoard service launcher
import os
from datetime import datetime

from AuraBoard.app import create_app
from AuraBoard.extensions import db

BASE_DIR = os.path.dirname(__file__)
LOG_DIR = os.path.join(BASE_DIR, "logs")
os.makedirs(LOG_DIR, exist_ok=True)
log_file = os.path.join(LOG_DIR, f"AuraBoard_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")


def log(msg):
    message = f"[{datetime.now().strftime('%Y-%m-%d %H:%M:%S')}] {msg}"
    print(message)
    with open(log_file, "a", encoding="utf-8") as f:
        f.write(message + "\n")


def start_server():
    app = create_app()

    if os.environ.get("AURABOARD_CREATE_TABLES", "false").lower() in ("1", "true", "yes"):
        with app.app_context():
            db.create_all()
        log(" Database tables ensured.")

    port = int(os.environ.get("PORT", 5050))
    log(f" Starting AuraBoard Flask server on port {port}...")
    app.run(host="0.0.0.0", port=port, debug=False)


if __name__ == "__main__":
    log(" Initializing AuraBoard service...")
    try:
        start_server()
    except KeyboardInterrupt:
        log(" AuraBoard service stopped manually.")
