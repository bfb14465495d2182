"""
Configuration for the Averroez site backend.
Only static settings live here; delivery settings are read at call time.
"""
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

APP_NAME = os.getenv("APP_NAME", "averroez_site")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Locale Configuration
DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en")
LOCALE_COOKIE_NAME = os.getenv("LOCALE_COOKIE_NAME", "locale")
LOCALE_COOKIE_MAX_AGE = int(os.getenv("LOCALE_COOKIE_MAX_AGE", str(60 * 60 * 24 * 365)))

# Contact form mail routing
CONTACT_FROM = os.getenv(
    "CONTACT_FROM", "Averroez Contact Form <onboarding@resend.dev>"
)
CONTACT_TO = [
    addr.strip()
    for addr in os.getenv("CONTACT_TO", "averroeztech@outlook.com").split(",")
    if addr.strip()
]
SITE_NAME = os.getenv("SITE_NAME", "Averroez")
