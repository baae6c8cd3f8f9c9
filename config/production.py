import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

HR_EMAIL = os.getenv("HR_EMAIL", "hr@company.com")

MAIL_CONFIG = {
    "host": os.getenv("SMTP_HOST", "smtp.gmail.com"),
    "port": int(os.getenv("SMTP_PORT", "587")),
    "user": os.getenv("MAIL_USER", ""),
    "password": os.getenv("MAIL_PASS", ""),
    "use_tls": bool(int(os.getenv("SMTP_USE_TLS", "1"))),
    "from_name": os.getenv("MAIL_FROM_NAME", "Sense Time Tracker"),
}

COMPANY_NAME = os.getenv("COMPANY_NAME", "Sense Projects Pvt Ltd")

PDF_ENABLED = bool(int(os.getenv("PDF_ENABLED", "1")))

REPORT_ENDPOINT_URL = os.getenv("REPORT_ENDPOINT_URL", "")
REPORT_TIMEOUT_SECONDS = float(os.getenv("REPORT_TIMEOUT_SECONDS", "30"))
