SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

HR_EMAIL = "hr@example.com"

MAIL_CONFIG = {
    "host": "localhost",
    "port": 1025,
    "user": "tracker@example.com",
    "password": "",
    "use_tls": False,
    "from_name": "Sense Time Tracker",
}

COMPANY_NAME = "Sense Projects Pvt Ltd"

PDF_ENABLED = False

REPORT_ENDPOINT_URL = ""
REPORT_TIMEOUT_SECONDS = 5.0
