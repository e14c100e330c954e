# app/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Hosted platform (Creator REST API v2)
PLATFORM_BASE_URL = os.getenv("PLATFORM_BASE_URL", "https://creator.zoho.com/api/v2")
PLATFORM_OWNER = os.getenv("PLATFORM_OWNER", "")
APP_NAME = os.getenv("PLATFORM_APP_NAME", "zoma")
# Sent verbatim as the Authorization header, e.g. "Zoho-oauthtoken <token>"
PLATFORM_AUTH = os.getenv("PLATFORM_AUTH", "")
PLATFORM_TIMEOUT = float(os.getenv("PLATFORM_TIMEOUT", "30"))

# Retry policy for every report call
RETRIES = int(os.getenv("PLATFORM_RETRIES", "2"))
RETRY_DELAY = float(os.getenv("PLATFORM_RETRY_DELAY", "0.6"))

# Job list
JOBS_REPORT = os.getenv("JOBS_REPORT", "All_Orders_Design")
JOBS_CRITERIA = os.getenv("JOBS_CRITERIA", '(Design_Status == "Under Design")')
PAGE_SIZE = int(os.getenv("JOBS_PAGE_SIZE", "200"))

# Related reports for the detail view, linked by the parent record ID
PRODUCT_REPORT = os.getenv("PRODUCT_REPORT", "Job_Details_Report")
PRODUCT_LINK_FIELD = os.getenv("PRODUCT_LINK_FIELD", "Job_No_Link")
CONSUMPTION_REPORT = os.getenv("CONSUMPTION_REPORT", "Design_Consumption_Report")
CONSUMPTION_LINK_FIELD = os.getenv("CONSUMPTION_LINK_FIELD", "Job_Link_No")
DETAIL_PAGE_SIZE = int(os.getenv("DETAIL_PAGE_SIZE", "100"))

# Optional JSON file replacing the built-in category profiles
PROFILES_PATH = os.getenv("PROFILES_PATH") or None
