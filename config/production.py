import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SHEETS_CONFIG = {
    "service_account_json": os.getenv("GOOGLE_SERVICE_ACCOUNT_JSON", ""),
    "spreadsheet_id": os.getenv("GOOGLE_SHEET_ID", ""),
    "punch_worksheet": os.getenv("PUNCH_WORKSHEET", "attendance_import"),
}

CHECK_IN_TARGET = os.getenv("CHECK_IN_TARGET", "08:00")
CHECK_OUT_TARGET = os.getenv("CHECK_OUT_TARGET", "17:00")

RECAP_GROUP_BY = os.getenv("RECAP_GROUP_BY", "name")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
