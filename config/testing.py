SECRET_KEY = "test-secret"

SHEETS_CONFIG = {
    "service_account_json": "",
    "spreadsheet_id": "test-sheet",
    "punch_worksheet": "attendance_import",
}

CHECK_IN_TARGET = "08:00"
CHECK_OUT_TARGET = "17:00"
RECAP_GROUP_BY = "name"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
