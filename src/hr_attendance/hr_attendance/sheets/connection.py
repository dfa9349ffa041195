from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Optional

import gspread
from google.oauth2 import service_account

logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
]


@dataclass
class SheetsConfig:
    service_account_json: str
    spreadsheet_id: str
    punch_worksheet: str = "attendance_import"


class SheetsConnection:
    """Singleton-like Google Sheets client factory.

    Note: the gspread client is authorized lazily and reused; worksheets are
    opened per operation so a renamed/recreated tab is picked up.
    """

    _instance: Optional["SheetsConnection"] = None

    def __init__(self, config: SheetsConfig):
        self._config = config
        self._client: Optional[gspread.Client] = None

    @classmethod
    def get_instance(cls, config: SheetsConfig) -> "SheetsConnection":
        if cls._instance is None:
            cls._instance = SheetsConnection(config)
        return cls._instance

    @property
    def config(self) -> SheetsConfig:
        return self._config

    def client(self) -> gspread.Client:
        if self._client is None:
            if not self._config.service_account_json:
                raise RuntimeError("Service account JSON is empty/not configured")
            info = json.loads(self._config.service_account_json)
            credentials = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
            self._client = gspread.authorize(credentials)
            logger.info("Google Sheets client authorized")
        return self._client

    def worksheet(self, title: str) -> gspread.Worksheet:
        if not self._config.spreadsheet_id:
            raise RuntimeError("Spreadsheet ID is empty/not configured")
        spreadsheet = self.client().open_by_key(self._config.spreadsheet_id)
        return spreadsheet.worksheet(title)
