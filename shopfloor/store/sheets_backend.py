"""Google Sheets 行存储后端

通过 Sheets v4 values API 读写整张工作表，第一行是表头。
- 读取范围 <sheet>!A:ZZ，API 会省略行尾的空单元格
- 追加/更新使用 valueInputOption=RAW
- 删除行需要先查出工作表的数字 sheetId，再调用 batchUpdate
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from ..errors import StoreUnavailable
from .backends import Row, RowBackend

logger = logging.getLogger(__name__)


class SheetsBackend(RowBackend):
    def __init__(
        self,
        spreadsheet_id: str,
        api_key: str = "",
        access_token: Optional[str] = None,
        base_url: str = "https://sheets.googleapis.com/v4/spreadsheets",
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        headers = {}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        self.client = client or httpx.Client(timeout=timeout)
        self._headers = headers

    def _url(self, suffix: str) -> str:
        return f"{self.base_url}/{self.spreadsheet_id}{suffix}"

    def _values_url(self, range_: str, action: str = "") -> str:
        return self._url(f"/values/{quote(range_, safe='')}{action}")

    def _request(self, method: str, url: str, params: Optional[Dict[str, Any]] = None, json: Any = None) -> Dict[str, Any]:
        params = dict(params or {})
        if self.api_key:
            params["key"] = self.api_key
        try:
            resp = self.client.request(method, url, params=params, json=json, headers=self._headers)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Google Sheets %s %s failed: %s", method, url, exc)
            raise StoreUnavailable(f"Google Sheets request failed: {exc}") from exc
        if not resp.content:
            return {}
        return resp.json()

    def _values(self, sheet: str) -> List[List[str]]:
        result = self._request("GET", self._values_url(f"{sheet}!A:ZZ"))
        return result.get("values", [])

    def _ensure_header(self, sheet: str, values: List[List[str]], row: Row) -> List[str]:
        """返回表头；记录里有新字段时把它们追加到表头"""
        header = list(values[0]) if values else []
        missing = [key for key in row if key not in header]
        if missing:
            header.extend(missing)
            self._request(
                "PUT",
                self._values_url(f"{sheet}!A1:ZZ1"),
                params={"valueInputOption": "RAW"},
                json={"values": [header]},
            )
        return header

    def _sheet_id(self, sheet: str) -> int:
        spreadsheet = self._request("GET", self._url(""))
        for entry in spreadsheet.get("sheets", []):
            props = entry.get("properties", {})
            if props.get("title") == sheet:
                return props.get("sheetId", 0)
        raise StoreUnavailable(f"Sheet {sheet} not found in spreadsheet")

    def read_rows(self, sheet: str) -> List[Row]:
        values = self._values(sheet)
        if not values:
            return []
        header = values[0]
        rows = []
        for raw in values[1:]:
            rows.append({name: (raw[i] if i < len(raw) else "") for i, name in enumerate(header)})
        return rows

    def append_row(self, sheet: str, row: Row) -> None:
        header = self._ensure_header(sheet, self._values(sheet), row)
        self._request(
            "POST",
            self._values_url(sheet, ":append"),
            params={"valueInputOption": "RAW"},
            json={"values": [[row.get(name, "") for name in header]]},
        )

    def update_row(self, sheet: str, index: int, row: Row) -> None:
        header = self._ensure_header(sheet, self._values(sheet), row)
        row_number = index + 2  # 第1行是表头
        self._request(
            "PUT",
            self._values_url(f"{sheet}!A{row_number}:ZZ{row_number}"),
            params={"valueInputOption": "RAW"},
            json={"values": [[row.get(name, "") for name in header]]},
        )

    def delete_row(self, sheet: str, index: int) -> None:
        sheet_id = self._sheet_id(sheet)
        row_number = index + 2
        self._request(
            "POST",
            self._url(":batchUpdate"),
            json={
                "requests": [
                    {
                        "deleteDimension": {
                            "range": {
                                "sheetId": sheet_id,
                                "dimension": "ROWS",
                                "startIndex": row_number - 1,
                                "endIndex": row_number,
                            }
                        }
                    }
                ]
            },
        )
