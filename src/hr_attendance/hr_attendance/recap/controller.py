from __future__ import annotations

import csv
import io
from datetime import date

import pandas as pd
from flask import Flask, jsonify, send_file

from ..container import Container
from ..core.exceptions import StoreError
from .service import DAILY_COLUMNS, RECAP_COLUMNS

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def _labelled(rows: list[dict], columns: list[tuple[str, str]]) -> list[dict]:
        return [{header: row[key] for header, key in columns} for row in rows]

    def _write_csv(*, rows: list[dict], columns: list[tuple[str, str]], filename: str):
        """Write report rows to CSV response (Excel-friendly utf-8-sig)."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=[header for header, _ in columns])
        writer.writeheader()
        for row in _labelled(rows, columns):
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    def _write_xlsx(*, rows: list[dict], columns: list[tuple[str, str]], sheet_name: str, filename: str):
        df = pd.DataFrame(_labelled(rows, columns), columns=[header for header, _ in columns])

        # Ghi vào file Excel trong bộ nhớ (không lưu ra ổ cứng)
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=sheet_name)
        output.seek(0)

        return send_file(output, download_name=filename, as_attachment=True, mimetype=XLSX_MIMETYPE)

    def _stamp() -> str:
        return date.today().isoformat()

    def _with_report(render):
        """Build the report once and render it; a store failure becomes a 500."""
        try:
            data = container.report_service.build_attendance_report()
        except StoreError:
            return jsonify({"error": "Failed to fetch attendance data"}), 500
        return render(data)

    @app.route("/api/attendance/report", methods=["GET"], endpoint="api_attendance_report")
    def api_attendance_report():
        return _with_report(lambda data: jsonify(data.rows))

    @app.route("/api/attendance/recap", methods=["GET"], endpoint="api_attendance_recap")
    def api_attendance_recap():
        return _with_report(lambda data: jsonify(data.summary))

    @app.route("/attendance/report.csv", methods=["GET"], endpoint="attendance_report_csv")
    def attendance_report_csv():
        return _with_report(
            lambda data: _write_csv(
                rows=data.rows, columns=DAILY_COLUMNS, filename=f"attendance_report_{_stamp()}.csv"
            )
        )

    @app.route("/attendance/report.xlsx", methods=["GET"], endpoint="attendance_report_xlsx")
    def attendance_report_xlsx():
        return _with_report(
            lambda data: _write_xlsx(
                rows=data.rows,
                columns=DAILY_COLUMNS,
                sheet_name="Attendance Report",
                filename=f"attendance_report_{_stamp()}.xlsx",
            )
        )

    @app.route("/attendance/recap.csv", methods=["GET"], endpoint="attendance_recap_csv")
    def attendance_recap_csv():
        return _with_report(
            lambda data: _write_csv(
                rows=data.summary, columns=RECAP_COLUMNS, filename=f"attendance_recap_{_stamp()}.csv"
            )
        )

    @app.route("/attendance/recap.xlsx", methods=["GET"], endpoint="attendance_recap_xlsx")
    def attendance_recap_xlsx():
        return _with_report(
            lambda data: _write_xlsx(
                rows=data.summary,
                columns=RECAP_COLUMNS,
                sheet_name="Attendance Recap",
                filename=f"attendance_recap_{_stamp()}.xlsx",
            )
        )
