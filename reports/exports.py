"""
Reports — Spreadsheet Exports

openpyxl workbooks for the asset register and the transaction report.
Each builder returns the .xlsx file as bytes.

@file reports/exports.py
"""

import io

from django.utils import timezone
from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

ASSET_COLUMNS = [
    ('Asset ID', 38),
    ('Code', 16),
    ('Name', 24),
    ('Type', 14),
    ('Status', 10),
    ('Department', 16),
    ('Description', 30),
    ('Created at', 20),
    ('Recipient', 16),
]

TRANSACTION_COLUMNS = [
    ('Type', 8),
    ('Batch', 18),
    ('Asset code', 16),
    ('Asset name', 24),
    ('Recipient', 16),
    ('Department', 16),
    ('Date', 12),
    ('Operator', 14),
    ('Notes', 30),
]


def _local(dt):
    return timezone.localtime(dt).strftime('%Y-%m-%d %H:%M') if dt else ''


def _workbook(title: str, columns) -> tuple[Workbook, object]:
    wb = Workbook()
    ws = wb.active
    ws.title = title
    ws.append([header for header, _ in columns])
    for index, (_, width) in enumerate(columns, start=1):
        ws.column_dimensions[get_column_letter(index)].width = width
    for cell in ws[1]:
        cell.font = Font(bold=True)
    ws.freeze_panes = 'A2'
    return wb, ws


def _to_bytes(wb: Workbook) -> bytes:
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def _append_text_row(ws, values) -> None:
    """Append a row; text that openpyxl would read as a formula stays text."""
    ws.append(values)
    for cell in ws[ws.max_row]:
        if cell.data_type == 'f':
            cell.data_type = 's'


def build_assets_workbook(assets) -> bytes:
    wb, ws = _workbook('Assets', ASSET_COLUMNS)
    for asset in assets:
        _append_text_row(ws, [
            str(asset.pk),
            asset.code or '',
            asset.name,
            asset.type,
            asset.get_status_display(),
            asset.department or '',
            asset.description or '',
            _local(asset.created_at),
            asset.last_stock_out.recipient if asset.last_stock_out else '',
        ])
    return _to_bytes(wb)


def build_transactions_workbook(rows: list[dict]) -> bytes:
    wb, ws = _workbook('Transactions', TRANSACTION_COLUMNS)
    for row in rows:
        _append_text_row(ws, [
            row['operation_type'],
            row['batch_no'] or '',
            row['asset_code'] or '',
            row['asset_name'] or '',
            row['recipient'] or '',
            row['department'] or '',
            row['date'].isoformat() if row['date'] else '',
            row['operator_name'] or '',
            row['notes'] or '',
        ])
    return _to_bytes(wb)


def attachment_name(prefix: str) -> str:
    return f'{prefix}_{timezone.localdate().isoformat()}.xlsx'
