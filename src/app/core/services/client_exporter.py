"""Render client lists as CSV or spreadsheet files."""
import csv
import io
import logging
from collections.abc import Callable, Sequence
from typing import Any

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from src.app.core.domain.models import Client, ExportFormat
from src.shared.exceptions import ExportFailure

logger = logging.getLogger(__name__)


def _created_at_text(client: Client) -> str | None:
    return client.created_at.isoformat() if client.created_at else None


# Column key -> (header label, value getter). Getters return None for empty cells.
EXPORT_COLUMNS: dict[str, tuple[str, Callable[[Client], Any]]] = {
    "id": ("ID", lambda client: client.id),
    "shared_key": ("Shared Key", lambda client: client.shared_key),
    "name": ("Name", lambda client: client.name),
    "email": ("Email", lambda client: str(client.email)),
    "phone": ("Phone", lambda client: client.phone),
    "created_at": ("Created At", _created_at_text),
}

DEFAULT_COLUMNS = ("id", "shared_key", "name", "email", "phone", "created_at")


def _worksheet_value(value: Any) -> Any:
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


class ClientExporter:
    """
    Encodes clients into downloadable tabular files.

    The column set is fixed per instance and shared by both encodings, so a
    CSV and a spreadsheet export of the same clients carry the same header.
    Rows keep the order of the input list.
    """

    def __init__(self, columns: Sequence[str] = DEFAULT_COLUMNS, sheet_name: str = "Clients"):
        unknown = [column for column in columns if column not in EXPORT_COLUMNS]
        if unknown:
            raise ValueError(f"Unknown export columns: {', '.join(unknown)}")
        if not columns:
            raise ValueError("At least one export column is required")
        self.columns = tuple(columns)
        self.sheet_name = sheet_name

    @property
    def headers(self) -> list[str]:
        return [EXPORT_COLUMNS[column][0] for column in self.columns]

    def row(self, client: Client) -> list[Any]:
        return [EXPORT_COLUMNS[column][1](client) for column in self.columns]

    def export(self, clients: Sequence[Client], export_format: ExportFormat) -> bytes:
        if export_format is ExportFormat.CSV:
            return self.to_csv(clients)
        return self.to_excel(clients)

    def to_csv(self, clients: Sequence[Client]) -> bytes:
        """
        Encode clients as UTF-8 CSV with a header row.

        Raises:
            ExportFailure: If the CSV writer fails
        """
        buffer = io.StringIO()
        try:
            writer = csv.writer(buffer)
            writer.writerow(self.headers)
            for client in clients:
                writer.writerow(["" if value is None else value for value in self.row(client)])
        except (csv.Error, OSError) as e:
            logger.error("CSV export of %d clients failed: %s", len(clients), e)
            raise ExportFailure(ExportFormat.CSV, str(e)) from e
        return buffer.getvalue().encode("utf-8")

    def to_excel(self, clients: Sequence[Client]) -> bytes:
        """
        Encode clients as an .xlsx workbook with a single sheet.

        Empty values are left as blank cells. Control characters the format
        cannot hold are removed from text cells.

        Raises:
            ExportFailure: If a value cannot be stored or the workbook cannot be written
        """
        workbook = Workbook()
        buffer = io.BytesIO()
        try:
            sheet = workbook.active
            sheet.title = self.sheet_name
            sheet.append(self.headers)
            for client in clients:
                sheet.append([_worksheet_value(value) for value in self.row(client)])
            workbook.save(buffer)
        except (ValueError, OSError) as e:
            logger.error("Spreadsheet export of %d clients failed: %s", len(clients), e)
            raise ExportFailure(ExportFormat.EXCEL, str(e)) from e
        finally:
            workbook.close()
        return buffer.getvalue()
