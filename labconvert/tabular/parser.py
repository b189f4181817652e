"""pandas-backed parser turning CSV and XLSX lab exports into structured reports."""

import asyncio
import io
import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

import pandas as pd

from labconvert.converter.models import StructuredReport
from labconvert.logging.logger import Log
from labconvert.tabular.base import BaseTabularParser, TabularPayload
from labconvert.tabular.exceptions import TabularParseError
from labconvert.tabular.formats import column_aliases

_UNIT_HEADER = re.compile(r"^(?P<element>.+?)\s*\((?P<unit>[^)]*)\)\s*$")

Row = dict[str, Any]


@dataclass(frozen=True)
class _Sheet:
    name: str | None
    headers: list[str]
    rows: list[Row]


@dataclass(frozen=True)
class _Analyte:
    header: str
    element: str
    unit: str | None


@dataclass
class _Columns:
    meta: dict[str, str] = field(default_factory=dict)
    analytes: list[_Analyte] = field(default_factory=list)


class TabularParser(BaseTabularParser):
    """Reads CSV text or XLSX bytes and groups rows into one report per report id."""

    def __init__(self, log: Log | None = None) -> None:
        self._log = log if log is not None else Log()

    async def parse(self, payload: TabularPayload) -> list[StructuredReport]:
        try:
            aliases = column_aliases(payload.format)
        except ValueError as exc:
            raise TabularParseError(str(exc)) from exc

        if payload.text is not None:
            sheets = await asyncio.to_thread(self._read_csv, payload.text)
        elif payload.data is not None:
            sheets = await asyncio.to_thread(self._read_xlsx, payload.data)
        else:
            raise TabularParseError("Tabular payload carries neither text nor bytes")

        reports: list[StructuredReport] = []
        usable_sheets = 0
        for sheet in sheets:
            columns = self._resolve_columns(sheet.headers, aliases)
            if "sample_number" not in columns.meta:
                self._log.debug(f"Sheet {sheet.name!r} has no sample number column, skipping")
                continue
            usable_sheets += 1
            reports.extend(self._sheet_reports(sheet.name, sheet.rows, columns))

        if usable_sheets == 0:
            raise TabularParseError("No sheet contains a sample number column")
        self._log.debug(f"Parsed {len(reports)} report(s) from {len(sheets)} sheet(s)")
        return reports

    @staticmethod
    def _read_csv(text: str) -> list[_Sheet]:
        try:
            frame = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False)
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
            raise TabularParseError(f"CSV could not be read: {exc}") from exc
        return [_sheet(None, frame)]

    @staticmethod
    def _read_xlsx(data: bytes) -> list[_Sheet]:
        try:
            frames = pd.read_excel(io.BytesIO(data), sheet_name=None, engine="openpyxl")
        except Exception as exc:
            raise TabularParseError(f"XLSX could not be read: {exc}") from exc
        return [_sheet(str(name), frame) for name, frame in frames.items()]

    @staticmethod
    def _resolve_columns(headers: list[str], aliases: dict[str, tuple[str, ...]]) -> _Columns:
        columns = _Columns()
        for header in headers:
            normalized = header.strip().lower()
            if not normalized or normalized.startswith("unnamed:"):
                continue
            meta_key = next(
                (key for key, names in aliases.items() if normalized in names), None
            )
            if meta_key is not None:
                columns.meta.setdefault(meta_key, header)
                continue
            match = _UNIT_HEADER.match(header.strip())
            if match:
                columns.analytes.append(
                    _Analyte(header, match["element"], match["unit"].strip() or None)
                )
            else:
                columns.analytes.append(_Analyte(header, header.strip(), None))
        return columns

    def _sheet_reports(
        self,
        sheet_name: str | None,
        rows: list[Row],
        columns: _Columns,
    ) -> list[StructuredReport]:
        groups: dict[str, list[Row]] = {}
        for row in rows:
            if _text(row.get(columns.meta["sample_number"])) is None:
                continue
            key = _text(row.get(columns.meta.get("report_id", ""))) or ""
            groups.setdefault(key, []).append(row)

        reports: list[StructuredReport] = []
        for position, (report_id, group_rows) in enumerate(groups.items(), start=1):
            description = None
            if sheet_name is not None:
                description = sheet_name if len(groups) == 1 else f"{sheet_name}_{position}"
            reports.append(_build_report(report_id, description, group_rows, columns))
        return reports


def _build_report(
    report_id: str,
    description: str | None,
    rows: list[Row],
    columns: _Columns,
) -> StructuredReport:
    event_date = _first_text(rows, columns.meta.get("date"))
    lab_name = _first_text(rows, columns.meta.get("lab_name"))

    report_ref: dict[str, str] = {}
    if report_id:
        report_ref["ReportID"] = report_id
    if description:
        report_ref["FileDescription"] = description

    event_meta: dict[str, Any] = {"EventType": {"Soil": True}}
    if event_date:
        event_meta["EventDate"] = event_date
    lab_meta: dict[str, Any] = {"Reports": [report_ref] if report_ref else []}
    if lab_name:
        lab_meta["LabName"] = lab_name

    return {
        "Events": [
            {
                "EventMetaData": event_meta,
                "LabMetaData": lab_meta,
                "EventSamples": {
                    "Soil": {
                        "SoilSamples": [_build_sample(row, report_id, columns) for row in rows]
                    }
                },
            }
        ]
    }


def _build_sample(row: Row, report_id: str, columns: _Columns) -> dict[str, Any]:
    sample_meta: dict[str, Any] = {"SampleNumber": _text(row.get(columns.meta["sample_number"]))}
    if report_id:
        sample_meta["ReportID"] = report_id

    results = []
    for analyte in columns.analytes:
        value = _number(row.get(analyte.header))
        if value is None:
            continue
        result: dict[str, Any] = {"Element": analyte.element, "Value": value}
        if analyte.unit:
            result["ValueUnit"] = analyte.unit
        results.append(result)

    depth: dict[str, Any] = {"NutrientResults": results}
    depth_id = _text(row.get(columns.meta.get("depth", "")))
    if depth_id:
        depth["DepthID"] = depth_id
    return {"SampleMetaData": sample_meta, "Depths": [depth]}


def _sheet(name: str | None, frame: pd.DataFrame) -> _Sheet:
    headers = [str(header) for header in frame.columns]
    frame = frame.astype(object).where(frame.notna(), None)
    rows = [
        {str(header): value for header, value in record.items()}
        for record in frame.to_dict(orient="records")
    ]
    return _Sheet(name=name, headers=headers, rows=rows)


def _first_text(rows: list[Row], header: str | None) -> str | None:
    if header is None:
        return None
    for row in rows:
        value = _text(row.get(header))
        if value:
            return value
    return None


def _text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if value.is_integer():
            return str(int(value))
    text = str(value).strip()
    return text or None


def _number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return None if math.isnan(value) else float(value)
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return None if math.isnan(number) else number
