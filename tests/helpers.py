"""In-memory lab-report payloads shared by unit and integration tests."""

import io
import zipfile

import pandas as pd

SOIL_CSV = (
    "SampleNumber,ReportID,Date,Lab,Depth,P (ppm),K (ppm),pH\n"
    "101,R1,2024-05-01,A&L Labs,0-6,23,150,6.4\n"
    "102,R1,2024-05-01,A&L Labs,0-6,19,131,6.8\n"
)

TWO_REPORT_CSV = (
    "SampleNumber,ReportID,Date,P (ppm)\n"
    "101,R1,2024-05-01,23\n"
    "201,R2,2024-06-01,41\n"
    "102,R1,2024-05-01,19\n"
)

EVENT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<ModusResult Version="1.0">
  <Events>
    <Event>
      <EventMetaData>
        <EventCode>E-1</EventCode>
        <EventDate>2024-05-01</EventDate>
        <EventType><Soil/></EventType>
      </EventMetaData>
      <LabMetaData>
        <LabName>A&amp;L Labs</LabName>
        <Reports>
          <Report ID="1"><ReportID>R1</ReportID></Report>
        </Reports>
      </LabMetaData>
    </Event>
  </Events>
</ModusResult>
"""

VALID_REPORT_JSON = (
    '{"Events": [{"EventMetaData": {"EventDate": "2024-05-01"},'
    ' "LabMetaData": {"Reports": [{"ReportID": "R1"}]}}]}'
)


def build_xlsx(sheets: dict[str, pd.DataFrame]) -> bytes:
    """Write the given frames to an in-memory workbook, one sheet per entry."""
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        for name, frame in sheets.items():
            frame.to_excel(writer, sheet_name=name, index=False)
    return buf.getvalue()


def build_zip(members: dict[str, bytes | str]) -> bytes:
    """Write the given members to an in-memory ZIP archive, in order."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as archive:
        for name, content in members.items():
            archive.writestr(name, content)
    return buf.getvalue()


def soil_frame(sample_numbers: list[int], report_id: str | None = None) -> pd.DataFrame:
    rows = []
    for sample_number in sample_numbers:
        row: dict[str, object] = {"SampleNumber": sample_number, "P (ppm)": 20 + sample_number % 7}
        if report_id is not None:
            row["ReportID"] = report_id
        rows.append(row)
    return pd.DataFrame(rows)

