"""End-to-end conversion with the default pandas, ElementTree, zipfile and pydantic collaborators."""

import base64
from unittest.mock import MagicMock

import pytest

from labconvert.config.settings import Settings
from labconvert.converter.converter import Converter
from labconvert.converter.factory import ConverterFactory
from labconvert.converter.models import InputFile
from labconvert.schema.validator import assert_structured_report
from tests.helpers import (
    EVENT_XML,
    SOIL_CSV,
    TWO_REPORT_CSV,
    VALID_REPORT_JSON,
    build_xlsx,
    build_zip,
    soil_frame,
)


@pytest.fixture()
def converter(log: MagicMock) -> Converter:
    return ConverterFactory.create(Settings(), log=log)


@pytest.mark.asyncio
class TestMixedBatch:
    async def test_skips_unknown_and_schema_invalid_files(
        self, converter: Converter, log: MagicMock
    ) -> None:
        files = [
            InputFile(filename="a.xml", text="<Events/>"),
            InputFile(filename="weird.txt"),
            InputFile(filename="b.json", text='{"bad":true}'),
        ]

        results = await converter.to_json(files)

        assert results == []
        kinds = [call.kwargs.get("error_kind") for call in log.warning.call_args_list]
        assert "UnknownTypeError" in kinds
        assert "SchemaValidationError" in kinds

    async def test_every_type_in_one_batch(
        self, converter: Converter, two_sheet_xlsx: bytes
    ) -> None:
        files = [
            InputFile(filename="lab/a.xml", text=EVENT_XML),
            InputFile(filename="b.json", text=VALID_REPORT_JSON),
            InputFile(filename="c.csv", text=TWO_REPORT_CSV),
            InputFile(filename="d.xlsx", base64=base64.b64encode(two_sheet_xlsx).decode()),
            InputFile(filename="e.csv", text=SOIL_CSV),
        ]

        results = await converter.to_json(files)

        assert [(r.original_type, r.output_filename) for r in results] == [
            ("xml", "lab/a.json"),
            ("json", "b.json"),
            ("csv", "c_0.json"),
            ("csv", "c_1.json"),
            ("xlsx", "dFieldA.json"),
            ("xlsx", "dFieldB.json"),
            ("csv", "e.json"),
        ]
        for result in results:
            assert_structured_report(result.structured_report)

    async def test_idempotent(self, converter: Converter, two_sheet_xlsx: bytes) -> None:
        files = [
            InputFile(filename="c.csv", text=TWO_REPORT_CSV),
            InputFile(filename="d.xlsx", arrbuf=two_sheet_xlsx),
            InputFile(filename="a.xml", text=EVENT_XML),
        ]

        first = await converter.to_json(files)
        second = await converter.to_json(files)

        assert first == second


@pytest.mark.asyncio
class TestArchives:
    async def test_zip_of_two_workbooks_named_by_members(self, converter: Converter) -> None:
        data = build_zip(
            {
                "north.xlsx": build_xlsx({"Grid": soil_frame([1, 2])}),
                "south.xlsx": build_xlsx({"Grid": soil_frame([3])}),
            }
        )

        results = await converter.to_json([InputFile(filename="season.zip", arrbuf=data)])

        assert [(r.original_filename, r.original_type, r.output_filename) for r in results] == [
            ("north.xlsx", "xlsx", "northGrid.json"),
            ("south.xlsx", "xlsx", "southGrid.json"),
        ]

    async def test_nested_archive_and_bad_member(
        self, converter: Converter, log: MagicMock
    ) -> None:
        inner = build_zip({"inner.xml": EVENT_XML})
        data = build_zip(
            {"broken.json": "{nope", "nested.zip": inner, "plain.csv": SOIL_CSV}
        )

        results = await converter.to_json(
            [InputFile(filename="outer.zip", format="generic", arrbuf=data)]
        )

        assert [r.output_filename for r in results] == ["inner.json", "plain.json"]
        assert any("broken.json" in call.args[0] for call in log.warning.call_args_list)

    async def test_corrupt_archive_is_skipped(
        self, converter: Converter, log: MagicMock
    ) -> None:
        results = await converter.to_json(
            [
                InputFile(filename="broken.zip", arrbuf=b"not a zip"),
                InputFile(filename="ok.csv", text=SOIL_CSV),
            ]
        )

        assert [r.output_filename for r in results] == ["ok.json"]
        assert log.warning.call_args_list[0].kwargs["error_kind"] == "GenericParseError"
