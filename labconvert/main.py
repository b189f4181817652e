import argparse
import json
import sys
from pathlib import Path

from labconvert.config.settings import Settings
from labconvert.converter.detection import detect_type
from labconvert.converter.factory import ConverterFactory
from labconvert.converter.models import ConversionResult, InputFile
from labconvert.logging.logger import Log

_BINARY_TYPES = frozenset({"xlsx", "zip"})


def load_input_file(path: Path, table_format: str | None = None) -> InputFile:
    """Read a file from disk in the payload representation its extension requires."""
    if detect_type(path.name) in _BINARY_TYPES:
        return InputFile(filename=path.name, format=table_format, arrbuf=path.read_bytes())
    return InputFile(
        filename=path.name,
        format=table_format,
        text=path.read_text(encoding="utf-8"),
    )


def write_results(results: list[ConversionResult], output_dir: Path, indent: int) -> list[Path]:
    """Write each structured report to output_dir under its derived filename."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for result in results:
        target = output_dir / Path(result.output_filename).name
        target.write_text(json.dumps(result.structured_report, indent=indent), encoding="utf-8")
        written.append(target)
    return written


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert lab-report files (xml, csv, xlsx, json, zip) into structured JSON."
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Input files to convert")
    parser.add_argument("--format", dest="table_format", default=None, help="CSV/XLSX format")
    parser.add_argument("--output-dir", type=Path, default=None, help="Output directory")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> convert -> write outputs."""
    args = parse_args(argv)
    settings = Settings()
    log = Log()
    log.configure(settings.log_level)

    files: list[InputFile] = []
    for path in args.paths:
        try:
            files.append(load_input_file(path, args.table_format))
        except UnicodeDecodeError as exc:
            log.warning(
                f"Skipping {path.name}: not valid UTF-8 text ({exc.reason})",
                input_filename=path.name,
            )

    converter = ConverterFactory.create(settings, log=log)
    results = converter.convert(files)

    output_dir = args.output_dir or Path(settings.output_dir)
    written = write_results(results, output_dir, settings.output_indent)
    log.info(f"Converted {len(args.paths)} file(s) into {len(written)} report(s) in {output_dir}")
    return 0 if results or not args.paths else 1


if __name__ == "__main__":
    sys.exit(main())
