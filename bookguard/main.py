import argparse
import asyncio
import json
import sys
from pathlib import Path

from bookguard.analysis.models import StageUpdate
from bookguard.config.settings import Settings
from bookguard.extraction.exceptions import ExtractionError
from bookguard.logging.logger import Log
from bookguard.processor.exceptions import ProcessorError
from bookguard.processor.pipeline import PipelineContext
from bookguard.processor.processor import build_processor
from bookguard.report.exceptions import ReportExportError


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bookguard",
        description="Extract text from a .txt or .pdf file and run the demo analysis.",
    )
    parser.add_argument("path", type=Path, help="Document to analyse (.pdf or .txt)")
    parser.add_argument("--title", default="", help="Book title shown in the report")
    parser.add_argument("--author", default="", help="Author shown in the report")
    parser.add_argument(
        "--report",
        action="store_true",
        help="Export a PDF report to REPORT_OUTPUT_DIR",
    )
    return parser.parse_args(argv)


def _print_progress(percent: int) -> None:
    print(f"Extracting text... {percent}%", file=sys.stderr)


def _print_stage(update: StageUpdate) -> None:
    print(f"{update.stage} {update.progress}%", file=sys.stderr)


async def _run(settings: Settings, args: argparse.Namespace) -> PipelineContext:
    processor = build_processor(settings, on_progress=_print_progress, on_stage=_print_stage)
    try:
        context = PipelineContext(
            source_path=args.path,
            title=args.title.strip(),
            author=args.author.strip(),
            export_report=args.report,
        )
        return await processor.process(context)
    finally:
        processor.close()


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> pipeline -> JSON result on stdout."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        context = asyncio.run(_run(settings, args))
    except (ExtractionError, ProcessorError, FileNotFoundError):
        print("Text extraction failed. Try another file.", file=sys.stderr)
        return 1
    except ReportExportError:
        print("Report export failed.", file=sys.stderr)
        return 1

    result = context.analysis_result
    if result is None:
        raise RuntimeError("Pipeline finished without an analysis result")
    output: dict[str, object] = {"results": result.to_dict()}
    if context.report_path is not None:
        output["report"] = str(context.report_path)
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
