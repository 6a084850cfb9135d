"""Scan command - summarize a directory tree."""

from collections.abc import Iterator
from pathlib import Path

from ...utils.printable_path import printable_path
from .._output_schemas.scan import ScanOutput
from ..StageResult import StageResult
from .scan_tree import scan_tree
from .ScanRootError import ScanRootError


def cmd_scan(target: Path | str, sniff_bytes: int | None = None) -> StageResult:
    """Scan ``target`` and return the Report in the command output.

    Args:
        target: Directory to summarize.
        sniff_bytes: Prefix size for content detection; None uses the configured value.
    """
    target_str = printable_path(target)

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        limit = sniff_bytes
        if limit is None:
            from ..config.SumdirConfig import SumdirConfig

            limit = SumdirConfig.load().scan.sniff_bytes

        yield (0.3, f"Scanning {target_str}...")
        try:
            report = scan_tree(Path(target), sniff_bytes=limit)
        except ScanRootError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ScanOutput(
                errors=[str(e)],
                warnings=[],
                target=target_str,
                report={},
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.9, "Aggregating report...")
        warnings: list[str] = []
        if report.errors:
            warnings.append(f"{len(report.errors)} entries could not be inspected")

        yield (1.0, "Complete")
        result_obj.result = (
            f"Scanned {report.file_count()} files in {len(report.folders)} folders under {target_str}"
        )
        result_obj.output = ScanOutput(
            errors=[],
            warnings=warnings,
            target=target_str,
            report=report.to_dict(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Scanning {target_str}...", progress_callback=do_work)
