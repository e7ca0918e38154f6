"""Link fix API command."""

import logging
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import TargetFixReport
from ..config.LinkmirrorConfig import LinkmirrorConfig
from ..config.TargetConfig import TargetConfig
from ..StageResult import StageResult
from . import LinkFixOutput
from ._error_entries import link_error_entry, sorted_link_errors
from ._repository_root import _repository_root
from .AnchorCache import AnchorCache
from .DocumentSelector import DocumentSelector
from .IntegrityChecker import IntegrityChecker
from .iter_documents import iter_documents
from .LinkCorrector import LinkCorrector
from .write_document import write_document

logger = logging.getLogger(__name__)


def _fix_target(
    config: LinkmirrorConfig,
    target: TargetConfig,
    selector: DocumentSelector,
    source_cache: AnchorCache,
    dry_run: bool,
) -> TargetFixReport:
    """Correct every translated document of one target, then re-check its links."""
    target_dir = Path(target.target_dir)
    correction_errors: list[str] = []
    documents = dict(
        iter_documents(
            target_dir,
            selector,
            on_error=lambda path, exc: correction_errors.append(f"{path}: Cannot read: {exc}"),
        )
    )

    corrector = LinkCorrector(
        Path(config.source_dir),
        target_dir,
        selector,
        translatable_fields=config.translatable_front_matter_fields,
        cache=source_cache,
    )
    results = corrector.correct_all(documents, parallelism=config.parallelism)

    files_changed = 0
    for result in results:
        correction_errors.extend(f"{result.target_file}: {message}" for message in result.errors)
        if result.corrected_content == documents[result.target_file]:
            continue
        files_changed += 1
        if dry_run:
            logger.info(f"Would correct {result.target_file} ({result.total_corrections} link(s))")
        else:
            write_document(result.target_file, result.corrected_content)
            logger.info(f"Corrected {result.target_file} ({result.total_corrections} link(s))")

    # Validate what was produced; files on disk changed, so anchors are re-read
    checker = IntegrityChecker(target_dir, _repository_root(target_dir) or target_dir, git=None, cache=AnchorCache())
    for result in results:
        checker.check_file(result.target_file, result.corrected_content)

    return TargetFixReport(
        locale=target.locale,
        target_dir=str(target_dir),
        files_processed=len(results),
        files_changed=files_changed,
        asset_corrections=sum(r.asset_corrections for r in results),
        anchor_corrections=sum(r.anchor_corrections for r in results),
        front_matter_corrections=sum(r.front_matter_corrections for r in results),
        correction_errors=correction_errors,
        link_errors=[link_error_entry(e) for e in sorted_link_errors(checker.result().link_errors)],
    )


def cmd_fix(target: str | None = None, dry_run: bool = False) -> StageResult:
    """Correct links in translated trees so they resolve inside each tree.

    Args:
        target: Locale of one configured target; all targets if None
        dry_run: Report corrections without writing files
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = LinkmirrorConfig.load()
            targets = [config.target(target)] if target else list(config.targets)
        except ValueError as e:
            result_obj.output = LinkFixOutput(dry_run=dry_run, total_corrections=0, errors=[str(e)]).model_dump(
                mode="python"
            )
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        if not targets:
            result_obj.output = LinkFixOutput(
                dry_run=dry_run, total_corrections=0, errors=["No targets configured"]
            ).model_dump(mode="python")
            result_obj.result = "No targets configured"
            result_obj.success = False
            return

        selector = config.selector()
        source_cache = AnchorCache()
        reports: list[TargetFixReport] = []
        errors: list[str] = []
        for position, target_config in enumerate(targets):
            yield (0.2 + 0.7 * position / len(targets), f"Correcting target '{target_config.locale}'...")
            try:
                report = _fix_target(config, target_config, selector, source_cache, dry_run)
            except (OSError, ValueError) as e:
                logger.error(f"Cannot correct target '{target_config.locale}': {e}")
                errors.append(f"{target_config.locale}: {e}")
                continue
            reports.append(report)
            errors.extend(report.correction_errors)
            errors.extend(
                f"{entry.source_file}: link '{entry.raw_destination}' is broken ({entry.kind})"
                for entry in report.link_errors
            )

        total = sum(r.asset_corrections + r.anchor_corrections + r.front_matter_corrections for r in reports)
        result_obj.output = LinkFixOutput(
            dry_run=dry_run,
            targets=reports,
            total_corrections=total,
            errors=errors,
        ).model_dump(mode="python")
        changed = sum(r.files_changed for r in reports)
        verb = "Would correct" if dry_run else "Corrected"
        result_obj.result = f"{verb} {total} link(s) in {changed} file(s) across {len(reports)} target(s)"
        result_obj.success = not errors
        yield (1.0, "Complete")

    announce = f"Fixing links in target '{target}'..." if target else "Fixing links in all targets..."
    return StageResult(announce=announce, progress_callback=do_work)
