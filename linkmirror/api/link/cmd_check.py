"""Link check API command."""

import logging
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from ..config.LinkmirrorConfig import LinkmirrorConfig
from ..git.GitService import GitService
from ..StageResult import StageResult
from . import LinkCheckOutput
from ._error_entries import git_error_entry, link_error_entry, sorted_link_errors
from ._repository_root import _repository_root
from .AnchorCache import AnchorCache
from .IntegrityChecker import IntegrityChecker
from .iter_documents import iter_documents

logger = logging.getLogger(__name__)


def cmd_check(target: str | None = None) -> StageResult:
    """Check git status and internal links of the source tree or one translated tree.

    Args:
        target: Locale of a configured target to check instead of the source tree
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = LinkmirrorConfig.load()
            root = Path(config.target(target).target_dir if target else config.source_dir)
        except ValueError as e:
            result_obj.output = LinkCheckOutput(
                root="",
                locale=target or "",
                files_checked=0,
                errors=[str(e)],
            ).model_dump(mode="python")
            result_obj.result = f"Configuration error: {e}"
            result_obj.success = False
            return

        warnings: list[str] = []
        yield (0.2, "Locating repository...")
        repository_root = _repository_root(root)
        git = None
        if repository_root is None:
            warnings.append(f"{root} is not inside a git repository; git status not checked")
            repository_root = root
        else:
            git = GitService(repository_root, timeout_secs=config.git.timeout_secs)

        yield (0.3, "Reading documents...")
        checker = IntegrityChecker(root, repository_root, git=git, cache=AnchorCache())
        try:
            documents = list(iter_documents(root, config.selector(), on_error=checker.record_unreadable))
        except (OSError, ValueError) as e:
            result_obj.output = LinkCheckOutput(
                root=str(root),
                locale=target or "",
                files_checked=0,
                errors=[f"Cannot read documents: {e}"],
                warnings=warnings,
            ).model_dump(mode="python")
            result_obj.result = f"Cannot read documents under {root}"
            result_obj.success = False
            return

        total = len(documents)
        with ThreadPoolExecutor(max_workers=config.parallelism) as executor:
            futures = {executor.submit(checker.check_file, path, content): path for path, content in documents}
            for done, future in enumerate(as_completed(futures), start=1):
                future.result()
                yield (0.3 + 0.6 * done / total, f"Checked {futures[future].name}")

        yield (0.95, "Collecting results...")
        check = checker.result()
        git_errors = sorted(check.git_errors, key=lambda e: str(e.file))
        link_errors = sorted_link_errors(check.link_errors)
        errors = [str(e) for e in git_errors] + [str(e) for e in link_errors]
        for message in errors:
            logger.info(message)

        result_obj.output = LinkCheckOutput(
            root=str(root),
            locale=target or "",
            files_checked=total,
            git_errors=[git_error_entry(e) for e in git_errors],
            link_errors=[link_error_entry(e) for e in link_errors],
            errors=errors,
            warnings=warnings,
        ).model_dump(mode="python")
        if check.is_success:
            result_obj.result = f"All links valid in {total} file(s)"
        else:
            result_obj.result = f"Found {check.error_count} error(s) in {total} file(s)"
        result_obj.success = check.is_success
        yield (1.0, "Complete")

    announce = f"Checking links in target '{target}'..." if target else "Checking links in source tree..."
    return StageResult(announce=announce, progress_callback=do_work)
