"""Link correction for translated documents (UNO: single class)."""

import logging
import os
import re
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any
from urllib.parse import quote, unquote

from ...utils.normalize_path import normalize_path
from ..markdown.MarkdownDocument import MarkdownDocument
from ._CorrectionState import _CorrectionState
from .AnchorCache import AnchorCache
from .DocumentSelector import DocumentSelector
from .HeadingAnchorIndex import HeadingAnchorIndex
from .HeadingCountMismatchError import HeadingCountMismatchError
from .is_likely_file_path import is_likely_file_path
from .LinkCorrectionResult import LinkCorrectionResult
from .LinkReference import LinkReference

logger = logging.getLogger(__name__)

# [label](destination) and ![alt](destination); the label may hold one level of
# nested brackets, the destination runs up to the next unescaped ")".
_INLINE_LINK = re.compile(r"(?P<label>!?\[(?:[^\[\]]|\[[^\]]*\])*\])\((?P<inner>(?:\\.|[^)\\])+)\)")
# Destination followed by an optional title: `img.png "Title"`
_DESTINATION_AND_TITLE = re.compile(r"(?P<lead>\s*)(?P<dest><[^>]*>|\S+)(?P<rest>.*)\Z", re.DOTALL)
_NEWLINE = re.compile(r"\n")


def _read_index(path: Path) -> HeadingAnchorIndex:
    return HeadingAnchorIndex.from_tree(MarkdownDocument(path.read_text(encoding="utf-8")).tree)


def _code_spans(body: str, document: MarkdownDocument) -> list[tuple[int, int]]:
    """Character spans of fenced and indented code blocks in ``body``."""
    line_starts = [0] + [m.end() for m in _NEWLINE.finditer(body)]
    spans = []
    for node in document.tree.walk():
        if not node.kind.is_code_block or node.line_range is None:
            continue
        first, last = node.line_range
        start = line_starts[first] if first < len(line_starts) else len(body)
        end = line_starts[last] if last < len(line_starts) else len(body)
        spans.append((start, end))
    return spans


class LinkCorrector:
    """Rewrite links of translated documents so they resolve inside the translated tree.

    Headings are matched by position: an anchor pointing at the i-th heading
    of a source document is replaced by the slug of the i-th heading of its
    translation. Links to non-translated files (assets) are re-routed from
    the translated file's directory to the file in the source tree.
    """

    def __init__(
        self,
        source_dir: Path,
        target_dir: Path,
        selector: DocumentSelector,
        translatable_fields: Iterable[str] = (),
        cache: AnchorCache | None = None,
    ):
        """
        Args:
            source_dir: Root of the source document tree
            target_dir: Root of the translated tree mirroring ``source_dir``
            selector: Decides which linked files are translated documents
            translatable_fields: Front matter fields whose text is link-rewritten
            cache: Anchor cache shared for this run; a private one if None
        """
        if source_dir is None or target_dir is None or selector is None:
            raise TypeError("source_dir, target_dir and selector must not be None")
        self.source_dir = normalize_path(source_dir)
        self.target_dir = normalize_path(target_dir)
        self.selector = selector
        self.translatable_fields = frozenset(translatable_fields)
        self.cache = cache if cache is not None else AnchorCache()

    def mirror_of(self, translated_file: Path) -> Path:
        """Source file that ``translated_file`` was translated from.

        Raises:
            ValueError: If ``translated_file`` is not under the target directory
        """
        translated = normalize_path(translated_file)
        if translated == self.target_dir or not translated.is_relative_to(self.target_dir):
            raise ValueError(f"Translated file {translated} is not under target directory {self.target_dir}")
        return self.source_dir / translated.relative_to(self.target_dir)

    def correct_links(
        self,
        translated_file: Path,
        translated_content: str,
        source_file: Path | None = None,
    ) -> LinkCorrectionResult:
        """Correct all links in one translated document.

        Args:
            translated_file: Path of the translated document under the target directory
            translated_content: Current text of the translated document
            source_file: Source document it mirrors; derived from the path if None

        Returns:
            Corrected content with per-kind counters; problems that leave a link
            unmodified (heading count mismatch) are listed in ``errors``. A link
            whose source document cannot be read is left unmodified and logged.

        Raises:
            ValueError: If ``translated_file`` is not under the target directory
        """
        if translated_file is None or translated_content is None:
            raise TypeError("translated_file and translated_content must not be None")
        translated_file = normalize_path(translated_file)
        mirrored = self.mirror_of(translated_file)
        source_file = normalize_path(source_file) if source_file is not None else mirrored

        document = MarkdownDocument(translated_content)
        state = _CorrectionState(
            translated_file=translated_file,
            source_file=source_file,
            load_source_index=lambda: self.cache.anchor_index(source_file, lambda: _read_index(source_file)),
            load_translated_index=lambda: HeadingAnchorIndex.from_tree(document.tree),
        )

        body = self._correct_body(document, state)
        self._correct_front_matter(document, state)

        corrected = document.serialize_front_matter() + body
        if corrected == translated_content and not state.errors:
            return LinkCorrectionResult.unchanged(translated_file, translated_content)
        if state.errors:
            logger.debug(f"{translated_file}: {len(state.errors)} correction error(s)")
        return LinkCorrectionResult(
            target_file=translated_file,
            corrected_content=corrected,
            asset_corrections=state.asset_corrections,
            anchor_corrections=state.anchor_corrections,
            front_matter_corrections=state.front_matter_corrections,
            errors=tuple(state.errors),
        )

    def correct_all(self, documents: Mapping[Path, str], parallelism: int = 1) -> list[LinkCorrectionResult]:
        """Correct many translated documents, isolating per-file I/O failures.

        Args:
            documents: Translated file path -> current content
            parallelism: Number of worker threads

        Returns:
            One result per document, in the mapping's order
        """
        if documents is None:
            raise TypeError("documents must not be None")
        items = list(documents.items())
        if parallelism <= 1 or len(items) <= 1:
            return [self._correct_isolated(path, content) for path, content in items]
        with ThreadPoolExecutor(max_workers=parallelism) as executor:
            return list(executor.map(lambda item: self._correct_isolated(*item), items))

    def _correct_isolated(self, translated_file: Path, content: str) -> LinkCorrectionResult:
        try:
            return self.correct_links(translated_file, content)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(f"Cannot correct {translated_file}: {exc}")
            return LinkCorrectionResult.failed(Path(translated_file), content, f"IO error: {exc}")

    # Body

    def _correct_body(self, document: MarkdownDocument, state: _CorrectionState) -> str:
        body = document.body
        code_spans = _code_spans(body, document)

        def replace(match: re.Match[str]) -> str:
            if any(start <= match.start() < end for start, end in code_spans):
                return match.group(0)
            return self._rewrite_link(match, state)

        return _INLINE_LINK.sub(replace, body)

    def _rewrite_text(self, text: str, state: _CorrectionState) -> str:
        return _INLINE_LINK.sub(lambda match: self._rewrite_link(match, state), text)

    def _rewrite_link(self, match: re.Match[str], state: _CorrectionState) -> str:
        label = match.group("label")
        prefix = "![" if label.startswith("!") else "["
        # Links nested in the label, e.g. an image inside a link
        label = prefix + self._rewrite_text(label[len(prefix) : -1], state) + "]"

        parts = _DESTINATION_AND_TITLE.match(match.group("inner"))
        if parts is None:
            return f"{label}({match.group('inner')})"
        destination = parts.group("dest")
        bracketed = destination.startswith("<") and destination.endswith(">")
        raw = destination[1:-1] if bracketed else destination

        corrected = self._rewrite_destination(raw, state)
        if bracketed:
            corrected = f"<{corrected}>"
        return f"{label}({parts.group('lead')}{corrected}{parts.group('rest')})"

    def _rewrite_destination(self, raw: str, state: _CorrectionState) -> str:
        ref = LinkReference.parse(raw)
        if ref.is_external or ref.is_absolute or not raw:
            return raw

        if ref.is_anchor_only:
            if not ref.anchor:
                return raw
            try:
                source_index = state.source_index()
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning(f"Cannot read {state.source_file} for anchor correction: {exc}")
                return raw
            try:
                anchor = self._remap_anchor(
                    ref.anchor,
                    state.source_file,
                    source_index,
                    state.translated_file,
                    state.translated_index(),
                )
            except HeadingCountMismatchError as exc:
                state.add_error(str(exc))
                return raw
            if anchor == ref.anchor:
                return raw
            state.anchor_corrections += 1
            return f"#{anchor}"

        decoded = unquote(ref.path or "")
        resolved = normalize_path(state.source_file.parent / decoded)
        if self.selector.is_translatable(resolved):
            return self._rewrite_document_link(ref, resolved, state)
        return self._rewrite_asset_link(ref, decoded, resolved, state)

    def _rewrite_document_link(self, ref: LinkReference, source_target: Path, state: _CorrectionState) -> str:
        """Link to another translated document: path kept, anchor remapped."""
        if not ref.anchor:
            return ref.raw
        translated_target = self.target_dir / source_target.relative_to(self.source_dir)
        if not translated_target.is_file() or not source_target.is_file():
            logger.debug(f"No translated counterpart for {ref.raw} in {state.translated_file}")
            return ref.raw

        try:
            translated_index = _read_index(translated_target)
            source_index = self.cache.anchor_index(source_target, lambda: _read_index(source_target))
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(f"Cannot read {translated_target} for anchor correction: {exc}")
            return ref.raw

        try:
            anchor = self._remap_anchor(ref.anchor, source_target, source_index, translated_target, translated_index)
        except HeadingCountMismatchError as exc:
            state.add_error(str(exc))
            return ref.raw
        if anchor == ref.anchor:
            return ref.raw
        state.anchor_corrections += 1
        return f"{ref.path}#{anchor}"

    def _rewrite_asset_link(self, ref: LinkReference, decoded: str, resolved: Path, state: _CorrectionState) -> str:
        """Link to a file that is not translated: route it to the source tree."""
        if not resolved.exists():
            if not (state.translated_file.parent / decoded).exists():
                logger.debug(f"Asset {ref.raw} in {state.translated_file.name} not found in either tree")
            return ref.raw

        route = self._route_to(resolved, state.translated_file)
        if route == decoded:
            return ref.raw
        if decoded != ref.path:
            route = quote(route, safe="/")
        corrected = route if ref.anchor is None else f"{route}#{ref.anchor}"
        state.asset_corrections += 1
        return corrected

    @staticmethod
    def _route_to(target: Path, from_file: Path) -> str:
        return Path(os.path.relpath(target, from_file.parent)).as_posix()

    @staticmethod
    def _remap_anchor(
        anchor: str,
        source_file: Path,
        source_index: HeadingAnchorIndex,
        translated_file: Path,
        translated_index: HeadingAnchorIndex,
    ) -> str:
        """Translated slug at the position of ``anchor`` in the source headings.

        An anchor that no source heading defines is returned unchanged.

        Raises:
            HeadingCountMismatchError: If the documents have different heading counts
        """
        if source_index.size() != translated_index.size():
            raise HeadingCountMismatchError(source_file, source_index.size(), translated_file, translated_index.size())

        position = source_index.index_of(unquote(anchor))
        if position is None:
            logger.debug(f"Anchor '#{anchor}' not found in {source_file.name}; left unchanged")
            return anchor
        return translated_index.get(position)

    # Front matter

    def _correct_front_matter(self, document: MarkdownDocument, state: _CorrectionState) -> None:
        # Links rewritten inside front matter count as front matter corrections only
        saved = (state.asset_corrections, state.anchor_corrections)
        for key in document.properties:
            value = document.raw_value(key)
            corrected = self._correct_front_matter_value(key, value, state)
            if corrected != value:
                document.set_property(key, corrected)
                state.front_matter_corrections += 1
                logger.debug(f"{state.translated_file.name}: corrected front matter field '{key}'")
        state.asset_corrections, state.anchor_corrections = saved

    def _correct_front_matter_value(self, key: str, value: Any, state: _CorrectionState) -> Any:
        if isinstance(value, list):
            return [self._correct_front_matter_value(key, item, state) for item in value]
        if not isinstance(value, str):
            return value
        if key in self.translatable_fields:
            return self._rewrite_text(value, state)
        if not is_likely_file_path(value):
            return value
        decoded = unquote(value)
        resolved = normalize_path(state.source_file.parent / decoded)
        if not resolved.is_file():
            return value
        route = self._route_to(resolved, state.translated_file)
        return value if route == decoded else route
