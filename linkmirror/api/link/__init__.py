"""Link API domain: integrity checks and anchor correction."""

from .._output_schemas.link import LinkCheckOutput, LinkFixOutput
from .AnchorCache import AnchorCache
from .CheckResult import CheckResult
from .collect_anchors import collect_anchors, collect_heading_slugs
from .collect_links import collect_links
from .DocumentSelector import DocumentSelector
from .GitError import GitError
from .GitErrorKind import GitErrorKind
from .HeadingAnchorIndex import HeadingAnchorIndex
from .HeadingCountMismatchError import HeadingCountMismatchError
from .IntegrityChecker import IntegrityChecker
from .is_likely_file_path import is_likely_file_path
from .iter_documents import iter_documents
from .LinkCorrectionResult import LinkCorrectionResult
from .LinkCorrector import LinkCorrector
from .LinkError import LinkError
from .LinkErrorKind import LinkErrorKind
from .LinkReference import LinkReference
from .slugify import slugify
from .write_document import write_document

__all__ = [
    "AnchorCache",
    "CheckResult",
    "DocumentSelector",
    "GitError",
    "GitErrorKind",
    "HeadingAnchorIndex",
    "HeadingCountMismatchError",
    "IntegrityChecker",
    "LinkCheckOutput",
    "LinkCorrectionResult",
    "LinkCorrector",
    "LinkError",
    "LinkErrorKind",
    "LinkFixOutput",
    "LinkReference",
    "collect_anchors",
    "collect_heading_slugs",
    "collect_links",
    "is_likely_file_path",
    "iter_documents",
    "slugify",
    "write_document",
]
