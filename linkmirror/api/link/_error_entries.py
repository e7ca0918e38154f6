"""Convert check errors to output schema entries."""

from .._output_schemas.link import GitErrorEntry, LinkErrorEntry
from .GitError import GitError
from .LinkError import LinkError


def git_error_entry(error: GitError) -> GitErrorEntry:
    return GitErrorEntry(file=str(error.file), kind=error.kind.value)


def link_error_entry(error: LinkError) -> LinkErrorEntry:
    return LinkErrorEntry(
        source_file=str(error.source_file),
        raw_destination=error.raw_destination,
        resolved_target=str(error.resolved_target) if error.resolved_target is not None else None,
        anchor=error.anchor,
        kind=error.kind.value,
    )


def sorted_link_errors(errors: tuple[LinkError, ...]) -> list[LinkError]:
    """Link errors in a stable order regardless of worker scheduling."""
    return sorted(errors, key=lambda e: (str(e.source_file), e.raw_destination, e.kind.value))
