"""Group a document's operations into per-tag sections."""

from swagger_markdown.parser.models import Document, Operation

DEFAULT_TAG = "Other"

GroupedOperations = dict[str, dict[str, Operation]]


def group_by_tag(document: Document) -> GroupedOperations:
    """Bucket operations by tag under ``"<METHOD> <path>"`` labels.

    Tags and labels keep first-seen order. An operation with several tags
    is listed once under each of them; untagged ones go to ``DEFAULT_TAG``.
    A repeated method+path within one tag replaces the earlier entry.
    """
    groups: GroupedOperations = {}
    for path, methods in document.paths.items():
        for method, operation in methods.items():
            tags = operation.tags or [DEFAULT_TAG]
            for tag in tags:
                groups.setdefault(tag, {})[f"{method.upper()} {path}"] = operation
    return groups


def count_operations(groups: GroupedOperations) -> int:
    """Total number of method+path entries across all tag buckets."""
    return sum(len(bucket) for bucket in groups.values())
