# topmark:header:start
#
#   project      : SetterScan
#   file         : resource_list.py
#   file_relpath : src/setterscan/resources/resource_list.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read and write KRM function ``ResourceList`` documents.

A ResourceList wraps the package resources in ``items``; a function reports
back by adding a ``results`` list. The round-trip document is kept so that
items, including their comments, are written back untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, Any

from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.error import YAMLError

from setterscan.config.logging import get_logger
from setterscan.errors import MalformedResourceError, ResourceLoadError
from setterscan.resources.loader import new_yaml, to_resource

if TYPE_CHECKING:
    from setterscan.config.logging import SetterscanLogger
    from setterscan.resources.model import Resource
    from setterscan.setters.discovery import DiscoveryReport

logger: SetterscanLogger = get_logger(__name__)

RESOURCE_LIST_KIND = "ResourceList"
SEVERITY_INFO = "info"
SEVERITY_WARNING = "warning"


@dataclass
class ResourceListDocument:
    """A parsed ResourceList.

    Attributes:
        data (CommentedMap): The round-trip document, written back by `write_resource_list`.
        resources (list[Resource]): The converted ``items``.
    """

    data: CommentedMap
    resources: list[Resource]


def read_resource_list(text: str) -> ResourceListDocument:
    """Parse a ResourceList from ``text``.

    Items without a path annotation get an empty path identity.

    Raises:
        ResourceLoadError: If ``text`` is not valid YAML.
        MalformedResourceError: If the document is not a ResourceList, or an item
            is not a mapping.
    """
    try:
        # Typed copy for writing back; literal copy for setter discovery.
        data: Any = new_yaml(literal_scalars=False).load(text)
        literal: Any = new_yaml().load(text)
    except YAMLError as exc:
        raise ResourceLoadError(f"<stdin>: invalid YAML: {exc}") from exc
    if not isinstance(data, CommentedMap) or data.get("kind") != RESOURCE_LIST_KIND:
        raise MalformedResourceError(f"input must be a {RESOURCE_LIST_KIND}")
    items: Any = literal.get("items")
    if items is None:
        items = CommentedSeq()
    if not isinstance(items, CommentedSeq):
        raise MalformedResourceError(f"{RESOURCE_LIST_KIND}.items must be a list")
    resources: list[Resource] = [
        to_resource(item, path="", index=index) for index, item in enumerate(items)
    ]
    logger.debug("Read %d item(s) from %s", len(resources), RESOURCE_LIST_KIND)
    return ResourceListDocument(data=data, resources=resources)


def report_results(report: DiscoveryReport) -> list[dict[str, str]]:
    """Return the ``results`` entries for a discovery report: setters first, then warnings."""
    results: list[dict[str, str]] = [
        {"message": str(result), "severity": SEVERITY_INFO} for result in report.results
    ]
    results.extend(
        {"message": diagnostic.message, "severity": SEVERITY_WARNING}
        for diagnostic in report.warnings
    )
    return results


def write_resource_list(document: ResourceListDocument, report: DiscoveryReport) -> str:
    """Return ``document`` as YAML with its ``results`` replaced by ``report``."""
    results = CommentedSeq()
    for entry in report_results(report):
        results.append(CommentedMap(entry))
    document.data["results"] = results
    stream = StringIO()
    new_yaml(literal_scalars=False).dump(document.data, stream)
    return stream.getvalue()
