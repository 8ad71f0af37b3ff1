# topmark:header:start
#
#   project      : SetterScan
#   file         : loader.py
#   file_relpath : src/setterscan/resources/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse YAML documents into the immutable resource tree.

Parsing uses ``ruamel.yaml`` in round-trip mode so that end-of-line comments
survive, with a constructor that keeps every non-null scalar as its literal text.
Comments are read from ruamel's comment slots and reduced to the single
comment written on the same line as the node; full-line comments that ruamel
folds into the same token are ignored.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.constructor import RoundTripConstructor
from ruamel.yaml.error import YAMLError

from setterscan.config.logging import get_logger
from setterscan.constants import (
    INDEX_ANNOTATION,
    LEGACY_INDEX_ANNOTATION,
    LEGACY_PATH_ANNOTATION,
    PATH_ANNOTATION,
)
from setterscan.errors import MalformedResourceError, ResourceLoadError
from setterscan.resources.model import Field, MappingNode, Resource, ScalarNode, SequenceNode

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from setterscan.config.logging import SetterscanLogger
    from setterscan.resources.model import Node

logger: SetterscanLogger = get_logger(__name__)


class LiteralScalarConstructor(RoundTripConstructor):
    """Round-trip constructor that keeps every non-null scalar as its literal source text."""


# Null stays None so that empty documents remain distinguishable.
for _tag in ("bool", "int", "float", "timestamp"):
    LiteralScalarConstructor.add_constructor(
        f"tag:yaml.org,2002:{_tag}",
        LiteralScalarConstructor.construct_yaml_str,
    )


def new_yaml(*, literal_scalars: bool = True) -> YAML:
    """Return a round-trip YAML instance with kpt indentation.

    Args:
        literal_scalars (bool): Load scalars through `LiteralScalarConstructor`.
            Documents that are written back must be loaded without it, or typed
            scalars come back quoted.
    """
    yaml = YAML(typ="rt")
    if literal_scalars:
        yaml.Constructor = LiteralScalarConstructor
    yaml.preserve_quotes = True
    yaml.width = 4096
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


def parse_yaml_value(text: str) -> Any:
    """Parse a single YAML value, returning ruamel containers or literal strings.

    Raises:
        YAMLError: If ``text`` is not valid YAML.
    """
    return new_yaml().load(text)


def dump_inline(data: Any) -> str:
    """Render a ruamel value as YAML text on a single line."""
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    stream = StringIO()
    new_yaml().dump(data, stream)
    return stream.getvalue().replace("\n", "")


def _eol_comment(slot: Any) -> str | None:
    """Return the comment written on the node's own line, if ruamel kept one in ``slot``."""
    if slot is None:
        return None
    if isinstance(slot, list):
        for token in slot:
            text = _eol_comment(token)
            if text is not None:
                return text
        return None
    value: Any = getattr(slot, "value", None)
    if not isinstance(value, str):
        return None
    first: str = value.split("\n", 1)[0].strip()
    return first if first.startswith("#") else None


def _slot(ca_items: dict[Any, Any], key: Any, position: int) -> Any:
    entry: Any = ca_items.get(key)
    if not entry or len(entry) <= position:
        return None
    return entry[position]


def _field_comments(data: CommentedMap, key: Any, value: Any) -> tuple[str | None, str | None]:
    """Return ``(key_comment, value_comment)`` for one mapping entry."""
    items: dict[Any, Any] = data.ca.items
    # A comment on a key whose value starts on the next line may sit in slot 1.
    key_slot: str | None = _eol_comment(_slot(items, key, 0)) or _eol_comment(
        _slot(items, key, 1)
    )
    value_slot: str | None = _eol_comment(_slot(items, key, 2))
    if isinstance(value, CommentedSeq):
        # ruamel may also keep the comment on the sequence itself.
        nested: str | None = None
        if value.ca.comment:
            nested = _eol_comment(value.ca.comment[0])
        if value.fa.flow_style():
            return key_slot, value_slot or nested
        return key_slot or nested or value_slot, None
    return key_slot, value_slot


def to_node(data: Any, comment: str | None = None) -> Node:
    """Convert ruamel round-trip data into the immutable node tree.

    Args:
        data (Any): A ``CommentedMap``, ``CommentedSeq`` or scalar.
        comment (str | None): End-of-line comment attached to ``data`` by its parent.

    Returns:
        Node: The converted node.
    """
    if isinstance(data, CommentedMap):
        fields: list[Field] = []
        for key, value in data.items():
            key_comment, value_comment = _field_comments(data, key, value)
            fields.append(
                Field(key=str(key), value=to_node(value, value_comment), key_comment=key_comment)
            )
        return MappingNode(fields=tuple(fields))
    if isinstance(data, CommentedSeq):
        items: list[Node] = [
            to_node(item, _eol_comment(_slot(data.ca.items, index, 0)))
            for index, item in enumerate(data)
        ]
        return SequenceNode(items=tuple(items), comment=comment, flow=bool(data.fa.flow_style()))
    if data is None:
        return ScalarNode(value="", comment=comment)
    return ScalarNode(value=str(data), comment=comment)


def _annotation(root: MappingNode, *names: str) -> str | None:
    annotations: MappingNode | None = root.get_mapping("metadata", "annotations")
    if annotations is None:
        return None
    for name in names:
        value: str | None = annotations.get_scalar(name)
        if value:
            return value
    return None


def to_resource(data: Any, *, path: str, index: int) -> Resource:
    """Convert one parsed document into a `Resource`.

    The path and index annotations of the document win over the file location
    it was read from.

    Raises:
        MalformedResourceError: If the document is not a mapping, or carries a
            non-numeric index annotation.
    """
    if not isinstance(data, CommentedMap):
        raise MalformedResourceError(
            f"{path}: document {index} is a {type(data).__name__}, expected a mapping"
        )
    root = to_node(data)
    assert isinstance(root, MappingNode)
    annotated_path: str | None = _annotation(root, PATH_ANNOTATION, LEGACY_PATH_ANNOTATION)
    annotated_index: str | None = _annotation(root, INDEX_ANNOTATION, LEGACY_INDEX_ANNOTATION)
    if annotated_index is not None:
        try:
            index = int(annotated_index)
        except ValueError as exc:
            raise MalformedResourceError(
                f"{annotated_path or path}: invalid index annotation {annotated_index!r}"
            ) from exc
    return Resource(root=root, path=annotated_path or path, index=index)


def parse_resources(text: str, *, path: str) -> list[Resource]:
    """Parse a (multi-document) YAML text into resources.

    Empty documents, including the one after a trailing ``---``, are skipped.

    Args:
        text (str): YAML source.
        path (str): Package-relative path the text was read from.

    Returns:
        list[Resource]: One resource per non-empty document, in document order.

    Raises:
        ResourceLoadError: If the text is not valid YAML.
        MalformedResourceError: If a document is not a mapping.
    """
    try:
        documents: list[Any] = list(new_yaml().load_all(text))
    except YAMLError as exc:
        raise ResourceLoadError(f"{path}: invalid YAML: {exc}") from exc
    resources: list[Resource] = []
    for index, data in enumerate(documents):
        if data is None:
            continue
        resources.append(to_resource(data, path=path, index=index))
    logger.trace("Parsed %d resource(s) from %s", len(resources), path)
    return resources


def load_resource_files(files: Iterable[Path], *, root: Path) -> list[Resource]:
    """Read and parse package files, identifying each by its path relative to ``root``.

    Raises:
        ResourceLoadError: If a file cannot be read or parsed.
        MalformedResourceError: If a document is not a mapping.
    """
    resources: list[Resource] = []
    for file in files:
        rel: str = file.relative_to(root).as_posix()
        try:
            text: str = file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceLoadError(f"{rel}: cannot read file: {exc}") from exc
        resources.extend(parse_resources(text, path=rel))
    logger.debug("Loaded %d resource(s) from %s", len(resources), root)
    return resources
