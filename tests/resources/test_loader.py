# topmark:header:start
#
#   project      : SetterScan
#   file         : test_loader.py
#   file_relpath : tests/resources/test_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for parsing YAML documents into the resource tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from setterscan.errors import MalformedResourceError, ResourceLoadError
from setterscan.resources.loader import load_resource_files, parse_resources
from setterscan.resources.model import MappingNode, ScalarNode, SequenceNode
from tests.conftest import parametrize, write_package

if TYPE_CHECKING:
    from pathlib import Path


def test_scalars_keep_literal_text() -> None:
    """Numbers, booleans and versions are not reinterpreted."""
    (resource,) = parse_resources(
        "kind: Test\nreplicas: 3\nenabled: true\nversion: 1.10\nempty:\n", path="t.yaml"
    )
    root = resource.root
    assert root.get_scalar("replicas") == "3"
    assert root.get_scalar("enabled") == "true"
    assert root.get_scalar("version") == "1.10"
    assert root.get_scalar("empty") == ""
    assert resource.kind == "Test"


def test_scalar_end_of_line_comment() -> None:
    """A scalar carries the comment written on its own line."""
    (resource,) = parse_resources(
        "spec:\n  replicas: 3 # kpt-set: ${replicas}\n  other: x\n", path="t.yaml"
    )
    spec = resource.root.get_mapping("spec")
    assert spec is not None
    node = spec.get("replicas")
    assert node == ScalarNode("3", "# kpt-set: ${replicas}")
    assert spec.get("other") == ScalarNode("x")


def test_block_sequence_key_comment() -> None:
    """A block sequence is marked by the comment on its key line."""
    (resource,) = parse_resources(
        "args: # kpt-set: ${args}\n  - a\n  - b\n", path="t.yaml"
    )
    (entry,) = resource.root.fields
    assert isinstance(entry.value, SequenceNode)
    assert not entry.value.flow
    assert entry.value.scalar_values() == ["a", "b"]
    assert entry.array_comment == "# kpt-set: ${args}"


def test_flow_sequence_trailing_comment() -> None:
    """A flow sequence is marked by the comment after the closing bracket."""
    (resource,) = parse_resources("args: [a, b] # kpt-set: ${args}\n", path="t.yaml")
    (entry,) = resource.root.fields
    assert isinstance(entry.value, SequenceNode)
    assert entry.value.flow
    assert entry.array_comment == "# kpt-set: ${args}"


def test_multi_document_file_skips_empty_documents() -> None:
    """Each non-empty document becomes a resource with its document index."""
    resources = parse_resources("kind: A\n---\n---\nkind: B\n", path="multi.yaml")
    assert [(r.kind, r.path, r.index) for r in resources] == [
        ("A", "multi.yaml", 0),
        ("B", "multi.yaml", 2),
    ]


@parametrize(
    "text",
    [
        "kind: A\nspec:\n  r: 3 # kpt-set: ${r}\n---\n",
        "---\nkind: A\nspec:\n  r: 3 # kpt-set: ${r}\n---\n---\n",
    ],
)
def test_trailing_separators_are_not_documents(text: str) -> None:
    """Separators with nothing after them yield no resource."""
    (resource,) = parse_resources(text, path="resources.yaml")
    assert resource.kind == "A"


def test_explicit_null_reads_as_empty() -> None:
    """``~`` and ``null`` values read as an empty scalar."""
    (resource,) = parse_resources("kind: A\na: ~\nb: null\n", path="t.yaml")
    assert resource.root.get_scalar("a") == ""
    assert resource.root.get_scalar("b") == ""


def test_path_and_index_annotations_win() -> None:
    """Path and index annotations override the file location."""
    text = (
        "kind: A\nmetadata:\n  annotations:\n"
        "    config.kubernetes.io/path: other/a.yaml\n"
        "    config.kubernetes.io/index: '4'\n"
    )
    (resource,) = parse_resources(text, path="a.yaml")
    assert (resource.path, resource.index) == ("other/a.yaml", 4)


def test_legacy_path_annotation() -> None:
    """The internal path annotation is honored when the public one is absent."""
    text = "kind: A\nmetadata:\n  annotations:\n    internal.config.kubernetes.io/path: Kptfile\n"
    (resource,) = parse_resources(text, path="x.yaml")
    assert resource.path == "Kptfile"


def test_invalid_index_annotation() -> None:
    """A non-numeric index annotation is malformed."""
    text = "kind: A\nmetadata:\n  annotations:\n    config.kubernetes.io/index: first\n"
    with pytest.raises(MalformedResourceError, match="invalid index annotation"):
        parse_resources(text, path="a.yaml")


def test_invalid_yaml() -> None:
    """Unparseable text fails with the file identity in the message."""
    with pytest.raises(ResourceLoadError, match="bad.yaml"):
        parse_resources("a: [unclosed\n", path="bad.yaml")


def test_non_mapping_document() -> None:
    """A top-level sequence is not a resource."""
    with pytest.raises(MalformedResourceError, match="expected a mapping"):
        parse_resources("- a\n- b\n", path="list.yaml")


def test_nested_tree_shape() -> None:
    """Mappings inside sequences are converted recursively."""
    (resource,) = parse_resources(
        "spec:\n  containers:\n    - name: nginx\n      image: nginx\n", path="t.yaml"
    )
    spec = resource.root.get_mapping("spec")
    assert spec is not None
    containers = spec.get("containers")
    assert isinstance(containers, SequenceNode)
    (container,) = containers.items
    assert isinstance(container, MappingNode)
    assert container.to_string_map() == {"name": "nginx", "image": "nginx"}


def test_load_resource_files_uses_relative_posix_paths(tmp_path: Path) -> None:
    """Files are identified by their path relative to the package root."""
    root = write_package(tmp_path, {"a.yaml": "kind: A\n", "sub/b.yaml": "kind: B\n"})
    resources = load_resource_files([root / "a.yaml", root / "sub" / "b.yaml"], root=root)
    assert [r.path for r in resources] == ["a.yaml", "sub/b.yaml"]


def test_load_resource_files_unreadable(tmp_path: Path) -> None:
    """A file that is not UTF-8 text cannot be loaded."""
    (tmp_path / "bin.yaml").write_bytes(b"\xff\xfe\x00")
    with pytest.raises(ResourceLoadError, match="bin.yaml"):
        load_resource_files([tmp_path / "bin.yaml"], root=tmp_path)
