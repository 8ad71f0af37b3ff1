# topmark:header:start
#
#   project      : SetterScan
#   file         : test_manifest.py
#   file_relpath : tests/setters/test_manifest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for reading declared setters from the Kptfile pipeline."""

from __future__ import annotations

import pytest

from setterscan.errors import ConfigPathNotFoundError, ManifestReadError, SetterDiscoveryWarning
from setterscan.setters.manifest import (
    find_setters_from_kptfile,
    parse_array_setter_values,
    seed_registry,
)
from setterscan.setters.registry import SetterRegistry
from tests.conftest import KPTFILE_INLINE, parametrize, resources_from

KPTFILE_HEADER = """\
apiVersion: kpt.dev/v1
kind: Kptfile
metadata:
  name: pkg
"""

KPTFILE_CONFIG_PATH = (
    KPTFILE_HEADER
    + """\
pipeline:
  mutators:
    - image: gcr.io/kpt-fn/apply-setters:v0.2
      configPath: setters.yaml
"""
)

SETTERS_CONFIGMAP = """\
apiVersion: v1
kind: ConfigMap
metadata:
  name: setters
data:
  replicas: "4"
  envs: "[prod]"
"""


def test_inline_config_map() -> None:
    """The inline configMap of the setter function is returned as-is."""
    declared = find_setters_from_kptfile(resources_from({"Kptfile": KPTFILE_INLINE}))
    assert declared == {"app": "my-nginx", "tag": "1.14", "environments": "[dev, stage]"}


def test_config_path_resolves_to_package_resource() -> None:
    """A configPath reads the data section of the named package file."""
    resources = resources_from({"Kptfile": KPTFILE_CONFIG_PATH, "setters.yaml": SETTERS_CONFIGMAP})
    assert find_setters_from_kptfile(resources) == {"replicas": "4", "envs": "[prod]"}


def test_missing_config_path_is_fatal() -> None:
    """A configPath naming an absent file aborts discovery."""
    with pytest.raises(ConfigPathNotFoundError) as excinfo:
        find_setters_from_kptfile(resources_from({"Kptfile": KPTFILE_CONFIG_PATH}))
    assert excinfo.value.path == "setters.yaml"
    assert str(excinfo.value) == (
        'file setters.yaml doesn\'t exist, please ensure the file specified in "configPath" '
        "exists and retry"
    )


def test_only_first_setter_function_is_used() -> None:
    """Later setter-function mutators are ignored."""
    text = (
        KPTFILE_HEADER
        + """\
pipeline:
  mutators:
    - image: gcr.io/kpt-fn/set-labels:v0.1
      configMap:
        env: ignored
    - image: gcr.io/kpt-fn/apply-setters:v0.2
      configMap:
        first: "1"
    - image: gcr.io/kpt-fn/apply-setters:v0.2
      configMap:
        second: "2"
"""
    )
    assert find_setters_from_kptfile(resources_from({"Kptfile": text})) == {"first": "1"}


def test_custom_manifest_and_function_names() -> None:
    """The manifest path identity and function image substring are configurable."""
    text = (
        KPTFILE_HEADER
        + """\
pipeline:
  mutators:
    - image: example.com/my-setters:v1
      configMap:
        a: b
"""
    )
    declared = find_setters_from_kptfile(
        resources_from({"pkg/Kptfile": text}),
        manifest_name="pkg/Kptfile",
        setter_function="my-setters",
    )
    assert declared == {"a": "b"}


@parametrize(
    "files, message",
    [
        (
            {"deployment.yaml": "kind: Deployment\n"},
            "unable to find Kptfile, please include it with the package resources "
            "if it is present",
        ),
        ({"Kptfile": KPTFILE_HEADER}, "unable to find Pipeline declaration in Kptfile"),
        (
            {"Kptfile": KPTFILE_HEADER + "pipeline:\n  mutators: []\n"},
            "unable to find apply-setters fn in Kptfile Pipeline.Mutators",
        ),
        (
            {
                "Kptfile": KPTFILE_HEADER
                + "pipeline:\n  mutators:\n    - image: gcr.io/kpt-fn/apply-setters:v0.2\n"
            },
            "unable to find ConfigMap or ConfigPath fnConfig for apply-setters",
        ),
    ],
)
def test_recoverable_problems_raise_warnings(files: dict[str, str], message: str) -> None:
    """Each missing piece of the declaration has its own warning text."""
    with pytest.raises(SetterDiscoveryWarning) as excinfo:
        find_setters_from_kptfile(resources_from(files))
    assert str(excinfo.value) == message


@parametrize(
    "pipeline",
    [
        "pipeline: [a, b]\n",
        "pipeline:\n  mutators: {a: b}\n",
        "pipeline:\n  mutators:\n    - just-a-string\n",
        "pipeline:\n  mutators:\n    - image: apply-setters\n      configMap: [a]\n",
    ],
)
def test_malformed_kptfile_is_fatal(pipeline: str) -> None:
    """A Kptfile with the wrong shape cannot be interpreted."""
    with pytest.raises(ManifestReadError, match="unable to read Kptfile"):
        find_setters_from_kptfile(resources_from({"Kptfile": KPTFILE_HEADER + pipeline}))


@parametrize(
    "raw, expected",
    [
        ("[dev, stage]", ["dev", "stage"]),
        ("- a\n- b\n", ["a", "b"]),
        ("[]", []),
        ("my-nginx", None),
        ("1.14", None),
        ("{a: b}", None),
        ("[unclosed", None),
    ],
)
def test_parse_array_setter_values(raw: str, expected: list[str] | None) -> None:
    """Only YAML sequences are array values; anything else stays scalar."""
    assert parse_array_setter_values(raw) == expected


def test_seed_registry_splits_kinds() -> None:
    """Sequence-valued declarations seed array setters, the rest scalar setters."""
    registry = SetterRegistry()
    seed_registry(registry, {"app": "my-nginx", "envs": "[stage, dev]"})
    assert registry.scalar_setters["app"].value == "my-nginx"
    assert registry.array_setters["envs"].values == ["stage", "dev"]
    assert all(r.count == 0 for r in registry.results())
