# topmark:header:start
#
#   project      : SetterScan
#   file         : test_fn.py
#   file_relpath : tests/cli/test_fn.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: the `fn` command as a KRM function on stdin/stdout."""

from __future__ import annotations

from setterscan.resources.loader import parse_yaml_value
from tests.cli.conftest import assert_DATA_ERROR, assert_SUCCESS, run_cli
from tests.conftest import mark_cli

RESOURCE_LIST = """\
apiVersion: config.kubernetes.io/v1
kind: ResourceList
items:
  - apiVersion: kpt.dev/v1
    kind: Kptfile
    metadata:
      name: pkg
      annotations:
        config.kubernetes.io/path: Kptfile
    pipeline:
      mutators:
        - image: gcr.io/kpt-fn/apply-setters:v0.2
          configMap:
            replicas: "3"
  - apiVersion: apps/v1
    kind: Deployment
    metadata:
      name: app
      annotations:
        config.kubernetes.io/path: deployment.yaml
    spec:
      replicas: 3 # kpt-set: ${replicas}
"""


@mark_cli
def test_fn_writes_results() -> None:
    """The ResourceList comes back with one info result per setter."""
    result = run_cli(["fn"], input_text=RESOURCE_LIST)
    assert_SUCCESS(result)
    data = parse_yaml_value(result.stdout)
    assert [item["kind"] for item in data["items"]] == ["Kptfile", "Deployment"]
    assert [(r["severity"], r["message"]) for r in data["results"]] == [
        ("info", "Name: replicas, Value: 3, Type: string, Count: 1"),
    ]
    assert "replicas: 3 # kpt-set: ${replicas}" in result.stdout


@mark_cli
def test_fn_reports_warnings_as_results() -> None:
    """Kptfile warnings become warning results."""
    text = "kind: ResourceList\nitems: []\n"
    result = run_cli(["fn"], input_text=text)
    assert_SUCCESS(result)
    data = parse_yaml_value(result.stdout)
    assert [r["severity"] for r in data["results"]] == ["warning"]


@mark_cli
def test_fn_rejects_other_input() -> None:
    """Input that is not a ResourceList exits with DATA_ERROR."""
    assert_DATA_ERROR(run_cli(["fn"], input_text="kind: ConfigMap\n"))
