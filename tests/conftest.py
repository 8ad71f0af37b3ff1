# topmark:header:start
#
#   project      : SetterScan
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SetterScan test suite.

Sets up TRACE logging for test runs and provides small builders for package
directories, resources and configs.

Notes:
    Build configs with `MutableConfig` (mutable), then `freeze()` into a
    `Config` before handing them to the engine. Do **not** mutate a frozen
    `Config`; call `Config.thaw()` and freeze again instead.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from setterscan.config import logging
from setterscan.config.model import MutableConfig
from setterscan.resources.loader import parse_resources

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from setterscan.config.model import Config
    from setterscan.resources.model import Resource

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_setterscan_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so failures carry full engine output."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


KPTFILE_INLINE = """\
apiVersion: kpt.dev/v1
kind: Kptfile
metadata:
  name: nginx
pipeline:
  mutators:
    - image: gcr.io/kpt-fn/apply-setters:v0.2
      configMap:
        app: my-nginx
        tag: "1.14"
        environments: "[dev, stage]"
"""

DEPLOYMENT = """\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: my-nginx # kpt-set: ${app}
spec:
  replicas: 3 # kpt-set: ${replicas}
  template:
    spec:
      containers:
        - name: nginx
          image: nginx:1.14 # kpt-set: ${image}:${tag}
"""

CONFIGMAP = """\
apiVersion: v1
kind: ConfigMap
metadata:
  name: envs
  labels:
    app: my-nginx # kpt-set: ${app}
data:
  environments: # kpt-set: ${environments}
    - dev
    - stage
"""


def write_package(root: Path, files: Mapping[str, str]) -> Path:
    """Write ``files`` (relative path to text) under ``root`` and return ``root``."""
    for rel, text in files.items():
        path: Path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


def resources_from(files: Mapping[str, str]) -> list[Resource]:
    """Parse ``files`` (path identity to YAML text) into resources, in mapping order."""
    out: list[Resource] = []
    for path, text in files.items():
        out.extend(parse_resources(text, path=path))
    return out


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and `apply_args` overrides."""
    return MutableConfig.from_defaults().apply_args(overrides).freeze()


@pytest.fixture
def sample_package(tmp_path: Path) -> Path:
    """A package with an inline-configMap Kptfile, a Deployment and a ConfigMap."""
    return write_package(
        tmp_path / "pkg",
        {
            "Kptfile": KPTFILE_INLINE,
            "deployment.yaml": DEPLOYMENT,
            "sub/configmap.yaml": CONFIGMAP,
        },
    )
