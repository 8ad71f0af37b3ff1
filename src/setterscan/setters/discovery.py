# topmark:header:start
#
#   project      : SetterScan
#   file         : discovery.py
#   file_relpath : src/setterscan/setters/discovery.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""One setter discovery pass over a package's resources.

A `SetterDiscovery` session owns its registry and diagnostics:

    1. seed the registry from the Kptfile's setter function (warnings are
       recorded, not raised);
    2. walk every resource in the order given;
    3. project the registry into a name-sorted `DiscoveryReport`.

Sessions are single-use and not shared between threads; run one session per
package.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from setterscan.config.logging import get_logger
from setterscan.config.model import Config
from setterscan.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog
from setterscan.errors import SetterDiscoveryWarning
from setterscan.setters.manifest import find_setters_from_kptfile, seed_registry
from setterscan.setters.registry import SetterRegistry
from setterscan.setters.walker import SetterWalker

if TYPE_CHECKING:
    from collections.abc import Iterable

    from setterscan.config.logging import SetterscanLogger
    from setterscan.resources.model import Resource
    from setterscan.setters.registry import SetterResult

logger: SetterscanLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DiscoveryReport:
    """Outcome of a discovery pass.

    Attributes:
        results (tuple[SetterResult, ...]): Discovered setters sorted by name.
        warnings (FrozenDiagnosticLog): Recoverable problems, in emission order.
    """

    results: tuple[SetterResult, ...] = ()
    warnings: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    def get(self, name: str) -> SetterResult | None:
        """Return the result for setter ``name``, if discovered."""
        for result in self.results:
            if result.name == name:
                return result
        return None


class SetterDiscovery:
    """A single discovery session.

    Args:
        config (Config | None): Runtime config; defaults are used when omitted.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config: Config = config or Config.from_defaults()
        self.registry = SetterRegistry()
        self.diagnostics = DiagnosticLog()
        self._walker = SetterWalker(self.registry)

    def seed(self, resources: Iterable[Resource]) -> None:
        """Seed the registry from the Kptfile, recording recoverable problems as warnings.

        Raises:
            ManifestReadError: If the Kptfile cannot be interpreted.
            ConfigPathNotFoundError: If the setter function's ``configPath`` is missing.
        """
        try:
            declared: dict[str, str] = find_setters_from_kptfile(
                resources,
                manifest_name=self.config.manifest_name,
                setter_function=self.config.setter_function,
            )
        except SetterDiscoveryWarning as warning:
            logger.info("Kptfile setters unavailable: %s", warning)
            self.diagnostics.add_warning(str(warning))
            return
        seed_registry(self.registry, declared)

    def walk(self, resources: Iterable[Resource]) -> None:
        """Walk each resource in order, recording field-level setter markers."""
        for resource in resources:
            self._walker.walk(resource)

    def results(self) -> list[SetterResult]:
        """Return the current (possibly partial) results sorted by name."""
        return self.registry.results()

    def report(self) -> DiscoveryReport:
        """Return the current state as an immutable report."""
        return DiscoveryReport(results=tuple(self.results()), warnings=self.diagnostics.freeze())

    def run(self, resources: Iterable[Resource]) -> DiscoveryReport:
        """Seed, walk and report in one call.

        Raises:
            SetterscanError: Any fatal error; no partial report is returned.
        """
        resources = list(resources)
        logger.debug("Discovering setters in %d resource(s)", len(resources))
        self.seed(resources)
        self.walk(resources)
        report: DiscoveryReport = self.report()
        logger.debug(
            "Discovered %d setter(s) with %d warning(s)", len(report.results), len(report.warnings)
        )
        return report


def discover_setters(
    resources: Iterable[Resource],
    config: Config | None = None,
) -> DiscoveryReport:
    """Run a fresh discovery session over ``resources``."""
    return SetterDiscovery(config).run(resources)
