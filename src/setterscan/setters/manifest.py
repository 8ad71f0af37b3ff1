# topmark:header:start
#
#   project      : SetterScan
#   file         : manifest.py
#   file_relpath : src/setterscan/setters/manifest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read setters declared by the apply-setters function in the package Kptfile.

A Kptfile may declare a pipeline whose mutators include the setter-applying
function. Its configuration provides the authoritative setter values, either
inline::

    pipeline:
      mutators:
        - image: gcr.io/kpt-fn/apply-setters:v0.1
          configMap:
            replicas: "3"
            environments: "[dev, stage]"

or through ``configPath``, naming another resource in the package whose
``data`` section holds the same mapping.

Missing pieces (no Kptfile, no pipeline, no setter function, no config) raise
`SetterDiscoveryWarning`; a ``configPath`` that names a file absent from the
package raises the fatal `ConfigPathNotFoundError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ruamel.yaml.comments import CommentedSeq
from ruamel.yaml.error import YAMLError

from setterscan.config.logging import get_logger
from setterscan.constants import APPLY_SETTERS_IMAGE, KPTFILE_NAME
from setterscan.errors import ConfigPathNotFoundError, ManifestReadError, SetterDiscoveryWarning
from setterscan.resources.loader import dump_inline, parse_yaml_value
from setterscan.resources.model import MappingNode, ScalarNode, SequenceNode

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from setterscan.config.logging import SetterscanLogger
    from setterscan.resources.model import Node, Resource
    from setterscan.setters.registry import SetterRegistry

logger: SetterscanLogger = get_logger(__name__)


def _is_unset(node: Node | None) -> bool:
    return node is None or (isinstance(node, ScalarNode) and node.value in ("", "~", "null"))


@dataclass(frozen=True, slots=True)
class PipelineFunction:
    """A function entry of the Kptfile pipeline."""

    image: str
    config_map: dict[str, str] | None = None
    config_path: str | None = None

    @classmethod
    def from_node(cls, node: Node) -> PipelineFunction:
        """Read a pipeline function entry.

        Raises:
            ManifestReadError: If the entry or its ``configMap`` has the wrong shape.
        """
        if not isinstance(node, MappingNode):
            raise ManifestReadError("unable to read Kptfile: pipeline function must be a mapping")
        config_map: dict[str, str] | None = None
        raw_map: Node | None = node.get("configMap")
        if not _is_unset(raw_map):
            if not isinstance(raw_map, MappingNode) or not all(
                isinstance(f.value, ScalarNode) for f in raw_map.fields
            ):
                raise ManifestReadError(
                    "unable to read Kptfile: configMap must map names to string values"
                )
            config_map = raw_map.to_string_map()
        return cls(
            image=node.get_scalar("image") or "",
            config_map=config_map,
            config_path=node.get_scalar("configPath") or None,
        )


@dataclass(frozen=True, slots=True)
class KptFile:
    """The parts of a Kptfile that setter discovery reads.

    Attributes:
        has_pipeline (bool): Whether a ``pipeline`` section is declared.
        mutators (tuple[PipelineFunction, ...]): Pipeline mutators, in order.
    """

    has_pipeline: bool
    mutators: tuple[PipelineFunction, ...] = ()

    @classmethod
    def from_resource(cls, resource: Resource) -> KptFile:
        """Read the pipeline declaration of a Kptfile resource.

        Raises:
            ManifestReadError: If ``pipeline`` or ``pipeline.mutators`` has the wrong shape.
        """
        pipeline: Node | None = resource.root.get("pipeline")
        if _is_unset(pipeline):
            return cls(has_pipeline=False)
        if not isinstance(pipeline, MappingNode):
            raise ManifestReadError("unable to read Kptfile: pipeline must be a mapping")
        mutators: Node | None = pipeline.get("mutators")
        if _is_unset(mutators):
            return cls(has_pipeline=True)
        if not isinstance(mutators, SequenceNode):
            raise ManifestReadError("unable to read Kptfile: pipeline.mutators must be a list")
        return cls(
            has_pipeline=True,
            mutators=tuple(PipelineFunction.from_node(item) for item in mutators.items),
        )


def find_kptfile(resources: Iterable[Resource], manifest_name: str = KPTFILE_NAME) -> KptFile:
    """Return the Kptfile among ``resources``.

    Raises:
        SetterDiscoveryWarning: If no resource has the manifest's path identity.
        ManifestReadError: If the Kptfile cannot be interpreted.
    """
    for resource in resources:
        if resource.path == manifest_name:
            return KptFile.from_resource(resource)
    raise SetterDiscoveryWarning(
        f"unable to find {manifest_name}, please include it with the package resources "
        "if it is present"
    )


def find_setter_resource(resources: Iterable[Resource], path: str) -> Resource:
    """Return the resource whose path identity is ``path``.

    Raises:
        ConfigPathNotFoundError: If no resource matches.
    """
    for resource in resources:
        if resource.path == path:
            return resource
    raise ConfigPathNotFoundError(path)


def find_setters_from_kptfile(
    resources: Iterable[Resource],
    *,
    manifest_name: str = KPTFILE_NAME,
    setter_function: str = APPLY_SETTERS_IMAGE,
) -> dict[str, str]:
    """Return the setter values declared for the setter function in the Kptfile.

    Only the first mutator whose image contains ``setter_function`` is used.

    Args:
        resources (Iterable[Resource]): The package resources.
        manifest_name (str): Path identity of the Kptfile.
        setter_function (str): Image substring identifying the setter function.

    Returns:
        dict[str, str]: Setter name to raw declared value.

    Raises:
        SetterDiscoveryWarning: If the Kptfile, its pipeline, the setter function
            or the function's config is missing.
        ManifestReadError: If the Kptfile cannot be interpreted.
        ConfigPathNotFoundError: If ``configPath`` names a file not in ``resources``.
    """
    resources = list(resources)
    kptfile: KptFile = find_kptfile(resources, manifest_name)
    if not kptfile.has_pipeline:
        raise SetterDiscoveryWarning(f"unable to find Pipeline declaration in {manifest_name}")

    for fn in kptfile.mutators:
        if setter_function not in fn.image:
            continue
        if fn.config_map is not None:
            logger.debug("Using inline configMap of %s", fn.image)
            return dict(fn.config_map)
        if fn.config_path:
            logger.debug("Using configPath %s of %s", fn.config_path, fn.image)
            return find_setter_resource(resources, fn.config_path).data
        raise SetterDiscoveryWarning(
            f"unable to find ConfigMap or ConfigPath fnConfig for {setter_function}"
        )

    raise SetterDiscoveryWarning(
        f"unable to find {setter_function} fn in {manifest_name} Pipeline.Mutators"
    )


def parse_array_setter_values(raw: str) -> list[str] | None:
    """Parse a declared setter value as a YAML sequence.

    Returns:
        list[str] | None: The elements as single-line text, or ``None`` if
            ``raw`` is not a sequence (the setter is then a scalar).
    """
    try:
        data: Any = parse_yaml_value(raw)
    except YAMLError:
        return None
    if not isinstance(data, CommentedSeq):
        return None
    return [dump_inline(item) for item in data]


def seed_registry(registry: SetterRegistry, setters: Mapping[str, str]) -> None:
    """Declare each Kptfile setter in ``registry`` as an array or scalar setter."""
    for name, raw in setters.items():
        values: list[str] | None = parse_array_setter_values(raw)
        if values is not None:
            registry.seed_array(name, values)
        else:
            registry.seed_scalar(name, raw)
    logger.debug("Seeded %d setter(s) from the Kptfile", len(setters))
