"""Registry patching -- wires new modules into the route and Swagger registries."""

from modgen.registry.patcher import (
    PatchOp,
    PatchResult,
    PatchStatus,
    RegistryKind,
    RegistryOutcome,
    apply_patch,
    docs_patch_op,
    patch_registry_file,
    route_patch_op,
)

__all__ = [
    "PatchOp",
    "PatchResult",
    "PatchStatus",
    "RegistryKind",
    "RegistryOutcome",
    "apply_patch",
    "docs_patch_op",
    "patch_registry_file",
    "route_patch_op",
]
