"""Module scaffolder -- renders and writes the files of a new module.

Quick usage::

    from modgen.naming import derive_identifiers
    from modgen.scaffolder import FileEmitter, TemplateRenderer

    files = TemplateRenderer().render_module(derive_identifiers("userProfile"))
    results = await FileEmitter().emit("src/app/modules/userProfile", files)
"""

from modgen.scaffolder.emitter import DirectoryCreationError, EmitResult, FileEmitter
from modgen.scaffolder.templates import GeneratedFile, TemplateRenderer

__all__ = [
    "DirectoryCreationError",
    "EmitResult",
    "FileEmitter",
    "GeneratedFile",
    "TemplateRenderer",
]
