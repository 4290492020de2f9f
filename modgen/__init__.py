"""modgen -- scaffold API modules and wire them into a TypeScript project.

Creates the seven files of a new module (interface, schema, validation,
route, controller, service, swagger) and patches the project's route and
Swagger registries so the module is live without manual edits.

Quick usage::

    from modgen import GeneratorConfig, ModuleGenerator

    generator = ModuleGenerator(GeneratorConfig(project_root="./my-api"))
    report = await generator.generate("userProfile")
"""

from modgen.config import GeneratorConfig
from modgen.generator import GenerationReport, ModuleGenerator

__version__ = "0.1.0"

__all__ = [
    "GenerationReport",
    "GeneratorConfig",
    "ModuleGenerator",
]
