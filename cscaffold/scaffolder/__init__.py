"""cscaffold scaffolder -- materializes C and C++ project skeletons.

Takes a validated ``ResolvedConfig`` and writes the project root, its
``src``/``build``/``include`` folders, ``CMakeLists.txt``, a hello-world
source file, ``build.sh`` and ``.gitignore``.

Quick usage::

    from cscaffold.config import ResolvedConfig
    from cscaffold.scaffolder import ProjectGenerator

    config = ResolvedConfig.from_tokens("demo", "CPP")
    project_path = ProjectGenerator(config).generate("/tmp/output")
"""

from cscaffold.scaffolder.generator import SUBDIRECTORIES, ProjectGenerator
from cscaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "SUBDIRECTORIES",
    "ProjectGenerator",
    "TemplateRenderer",
]
