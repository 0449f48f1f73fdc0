"""Dependency resolution: does one module's specifier point at another module?

Resolution is pure string manipulation on paths. Nothing touches the file
system, so a specifier that would need a directory index or package.json
lookup simply fails to match.
"""

import os
from types import ModuleType

from ..models import Dependency, ModuleReport, ModuleSystem


def is_internal_require(specifier: str, flavor: ModuleType = os.path) -> bool:
    """Check whether a require() specifier points inside the project.

    Internal specifiers start with "./" or "../" (using the path flavor's
    separator). Bare package names like "lodash" are never internal.
    """
    seps = [flavor.sep]
    if flavor.altsep:
        seps.append(flavor.altsep)
    return any(specifier.startswith(("." + sep, ".." + sep)) for sep in seps)


def resolve_specifier(
    source_path: str, specifier: str, target_path: str, flavor: ModuleType = os.path
) -> str:
    """Resolve a specifier against the directory of ``source_path``.

    Extension-less specifiers borrow the target's extension, so "./a" can
    resolve to "a.js" or "a.ts" depending on the candidate.
    """
    if flavor.splitext(specifier)[1] == "":
        specifier += flavor.splitext(target_path)[1]
    return flavor.normpath(flavor.join(flavor.dirname(source_path), specifier))


def resolves_to(
    source_path: str,
    dependency: Dependency,
    target_path: str,
    flavor: ModuleType = os.path,
) -> bool:
    """Check whether ``dependency`` declared in ``source_path`` points at ``target_path``.

    Args:
        source_path: Absolute path of the module declaring the dependency
        dependency: One of its declared dependencies
        target_path: Absolute path of the candidate target module
        flavor: Path module (os.path, posixpath or ntpath)

    Returns:
        True if the resolved specifier equals the target path
    """
    if dependency.module_system is ModuleSystem.REQUIRE_TIME and not is_internal_require(
        dependency.path, flavor
    ):
        return False

    resolved = resolve_specifier(source_path, dependency.path, target_path, flavor)
    return resolved == flavor.normpath(target_path)


def has_edge(source: ModuleReport, target: ModuleReport, flavor: ModuleType = os.path) -> bool:
    """True if any dependency of ``source`` resolves to ``target``."""
    return any(resolves_to(source.path, dep, target.path, flavor) for dep in source.dependencies)
