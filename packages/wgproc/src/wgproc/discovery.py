from __future__ import annotations

import importlib
import logging
import pkgutil

from .registry import register

log = logging.getLogger(__name__)

def register_from_package(pkg_name: str = "wgproc.generators",
                          expect_var: str = "GEN",
                          verbose: bool = False) -> list[str]:
    """
    Importe tous les modules d'un package et enregistre tout objet `GEN`
    (instance conforme à l'interface Generator).
    Retourne la liste triée des noms effectivement enregistrés.
    """
    level = logging.INFO if verbose else logging.DEBUG
    pkg = importlib.import_module(pkg_name)
    registered: list[str] = []

    for mod in pkgutil.iter_modules(pkg.__path__):  # type: ignore[attr-defined]
        if mod.ispkg or mod.name.startswith("_"):
            continue
        module = importlib.import_module(f"{pkg_name}.{mod.name}")
        gen = getattr(module, expect_var, None)
        if gen is None:
            log.log(level, "no %s in %s", expect_var, module.__name__)
            continue
        # Duck-typing doux : doit avoir .info.name et .render
        if hasattr(gen, "info") and hasattr(gen.info, "name") and hasattr(gen, "render"):
            register(gen)
            registered.append(gen.info.name)
            log.log(level, "registered %s from %s", gen.info.name, module.__name__)
        else:
            log.log(level, "skip %s (%s missing .info/.render)", module.__name__, expect_var)
    return sorted(registered)
