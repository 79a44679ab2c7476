from __future__ import annotations

from typing import Dict, List, Optional, Union

from .core.theory import KINDS, DelaunayArguments, LunarTheory, PlanetaryTheory, TheoryFactory, TheoryRegistry

_registry: Optional[TheoryRegistry] = None

def set_registry(reg: TheoryRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> TheoryRegistry:
    if _registry is None:
        raise RuntimeError("Theory registry not initialized")
    return _registry

def list_theories(kind: Optional[str] = None) -> Union[List[str], Dict[str, List[str]]]:
    if kind is not None:
        return _reg().list(kind)
    return {k: _reg().list(k) for k in KINDS}

def default_theories() -> Dict[str, str]:
    return dict(_reg().defaults)

def register_theory(kind: str, name: str, factory: TheoryFactory, *, overwrite: bool = False) -> None:
    _reg().register(kind, name, factory, overwrite=overwrite)

def use_theories(
    *,
    planetary: Optional[str] = None,
    lunar: Optional[str] = None,
    delaunay: Optional[str] = None,
) -> None:
    """Change the registry defaults; arguments left as None keep the current choice."""
    for kind, name in (("planetary", planetary), ("lunar", lunar), ("delaunay", delaunay)):
        if name is not None:
            _reg().set_default(kind, name)

# ============================================================
# Resolution helpers used by the reduction modules
# ============================================================

def _resolve(kind: str, theory):
    if theory is None:
        return _reg().default(kind)
    if isinstance(theory, str):
        return _reg().get(kind, theory)
    return theory

def planetary_theory(theory: Union[str, PlanetaryTheory, None] = None) -> PlanetaryTheory:
    return _resolve("planetary", theory)

def lunar_theory(theory: Union[str, LunarTheory, None] = None) -> LunarTheory:
    return _resolve("lunar", theory)

def delaunay_arguments(theory: Union[str, DelaunayArguments, None] = None) -> DelaunayArguments:
    return _resolve("delaunay", theory)
