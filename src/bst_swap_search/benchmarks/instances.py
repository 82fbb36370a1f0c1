"""Benchmark instances: seeded random trees and on-disk instance files."""

from __future__ import annotations

import os
import random
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

from bst_swap_search.inputs.parser import InputValidationError, parse
from bst_swap_search.tree.state import TreeState


@dataclass(frozen=True)
class Instance:
    """A tree to solve plus a stable identifier."""

    instance_id: str
    state: TreeState
    path: Path | None = None


@dataclass(frozen=True)
class InstanceSpec:
    """Random instance family: ``count`` permutations of ``1..size``."""

    size: int
    count: int
    seed: int = 0


def random_instance(size: int, rng: random.Random, name: str) -> Instance:
    values = list(range(1, size + 1))
    rng.shuffle(values)
    return Instance(name, TreeState(values))


def random_suite(specs: Iterable[InstanceSpec]) -> List[Instance]:
    """Deterministic random instances, one RNG per spec."""
    instances: List[Instance] = []
    for spec in specs:
        if spec.size < 1:
            msg = f"Instance size must be positive, got {spec.size}."
            raise ValueError(msg)
        rng = random.Random(f"{spec.size}:{spec.seed}")
        for idx in range(spec.count):
            name = f"random_n{spec.size}_s{spec.seed}_{idx}"
            instances.append(random_instance(spec.size, rng, name))
    return instances


def _resolve_root(root: str | Path | None) -> Path:
    """Prefer explicit root, fall back to env var."""
    if root is not None:
        return Path(root).expanduser().resolve()
    env_path = os.environ.get("BST_INSTANCES_ROOT")
    if env_path:
        return Path(env_path).expanduser().resolve()
    msg = "Instance root not provided; set BST_INSTANCES_ROOT or pass --instances-root."
    raise FileNotFoundError(msg)


def discover_instance_files(root: str | Path | None) -> list[Path]:
    """Recursively find ``.txt`` instance files beneath ``root``, sorted."""
    root_path = _resolve_root(root)
    if not root_path.exists():
        msg = f"Instance root not found: {root_path}"
        raise FileNotFoundError(msg)
    files = sorted(p for p in root_path.rglob("*.txt") if p.is_file())
    if not files:
        msg = f"No .txt instance files found under {root_path}"
        raise FileNotFoundError(msg)
    return files


def load_instances(root: str | Path | None, *, max_size: int | None = None) -> list[Instance]:
    """Load every valid instance file; invalid ones are skipped with a warning."""
    root_path = _resolve_root(root)
    instances: list[Instance] = []
    for path in discover_instance_files(root_path):
        try:
            values = parse(path)
        except InputValidationError as exc:
            warnings.warn(f"[instances] skipping invalid instance {path}: {exc}")
            continue
        if max_size is not None and len(values) > max_size:
            continue
        instance_id = path.relative_to(root_path).with_suffix("").as_posix()
        instances.append(Instance(instance_id, TreeState(values), path))
    return instances


__all__ = [
    "Instance",
    "InstanceSpec",
    "discover_instance_files",
    "load_instances",
    "random_instance",
    "random_suite",
]
