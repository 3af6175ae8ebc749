from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

STAGES: tuple[str, ...] = (
    "commands",
    "global-ops",
    "operations",
    "resources",
    "args",
    "pos-args",
)

# Stage name -> AliasGenerator field holding that stage's group.
STAGE_FIELDS: dict[str, str] = {
    "commands": "commands",
    "global-ops": "global_ops",
    "operations": "ops",
    "resources": "resources",
    "args": "args",
    "pos-args": "pos_args",
}


@dataclass(frozen=True)
class Part:
    """One token of a generated alias.

    Gates reference other parts by alias. ``allow_when_one_of`` requires one of
    its aliases to be chosen already; ``incompatible_with`` keeps its aliases
    out of every later stage.
    """

    alias: str
    full: str
    allow_when_one_of: tuple[str, ...] = ()
    incompatible_with: tuple[str, ...] = ()


Group = Sequence[Part]
Combination = tuple[Part, ...]


def is_valid_combination(current: Sequence[Part], candidate: Part) -> bool:
    present: set[str] = set()
    for part in current:
        if candidate.alias in part.incompatible_with:
            return False
        present.add(part.alias)

    if candidate.allow_when_one_of:
        return any(alias in present for alias in candidate.allow_when_one_of)
    return True


def render_alias(combination: Sequence[Part]) -> str:
    name = "".join(part.alias for part in combination)
    expansion = " ".join(part.full for part in combination).strip()
    return f"alias {name}='{expansion}'"


def generate(groups: Sequence[Group]) -> Iterator[Combination]:
    """Yield every valid combination, one command from ``groups[0]`` each.

    Later groups are optional stages walked in order. Within a stage the
    accepted parts branch first, then the branch that skips the stage.
    """
    if not groups:
        return
    stages = tuple(groups[1:])
    for command in groups[0]:
        yield from _combine((command,), stages, 0)


def _combine(current: Combination, stages: tuple[Group, ...], stage: int) -> Iterator[Combination]:
    if stage == len(stages):
        yield current
        return
    for part in stages[stage]:
        if is_valid_combination(current, part):
            yield from _combine(current + (part,), stages, stage + 1)
    yield from _combine(current, stages, stage + 1)


@dataclass(frozen=True)
class AliasGenerator:
    commands: tuple[Part, ...]
    global_ops: tuple[Part, ...] = ()
    ops: tuple[Part, ...] = ()
    resources: tuple[Part, ...] = ()
    args: tuple[Part, ...] = ()
    pos_args: tuple[Part, ...] = ()

    def groups(self) -> tuple[Group, ...]:
        return tuple(getattr(self, STAGE_FIELDS[stage]) for stage in STAGES)

    def generate(self) -> Iterator[Combination]:
        return generate(self.groups())

    def render(self) -> Iterator[str]:
        for combination in self.generate():
            yield render_alias(combination)
