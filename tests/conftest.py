from __future__ import annotations

import itertools
from typing import Callable, Sequence

import pytest

from kubealias_cli.generator import Part, is_valid_combination


def _naive_generate(groups: Sequence[Sequence[Part]]) -> list[tuple[Part, ...]]:
    if not groups:
        return []
    out: list[tuple[Part, ...]] = []
    options = [(None,) + tuple(group) for group in groups[1:]]
    for command in groups[0]:
        for picks in itertools.product(*options):
            current: tuple[Part, ...] = (command,)
            ok = True
            for part in picks:
                if part is None:
                    continue
                if not is_valid_combination(current, part):
                    ok = False
                    break
                current = current + (part,)
            if ok:
                out.append(current)
    return out


@pytest.fixture
def naive_generate() -> Callable[[Sequence[Sequence[Part]]], list[tuple[Part, ...]]]:
    return _naive_generate
