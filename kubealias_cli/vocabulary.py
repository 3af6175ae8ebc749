from __future__ import annotations

from typing import Sequence

from .generator import AliasGenerator, Part

COMMANDS: tuple[Part, ...] = (Part("k", "kubectl"),)

GLOBAL_OPS: tuple[Part, ...] = (Part("sys", "--namespace=kube-system"),)

OPERATIONS: tuple[Part, ...] = (
    Part("a", "apply --recursive -f"),
    Part("ak", "apply -k", incompatible_with=("sys",)),
    Part("k", "kustomize", incompatible_with=("sys",)),
    Part("ex", "exec -i -t"),
    Part("lo", "logs -f"),
    Part("lop", "logs -f -p"),
    Part("p", "proxy", incompatible_with=("sys",)),
    Part("pf", "port-forward", incompatible_with=("sys",)),
    Part("g", "get"),
    Part("d", "describe", incompatible_with=("sys",)),
    Part("rm", "delete", incompatible_with=("sys",)),
    Part("run", "run --rm --restart=Never --image-pull-policy=IfNotPresent -i -t"),
)

RESOURCES: tuple[Part, ...] = (
    # base k8s
    Part("po", "pods", ("g", "d", "rm")),
    Part("dep", "deployment", ("g", "d", "rm")),
    Part("sts", "statefulset", ("g", "d", "rm")),
    Part("svc", "service", ("g", "d", "rm")),
    Part("ing", "ingress", ("g", "d", "rm")),
    Part("cm", "configmap", ("g", "d", "rm")),
    Part("sec", "secret", ("g", "d", "rm")),
    Part("no", "nodes", ("g", "d"), ("sys",)),
    Part("ns", "namespaces", ("g", "d"), ("sys",)),
    # istio
    Part("vs", "virtualservices", ("g", "d", "rm")),
)

# "all" appears twice: --all-namespaces for get/describe, --all for delete.
ARGUMENTS: tuple[Part, ...] = (
    Part("oyaml", "-o=yaml", ("g",), ("owide", "ojson", "sl")),
    Part("owide", "-o=wide", ("g",), ("oyaml", "ojson")),
    Part("ojson", "-o=json", ("g",), ("owide", "oyaml", "sl")),
    Part("all", "--all-namespaces", ("g", "d"), ("rm", "f", "no", "sys")),
    Part("sl", "--show-labels", ("g",), ("oyaml", "ojson")),
    Part("all", "--all", ("rm",)),
    Part("w", "--watch", ("g",), ("oyaml", "ojson", "owide")),
)


def resource_aliases(resources: Sequence[Part]) -> tuple[str, ...]:
    return tuple(resource.alias for resource in resources)


POSITIONAL_ARGS: tuple[Part, ...] = (
    Part(
        "f",
        "--recursive -f",
        ("g", "d", "rm"),
        resource_aliases(RESOURCES) + ("all", "l", "sys"),
    ),
    Part("l", "-l", ("g", "d", "rm"), ("f", "all")),
    Part("n", "--namespace", ("g", "d", "rm", "lo", "ex", "pf"), ("ns", "no", "sys", "all")),
)


def default_generator() -> AliasGenerator:
    return AliasGenerator(
        commands=COMMANDS,
        global_ops=GLOBAL_OPS,
        ops=OPERATIONS,
        resources=RESOURCES,
        args=ARGUMENTS,
        pos_args=POSITIONAL_ARGS,
    )
