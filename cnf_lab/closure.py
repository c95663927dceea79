from typing import Dict, FrozenSet, Hashable, Iterable, Mapping, Optional


def transitive_closure(relation: Mapping[Hashable, Iterable[Hashable]],
                       nodes: Optional[Iterable[Hashable]] = None) -> Dict[Hashable, FrozenSet[Hashable]]:
    """
    Reachability closure of ``relation`` (Warshall).

    ``nodes`` fixes the iteration order and defaults to the keys of
    ``relation``. Nodes that only appear as targets get an empty row. The
    input mapping is left untouched.
    """
    if nodes is None:
        nodes = list(relation)
    else:
        nodes = list(nodes)

    closure = {node: set(relation.get(node, ())) for node in nodes}
    for targets in list(closure.values()):
        for target in targets:
            closure.setdefault(target, set())

    for k in list(closure):
        for i in closure:
            if k in closure[i]:
                closure[i] |= closure[k]

    return {node: frozenset(targets) for node, targets in closure.items()}
