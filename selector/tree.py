"""Decision tree rendered as a DAG for auditing rule priority."""

import networkx as nx
from typing import List, Optional

from .base import BRANCH_RULES, Branch

ROOT = "profile"


def rule_node(branch: Branch, rule_name: str) -> str:
    return f"{branch.value}:{rule_name}"


def decision_graph() -> nx.DiGraph:
    """Build root -> branch -> rule chain, one chain per branch.

    Each rule points at the next rule of its branch, so following
    successors from a branch node yields the evaluation order.
    """
    graph = nx.DiGraph()
    graph.add_node(ROOT, kind="root")

    for branch, rules in BRANCH_RULES.items():
        graph.add_node(
            branch.value,
            kind="branch",
            duplicates_allowed=branch.duplicates_allowed,
            concurrent=branch.concurrent,
        )
        graph.add_edge(ROOT, branch.value)

        previous = branch.value
        for position, rule in enumerate(rules):
            node = rule_node(branch, rule.name)
            graph.add_node(
                node,
                kind="rule",
                rule=rule.name,
                position=position,
                shape=rule.shape.value,
                ordering=rule.ordering.value,
                concurrency=rule.concurrency.value,
            )
            graph.add_edge(previous, node, fallthrough=previous != branch.value)
            previous = node

    return graph


def rule_order(branch: Branch, graph: Optional[nx.DiGraph] = None) -> List[str]:
    """Rule names of a branch in evaluation order."""
    if graph is None:
        graph = decision_graph()
    return [
        graph.nodes[node]["rule"]
        for node in nx.dfs_preorder_nodes(graph, branch.value)
        if node != branch.value
    ]
