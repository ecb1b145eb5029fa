"""
Graph diagnostics: structure statistics and printable listings of a tape.
"""

import numpy as np
from typing import Dict
from collections import Counter


def get_graph_stats(tape) -> Dict:
    """
    Statistics of every Node on `tape` (without printing).

    fan-in counts the parents of a derived node (0 for leaves); fan-out counts
    how many operations consume a node.
    """
    if not tape.nodes:
        return {
            'nodes': 0,
            'leaves': 0,
            'edges': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    nodes = tape.nodes
    operations = tape.operations
    fan_ins = [len(node.producer.parents) if node.producer is not None else 0
               for node in nodes]

    consumers = Counter(h for op in operations for h in op.parents)
    fan_outs = [consumers[node.handle] for node in nodes]

    op_counter = Counter(op.op_tag for op in operations)

    return {
        'nodes': len(nodes),
        'leaves': sum(1 for node in nodes if node.is_leaf),
        'edges': sum(fan_ins),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(tape) -> Dict:
    """Print get_graph_stats() as a table and return it."""
    stats = get_graph_stats(tape)
    if stats['nodes'] == 0:
        print("Empty computation graph")
        return stats

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH SUMMARY")
    print("=" * 70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Leaf nodes:         {stats['leaves']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_tag, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / len(tape.operations)
        print(f"  {op_tag:12s}: {count:6,} ({pct:5.1f}%)")
    print("=" * 70 + "\n")
    return stats


def format_computation_graph(tape, max_nodes: int = 20) -> str:
    """One line per node: handle, op tag, value, gradient and parent handles."""
    nodes = tape.nodes
    if not nodes:
        return "Empty graph"

    lines = []
    for node in nodes[:max_nodes]:
        head = f"Node {node.handle:4d}: "
        if node.producer is not None:
            parents = ", ".join(f"Node{h}" for h in node.producer.parents)
            lines.append(f"{head}{node.producer.op_tag:6s} "
                         f"({float(node.value):10.6f}, grad {float(node.gradient):10.6f}) "
                         f"<- [{parents}]")
        else:
            lines.append(f"{head}{'leaf':6s} "
                         f"({float(node.value):10.6f}, grad {float(node.gradient):10.6f})")

    if len(nodes) > max_nodes:
        lines.append(f"... ({len(nodes) - max_nodes} more nodes)")
    return "\n".join(lines)
