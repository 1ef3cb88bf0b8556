"""Export NFAs to Graphviz DOT text and rendered images."""

from __future__ import annotations

import shutil
import subprocess
import sys
from collections import deque
from pathlib import Path

from .nfa import EPSILON, NFA, State

_ESCAPED = {"\n": "\\n", "\t": "\\t", "\r": "\\r"}


def symbol_label(symbol: str | None) -> str:
    """Readable label for a transition symbol."""
    if symbol is EPSILON:
        return "ε"
    return _ESCAPED.get(symbol, symbol)


def _bfs(nfa: NFA):
    queue: deque[State] = deque([nfa.start])
    visited = {id(nfa.start)}
    while queue:
        state = queue.popleft()
        yield state
        for t in state.transitions:
            if id(t.target) not in visited:
                visited.add(id(t.target))
                queue.append(t.target)


def nfa_to_dot(nfa: NFA) -> str:
    """Render an NFA as DOT text, visiting states breadth first from the start."""
    lines = [
        "digraph NFA {",
        "    rankdir=LR;",
        "    node [shape=circle];",
        '    "start" [shape=point];',
        f'    "start" -> "{nfa.start.id}";',
    ]
    for state in _bfs(nfa):
        if state.is_accepting:
            lines.append(f'    "{state.id}" [shape=doublecircle];')
        for t in state.transitions:
            lines.append(
                f'    "{state.id}" -> "{t.target.id}" [label="{symbol_label(t.symbol)}"];'
            )
    lines.append("}")
    return "\n".join(lines) + "\n"


def export_nfa_to_dot(nfa: NFA, filename: str | Path) -> Path:
    """Write the NFA as a DOT file and return its path."""
    path = Path(filename)
    path.write_text(nfa_to_dot(nfa), encoding="utf-8")
    print(f"DOT file successfully written to {path}")
    return path


def command_exists(cmd: str) -> bool:
    """Whether ``cmd`` can be found on the PATH."""
    return shutil.which(cmd) is not None


def export_nfa_to_image(nfa: NFA, filename: str, format: str) -> Path:
    """Write ``filename.dot`` and render it with Graphviz to ``filename.format``.

    Raises FileNotFoundError when the ``dot`` command is missing and
    subprocess.CalledProcessError when rendering fails.
    """
    dot_path = export_nfa_to_dot(nfa, f"{filename}.dot")
    if not command_exists("dot"):
        raise FileNotFoundError(
            "Graphviz 'dot' command not found; the DOT file "
            f"{dot_path} can still be used manually"
        )
    output = Path(f"{filename}.{format}")
    command = ["dot", f"-T{format}", str(dot_path), "-o", str(output)]
    print(f"Executing command: {' '.join(command)}")
    result = subprocess.run(command)
    if result.returncode != 0:
        if result.returncode == 127:
            print("Make sure Graphviz is installed and in your PATH.", file=sys.stderr)
        raise subprocess.CalledProcessError(result.returncode, command)
    print(f"NFA successfully exported to {output}")
    return output