# regexnfa

Build nondeterministic finite automata (NFAs) with Thompson's construction
and draw them with Graphviz.

## Installation

```
pip install .
```

Rendering to images requires the Graphviz `dot` program on your `PATH`.
Writing DOT text or DOT files does not need it.

## Building automata

Use an `NFABuilder` from `regexnfa.nfa` to make fragments and combine them.
Every state the builder creates, through `new_state(is_accepting)` or any of
the constructions below, gets the next free numeric id, starting from 0.

```python
from regexnfa.nfa import NFABuilder

builder = NFABuilder()

# (a|b)*c
a_or_b = builder.union(builder.char("a"), builder.char("b"))
nfa = builder.concat(builder.kleene_star(a_or_b), builder.char("c"))

print(nfa.state_count)
```

The builder has these constructions:

| Method | Accepts |
| --- | --- |
| `char(c)` | the single character `c` |
| `any_char()` | any printable ASCII character, newline, tab or carriage return |
| `epsilon()` | the empty string |
| `char_range(start, end)` | one character from `start` to `end` inclusive |
| `union(first, second)` | `first` or `second` |
| `concat(first, second)` | `first` followed by `second` |
| `kleene_star(nfa)` | zero or more repetitions |
| `plus(nfa)` | built the same way as `kleene_star`, so it also accepts the empty string |
| `question(nfa)` | zero or one occurrence |

Each result is an `NFA` with a `start` state, an `accept` state and a
`state_count`. `concat` extends `first` and gives it back, so `first` and the
result are the same object. The other combinators wrap their arguments in new
start and accept states, and the inner accept states stop being accepting.

A `State` has an `id`, an `is_accepting` flag and a list of `transitions`,
newest first. Each `Transition` has a `symbol` and a `target` state.
`State.add_transition(symbol, to)` adds an edge by hand; a symbol of
`EPSILON` (which is `None`) makes an epsilon edge.

## Rendering

```python
from regexnfa.graphviz import nfa_to_dot, export_nfa_to_dot, export_nfa_to_image

print(nfa_to_dot(nfa))                 # DOT source as a string
export_nfa_to_dot(nfa, "nfa.dot")      # write a DOT file, returns its path
export_nfa_to_image(nfa, "nfa", "png") # writes nfa.dot, then runs dot to make nfa.png
```

The DOT output lists states in breadth-first order from the start state.
Edges are labelled with their symbol. Epsilon edges are labelled `ε`, and
newline, tab and carriage return appear as `\n`, `\t` and `\r`. Accepting
states are drawn as double circles. `symbol_label(symbol)` gives the label
for a single symbol, and `command_exists(cmd)` tells whether a program can
be found on `PATH`.

`export_nfa_to_image` returns the path of the rendered image. It raises
`FileNotFoundError` when `dot` is not on `PATH` (the DOT file has already
been written by then) and `subprocess.CalledProcessError` when `dot` fails.

## What it does not do

The package has no regular-expression parser and no command-line tool: you
build automata by calling the `NFABuilder` methods yourself. It does not run
automata against input strings either.