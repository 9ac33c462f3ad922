"""automata.py - deterministic finite automata
=============================================

Automata are plain dictionaries as read from JSON files::

   {"states": ["q0", "q1"],
    "alphabet": ["0", "1"],
    "transitions": [{"source": "q0", "input": "0", "target": "q1"}, ...],
    "initialState": "q0",
    "acceptStates": ["q1"]}

Files that use ``from``/``symbol``/``to`` for transitions and
``finalStates`` for the accepting states are accepted as well and are
converted to the layout above by :func:`normalize_automaton`.

Transitions may be missing. A missing transition rejects the word in
:func:`run_automaton`; :func:`make_complete` routes missing transitions
to a sink state.

"""

import copy
import json
import logging as L

SINK_STATE = "sink"


class AutomatonError(ValueError):
    """raised for automata that do not have a valid structure."""


def normalize_automaton(data):
    """return a copy of `data` using the
    ``source/input/target`` and ``acceptStates`` keys."""
    if not isinstance(data, dict):
        raise AutomatonError(
            "automaton must be a JSON object, got {}".format(type(data).__name__))

    result = copy.deepcopy(data)
    if "acceptStates" not in result and "finalStates" in result:
        result["acceptStates"] = result.pop("finalStates")

    transitions = result.get("transitions")
    if isinstance(transitions, list):
        converted = []
        for transition in transitions:
            if isinstance(transition, dict) and "source" not in transition:
                transition = {"source": transition.get("from"),
                              "input": transition.get("symbol"),
                              "target": transition.get("to")}
            converted.append(transition)
        result["transitions"] = converted
    return result


def validate_automaton(data):
    """check the structure of automaton `data`.

    Raises :class:`AutomatonError` describing the first problem found.
    """
    states = data.get("states")
    if not isinstance(states, list) or not states:
        raise AutomatonError("automaton needs a non-empty list of states")

    alphabet = data.get("alphabet")
    if not isinstance(alphabet, list) or not alphabet:
        raise AutomatonError("automaton needs a non-empty alphabet")

    if not isinstance(data.get("transitions"), list):
        raise AutomatonError("automaton needs a list of transitions")

    initial_state = data.get("initialState")
    if not initial_state or initial_state not in states:
        raise AutomatonError(
            "initial state {!r} is not a valid state".format(initial_state))

    if not isinstance(data.get("acceptStates"), list):
        raise AutomatonError("automaton needs a list of accept states")

    for state in data["acceptStates"]:
        if state not in states:
            raise AutomatonError(
                "accept state {!r} is not in the list of states".format(state))

    seen = {}
    for transition in data["transitions"]:
        if not isinstance(transition, dict) or \
           not all(transition.get(x) for x in ("source", "input", "target")):
            raise AutomatonError(
                "transitions need source, input and target: {}".format(transition))
        if transition["source"] not in states:
            raise AutomatonError(
                "source state {!r} is not in the list of states".format(
                    transition["source"]))
        if transition["target"] not in states:
            raise AutomatonError(
                "target state {!r} is not in the list of states".format(
                    transition["target"]))
        if transition["input"] not in alphabet:
            raise AutomatonError(
                "symbol {!r} is not in the alphabet".format(transition["input"]))
        key = (transition["source"], transition["input"])
        if key in seen and seen[key] != transition["target"]:
            raise AutomatonError(
                "automaton is not deterministic: state {!r} has two "
                "transitions on {!r}".format(*key))
        seen[key] = transition["target"]


def load_automaton(infile):
    """read, normalize and validate an automaton from JSON stream `infile`."""
    try:
        data = json.load(infile)
    except ValueError as ex:
        raise AutomatonError("could not parse automaton: {}".format(ex))
    automaton = normalize_automaton(data)
    validate_automaton(automaton)
    L.debug("loaded automaton with {} states and {} transitions".format(
        len(automaton["states"]), len(automaton["transitions"])))
    return automaton


def build_transition_table(automaton):
    """return dictionary mapping (state, symbol) to the target state."""
    return dict(((t["source"], t["input"]), t["target"])
                for t in automaton["transitions"])


def run_automaton(automaton, word):
    """return True if `automaton` accepts `word`.

    A word is rejected if it leaves the automaton without a transition,
    including symbols outside the alphabet.
    """
    table = build_transition_table(automaton)
    state = automaton["initialState"]
    for symbol in word:
        state = table.get((state, symbol))
        if state is None:
            return False
    return state in automaton["acceptStates"]


def is_complete(automaton):
    """return True if every state has a transition for every symbol."""
    table = build_transition_table(automaton)
    return all((state, symbol) in table
               for state in automaton["states"]
               for symbol in automaton["alphabet"])


def make_complete(automaton, alphabet=None, sink=SINK_STATE):
    """return a complete copy of `automaton`.

    Missing transitions lead to a non-accepting `sink` state that loops
    on every symbol. If `alphabet` is given, the automaton is completed
    over the symbols of both alphabets. A complete automaton is
    returned unchanged.
    """
    result = copy.deepcopy(automaton)
    for symbol in alphabet or []:
        if symbol not in result["alphabet"]:
            result["alphabet"].append(symbol)

    if is_complete(result):
        return result

    while sink in result["states"]:
        sink += "'"
    result["states"].append(sink)

    table = build_transition_table(result)
    for state in result["states"]:
        for symbol in result["alphabet"]:
            if (state, symbol) not in table:
                result["transitions"].append(
                    {"source": state, "input": symbol, "target": sink})
    return result


def complement(automaton):
    """return automaton accepting all words over the alphabet
    that `automaton` rejects."""
    result = make_complete(automaton)
    result["acceptStates"] = [state for state in result["states"]
                              if state not in result["acceptStates"]]
    return result


def product(automaton1, automaton2, accept):
    """return the product automaton of `automaton1` and `automaton2`.

    Both automata are completed over the union of their alphabets. Only
    pairs reachable from the pair of initial states are built. States
    are named ``(p,q)``. A pair is accepting if ``accept(a, b)`` is
    true, where `a` and `b` tell whether `p` and `q` are accepting.
    """
    alphabet = list(automaton1["alphabet"])
    for symbol in automaton2["alphabet"]:
        if symbol not in alphabet:
            alphabet.append(symbol)

    automaton1 = make_complete(automaton1, alphabet)
    automaton2 = make_complete(automaton2, alphabet)
    table1 = build_transition_table(automaton1)
    table2 = build_transition_table(automaton2)

    def name(pair):
        return "({},{})".format(*pair)

    start = (automaton1["initialState"], automaton2["initialState"])
    result = {"states": [],
              "alphabet": alphabet,
              "transitions": [],
              "initialState": name(start),
              "acceptStates": []}

    queue = [start]
    visited = set([start])
    while queue:
        pair = queue.pop(0)
        result["states"].append(name(pair))
        if accept(pair[0] in automaton1["acceptStates"],
                  pair[1] in automaton2["acceptStates"]):
            result["acceptStates"].append(name(pair))
        for symbol in alphabet:
            target = (table1[(pair[0], symbol)], table2[(pair[1], symbol)])
            result["transitions"].append(
                {"source": name(pair), "input": symbol, "target": name(target)})
            if target not in visited:
                visited.add(target)
                queue.append(target)
    return result


def union(automaton1, automaton2):
    return product(automaton1, automaton2, lambda a, b: a or b)


def intersection(automaton1, automaton2):
    return product(automaton1, automaton2, lambda a, b: a and b)


def difference(automaton1, automaton2):
    return product(automaton1, automaton2, lambda a, b: a and not b)


OPERATIONS = {"union": union,
              "intersection": intersection,
              "difference": difference}


def format_quintuple(automaton):
    """return the formal quintuple M = (Q, Σ, δ, q0, F) of `automaton`
    as text, with the transition function as a table."""
    table = build_transition_table(automaton)
    alphabet = automaton["alphabet"]

    lines = ["Quintupla formal del autómata finito:",
             "",
             "M = (Q, Σ, δ, q0, F)",
             "",
             "Q = {{{}}}".format(", ".join(automaton["states"])),
             "",
             "Σ = {{{}}}".format(", ".join(alphabet)),
             "",
             "δ: Q × Σ → Q",
             "Tabla de transiciones:",
             "Estado\t| " + "\t| ".join(
                 "δ(q,{})".format(symbol) for symbol in alphabet),
             "-" * 80]

    for state in automaton["states"]:
        row = [state] + [table.get((state, symbol), "-") for symbol in alphabet]
        lines.append("\t| ".join(row) + "\t|")

    lines.extend(["",
                  "q0 = {}".format(automaton["initialState"]),
                  "",
                  "F = {{{}}}".format(", ".join(automaton["acceptStates"]))])
    return "\n".join(lines) + "\n"
