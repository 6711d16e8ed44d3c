"""Canned automata with known answers, printed by the examples menu entry."""

from typing import Callable, List, NamedTuple, Tuple

from automaton import EPSILON, Automaton


def exactly_ab() -> Automaton:
    a = Automaton(name="exactly_ab")
    for state in ("q0", "q1", "q2"):
        a.add_state(state)
    a.add_symbol("a")
    a.add_symbol("b")
    a.add_transition("q0", "a", "q1")
    a.add_transition("q1", "b", "q2")
    a.set_start("q0")
    a.add_accepting("q2")
    return a


def ends_with_ab() -> Automaton:
    a = Automaton(name="ends_with_ab")
    for state in ("q0", "q1", "q2"):
        a.add_state(state)
    a.add_symbol("a")
    a.add_symbol("b")
    # stay in q0 on anything, guess where the final "ab" starts
    a.add_transition("q0", "a", "q0")
    a.add_transition("q0", "b", "q0")
    a.add_transition("q0", "a", "q1")
    a.add_transition("q1", "b", "q2")
    a.set_start("q0")
    a.add_accepting("q2")
    return a


def a_star_b() -> Automaton:
    a = Automaton(name="a_star_b")
    for state in ("qe0", "qe1", "qe2"):
        a.add_state(state)
    a.add_symbol("a")
    a.add_symbol("b")
    a.add_transition("qe0", EPSILON, "qe1")
    a.add_transition("qe1", "a", "qe1")
    a.add_transition("qe1", "b", "qe2")
    a.set_start("qe0")
    a.add_accepting("qe2")
    return a


class Sample(NamedTuple):
    key: str
    title: str
    description: str
    factory: Callable[[], Automaton]
    cases: Tuple[Tuple[str, bool], ...]


SAMPLES: List[Sample] = [
    Sample(
        "dfa",
        "Deterministic finite automaton (DFA)",
        'Accepts exactly the word "ab".',
        exactly_ab,
        (("ab", True), ("", False), ("a", False), ("ba", False), ("abb", False)),
    ),
    Sample(
        "nfa",
        "Non-deterministic finite automaton (NFA)",
        'Accepts words over {a, b} ending in "ab".',
        ends_with_ab,
        (
            ("ab", True),
            ("aab", True),
            ("bab", True),
            ("aaab", True),
            ("b", False),
            ("a", False),
            ("aba", False),
            ("", False),
        ),
    ),
    Sample(
        "epsilon",
        "NFA with an epsilon transition",
        "Accepts a*b (zero or more a's followed by one b).",
        a_star_b,
        (
            ("b", True),
            ("ab", True),
            ("aab", True),
            ("aaab", True),
            ("", False),
            ("a", False),
            ("ba", False),
        ),
    ),
]


def describe_transitions(automaton: Automaton) -> List[str]:
    return [
        f"  {origin}, {symbol} -> {dest}"
        for origin, symbol, dest in automaton.transition_list()
    ]


def run_samples(output=print) -> bool:
    all_correct = True

    for sample in SAMPLES:
        automaton = sample.factory()
        output(f"\n{sample.title}:")
        output(sample.description)
        output(f"States: {', '.join(automaton.states)}")
        output(f"Alphabet: {', '.join(automaton.alphabet)}")
        output("Transitions:")
        for line in describe_transitions(automaton):
            output(line)
        output(f"Start state: {automaton.start_state}")
        output(f"Accepting states: {', '.join(automaton.accepting_states)}")
        output("------------------------------------")

        for word, expected in sample.cases:
            result = automaton.accepts(word)
            verdict = "accepted" if result else "rejected"
            check = "correct" if result == expected else "incorrect"
            all_correct = all_correct and result == expected
            output(f'Word "{word}" -> {verdict} ({check})')

    return all_correct
