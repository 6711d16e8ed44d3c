"""
Pytest configuration and shared automata for the fasim tests.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from automaton import EPSILON, Automaton
from samples import a_star_b, ends_with_ab, exactly_ab


@pytest.fixture
def dfa_ab():
    """Accepts exactly "ab"."""
    return exactly_ab()


@pytest.fixture
def nfa_ends_ab():
    """Accepts words over {a, b} ending in "ab"."""
    return ends_with_ab()


@pytest.fixture
def eps_a_star_b():
    """Accepts a*b through an epsilon edge out of the start state."""
    return a_star_b()


@pytest.fixture
def eps_chain():
    """q0 -e-> q1 -e-> q2, q3 isolated."""
    a = Automaton(states=["q0", "q1", "q2", "q3"], start_state="q0")
    a.add_transition("q0", EPSILON, "q1")
    a.add_transition("q1", EPSILON, "q2")
    return a


def scripted(answers):
    """Return an input() replacement that replays answers and records prompts."""
    answers = list(answers)
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        if not answers:
            raise EOFError
        return answers.pop(0)

    fake_input.prompts = prompts
    return fake_input
