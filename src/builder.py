"""Interactive, prompt driven construction of an Automaton.

Every answer is checked before it reaches the automaton; a bad answer is
reported and the same question is asked again.
"""

import logging
from typing import Callable, List, Optional

from automaton import EPSILON, Automaton


logger = logging.getLogger(__name__)

END = "end"
QUIT = "quit"
EPSILON_ALIASES = {EPSILON, "eps", "epsilon"}


class BuilderInputError(ValueError):
    pass


def validate_state_name(automaton: Automaton, name: str) -> str:
    if not name:
        raise BuilderInputError("State name cannot be empty.")
    if name in (END, QUIT):
        raise BuilderInputError(f"'{name}' is reserved and cannot name a state.")
    if name in automaton.states:
        raise BuilderInputError(f"State '{name}' was already added.")
    return name


def validate_existing_state(automaton: Automaton, name: str, role: str = "State") -> str:
    if name not in automaton.states:
        raise BuilderInputError(f"{role} '{name}' is not one of the defined states.")
    return name


def validate_alphabet_symbol(automaton: Automaton, text: str) -> str:
    if text in EPSILON_ALIASES:
        raise BuilderInputError("Epsilon is implicit and cannot be added to the alphabet.")
    if len(text) != 1:
        raise BuilderInputError("Enter exactly one character.")
    if text in automaton.alphabet:
        raise BuilderInputError(f"Symbol '{text}' was already added to the alphabet.")
    return text


def validate_symbol(automaton: Automaton, text: str) -> str:
    """Return the transition symbol for text, mapping the aliases to EPSILON."""
    if text in EPSILON_ALIASES:
        return EPSILON
    if len(text) != 1:
        raise BuilderInputError('Symbol must be a single character or "eps"/"epsilon".')
    if text not in automaton.alphabet:
        raise BuilderInputError(f"Symbol '{text}' is not in the alphabet.")
    return text


def validate_accepting_state(automaton: Automaton, name: str) -> str:
    validate_existing_state(automaton, name, role="Accepting state")
    if name in automaton.accepting_states:
        raise BuilderInputError(f"State '{name}' is already accepting.")
    return name


def describe(automaton: Automaton) -> str:
    stats = automaton.get_stats()
    lines = [
        f"Automaton: {automaton.name}",
        f"Start state: {automaton.start_state}",
        f"States: {', '.join(automaton.states)}",
        f"Alphabet: {', '.join(automaton.alphabet)}",
        "Transitions:",
    ]
    for origin, symbol, dest in automaton.transition_list():
        lines.append(f"  {origin} --{symbol}--> {dest}")
    lines.append(f"Accepting states: {', '.join(automaton.accepting_states)}")
    lines.append(f"Total transitions: {stats['total_transitions']}")
    lines.append(f"Epsilon transitions: {stats['epsilon_transitions']}")
    lines.append(f"Deterministic: {stats['is_deterministic']}")
    return "\n".join(lines)


class AutomatonBuilder:
    def __init__(
        self,
        input_func: Callable[[str], str] = None,
        output: Callable[[str], None] = print,
        name: str = "user_automaton",
    ):
        self.input_func = input_func
        self.output = output
        self.automaton = Automaton(name=name)

    def ask(self, prompt: str) -> str:
        return (self.input_func or input)(prompt).strip()

    def _prompt_until_end(self, prompt: str, validate, store, added: str) -> None:
        while True:
            answer = self.ask(prompt)
            if answer == END:
                return
            try:
                value = validate(self.automaton, answer)
            except BuilderInputError as e:
                self.output(f"Error: {e}")
                continue
            store(value)
            self.output(added.format(value))

    def read_states(self) -> None:
        self.output(f'Enter the states (one at a time). Type "{END}" to finish:')
        self._prompt_until_end(
            "> ", validate_state_name, self.automaton.add_state, "State '{}' added."
        )

    def read_start_state(self) -> None:
        while True:
            answer = self.ask("Enter the start state: ")
            try:
                state = validate_existing_state(self.automaton, answer, role="Start state")
            except BuilderInputError as e:
                self.output(f"Error: {e}")
                continue
            self.automaton.set_start(state)
            return

    def read_alphabet(self) -> None:
        self.output(f'Enter the alphabet (one symbol at a time). Type "{END}" to finish:')
        self._prompt_until_end(
            "> ",
            validate_alphabet_symbol,
            self.automaton.add_symbol,
            "Symbol '{}' added to the alphabet.",
        )

    def _read_origin(self) -> Optional[str]:
        while True:
            answer = self.ask(f'\nOrigin (or "{END}" to stop adding transitions): ')
            if answer == END:
                return None
            try:
                return validate_existing_state(self.automaton, answer, role="Origin state")
            except BuilderInputError as e:
                self.output(f"Error: {e}")

    def read_transitions(self) -> None:
        self.output("\n--- Add transitions ---")
        self.output("For each transition enter the origin state and the symbol,")
        self.output("then the destination states one at a time.")
        self.output(f'Type "{END}" as a destination to finish the current transition.')
        self.output(f'Type "{END}" as the origin to stop adding transitions.')

        while True:
            origin = self._read_origin()
            if origin is None:
                return

            answer = self.ask(f'Symbol for {origin} (or "eps"/"epsilon" for epsilon): ')
            try:
                symbol = validate_symbol(self.automaton, answer)
            except BuilderInputError as e:
                self.output(f"Error: {e}")
                continue

            self.output(f"Adding destinations for ({origin}, {symbol}):")
            while True:
                answer = self.ask(f'  Destination for {origin},{symbol} (or "{END}"): ')
                if answer == END:
                    break
                try:
                    dest = validate_existing_state(
                        self.automaton, answer, role="Destination state"
                    )
                except BuilderInputError as e:
                    self.output(f"Error: {e}")
                    continue
                self.automaton.add_transition(origin, symbol, dest)
                self.output(f"    Added: {origin} --{symbol}--> {dest}")
            self.output("Next transition.")

    def read_accepting_states(self) -> None:
        self.output(f'Enter the accepting states (one at a time). Type "{END}" to finish:')
        self._prompt_until_end(
            "> ",
            validate_accepting_state,
            self.automaton.add_accepting,
            "Accepting state '{}' added.",
        )

    def build(self) -> Automaton:
        self.output("\n==== Build your automaton ====")
        self.read_states()
        while not self.automaton.states:
            self.output("Error: at least one state is required.")
            self.read_states()
        self.read_start_state()
        self.read_alphabet()
        self.read_transitions()
        self.read_accepting_states()
        logger.debug("built automaton with stats %s", self.automaton.get_stats())
        return self.automaton

    def test_words(self, automaton: Automaton = None) -> List[bool]:
        automaton = automaton or self.automaton
        results = []
        self.output(f'Enter a word to test (or "{QUIT}" to stop):')
        while True:
            word = self.ask("> ")
            if word == QUIT:
                return results
            accepted = automaton.accepts(word)
            results.append(accepted)
            self.output("Word accepted" if accepted else "Word rejected")
