import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple


logger = logging.getLogger(__name__)

EPSILON = "ε"


class NotDeterministicError(ValueError):
    """Raised when the deterministic path meets a state with fan-out."""

    def __init__(self, state: str, symbol: str, destinations: Set[str]):
        self.state = state
        self.symbol = symbol
        self.destinations = set(destinations)
        super().__init__(
            f"({state}, {symbol!r}) has {len(destinations)} destinations: "
            f"{sorted(destinations)}"
        )


class Automaton:
    """Finite automaton with optional epsilon transitions.

    transitions maps origin -> symbol -> set of destinations. A deterministic
    automaton is just the case where no epsilon edge exists and every set has
    at most one element.
    """

    def __init__(
        self,
        states: Iterable[str] = (),
        alphabet: Iterable[str] = (),
        start_state: Optional[str] = None,
        accepting_states: Iterable[str] = (),
        transitions: Dict[str, Dict[str, Set[str]]] = None,
        name: str = "automaton",
    ):
        self.states: List[str] = list(states)
        self.alphabet: List[str] = list(alphabet)
        self.start_state = start_state
        self.accepting_states: List[str] = list(accepting_states)
        self.transitions: Dict[str, Dict[str, Set[str]]] = {}
        self.name = name

        for origin, symbol_map in (transitions or {}).items():
            for symbol, dests in symbol_map.items():
                for dest in dests:
                    self.add_transition(origin, symbol, dest)

    def copy(self) -> "Automaton":
        return Automaton(
            states=self.states,
            alphabet=self.alphabet,
            start_state=self.start_state,
            accepting_states=self.accepting_states,
            transitions=self.transitions,
            name=self.name,
        )

    # construction

    def add_state(self, state: str) -> None:
        self.states.append(state)
        logger.debug("%s: added state %s", self.name, state)

    def add_symbol(self, symbol: str) -> None:
        self.alphabet.append(symbol)
        logger.debug("%s: added symbol %r", self.name, symbol)

    def add_transition(self, origin: str, symbol: str, destination: str) -> None:
        self.transitions.setdefault(origin, {}).setdefault(symbol, set()).add(destination)
        logger.debug("%s: added %s --%s--> %s", self.name, origin, symbol, destination)

    def set_start(self, state: str) -> None:
        self.start_state = state
        logger.debug("%s: start state is %s", self.name, state)

    def add_accepting(self, state: str) -> None:
        self.accepting_states.append(state)
        logger.debug("%s: added accepting state %s", self.name, state)

    # introspection

    def transition_list(self) -> List[Tuple[str, str, str]]:
        return sorted(
            (origin, symbol, dest)
            for origin, symbol_map in self.transitions.items()
            for symbol, dests in symbol_map.items()
            for dest in dests
        )

    def is_deterministic(self) -> bool:
        return all(
            symbol != EPSILON and len(dests) <= 1
            for symbol_map in self.transitions.values()
            for symbol, dests in symbol_map.items()
        )

    def get_stats(self) -> Dict:
        total_transitions = sum(
            len(dests)
            for symbol_map in self.transitions.values()
            for dests in symbol_map.values()
        )
        epsilon_transitions = sum(
            len(symbol_map.get(EPSILON, ()))
            for symbol_map in self.transitions.values()
        )

        return {
            "states": len(set(self.states)),
            "alphabet_size": len(set(self.alphabet)),
            "accepting_states": len(set(self.accepting_states)),
            "total_transitions": total_transitions,
            "epsilon_transitions": epsilon_transitions,
            "is_deterministic": self.is_deterministic(),
        }

    # evaluation

    def epsilon_closure(self, states: Iterable[str]) -> Set[str]:
        closure = set(states)
        stack = list(closure)

        while stack:
            state = stack.pop()
            for next_state in self.transitions.get(state, {}).get(EPSILON, ()):
                if next_state not in closure:
                    closure.add(next_state)
                    stack.append(next_state)

        return closure

    def move(self, states: Iterable[str], symbol: str) -> Set[str]:
        result = set()
        if symbol == EPSILON:
            return result

        for state in states:
            result |= self.transitions.get(state, {}).get(symbol, set())

        return result

    def accepts(self, word: Iterable[str]) -> bool:
        """Run the subset simulation over word and report acceptance.

        Falls through to accepts_deterministic when the automaton has no
        epsilon edges and no fan-out, which gives the same answer.
        """
        if self.is_deterministic():
            return self.accepts_deterministic(word)

        if self.start_state is None:
            current_states = set()
        else:
            current_states = self.epsilon_closure({self.start_state})

        accepting = set(self.accepting_states)
        for position, symbol in enumerate(word):
            next_states = self.move(current_states, symbol)
            if not next_states:
                logger.debug(
                    "%s: no transition on %r at position %d from %s",
                    self.name, symbol, position, sorted(current_states),
                )
                return False
            current_states = self.epsilon_closure(next_states)

        return not current_states.isdisjoint(accepting)

    def accepts_deterministic(self, word: Iterable[str]) -> bool:
        current_state = self.start_state

        for position, symbol in enumerate(word):
            if symbol == EPSILON:
                return False
            dests = self.transitions.get(current_state, {}).get(symbol)
            if not dests:
                logger.debug(
                    "%s: no transition on %r at position %d from %s",
                    self.name, symbol, position, current_state,
                )
                return False
            if len(dests) > 1:
                raise NotDeterministicError(current_state, symbol, dests)
            current_state = next(iter(dests))

        return current_state in self.accepting_states
