import sys
import os
import argparse
import logging
from builder import AutomatonBuilder, describe
from samples import SAMPLES, run_samples


logger = logging.getLogger(__name__)

MENU = """
Main menu:
1. Run the built-in examples
2. Build a new automaton
3. Quit"""


def build_arg_parser():
    p = argparse.ArgumentParser(
        description="Simulate finite automata (DFA, NFA, NFA with epsilon) over input words."
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--examples", action="store_true", help="Run the built-in examples and exit")
    mode.add_argument("--build", action="store_true", help="Build one automaton interactively and exit")
    p.add_argument("--plot", metavar="PATH", help="Save a drawing of the automaton(s) to PATH")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def plot_path_for(path: str, key: str) -> str:
    base, ext = os.path.splitext(path)
    return f"{base}_{key}{ext or '.png'}"


def save_plot(automaton, path: str) -> None:
    from visualization import AutomatonVisualizer

    AutomatonVisualizer(automaton).save(path)
    print(f"Drawing saved to {path}")


def run_examples(plot=None) -> bool:
    ok = run_samples()
    if plot:
        for sample in SAMPLES:
            save_plot(sample.factory(), plot_path_for(plot, sample.key))
    return ok


def build_session(input_func=None, plot=None):
    builder = AutomatonBuilder(input_func=input_func)
    automaton = builder.build()
    print("\nAutomaton created:")
    print(describe(automaton))
    if plot:
        save_plot(automaton, plot)
    builder.test_words(automaton)
    return automaton


def menu_loop(input_func=None, plot=None) -> None:
    while True:
        print(MENU)
        answer = (input_func or input)("Choose an option: ").strip()
        try:
            choice = int(answer)
        except ValueError:
            print("Invalid input. Please type a number.")
            continue

        if choice == 1:
            run_examples(plot)
        elif choice == 2:
            build_session(input_func, plot)
        elif choice == 3:
            print("Exiting.")
            return
        else:
            print("Invalid option, try again.")
        print("------------------------------------")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("arguments: %s", args)

    if args.examples:
        return 0 if run_examples(args.plot) else 1
    if args.build:
        build_session(plot=args.plot)
        return 0
    menu_loop(plot=args.plot)
    return 0


def run():
    try:
        sys.exit(main())
    except (KeyboardInterrupt, EOFError):
        print("\nProgram interrupted by user")
        sys.exit(0)


if __name__ == "__main__":
    run()
