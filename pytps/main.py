"""Entry point for the pytps demo.

Usage:
    python -m pytps.main                       # interactive menu
    python -m pytps.main --name Vito --age 65  # start from a given person
    python -m pytps.main --show-stack          # print the stack after each action
"""
import logging
import argparse

from pytps.tps import TransactionStack
from pytps.person import Person, ChangeNameTransaction, IncrementAgeTransaction

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def display_menu(stack, person, output_fn=print):
    output_fn(f"\n--- {person} ---")
    output_fn("C: Change Person Name")
    output_fn("I: Increment Person Age")
    if stack.has_transaction_to_undo():
        output_fn("U: Undo")
    if stack.has_transaction_to_do():
        output_fn("R: Redo")
    output_fn("X: Exit Demo")


def run_demo(stack, person, input_fn=None, output_fn=None, show_stack=False):
    """Run the menu loop until the user exits or input runs out.

    Undo and redo are only accepted while the stack has something to
    undo or redo, so the loop never hits TransactionStackError.
    """
    input_fn = input_fn or input
    output_fn = output_fn or print
    output_fn("*** pytps Demo - Demonstrates use of the pytps Framework ***")
    while True:
        display_menu(stack, person, output_fn)
        try:
            selection = input_fn("---").strip().upper()
            if selection == "C":
                new_name = input_fn("Enter Name: ").strip()
                stack.process_transaction(ChangeNameTransaction(person, new_name))
            elif selection == "I":
                raw = input_fn("Enter Age Increment: ").strip()
                try:
                    inc = int(raw)
                except ValueError:
                    output_fn(f"{raw} is not a valid age increment")
                    continue
                stack.process_transaction(IncrementAgeTransaction(person, inc))
            elif selection == "U" and stack.has_transaction_to_undo():
                stack.undo_transaction()
            elif selection == "R" and stack.has_transaction_to_do():
                stack.do_transaction()
            elif selection == "X":
                output_fn("GOODBYE")
                return
            else:
                output_fn("INVALID SELECTION\n")
                continue
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, leaving demo")
            output_fn("GOODBYE")
            return
        if show_stack:
            output_fn(str(stack))


def main(argv=None):
    from pytps.config import Config

    config = Config()

    parser = argparse.ArgumentParser(description="pytps undo/redo demo")
    parser.add_argument("--name", default=config.initial_name,
                        help="Initial person name")
    parser.add_argument("--age", type=int, default=config.initial_age,
                        help="Initial person age")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--show-stack", action="store_true",
                        help="Print the transaction stack after each action")
    args = parser.parse_args(argv)

    setup_logging(args.debug or config.debug_logging)
    logger.debug("Starting demo with %s (Age %d)", args.name, args.age)

    run_demo(TransactionStack(), Person(args.name, args.age),
             show_stack=args.show_stack or config.show_stack)


if __name__ == "__main__":
    main()
