import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from client_app.render import render_board
from client_app.state import FilterMode, TaskListState
from client_app.transport import HttpTaskTransport
from core.domain.errors import TaskError


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="client_app", description="Task tracker client")
    parser.add_argument(
        "--filter",
        choices=[mode.value for mode in FilterMode],
        default=FilterMode.ALL.value,
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("list")
    add = sub.add_parser("add")
    add.add_argument("title")
    toggle = sub.add_parser("toggle")
    toggle.add_argument("id", type=int)
    remove = sub.add_parser("remove")
    remove.add_argument("id", type=int)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "warning").upper())
    args = _parse_args(argv)

    transport = HttpTaskTransport.from_env()
    state = TaskListState(transport)
    try:
        state.refresh()
        if args.command == "add":
            state.add(args.title)
        elif args.command == "toggle":
            state.toggle(args.id)
        elif args.command == "remove" and not state.remove(args.id):
            print(f"Task {args.id} did not exist", file=sys.stderr)
        state.set_filter(args.filter)
        print(render_board(state))
    except TaskError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        transport.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
