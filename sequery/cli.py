import argparse
import json
import logging
import sys
from dataclasses import dataclass
from . import tasks
from .types import *

logger = logging.getLogger(__name__)

TASKS: Dict[str, Callable[..., Any]] = {name: getattr(tasks, name) for name in tasks.__all__}


@dataclass(frozen=True)
class CliConfig:
    """settings collected from the command line"""
    command: str
    task: Optional[str] = None
    arguments: Tuple[Any, ...] = ()
    indent: Optional[int] = None
    verbose: bool = False


def create_cli_interface() -> argparse.ArgumentParser:
    """build the argument parser"""
    parser = argparse.ArgumentParser(
        prog='sequery',
        description='run sequence exercises on json input',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python -m sequery list
  python -m sequery run top3 '[[1, 5, 3, 9]]'
  python -m sequery run prefix_items '[["aaa", "bbbb", null], "B"]' --indent 2
        '''
    )
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('list', help='List available tasks')

    run_parser = subparsers.add_parser('run', help='Run a task')
    run_parser.add_argument('task', choices=sorted(TASKS), metavar='task', help='Task name (see "list")')
    run_parser.add_argument('arguments', nargs='?', default='[]',
                            help='JSON array of positional arguments (default: [])')
    run_parser.add_argument('--indent', type=int, default=None, help='Indent JSON output')
    return parser


def parse_config(argv: Optional[List[str]] = None) -> CliConfig:
    """parse argv into a CliConfig; argparse exits with status 2 on bad input"""
    parser = create_cli_interface()
    args = parser.parse_args(argv)

    arguments: Tuple[Any, ...] = ()
    if args.command == 'run':
        try:
            decoded = json.loads(args.arguments)
        except json.JSONDecodeError as e:
            parser.error(f"arguments are not valid json: {e}")
        if not isinstance(decoded, list):
            parser.error("arguments must be a json array")
        arguments = tuple(decoded)

    return CliConfig(
        command=args.command,
        task=getattr(args, 'task', None),
        arguments=arguments,
        indent=getattr(args, 'indent', None),
        verbose=args.verbose,
    )


def run_task(name: str, arguments: Iterable[Any]) -> Any:
    """look up a task by name and call it"""
    if name not in TASKS:
        raise KeyError(f"unknown task: {name}")
    arguments = tuple(arguments)
    logger.debug("running %s with %d argument(s)", name, len(arguments))
    return TASKS[name](*arguments)


def main(argv: Optional[List[str]] = None) -> int:
    """main entry point; returns the process exit status"""
    config = parse_config(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
    if config.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if config.command == 'list':
        for name in sorted(TASKS):
            print(name)
        return 0

    try:
        result = run_task(config.task, config.arguments)
    except (TypeError, ValueError, KeyError, AttributeError) as e:
        logger.error("task %s failed: %s", config.task, e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=config.indent))
    return 0
