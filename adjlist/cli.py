"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, BooleanOptionalAction, Namespace
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from adjlist.commands import format_edges
from adjlist.config import SessionConfig
from adjlist.graph import Graph, GraphIOError
from adjlist.logs import fatal, setup_logging, verbosity_level
from adjlist.shell import Shell


def main(argv: Optional[List[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    log_level = verbosity_level(args.verbose)
    exit_level = logging.ERROR
    if args.command == "shell" or args.keep_going:
        exit_level = logging.FATAL
    setup_logging(sys.stderr, log_level, exit_level)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args)


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="adjlist", description="tool for editing adjacency-list graphs"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_shell = commands.add_parser("shell", help="edit a graph interactively")
    parser_shell.add_argument(
        "file", nargs="?", help="adjacency listing to start from",
    )

    parser_show = commands.add_parser("show", help="print a graph's adjacency list")
    parser_show.add_argument("file", help="adjacency listing")

    parser_edges = commands.add_parser("edges", help="list a graph's edges")
    parser_edges.add_argument("file", help="adjacency listing")

    for subparser in [parser_shell, parser_show, parser_edges]:
        subparser.add_argument(
            "-d",
            "--directed",
            action=BooleanOptionalAction,
            default=None,
            help="treat the graph as directed (default from adjlist.yml)",
        )
        subparser.add_argument(
            "-w",
            "--weighted",
            action=BooleanOptionalAction,
            default=None,
            help="treat the graph as weighted (default from adjlist.yml)",
        )
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def open_graph(args: Namespace, cfg: SessionConfig) -> Graph:
    """Create the graph named by args, using cfg for flags not given."""
    directed = cfg["directed"] if args.directed is None else args.directed
    weighted = cfg["weighted"] if args.weighted is None else args.weighted
    if not args.file:
        return Graph(directed, weighted)
    try:
        graph = Graph.from_file(Path(args.file), directed, weighted)
    except GraphIOError as ex:
        fatal("%s", ex)
    logging.info("loaded %r", graph)
    return graph


def command_shell(args: Namespace):
    cfg = SessionConfig.find()
    graph = open_graph(args, cfg)
    Shell(graph, prompt=cfg["prompt"]).run()


def command_show(args: Namespace):
    graph = open_graph(args, SessionConfig.find())
    graph.dump(sys.stdout)


def command_edges(args: Namespace):
    graph = open_graph(args, SessionConfig.find())
    for line in format_edges(graph):
        print(line)
