"""Shell commands.

Commands are parsed from a line of input and applied to a graph by dispatch,
which returns the messages to show instead of printing them. Reading input
and printing output is left to adjlist.shell.
"""

from __future__ import annotations

import io
from typing import Callable, Dict, List, Optional, Sequence

from adjlist.graph import Graph, GraphIOError


class CommandError(Exception):
    """An error caused by a malformed or failed command."""


class Command:

    """A parsed shell command."""

    def __init__(self, name: str, args: Sequence[str]):
        self.name = name
        self.args = list(args)

    def __repr__(self) -> str:
        return f"Command(name={self.name!r}, args={self.args!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Command):
            return NotImplemented
        return self.name == other.name and self.args == other.args


class Outcome:

    """The result of running a command.

    Messages are lines to show to the user. If done is true, the session
    should end.
    """

    def __init__(self, messages: Optional[List[str]] = None, done: bool = False):
        self.messages = messages or []
        self.done = done

    def __repr__(self) -> str:
        return f"Outcome(messages={self.messages!r}, done={self.done})"


Handler = Callable[[Graph, List[str]], Outcome]


class CommandInfo:

    """A registered command: its handler and the arguments it needs."""

    def __init__(self, handler: Handler, params: Sequence[str]):
        self.handler = handler
        self.params = list(params)

    def usage(self, name: str) -> str:
        return " ".join([name] + self.params)


_commands: Dict[str, CommandInfo] = {}


def command(name: str, *params: str) -> Callable[[Handler], Handler]:
    """Decorator that registers a function as the handler for a command.

    The params are the names of required arguments, used to check arity and
    to print usage.
    """

    def register(f: Handler) -> Handler:
        _commands[name] = CommandInfo(f, params)
        return f

    return register


def parse_command(line: str) -> Optional[Command]:
    """Parse a line of input, returning None if it is blank.

    Raises CommandError if the command does not exist.
    """
    parts = line.split()
    if not parts:
        return None
    name, args = parts[0], parts[1:]
    if name not in _commands:
        raise CommandError(
            f"unknown command {name!r}; type help for a list of commands"
        )
    return Command(name, args)


def dispatch(graph: Graph, cmd: Command) -> Outcome:
    """Run a command on the graph.

    Raises CommandError if the command is malformed or fails. Extra
    arguments are ignored.
    """
    info = _commands.get(cmd.name)
    if info is None:
        raise CommandError(f"unknown command {cmd.name!r}")
    if len(cmd.args) < len(info.params):
        raise CommandError(f"usage: {info.usage(cmd.name)}")
    return info.handler(graph, cmd.args)


def edge_word(graph: Graph) -> str:
    return "arc" if graph.directed else "edge"


def help_text(graph: Graph) -> List[str]:
    """Describe the available commands for this kind of graph."""
    edge = edge_word(graph)
    weight = " WEIGHT" if graph.weighted else ""
    return [
        "available commands:",
        "  addvertex NAME          add a vertex",
        f"  addedge FROM TO{weight:<8} add an {edge}",
        "  removevertex NAME       remove a vertex and its edges",
        f"  removeedge FROM TO      remove every {edge} from FROM to TO",
        "  print                   print the adjacency list",
        f"  edges                   list every {edge}",
        "  save FILE               save the graph to FILE",
        "  exit                    quit",
    ]


@command("help")
def command_help(graph: Graph, args: List[str]) -> Outcome:
    return Outcome(help_text(graph))


@command("addvertex", "NAME")
def command_addvertex(graph: Graph, args: List[str]) -> Outcome:
    vertex = args[0]
    if not graph.add_vertex(vertex):
        return Outcome([f"vertex {vertex} already exists"])
    return Outcome()


@command("addedge", "FROM", "TO")
def command_addedge(graph: Graph, args: List[str]) -> Outcome:
    src, dst = args[0], args[1]
    if not graph.weighted:
        graph.add_edge(src, dst)
        return Outcome()
    if len(args) < 3:
        edge = edge_word(graph)
        return Outcome([f"a weighted graph needs a weight for each {edge}"])
    try:
        weight = int(args[2])
    except ValueError as ex:
        raise CommandError(f"invalid weight {args[2]!r}") from ex
    graph.add_edge(src, dst, weight)
    return Outcome()


@command("removevertex", "NAME")
def command_removevertex(graph: Graph, args: List[str]) -> Outcome:
    vertex = args[0]
    if not graph.remove_vertex(vertex):
        return Outcome([f"vertex {vertex} does not exist"])
    return Outcome()


@command("removeedge", "FROM", "TO")
def command_removeedge(graph: Graph, args: List[str]) -> Outcome:
    src, dst = args[0], args[1]
    if not graph.remove_edge(src, dst):
        return Outcome([f"no {edge_word(graph)} from {src} to {dst}"])
    return Outcome()


@command("print")
def command_print(graph: Graph, args: List[str]) -> Outcome:
    out = io.StringIO()
    graph.dump(out)
    return Outcome(out.getvalue().splitlines())


def format_edges(graph: Graph) -> List[str]:
    """Format the graph's edges one per line, with weights if weighted."""
    arrow = "->" if graph.directed else "--"
    lines = []
    for edge in graph.get_edges():
        line = f"{edge.src} {arrow} {edge.dst}"
        if graph.weighted:
            line += f" ({edge.weight})"
        lines.append(line)
    return lines


@command("edges")
def command_edges(graph: Graph, args: List[str]) -> Outcome:
    return Outcome(format_edges(graph))


@command("save")
def command_save(graph: Graph, args: List[str]) -> Outcome:
    if not args:
        return Outcome(["enter a file name to save to"])
    path = args[0]
    try:
        graph.save(path)
    except GraphIOError as ex:
        raise CommandError(str(ex)) from ex
    return Outcome([f"graph saved to {path}"])


@command("exit")
def command_exit(graph: Graph, args: List[str]) -> Outcome:
    return Outcome(done=True)
