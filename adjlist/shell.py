"""Interactive graph editing session."""

import logging
import sys
from typing import Optional, TextIO

from adjlist.commands import CommandError, dispatch, parse_command
from adjlist.graph import Graph


class Shell:

    """Read commands line by line and apply them to a graph.

    Errors in a command are logged and the session continues. The session
    ends on the exit command or at end of input.
    """

    def __init__(
        self,
        graph: Graph,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        prompt: str = "> ",
    ):
        self.graph = graph
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.prompt = prompt

    def __repr__(self) -> str:
        return f"Shell(graph={self.graph!r})"

    def run(self):
        self.print("type help for a list of commands")
        while True:
            self.stdout.write(self.prompt)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                logging.debug("end of input")
                break
            if not self.execute(line):
                break

    def execute(self, line: str) -> bool:
        """Run one line of input. Returns false if the session should end."""
        try:
            cmd = parse_command(line)
            if cmd is None:
                return True
            outcome = dispatch(self.graph, cmd)
        except CommandError as ex:
            logging.error("%s", ex)
            return True
        for message in outcome.messages:
            self.print(message)
        return not outcome.done

    def print(self, message: str):
        print(message, file=self.stdout)
