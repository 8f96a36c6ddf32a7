"""Interactive menu for managing employees, their projects and an undo history."""

from __future__ import annotations

import sys
from typing import TextIO

from .registry import UNDO_MESSAGES, EmployeeProjects, RegistryError
from .undo_stack import Operation, UndoStack, UndoStackEmpty

WELCOME = (
    "Hello! Welcome to the Employees-Projects Management System.\n"
    "Below is the list of options that the system supports at the moment.\n"
    "Please choose the number corresponding to the option,\n"
    "and then enter the necessary information to execute the option.\n"
    "1. is_assigned_to\n"
    "2. is_withdrawn_from\n"
    "3. print_the_entire_list\n"
    "4. print_employee_projects\n"
    "5. undo\n"
    "6. exit"
)
OPTION_PROMPT = "Please enter option number:"
EMPLOYEE_PROMPT = "Please enter the employee name:"
PROJECT_PROMPT = "Please enter the project name:"
PRIORITY_PROMPT = "Please enter the project priority:"
ORDER_PROMPT = "Please enter 1 for ascending order, or 0 for descending order:"
NOT_ASSIGNED_MESSAGE = (
    "Either the employee is not in the list or is in the list but is not assigned to that project."
)
INVALID_OPTION = "Invalid option."
INVALID_INPUT = "Invalid input."
EMPTY_UNDO_MESSAGE = "The undo stack is empty."
FAREWELL = "Deallocating the 2DHLL and the undo stack and terminating the program."

EXIT_OPTION = 6


class _EndOfInput(Exception):
    """The input ran out before the session was finished."""


class _Tokens:
    """Whitespace-separated words read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: list[str] = []

    def next(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise _EndOfInput
            self._pending = line.split()
        return self._pending.pop(0)

    def next_int(self) -> int | None:
        """The next word as an integer, or None if it is not one."""
        word = self.next()
        try:
            return int(word)
        except ValueError:
            return None

    def discard_line(self) -> None:
        self._pending.clear()


class Session:
    """One run of the menu, reading commands from stdin and writing to stdout."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.registry = EmployeeProjects()
        self.history = UndoStack()
        self._tokens = _Tokens(stdin)
        self._out = stdout

    def _say(self, text: str) -> None:
        print(text, file=self._out)

    def run(self) -> None:
        """Serve menu options until the exit option or the end of input."""
        self._say(WELCOME)
        self._say(OPTION_PROMPT)
        try:
            while True:
                option = self._tokens.next_int()
                if option == EXIT_OPTION:
                    break
                self._dispatch(option)
                self._say(OPTION_PROMPT)
        except _EndOfInput:
            pass
        self._say(FAREWELL)
        self.history.clear()
        self.registry.clear()

    def _dispatch(self, option: int | None) -> None:
        handlers = {
            1: self._assign,
            2: self._withdraw,
            3: self._print_all,
            4: self._print_employee,
            5: self._undo,
        }
        handler = handlers.get(option) if option is not None else None
        if handler is None:
            self._say(INVALID_OPTION)
            self._tokens.discard_line()
            return
        handler()

    def _assign(self) -> None:
        self._say(EMPLOYEE_PROMPT)
        employee = self._tokens.next()
        self._say(PROJECT_PROMPT)
        project = self._tokens.next()
        self._say(PRIORITY_PROMPT)
        priority = self._tokens.next_int()
        if priority is None:
            self._say(INVALID_INPUT)
            self._tokens.discard_line()
            return

        try:
            if self.registry.is_assigned(employee, project):
                previous = self.registry.update_priority(employee, project, priority)
                self.history.push(Operation.UPDATE, employee, project, previous)
            else:
                self.registry.assign(employee, project, priority)
                self.history.push(Operation.ASSIGN, employee, project, priority)
        except RegistryError as error:
            self._say(str(error))

    def _withdraw(self) -> None:
        self._say(EMPLOYEE_PROMPT)
        employee = self._tokens.next()
        self._say(PROJECT_PROMPT)
        project = self._tokens.next()

        if not self.registry.is_assigned(employee, project):
            self._say(NOT_ASSIGNED_MESSAGE)
            return
        priority = self.registry.withdraw(employee, project)
        self.history.push(Operation.WITHDRAW, employee, project, priority)

    def _print_all(self) -> None:
        self._say(self.registry.format_all())

    def _print_employee(self) -> None:
        self._say(ORDER_PROMPT)
        order = self._tokens.next_int()
        if order not in (0, 1):
            self._say(INVALID_INPUT)
            return
        self._say(EMPLOYEE_PROMPT)
        employee = self._tokens.next()
        self._say(self.registry.format_projects(employee, ascending=order == 1))

    def _undo(self) -> None:
        try:
            entry = self.history.pop()
        except UndoStackEmpty:
            self._say(EMPTY_UNDO_MESSAGE)
            return
        self._say(UNDO_MESSAGES[entry.operation])
        try:
            self.registry.undo(entry)
        except RegistryError as error:
            self._say(str(error))


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on the standard streams."""
    Session(sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())