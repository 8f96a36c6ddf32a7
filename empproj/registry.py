"""Employees and the projects they are assigned to, ordered by priority."""

from __future__ import annotations

import bisect
from dataclasses import dataclass

from .undo_stack import Operation, UndoEntry

EMPTY_LIST_MESSAGE = "The list is empty."
NO_EMPLOYEES_MESSAGE = "There are no employees in the list."
UNKNOWN_EMPLOYEE_MESSAGE = "The employee is not in the list."
DUPLICATE_ASSIGN_MESSAGE = (
    "The project has not been added because there is another project with the same priority."
)
DUPLICATE_UPDATE_MESSAGE = (
    "The project priority has not been updated because there is another project with the same priority."
)
SAME_PRIORITY_MESSAGE = "The project priority is already the same as the new priority."

UNDO_MESSAGES = {
    Operation.ASSIGN: "Undoing the assignment of a project.",
    Operation.WITHDRAW: "Undoing the withdrawal of a project.",
    Operation.UPDATE: "Undoing the update of a project priority.",
}


@dataclass(frozen=True)
class Project:
    """A project held by an employee, with its priority."""

    name: str
    priority: int

    def __str__(self) -> str:
        return f"({self.name}, {self.priority})"


class RegistryError(Exception):
    """Raised when an operation on the registry cannot be carried out."""


class DuplicatePriorityError(RegistryError):
    """Another project of the employee already has the requested priority."""


class SamePriorityError(RegistryError):
    """The project already has the requested priority."""


def _by_priority(project: Project) -> int:
    return project.priority


class EmployeeProjects:
    """Employees sorted by name, each with projects sorted by ascending priority."""

    def __init__(self) -> None:
        self._employees: dict[str, list[Project]] = {}

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee: object) -> bool:
        return employee in self._employees

    def _projects(self, employee: str) -> list[Project]:
        try:
            return self._employees[employee]
        except KeyError:
            raise RegistryError(UNKNOWN_EMPLOYEE_MESSAGE) from None

    def _project(self, employee: str, project: str) -> Project:
        for held in self._projects(employee):
            if held.name == project:
                return held
        raise RegistryError(f"{employee} is not assigned to {project}.")

    def is_assigned(self, employee: str, project: str) -> bool:
        """Tell whether the employee holds the named project."""
        return any(held.name == project for held in self._employees.get(employee, ()))

    def assign(self, employee: str, project: str, priority: int) -> None:
        """Give the employee a project, adding the employee if needed."""
        projects = self._employees.get(employee)
        if projects is None:
            self._employees[employee] = [Project(project, priority)]
            return
        if any(held.priority == priority for held in projects):
            raise DuplicatePriorityError(DUPLICATE_ASSIGN_MESSAGE)
        bisect.insort(projects, Project(project, priority), key=_by_priority)

    def update_priority(self, employee: str, project: str, priority: int) -> int:
        """Change a project's priority and return the priority it had before."""
        projects = self._projects(employee)
        current = self._project(employee, project)
        clash = next((held for held in projects if held.priority == priority), None)
        if clash is not None:
            if clash.name == project:
                raise SamePriorityError(SAME_PRIORITY_MESSAGE)
            raise DuplicatePriorityError(DUPLICATE_UPDATE_MESSAGE)
        projects.remove(current)
        bisect.insort(projects, Project(project, priority), key=_by_priority)
        return current.priority

    def withdraw(self, employee: str, project: str) -> int:
        """Remove a project from the employee and return its priority.

        An employee left without projects is removed from the registry.
        """
        projects = self._projects(employee)
        current = self._project(employee, project)
        projects.remove(current)
        if not projects:
            del self._employees[employee]
        return current.priority

    def employees(self) -> list[str]:
        """Employee names in ascending order."""
        return sorted(self._employees)

    def projects_of(self, employee: str, ascending: bool = True) -> list[Project]:
        """The employee's projects ordered by priority."""
        projects = list(self._projects(employee))
        return projects if ascending else projects[::-1]

    def format_all(self) -> str:
        """Every employee with their projects, one line each."""
        if not self._employees:
            return EMPTY_LIST_MESSAGE
        return "\n".join(
            f"{name}: " + "".join(f"{project} " for project in self._employees[name])
            for name in self.employees()
        )

    def format_projects(self, employee: str, ascending: bool = True) -> str:
        """The employee's projects on one line, or a message why there are none."""
        if not self._employees:
            return NO_EMPLOYEES_MESSAGE
        if employee not in self._employees:
            return UNKNOWN_EMPLOYEE_MESSAGE
        return "".join(f"{project} " for project in self.projects_of(employee, ascending))

    def undo(self, entry: UndoEntry) -> str:
        """Reverse a recorded operation and return a description of it."""
        operation = Operation(entry.operation)
        if operation is Operation.ASSIGN:
            self.withdraw(entry.employee, entry.project)
        elif operation is Operation.WITHDRAW:
            self.assign(entry.employee, entry.project, entry.priority)
        else:
            self.update_priority(entry.employee, entry.project, entry.priority)
        return UNDO_MESSAGES[operation]

    def clear(self) -> None:
        """Remove every employee and project."""
        self._employees.clear()