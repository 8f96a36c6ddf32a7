# empproj

Keeps a record of employees and the projects each one works on. Employees are
listed in alphabetical order. Each employee's projects are kept in order of
priority, and no two of one employee's projects share a priority. Every
assignment, withdrawal and priority change can be undone, most recent first.

## Interactive use

```
empproj
```

The same menu can be started with `python -m empproj.cli`. It offers:

1. `is_assigned_to`: asks for an employee, a project and a priority. If the
   employee already has that project, its priority is changed instead;
   otherwise the project is assigned, adding the employee if needed.
2. `is_withdrawn_from`: asks for an employee and a project and takes the
   project away. An employee with no projects left is removed.
3. `print_the_entire_list`: shows every employee and their projects.
4. `print_employee_projects`: asks for an order, 1 for ascending or 0 for
   descending priority, then an employee, and shows that employee's projects.
5. `undo`: reverses the most recent change.
6. `exit`

Input is read as whitespace-separated words, so commands can also be piped in
from a file. The session also ends when the input runs out. A priority or
order that is not a whole number is answered with `Invalid input.`, an unknown
option with `Invalid option.`.

## Library use

```python
from empproj.registry import EmployeeProjects, DuplicatePriorityError
from empproj.undo_stack import UndoStack, Operation

registry = EmployeeProjects()
history = UndoStack()

registry.assign("alice", "apollo", 2)
history.push(Operation.ASSIGN, "alice", "apollo", 2)

registry.assign("alice", "gemini", 1)
print(registry.format_all())          # alice: (gemini, 1) (apollo, 2)

try:
    registry.assign("alice", "mercury", 1)
except DuplicatePriorityError:
    print("priority 1 is taken")

print(registry.undo(history.pop()))   # Undoing the assignment of a project.
print(registry.projects_of("alice", ascending=True))
```

`empproj.registry.EmployeeProjects` offers:

- `assign(employee, project, priority)`: raises `DuplicatePriorityError` if
  another of the employee's projects has that priority.
- `update_priority(employee, project, priority)`: returns the old priority;
  raises `SamePriorityError` if the project already has it and
  `DuplicatePriorityError` if another project does.
- `withdraw(employee, project)`: returns the priority the project had.
- `is_assigned`, `employees`, `projects_of`, `format_all`, `format_projects`,
  `undo(entry)`, `clear`, `len()` and `in`.

All errors derive from `RegistryError`; an unknown employee or project also
raises `RegistryError`. Projects are `Project(name, priority)` values.

`empproj.undo_stack.UndoStack` records `UndoEntry` values with `push` and
returns them with `pop`, which raises `UndoStackEmpty` when there is nothing
left to undo. For an update, record the priority that `update_priority`
returned, so that undoing restores it.

## What it does not do

Everything is held in memory. Nothing is saved to disk, so the record and its
undo history are gone when the session ends.