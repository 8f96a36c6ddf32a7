import pytest

from empproj.undo_stack import Operation, UndoEntry, UndoStack, UndoStackEmpty


def test_new_stack_is_empty():
    stack = UndoStack()
    assert stack.is_empty()
    assert len(stack) == 0


def test_pop_returns_last_pushed_first():
    stack = UndoStack()
    stack.push(Operation.ASSIGN, "alice", "apollo", 3)
    stack.push(Operation.WITHDRAW, "bob", "zeus", 7)
    assert len(stack) == 2
    assert stack.pop() == UndoEntry(Operation.WITHDRAW, "bob", "zeus", 7)
    assert stack.pop() == UndoEntry(Operation.ASSIGN, "alice", "apollo", 3)
    assert stack.is_empty()


def test_push_accepts_operation_letters():
    stack = UndoStack()
    entry = stack.push("u", "alice", "apollo", 4)
    assert entry.operation is Operation.UPDATE
    assert stack.pop() is entry


@pytest.mark.parametrize(
    "letter, expected",
    [("a", Operation.ASSIGN), ("w", Operation.WITHDRAW), ("u", Operation.UPDATE)],
)
def test_operation_letters(letter, expected):
    stack = UndoStack()
    stack.push(letter, "alice", "apollo", 1)
    entry = stack.pop()
    assert entry.operation is expected
    assert entry.operation.value == letter


def test_push_rejects_unknown_operation():
    stack = UndoStack()
    with pytest.raises(ValueError):
        stack.push("x", "alice", "apollo", 1)
    assert stack.is_empty()


def test_pop_empty_raises():
    stack = UndoStack()
    with pytest.raises(UndoStackEmpty, match="The undo stack is empty."):
        stack.pop()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        UndoStack().pop()


def test_clear_discards_entries():
    stack = UndoStack()
    for priority in range(5):
        stack.push(Operation.ASSIGN, "alice", f"p{priority}", priority)
    stack.clear()
    assert stack.is_empty()
    with pytest.raises(UndoStackEmpty):
        stack.pop()