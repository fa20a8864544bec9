import pytest

from gobion.structures import LinkedNode, Queue, Stack, bottom_up


def test_bottom_up_follows_chain_until_none():
    chain = {"a": "b", "b": "c"}
    assert list(bottom_up("a", chain.get)) == ["a", "b", "c"]


def test_bottom_up_stops_when_consumer_stops():
    calls = []

    def proceed(value):
        calls.append(value)
        return value + 1

    walked = []
    for value in bottom_up(0, proceed):
        walked.append(value)
        if value == 3:
            break
    assert walked == [0, 1, 2, 3]
    assert calls == [0, 1, 2]


def test_bottom_up_single_element():
    assert list(bottom_up("only", lambda _: None)) == ["only"]


def test_linked_node_to_list_walks_to_root():
    root = LinkedNode(None, "root")
    middle = LinkedNode(root, "middle")
    leaf = LinkedNode(middle, "leaf")
    assert leaf.to_list() == ["leaf", "middle", "root"]
    assert root.to_list() == ["root"]


def test_queue_is_fifo():
    queue = Queue()
    assert queue.is_empty()
    queue.enqueue(1, 2)
    queue.enqueue(3)
    assert not queue.is_empty()
    assert len(queue) == 3
    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    assert queue.is_empty()


def test_queue_dequeue_empty_raises():
    with pytest.raises(IndexError):
        Queue().dequeue()


def test_stack_is_lifo():
    stack = Stack()
    assert stack.is_empty()
    stack.push("x", "y")
    stack.push("z")
    assert stack.peek() == "z"
    assert len(stack) == 3
    assert [stack.pop() for _ in range(3)] == ["z", "y", "x"]
    assert stack.is_empty()


def test_stack_peek_does_not_remove():
    stack = Stack(5)
    assert stack.peek() == 5
    assert stack.peek() == 5
    assert stack.pop() == 5


def test_stack_peek_empty_is_none():
    assert Stack().peek() is None


def test_stack_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()