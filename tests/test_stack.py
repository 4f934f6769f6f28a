import pytest

from pushswap.stack import Element, Machine, Stack, get_max_bits


def test_stack_keeps_insertion_order():
    stack = Stack([5, 7, 9])
    assert stack.values() == [5, 7, 9]
    assert len(stack) == 3
    assert stack.head.value == 5
    assert stack.tail.value == 9


def test_new_elements_have_rank_zero():
    assert Stack([4, 8]).indices() == [0, 0]


def test_swap_exchanges_top_two():
    stack = Stack([1, 2, 3])
    assert stack.swap() is True
    assert stack.values() == [2, 1, 3]


def test_swap_on_two_updates_tail():
    stack = Stack([1, 2])
    stack.swap()
    assert stack.tail.value == 1


def test_swap_needs_two_elements():
    stack = Stack([1])
    assert stack.swap() is False
    assert stack.values() == [1]


def test_rotate_and_reverse_rotate_are_inverse():
    stack = Stack([1, 2, 3, 4])
    assert stack.rotate() is True
    assert stack.values() == [2, 3, 4, 1]
    assert stack.reverse_rotate() is True
    assert stack.values() == [1, 2, 3, 4]


def test_rotate_empty_is_noop():
    stack = Stack()
    assert stack.rotate() is False
    assert stack.reverse_rotate() is False
    assert stack.values() == []


def test_pop_front_and_push_front():
    stack = Stack([3, 6])
    element = stack.pop_front()
    assert element.value == 3
    stack.push_front(Element(10, 2))
    assert stack.values() == [10, 6]
    assert stack.indices() == [2, 0]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop_front()


def test_head_and_tail_of_empty_stack():
    stack = Stack()
    assert stack.head is None and stack.tail is None


def test_push_moves_elements_and_logs():
    machine = Machine([1, 2, 3])
    machine.pb()
    machine.pb()
    assert machine.a.values() == [3]
    assert machine.b.values() == [2, 1]
    machine.pa()
    assert machine.a.values() == [2, 3]
    assert machine.operations == ["pb", "pb", "pa"]


def test_push_from_empty_is_not_logged():
    machine = Machine([1])
    machine.pa()
    assert machine.operations == []
    assert machine.a.values() == [1]


def test_noop_single_operations_not_logged():
    machine = Machine([1])
    machine.sa()
    machine.ra()
    machine.rra()
    machine.sb()
    machine.rb()
    machine.rrb()
    assert machine.operations == []


def test_combined_operations_always_logged():
    machine = Machine()
    machine.ss()
    machine.rr()
    machine.rrr()
    assert machine.operations == ["ss", "rr", "rrr"]


def test_single_operations_logged_by_name():
    machine = Machine([1, 2, 3])
    machine.sa()
    machine.ra()
    machine.rra()
    assert machine.operations == ["sa", "ra", "rra"]
    assert machine.a.values() == [2, 1, 3]


@pytest.mark.parametrize("size, bits", [(0, 0), (1, 0), (2, 1), (3, 2), (4, 2)])
def test_get_max_bits_small(size, bits):
    assert get_max_bits(size) == bits


@pytest.mark.parametrize("size", [5, 100, 500, 1024, 1025])
def test_get_max_bits_covers_largest_rank(size):
    bits = get_max_bits(size)
    assert (size - 1) < (1 << bits)
    assert (size - 1) >= (1 << (bits - 1))