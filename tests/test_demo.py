from dsdrills.demo import main, run_demo
from dsdrills.doubly import DoublyList
from dsdrills.fifo import Queue
from dsdrills.stack import Stack


def test_run_demo_contains_stack_walkthrough():
    output = run_demo()
    assert Stack([8, 6, 4, 2]).render() in output


def test_run_demo_contains_doubly_walkthrough():
    output = run_demo()
    expected = DoublyList([0, 3, 4, 2, 1])
    assert expected.render_from_front() in output
    assert expected.render_from_rear() in output


def test_run_demo_contains_queue_before_and_after_filtering():
    output = run_demo()
    before = Queue([-2, 4, 6, -10]).render()
    after = Queue([4, 6]).render()
    assert before in output
    assert after in output
    assert output.index(before) < output.index(after)


def test_run_demo_reports_linked_list_lookup():
    assert "LinkedList(3) =  " in run_demo()


def test_run_demo_is_repeatable():
    first = run_demo()
    second = run_demo()
    assert first == second
    stack_text = Stack([8, 6, 4, 2]).render()
    assert first.count(stack_text) == second.count(stack_text) >= 1
    assert "LinkedList(3) =  " in second


def test_main_prints_demo(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == run_demo()