import math

import pytest

from toolbench.scheduler import TaskScheduler


def quadratic_roots(a, b, c):
    scheduler = TaskScheduler()
    id1 = scheduler.add(lambda a, c: -4 * a * c, a, c)
    id2 = scheduler.add(lambda b, v: b * b + v, b, scheduler.get_future_result(id1))
    id3 = scheduler.add(lambda b, d: -b + math.sqrt(d), b, scheduler.get_future_result(id2))
    id4 = scheduler.add(lambda b, d: -b - math.sqrt(d), b, scheduler.get_future_result(id2))
    id5 = scheduler.add(lambda a, v: v / (2 * a), a, scheduler.get_future_result(id3))
    id6 = scheduler.add(lambda a, v: v / (2 * a), a, scheduler.get_future_result(id4))
    scheduler.execute_all()
    return scheduler.get_result(id5), scheduler.get_result(id6)


def test_quadratic_equation_1():
    assert quadratic_roots(2.0, -2.0, 0.0) == (1, 0)


def test_quadratic_equation_2():
    assert quadratic_roots(1.0, -2.0, 0.0) == (2, 0)


def test_hypotenuse():
    scheduler = TaskScheduler()
    id1 = scheduler.add(lambda a: a * a, 3.0)
    id2 = scheduler.add(lambda b: b * b, 4.0)
    id3 = scheduler.add(
        lambda x, y: x + y,
        scheduler.get_future_result(id1),
        scheduler.get_future_result(id2),
    )
    id4 = scheduler.add(math.sqrt, scheduler.get_future_result(id3))
    scheduler.execute_all()
    assert scheduler.get_result(id4) == 5


def test_circle_area():
    scheduler = TaskScheduler()
    id1 = scheduler.add(lambda a: a * a, 10.0)
    id2 = scheduler.add(lambda a, b: b * a, scheduler.get_future_result(id1), 3.14)
    scheduler.execute_all()
    assert scheduler.get_result(id2) == pytest.approx(314)


def test_ampere_power():
    scheduler = TaskScheduler()
    id1 = scheduler.add(math.sin, 2123.0)
    id2 = scheduler.add(lambda a, b: a * b, 11.32, 12.23)
    scheduler.add(lambda a, b: a * b, scheduler.get_future_result(id2), 18.435)
    id4 = scheduler.add(
        lambda a, b: a * b,
        scheduler.get_future_result(id2),
        scheduler.get_future_result(id1),
    )
    scheduler.execute_all()
    assert math.trunc(scheduler.get_result(id4)) == -90


def test_coil_inductance():
    scheduler = TaskScheduler()
    id1 = scheduler.add(lambda a, b: a * b, 12.2, 43.13)
    id2 = scheduler.add(lambda a: a * a, 3.312)
    id3 = scheduler.add(
        lambda a, b: a * b,
        scheduler.get_future_result(id1),
        scheduler.get_future_result(id2),
    )
    id4 = scheduler.add(lambda a, b: a * b, scheduler.get_future_result(id3), 31.0)
    id5 = scheduler.add(lambda a, b: a * b, scheduler.get_future_result(id4), 0.308)
    scheduler.execute_all()
    assert math.trunc(scheduler.get_result(id5)) == 55110


def test_expression_evaluation_without_execute_all():
    scheduler = TaskScheduler()
    add = lambda x, y: x + y  # noqa: E731
    neg = lambda x: -x  # noqa: E731
    fut = scheduler.get_future_result
    id1 = scheduler.add(add, 56.62, 16.8)
    id2 = scheduler.add(add, 6.63, fut(id1))
    id3 = scheduler.add(add, 60.53, 3.61)
    id4 = scheduler.add(add, fut(id3), 14.91)
    id5 = scheduler.add(neg, fut(id4))
    id6 = scheduler.add(add, fut(id2), fut(id5))
    id7 = scheduler.add(add, 15.16, 52.34)
    id8 = scheduler.add(add, fut(id7), -52.49)
    id9 = scheduler.add(neg, fut(id8))
    id10 = scheduler.add(add, fut(id9), 7.38)
    id11 = scheduler.add(add, 20.63, fut(id10))
    id12 = scheduler.add(lambda x, y: x * y, fut(id6), fut(id11))
    assert round(scheduler.get_result(id12)) == 13


def test_task_runs_once():
    calls = []

    def square(x):
        calls.append(x)
        return x * x

    scheduler = TaskScheduler()
    task = scheduler.add(square, 6)
    dependent = scheduler.add(lambda v: v + 1, scheduler.get_future_result(task))
    scheduler.execute_all()
    scheduler.execute_all()
    assert scheduler.get_result(dependent) == 37
    assert scheduler.get_result(task) == 36
    assert calls == [6]


def test_dependencies_run_on_demand():
    scheduler = TaskScheduler()
    base = scheduler.add(lambda: 2)
    dependent = scheduler.add(lambda v: v * 10, scheduler.get_future_result(base))
    assert (base.is_done(), dependent.is_done()) == (False, False)
    assert scheduler.get_result(dependent) == 20
    assert (base.is_done(), dependent.is_done()) == (True, True)


def test_foreign_task_rejected():
    first = TaskScheduler()
    second = TaskScheduler()
    task = first.add(lambda: 1)
    with pytest.raises(ValueError):
        second.get_result(task)
    with pytest.raises(ValueError):
        second.get_future_result(task)


def test_task_error_propagates():
    scheduler = TaskScheduler()
    task = scheduler.add(lambda x: 1 / x, 0)
    with pytest.raises(ZeroDivisionError):
        scheduler.execute_all()
    assert task.is_done() is False