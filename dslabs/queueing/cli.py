"""Interactive menu for running and timing the queueing simulation."""

from __future__ import annotations

import enum
import math
import re
import sys
import time
from typing import Optional, TextIO

from dslabs.queueing.queues import ArrayQueue, LinkedQueue
from dslabs.queueing.simulation import (
    CYCLE_LEN,
    WAITING_TIME_RANGES,
    Request,
    RequestType,
    SimulationResult,
    array_model,
    linked_model,
)

YELLOW = "\x1b[33m"
RED = "\033[0;31m"
RESET = "\033[0m"

# Sizes of one request record and of one list node, in bytes.
_REQUEST_SIZE = 40
_NODE_SIZE = 16

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class MenuItem(enum.IntEnum):
    EXIT = 0
    LIST_MODEL = 1
    ARRAY_MODEL = 2
    OPERATION_COMP = 3


def _middle(kind: RequestType) -> float:
    low, high = WAITING_TIME_RANGES[kind]
    return (low + high) / 2.0


def _tick() -> int:
    return time.perf_counter_ns()


def print_menu(out: Optional[TextIO] = None) -> None:
    """Write the list of menu items."""
    out = out if out is not None else sys.stdout
    out.write("\nПункты меню: \n")
    out.write("\t1 -- Моделирование на списке.\n")
    out.write("\t2 -- Моделирование на массиве.\n")
    out.write("\t3 -- Сравнение операций удаления, до\n")
    out.write("\t0 -- Выход из программы.\n")


def format_result(result: SimulationResult) -> str:
    """Render the summary of a finished simulation run."""
    t1_middle = _middle(RequestType.T1)
    t2_middle = _middle(RequestType.T2)
    supposed_waiting = max((result.total_in - CYCLE_LEN) * t2_middle, CYCLE_LEN * t1_middle)
    supposed_service = max((result.served - CYCLE_LEN) * t2_middle, CYCLE_LEN * t1_middle)
    supposed = max(supposed_waiting, supposed_service)

    numerator = abs(supposed - result.service_time + result.waiting_time)
    denominator = result.service_time + result.waiting_time
    if denominator:
        deviation = numerator / denominator
    else:
        deviation = math.nan if numerator == 0 else math.inf

    model_time = max(
        result.t1_entrance_time,
        result.t2_entrance_time,
        result.t1_service_time + result.t2_service_time,
    )

    return (
        f"{YELLOW}\nРезультаты\n{RESET}"
        f"Время обслуживания: {result.service_time:.6f}\t"
        f"Время простаивания: {result.waiting_time:.6f}\n"
        f"Время моделирования: {model_time:.6f}\n"
        f"Ожидаемое время моделирования: {supposed:.6f} ({deviation:.6f}%)\n"
        f"Кол-во вошедших заявок: {result.total_in}\n"
        f"Кол-во вышедших заявок: {result.served}\n"
        f"Аппарат сработал: {result.service_calls}\n"
    )


def compare_operations(iterations: int = 50, out: Optional[TextIO] = None) -> dict[str, int]:
    """Time adding to and removing from both queue kinds.

    Returns the average duration of one operation in nanoseconds under the
    keys ``array_add``, ``list_add``, ``array_pop`` and ``list_pop``.
    """
    if iterations <= 0:
        raise ValueError("iterations must be positive")
    out = out if out is not None else sys.stdout
    out.write("\nСравнение времени\n")

    sample = Request(
        RequestType.T2, entrance=4.0, service=0.0, last_entrance=3.0, last_service=3.0
    )
    array_queue: ArrayQueue[Request] = ArrayQueue()
    linked_queue: LinkedQueue[Request] = LinkedQueue()

    start = _tick()
    for _ in range(iterations):
        array_queue.add(sample)
    array_add = (_tick() - start) // iterations
    out.write(f"{YELLOW}Добавление в массиве{RESET}: {array_add}\n")

    start = _tick()
    for _ in range(iterations):
        linked_queue.add(sample)
    list_add = (_tick() - start) // iterations
    out.write(f"{YELLOW}Добавление в списке{RESET}: {list_add}\n")

    elapsed = 0
    for _ in range(iterations):
        start = _tick()
        item = array_queue.pop()
        elapsed += _tick() - start
        array_queue.add(item)
    array_pop = elapsed // iterations
    out.write(f"{YELLOW}Удаление в массиве{RESET}: {array_pop}\n")

    start = _tick()
    for _ in range(iterations):
        linked_queue.pop()
    list_pop = (_tick() - start) // iterations
    out.write(f"{YELLOW}Удаление в списке{RESET}: {list_pop}\n")

    return {
        "array_add": array_add,
        "list_add": list_add,
        "array_pop": array_pop,
        "list_pop": list_pop,
    }


def _run_model(item: MenuItem, stdin: TextIO, out: TextIO) -> None:
    out.write("Выводить адреса при удалении/добавлении? (y/n): ")
    out.flush()
    answer = stdin.readline()
    trace = out if answer[:1] == "y" else None

    if item is MenuItem.LIST_MODEL:
        model, per_item = linked_model, _REQUEST_SIZE + _NODE_SIZE
    else:
        model, per_item = array_model, _REQUEST_SIZE

    start = time.process_time_ns()
    result = model(out=out, trace=trace)
    elapsed = time.process_time_ns() - start

    out.write(format_result(result))
    seconds, nanos = divmod(elapsed, 1_000_000_000)
    out.write(f"\n\n{YELLOW}Время выполнения: {RESET} {seconds}s {nanos}ns\n")
    out.write(f"{YELLOW}Потребление памяти: {RESET}")
    out.write(f"{result.served * per_item}Б\n")


def main(argv=None) -> int:
    """Run the interactive menu on standard input and output until exit."""
    stdin, out = sys.stdin, sys.stdout
    while True:
        print_menu(out)
        out.write("Выберите пункт меню: ")
        out.flush()
        line = stdin.readline()
        if not line:
            return 0
        match = _INTEGER.match(line)
        if match is None:
            out.write(f"{RED}Ошибка{RESET}: Неправильный ввод\n")
            continue
        choice = int(match.group(1))

        if choice == MenuItem.EXIT:
            return 0
        if choice in (MenuItem.LIST_MODEL, MenuItem.ARRAY_MODEL):
            _run_model(MenuItem(choice), stdin, out)
        elif choice == MenuItem.OPERATION_COMP:
            compare_operations(out=out)
        else:
            out.write(f"{RED}Ошибка{RESET}: Такого пунтка меню нет.\n")