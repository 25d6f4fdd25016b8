"""Simulation of a single service unit fed by two request queues."""

from __future__ import annotations

import enum
import random
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from dslabs.queueing.queues import ArrayQueue, LinkedQueue

CYCLE_LEN = 1000
EVERY_LOOP_PRINT = 100
TIME_PER_LOOP = 1


class RequestType(enum.IntEnum):
    T1 = 0
    T2 = 1


WAITING_TIME_RANGES = {RequestType.T1: (1, 5), RequestType.T2: (0, 3)}
SERVICE_TIME_RANGES = {RequestType.T1: (0, 4), RequestType.T2: (0, 1)}


@dataclass
class Request:
    """A request with its arrival gap and the service time it needs."""

    kind: RequestType
    entrance: float
    service: float
    last_entrance: float = 0.0
    last_service: float = 0.0

    @classmethod
    def random(cls, kind: RequestType, rng: random.Random) -> "Request":
        """Draw a request of the given kind with uniformly distributed times."""
        entrance = rng.uniform(*WAITING_TIME_RANGES[kind])
        service = rng.uniform(*SERVICE_TIME_RANGES[kind])
        return cls(kind=kind, entrance=entrance, service=service)


@dataclass
class SimulationResult:
    t1_entrance_time: float = 0.0
    t2_entrance_time: float = 0.0
    t1_service_time: float = 0.0
    t2_service_time: float = 0.0
    waiting_time: float = 0.0
    service_time: float = 0.0
    t1_served: int = 0
    t2_served: int = 0
    served: int = 0
    total_in: int = 0
    avg_wait: float = 0.0
    service_calls: int = 0


def dispatch(q1, q2, service) -> Optional[Request]:
    """Move one request into the service queue, giving T1 priority.

    A T2 request is moved only when the T1 queue is empty and no T1 request
    is in service. Returns the moved request, or None if nothing moved.
    """
    if not q1 and q2 and service.find(lambda r: r.kind is RequestType.T1) is None:
        request = q2.pop()
        service.add(request)
        return request
    if q1:
        request = q1.pop()
        service.add(request)
        return request
    return None


def serve(service, result: SimulationResult) -> Optional[Request]:
    """Advance the unit by one tick and return the request it finished, if any.

    An idle tick (empty service queue) is counted as waiting time.
    """
    result.service_calls += 1
    if not service:
        result.waiting_time += TIME_PER_LOOP
        return None

    head = next(iter(service))
    head.last_service += TIME_PER_LOOP
    if head.last_service < head.service:
        return None

    request = service.pop()
    if request.kind is RequestType.T1:
        result.t1_entrance_time += request.entrance
        result.t1_service_time += request.service
        result.t1_served += 1
    else:
        result.t2_entrance_time += request.entrance
        result.t2_service_time += request.service
        result.t2_served += 1
    result.service_time += request.service
    result.avg_wait += request.entrance
    result.served += 1
    return request


class _Arrivals:
    """Generates requests and lets them arrive once their gap has elapsed."""

    def __init__(self, rng: random.Random, exclusive: bool) -> None:
        self._rng = rng
        self._exclusive = exclusive
        self._pending: dict[RequestType, Optional[Request]] = dict.fromkeys(RequestType)
        self._last_time: dict[RequestType, float] = dict.fromkeys(RequestType, 0.0)

    def step(self, q1, q2, time: float) -> None:
        if self._exclusive:
            # Only one new request is drawn per tick, T1 first.
            if self._pending[RequestType.T1] is None:
                self._generate(RequestType.T1)
            elif self._pending[RequestType.T2] is None:
                self._generate(RequestType.T2)
        else:
            for kind in RequestType:
                if self._pending[kind] is None:
                    self._generate(kind)

        for kind, queue in ((RequestType.T1, q1), (RequestType.T2, q2)):
            request = self._pending[kind]
            if request is not None and abs(self._last_time[kind] - time) >= request.entrance:
                self._last_time[kind] = time
                self._pending[kind] = None
                queue.add(request)

    def _generate(self, kind: RequestType) -> None:
        self._pending[kind] = Request.random(kind, self._rng)


def _run(queue_cls, exclusive: bool, rng, out, trace) -> SimulationResult:
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout
    q1 = queue_cls(trace)
    q2 = queue_cls(trace)
    service = queue_cls(trace)
    arrivals = _Arrivals(rng, exclusive)
    result = SimulationResult()

    q1_served = 0
    last_reported = 0
    q1_len_sum = 0
    q2_len_sum = 0
    time = 0.0

    while q1_served < CYCLE_LEN:
        arrivals.step(q1, q2, time)
        dispatch(q1, q2, service)
        finished = serve(service, result)
        if finished is not None and finished.kind is RequestType.T1:
            q1_served += 1

        if q1_served % EVERY_LOOP_PRINT == 0 and q1_served != last_reported:
            last_reported = q1_served
            q1_len_sum += len(q1)
            q2_len_sum += len(q2)
            reports = q1_served // EVERY_LOOP_PRINT
            out.write(f"\n\nТекущая длина T1: {len(q1)}\n")
            out.write(f"Текущая длина T2: {len(q2)}\n")
            out.write(f"Средняя длина T1: {q1_len_sum // reports}\n")
            out.write(f"Средняя длина T2: {q2_len_sum // reports}\n")
            out.write(f"Кол-во вошедших заявок: {q1.added + q2.added}\n")
            out.write(f"Кол-во вышедших заявок: {result.served}\n")
            out.write(
                "Среднее время пребывания в очереди: "
                f"{result.service_time / result.served:.6f}\n"
            )
            out.write(f"Q1 elems: {q1_served}\n")

        time += TIME_PER_LOOP

    result.total_in = q1.added + q2.added
    return result


def array_model(rng=None, out=None, trace=None) -> SimulationResult:
    """Run the simulation on array-backed queues."""
    result = _run(ArrayQueue, False, rng, out, trace)
    (out if out is not None else sys.stdout).write(f"avg: {result.avg_wait:.6f}\n")
    return result


def linked_model(rng=None, out=None, trace=None) -> SimulationResult:
    """Run the simulation on linked-list queues."""
    return _run(LinkedQueue, True, rng, out, trace)