import io
import random

import pytest

from dslabs.queueing.queues import ArrayQueue, LinkedQueue
from dslabs.queueing.simulation import (
    CYCLE_LEN,
    SERVICE_TIME_RANGES,
    WAITING_TIME_RANGES,
    Request,
    RequestType,
    SimulationResult,
    array_model,
    dispatch,
    linked_model,
    serve,
)


def make_request(kind, service=1.0):
    return Request(kind=kind, entrance=1.0, service=service)


@pytest.mark.parametrize("kind", list(RequestType))
def test_random_request_within_ranges(kind):
    rng = random.Random(42)
    lo_w, hi_w = WAITING_TIME_RANGES[kind]
    lo_s, hi_s = SERVICE_TIME_RANGES[kind]
    for _ in range(200):
        request = Request.random(kind, rng)
        assert request.kind is kind
        assert lo_w <= request.entrance <= hi_w
        assert lo_s <= request.service <= hi_s
        assert request.last_entrance == 0.0
        assert request.last_service == 0.0


def test_random_request_is_reproducible():
    a = Request.random(RequestType.T1, random.Random(7))
    b = Request.random(RequestType.T1, random.Random(7))
    assert a == b


@pytest.mark.parametrize("cls", [ArrayQueue, LinkedQueue])
def test_dispatch_prefers_t1(cls):
    q1, q2, service = cls(), cls(), cls()
    t1 = make_request(RequestType.T1)
    t2 = make_request(RequestType.T2)
    q1.add(t1)
    q2.add(t2)
    assert dispatch(q1, q2, service) is t1
    assert list(service) == [t1]
    assert list(q2) == [t2]


@pytest.mark.parametrize("cls", [ArrayQueue, LinkedQueue])
def test_dispatch_t2_when_unit_free(cls):
    q1, q2, service = cls(), cls(), cls()
    t2 = make_request(RequestType.T2)
    q2.add(t2)
    assert dispatch(q1, q2, service) is t2
    assert list(service) == [t2]
    assert len(q2) == 0


def test_dispatch_t2_blocked_by_t1_in_service():
    q1, q2, service = ArrayQueue(), ArrayQueue(), ArrayQueue()
    service.add(make_request(RequestType.T1))
    q2.add(make_request(RequestType.T2))
    assert dispatch(q1, q2, service) is None
    assert len(q2) == 1
    assert len(service) == 1


def test_dispatch_nothing_to_move():
    q1, q2, service = LinkedQueue(), LinkedQueue(), LinkedQueue()
    assert dispatch(q1, q2, service) is None
    assert len(service) == 0


def test_serve_idle_counts_waiting():
    result = SimulationResult()
    assert serve(ArrayQueue(), result) is None
    assert result.waiting_time == 1
    assert result.service_calls == 1
    assert result.served == 0


def test_serve_takes_ticks_until_done():
    service = LinkedQueue()
    request = make_request(RequestType.T1, service=3.0)
    service.add(request)
    result = SimulationResult()
    assert serve(service, result) is None
    assert serve(service, result) is None
    assert request.last_service == 2
    assert serve(service, result) is request
    assert len(service) == 0
    assert result.served == 1
    assert result.t1_served == 1
    assert result.t2_served == 0
    assert result.service_time == request.service
    assert result.t1_service_time == request.service
    assert result.service_calls == 3
    assert result.waiting_time == 0


def test_serve_accounts_t2_separately():
    service = ArrayQueue()
    request = make_request(RequestType.T2, service=0.5)
    service.add(request)
    result = SimulationResult()
    assert serve(service, result) is request
    assert result.t2_served == 1
    assert result.t2_entrance_time == request.entrance
    assert result.t1_entrance_time == 0


@pytest.mark.parametrize("model", [array_model, linked_model])
def test_model_serves_cycle_of_t1(model):
    out = io.StringIO()
    result = model(rng=random.Random(3), out=out)
    assert result.t1_served == CYCLE_LEN
    assert result.served == result.t1_served + result.t2_served
    assert result.total_in >= result.served
    assert result.service_calls >= result.served
    assert result.waiting_time <= result.service_calls
    assert f"Q1 elems: {CYCLE_LEN}" in out.getvalue()
    assert out.getvalue().count("Текущая длина T1:") == CYCLE_LEN // 100


@pytest.mark.parametrize("model", [array_model, linked_model])
def test_model_is_deterministic_for_seed(model):
    a = model(rng=random.Random(11), out=io.StringIO())
    b = model(rng=random.Random(11), out=io.StringIO())
    assert a == b


def test_array_model_prints_average():
    out = io.StringIO()
    result = array_model(rng=random.Random(5), out=out)
    assert out.getvalue().endswith(f"avg: {result.avg_wait:.6f}\n")


def test_model_trace_goes_to_stream():
    out = io.StringIO()
    trace = io.StringIO()
    linked_model(rng=random.Random(2), out=out, trace=trace)
    assert "[Добавление] [Список]" in trace.getvalue()
    assert "[Добавление]" not in out.getvalue()