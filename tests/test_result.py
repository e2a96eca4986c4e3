import asyncio

import pytest

from carton import (
    NOTHING,
    ConfigRegistry,
    InvalidStateError,
    Option,
    Result,
    ResultVariant,
)


def test_ok_factory():
    res = Result.ok(10)
    assert res.is_ok
    assert not res.is_err
    assert res.variant is ResultVariant.OK
    assert res.take_value() == 10


def test_err_factory():
    res = Result.err("bad")
    assert res.is_err
    assert not res.is_ok
    assert res.take_cause() == "bad"


def test_ok_may_hold_none():
    res = Result.ok(None)
    assert res.is_ok
    assert res.take_value() is None


def test_take_value_drains():
    res = Result.ok(1)
    assert res.take_value() == 1
    assert res.is_drained
    assert res.is_err
    assert not res.is_ok
    assert res.peek is NOTHING
    with pytest.raises(InvalidStateError, match="drained"):
        res.take_value()
    with pytest.raises(InvalidStateError):
        res.take_cause()


def test_take_cause_drains():
    res = Result.err("cause")
    assert res.take_cause() == "cause"
    assert res.is_drained
    with pytest.raises(InvalidStateError):
        res.take_cause()


def test_wrong_channel_reads_raise_without_draining():
    ok = Result.ok(1)
    with pytest.raises(InvalidStateError):
        ok.take_cause()
    assert ok.is_ok

    err = Result.err("e")
    with pytest.raises(InvalidStateError, match="Err"):
        err.take_value()
    assert err.is_err and not err.is_drained
    assert err.take_cause() == "e"


def test_invalid_state_error_is_runtime_error():
    with pytest.raises(RuntimeError):
        Result.err("e").take_value()


def test_expect():
    assert Result.ok(3).expect("need three") == 3
    with pytest.raises(InvalidStateError, match="need three"):
        Result.err("e").expect("need three")


def test_unwrap_or_peeks():
    res = Result.ok(5)
    assert res.unwrap_or(0) == 5
    assert res.is_ok
    assert Result.err("e").unwrap_or(0) == 0


def test_unwrap_or_else():
    assert Result.ok(5).unwrap_or_else(len) == 5
    assert Result.err("four").unwrap_or_else(len) == 4

    drained = Result.err("x")
    drained.take_cause()
    with pytest.raises(InvalidStateError):
        drained.unwrap_or_else(len)


def test_map_only_touches_ok():
    res = Result.ok(3)
    mapped = res.map(lambda n: n + 1)
    assert mapped is not res
    assert mapped.take_value() == 4
    assert res.take_value() == 3

    err = Result.err("e")
    assert err.map(lambda n: n + 1) is err


def test_map_err_only_touches_err():
    err = Result.err("e")
    assert err.map_err(str.upper).take_cause() == "E"
    assert err.take_cause() == "e"

    ok = Result.ok(1)
    assert ok.map_err(str.upper) is ok


def test_and_then_and_or_else():
    def positive(n: int) -> Result[int, str]:
        return Result.ok(n) if n > 0 else Result.err("not positive")

    assert Result.ok(2).and_then(positive) == Result.ok(2)
    assert Result.ok(-2).and_then(positive) == Result.err("not positive")
    err = Result.err("e")
    assert err.and_then(positive) is err

    assert Result.err("e").or_else(lambda cause: Result.ok(len(cause))) == Result.ok(1)
    ok = Result.ok(1)
    assert ok.or_else(lambda cause: Result.ok(0)) is ok


@pytest.mark.parametrize("res, expected", [
    (Result.ok(1), ("ok", 1)),
    (Result.err("e"), ("err", "e")),
])
def test_match_runs_exactly_one_handler(res, expected):
    called: list[str] = []

    def on_ok(value):
        called.append("ok")
        return ("ok", value)

    def on_err(cause):
        called.append("err")
        return ("err", cause)

    assert res.match(on_ok=on_ok, on_err=on_err) == expected
    assert called == [expected[0]]


def test_match_on_drained_raises():
    res = Result.ok(1)
    res.take_value()
    with pytest.raises(InvalidStateError):
        res.match(on_ok=lambda v: v, on_err=lambda c: c)


def test_or():
    assert Result.ok(1).or_(Result.ok(2)).take_value() == 1
    assert Result.err("e").or_(Result.ok(2)).take_value() == 2


def test_projections():
    ok = Result.ok("x")
    assert ok.as_ok_option == Option.wrap("x")
    assert ok.as_err_option.is_absent

    err = Result.err("e")
    assert err.as_err_option == Option.wrap("e")
    assert err.as_ok_option.is_absent

    # projections only peek
    assert ok.take_value() == "x"
    assert err.take_cause() == "e"


def test_projections_of_drained_result_are_absent():
    res = Result.ok(1)
    res.take_value()
    assert res.as_ok_option.is_absent
    assert res.as_err_option.is_absent


def test_from_throwing_captures_exception_verbatim():
    exc = ValueError("boom")

    def boom():
        raise exc

    res = Result.from_throwing(boom)
    assert res.is_err
    assert res.take_cause() is exc


def test_from_throwing_ok():
    assert Result.from_throwing(lambda: 10) == Result.ok(10)


def test_from_throwing_respects_catch():
    def boom():
        raise KeyError("k")

    assert Result.from_throwing(boom, catch=(KeyError,)).is_err
    with pytest.raises(KeyError):
        Result.from_throwing(boom, catch=(ValueError,))


def test_from_throwing_logs_capture(carton_debug_log):
    def boom():
        raise ValueError("boom")

    Result.from_throwing(boom)
    assert "ValueError: boom" in carton_debug_log.text


@pytest.mark.asyncio
async def test_from_throwing_async():
    async def ten():
        await asyncio.sleep(0)
        return 10

    async def boom():
        raise ValueError("boom")

    assert (await Result.from_throwing_async(ten)).take_value() == 10
    failed = await Result.from_throwing_async(boom)
    assert isinstance(failed.take_cause(), ValueError)


@pytest.mark.asyncio
async def test_from_throwing_async_accepts_awaitable():
    async def ten():
        return 10

    assert (await Result.from_throwing_async(ten())).take_value() == 10


@pytest.mark.asyncio
async def test_from_throwing_async_does_not_capture_cancellation():
    async def cancelled():
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await Result.from_throwing_async(cancelled)


def test_consumption_logging(carton_debug_log):
    ConfigRegistry.configure(log_consumption=True)
    Result.err("cause").take_cause()
    assert "Result drained from err" in carton_debug_log.text


def test_drained_construction_rejects_payload():
    with pytest.raises(ValueError):
        Result(ResultVariant.DRAINED, 1)


def test_repr_and_equality():
    assert repr(Result.ok(1)) == "Result.ok(1)"
    assert repr(Result.err("e")) == "Result.err('e')"
    res = Result.ok(1)
    res.take_value()
    assert repr(res) == "Result.drained()"
    assert Result.ok(1) != Result.err(1)
    with pytest.raises(TypeError):
        hash(Result.ok(1))
