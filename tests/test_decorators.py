import pytest

from carton import InvalidStateError, returns_option, returns_result


@returns_result(catch=(ValueError,))
def parse(text: str) -> int:
    return int(text)


@returns_result()
async def parse_async(text: str) -> int:
    return int(text)


@returns_option()
def lookup(key: str):
    return {"a": 1}.get(key)


@returns_option(swallow_errors=True)
def strict_lookup(key: str):
    return {"a": 1}[key]


def test_returns_result():
    assert parse("12").take_value() == 12
    failed = parse("x")
    assert failed.is_err
    assert isinstance(failed.take_cause(), ValueError)
    assert parse.__name__ == "parse"


def test_returns_result_lets_other_exceptions_through():
    with pytest.raises(TypeError):
        parse(None)


def test_returns_result_logs(carton_debug_log):
    parse("x")
    assert "@returns_result: parse failed" in carton_debug_log.text


@pytest.mark.asyncio
async def test_returns_result_async():
    assert (await parse_async("3")).take_value() == 3
    failed = await parse_async("x")
    with pytest.raises(InvalidStateError):
        failed.take_value()


def test_returns_option():
    assert lookup("a").take_value() == 1
    assert lookup("b").is_absent
    assert strict_lookup("b").is_absent


def test_returns_option_propagates_by_default():
    @returns_option()
    def broken():
        raise KeyError("k")

    with pytest.raises(KeyError):
        broken()


@pytest.mark.asyncio
async def test_returns_option_async():
    @returns_option(swallow_errors=True)
    async def fetch(ok: bool):
        if not ok:
            raise ConnectionError("down")
        return "data"

    assert (await fetch(True)).take_value() == "data"
    assert (await fetch(False)).is_absent
