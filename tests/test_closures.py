from formulakit.closures import announce_and_call, demo, make_counter


def test_counter_counts_up_from_one():
    counter = make_counter()
    assert [counter() for _ in range(3)] == [1, 2, 3]


def test_counters_are_independent():
    first = make_counter()
    second = make_counter()
    first()
    first()
    assert second() == 1
    assert first() == 3


def test_announce_and_call_returns_same_function_after_one_call():
    calls = []

    def record():
        calls.append("called")

    result = announce_and_call(record)
    assert result is record
    assert calls == ["called"]
    result()
    assert len(calls) == 2


def test_announce_and_call_writes_to_stderr(capsys):
    announce_and_call(lambda: None)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "received a function argument" in captured.err


def test_demo_output(capsys):
    demo()
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "1",
        "2",
        "inter1 1",
        "inter2 1",
        "inter1 2",
    ]
    assert captured.err.count("the sample function fits the accepted signature") == 3