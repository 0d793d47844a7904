import io

from cipherbox.flow import Box, defer_trace, full_name, lifo_trace, main


def test_defer_trace_default():
    assert defer_trace() == ["Inside the main()", "Hello", "World", "Inside the sample()"]


def test_defer_captures_argument_at_registration():
    trace = defer_trace("first", "second")
    assert trace.index("second") < trace.index("first")
    assert trace[-1] == "Inside the sample()"
    assert trace[-2] == "first"


def test_lifo_order():
    assert lifo_trace([1, 2, 3], 4) == [4, 3, 2, 1]


def test_lifo_without_deferred_calls():
    assert lifo_trace([], "only") == ["only"]


def test_lifo_is_reverse_of_input():
    values = ["a", "b", "c", "d"]
    trace = lifo_trace(values, "z")
    assert trace[0] == "z"
    assert trace[1:] == list(reversed(values))


def test_box_increment_shared_through_alias():
    box = Box(20)
    alias = box
    assert alias.increment() == 21
    assert box.value == 21


def test_box_increments_accumulate():
    box = Box()
    for _ in range(3):
        box.increment()
    assert box.value == 3


def test_full_name():
    assert full_name("John", "Raj") == "John Raj"


def test_main_reads_names(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Ada\nLovelace\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Your Full Name is: Ada Lovelace" in out
    assert "Inside the main()" in out
    assert "Value of a: 21" in out