from tools.util import Benchmark, Timer


def test_timer():
    timer = Timer()
    assert timer.elapsed() >= 0
    first = timer.fetch_restart()
    assert first >= 0


def test_benchmark_table():
    bench = Benchmark()
    for _ in range(3):
        bench.register_call("find")
    bench.register_call("union")
    assert len(bench.calls["find"]) == 3
    assert bench.total("find") >= 0
    assert bench.total("missing") == 0

    lines = bench.get_benchmark(unit="s").split("\n")
    assert lines[0].split() == ["name", "calls", "min", "mean", "max", "total"]
    # header, separator, two records, separator
    assert len(lines) == 5
    assert lines[2].split()[:2] == ["find", "3"]
    assert lines[3].split()[:2] == ["union", "1"]

    bench.reset()
    assert bench.calls == {}
