from shell import InputHistory


class _FakeReadline:
    def __init__(self) -> None:
        self.lines = []

    def add_history(self, line: str) -> None:
        self.lines.append(line)


def test_push_records_entries() -> None:
    history = InputHistory()
    history.push("1+1")
    history.push("2*3")
    assert history.entries == ["1+1", "2*3"]
    assert len(history) == 2


def test_push_forwards_to_backend() -> None:
    backend = _FakeReadline()
    history = InputHistory(backend=backend)
    history.push("1+1")
    history.push("plot y=x")
    assert backend.lines == ["1+1", "plot y=x"]
