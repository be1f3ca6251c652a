from textkv.codec import ListCodec
from textkv.shell import CommandDispatcher, Shell
from textkv.store import ScalarStore, Store


def test_on_registers_commands():
    dispatcher = CommandDispatcher()
    called: list[str] = []

    @dispatcher.on("decorated")
    def decorated(args):
        called.append(args)

    dispatcher.on("direct", lambda args: called.append(args.upper()))

    dispatcher.get("decorated")("a")
    dispatcher.get("direct")("b")
    assert called == ["a", "B"]
    assert dispatcher.get("missing") is None


def test_basic_session(capsys):
    store = ScalarStore()
    shell = Shell(store)
    shell.run(
        [
            "set age 42",
            "set greeting hello world",
            "get age",
            "get greeting",
            "get nope",
            "has age",
            "remove age",
            "remove age",
            "has age",
            "bogus",
            "exit",
            "set never 1",
        ],
        prompt=False,
    )
    out = capsys.readouterr().out.splitlines()
    assert out[-10:] == [
        "OK",
        "OK",
        "42",
        "hello world",
        "(not found)",
        "true",
        "Removed",
        "(not found)",
        "false",
        "Unknown command. Type 'help'.",
    ]
    assert store.get_string("greeting") == "hello world"
    assert not store.has("never")


def test_save_and_load(tmp_path, capsys):
    path = tmp_path / "shell.txt"
    shell = Shell(ScalarStore(), path=path, atomic=True)
    assert shell.handle("set x 1.5")
    assert shell.handle("save")
    assert shell.handle("clear")
    assert shell.handle("keys")
    assert shell.handle("load")
    assert shell.handle("get x")
    out = capsys.readouterr().out.splitlines()
    assert out == ["OK", f"Saved to {path}", "OK", "", f"Loaded {path}", "1.5"]


def test_errors_are_reported_and_loop_continues(tmp_path, capsys):
    shell = Shell(Store(ListCodec()))
    assert shell.handle("set tags a,b")
    assert shell.handle("set")
    assert shell.handle(f"load {tmp_path / 'missing.txt'}")
    assert shell.handle("save")
    captured = capsys.readouterr()
    assert "Invalid list format: a,b" in captured.err
    assert "set requires <key> and <value>" in captured.err
    assert "Could not open file" in captured.err
    assert "save requires <filename>" in captured.err
    assert captured.out == ""


def test_list_values_are_parsed_and_formatted(capsys):
    shell = Shell(Store(ListCodec()))
    shell.handle("set tags [a, b, c]")
    shell.handle("get tags")
    assert capsys.readouterr().out.splitlines() == ["OK", "[a,b,c]"]
