import logging

import pytest

from vector3 import __version__
from vector3.__main__ import OPERATIONS, format_result, main, parse_operands
from vector3.core.vector import Vector3


def run(capsys: pytest.CaptureFixture, *argv: str) -> str:
    main(list(argv))
    return capsys.readouterr().out.strip()


def test_operations_exist_on_vector() -> None:
    for operation in OPERATIONS:
        assert callable(getattr(Vector3, operation))


def test_parse_operands() -> None:
    a, b, s = parse_operands("lerp", ["0,0,0", "1,2,3", "0.5"])
    assert a.equals(Vector3(0))
    assert b.equals(Vector3(1, 2, 3))
    assert s == 0.5


def test_parse_operands_optional() -> None:
    assert len(parse_operands("dot", ["1,2,3"])) == 1
    assert len(parse_operands("dot", ["1,2,3", "1,0,0"])) == 2


def test_parse_operands_wrong_count() -> None:
    with pytest.raises(ValueError, match="expects 2 operand"):
        parse_operands("add", ["1,2,3"])
    with pytest.raises(ValueError, match="expects 1 operand"):
        parse_operands("mag", ["1,2,3", "1,2,3"])


def test_parse_operands_invalid_scalar() -> None:
    with pytest.raises(ValueError, match="Invalid scalar") as exc_info:
        parse_operands("scale", ["1,2,3", "x"])
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_format_result() -> None:
    assert format_result(Vector3(1, 2, 3)) == "1,2,3"
    assert format_result(Vector3(1, 2, 3), 1) == "1.0,2.0,3.0"
    assert format_result(5.0) == "5"
    assert format_result(0.25, 1) == "0.3"
    assert format_result(True) == "true"
    assert format_result(False) == "false"
    assert format_result("<Vector3D x: 1 y: 1 z: 1>") == "<Vector3D x: 1 y: 1 z: 1>"


def test_main_scalar_result(capsys: pytest.CaptureFixture) -> None:
    assert run(capsys, "mag", "3,4,0") == "5"
    assert run(capsys, "dot", "1,2,3") == "14"
    assert run(capsys, "dot", "1,2,3", "4,5,6") == "32"


def test_main_vector_result(capsys: pytest.CaptureFixture) -> None:
    assert run(capsys, "add", "1,2,3", "1") == "2,3,4"
    assert run(capsys, "cross", "1,0,0", "0,1,0") == "0,0,1"
    assert run(capsys, "lerp", "--", "0,0,0", "10,-10,0", "0.5") == "5,-5,0"
    assert run(capsys, "normalize", "0,0,0") == "NaN,NaN,NaN"


def test_main_fixed(capsys: pytest.CaptureFixture) -> None:
    assert run(capsys, "--fixed", "2", "normalize", "3,4,0") == "0.60,0.80,0.00"
    assert run(capsys, "--fixed", "3", "theta", "0,0,1") == "1.571"


def test_main_boolean_result(capsys: pytest.CaptureFixture) -> None:
    assert run(capsys, "lt", "0,3,4", "5,0,0") == "false"
    assert run(capsys, "gte", "0,3,4", "5,0,0") == "true"
    assert run(capsys, "equals", "1,2", "1,2,2") == "true"


def test_main_inspect(capsys: pytest.CaptureFixture) -> None:
    assert run(capsys, "inspect", "1,2,3") == "<Vector3D x: 1 y: 2 z: 3>"


def test_main_invalid_vector(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["mag", "1,x,3"])
    assert exc_info.value.code == 2
    assert "Invalid vector: '1,x,3'" in capsys.readouterr().err


def test_main_wrong_operand_count(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["cross", "1,0,0"])
    assert exc_info.value.code == 2
    assert "expects 2 operand(s), got 1" in capsys.readouterr().err


def test_main_negative_fixed(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--fixed", "-1", "mag", "1,0,0"])
    assert exc_info.value.code == 2


def test_main_unknown_operation(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["rotate", "1,0,0"])
    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_main_version(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_main_verbose_logs_operands(capsys: pytest.CaptureFixture, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)

    main(["--verbose", "add", "1,2,3", "1"])

    messages = [rec.getMessage() for rec in caplog.records]
    assert any(
        message.startswith("evaluate add:") and "<Vector3D x: 1 y: 2 z: 3>" in message
        for message in messages
    )
    assert any(message == "result: <Vector3D x: 2 y: 3 z: 4>" for message in messages)
