import json

from mbytes.cli import main


def test_encode(capsys):
    assert main(["encode", "1", "300"]) == 0
    assert capsys.readouterr().out.strip() == "01ac02"


def test_decode(capsys):
    assert main(["decode", "01 ac02"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert records == [
        {"offset": 0, "length": 1, "value": 1},
        {"offset": 1, "length": 2, "value": 300},
    ]


def test_decode_max_values(capsys):
    assert main(["decode", "0x0102ac02", "--max-values", "2"]) == 0
    assert [r["value"] for r in json.loads(capsys.readouterr().out)] == [1, 2]


def test_decode_truncated_fails(capsys):
    assert main(["decode", "ac"]) == 2
    assert "error" in capsys.readouterr().err


def test_encode_negative_fails(capsys):
    assert main(["encode", "-5"]) == 2
    assert "uint64" in capsys.readouterr().err


def test_info(capsys):
    assert main(["info", "00010203", "--seek", "3"]) == 0
    assert json.loads(capsys.readouterr().out) == {"size": 4, "pos": 3, "empty": False, "remaining": 1}


def test_info_seek_overflow(capsys):
    assert main(["info", "00", "--seek", "1"]) == 2
    assert "seek overflow" in capsys.readouterr().err
