"""Tests for the command line entry point."""

import json

import pytest

from aip_nlp import ESimnetType, NlpConsts
from aip_nlp.cli import _coerce, main

from conftest import BASE_URL, gbk_response, sent_body


@pytest.fixture
def credentials(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("AIP_APP_ID", "app-id")
    monkeypatch.setenv("AIP_API_KEY", "api-key")
    monkeypatch.setenv("AIP_SECRET_KEY", "secret-key")
    monkeypatch.setenv("AIP_NLP_URL", BASE_URL)


def test_list(capsys):
    main(["--list"])

    out = capsys.readouterr().out
    assert "sentiment_classify" in out
    assert "txt_keywords_extraction" in out


def test_call_with_options(credentials, aip_mock, capsys):
    route = aip_mock.post(path=NlpConsts.SIMNET).mock(return_value=gbk_response({"score": 0.9}))

    main(["simnet", "你好", "您好", "-o", "model=CNN"])

    assert list(sent_body(route).items()) == [("text_1", "你好"), ("text_2", "您好"), ("model", "CNN")]
    assert json.loads(capsys.readouterr().out) == {"score": 0.9}


def test_unknown_operation(credentials):
    with pytest.raises(SystemExit) as exc:
        main(["translate", "hello"])

    assert exc.value.code == 1


def test_wrong_argument_count(credentials, capsys):
    with pytest.raises(SystemExit):
        main(["keyword", "标题"])

    assert "title, content" in capsys.readouterr().out


def test_missing_credentials(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit):
        main(["lexer", "文本"])

    assert "AIP_APP_ID" in capsys.readouterr().out


def test_bad_option_format():
    with pytest.raises(SystemExit):
        main(["lexer", "文本", "-o", "novalue"])


@pytest.mark.parametrize(
    "field, value, expected",
    [
        ("num", "5", 5),
        ("max_summary_len", "200", 200),
        ("type", "food", ESimnetType.FOOD),
        ("type", "4", 4),
        ("text", "123", "123"),
    ],
)
def test_coerce(field, value, expected):
    assert _coerce(field, value) == expected
