import argparse

import pytest

from dua.config import DEFAULT_THRESHOLD, DEFAULT_TOP_N, SelectorConfig, parse_threshold, parse_top_n


def test_defaults():
    cfg = SelectorConfig()
    assert cfg.threshold == DEFAULT_THRESHOLD == 0.9
    assert cfg.limit == DEFAULT_TOP_N == 20


def test_selector_config_is_frozen():
    cfg = SelectorConfig()
    with pytest.raises(AttributeError):
        cfg.threshold = 0.5


@pytest.mark.parametrize("raw, expected", [("0.5", 0.5), ("0.01", 0.01), (".95", 0.95)])
def test_parse_threshold_accepts(raw, expected):
    assert parse_threshold(raw) == expected


@pytest.mark.parametrize("raw", ["0", "1", "1.5", "-0.1", "nan", "abc", ""])
def test_parse_threshold_rejects(raw):
    with pytest.raises(argparse.ArgumentTypeError):
        parse_threshold(raw)


def test_parse_top_n():
    assert parse_top_n("7") == 7
    for raw in ("0", "-3", "2.5", "ten"):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_top_n(raw)
