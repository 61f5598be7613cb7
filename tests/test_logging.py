import logging

from skill.logging import parse_level


def test_parse_level_known_names():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" WARNING ") == logging.WARNING


def test_parse_level_falls_back_to_info():
    assert parse_level("BASIC_FORMAT") == logging.INFO
    assert parse_level("verbose") == logging.INFO
