import json

import pytest

from polyrecon.cli_io import *
from polyrecon.params import Params
from polyrecon.reconstruct import reconstruct
from polyrecon.common_types import Point


SAMPLE_DOC = {
    'keys': {'n': 4, 'k': 3},
    '1'   : {'base': "10", 'value': "4"},
    '2'   : {'base': "2" , 'value': "111"},
    '3'   : {'base': "10", 'value': "12"},
    '6'   : {'base': "4" , 'value': "213"},
}


def test_parse_sample_set():
    sample_set = parse_sample_set(SAMPLE_DOC, use_all=False)
    assert sample_set.params == Params(n=4, k=3, use_all=False)
    assert sample_set.points == [
        Point(1, 10, "4"),
        Point(2, 2 , "111"),
        Point(3, 10, "12"),
        Point(6, 4 , "213"),
    ]


def test_parse_sorts_points():
    doc = {
        'keys': {'n': "2", 'k': "2"},
        '10'  : {'base': 16, 'value': "ff"},
        '2'   : {'base': 10, 'value': "3"},
    }
    sample_set = parse_sample_set(doc)
    assert [p.x for p in sample_set.points] == [2, 10]
    assert sample_set.params.n == 2
    assert sample_set.params.k == 2


MALFORMED_DOCS = [
    [],
    {},
    {'keys': []},
    {'keys': {'n': 1}},
    {'keys': {'k': 1}},
    {'keys': {'n': "one", 'k': 1}},
    {'keys': {'n': True, 'k': 1}},
    {'keys': {'n': 1, 'k': 1}, '1': "4"},
    {'keys': {'n': 1, 'k': 1}, '1': {'value': "4"}},
    {'keys': {'n': 1, 'k': 1}, '1': {'base': "10"}},
    {'keys': {'n': 1, 'k': 1}, '1': {'base': "ten", 'value': "4"}},
    {'keys': {'n': 1, 'k': 1}, '1': {'base': "10", 'value': 4}},
    {'keys': {'n': 1, 'k': 1}, 'x': {'base': "10", 'value': "4"}},
    {'keys': {'n': 1, 'k': 1}, '--5': {'base': "10", 'value': "4"}},
    {'keys': {'n': 1, 'k': 1}, '\u00b2': {'base': "10", 'value': "4"}},
    {'keys': {'n': "--3", 'k': 1}},
    {'keys': {'n': "\u00b9", 'k': 1}},
    {'keys': {'n': 1, 'k': "1.0"}},
    {'keys': {'n': 1, 'k': 1}, '1': {'base': "-", 'value': "4"}},
]


@pytest.mark.parametrize("doc", MALFORMED_DOCS)
def test_parse_malformed(doc):
    try:
        parse_sample_set(doc)
        assert False, f"expected MalformedInput for {doc}"
    except MalformedInput:
        pass  # expected


def test_load_invalid_json():
    try:
        load_sample_set('{"keys": {"n": 1, "k": 1}')
        assert False, "expected MalformedInput"
    except MalformedInput as ex:
        assert "Invalid JSON" in str(ex)


def test_read_sample_set(tmp_path):
    fpath = tmp_path / "input.json"
    fpath.write_text(json.dumps(SAMPLE_DOC), encoding="utf-8")
    sample_set = read_sample_set(fpath, use_all=True)
    assert len(sample_set.points) == 4
    assert sample_set.params.use_all


def test_format_text():
    sample_set = parse_sample_set(SAMPLE_DOC, use_all=False)
    sample_set = sample_set._replace(params=sample_set.params._replace(k=2))
    result     = reconstruct(sample_set.points, sample_set.params)

    assert format_text(result) == [
        "degree: 1",
        "coefficients (low->high): 1, 3",
        "f(0): 1",
        "verified: false",
        "mismatches: ",
        "  x=3 expected=12 got=10",
        "  x=6 expected=39 got=19",
    ]


def test_format_json():
    sample_set = parse_sample_set(SAMPLE_DOC, use_all=False)
    result     = reconstruct(sample_set.points, sample_set.params)

    data = json.loads(format_json(result))
    assert data['degree'] == 2
    assert data['coefficients'] == ["3", "0", "1"]
    assert data['value_at_zero'] == "3"
    assert data['verified'] is True
    assert data['mismatches'] == []
