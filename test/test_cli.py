import json

import pytest
import click.testing

import polyrecon.cli


SAMPLE_DOC = {
    'keys': {'n': 4, 'k': 3},
    '1'   : {'base': "10", 'value': "4"},
    '2'   : {'base': "2" , 'value': "111"},
    '3'   : {'base': "10", 'value': "12"},
    '6'   : {'base': "4" , 'value': "213"},
}


def _write_doc(tmp_path, doc):
    fpath = tmp_path / "input.json"
    fpath.write_text(json.dumps(doc), encoding="utf-8")
    return str(fpath)


def _run(*argv):
    runner = click.testing.CliRunner()
    return runner.invoke(polyrecon.cli.cli, list(argv))


def test_help():
    result = _run("--help")
    assert result.exit_code == 0
    assert "solve" in result.output
    assert "convert" in result.output


def test_version():
    result = _run("version")
    assert result.exit_code == 0
    assert "2022.1009-beta" in result.output


def test_solve_text(tmp_path):
    result = _run("solve", _write_doc(tmp_path, SAMPLE_DOC))
    assert result.exit_code == 0
    assert "degree: 2" in result.output
    assert "coefficients (low->high): 3, 0, 1" in result.output
    assert "f(0): 3" in result.output
    assert "verified: true" in result.output


def test_solve_json(tmp_path):
    result = _run("solve", "--json", _write_doc(tmp_path, SAMPLE_DOC))
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data['coefficients'] == ["3", "0", "1"]
    assert data['verified'] is True


def test_solve_mismatch_is_not_an_error(tmp_path):
    doc = dict(SAMPLE_DOC, keys={'n': 4, 'k': 2})
    result = _run("solve", _write_doc(tmp_path, doc))
    assert result.exit_code == 0
    assert "verified: false" in result.output
    assert "x=3 expected=12 got=10" in result.output


def test_solve_use_all(tmp_path):
    doc = dict(SAMPLE_DOC, keys={'n': 4, 'k': 2})
    result = _run("solve", "--use-all", "--json", _write_doc(tmp_path, doc))
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data['num_used'] == 4
    assert data['verified'] is True


ERROR_DOCS = [
    dict(SAMPLE_DOC, keys={'n': 4, 'k': 0}),
    dict(SAMPLE_DOC, keys={'n': 4, 'k': 5}),
    dict(SAMPLE_DOC, keys={'n': 4}),
    dict(SAMPLE_DOC, **{'7': {'base': "2", 'value': "102"}}),
]


@pytest.mark.parametrize("doc", ERROR_DOCS)
def test_solve_errors(tmp_path, doc):
    result = _run("solve", _write_doc(tmp_path, doc))
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_solve_duplicate_x(tmp_path):
    fpath = tmp_path / "input.json"
    # "1" and "01" are distinct keys, but both are x=1
    fpath.write_text(
        '{"keys": {"n": 3, "k": 3}, "1": {"base": "10", "value": "4"},'
        ' "01": {"base": "10", "value": "5"}, "2": {"base": "10", "value": "7"}}',
        encoding="utf-8",
    )
    result = _run("solve", str(fpath))
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_solve_missing_file(tmp_path):
    result = _run("solve", str(tmp_path / "missing.json"))
    assert result.exit_code != 0


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["ff", "16"], "255"),
        (["101", "2"], "5"),
        (["255", "10", "--to-base", "2"], "11111111"),
        (["zz", "36", "--to-base", "16"], "50f"),
    ],
)
def test_convert(argv, expected):
    result = _run("convert", *argv)
    assert result.exit_code == 0
    assert result.output.strip() == expected


def test_convert_invalid_digit():
    result = _run("convert", "19a", "10")
    assert result.exit_code == 1
    assert "Invalid digit 'a' for base 10" in result.output


@pytest.mark.parametrize(
    "flags, num_used",
    [
        (["--first-k"], 2),
        (["--use-all"], 4),
        (["--use-all", "--first-k"], 2),
    ],
)
def test_solve_use_all_override(tmp_path, flags, num_used):
    doc = dict(SAMPLE_DOC, keys={'n': 4, 'k': 2})
    result = _run("solve", "--json", *flags, _write_doc(tmp_path, doc))
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data['num_used'] == num_used
