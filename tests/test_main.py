import json

from click.testing import CliRunner

from binheap.__main__ import main


def test_sort():
    runner = CliRunner()
    result = runner.invoke(main, ['sort', '3', '1', '2'])
    assert result.exit_code == 0
    assert result.output == '1 2 3\n'

    result = runner.invoke(main, ['sort', '--with-size', '--', '-1', '5', '0'])
    assert result.exit_code == 0
    assert result.output == '3\n-1 0 5\n'


def test_sort_random():
    runner = CliRunner()
    result = runner.invoke(main, ['sort', '-n', '20', '-m', '9', '-s', '1'])
    assert result.exit_code == 0
    values = [int(x) for x in result.output.split()]
    assert len(values) == 20
    assert values == sorted(values)


def test_selftest(tmp_path):
    path = tmp_path / 'cases.json'
    path.write_text(json.dumps({'cases': [[10, 10], [100, 1]]}))
    runner = CliRunner()
    result = runner.invoke(main, ['selftest', '--config', str(path)])
    assert result.exit_code == 0
    assert '2 cases passed' in result.output


def test_selftest_failure(tmp_path, monkeypatch):
    path = tmp_path / 'cases.json'
    path.write_text(json.dumps([[3, 10]]))
    monkeypatch.setattr('binheap.sort.heap_sort', lambda values: [2, 1, 0])
    runner = CliRunner()
    result = runner.invoke(main, ['selftest', '-c', str(path), '-s', '0'])
    assert result.exit_code == 1
    assert 'Before:' in result.output
    assert 'After:\n2 1 0' in result.output
