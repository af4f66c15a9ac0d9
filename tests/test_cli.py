import json

import pytest

import main


@pytest.fixture
def payload_file(tmp_path, itinerary_payload):
    path = tmp_path / 'itinerary.json'
    path.write_text(json.dumps(itinerary_payload), encoding='utf-8')
    return path


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, settings):
    monkeypatch.setattr(main, 'get_settings', lambda: settings)


def _output(capsys):
    return json.loads(capsys.readouterr().out)


def test_render_writes_pdf(payload_file, tmp_path, capsys):
    target = tmp_path / 'out' / 'trip.pdf'
    assert main.main(['render', '--input', str(payload_file), '--output', str(target)]) == 0

    result = _output(capsys)
    assert result['status'] == 'ok'
    assert result['pages'] == 9
    assert target.read_bytes().startswith(b'%PDF')
    assert result['bytes'] == target.stat().st_size


def test_render_defaults_to_timestamped_name_in_output_dir(payload_file, settings, capsys):
    assert main.main(['render', '--input', str(payload_file)]) == 0
    result = _output(capsys)
    written = list(settings.output_dir.glob('luxury-itinerary-ada-lovelace-*.pdf'))
    assert len(written) == 1
    assert result['output_path'] == str(written[0].resolve())


def test_render_refuses_invalid_itinerary(tmp_path, itinerary_payload, capsys):
    itinerary_payload['destination'] = ''
    path = tmp_path / 'broken.json'
    path.write_text(json.dumps(itinerary_payload), encoding='utf-8')

    assert main.main(['render', '--input', str(path), '--output', str(tmp_path / 'x.pdf')]) == 1
    assert _output(capsys)['errors'] == {'destination': 'Destination is required'}
    assert not (tmp_path / 'x.pdf').exists()

    assert main.main(['render', '--input', str(path), '--output', str(tmp_path / 'x.pdf'), '--skip-validation']) == 0


def test_validate_reports_status(payload_file, capsys):
    assert main.main(['validate', '--input', str(payload_file)]) == 0
    assert _output(capsys) == {'status': 'ok', 'errors': {}}


def test_missing_or_malformed_input(tmp_path, capsys):
    assert main.main(['validate', '--input', str(tmp_path / 'nope.json')]) == 2
    assert _output(capsys)['status'] == 'error'

    bad = tmp_path / 'list.json'
    bad.write_text('[1, 2]', encoding='utf-8')
    assert main.main(['validate', '--input', str(bad)]) == 2
    assert 'Invalid itinerary JSON' in _output(capsys)['message']
