from paliscript.main import main


def test_convert(capsys):
    assert main(['convert', 'बुद्ध', '--from', 'devanagari', '--to', 'latin']) == 0
    assert capsys.readouterr().out.strip() == 'buddha'


def test_convert_title_case_with_detected_source(capsys):
    assert main(['convert', 'बुद्ध', '--to', 'latin', '--title-case']) == 0
    assert capsys.readouterr().out.strip() == 'Buddha'


def test_convert_error(capsys):
    assert main(['convert', 'buddha', '--to', 'unknown']) == 1
    assert capsys.readouterr().out.startswith('Error:')


def test_book(tmp_path, capsys):
    source = tmp_path / 'book.xml'
    source.write_text('<p rend="bodytext">धम्मो।</p>', encoding='utf-8')
    output = tmp_path / 'book.latn.xml'
    assert main(['book', str(source), '--to', 'latin', '--output', str(output)]) == 0
    assert output.read_text(encoding='utf-8') == '<p rend="bodytext">Dhammo.</p>'


def test_validate(capsys):
    assert main(['validate', '--words', 'बुद्ध', 'धम्मो', '--scripts', 'thai', 'khmer']) == 0
    out = capsys.readouterr().out
    assert 'Words checked: 2' in out
    assert 'FAIL' not in out


def test_validate_from_file(tmp_path, capsys):
    words = tmp_path / 'words.txt'
    words.write_text('बुद्ध\nसंखित्तेन\n', encoding='utf-8')
    assert main(['validate', '--input-file', str(words), '--scripts', 'latin']) == 0
    assert 'Words checked: 2' in capsys.readouterr().out


def test_analyze(capsys):
    assert main(['analyze', 'बुद्ध', '--scripts', 'tibetan']) == 0
    assert 'tibetan' in capsys.readouterr().out


def test_extract(tmp_path, capsys):
    source = tmp_path / 'corpus.xml'
    source.write_text('<p>बुद्ध बुद्ध धम्म</p>', encoding='utf-8')
    output = tmp_path / 'selected.txt'
    table = tmp_path / 'syllables.csv'
    assert main(['extract', '--input-file', str(source), '--output', str(output),
                 '--csv', str(table)]) == 0
    assert output.read_text(encoding='utf-8') == 'बुद्ध धम्म'
    assert table.exists()


def test_extract_missing_file(tmp_path, capsys):
    assert main(['extract', '--input-file', str(tmp_path / 'missing.xml')]) == 1


def test_compare(capsys):
    code = main(['compare', 'बुद्ध', '--scripts', 'gujarati'])
    assert code in (0, 1)
    assert 'gujarati' in capsys.readouterr().out


def test_log_level_option(capsys):
    assert main(['--log-level', 'DEBUG', 'convert', 'धम्म', '--to', 'thai']) == 0
    assert capsys.readouterr().out.strip()
