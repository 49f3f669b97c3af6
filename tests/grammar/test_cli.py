"""
Tests for the GrammarFix command line
"""

import json

from grammarfix.__main__ import main


class TestCommandLine:
    """Tests for main()."""

    def test_text_argument(self, capsys):
        assert main(['--text', 'He dont know.', '--no-ai']) == 0
        out = capsys.readouterr().out
        assert out.splitlines()[0] == "He doesn't know."
        assert 'Errors: 2' in out

    def test_json_output(self, capsys):
        assert main(['--text', 'They is happy.', '--no-ai', '--json']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['corrected'] == 'They are happy.'
        assert data['ai_status'] == 'disabled'

    def test_file_input(self, tmp_path, capsys):
        path = tmp_path / 'essay.txt'
        path.write_text('I want want coffee.', encoding='utf-8')
        assert main([str(path), '--no-ai']) == 0
        assert capsys.readouterr().out.startswith('I want coffee.')

    def test_blank_text(self, capsys):
        assert main(['--text', '   ', '--no-ai']) == 2
        assert 'Please enter some text' in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        assert main([str(tmp_path / 'missing.txt'), '--no-ai']) == 2
