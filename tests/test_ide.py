from testgen.ide import IDE, detect_ide


class TestDetectIde:
    def test_cursor_wins_over_vscode(self, tmp_path):
        (tmp_path / ".vscode").mkdir()
        (tmp_path / ".cursor").mkdir()
        assert detect_ide(tmp_path) == IDE.CURSOR

    def test_jetbrains(self, tmp_path):
        (tmp_path / ".idea").mkdir()
        assert detect_ide(tmp_path) == IDE.JETBRAINS

    def test_codeium(self, tmp_path):
        (tmp_path / ".codeium").mkdir()
        assert detect_ide(tmp_path) == IDE.CODEIUM

    def test_unknown(self, tmp_path):
        assert detect_ide(tmp_path) == IDE.UNKNOWN
