"""sensifilter 命令行测试"""

import pytest
from typer.testing import CliRunner

from sensifilter.__main__ import app

runner = CliRunner()


@pytest.fixture
def lexicon(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("敏感\n敏感词\nbadword\n", encoding="utf-8")
    return path


class TestCheck:
    """测试 check 命令"""

    def test_hit(self, lexicon):
        result = runner.invoke(app, ["check", "这是敏感词库", "-l", str(lexicon)])
        assert result.exit_code == 1

    def test_miss(self, lexicon):
        result = runner.invoke(app, ["check", "普通文本", "-l", str(lexicon)])
        assert result.exit_code == 0

    def test_missing_lexicon(self, tmp_path):
        result = runner.invoke(app, ["check", "文本", "-l", str(tmp_path / "none.txt")])
        assert result.exit_code == 2

    def test_bad_policy(self, lexicon):
        result = runner.invoke(app, ["check", "文本", "-l", str(lexicon), "--policy", "fuzzy"])
        assert result.exit_code == 2

    def test_lexicon_from_config(self, tmp_path, lexicon):
        config = tmp_path / "sensifilter.toml"
        config.write_text('[filter]\nlexicons = ["words.txt"]\n', encoding="utf-8")
        result = runner.invoke(app, ["check", "b-a-d-w-o-r-d", "-c", str(config)])
        assert result.exit_code == 1


class TestFind:
    """测试 find 命令"""

    def test_find(self, lexicon):
        result = runner.invoke(app, ["find", "这是敏感词，b-a-d-w-o-r-d", "-l", str(lexicon)])
        assert result.exit_code == 0
        assert "敏感词" in result.output
        assert "b-a-d-w-o-r-d" in result.output

    def test_find_escapes_markup(self, tmp_path):
        """测试命中片段中的方括号原样输出"""
        words = tmp_path / "markup.txt"
        words.write_text("[red]坏词\n", encoding="utf-8")
        result = runner.invoke(app, ["find", "这里有[red]坏词", "-l", str(words)])
        assert result.exit_code == 0
        assert "[red]坏词" in result.output


class TestMask:
    """测试 mask 命令"""

    def test_mask_inplace(self, tmp_path, lexicon):
        target = tmp_path / "docs"
        target.mkdir()
        doc = target / "a.txt"
        doc.write_text("这是敏感词库", encoding="utf-8")
        clean = target / "b.txt"
        clean.write_text("普通文本", encoding="utf-8")

        result = runner.invoke(app, ["mask", str(target), "-l", str(lexicon), "--encoding", "utf-8"])
        assert result.exit_code == 0
        assert doc.read_text(encoding="utf-8") == "这是***库"
        assert clean.read_text(encoding="utf-8") == "普通文本"

    def test_mask_with_suffix(self, tmp_path, lexicon):
        doc = tmp_path / "a.txt"
        doc.write_text("badword here", encoding="utf-8")
        result = runner.invoke(
            app,
            ["mask", str(doc), "-l", str(lexicon), "--no-inplace", "--mask", "#", "--encoding", "utf-8"],
        )
        assert result.exit_code == 0
        assert doc.read_text(encoding="utf-8") == "badword here"
        assert (tmp_path / "a.txt.masked").read_text(encoding="utf-8") == "####### here"

    def test_mask_pinyin(self, tmp_path, lexicon):
        doc = tmp_path / "a.txt"
        doc.write_text("这是敏感", encoding="utf-8")
        result = runner.invoke(app, ["mask", str(doc), "-l", str(lexicon), "--to-pinyin", "--style", "default", "--encoding", "utf-8"])
        assert result.exit_code == 0
        assert doc.read_text(encoding="utf-8") == "这是mingan"

    def test_dry_run(self, tmp_path, lexicon):
        doc = tmp_path / "a.txt"
        doc.write_text("这是敏感词库", encoding="utf-8")
        result = runner.invoke(app, ["mask", str(doc), "-l", str(lexicon), "--dry-run", "--encoding", "utf-8"])
        assert result.exit_code == 0
        assert "这是***库" in result.output
        assert doc.read_text(encoding="utf-8") == "这是敏感词库"

    def test_non_txt_file(self, tmp_path, lexicon):
        doc = tmp_path / "a.md"
        doc.write_text("敏感", encoding="utf-8")
        result = runner.invoke(app, ["mask", str(doc), "-l", str(lexicon)])
        assert result.exit_code == 2

    def test_prompt_for_path(self, tmp_path, lexicon):
        """测试未提供路径时交互输入"""
        doc = tmp_path / "a.txt"
        doc.write_text("敏感", encoding="utf-8")
        result = runner.invoke(app, ["mask", "-l", str(lexicon), "--encoding", "utf-8"], input=f"{doc}\n")
        assert result.exit_code == 0
        assert doc.read_text(encoding="utf-8") == "**"

    def test_unknown_encoding(self, tmp_path, lexicon):
        """测试未知编码时直接退出而不是抛出异常"""
        doc = tmp_path / "a.txt"
        doc.write_text("敏感", encoding="utf-8")
        result = runner.invoke(app, ["mask", str(doc), "-l", str(lexicon), "--encoding", "bogus"])
        assert result.exit_code == 2
        assert not isinstance(result.exception, LookupError)
        assert doc.read_text(encoding="utf-8") == "敏感"
