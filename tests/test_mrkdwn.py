"""Markdown→Slack mrkdwn変換関数のテスト"""

from slack_block_builder.mrkdwn import convert_markdown_to_mrkdwn, escape_mrkdwn, escape_special_chars


class TestConvertMarkdownToMrkdwn:
    """convert_markdown_to_mrkdwn関数のテスト"""

    def test_bold(self) -> None:
        """**bold** → *bold*"""
        assert convert_markdown_to_mrkdwn("**bold**") == "*bold*"

    def test_link(self) -> None:
        """[text](url) → <url|text>"""
        assert convert_markdown_to_mrkdwn("[text](https://example.com)") == "<https://example.com|text>"

    def test_bullet_list(self) -> None:
        """箇条書き: - item → • item"""
        assert convert_markdown_to_mrkdwn("- item1\n- item2") == "• item1\n• item2"

    def test_ampersand_in_text(self) -> None:
        """テキスト内の & → &amp;"""
        assert convert_markdown_to_mrkdwn("A & B") == "A &amp; B"

    def test_ampersand_in_link_text(self) -> None:
        """リンクテキスト内の & がエスケープされる"""
        assert convert_markdown_to_mrkdwn("[A & B](https://example.com)") == "<https://example.com|A &amp; B>"

    def test_angle_bracket_in_link_text(self) -> None:
        """リンクテキスト内の < がエスケープされる"""
        assert convert_markdown_to_mrkdwn("[a < b](https://example.com)") == "<https://example.com|a &lt; b>"

    def test_ampersand_in_url_preserved(self) -> None:
        """URL部分の & はそのまま保持"""
        result = convert_markdown_to_mrkdwn("[text](https://example.com?a=1&b=2)")
        assert result == "<https://example.com?a=1&b=2|text>"

    def test_inline_code_not_escaped(self) -> None:
        """インラインコード内の特殊文字はエスケープしない"""
        assert "a < b & c" in convert_markdown_to_mrkdwn("`a < b & c`")


class TestEscapeSpecialChars:
    """escape_special_chars関数のテスト（変換済みmrkdwnに対するエスケープ）"""

    def test_escape_mrkdwn(self) -> None:
        """&, <, > がエスケープされること"""
        assert escape_mrkdwn("a < b & c > d") == "a &lt; b &amp; c &gt; d"

    def test_link_without_label_preserved(self) -> None:
        """<url> 形式のリンクはそのまま保持"""
        assert escape_special_chars("see <https://example.com>") == "see <https://example.com>"

    def test_non_url_brackets_escaped(self) -> None:
        """URLでない <...> はエスケープされる"""
        assert escape_special_chars("<not a link>") == "&lt;not a link&gt;"

    def test_code_block_not_escaped(self) -> None:
        """コードブロック内はエスケープしない"""
        text = "x < y\n```\na < b\n```"
        assert escape_special_chars(text) == "x &lt; y\n```\na < b\n```"

    def test_greater_than_in_link_label(self) -> None:
        """リンクテキスト内の > もエスケープされ、リンクが壊れないこと"""
        assert escape_special_chars("<https://example.com|a > b>") == "<https://example.com|a &gt; b>"

    def test_greater_than_in_label_with_following_link(self) -> None:
        """> を含むリンクの後に別のリンクがあっても、それぞれの終端が正しいこと"""
        text = "<https://a.example.com|x > y> & <https://b.example.com|z>"
        expected = "<https://a.example.com|x &gt; y> &amp; <https://b.example.com|z>"
        assert escape_special_chars(text) == expected

    def test_unclosed_link_escaped(self) -> None:
        """閉じ > のないリンクはエスケープされる"""
        assert escape_special_chars("<https://example.com") == "&lt;https://example.com"
