"""Unit and property-based tests for the rendering module."""
from hypothesis import given
from hypothesis import strategies as st

from maung_assistant.rendering import (
    CodeBlock,
    Emphasis,
    InlineCode,
    LineBreak,
    TextRun,
    neutralize,
    render,
    render_plain,
    to_html,
)

PLAIN_ALPHABET = st.characters(
    whitelist_categories=("Lu", "Ll", "Nd", "Zs"),
    blacklist_characters="&<>\"'`*",
)


class TestNeutralize:
    """Tests for markup neutralization."""

    def test_escapes_markup_characters(self):
        """Test that all five markup-significant characters are escaped."""
        escaped = neutralize("<a href=\"x\">'&'</a>")
        assert "<" not in escaped
        assert ">" not in escaped
        assert '"' not in escaped
        assert "'" not in escaped
        assert escaped.startswith("&lt;a href=&quot;x&quot;&gt;")


class TestRender:
    """Tests for render()."""

    def test_empty_text(self):
        """Test that empty input renders to no blocks."""
        assert render("") == []

    def test_bold_then_text(self):
        """Test the worked example from the chat flow."""
        assert render("**hi** there") == [Emphasis(text="hi"), TextRun(text=" there")]

    def test_inline_code(self):
        """Test single-backtick spans."""
        assert render("use `TINGALI siswa` now") == [
            TextRun(text="use "),
            InlineCode(text="TINGALI siswa"),
            TextRun(text=" now"),
        ]

    def test_fenced_block_takes_precedence(self):
        """Test that backticks around a fenced block are not inline code."""
        blocks = render("`inline` then ```lang\ncode```")
        assert blocks == [
            InlineCode(text="inline"),
            TextRun(text=" then "),
            CodeBlock(language="lang", code="code"),
        ]

    def test_code_block_defaults_to_sql(self):
        """Test that a fence without a tag gets the default language."""
        blocks = render("```\nTINGALI siswa\n```")
        assert blocks == [CodeBlock(language="sql", code="TINGALI siswa")]

    def test_code_block_content_is_trimmed_and_not_formatted(self):
        """Test that code keeps inner backticks and asterisks literally."""
        blocks = render("```python\n\n  x = `a` ** 2\n\n```")
        assert blocks == [CodeBlock(language="python", code="x = `a` ** 2")]

    def test_unterminated_fence_is_literal(self):
        """Test that an unclosed fence degrades to text."""
        blocks = render("```sql\nTINGALI siswa")
        assert CodeBlock not in {type(b) for b in blocks}
        assert blocks == [TextRun(text="```sql"), LineBreak(), TextRun(text="TINGALI siswa")]

    def test_newlines_become_line_breaks(self):
        """Test newline splitting, including blank lines."""
        assert render("a\n\nb") == [TextRun(text="a"), LineBreak(), LineBreak(), TextRun(text="b")]

    def test_text_around_code_block(self):
        """Test ordering of text, code block and trailing text."""
        blocks = render("Conto:\n```sql\nDAMEL t id:INT\n```\nSok cobian")
        assert blocks == [
            TextRun(text="Conto:"),
            LineBreak(),
            CodeBlock(language="sql", code="DAMEL t id:INT"),
            LineBreak(),
            TextRun(text="Sok cobian"),
        ]

    def test_bold_inside_inline_code_is_literal(self):
        """Test that inline code is scanned before bold."""
        assert render("`**x**`") == [InlineCode(text="**x**")]

    def test_markup_stays_neutralized(self):
        """Test that raw HTML never comes back out of any payload."""
        blocks = render("<script>alert('x')</script> **<b>** `<i>`")
        assert blocks[0] == TextRun(text="&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt; ")
        assert Emphasis(text="&lt;b&gt;") in blocks
        assert InlineCode(text="&lt;i&gt;") in blocks

    def test_code_block_is_neutralized(self):
        """Test that code block content is escaped too."""
        blocks = render("```sql\nTINGALI t DIMANA a < 3\n```")
        assert blocks == [CodeBlock(language="sql", code="TINGALI t DIMANA a &lt; 3")]

    @given(st.text(alphabet=PLAIN_ALPHABET, min_size=1))
    def test_plain_text_is_single_run(self, text: str):
        """Property test: text without markdown characters renders as itself."""
        assert render(text) == [TextRun(text=text)]

    @given(st.lists(st.text(alphabet=PLAIN_ALPHABET, min_size=1), min_size=1, max_size=5))
    def test_plain_lines_reconstruct(self, lines: list[str]):
        """Property test: runs joined at line breaks reproduce the input."""
        blocks = render("\n".join(lines))
        rebuilt = "".join("\n" if isinstance(b, LineBreak) else b.text for b in blocks)
        assert rebuilt == "\n".join(lines)

    @given(st.text())
    def test_render_is_total_and_safe(self, text: str):
        """Property test: any input renders, and no payload contains raw markup."""
        for block in render(text):
            payload = getattr(block, "text", None) or getattr(block, "code", "")
            assert not set(payload) & set("<>\"'")

    @given(st.text())
    def test_render_is_deterministic(self, text: str):
        """Property test: rendering twice gives the same blocks."""
        assert render(text) == render(text)


class TestRenderPlain:
    """Tests for render_plain()."""

    def test_no_formatting(self):
        """Test that user text is escaped but never formatted."""
        assert render_plain("**x** <y>\nz") == [
            TextRun(text="**x** &lt;y&gt;"),
            LineBreak(),
            TextRun(text="z"),
        ]


class TestToHtml:
    """Tests for HTML serialization."""

    def test_structural_tags(self):
        """Test tags produced for each block type."""
        html = to_html(render("**a** `b`\n```sql\nc\n```"))
        assert html == (
            '<strong>a</strong> <code>b</code><br>'
            '<pre><code data-language="sql">c</code></pre>'
        )

    def test_injected_markup_is_not_reexpanded(self):
        """Test that user-supplied tags stay escaped in the output."""
        html = to_html(render("<img src=x onerror=alert(1)>"))
        assert "<img" not in html
        assert html == "&lt;img src=x onerror=alert(1)&gt;"
