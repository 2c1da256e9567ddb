from blockmarkup.markup.encoding import NBSP, encode_attr, encode_content, preserve_whitespace


class TestPreserveWhitespace:
    def test_single_inner_spaces_kept(self):
        assert preserve_whitespace("a b c") == "a b c"

    def test_repeated_spaces(self):
        assert preserve_whitespace("a   b") == f"a {NBSP}{NBSP}b"

    def test_boundary_spaces(self):
        assert preserve_whitespace(" a ") == f"{NBSP}a{NBSP}"

    def test_length_unchanged(self):
        text = "  x  y  "
        assert len(preserve_whitespace(text)) == len(text)

    def test_empty(self):
        assert preserve_whitespace("") == ""


class TestEncodeContent:
    def test_reserved_characters(self):
        assert encode_content('<a href="x">&</a>') == '&lt;a href="x"&gt;&amp;&lt;/a&gt;'

    def test_nbsp_entity(self):
        assert encode_content(f"a{NBSP}b") == "a&nbsp;b"

    def test_newlines(self):
        assert encode_content("a\nb\n") == "a<br>\nb<br>\n"
        assert encode_content("a\nb", line_break="<br/>") == "a<br/>\nb"


class TestEncodeAttr:
    def test_quotes_escaped(self):
        assert encode_attr('say "hi" & <bye>') == "say &quot;hi&quot; &amp; &lt;bye&gt;"
