from utils.formatting import fallback_response, format_markdown, format_response, match_fallback


def test_plain_sentence_gets_one_paragraph():
    assert format_markdown("A variable stores values.") == "<p>A variable stores values.</p>"


def test_surrounding_whitespace_is_dropped():
    assert format_markdown("\n  Hello there.  \n") == "<p>Hello there.</p>"


def test_python_fence_keeps_language_and_code():
    result = format_markdown("```python\nprint(1)\n```")

    assert result == '<pre><code class="language-python">print(1)</code></pre>'


def test_other_language_tags_are_preserved():
    result = format_markdown("```bash\npip install requests\n```")

    assert '<code class="language-bash">pip install requests</code>' in result


def test_untagged_fence():
    result = format_markdown("Try:\n```\nx = 1\ny = 2\n```")

    assert "<pre><code>x = 1\ny = 2</code></pre>" in result
    assert result.startswith("<p>Try:</p><pre>")


def test_code_block_newlines_are_not_converted():
    result = format_markdown("```python\nfor i in range(3):\n    print(i)\n```")

    assert "<br>" not in result
    assert "for i in range(3):\n    print(i)" in result


def test_inline_code_and_bold():
    result = format_markdown("Use `print()` to show **output**.")

    assert result == "<p>Use <code>print()</code> to show <strong>output</strong>.</p>"


def test_paragraphs_and_line_breaks():
    result = format_markdown("First line\nsecond line\n\nNew paragraph")

    assert result == "<p>First line<br>second line</p><p>New paragraph</p>"


def test_unbalanced_fence_stays_literal():
    result = format_markdown("```python\nprint(1)")

    assert "```python" in result
    assert "<pre>" not in result


def test_html_in_backend_text_is_escaped():
    result = format_markdown("<script>alert(1)</script> and `a < b`")

    assert "<script>" not in result
    assert "&lt;script&gt;" in result
    assert "<code>a &lt; b</code>" in result


def test_format_response_is_never_an_error():
    response = format_response("Hi")

    assert response.is_error is False
    assert response.html == "<p>Hi</p>"


def test_fallback_keyword_match():
    response = fallback_response("What is a variable?", "Connection refused")

    assert response.is_error is False
    assert "labeled box" in response.html
    assert "quick answer" in response.html
    assert "Connection refused" not in response.html


def test_fallback_first_keyword_in_table_order_wins():
    # "variable" precedes "class" in the table, "list" precedes "dictionary"
    assert match_fallback("What is a class variable?")[0] == "variable"
    assert match_fallback("A DICTIONARY or a list?")[0] == "list"


def test_fallback_matching_is_repeatable():
    results = {match_fallback("how do Loops and functions work")[0] for _ in range(5)}

    assert results == {"loop"}


def test_fallback_without_match_shows_error():
    response = fallback_response("asdkjasd", "timeout")

    assert response.is_error is True
    assert "timeout" in response.html
    assert "Check your AI backend settings" in response.html


def test_fallback_error_text_is_escaped():
    response = fallback_response("zzz", "<b>bad</b>")

    assert "&lt;b&gt;bad&lt;/b&gt;" in response.html


def test_code_block_followed_by_prose_is_well_formed():
    result = format_markdown("```python\nx = 1\n```\n\nThat sets x.")

    assert result == '<pre><code class="language-python">x = 1</code></pre><p>That sets x.</p>'


def test_code_block_between_paragraphs():
    result = format_markdown("Look:\n\n```\nx = 1\n```\nThen **run** it.")

    assert result == "<p>Look:</p><pre><code>x = 1</code></pre><p>Then <strong>run</strong> it.</p>"
