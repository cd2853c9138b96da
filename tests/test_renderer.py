import pytest

from mdpdf.renderer import MarkdownRenderer, emojize_text, github_slug, render_markdown


@pytest.fixture(scope="module")
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


def test_github_slug() -> None:
    assert github_slug("Hello World") == "hello-world"
    assert github_slug("What's new in v2.0?") == "whats-new-in-v20"
    assert github_slug("snake_case and-dash") == "snake_case-and-dash"


def test_headings_get_ids(renderer: MarkdownRenderer) -> None:
    html = renderer.render("# Hello World\n\n## Second Part\n")
    assert '<h1 id="hello-world">Hello World</h1>' in html
    assert '<h2 id="second-part">' in html


def test_heading_id_uses_shortcode_text(renderer: MarkdownRenderer) -> None:
    html = renderer.render("# Hi :smile:\n")
    assert 'id="hi-smile"' in html
    assert "\U0001F604" in html


def test_emoji_shortcodes(renderer: MarkdownRenderer) -> None:
    html = renderer.render("Great job :smile: and :notarealemoji:\n")
    assert "\U0001F604" in html
    assert ":smile:" not in html
    assert ":notarealemoji:" in html


def test_numeric_colon_sequences_are_not_shortcodes() -> None:
    assert emojize_text("Meet at 12:30 or 00:00:00") == "Meet at 12:30 or 00:00:00"
    assert emojize_text("at 10:30 :smile:") == "at 10:30 \U0001F604"


def test_emoji_not_applied_to_code(renderer: MarkdownRenderer) -> None:
    html = renderer.render("Use `:smile:` literally\n")
    assert "<code>:smile:</code>" in html


def test_emoji_disabled() -> None:
    html = render_markdown("Hi :smile:\n", convert_emojis=False)
    assert ":smile:" in html


def test_gfm_features(renderer: MarkdownRenderer) -> None:
    html = renderer.render("| a | b |\n|---|---|\n| 1 | 2 |\n\n~~gone~~\n\nVisit https://example.com\n")
    assert "<table>" in html
    assert "<s>gone</s>" in html
    assert '<a href="https://example.com">' in html


def test_task_lists(renderer: MarkdownRenderer) -> None:
    html = renderer.render("- [x] done\n- [ ] todo\n")
    assert "task-list-item" in html
    assert html.count('type="checkbox"') == 2
    assert "checked" in html


def test_fenced_code_is_highlighted(renderer: MarkdownRenderer) -> None:
    html = renderer.render("```python\nprint('hi')\n```\n")
    assert '<code class="language-python">' in html
    assert '<span class="nb">print</span>' in html


def test_unknown_language_is_escaped(renderer: MarkdownRenderer) -> None:
    html = renderer.render("```nosuchlang\n<b>raw</b>\n```\n")
    assert "&lt;b&gt;raw&lt;/b&gt;" in html
    assert "<span" not in html


def test_highlight_disabled() -> None:
    html = render_markdown("```python\nprint('hi')\n```\n", enable_highlight=False)
    assert '<code class="language-python">' in html
    assert "<span" not in html
    assert "print(&#x27;hi&#x27;)" in html or "print('hi')" in html


def test_simple_line_breaks() -> None:
    assert "<br" not in render_markdown("one\ntwo\n")
    assert "<br" in render_markdown("one\ntwo\n", simple_line_breaks=True)


def test_renderers_do_not_share_settings() -> None:
    plain = MarkdownRenderer(emoji=False)
    fancy = MarkdownRenderer(emoji=True)
    assert ":smile:" in plain.render(":smile:")
    assert ":smile:" not in fancy.render(":smile:")
    assert ":smile:" in plain.render(":smile:")


def test_duplicate_headings_get_unique_ids(renderer: MarkdownRenderer) -> None:
    html = renderer.render("# Intro\n\n# Intro\n")
    assert 'id="intro"' in html
    assert 'id="intro-1"' in html


@pytest.mark.parametrize("emoji_enabled", [True, False])
def test_clock_time_survives_rendering(emoji_enabled: bool) -> None:
    html = MarkdownRenderer(emoji=emoji_enabled).render("Starts at 00:00:00 sharp\n")
    assert html == "<p>Starts at 00:00:00 sharp</p>\n"
