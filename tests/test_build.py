from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from jinja2 import UndefinedError

from talgen.build import (
    DEFAULT_SOURCE,
    MISSING_ROOT_HTML,
    BuildContext,
    build_page,
    ensure_source,
    render_body,
    render_page,
)
from talgen.models import BuildConfig, PageConfig


def _ctx(tmp_path: Path, **config) -> BuildContext:
    return BuildContext(
        input_path=tmp_path / "code.tal",
        output_path=tmp_path / "out" / "index.html",
        config=BuildConfig(**config),
    )


def test_ensure_source_writes_demo_once(tmp_path: Path):
    source = tmp_path / "code.tal"
    assert ensure_source(source) is True
    assert source.read_text(encoding="utf-8") == DEFAULT_SOURCE

    source.write_text("^{custom}", encoding="utf-8")
    assert ensure_source(source) is False
    assert source.read_text(encoding="utf-8") == "^{custom}"


def test_build_page_writes_standalone_document(tmp_path: Path):
    ctx = _ctx(tmp_path)
    ensure_source(ctx.input_path)
    rendered = build_page(ctx)

    assert ctx.output_path.read_text(encoding="utf-8") == rendered
    soup = BeautifulSoup(rendered, "html.parser")

    viewport = soup.find("meta", attrs={"name": "viewport"})
    assert viewport and "width=device-width" in viewport["content"]
    assert soup.title.get_text() == "TAL Generated App"
    assert soup.html["lang"] == "en"
    assert soup.body.find("main") is not None
    assert "@keyframes fadeIn" in soup.find("style").get_text()


def test_page_embeds_body_verbatim(tmp_path: Path):
    ctx = _ctx(tmp_path)
    rendered = render_page(ctx, render_body("^{<em>x</em> & y}", ctx.config))
    assert "<main><em>x</em> & y</main>" in rendered


def test_dispatcher_script_carries_routes(tmp_path: Path):
    ctx = _ctx(tmp_path)
    rendered = render_page(ctx, "<main></main>")
    script = BeautifulSoup(rendered, "html.parser").find("script").get_text()

    assert "const app = {" in script
    assert '"nav_home": "home"' in script
    assert '"nav_res": "resources"' in script
    assert 'sections: ["home", "docs", "examples", "resources"]' in script
    assert "console.log('Action:', action);" in script
    assert 'app.navigate("home");' in script
    assert 'target.style.display = "flex";' in script


def test_custom_page_settings(tmp_path: Path):
    page = PageConfig(title="Docs", routes={"go_docs": "docs"}, homeSection="docs", sectionDisplay="block")
    ctx = _ctx(tmp_path, page=page)
    rendered = render_page(ctx, "<main></main>")

    assert "<title>Docs</title>" in rendered
    assert '"go_docs": "docs"' in rendered
    assert 'sections: ["docs"]' in rendered
    assert 'app.navigate("docs");' in rendered
    assert 'target.style.display = "block";' in rendered


def test_title_is_escaped(tmp_path: Path):
    ctx = _ctx(tmp_path, page=PageConfig(title="<A & B>"))
    assert "<title>&lt;A &amp; B&gt;</title>" in render_page(ctx, "")


def test_missing_root_renders_diagnostic(capsys):
    body = render_body("d{no root}", BuildConfig())
    assert body == MISSING_ROOT_HTML
    assert "No root marker" in capsys.readouterr().err


def test_quiet_missing_root_skips_warning(capsys):
    assert render_body("d{no root}", BuildConfig(), quiet=True) == MISSING_ROOT_HTML
    assert capsys.readouterr().err == ""


def test_check_build_warns_once(tmp_path: Path, capsys):
    ctx = _ctx(tmp_path)
    ctx.input_path.write_text("d{no root}", encoding="utf-8")

    rendered = build_page(ctx, check=True)

    assert MISSING_ROOT_HTML in rendered
    assert capsys.readouterr().err.count("Warning:") == 1


def test_missing_root_can_abort():
    with pytest.raises(SystemExit) as excinfo:
        render_body("d{no root}", BuildConfig(onMissingRoot="abort"))
    assert "No root marker" in str(excinfo.value)


def test_strict_build_fails_on_unterminated_content():
    with pytest.raises(SystemExit) as excinfo:
        render_body("^{open", BuildConfig(strict=True))
    assert "never closed" in str(excinfo.value)


def test_depth_override_is_applied():
    with pytest.raises(SystemExit):
        render_body("^[d[d]]", BuildConfig(maxDepth=2))
    assert render_body("^[d[d]]", BuildConfig(maxDepth=3)) == "<main><div><div></div></div></main>"


def test_very_deep_source_fails_cleanly():
    source = "^[" + "d[" * 2999 + "d" + "]" * 2999 + "]"
    with pytest.raises(SystemExit) as excinfo:
        render_body(source, BuildConfig())
    assert "Nesting exceeds" in str(excinfo.value)


def test_build_label_is_appended(tmp_path: Path):
    ctx = _ctx(tmp_path)
    ctx.build_label = "2026-10-18"
    assert render_page(ctx, "").endswith("\n<!-- talgen build: 2026-10-18 -->\n")


def test_jinja_strictundefined(tmp_path: Path):
    env = _ctx(tmp_path).jinja_env()
    template = env.from_string("{{ missing_value }}")

    with pytest.raises(UndefinedError):
        template.render()
