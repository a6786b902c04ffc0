"""Build utilities turning a TAL source file into a standalone page."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .dom_model import DISPATCHER_NAME
from .errors import MissingRootError
from .io_utils import warn
from .models import BuildConfig
from .parser import MAX_DEPTH, parse_tal
from .util_fs import read_text, write_text

DEFAULT_SOURCE = (
    "[$theme:dark]^.dark[d.f.jc[h.h1{Hello TAL}t.sub{The future of AI UI is here.}"
    "d.fr.jc[b.btn!login{Get Started}b.btn2!docs{Read Docs}]]]"
)
MISSING_ROOT_HTML = '<h1 style="color:red">Error: No Valid Root (^) Found</h1>'
PAGE_TEMPLATE = "page.html.jinja"


@dataclass
class BuildContext:
    """Paths and settings for one page build."""

    input_path: Path
    output_path: Path
    config: BuildConfig = field(default_factory=BuildConfig)
    build_label: str | None = None

    @classmethod
    def from_config(cls, config: BuildConfig, *, build_label: str | None = None) -> "BuildContext":
        return cls(
            input_path=Path(config.input),
            output_path=Path(config.output),
            config=config,
            build_label=build_label,
        )

    @property
    def templates_dir(self) -> Path:
        """Directory containing the page template shipped with the package."""

        return Path(__file__).parent / "templates"

    def jinja_env(self) -> Environment:
        return Environment(
            loader=FileSystemLoader([self.templates_dir]),
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )


def ensure_source(path: Path) -> bool:
    """Write the demo source if ``path`` does not exist. Returns True if created."""

    if path.exists():
        return False
    write_text(path, DEFAULT_SOURCE)
    return True


def render_body(source: str, config: BuildConfig, *, quiet: bool = False) -> str:
    """Parse TAL source into the page body according to the build settings.

    With ``quiet`` the missing-root warning is not printed.
    """

    result = parse_tal(
        source,
        max_depth=config.max_depth or MAX_DEPTH,
        strict=config.strict,
    )
    if result.error is None:
        return result.html or ""

    if isinstance(result.error, MissingRootError) and config.on_missing_root == "diagnostic":
        if not quiet:
            warn(f"Warning: {result.error}")
        return MISSING_ROOT_HTML
    raise SystemExit(f"Build failed: {result.error}")


def render_page(ctx: BuildContext, body: str) -> str:
    """Embed a parsed body in the page template."""

    template = ctx.jinja_env().get_template(PAGE_TEMPLATE)
    rendered = template.render(
        page=ctx.config.page,
        body=body,
        dispatcher=DISPATCHER_NAME,
    )
    if ctx.build_label:
        rendered += f"\n<!-- talgen build: {ctx.build_label} -->\n"
    return rendered


def _digest(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def build_page(ctx: BuildContext, *, check: bool = False) -> str:
    """Render the configured source file and write the page.

    With ``check`` the page is rendered a second time and the build fails if
    the two renders differ. Returns the rendered page text.
    """

    source = read_text(ctx.input_path)
    rendered = render_page(ctx, render_body(source, ctx.config))
    if check:
        repeat = render_page(ctx, render_body(source, ctx.config, quiet=True))
        if _digest(rendered) != _digest(repeat):
            raise SystemExit("Determinism check failed: outputs differ between runs")
    write_text(ctx.output_path, rendered)
    return rendered


__all__ = [
    "BuildContext",
    "DEFAULT_SOURCE",
    "MISSING_ROOT_HTML",
    "build_page",
    "ensure_source",
    "render_body",
    "render_page",
]
