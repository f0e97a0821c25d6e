#!/usr/bin/env python3
"""
Command-line interface for generating, validating and previewing resume themes.

Creation commands save <theme-id>.json and <theme-id>.css to the output
directory (PRISM_OUTPUT_PATH by default) and write a session log under
PRISM_LOGS_PATH.

Commands:
    list            - List predefined theme templates
    fonts           - List font pairings (optionally by category)
    colors          - Generate ranked color schemes for an industry/personality
    create-template - Create a theme from a predefined template
    create-custom   - Create a theme from an industry/personality request
    create-brand    - Create a theme from brand colors or a known company
    preview         - Render a themed HTML preview
    validate        - Validate a theme for accessibility and completeness
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from prism.contexts.rendering.html_renderer import render_document
from prism.contexts.rendering.logger import setup_rendering_logger
from prism.contexts.rendering.theme_store import load_theme, save_theme
from prism.contexts.theming.brand_kit import (
    BRAND_PERSONALITIES,
    create_brand_kit,
    generate_logo_css,
    get_personality_colors,
    validate_brand_kit,
)
from prism.contexts.theming.exceptions import (
    InvalidColorFormatError,
    InvalidThemeStructureError,
    TemplateNotFoundError,
)
from prism.contexts.theming.font_manager import get_all_pairings, get_pairings_by_category
from prism.contexts.theming.logger import log_validation_result, setup_theming_logger
from prism.contexts.theming.palette_generator import generate_color_scheme
from prism.contexts.theming.theme_data_structures import (
    BrandColors,
    BrandFonts,
    BrandKit,
    BrandLogo,
    ColorPreferences,
    ColorSchemeRequest,
    ResumeTheme,
)
from prism.contexts.theming.theme_engine import (
    create_custom_theme,
    create_from_brand_kit,
    create_from_template,
    generate_preview,
    get_all_themes,
    get_theme_by_id,
    validate_theme,
)
from prism.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("PRISM_LOGS_PATH", "outs/logs"))
OUTPUT_PATH = Path(os.getenv("PRISM_OUTPUT_PATH", "themes"))

SAMPLE_SECTIONS = {
    "header": """<div class="header">
  <div class="name">Alex Morgan</div>
  <div class="role">Senior Software Engineer</div>
  <div class="location">Portland, OR</div>
  <div class="contact"><a href="mailto:alex@example.com">alex@example.com</a><span>(555) 010-2030</span></div>
</div>""",
    "experience": """<div class="section">
  <h2>Experience</h2>
  <div class="experience-item">
    <div class="experience-header"><h3>Acme Corp</h3><span class="dates">2021 - Present</span></div>
    <div class="job-title">Staff Engineer</div>
    <ul class="bullets">
      <li>Led migration of the billing platform to an event-driven architecture</li>
      <li>Cut p99 latency by <strong>40%</strong> through query and cache redesign</li>
    </ul>
  </div>
</div>""",
    "skills": """<div class="section">
  <h2>Skills</h2>
  <div class="tech-stack">
    <span class="tech-item">Python</span><span class="tech-item">PostgreSQL</span>
    <span class="tech-item">Kubernetes</span><span class="tech-item">TypeScript</span>
  </div>
</div>""",
}

app = typer.Typer(
    add_completion=False,
    help="Generate, validate and preview resume themes",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _fail(message: str, code: int = 1):
    typer.secho(f"✗ {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=code)


def _start_session(phase: str, output_dir: Path) -> Path:
    """Log to a fresh session directory; preview sessions use the rendering logger."""
    log_dir = LOGS_PATH / f"themes_{now()}"
    if phase == "preview":
        return setup_rendering_logger(log_dir, output_dir=output_dir)
    return setup_theming_logger(log_dir, phase=phase)


def _save(theme: ResumeTheme, output_dir: Path) -> None:
    json_path, css_path = save_theme(theme, output_dir)
    typer.secho(f"✓ Created theme '{theme.id}' ({theme.name})", fg=typer.colors.GREEN)
    typer.echo(f"  JSON: {json_path}")
    typer.echo(f"  CSS:  {css_path}")


def _resolve_theme(theme_ref: str) -> ResumeTheme:
    """Template id or path to a saved theme JSON file."""
    theme = get_theme_by_id(theme_ref)
    if theme is not None:
        return theme

    path = Path(theme_ref)
    if not path.exists():
        _fail(f"'{theme_ref}' is neither a template id nor an existing theme file")
    try:
        return load_theme(path)
    except InvalidThemeStructureError as e:
        _fail(str(e))


@app.command("list")
def list_command():
    """
    List predefined theme templates.

    Examples:\n

        $ manage_themes.py list
    """
    themes = get_all_themes()
    typer.secho("\nPredefined themes:", fg=typer.colors.BLUE, bold=True)

    max_id_len = max(len(theme.id) for theme in themes)
    for theme in themes:
        padding = " " * (max_id_len - len(theme.id))
        typer.echo(f"  {theme.id}{padding}  {(theme.industry or '-'):12}  {theme.description}")

    typer.echo(f"\nTotal: {len(themes)}")


@app.command("fonts")
def fonts_command(
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="classic, modern, creative or technical"),
    ] = None,
):
    """
    List curated font pairings.

    Examples:\n

        $ manage_themes.py fonts

        $ manage_themes.py fonts --category classic
    """
    try:
        pairings = get_pairings_by_category(category) if category else get_all_pairings()
    except ValueError as e:
        _fail(str(e), code=2)

    typer.secho("\nFont pairings:", fg=typer.colors.BLUE, bold=True)
    for pairing in pairings:
        code = f" / {pairing.code}" if pairing.code else ""
        typer.echo(f"  {pairing.name:22} {pairing.category:10} {pairing.heading} / {pairing.body}{code}")
        typer.echo(f"  {'':22} {pairing.description}")


@app.command("colors")
def colors_command(
    industry: Annotated[str, typer.Option("--industry", "-i", help="Industry, e.g. technology")],
    personality: Annotated[str, typer.Option("--personality", "-p", help="Palette personality")] = "professional",
    favorite: Annotated[
        Optional[List[str]], typer.Option("--favorite", "-f", help="Favorite color (repeatable)")
    ] = None,
    avoid: Annotated[
        Optional[List[str]], typer.Option("--avoid", "-a", help="Color to avoid (repeatable)")
    ] = None,
):
    """
    Generate three ranked color schemes.

    Examples:\n

        $ manage_themes.py colors --industry technology

        $ manage_themes.py colors -i finance -p classic --favorite "#059669" --avoid "#0f172a"
    """
    preferences = None
    if favorite or avoid:
        preferences = ColorPreferences(favorite_colors=tuple(favorite or ()), avoid_colors=tuple(avoid or ()))

    try:
        request = ColorSchemeRequest(industry=industry, personality=personality, preferences=preferences)
        schemes = generate_color_scheme(request)
    except (ValueError, InvalidColorFormatError) as e:
        _fail(str(e), code=2)

    for rank, scheme in enumerate(schemes, 1):
        typer.secho(f"\n{rank}. {scheme.name} (confidence {scheme.confidence:.2f})", fg=typer.colors.BLUE, bold=True)
        typer.echo(f"   {scheme.description}")
        palette = scheme.palette
        typer.echo(f"   primary {palette.primary}  secondary {palette.secondary}  accent {palette.accent}")
        typer.echo(f"   text {palette.text.primary} on {palette.background}")
        typer.echo(f"   contrast {scheme.accessibility.ratio:.2f} ({scheme.accessibility.level})")


@app.command("create-template")
def create_template_command(
    template_id: Annotated[str, typer.Argument(help="Template id, see 'list'")],
    primary: Annotated[Optional[str], typer.Option("--primary", help="Override primary color")] = None,
    heading_font: Annotated[Optional[str], typer.Option("--heading-font", help="Override heading family")] = None,
    body_font: Annotated[Optional[str], typer.Option("--body-font", help="Override body family")] = None,
    output_dir: Annotated[Path, typer.Option("--output", "-o", help="Output directory", file_okay=False)] = OUTPUT_PATH,
):
    """
    Create a theme from a predefined template.

    Examples:\n

        $ manage_themes.py create-template modern-professional

        $ manage_themes.py create-template classic-executive --primary "#7c3aed" --heading-font Lora
    """
    _start_session("create", output_dir)

    customizations = {}
    if primary:
        customizations["colors"] = {"primary": primary}
    fonts = {}
    if heading_font:
        fonts["heading"] = {"family": heading_font}
    if body_font:
        fonts["body"] = {"family": body_font}
    if fonts:
        customizations["fonts"] = fonts

    try:
        theme = create_from_template(template_id, customizations or None)
    except TemplateNotFoundError as e:
        _fail(str(e))
    except (InvalidColorFormatError, InvalidThemeStructureError) as e:
        _fail(str(e), code=2)

    _save(theme, output_dir)


@app.command("create-custom")
def create_custom_command(
    industry: Annotated[str, typer.Option("--industry", "-i", help="Industry, e.g. technology")],
    personality: Annotated[str, typer.Option("--personality", "-p", help="Palette personality")] = "professional",
    font_pairing: Annotated[Optional[str], typer.Option("--font-pairing", help="Font pairing name")] = None,
    output_dir: Annotated[Path, typer.Option("--output", "-o", help="Output directory", file_okay=False)] = OUTPUT_PATH,
):
    """
    Create a theme from an industry/personality request.

    Examples:\n

        $ manage_themes.py create-custom --industry healthcare --personality modern

        $ manage_themes.py create-custom -i legal -p classic --font-pairing "Corporate Executive"
    """
    _start_session("create", output_dir)

    try:
        request = ColorSchemeRequest(industry=industry, personality=personality)
    except ValueError as e:
        _fail(str(e), code=2)

    _save(create_custom_theme(request, font_pairing), output_dir)


@app.command("create-brand")
def create_brand_command(
    primary: Annotated[Optional[str], typer.Option("--primary", help="Brand primary color")] = None,
    secondary: Annotated[Optional[str], typer.Option("--secondary", help="Brand secondary color")] = None,
    accent: Annotated[Optional[str], typer.Option("--accent", help="Brand accent color")] = None,
    company: Annotated[Optional[str], typer.Option("--company", help="Company name for known brand colors")] = None,
    font: Annotated[Optional[str], typer.Option("--font", help="Brand font family")] = None,
    logo_url: Annotated[Optional[str], typer.Option("--logo-url", help="Logo image URL")] = None,
    personality: Annotated[
        str, typer.Option("--personality", "-p", help=f"One of: {', '.join(BRAND_PERSONALITIES)}")
    ] = "professional",
    output_dir: Annotated[Path, typer.Option("--output", "-o", help="Output directory", file_okay=False)] = OUTPUT_PATH,
):
    """
    Create a theme from brand colors.

    Colors come from --primary/--secondary/--accent, then --company, then the
    personality's seed colors.

    Examples:\n

        $ manage_themes.py create-brand --primary "#ff5a5f"

        $ manage_themes.py create-brand --company spotify --personality energetic
    """
    _start_session("create", output_dir)

    if personality not in BRAND_PERSONALITIES:
        _fail(f"Unknown brand personality '{personality}'. Expected one of {list(BRAND_PERSONALITIES)}", code=2)

    custom_colors = BrandColors(primary=primary, secondary=secondary, accent=accent) if primary else None
    if company:
        brand_kit = create_brand_kit(company, custom_colors)
    else:
        brand_kit = BrandKit(colors=custom_colors or get_personality_colors(personality))

    if font:
        brand_kit = BrandKit(colors=brand_kit.colors, logo=brand_kit.logo, fonts=BrandFonts(primary=font))
    if logo_url:
        brand_kit = BrandKit(colors=brand_kit.colors, logo=BrandLogo(url=logo_url), fonts=brand_kit.fonts)

    validation = validate_brand_kit(brand_kit)
    for issue in validation.issues:
        typer.secho(f"  ⚠ {issue}", fg=typer.colors.YELLOW)
    if any(issue.startswith("Invalid color format") for issue in validation.issues):
        _fail("Brand kit has invalid colors", code=2)

    theme = create_from_brand_kit(brand_kit, personality)
    _save(theme, output_dir)

    logo_css = generate_logo_css(brand_kit.logo)
    if logo_css:
        logo_path = Path(output_dir) / f"{theme.id}-logo.css"
        logo_path.write_text(logo_css, encoding="utf-8")
        typer.echo(f"  Logo: {logo_path}")


@app.command("preview")
def preview_command(
    theme_ref: Annotated[str, typer.Argument(help="Template id or path to a theme JSON file")],
    mode: Annotated[str, typer.Option("--mode", "-m", help="light or dark")] = "light",
    sections: Annotated[
        Optional[List[str]], typer.Option("--section", "-s", help="Sample section to include (repeatable)")
    ] = None,
    content: Annotated[
        Optional[Path], typer.Option("--content", help="HTML fragment to wrap instead of the sample", dir_okay=False)
    ] = None,
    output_dir: Annotated[Path, typer.Option("--output", "-o", help="Output directory", file_okay=False)] = OUTPUT_PATH,
):
    """
    Render a themed HTML preview.

    Examples:\n

        $ manage_themes.py preview modern-professional

        $ manage_themes.py preview themes/custom-1731600000000.json --mode dark --section header
    """
    _start_session("preview", output_dir)
    theme = _resolve_theme(theme_ref)
    preview = generate_preview(theme, sections)

    unknown = [name for name in preview.sections if name not in SAMPLE_SECTIONS]
    if unknown and content is None:
        _fail(f"Unknown preview sections {unknown}. Expected any of {list(SAMPLE_SECTIONS)}", code=2)

    fragment = content.read_text(encoding="utf-8") if content else "\n".join(SAMPLE_SECTIONS[s] for s in preview.sections)

    try:
        html = render_document(fragment, theme, mode)
    except ValueError as e:
        _fail(str(e), code=2)

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / preview.output_path
    output_path.write_text(html, encoding="utf-8")
    typer.secho(f"✓ Preview written to {output_path}", fg=typer.colors.GREEN)


@app.command("validate")
def validate_command(
    theme_ref: Annotated[str, typer.Argument(help="Template id or path to a theme JSON file")],
):
    """
    Validate a theme for accessibility and completeness.

    Exits with code 1 when the theme has errors.

    Examples:\n

        $ manage_themes.py validate matrix-hacker

        $ manage_themes.py validate themes/brand-1731600000000.json
    """
    _start_session("validate", OUTPUT_PATH)
    theme = _resolve_theme(theme_ref)
    validation = validate_theme(theme)
    log_validation_result(theme.id, validation)

    if validation.is_valid:
        typer.secho(f"✓ {theme.id} is valid", fg=typer.colors.GREEN)
    else:
        typer.secho(f"✗ {theme.id} has {len(validation.errors)} error(s)", fg=typer.colors.RED)

    for error in validation.errors:
        typer.secho(f"  Error: {error}", fg=typer.colors.RED)
    for warning in validation.warnings:
        typer.secho(f"  Warning: {warning}", fg=typer.colors.YELLOW)
    for suggestion in validation.suggestions:
        typer.echo(f"  Suggestion: {suggestion}")

    if not validation.is_valid:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
