"""tlog CLI: scaffold, build and serve a blog content directory."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from tlog import __version__
from tlog.errors import ContentError
from tlog.repos.post_store import PostStore
from tlog.scaffold import init_files, new_post_files, today, write_if_missing
from tlog.schemas.site import SiteConfig
from tlog.services.content_loader import ContentLoader
from tlog.services.posts_service import PostsService, to_detail
from tlog.site_config import CONFIG_FILE, read_config_toml

logger = logging.getLogger(__name__)


def io_options(func):
    func = click.option(
        "--output",
        "-o",
        "output_dir",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Output directory (default: <input>/dist)",
    )(func)
    func = click.option(
        "--input",
        "-i",
        "input_dir",
        type=click.Path(file_okay=False, path_type=Path),
        default=".",
        help="Source directory (default: current dir)",
    )(func)
    return func


def resolve_dirs(input_dir: Path, output_dir: Optional[Path]) -> tuple[Path, Path]:
    input_dir = input_dir.resolve()
    output_dir = output_dir.resolve() if output_dir else input_dir / "dist"
    return input_dir, output_dir


def load_user_config(input_dir: Path) -> SiteConfig:
    config_path = input_dir / CONFIG_FILE
    if not config_path.exists():
        raise click.ClickException(
            f"{CONFIG_FILE} not found in {input_dir}\n  Run 'tlog init' first."
        )
    return read_config_toml(config_path)


@click.group()
@click.version_option(version=__version__, package_name="tlog")
def main() -> None:
    """tlog - a minimal blog generator."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@main.command()
@io_options
def init(input_dir: Path, output_dir: Optional[Path]) -> None:
    """Initialize a new blog in the input directory."""
    input_dir, _ = resolve_dirs(input_dir, output_dir)
    click.secho("\n  Initializing a new tlog...\n", fg="cyan")

    for relative, content in init_files(today()):
        if write_if_missing(input_dir, relative, content):
            click.secho(f"  create  {relative}", fg="green")
        else:
            click.echo(click.style(f"  skip  {relative}", fg="yellow") + " (already exists)")

    click.secho("\n  Blog initialized!\n", fg="green")
    click.echo("  Next steps:")
    click.echo(f"    1. Edit {CONFIG_FILE} to customize your site")
    click.echo("    2. Run 'tlog dev' to start the dev server")
    click.echo("    3. Run 'tlog new <post-name>' to create a new post\n")


@main.command()
@click.argument("name", required=False)
@io_options
def new(name: Optional[str], input_dir: Path, output_dir: Optional[Path]) -> None:
    """Create a new draft post."""
    if not name:
        click.secho("  Error: Post name is required.", fg="red", err=True)
        click.echo("  Usage: tlog new <post-name>", err=True)
        sys.exit(1)

    input_dir, _ = resolve_dirs(input_dir, output_dir)
    files = new_post_files(name, today())
    if any((input_dir / relative).exists() for relative, _ in files):
        click.secho(f'  Error: Post "{name}" already exists.', fg="red", err=True)
        sys.exit(1)

    for relative, content in files:
        write_if_missing(input_dir, relative, content)

    click.secho(f"\n  Created new post: {name}", fg="green")
    for relative, _ in files:
        click.echo(f"    {relative}")
    click.echo()


@main.command()
@io_options
def build(input_dir: Path, output_dir: Optional[Path]) -> None:
    """Load all posts and write listing data to the output directory."""
    input_dir, output_dir = resolve_dirs(input_dir, output_dir)
    config = load_user_config(input_dir)

    store = PostStore()
    loader = ContentLoader(input_dir, store, root=input_dir)
    try:
        loaded = loader.load()
    except ContentError as e:
        raise click.ClickException(str(e))

    service = PostsService(store, config)
    posts_dir = output_dir / "posts"
    posts_dir.mkdir(parents=True, exist_ok=True)

    _write_json(output_dir / "posts.json", [p.model_dump(mode="json") for p in service.list_posts()])
    _write_json(output_dir / "homepage.json", [p.model_dump(mode="json") for p in service.homepage_posts()])
    _write_json(output_dir / "search.json", [e.model_dump(mode="json") for e in service.search_index()])
    _write_json(output_dir / "tags.json", service.list_tags())
    # every post gets a page, listings decide what is published
    for record in store.values():
        _write_json(posts_dir / f"{record.id}.json", to_detail(record).model_dump(mode="json"))

    click.secho(f"\n  Built {loaded} posts into {output_dir}\n", fg="green")


@main.command()
@io_options
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=4321, show_default=True, type=int)
def dev(input_dir: Path, output_dir: Optional[Path], host: str, port: int) -> None:
    """Start the development server and reload posts on change."""
    _serve(input_dir, output_dir, host, port, watch=True)


@main.command()
@io_options
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=4321, show_default=True, type=int)
def preview(input_dir: Path, output_dir: Optional[Path], host: str, port: int) -> None:
    """Serve the blog without watching for changes."""
    _serve(input_dir, output_dir, host, port, watch=False)


def _serve(input_dir: Path, output_dir: Optional[Path], host: str, port: int, *, watch: bool) -> None:
    import uvicorn

    from tlog.main import create_app
    from tlog.settings import Settings

    input_dir, output_dir = resolve_dirs(input_dir, output_dir)
    config = load_user_config(input_dir)
    app_settings = Settings(
        ZEN_BLOG_DIR=str(input_dir),
        ZEN_BLOG_OUTPUT=str(output_dir),
        ZEN_BLOG_CONFIG=config.model_dump_json(by_alias=True),
        WATCH_CONTENT=watch,
    )
    uvicorn.run(create_app(app_settings), host=host, port=port)


def _write_json(path: Path, payload) -> None:
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.debug(f"Wrote {path}")


if __name__ == "__main__":
    main()
