"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdblog.cli.commands import (
    archive_cmd, build_cmd, categories_cmd, feed_cmd, list_cmd,
    recent_cmd, search_cmd, show_cmd, tags_cmd, theme_cmd,
)


app = typer.Typer(name="mdblog", no_args_is_help=True, help="Markdown blog content pipeline")

app.command(name="build")(build_cmd)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="search")(search_cmd)
app.command(name="tags")(tags_cmd)
app.command(name="categories")(categories_cmd)
app.command(name="archive")(archive_cmd)
app.command(name="feed")(feed_cmd)
app.command(name="recent")(recent_cmd)
app.command(name="theme")(theme_cmd)
